import numpy as np
from .common import check_arguments, EmptyPolynomialError


def polyvl(xx, x, c, dtype=None):
    """Evaluate a polynomial produced by a previous call to `polint`.

    Nested multiplication is applied to the Newton form, so each query costs
    O(n) operations once the O(n**2) coefficient generation has been paid.

    Parameters
    ----------
    xx : float or array_like
        Points to evaluate at. Values outside ``[min(x), max(x)]`` are
        extrapolated without any restriction.
    x : array_like, shape (n,)
        Abscissae that were passed to `polint`, in the same order.
    c : array_like, shape (n,)
        Coefficients returned by `polint`.
    dtype : data-type, optional
        Floating point type used for the whole computation. If None
        (default), it is inferred from `x` and `c`.

    Returns
    -------
    yy : scalar or ndarray
        Value of the polynomial. Shape depends on whether `xx` is a scalar or
        an array.

    Raises
    ------
    EmptyPolynomialError
        If `x` and `c` are empty.

    Notes
    -----
    Distinctness of `x` is not checked again. Coefficients generated from
    coincident abscissae by other means yield non-finite values, not an
    error.

    References
    ----------
    .. [1] POLYVL, SLATEC Common Mathematical Library,
           https://netlib.org/slatec/src/polyvl.f
    """
    x, c, dtype = check_arguments(x, c, yname="c", dtype=dtype)
    n = len(x)
    if n == 0:
        raise EmptyPolynomialError()

    xx = np.asarray(xx)
    if np.iscomplexobj(xx):
        raise ValueError("`xx` must be real.")
    xx = xx.astype(dtype, copy=False)

    pi = np.ones_like(xx)
    p = np.full_like(xx, c[0])
    for k in range(1, n):
        pi = pi * (xx - x[k - 1])
        p = p + pi * c[k]

    if np.ndim(p) == 0:
        return dtype.type(p)
    return p
