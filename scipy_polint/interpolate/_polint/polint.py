import numpy as np
from .common import (check_arguments, EmptyInputError,
                     CoincidentAbscissaeError)


def polint(x, y, dtype=None, out=None):
    """Generate the Newton divided difference coefficients of the
    polynomial interpolating ``y[i]`` at ``x[i]``.

    The coefficients are prepared for `polyvl`, which evaluates the
    interpolating polynomial of degree ``n - 1``::

        p(xx) = c[0] + c[1] (xx - x[0]) + ...
                + c[n-1] (xx - x[0]) ... (xx - x[n-2])

    The pair ``(x, c)`` must not be altered between the call to `polint`
    and the calls to `polyvl`; in particular ``c`` is meaningless with a
    permuted or extended abscissa sequence.

    Parameters
    ----------
    x : array_like, shape (n,)
        Abscissae of the points. They must be pairwise distinct but need not
        be sorted.
    y : array_like, shape (n,)
        Ordinates of the points.
    dtype : data-type, optional
        Floating point type used for the whole computation. If None
        (default), it is inferred from `x` and `y`, integer input is
        promoted to double precision.
    out : ndarray, shape (n,), optional
        Array in which to place the coefficients. Its dtype must match the
        floating point type of the computation exactly. It may be `y` itself,
        since ``y[k]`` is read before ``c[k]`` is written. When an exception
        is raised, `out` is left partially written.

    Returns
    -------
    c : ndarray, shape (n,)
        Divided differences ``c[k] = f[x[0], ..., x[k]]``.

    Raises
    ------
    EmptyInputError
        If no points are given.
    CoincidentAbscissaeError
        If two abscissae compare exactly equal. Abscissae that differ by
        any nonzero amount are accepted.

    References
    ----------
    .. [1] POLINT, SLATEC Common Mathematical Library,
           https://netlib.org/slatec/src/polint.f
    """
    x, y, dtype = check_arguments(x, y, dtype=dtype)
    n = len(x)

    if out is None:
        c = np.empty(n, dtype=dtype)
    else:
        c = out
        if not isinstance(c, np.ndarray):
            raise ValueError("`out` must be an ndarray.")
        if c.shape != (n,):
            raise ValueError("`out` is expected to have shape {}, but "
                             "actually has {}.".format((n,), c.shape))
        if c.dtype != dtype:
            raise ValueError("`out` is expected to have dtype {}, but "
                             "actually has {}.".format(dtype, c.dtype))

    if n == 0:
        raise EmptyInputError()

    c[0] = y[0]
    for k in range(1, n):
        c[k] = y[k]
        for i in range(k):
            dif = x[i] - x[k]
            if dif == 0:
                raise CoincidentAbscissaeError(i, k)
            c[k] = (c[i] - c[k]) / dif

    return c
