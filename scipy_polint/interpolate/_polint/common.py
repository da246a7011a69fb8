import numpy as np


POLINT_MESSAGES = {0: "The polynomial coefficients were successfully generated.",
                   -1: "At least one point is required to generate a polynomial.",
                   -2: "The abscissae are not distinct."}


POLYVL_MESSAGES = {0: "The polynomial was successfully evaluated.",
                   -1: "At least one coefficient is required to evaluate a polynomial."}


class PolintError(ValueError):
    """Base class for failures of the coefficient generator and evaluator.

    Attributes
    ----------
    status : int
        Negative status code of the failure, see `POLINT_MESSAGES` and
        `POLYVL_MESSAGES`.
    message : string
        Human-readable description of the failure.
    """
    status = -1
    messages = POLINT_MESSAGES

    def __init__(self, message=None):
        if message is None:
            message = self.messages[self.status]
        self.message = message
        super().__init__(message)


class EmptyInputError(PolintError):
    """No points were supplied to the coefficient generator."""
    status = -1


class CoincidentAbscissaeError(PolintError):
    """Two abscissae compared exactly equal during coefficient generation.

    Attributes
    ----------
    i, k : int
        Indices of the coincident abscissae, ``i < k``.
    """
    status = -2

    def __init__(self, i, k):
        self.i = i
        self.k = k
        super().__init__(f"{POLINT_MESSAGES[self.status]} "
                         f"`x[{i}]` and `x[{k}]` are equal.")


class EmptyPolynomialError(PolintError):
    """No coefficients were supplied to the evaluator."""
    status = -1
    messages = POLYVL_MESSAGES


class StaleCoefficientsWarning(RuntimeWarning):
    """Points were inserted since the coefficients were last generated."""
    pass


def validate_dtype(dtype, *arrays):
    """Determine the floating point type used throughout one call.

    If `dtype` is None it is inferred from `arrays`, where integer input
    promotes to double precision.
    """
    if any(np.iscomplexobj(a) for a in arrays):
        raise ValueError("Complex input is not supported, pass real "
                         "and imaginary parts separately.")

    if dtype is None:
        dtype = np.result_type(*arrays) if arrays else np.dtype(float)
        if not np.issubdtype(dtype, np.floating):
            dtype = np.dtype(float)
    else:
        dtype = np.dtype(dtype)
        if not np.issubdtype(dtype, np.floating):
            raise ValueError("`dtype` must be a real floating point type, "
                             "but is {}.".format(dtype))
    return dtype


def check_arguments(x, y, xname="x", yname="y", dtype=None):
    """Helper function for checking arguments common to `polint` and `polyvl`."""
    x = np.asarray(x)
    y = np.asarray(y)
    dtype = validate_dtype(dtype, x, y)
    x = x.astype(dtype, copy=False)
    y = y.astype(dtype, copy=False)

    if x.ndim != 1:
        raise ValueError(f"`{xname}` must be 1-dimensional.")
    if y.ndim != 1:
        raise ValueError(f"`{yname}` must be 1-dimensional.")

    if x.shape != y.shape:
        raise ValueError(f"`{xname}` and `{yname}` must be of same shape.")

    return x, y, dtype
