from warnings import warn
import numpy as np
from .common import validate_dtype, StaleCoefficientsWarning
from .polint import polint
from .polyvl import polyvl


class PolynomialInterpolator:
    """Polynomial interpolator built point by point.

    Points are kept sorted by abscissa. A point whose abscissa lies within
    `abscissa_threshold` of a stored neighbour is merged into that neighbour
    at the running arithmetic mean instead of being stored on its own, so the
    stored abscissae stay distinct.

    The coefficients are not updated on insertion. Call `interpolate` after
    the last insertion and before evaluating::

        poly = PolynomialInterpolator(abscissa_threshold=1e-3)
        poly.insert(0.0, 1.0)
        poly.insert(1.0, 3.0)
        poly.interpolate()
        poly(0.5)

    Parameters
    ----------
    abscissa_threshold : float, optional
        Minimum distance between two stored abscissae. Default is 0, i.e.,
        only exactly coincident abscissae are merged.
    dtype : data-type, optional
        Floating point type of all stored values and computations. Default
        is double precision.

    Attributes
    ----------
    dtype : numpy.dtype
        Floating point type.
    abscissa_threshold : scalar
        Current merge threshold.
    status : string
        'empty' if no points are stored, 'dirty' if points were inserted
        since the last successful call to `interpolate`, 'ready' otherwise.
    x, y, c : ndarray
        Copies of the stored abscissae, ordinates and coefficients.
    n : ndarray
        Copy of the number of points merged into each slot.

    Notes
    -----
    Evaluating after an insertion without calling `interpolate` again uses
    the stale coefficients and emits a `StaleCoefficientsWarning`. Under
    ``-W error`` (or ``warnings.simplefilter("error")``) this warning is
    raised as an exception instead.
    """
    def __init__(self, abscissa_threshold=0, dtype=float):
        self.dtype = validate_dtype(dtype)
        self._slot_dtype = np.dtype([
            ("x", self.dtype),
            ("y", self.dtype),
            ("c", self.dtype),
            ("n", np.intp),
        ])
        self._slots = np.empty(0, dtype=self._slot_dtype)
        self.abscissa_threshold = self.dtype.type(0)
        self.set_merge_threshold(abscissa_threshold)
        self.status = "empty"

    def set_merge_threshold(self, thres):
        """Set the minimum distance between two stored abscissae.

        Negative values are ignored and the threshold is left unchanged.
        """
        thres = self.dtype.type(thres)
        if 0 <= thres:
            self.abscissa_threshold = thres
        else:
            warn(f"Ignoring invalid abscissa threshold {thres}, keeping "
                 f"{self.abscissa_threshold}.", stacklevel=2)

    def insert(self, x, y):
        """Add the point (x, y).

        Parameters
        ----------
        x : float
            Abscissa.
        y : float
            Ordinate.
        """
        x = self.dtype.type(x)
        y = self.dtype.type(y)
        if not (np.isfinite(x) and np.isfinite(y)):
            raise ValueError("`x` and `y` must be finite.")

        X = self._slots["x"]
        i = int(np.searchsorted(X, x, side="left"))
        # X[:i] < x <= X[i:]
        if i > 0 and x - X[i - 1] <= self.abscissa_threshold:
            self._merge(i - 1, x, y)
        elif i < len(X) and X[i] - x <= self.abscissa_threshold:
            self._merge(i, x, y)
        else:
            n = len(self._slots)
            slots = np.empty(n + 1, dtype=self._slot_dtype)
            slots[:i] = self._slots[:i]
            slots[i] = (x, y, 0, 1)
            slots[i + 1:] = self._slots[i:]
            self._slots = slots

        self.status = "dirty"

    def _merge(self, i, x, y):
        slot = self._slots[i]
        w = self.dtype.type(slot["n"])
        # exact when x equals the stored value, stays between the two otherwise
        x_new = slot["x"] + (x - slot["x"]) / (w + 1)
        y_new = slot["y"] + (y - slot["y"]) / (w + 1)
        self._slots[i] = (x_new, y_new, slot["c"], slot["n"] + 1)

    def interpolate(self):
        """Generate the coefficients for all stored points.

        Raises
        ------
        PolintError
            Raised by `polint`. The coefficients are left partially written
            and `status` stays 'dirty' (or 'empty').
        """
        slots = self._slots
        polint(slots["x"], slots["y"], dtype=self.dtype, out=slots["c"])
        self.status = "ready"

    def evaluate(self, x):
        """Evaluate the interpolating polynomial.

        Without any stored points `x` is returned unchanged. If points were
        inserted since the last call to `interpolate`, the stale coefficients
        are used and a `StaleCoefficientsWarning` is emitted.

        Parameters
        ----------
        x : float or array_like
            Points to evaluate at.

        Returns
        -------
        y : scalar or ndarray
            Computed values.
        """
        if len(self._slots) == 0:
            return x

        if self.status != "ready":
            warn("Points were inserted since the last call to "
                 "`interpolate`, evaluating stale coefficients.",
                 StaleCoefficientsWarning, stacklevel=2)

        return polyvl(x, self._slots["x"], self._slots["c"], dtype=self.dtype)

    def __call__(self, x):
        return self.evaluate(x)

    def size(self):
        """Number of stored (merged) points."""
        return len(self._slots)

    def __len__(self):
        return len(self._slots)

    def clear(self):
        self._slots = np.empty(0, dtype=self._slot_dtype)
        self.status = "empty"

    @property
    def x(self):
        return self._slots["x"].copy()

    @property
    def y(self):
        return self._slots["y"].copy()

    @property
    def c(self):
        return self._slots["c"].copy()

    @property
    def n(self):
        return self._slots["n"].copy()

    def __repr__(self):
        return ("{}(abscissa_threshold={}, dtype={}, size={}, status='{}')"
                .format(type(self).__name__, self.abscissa_threshold,
                        self.dtype, len(self), self.status))
