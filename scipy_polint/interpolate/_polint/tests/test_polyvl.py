from itertools import product
import numpy as np
from numpy.testing import assert_, assert_allclose, assert_equal
import pytest
from scipy_polint.interpolate import (polint, polyvl, EmptyPolynomialError,
                                      POLYVL_MESSAGES)
from .test_polint import random_points


def test_empty():
    with pytest.raises(EmptyPolynomialError) as excinfo:
        polyvl(1.0, [], [])
    assert_equal(excinfo.value.status, -1)
    assert_equal(excinfo.value.message, POLYVL_MESSAGES[-1])


@pytest.mark.parametrize("xx", [-10.0, 0.0, 2.0, 1e6])
def test_constant(xx):
    assert_equal(polyvl(xx, [2.0], [5.0]), 5.0)


def test_linear():
    x = [0.0, 1.0]
    c = polint(x, [0.0, 1.0])
    assert_allclose(polyvl(0.5, x, c), 0.5)
    # extrapolation
    assert_allclose(polyvl(2.0, x, c), 2.0)
    assert_allclose(polyvl(-3.0, x, c), -3.0)


def test_newton_form():
    # p(xx) = 1 + 2 (xx - 1) + 3 (xx - 1) (xx - 2)
    x = [1.0, 2.0, 4.0]
    c = [1.0, 2.0, 3.0]
    for xx in [-1.0, 0.0, 1.5, 3.0, 10.0]:
        expected = 1 + 2 * (xx - 1) + 3 * (xx - 1) * (xx - 2)
        assert_allclose(polyvl(xx, x, c), expected)


def test_shape():
    x, y = random_points(4, 0)
    c = polint(x, y)

    yy = polyvl(0.5, x, c)
    assert_(np.isscalar(yy))
    assert_equal(yy.dtype, np.float64)

    xx = np.linspace(-1, 4, num=12)
    yy = polyvl(xx, x, c)
    assert_equal(yy.shape, (12,))
    assert_allclose(yy, [polyvl(xi, x, c) for xi in xx], rtol=1e-14)

    yy = polyvl(xx.reshape(3, 4), x, c)
    assert_equal(yy.shape, (3, 4))

    yy = polyvl(xx, [1.0], [3.0])
    assert_equal(yy, np.full(12, 3.0))


def test_dtype():
    x = np.array([0, 1, 2], dtype=np.float32)
    c = polint(x, np.array([1, 2, 5], dtype=np.float32))
    assert_equal(polyvl(0.5, x, c).dtype, np.float32)
    assert_equal(polyvl(np.linspace(0, 1), x, c).dtype, np.float32)
    assert_equal(polyvl(0.5, x, c, dtype=np.float64).dtype, np.float64)


@pytest.mark.parametrize("n, seed", list(product([2, 3, 6], [0, 1, 2])))
def test_order_invariance(n, seed):
    x, y = random_points(n, seed)
    c = polint(x, y)

    rng = np.random.default_rng(seed)
    perm = rng.permutation(n)
    c_perm = polint(x[perm], y[perm])

    xx = np.linspace(x.min() - 0.5, x.max() + 0.5, num=25)
    assert_allclose(polyvl(xx, x[perm], c_perm), polyvl(xx, x, c),
                    rtol=1e-9, atol=1e-9)


@pytest.mark.parametrize("n, seed", list(product([1, 2, 4, 6], [0, 1])))
def test_degree_bound(n, seed):
    x, y = random_points(n, seed)
    c = polint(x, y)

    # the n-th finite difference of a polynomial of degree n - 1 vanishes
    xx = np.linspace(-1, n, num=n + 1)
    yy = polyvl(xx, x, c)
    scale = np.max(np.abs(yy))
    assert_(np.abs(np.diff(yy, n)[0]) <= 1e-8 * scale)

    # but the (n - 1)-th is constant
    if n > 1:
        d = np.diff(yy, n - 1)
        assert_allclose(d, d[0], rtol=1e-8, atol=1e-6 * scale)


def test_coincident_abscissae_not_checked():
    # coefficients from coincident abscissae by other means
    x = [1.0, 1.0]
    c = [1.0, np.inf]
    with np.errstate(invalid="ignore"):
        yy = polyvl(1.0, x, c)
    assert_(not np.isfinite(yy))
