"""Polynomial interpolation by Newton divided differences."""
from .common import (PolintError, EmptyInputError, CoincidentAbscissaeError,
                     EmptyPolynomialError, StaleCoefficientsWarning,
                     POLINT_MESSAGES, POLYVL_MESSAGES)
from .polint import polint
from .polyvl import polyvl
from .interpolator import PolynomialInterpolator
