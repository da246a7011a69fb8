from ._polint import (polint, polyvl, PolynomialInterpolator,
                      PolintError, EmptyInputError, CoincidentAbscissaeError,
                      EmptyPolynomialError, StaleCoefficientsWarning,
                      POLINT_MESSAGES, POLYVL_MESSAGES)
