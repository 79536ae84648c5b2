"""Logarithmic derivatives of the gamma function."""

from numpy import floor, log, tan

from gammafn.constants import EULER, PI
from gammafn.core import _as_float
from gammafn.exceptions import DomainError, PoleError
from gammafn.polynomial import polevl


__author__ = "The gammafn Project"
__copyright__ = "Copyright 2024-date, The gammafn Project"
__credits__ = ["The gammafn Project"]
__license__ = "BSD-3"
__version__ = "2024.10.1"
__status__ = "Production"


# asymptotic expansion of psi in 1/x**2
DIGAMMA_COEF = (
    8.33333333333333333333e-2,
    -2.10927960927960927961e-2,
    7.57575757575757575758e-3,
    -4.16666666666666666667e-3,
    3.96825396825396825397e-3,
    -8.33333333333333333333e-3,
    8.33333333333333333333e-2,
)

# Bernoulli number terms for the trigamma asymptotic expansion
B2 = 0.1666666667
B4 = -0.03333333333
B6 = 0.02380952381
B8 = -0.03333333333


def digamma(x):
    """Returns psi(x), the logarithmic derivative of the gamma function.

    Negative arguments are reflected using
    psi(1 - x) - psi(x) = pi * cot(pi * x). Raises PoleError at zero and
    the negative integers.
    """
    x = _as_float(x)
    reflected = False
    nz = 0.0
    if x <= 0.0:
        reflected = True
        q = x
        p = floor(q)
        if p == q:
            raise PoleError(f"digamma({x}) is at a pole")
        nz = q - p
        if nz != 0.5:
            if nz > 0.5:
                p += 1.0
                nz = q - p
            nz = PI / tan(PI * nz)
        else:
            nz = 0.0
        x = 1.0 - x

    if x <= 10.0 and x == floor(x):
        # psi(n) = H(n - 1) - euler
        y = 0.0
        for i in range(1, int(x)):
            y += 1.0 / i
        y -= EULER
    else:
        s = x
        w = 0.0
        while s < 10.0:
            w += 1.0 / s
            s += 1.0
        if s < 1.0e17:
            z = 1.0 / (s * s)
            y = z * polevl(z, DIGAMMA_COEF)
        else:
            y = 0.0
        y = log(s) - 0.5 / s - y - w

    if reflected:
        y -= nz
    return y


def trigamma(x):
    """Returns the trigamma function, the derivative of digamma, for x > 0.

    Adapted from algorithm AS 121 (B. E. Schneider), as reworked by
    John Burkardt.
    """
    x = _as_float(x)
    if x <= 0.0:
        raise DomainError(f"trigamma requires x > 0, got {x}")

    # small value approximation
    if x <= 1.0e-4:
        return 1.0 / x / x

    # increase argument to (x + i) >= 5
    value = 0.0
    z = x
    while z < 5.0:
        value += 1.0 / z / z
        z += 1.0

    # asymptotic formula
    y = 1.0 / z / z
    return value + 0.5 * y + (1.0 + y * (B2 + y * (B4 + y * (B6 + y * B8)))) / z


psi = digamma
