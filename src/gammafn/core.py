"""The gamma function and its logarithm.

Translations of functions from Release 2.8 of the Cephes Math Library,
(c) Stephen L. Moshier 1984, 1987, 1988, 2000.
"""

from numpy import exp, floor, isinf, log, sin

from gammafn.constants import (
    EULER,
    LOGPI,
    LS2PI,
    MAXGAM,
    MAXLGM,
    MAXSTIR,
    PI,
    SQTPI,
)
from gammafn.exceptions import PoleError
from gammafn.polynomial import p1evl, polevl


__author__ = "The gammafn Project"
__copyright__ = "Copyright 2024-date, The gammafn Project"
__credits__ = ["The gammafn Project"]
__license__ = "BSD-3"
__version__ = "2024.10.1"
__status__ = "Production"


# gamma(x + 2) = P(x) / Q(x) for 0 <= x < 1
GP = (
    1.60119522476751861407e-4,
    1.19135147006586384913e-3,
    1.04213797561761569935e-2,
    4.76367800457137231464e-2,
    2.07448227648435975150e-1,
    4.94214826801497100753e-1,
    9.99999999999999996796e-1,
)

GQ = (
    -2.31581873324120129819e-5,
    5.39605580493303397842e-4,
    -4.45641913851797240494e-3,
    1.18139785222060435552e-2,
    3.58236398605498653373e-2,
    -2.34591795718243348568e-1,
    7.14304917030273074085e-2,
    1.00000000000000000320e0,
)

# Stirling's formula correction, 1/x expansion
STIR = (
    7.87311395793093628397e-4,
    -2.29549961613378126380e-4,
    -2.68132617805781232825e-3,
    3.47222221605458667310e-3,
    8.33333333333482257126e-2,
)

# log gamma, asymptotic correction in 1/x**2
GA = (
    8.11614167470508450300e-4,
    -5.95061904284301438324e-4,
    7.93650340457716943945e-4,
    -2.77777777730099687205e-3,
    8.33333333333331927722e-2,
)

# log gamma(x + 2) = x * B(x) / C(x) for 0 <= x < 1, C has a leading 1
GB = (
    -1.37825152569120859100e3,
    -3.88016315134637840924e4,
    -3.31612992738871184744e5,
    -1.16237097492762307383e6,
    -1.72173700820839662146e6,
    -8.53555664245765465627e5,
)

GC = (
    -3.51815701436523470549e2,
    -1.70642106651881159223e4,
    -2.20528590553854454839e5,
    -1.13933444367982507207e6,
    -2.53252307177582951285e6,
    -2.01889141433532773231e6,
)


def _as_float(x):
    if hasattr(x, "item"):
        # avoid issue of x being a limited precision numpy type
        # use item() method casts to the nearest Python type
        x = x.item()
    return float(x)


def stirling(x):
    """Stirling's approximation for the gamma function.

    Valid for 33 <= x <= MAXGAM, returns inf beyond MAXGAM. No check is
    made that x is positive.

    See Cephes docs for details.
    """
    if x > MAXGAM:
        return float("inf")
    w = 1.0 / x
    w = 1.0 + w * polevl(w, STIR)
    y = exp(x)
    if x > MAXSTIR:
        # avoid overflow in pow()
        v = pow(x, 0.5 * x - 0.25)
        y = v * (v / y)
    else:
        y = pow(x, x - 0.5) / y
    return SQTPI * y * w


def _gamma_small(x, z):
    return z / ((1.0 + EULER * x) * x)


def gamma(x):
    """Returns the gamma function, a generalization of the factorial.

    Raises PoleError at zero and the negative integers and OverflowError
    when x > MAXGAM. See Cephes docs for details.
    """
    x = _as_float(x)
    q = abs(x)
    if q > 33.0:
        if x >= 0.0:
            z = stirling(x)
            if isinf(z):
                raise OverflowError(f"gamma({x}) is too large to represent")
            return z

        p = floor(q)
        if p == q:
            raise PoleError(f"gamma({x}) is at a pole")
        sgngam = -1 if int(p) % 2 == 0 else 1
        z = q - p
        if z > 0.5:
            p += 1
            z = q - p
        z = q * sin(PI * z)
        if z == 0:
            raise PoleError(f"gamma({x}) is at a pole")
        z = abs(z)
        return sgngam * PI / (z * stirling(q))

    z = 1.0
    while x >= 3.0:
        x -= 1.0
        z *= x

    while x < 0.0:
        if x > -1.0e-9:
            return _gamma_small(x, z)
        z /= x
        x += 1.0

    while x < 2.0:
        if x == 0.0:
            raise PoleError("gamma is at a pole, argument reduced to 0")
        if x < 1.0e-9:
            return _gamma_small(x, z)
        z /= x
        x += 1.0

    if x == 2.0 or x == 3.0:
        return z

    x -= 2.0
    p = polevl(x, GP)
    q = polevl(x, GQ)
    return z * p / q


def log_gamma(x):
    """Natural log of the absolute value of the gamma function.

    Raises PoleError at zero and the negative integers and OverflowError
    when x > MAXLGM. See Cephes docs for details.
    """
    x = _as_float(x)
    if x < -34.0:
        q = -x
        w = log_gamma(q)
        p = floor(q)
        if p == q:
            raise PoleError(f"log_gamma({x}) is at a pole")
        z = q - p
        if z > 0.5:
            p += 1
            z = p - q
        z = q * sin(PI * z)
        if z == 0:
            raise PoleError(f"log_gamma({x}) is at a pole")
        return LOGPI - log(z) - w

    if x < 13.0:
        z = 1.0
        while x >= 3.0:
            x -= 1.0
            z *= x
        while x < 2.0:
            if x == 0.0:
                raise PoleError("log_gamma is at a pole, argument reduced to 0")
            z /= x
            x += 1.0
        if z < 0.0:
            z = -z
        if x == 2.0:
            return log(z)
        x -= 2.0
        p = x * polevl(x, GB) / p1evl(x, GC)
        return log(z) + p

    if x > MAXLGM:
        raise OverflowError(f"log_gamma({x}) is too large to represent")

    q = (x - 0.5) * log(x) - x + LS2PI
    if x > 1.0e8:
        return q

    p = 1.0 / (x * x)
    if x >= 1000.0:
        q += (
            (7.9365079365079365079365e-4 * p - 2.7777777777777777777778e-3) * p
            + 0.0833333333333333333333
        ) / x
    else:
        q += polevl(p, GA) / x
    return q


# Cephes names
Gamma = gamma
stirf = stirling
lgam = log_gamma
