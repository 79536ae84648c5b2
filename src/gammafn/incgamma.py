"""Incomplete gamma integrals.

The regularized pair follows Math.NET's translation of the Cephes
routines igam and igamc, the non-regularized pair drops the 1/gamma(a)
normalisation but shares the same power series and continued fraction.
"""
import logging
import warnings

from numpy import exp, isinf, log

from gammafn.constants import BIG, BIGINV, EPS, MAXLOG
from gammafn.core import _as_float, gamma, log_gamma
from gammafn.exceptions import DomainError
from gammafn.util.misc import get_max_iter


__author__ = "The gammafn Project"
__copyright__ = "Copyright 2024-date, The gammafn Project"
__credits__ = ["The gammafn Project"]
__license__ = "BSD-3"
__version__ = "2024.10.1"
__status__ = "Production"


logger = logging.getLogger(__name__)


def _not_converged(method, a, x, max_iter):
    msg = f"{method} for a={a}, x={x} did not converge in {max_iter} iterations"
    logger.warning(msg)
    warnings.warn(msg, RuntimeWarning, stacklevel=4)


def _series(a, x, max_iter):
    """power series sum_i x**i / ((a+1)...(a+i)), for x <= max(1, a)"""
    r = a
    c = 1.0
    ans = 1.0
    for _ in range(max_iter):
        r += 1.0
        c = c * x / r
        ans += c
        if c / ans <= EPS:
            return ans

    _not_converged("power series", a, x, max_iter)
    return ans


def _continued_fraction(a, x, max_iter):
    """continued fraction for the upper integral, for x > max(1, a)"""
    y = 1.0 - a
    z = x + y + 1.0
    c = 0.0
    pkm2 = 1.0
    qkm2 = x
    pkm1 = x + 1.0
    qkm1 = z * x
    ans = pkm1 / qkm1

    for _ in range(max_iter):
        c += 1.0
        y += 1.0
        z += 2.0
        yc = y * c
        pk = pkm1 * z - pkm2 * yc
        qk = qkm1 * z - qkm2 * yc
        if qk != 0:
            r = pk / qk
            t = abs((ans - r) / r)
            ans = r
        else:
            # zero denominator, take another step
            t = 1.0

        pkm2 = pkm1
        pkm1 = pk
        qkm2 = qkm1
        qkm1 = qk

        # normalize fraction when the numerator becomes large
        if abs(pk) > BIG:
            pkm2 *= BIGINV
            pkm1 *= BIGINV
            qkm2 *= BIGINV
            qkm1 *= BIGINV

        if t <= EPS:
            return ans

    _not_converged("continued fraction", a, x, max_iter)
    return ans


def _scaled(ax, ans, func, a, x):
    """returns exp(ax) * ans, raising OverflowError if out of range"""
    if ax <= MAXLOG:
        return exp(ax) * ans
    lval = ax + log(ans)
    if lval > MAXLOG:
        raise OverflowError(f"{func}({a}, {x}) is too large to represent")
    return exp(lval)


def lower_regularized(a, x, max_iter=None):
    """Returns P(a, x), the regularized lower incomplete gamma function.

    Parameters
    ----------
    a : float
        shape, must be >= 0
    x : float
        upper limit of integration, must be >= 0
    max_iter : int or None
        cap on series or continued fraction iterations

    Returns
    -------
    float in [0, 1], NaN for a == x == 0
    """
    a = _as_float(a)
    x = _as_float(x)
    if a < 0:
        raise DomainError(f"a must be >= 0, got {a}")
    if x < 0:
        raise DomainError(f"x must be >= 0, got {x}")

    if a == 0.0:
        if x == 0.0:
            return float("nan")
        return 1.0

    if x == 0.0:
        return 0.0

    if isinf(x):
        return 1.0

    max_iter = get_max_iter(max_iter)
    ax = a * log(x) - x - log_gamma(a)
    if x <= 1 or x <= a:
        if ax < -MAXLOG:
            # exp(ax) underflows, exp(ax) / a need not for tiny a
            ax -= log(a)
            if ax < -MAXLOG:
                return 0.0
            return exp(ax) * _series(a, x, max_iter)
        return exp(ax) * _series(a, x, max_iter) / a

    if ax < -MAXLOG:  # underflow, the integral is all below x
        return 1.0

    return 1.0 - exp(ax) * _continued_fraction(a, x, max_iter)


def upper_regularized(a, x, max_iter=None):
    """Returns Q(a, x) = 1 - P(a, x), the regularized upper incomplete gamma
    function. Returns 1 for x <= 0 or a <= 0, 0 for x == inf."""
    a = _as_float(a)
    x = _as_float(x)
    if x <= 0 or a <= 0:
        return 1.0

    if isinf(x):
        return 0.0

    max_iter = get_max_iter(max_iter)
    if x < 1 or x < a:
        return 1.0 - lower_regularized(a, x, max_iter=max_iter)

    ax = a * log(x) - x - log_gamma(a)
    if ax < -MAXLOG:  # underflow
        return 0.0

    return exp(ax) * _continued_fraction(a, x, max_iter)


def incomplete(a, x, max_iter=None):
    """Returns the lower incomplete gamma integral, from 0 to x of
    t**(a-1) * exp(-t).

    Equal to lower_regularized(a, x) * gamma(a). Returns 0 for x <= 0 and
    gamma(a) for x == inf. Raises DomainError for a <= 0, where the integral
    diverges, and OverflowError if the result exceeds the double range.
    """
    a = _as_float(a)
    x = _as_float(x)
    if a <= 0:
        raise DomainError(f"incomplete requires a > 0, got {a}")

    if x <= 0:
        return 0.0

    if isinf(x):
        return gamma(a)

    max_iter = get_max_iter(max_iter)
    if x > 1 and x > a:
        return gamma(a) - complemented_incomplete(a, x, max_iter=max_iter)

    # the series is divided by a
    ax = a * log(x) - x - log(a)
    if ax < -MAXLOG:  # underflow
        return 0.0

    ans = _series(a, x, max_iter)
    return _scaled(ax, ans, "incomplete", a, x)


def complemented_incomplete(a, x, max_iter=None):
    """Returns the upper incomplete gamma integral, from x to infinity of
    t**(a-1) * exp(-t).

    Equal to upper_regularized(a, x) * gamma(a), so returns gamma(a) for
    x <= 0 and 0 for x == inf. Raises DomainError for a <= 0, which the
    series and continued fraction used here do not cover.
    """
    a = _as_float(a)
    x = _as_float(x)
    if a <= 0:
        raise DomainError(f"complemented_incomplete requires a > 0, got {a}")

    if x <= 0:
        return gamma(a)

    if isinf(x):
        return 0.0

    max_iter = get_max_iter(max_iter)
    if x < 1 or x < a:
        return gamma(a) - incomplete(a, x, max_iter=max_iter)

    ax = a * log(x) - x
    if ax < -MAXLOG:  # underflow
        return 0.0

    ans = _continued_fraction(a, x, max_iter)
    return _scaled(ax, ans, "complemented_incomplete", a, x)


# Cephes names, regularized as in the reference library
igam = lower_regularized
igamc = upper_regularized
