"""Polynomial evaluation, from the Cephes Math Library by Stephen L. Moshier"""

__author__ = "The gammafn Project"
__copyright__ = "Copyright 2024-date, The gammafn Project"
__credits__ = ["The gammafn Project"]
__license__ = "BSD-3"
__version__ = "2024.10.1"
__status__ = "Production"


def polevl(x, coef):
    """evaluates a polynomial y = C_0 + C_1x + C_2x^2 + ... + C_Nx^N

    Coefficients are stored in reverse order, i.e. coef[0] = C_N
    """
    result = 0
    for c in coef:
        result = result * x + c
    return result


def p1evl(x, coef):
    """evaluates a polynomial with an implied leading coefficient of 1

    As polevl, with coef[0] = C_(N-1) and C_N = 1, so the degree is
    len(coef).
    """
    result = x + coef[0]
    for c in coef[1:]:
        result = result * x + c
    return result
