"""Unit tests for digamma and trigamma."""
import math

import numpy
import pytest
from numpy.testing import assert_allclose
from scipy import special

from gammafn.core import log_gamma
from gammafn.exceptions import DomainError, PoleError
from gammafn.polygamma import digamma, psi, trigamma


EULER = 0.57721566490153286061


@pytest.mark.parametrize("n", range(1, 11))
def test_digamma_integers(n):
    """psi(n) is the (n-1)th harmonic number less Euler's constant"""
    expect = sum(1 / i for i in range(1, n)) - EULER
    assert_allclose(digamma(n), expect, rtol=1e-14, atol=1e-15)


def test_digamma_one():
    assert digamma(1) == -EULER


@pytest.mark.parametrize(
    "x",
    [1e-6, 0.1, 0.5, 1.5, 2.25, 9.99, 10.0, 10.5, 11.0, 37.2, 1e5, 1e18,
     -0.5, -0.25, -0.75, -2.3, -7.9, -20.6],
)
def test_digamma_vs_scipy(x):
    """matches scipy on both sides of the shift and for reflected arguments"""
    assert_allclose(digamma(x), special.psi(x), rtol=1e-12, atol=1e-13)


@pytest.mark.parametrize("x", numpy.linspace(1.0, 50.0, 50))
def test_digamma_is_derivative_of_log_gamma(x):
    """central difference of log_gamma approximates digamma"""
    h = 1e-5
    approx = (log_gamma(x + h) - log_gamma(x - h)) / (2 * h)
    assert_allclose(approx, digamma(x), atol=1e-5)


def test_digamma_reflection():
    """psi(1 - x) - psi(x) == pi * cot(pi * x)"""
    for x in (-3.3, -1.2, -0.7, 0.2, 0.45):
        got = digamma(1 - x) - digamma(x)
        assert_allclose(got, math.pi / math.tan(math.pi * x), rtol=1e-10)


@pytest.mark.parametrize("x", [0, 0.0, -1, -2.0, -10, -100])
def test_digamma_poles(x):
    """non-positive integers are poles"""
    with pytest.raises(PoleError):
        digamma(x)


def test_psi_alias():
    assert psi is digamma


def test_trigamma_one():
    """trigamma(1) is pi**2 / 6"""
    assert_allclose(trigamma(1.0), math.pi**2 / 6, atol=1e-6)


@pytest.mark.parametrize("x", [1e-3, 0.1, 0.5, 1.0, 2.5, 4.99, 5.0, 7.5, 30.0, 1e4])
def test_trigamma_vs_scipy(x):
    """matches scipy above the small argument cut off"""
    assert_allclose(trigamma(x), special.polygamma(1, x), rtol=1e-7)


@pytest.mark.parametrize("x", [1e-8, 1e-6, 1e-4])
def test_trigamma_small(x):
    """tiny arguments use 1/x**2"""
    assert trigamma(x) == 1.0 / x / x
    assert_allclose(trigamma(x), special.polygamma(1, x), rtol=1e-7)


def test_trigamma_recurrence():
    """trigamma(x) - trigamma(x + 1) == 1 / x**2"""
    for x in (0.3, 1.7, 4.5, 12.0):
        assert_allclose(trigamma(x) - trigamma(x + 1), 1 / x**2, rtol=1e-8)


@pytest.mark.parametrize("x", [0, 0.0, -1, -0.5, -100.0])
def test_trigamma_invalid(x):
    """x must be positive"""
    with pytest.raises(DomainError):
        trigamma(x)


def test_domain_error_distinct_from_pole():
    """invalid arguments are not reported as poles"""
    assert not issubclass(DomainError, ArithmeticError)
    assert issubclass(DomainError, ValueError)
    try:
        trigamma(0)
    except PoleError:
        pytest.fail("trigamma(0) raised PoleError")
    except DomainError:
        pass
