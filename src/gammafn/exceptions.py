"""Exceptions raised by the gammafn functions."""

__author__ = "The gammafn Project"
__copyright__ = "Copyright 2024-date, The gammafn Project"
__credits__ = ["The gammafn Project"]
__license__ = "BSD-3"
__version__ = "2024.10.1"
__status__ = "Production"


class PoleError(OverflowError):
    """argument is at a singularity of the function, e.g. gamma(-2)"""

    pass


class DomainError(ValueError):
    """argument lies outside the domain on which the function is defined"""

    pass
