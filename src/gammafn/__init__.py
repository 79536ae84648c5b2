"""gammafn: the gamma function and its relatives, log-gamma, digamma,
trigamma and the incomplete gamma integrals, to double precision."""

import logging
import os
import typing
import warnings
from importlib import import_module

from gammafn._version import __version__

__copyright__ = "Copyright 2024-date, The gammafn Project"
__license__ = "BSD-3"


def __getattr__(name: str) -> typing.Any:  # noqa: ANN401
    if (attr := globals().get(name)) is not None:
        return attr

    if name not in _import_mapping:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name = _import_mapping[name]
    module = import_module(f".{module_name}", package=__name__)
    attr = getattr(module, name)
    globals()[name] = attr
    return attr


_import_mapping = {
    "gamma": "core",
    "stirling": "core",
    "log_gamma": "core",
    "digamma": "polygamma",
    "trigamma": "polygamma",
    "lower_regularized": "incgamma",
    "upper_regularized": "incgamma",
    "incomplete": "incgamma",
    "complemented_incomplete": "incgamma",
    "polevl": "polynomial",
    "p1evl": "polynomial",
    "PoleError": "exceptions",
    "DomainError": "exceptions",
}


def __dir__() -> list[str]:
    return list(_import_mapping.keys()) + list(globals().keys())


__all__ = list(_import_mapping.keys())

version = __version__
version_info = tuple(int(v) for v in version.split(".") if v.isdigit())


warn_env = "GAMMAFN_WARNINGS"

if warn := os.environ.get(warn_env):
    warnings.simplefilter(warn)


logging.getLogger(__name__).addHandler(logging.NullHandler())
