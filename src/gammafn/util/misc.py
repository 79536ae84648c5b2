"""Configuration helpers."""
import functools
import os
import warnings

from gammafn.constants import MAX_ITER


__author__ = "The gammafn Project"
__copyright__ = "Copyright 2024-date, The gammafn Project"
__credits__ = ["The gammafn Project"]
__license__ = "BSD-3"
__version__ = "2024.10.1"
__status__ = "Production"

SETTINGS_ENV = "GAMMAFN_SETTINGS"
_SETTINGS_TYPES = {"max_iter": int}


def parse_settings(value, params_types):
    """parses 'param_name1=param_val,param_name2=param_val2'

    Parameters
    ----------
    value : str
        comma separated name=value pairs
    params_types : dict
        {param name: type}, values will be cast to type. Names not
        present are ignored.
    """
    result = {}
    for item in value.split(","):
        item = item.split("=")
        if len(item) != 2 or item[0] not in params_types:
            continue

        name, val = item
        try:
            val = params_types[name](val)
            result[name] = val
        except ValueError:
            warnings.warn(
                f"could not cast {name}={val} to type {params_types[name]}, skipping"
            )

    return result


def get_setting_from_environ(environ_var, params_types):
    """extract settings from environment variable

    Parameters
    ----------
    environ_var : str
        name of an environment variable
    params_types : dict
        {param name: type}, values will be cast to type

    Returns
    -------
    dict

    Notes
    -----
    settings must of form 'param_name1=param_val,param_name2=param_val2'
    """
    var = os.environ.get(environ_var, None)
    if var is None:
        return {}

    return parse_settings(var, params_types)


@functools.cache
def _max_iter_from_setting(setting):
    """max_iter from a GAMMAFN_SETTINGS value, parsed once per distinct value"""
    if setting is None:
        return MAX_ITER
    return parse_settings(setting, _SETTINGS_TYPES).get("max_iter", MAX_ITER)


def get_max_iter(max_iter=None):
    """returns the iteration cap for series and continued fractions

    Parameters
    ----------
    max_iter : int or None
        an explicit value wins. Otherwise the max_iter entry of the
        GAMMAFN_SETTINGS environment variable is used, falling back to
        constants.MAX_ITER.
    """
    if max_iter is None:
        max_iter = _max_iter_from_setting(os.environ.get(SETTINGS_ENV))

    if max_iter < 1:
        raise ValueError(f"max_iter must be >= 1, got {max_iter}")
    return max_iter
