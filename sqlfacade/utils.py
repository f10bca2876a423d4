##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
Module for project-wide utility functions.
"""
import logging
from copy import deepcopy
from types import SimpleNamespace
from typing import Dict

import yaml


LOG = logging.getLogger(__name__)


def load_yaml(filepath: str) -> Dict:
    """
    Safely read a YAML file and return its contents.

    Args:
        filepath: The file path to the YAML file to be read.

    Returns:
        A dict representing the contents of the YAML file.
    """
    with open(filepath, "r") as _file:
        return yaml.safe_load(_file)


def nested_dict_to_namespaces(dic: Dict) -> SimpleNamespace:
    """
    Convert a nested dictionary into a nested SimpleNamespace structure.

    Args:
        dic: The nested dictionary to be converted.

    Returns:
        A SimpleNamespace object representing the nested structure of the input dictionary.

    Raises:
        TypeError: If the input is not a dictionary.
    """

    def recurse(dic):
        if not isinstance(dic, dict):
            return dic
        for key, val in list(dic.items()):
            dic[key] = recurse(val)
        return SimpleNamespace(**dic)

    if not isinstance(dic, dict):
        raise TypeError(f"{dic} is not a dict")

    return recurse(deepcopy(dic))


def dict_deep_update(base: Dict, overrides: Dict) -> Dict:
    """
    Recursively copy the values of `overrides` onto `base`.

    Nested dictionaries are merged key by key; any other value in `overrides`
    replaces the one in `base`. Keys that `overrides` doesn't mention are
    left alone. A key that holds a dictionary in `base` stays a dictionary:
    an empty (`None`) override keeps its current values and any other
    non-dictionary override is ignored with a warning.

    Args:
        base: The dictionary that will be updated in place.
        overrides: The dictionary whose values take precedence.

    Returns:
        `base`, for convenience.
    """
    if not isinstance(overrides, dict):
        LOG.warning(f"Ignoring configuration overrides '{overrides}' since they are not a dict.")
        return base

    for key, val in overrides.items():
        if not isinstance(base.get(key), dict):
            base[key] = val
        elif isinstance(val, dict):
            dict_deep_update(base[key], val)
        elif val is None:
            LOG.debug(f"Section '{key}' is empty; keeping its current values.")
        else:
            LOG.warning(f"Ignoring override '{key}: {val}' since '{key}' must be a mapping.")
    return base
