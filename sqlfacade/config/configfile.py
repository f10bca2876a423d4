##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
This module provides functionality for locating and loading the application
configuration file (`app.yaml`), filling in default settings and applying
environment variable overrides.

It houses the `CONFIG` object that's used by the command line interface.
"""
import logging
import os
from typing import Dict, Optional

from sqlfacade.config import Config
from sqlfacade.config.config_filepaths import APP_FILENAME, SQLFACADE_HOME
from sqlfacade.database.facade import DEFAULT_DATABASE_FILE_PATH
from sqlfacade.utils import dict_deep_update, load_yaml


LOG: logging.Logger = logging.getLogger(__name__)

CONFIG: Optional[Config] = None

DB_PATH_ENV_VAR = "SQLFACADE_DB"
STRICT_FK_ENV_VAR = "SQLFACADE_STRICT_FK"
DEBUG_ENV_VAR = "SQLFACADE_DEBUG"


def load_config(filepath: str) -> Optional[Dict]:
    """
    Reads a YAML configuration file and returns its contents as a dictionary.

    Args:
        filepath: The path to the YAML configuration file.

    Returns:
        A dictionary containing the contents of the YAML file or None if the file doesn't exist.
    """
    if not os.path.isfile(filepath):
        LOG.info(f"No app config file at {filepath}")
        return None
    LOG.info(f"Reading app config from file {filepath}")
    return load_yaml(filepath) or {}


def find_config_file(path: str = None) -> Optional[str]:
    """
    Locate the application configuration file (`app.yaml`).

    If no directory is provided, the search order is:
      1. `app.yaml` in the current working directory.
      2. `app.yaml` in the `SQLFACADE_HOME` directory.

    If a `path` is explicitly provided, only that directory is checked.

    Args:
        path: A specific directory to look for `app.yaml`.

    Returns:
        The full path to the `app.yaml` file if found, otherwise `None`.
    """
    if path is None:
        local_app = os.path.join(os.getcwd(), APP_FILENAME)
        if os.path.isfile(local_app):
            return local_app

        home_app = os.path.join(SQLFACADE_HOME, APP_FILENAME)
        if os.path.isfile(home_app):
            return home_app

        return None

    app_path = os.path.join(path, APP_FILENAME)
    if os.path.isfile(app_path):
        return app_path

    return None


def get_default_config() -> Dict:
    """
    Creates the default configuration used when no `app.yaml` exists.

    Returns:
        A configuration dictionary with every setting at its default value.
    """
    return {
        "database": {
            "path": DEFAULT_DATABASE_FILE_PATH,
            "strict_foreign_keys": False,
        },
        "logging": {
            "level": "INFO",
            "colors": True,
        },
    }


def apply_env_overrides(config: Dict):
    """
    Apply environment variable overrides to a configuration dictionary.

    `SQLFACADE_DB` replaces the database path and `SQLFACADE_STRICT_FK=1`
    turns on strict foreign key mode.

    Args:
        config: The configuration dictionary to update in place.
    """
    db_path = os.environ.get(DB_PATH_ENV_VAR)
    if db_path:
        LOG.debug(f"Using database path '{db_path}' from ${DB_PATH_ENV_VAR}.")
        config["database"]["path"] = db_path

    strict_fk = os.environ.get(STRICT_FK_ENV_VAR)
    if strict_fk is not None:
        config["database"]["strict_foreign_keys"] = strict_fk == "1"


def get_config(path: Optional[str] = None) -> Dict:
    """
    Loads the configuration and returns it as a dictionary.

    Values from `app.yaml` (if one is found) are layered over the defaults,
    then environment overrides are applied.

    Args:
        path: The directory to search for the configuration file. If `None`,
            default search paths are used.

    Returns:
        A dictionary containing all the configuration data.
    """
    config = get_default_config()

    filepath = find_config_file(path)
    if filepath is None:
        LOG.debug("No app config file found; using default configuration.")
    else:
        dict_deep_update(config, load_config(filepath))

    apply_env_overrides(config)
    return config


def initialize_config(path: Optional[str] = None) -> Config:
    """
    Load the configuration into the module-level `CONFIG` object.

    Args:
        path: The directory to search for the configuration file.

    Returns:
        The freshly loaded `Config` object.
    """
    global CONFIG  # pylint: disable=global-statement
    CONFIG = Config(get_config(path))
    return CONFIG


def is_debug() -> bool:
    """
    Determines whether the application is running in debug mode.

    Returns:
        True if `SQLFACADE_DEBUG` is set to `1` in the environment, otherwise False.
    """
    return os.environ.get(DEBUG_ENV_VAR) == "1"
