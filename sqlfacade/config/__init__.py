##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
Used to store the application configuration.

Modules:
    config_filepaths.py: Constants for where configuration files live.
    configfile.py: Handles locating, loading and defaulting the `app.yaml` file
        and applying environment overrides.
"""
from copy import copy
from types import SimpleNamespace
from typing import Dict, List, Optional

from sqlfacade.utils import nested_dict_to_namespaces


class Config:  # pylint: disable=R0903
    """
    The Config class, meant to store all sqlfacade config settings in one place.

    Attributes:
        database (Optional[SimpleNamespace]): Database settings (`path`, `strict_foreign_keys`).
        logging (Optional[SimpleNamespace]): Logging settings (`level`, `colors`).

    Methods:
        load_app_into_namespaces: Converts the provided configuration dictionary into namespaces
            and assigns them to the Config instance's attributes.
    """

    FIELDS: List[str] = ["database", "logging"]

    def __init__(self, app_dict: Dict):
        """
        Initializes the Config instance with configuration data from a dictionary.

        Args:
            app_dict: A dictionary containing configuration data for the application.
        """
        self.database: Optional[SimpleNamespace] = None
        self.logging: Optional[SimpleNamespace] = None
        self.load_app_into_namespaces(app_dict)

    def __copy__(self) -> "Config":
        cls = self.__class__
        result = cls.__new__(cls)
        result.__dict__.update({field: copy(self.__dict__[field]) for field in self.FIELDS})
        return result

    def __str__(self) -> str:
        formatted_str = "config:"
        for name in self.FIELDS:
            attr = getattr(self, name)
            if attr is not None:
                joined_items = "\n".join(f"    {k}: {v!r}" for k, v in attr.__dict__.items())
                formatted_str += f"\n  {name}:\n{joined_items}"
            else:
                formatted_str += f"\n  {name}:\n    None"
        return formatted_str

    def load_app_into_namespaces(self, app_dict: Dict):
        """
        Converts the provided application dictionary into namespaces and assigns them
        to the Config instance's attributes.

        Args:
            app_dict: A dictionary containing configuration data for the application.
        """
        for field in self.FIELDS:
            try:
                setattr(self, field, nested_dict_to_namespaces(app_dict[field]))
            except KeyError:
                # The sections are optional
                pass
