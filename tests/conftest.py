##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
This module contains pytest fixtures to be used throughout the entire test suite.
"""
import os
from glob import glob

import pytest

from tests.fixture_types import FixtureModification


# pylint: disable=redefined-outer-name


#######################################
# Loading in Module Specific Fixtures #
#######################################

fixture_glob = os.path.join("tests", "fixtures", "**", "*.py")
pytest_plugins = [
    fixture_file.replace(os.sep, ".").replace(".py", "")
    for fixture_file in glob(fixture_glob, recursive=True)
    if not fixture_file.endswith("__init__.py")
]


#######################################
######### Fixture Definitions #########
#######################################


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> FixtureModification:
    """
    Keep every test away from the user's real configuration. The sqlfacade home
    directory is pointed at an empty temporary directory and the environment
    overrides are cleared.

    Args:
        monkeypatch: PyTest monkeypatch fixture.
        tmp_path_factory: A built in factory with pytest to help create temp paths for testing.
    """
    fake_home = tmp_path_factory.mktemp("sqlfacade_home")
    monkeypatch.setattr("sqlfacade.config.configfile.SQLFACADE_HOME", str(fake_home))
    for env_var in ("SQLFACADE_DB", "SQLFACADE_STRICT_FK", "SQLFACADE_DEBUG"):
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.setattr("sqlfacade.config.configfile.CONFIG", None)
