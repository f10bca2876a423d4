##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
Tests for the `configfile.py` module.
"""

import os
from pathlib import Path

import pytest
import yaml

from sqlfacade.config import Config, configfile
from sqlfacade.config.configfile import (
    apply_env_overrides,
    find_config_file,
    get_config,
    get_default_config,
    initialize_config,
    is_debug,
    load_config,
)
from sqlfacade.database.facade import DEFAULT_DATABASE_FILE_PATH


def write_app_yaml(directory: Path, contents: dict) -> str:
    """
    Write an `app.yaml` file into `directory`.

    Args:
        directory: Where to write the file.
        contents: The configuration to dump.

    Returns:
        The path to the written file.
    """
    directory.mkdir(parents=True, exist_ok=True)
    app_yaml = directory / "app.yaml"
    app_yaml.write_text(yaml.dump(contents))
    return str(app_yaml)


def test_get_default_config():
    """
    Test the built-in defaults.
    """
    assert get_default_config() == {
        "database": {"path": DEFAULT_DATABASE_FILE_PATH, "strict_foreign_keys": False},
        "logging": {"level": "INFO", "colors": True},
    }


def test_load_config_missing_file(tmp_path: Path):
    """
    Test that loading a file that doesn't exist returns None.

    Args:
        tmp_path: PyTest tmp_path fixture.
    """
    assert load_config(str(tmp_path / "nope.yaml")) is None


def test_load_config_empty_file(tmp_path: Path):
    """
    Test that an empty file loads as an empty dictionary.

    Args:
        tmp_path: PyTest tmp_path fixture.
    """
    app_yaml = tmp_path / "app.yaml"
    app_yaml.write_text("")
    assert load_config(str(app_yaml)) == {}


def test_find_config_file_explicit_dir(tmp_path: Path):
    """
    Test that an explicit directory is the only place searched.

    Args:
        tmp_path: PyTest tmp_path fixture.
    """
    assert find_config_file(str(tmp_path)) is None
    app_yaml = write_app_yaml(tmp_path, {"logging": {"level": "DEBUG"}})
    assert find_config_file(str(tmp_path)) == app_yaml


def test_find_config_file_prefers_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Test that `app.yaml` in the working directory wins over the one in the sqlfacade home.

    Args:
        tmp_path: PyTest tmp_path fixture.
        monkeypatch: PyTest monkeypatch fixture.
    """
    home_app = write_app_yaml(Path(configfile.SQLFACADE_HOME), {})
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)

    assert find_config_file() == home_app

    local_app = write_app_yaml(work_dir, {})
    assert os.path.samefile(find_config_file(), local_app)


def test_find_config_file_none_found(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Test that None is returned when there's no config file anywhere.

    Args:
        tmp_path: PyTest tmp_path fixture.
        monkeypatch: PyTest monkeypatch fixture.
    """
    monkeypatch.chdir(tmp_path)
    assert find_config_file() is None


def test_get_config_layers_file_over_defaults(tmp_path: Path):
    """
    Test that values from `app.yaml` replace only the defaults they mention.

    Args:
        tmp_path: PyTest tmp_path fixture.
    """
    write_app_yaml(tmp_path, {"database": {"path": "custom.db"}, "logging": {"colors": False}})

    config = get_config(str(tmp_path))

    assert config["database"] == {"path": "custom.db", "strict_foreign_keys": False}
    assert config["logging"] == {"level": "INFO", "colors": False}


def test_get_config_with_empty_section(tmp_path: Path):
    """
    Test that a section written without a body in `app.yaml` keeps its defaults.

    Args:
        tmp_path: PyTest tmp_path fixture.
    """
    (tmp_path / "app.yaml").write_text("database:\nlogging:\n  level: DEBUG\n")

    config = initialize_config(str(tmp_path))

    assert config.database.path == DEFAULT_DATABASE_FILE_PATH
    assert config.database.strict_foreign_keys is False
    assert config.logging.level == "DEBUG"


def test_get_config_without_file(tmp_path: Path):
    """
    Test that the defaults are used when no config file exists.

    Args:
        tmp_path: PyTest tmp_path fixture.
    """
    assert get_config(str(tmp_path)) == get_default_config()


def test_apply_env_overrides(monkeypatch: pytest.MonkeyPatch):
    """
    Test that the environment overrides the database path and strict mode.

    Args:
        monkeypatch: PyTest monkeypatch fixture.
    """
    monkeypatch.setenv("SQLFACADE_DB", "/tmp/from_env.db")
    monkeypatch.setenv("SQLFACADE_STRICT_FK", "1")
    config = get_default_config()

    apply_env_overrides(config)

    assert config["database"] == {"path": "/tmp/from_env.db", "strict_foreign_keys": True}


def test_env_overrides_beat_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """
    Test that environment overrides are applied after the config file.

    Args:
        tmp_path: PyTest tmp_path fixture.
        monkeypatch: PyTest monkeypatch fixture.
    """
    write_app_yaml(tmp_path, {"database": {"path": "file.db", "strict_foreign_keys": True}})
    monkeypatch.setenv("SQLFACADE_STRICT_FK", "0")

    config = get_config(str(tmp_path))

    assert config["database"] == {"path": "file.db", "strict_foreign_keys": False}


def test_initialize_config_sets_global(tmp_path: Path):
    """
    Test that `initialize_config` stores a `Config` object in `CONFIG`.

    Args:
        tmp_path: PyTest tmp_path fixture.
    """
    write_app_yaml(tmp_path, {"logging": {"level": "WARNING"}})

    config = initialize_config(str(tmp_path))

    assert isinstance(config, Config)
    assert configfile.CONFIG is config
    assert config.logging.level == "WARNING"
    assert config.database.path == DEFAULT_DATABASE_FILE_PATH


@pytest.mark.parametrize("value, expected", [("1", True), ("0", False), (None, False)])
def test_is_debug(monkeypatch: pytest.MonkeyPatch, value: str, expected: bool):
    """
    Test that debug mode follows `SQLFACADE_DEBUG`.

    Args:
        monkeypatch: PyTest monkeypatch fixture.
        value: The value to give the environment variable (None leaves it unset).
        expected: The expected result of `is_debug`.
    """
    if value is not None:
        monkeypatch.setenv("SQLFACADE_DEBUG", value)
    assert is_debug() is expected
