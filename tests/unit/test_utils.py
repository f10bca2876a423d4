##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
Tests for the `utils.py` module.
"""

from types import SimpleNamespace

import pytest
import yaml

from sqlfacade.utils import dict_deep_update, load_yaml, nested_dict_to_namespaces


def test_load_yaml(tmp_path):
    """
    Test that a YAML file is read into a dictionary.

    Args:
        tmp_path: PyTest tmp_path fixture.
    """
    yaml_file = tmp_path / "app.yaml"
    yaml_file.write_text(yaml.dump({"database": {"path": "x.db"}}))

    assert load_yaml(str(yaml_file)) == {"database": {"path": "x.db"}}


def test_nested_dict_to_namespaces():
    """
    Test that nested dictionaries become nested namespaces without modifying the input.
    """
    original = {"database": {"path": "x.db", "strict_foreign_keys": True}, "top": 1}
    result = nested_dict_to_namespaces(original)

    assert isinstance(result.database, SimpleNamespace)
    assert result.database.path == "x.db"
    assert result.database.strict_foreign_keys is True
    assert result.top == 1
    assert isinstance(original["database"], dict)


def test_nested_dict_to_namespaces_requires_dict():
    """
    Test that anything other than a dictionary is rejected.
    """
    with pytest.raises(TypeError):
        nested_dict_to_namespaces(["not", "a", "dict"])


def test_dict_deep_update_merges_nested_sections():
    """
    Test that nested sections are merged key by key and plain values replaced.
    """
    base = {"database": {"path": "a.db", "strict_foreign_keys": False}, "name": "old"}
    result = dict_deep_update(base, {"database": {"path": "b.db"}, "name": "new", "extra": 1})

    assert result is base
    assert base == {"database": {"path": "b.db", "strict_foreign_keys": False}, "name": "new", "extra": 1}


def test_dict_deep_update_keeps_sections_for_empty_overrides(caplog):
    """
    Test that an empty section keeps its current values and that a section
    overridden by a plain value is left alone with a warning.

    Args:
        caplog: A built-in fixture from the pytest library to capture logs.
    """
    base = {"database": {"path": "a.db"}, "logging": {"level": "INFO"}}
    dict_deep_update(base, {"database": None, "logging": "off"})

    assert base == {"database": {"path": "a.db"}, "logging": {"level": "INFO"}}
    assert "'logging' must be a mapping" in caplog.text


def test_dict_deep_update_ignores_non_dict_overrides(caplog):
    """
    Test that overrides which aren't a dictionary are ignored with a warning.

    Args:
        caplog: A built-in fixture from the pytest library to capture logs.
    """
    base = {"database": {"path": "a.db"}}
    assert dict_deep_update(base, ["bad"]) == {"database": {"path": "a.db"}}
    assert "not a dict" in caplog.text
