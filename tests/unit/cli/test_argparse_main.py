##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
Tests for the `argparse_main.py` file.
"""

import pytest
from _pytest.capture import CaptureFixture
from pytest_mock import MockerFixture

from sqlfacade import VERSION
from sqlfacade.cli.argparse_main import HelpParser, build_main_parser


def test_help_parser_error(mocker: MockerFixture, capsys: CaptureFixture):
    """
    Test that HelpParser.error prints help and exits with code 2.

    Args:
        mocker: PyTest mocker fixture.
        capsys: PyTest capsys fixture.
    """
    mock_exit = mocker.patch("sys.exit", side_effect=SystemExit(2))

    parser = HelpParser(prog="test")
    with pytest.raises(SystemExit) as e:
        parser.error("test error")

    assert e.value.code == 2
    mock_exit.assert_called_once_with(2)
    captured = capsys.readouterr()
    assert "error: test error" in captured.err
    assert "usage: test" in captured.out


def test_build_main_parser_registers_commands():
    """
    Test that every command is reachable from the main parser.
    """
    parser = build_main_parser()

    for argv in (["tables"], ["columns", "t"], ["select", "t"], ["dump"], ["drop", "t"], ["config"]):
        args = parser.parse_args(argv)
        assert callable(args.func)


def test_build_main_parser_global_options():
    """
    Test the global options and their defaults.
    """
    parser = build_main_parser()

    defaults = parser.parse_args(["tables"])
    assert defaults.level is None
    assert defaults.db is None

    args = parser.parse_args(["-lvl", "DEBUG", "--db", ":memory:", "tables"])
    assert args.level == "DEBUG"
    assert args.db == ":memory:"


def test_build_main_parser_version(capsys: CaptureFixture):
    """
    Test that `--version` prints the package version.

    Args:
        capsys: PyTest capsys fixture.
    """
    parser = build_main_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["--version"])
    assert VERSION in capsys.readouterr().out
