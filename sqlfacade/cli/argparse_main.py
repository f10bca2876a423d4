##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
Main CLI parser setup for the sqlfacade command-line interface.

This module defines the primary argument parser for the `sqlfacade` CLI tool,
including custom error handling and integration of all available subcommands.
"""

import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

from sqlfacade import VERSION
from sqlfacade.cli.commands import ALL_COMMANDS


class HelpParser(ArgumentParser):
    """
    This class overrides the error message of the argument parser to
    print the help message when an error happens.

    Methods:
        error: Override the error message of the `ArgumentParser` class.
    """

    def error(self, message: str):
        """
        Override the error message of the `ArgumentParser` class.

        Args:
            message: The error message to log.
        """
        sys.stderr.write(f"error: {message}\n")
        self.print_help()
        sys.exit(2)


def build_main_parser() -> ArgumentParser:
    """
    Set up the command-line argument parser for the sqlfacade package.

    Returns:
        An `ArgumentParser` object with every command registered.
    """
    parser = HelpParser(
        prog="sqlfacade",
        description="Inspect and manage SQLite databases through the sqlfacade API.",
        formatter_class=RawDescriptionHelpFormatter,
        epilog="See sqlfacade <command> --help for more info",
    )
    parser.add_argument("-v", "--version", action="version", version=VERSION)
    parser.add_argument(
        "-lvl",
        "--level",
        type=str,
        default=None,
        help="Set log level: DEBUG, INFO, WARNING, ERROR [Default: logging.level from app.yaml, INFO]",
    )
    parser.add_argument(
        "-d",
        "--db",
        type=str,
        default=None,
        help="Path to the database file, or ':memory:' [Default: database.path from app.yaml]",
    )
    subparsers = parser.add_subparsers(dest="subparsers", required=True)

    for command in ALL_COMMANDS:
        command.add_parser(subparsers)

    return parser
