##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
This module defines the `SelectCommand` class, which implements the `select`
command: print the rows of a table, optionally filtered by a raw condition.
"""

from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from sqlfacade.cli.commands.command_entry_point import CommandEntryPoint
from sqlfacade.cli.utils import run_with_database
from sqlfacade.display import display_rows, to_json


class SelectCommand(CommandEntryPoint):
    """
    Handles the `select` command.

    Methods:
        add_parser: Adds the `select` command to the CLI parser.
        process_command: Prints the selected rows.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `select` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `select` parser will be added.
        """
        parser = subparsers.add_parser(
            "select",
            help="Print the rows of a table.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        parser.set_defaults(func=self.process_command)
        parser.add_argument("table", type=str, help="The name of the table.")
        parser.add_argument(
            "-w",
            "--where",
            type=str,
            default=None,
            help="A raw condition appended to the query, e.g. \"WHERE age > 30 ORDER BY name\".",
        )
        parser.add_argument("--json", action="store_true", help="Print the rows as JSON.")

    def process_command(self, args: Namespace):
        """
        Print the rows of a table.

        Args:
            args: An argparse Namespace containing user arguments.
        """
        rows = run_with_database(args, lambda database: database.select_rows(args.table, args.where))
        if args.json:
            print(to_json(rows))
        else:
            display_rows(args.table, rows)
