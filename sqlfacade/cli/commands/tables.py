##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
This module defines the `TablesCommand` class, which implements the `tables`
command: list every table in the database along with its columns.
"""

from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from sqlfacade.cli.commands.command_entry_point import CommandEntryPoint
from sqlfacade.cli.utils import run_with_database
from sqlfacade.display import display_tables, to_json


class TablesCommand(CommandEntryPoint):
    """
    Handles the `tables` command.

    Methods:
        add_parser: Adds the `tables` command to the CLI parser.
        process_command: Prints the tables and their columns.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `tables` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `tables` parser will be added.
        """
        parser = subparsers.add_parser(
            "tables",
            help="List every table in the database along with its columns.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        parser.set_defaults(func=self.process_command)
        parser.add_argument("--json", action="store_true", help="Print the tables as JSON.")

    def process_command(self, args: Namespace):
        """
        Print every table and its columns.

        Args:
            args: An argparse Namespace containing user arguments.
        """
        tables = run_with_database(args, lambda database: database.get_all_tables())
        if args.json:
            print(to_json([table.to_dict() for table in tables]))
        else:
            display_tables(tables)
