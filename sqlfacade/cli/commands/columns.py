##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
This module defines the `ColumnsCommand` class, which implements the `columns`
command: list the columns of a single table.
"""

from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from sqlfacade.cli.commands.command_entry_point import CommandEntryPoint
from sqlfacade.cli.utils import run_with_database
from sqlfacade.display import display_columns


class ColumnsCommand(CommandEntryPoint):
    """
    Handles the `columns` command.

    Methods:
        add_parser: Adds the `columns` command to the CLI parser.
        process_command: Prints the columns of the requested table.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `columns` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `columns` parser will be added.
        """
        parser = subparsers.add_parser(
            "columns",
            help="List the columns of a table.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        parser.set_defaults(func=self.process_command)
        parser.add_argument("table", type=str, help="The name of the table.")

    def process_command(self, args: Namespace):
        """
        Print the columns of a table.

        Args:
            args: An argparse Namespace containing user arguments.
        """
        columns = run_with_database(args, lambda database: database.get_table_columns(args.table))
        display_columns(args.table, columns)
