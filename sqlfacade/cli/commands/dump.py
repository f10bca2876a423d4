##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
This module defines the `DumpCommand` class, which implements the `dump`
command: print every row of every table.
"""

from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from sqlfacade.cli.commands.command_entry_point import CommandEntryPoint
from sqlfacade.cli.utils import run_with_database
from sqlfacade.display import display_all_data, to_json


class DumpCommand(CommandEntryPoint):
    """
    Handles the `dump` command.

    Methods:
        add_parser: Adds the `dump` command to the CLI parser.
        process_command: Prints the contents of the whole database.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `dump` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `dump` parser will be added.
        """
        parser = subparsers.add_parser(
            "dump",
            help="Print every row of every table.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        parser.set_defaults(func=self.process_command)
        parser.add_argument("--json", action="store_true", help="Print the data as JSON.")

    def process_command(self, args: Namespace):
        """
        Print the contents of the whole database.

        Args:
            args: An argparse Namespace containing user arguments.
        """
        all_data = run_with_database(args, lambda database: database.get_all_data())
        if args.json:
            print(to_json(all_data))
        else:
            display_all_data(all_data)
