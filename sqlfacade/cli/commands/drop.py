##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
This module defines the `DropCommand` class, which implements the `drop`
command: drop one or more tables from the database.
"""

import logging
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from sqlfacade.cli.commands.command_entry_point import CommandEntryPoint
from sqlfacade.cli.utils import run_with_database
from sqlfacade.database.facade import Database


LOG = logging.getLogger("sqlfacade")


class DropCommand(CommandEntryPoint):
    """
    Handles the `drop` command.

    Methods:
        add_parser: Adds the `drop` command to the CLI parser.
        process_command: Drops the requested tables.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `drop` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `drop` parser will be added.
        """
        parser = subparsers.add_parser(
            "drop",
            help="Drop tables from the database. Tables that don't exist are ignored.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        parser.set_defaults(func=self.process_command)
        parser.add_argument("tables", type=str, nargs="+", help="The names of the tables to drop.")

    def process_command(self, args: Namespace):
        """
        Drop each table given on the command line, in order.

        Args:
            args: An argparse Namespace containing user arguments.
        """

        async def _drop_tables(database: Database):
            for table_name in args.tables:
                await database.drop_table(table_name)
                LOG.info(f"Dropped table '{table_name}'.")

        run_with_database(args, _drop_tables)
