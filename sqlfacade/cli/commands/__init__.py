##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
sqlfacade CLI Commands Package.

Each module encapsulates the logic and argument parsing for a distinct command,
following a consistent structure built around the `CommandEntryPoint` interface.

Modules:
    command_entry_point: Defines the abstract base class `CommandEntryPoint` for all CLI commands.
    columns: Implements the `columns` command for listing a table's columns.
    config: Implements the `config` command for printing the resolved configuration.
    drop: Implements the `drop` command for dropping tables.
    dump: Implements the `dump` command for printing every table's rows.
    select_rows: Implements the `select` command for printing a table's rows.
    tables: Implements the `tables` command for listing tables and their columns.
"""

from sqlfacade.cli.commands.columns import ColumnsCommand
from sqlfacade.cli.commands.config import ConfigCommand
from sqlfacade.cli.commands.drop import DropCommand
from sqlfacade.cli.commands.dump import DumpCommand
from sqlfacade.cli.commands.select_rows import SelectCommand
from sqlfacade.cli.commands.tables import TablesCommand


# Keep these in alphabetical order
ALL_COMMANDS = [
    ColumnsCommand(),
    ConfigCommand(),
    DropCommand(),
    DumpCommand(),
    SelectCommand(),
    TablesCommand(),
]
