##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
Fixtures for files in this `cli/` test directory.
"""

import asyncio
from argparse import ArgumentParser

import pytest

from sqlfacade.cli.commands.command_entry_point import CommandEntryPoint
from sqlfacade.database.facade import Database
from tests.fixture_types import FixtureCallable, FixtureStr


@pytest.fixture
def create_parser() -> FixtureCallable:
    """
    A fixture to help create a parser for any command.

    Returns:
        A function that creates a parser.
    """

    def _create_parser(cmd: CommandEntryPoint) -> ArgumentParser:
        """
        Returns an `ArgumentParser` configured with the `cmd` command.

        Returns:
            Parser with the `cmd` command registered.
        """
        parser = ArgumentParser()
        subparsers = parser.add_subparsers(dest="main_command")
        cmd.add_parser(subparsers)
        return parser

    return _create_parser


@pytest.fixture
def populated_db_file(tmp_path) -> FixtureStr:
    """
    Fixture to provide the path of a database file holding a small `users` table
    and an empty `audit` table.

    Args:
        tmp_path: PyTest tmp_path fixture.

    Returns:
        The path to the database file.
    """
    db_path = str(tmp_path / "cli.db")

    async def _populate():
        async with Database(db_path) as database:
            await database.create_table("users", "id INTEGER PRIMARY KEY", "name TEXT", "age INTEGER")
            await database.create_table("audit", "entry TEXT")
            await database.insert_rows("users", {"name": "Ada", "age": 36}, {"name": "Linus", "age": 28})

    asyncio.run(_populate())
    return db_path
