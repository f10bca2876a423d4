##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
Utility functions shared by the sqlfacade CLI commands.
"""

import asyncio
import logging
from argparse import Namespace
from typing import Any, Awaitable, Callable

from sqlfacade.config import configfile
from sqlfacade.database.facade import Database


LOG = logging.getLogger("sqlfacade")


def get_database(args: Namespace) -> Database:
    """
    Build an unopened `Database` from the CLI arguments and the loaded configuration.

    The `--db` argument takes precedence over `database.path` in the configuration.

    Args:
        args: An argparse Namespace containing user arguments.

    Returns:
        A `Database` that still needs to be opened.
    """
    config = configfile.CONFIG or configfile.initialize_config()
    db_path = getattr(args, "db", None) or config.database.path
    LOG.debug(f"Using database '{db_path}'.")
    return Database(db_path, strict_foreign_keys=config.database.strict_foreign_keys)


def run_with_database(args: Namespace, action: Callable[[Database], Awaitable[Any]]) -> Any:
    """
    Open the database selected by `args`, await `action` with it and close it again.

    Args:
        args: An argparse Namespace containing user arguments.
        action: A coroutine function taking the open `Database`.

    Returns:
        Whatever `action` returns.
    """

    async def _run():
        async with get_database(args) as database:
            return await action(database)

    return asyncio.run(_run())
