##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
Module of all sqlfacade-specific exception types.
"""

from typing import Optional


__all__ = (
    "SqlFacadeError",
    "InvalidAlterOperationError",
    "StatementExecutionError",
    "ForeignKeyPragmaError",
    "DatabaseStateError",
)


class SqlFacadeError(Exception):
    """
    Base class for every error raised by sqlfacade.
    """


class InvalidAlterOperationError(SqlFacadeError, ValueError):
    """
    Exception to signal that `alter_table` was given an operation that
    is not one of the `AlterOperation` members. Raised before any I/O.
    """


class StatementExecutionError(SqlFacadeError):
    """
    Exception to signal that SQLite failed to run a statement (malformed SQL,
    constraint violation, missing table or column, etc.). The message is the
    engine's error text and the original error is chained as the cause.

    Attributes:
        statement: The SQL statement that failed, if known.
    """

    def __init__(self, message: str, statement: Optional[str] = None):
        super().__init__(message)
        self.statement = statement


class ForeignKeyPragmaError(StatementExecutionError):
    """
    Exception to signal that foreign key enforcement could not be enabled
    on a connection opened in strict mode.
    """


class DatabaseStateError(SqlFacadeError):
    """
    Exception to signal that a `Database` was used in the wrong state, e.g.
    queried before being opened, opened twice, or given nested transactions.
    """
