##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
Asynchronous query-building facade over a single SQLite connection.

This module defines the `Database` class, which turns structured calls (a table
name, raw column definitions, row dictionaries, raw condition strings) into SQL
statements executed through `aiosqlite`. Every operation is a coroutine, so
results are deferred until awaited.

Identifiers and condition strings are trusted and inserted verbatim. Row values
are never inserted into SQL text; they're always bound as `?` parameters.

Example:
    ```python
    async with Database("app.db") as db:
        await db.create_table("users", "id INTEGER PRIMARY KEY", "name TEXT")
        await db.insert_rows("users", {"name": "A"}, {"name": "B"})
        rows = await db.select_rows("users", "WHERE name = 'B'")
    ```
"""

import asyncio
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from types import TracebackType
from typing import Any, AsyncIterator, Awaitable, Dict, Iterable, List, Optional, Sequence, Tuple, Type, Union

import aiosqlite

from sqlfacade import PATH_TO_PROJ
from sqlfacade.common.enums import AlterOperation
from sqlfacade.database.models import ColumnInfo, TableInfo
from sqlfacade.exceptions import (
    DatabaseStateError,
    ForeignKeyPragmaError,
    InvalidAlterOperationError,
    SqlFacadeError,
    StatementExecutionError,
)


LOG = logging.getLogger(__name__)

IN_MEMORY_PATH = ":memory:"
DEFAULT_DATABASE_FILE_PATH = os.path.join(PATH_TO_PROJ, "my_database.db")
FOREIGN_KEYS_PRAGMA = "PRAGMA foreign_keys = ON"

Row = Dict[str, Any]
Statement = Tuple[str, Sequence[Any]]


def _append_condition(statement: str, condition: Optional[str]) -> str:
    """
    Append a raw, trusted condition fragment to a statement.

    Args:
        statement: The base SQL statement.
        condition: An optional fragment such as `WHERE id = 1`.

    Returns:
        The statement with the condition appended, if one was given.
    """
    if condition:
        return f"{statement} {condition}"
    return statement


class Database:
    """
    A facade over one SQLite connection that exposes table management,
    row CRUD and schema introspection as coroutines.

    The connection is owned exclusively by the instance. It's opened by
    `connect` (or `Database.open`, or `async with`) and must be released
    with `close`.

    Attributes:
        DATABASE_FILE_PATH (str): The default file path for a file-backed database.
        AlterOperation (Type[AlterOperation]): The operations allowed by `alter_table`.
        strict_foreign_keys (bool): If True, failing to enable foreign key
            enforcement makes `connect` fail instead of logging the error.

    Methods:
        open: Create and connect a `Database` in one call.
        connect: Open the underlying SQLite connection.
        close: Release the underlying SQLite connection.
        transaction: Run a block of operations inside BEGIN/COMMIT/ROLLBACK.
        get_version: Query SQLite for its version.
        create_table: Create a table if it doesn't already exist.
        drop_table: Drop a table if it exists.
        alter_table: Add or drop columns on a table.
        insert_rows: Insert one or more rows into a table.
        update_row: Update rows in a table.
        delete_rows: Delete rows from a table.
        select_rows: Retrieve rows from a table.
        get_all_tables: Get every table along with its columns.
        get_table_columns: Get the columns of one table.
        get_all_data: Get every row of every table.
    """

    DATABASE_FILE_PATH: str = DEFAULT_DATABASE_FILE_PATH
    AlterOperation = AlterOperation

    def __init__(self, file_path: Optional[Union[str, Path]] = None, strict_foreign_keys: bool = False):
        """
        Initialize the facade. No connection is opened until `connect` is awaited.

        Args:
            file_path: Path to a database file, created if it doesn't exist. If not
                provided an in-memory database is used.
            strict_foreign_keys: If True, raise `ForeignKeyPragmaError` when foreign key
                enforcement can't be enabled.
        """
        self._file_path: str = str(file_path) if file_path else IN_MEMORY_PATH
        self.strict_foreign_keys: bool = strict_foreign_keys
        self._conn: Optional[aiosqlite.Connection] = None
        self._in_transaction: bool = False

    def __repr__(self) -> str:
        state = "open" if self.is_open else "closed"
        return f"{self.__class__.__name__}(file_path={self._file_path!r}, {state})"

    @classmethod
    async def open(cls, file_path: Optional[Union[str, Path]] = None, strict_foreign_keys: bool = False) -> "Database":
        """
        Create a `Database` and open its connection.

        Args:
            file_path: Path to a database file. If not provided an in-memory database is used.
            strict_foreign_keys: If True, fail when foreign key enforcement can't be enabled.

        Returns:
            A connected `Database` instance.
        """
        database = cls(file_path, strict_foreign_keys=strict_foreign_keys)
        await database.connect()
        return database

    @property
    def file_path(self) -> str:
        """The path of the database file, or `:memory:` for an in-memory database."""
        return self._file_path

    @property
    def is_open(self) -> bool:
        """True if the connection is currently open."""
        return self._conn is not None

    async def __aenter__(self) -> "Database":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Type[Exception], exc_value: Exception, traceback: TracebackType):
        await self.close()

    ##########################
    # Connection management  #
    ##########################

    async def connect(self):
        """
        Open the SQLite connection and enable foreign key enforcement.

        The connection runs in autocommit mode so every statement commits on
        its own, and rows come back as `aiosqlite.Row` objects.

        Raises:
            DatabaseStateError: If this instance already has an open connection.
            StatementExecutionError: If SQLite can't open the database.
            ForeignKeyPragmaError: If `strict_foreign_keys` is set and the pragma fails.
        """
        if self._conn is not None:
            raise DatabaseStateError(f"A connection to '{self._file_path}' is already open.")

        if self._file_path != IN_MEMORY_PATH:
            Path(self._file_path).parent.mkdir(parents=True, exist_ok=True)

        try:
            conn = await aiosqlite.connect(self._file_path, isolation_level=None)
        except aiosqlite.Error as exc:
            raise StatementExecutionError(f"Unable to open database '{self._file_path}': {exc}") from exc

        conn.row_factory = aiosqlite.Row
        self._conn = conn
        LOG.info(f"Opened database connection to '{self._file_path}'.")

        await self._enable_foreign_keys()

    async def _enable_foreign_keys(self):
        """
        Turn on foreign key enforcement for this connection.

        A failure here is logged and ignored unless `strict_foreign_keys` is set,
        in which case the connection is closed and the error is raised.
        """
        try:
            await self._execute(FOREIGN_KEYS_PRAGMA)
        except StatementExecutionError as exc:
            if self.strict_foreign_keys:
                await self.close()
                raise ForeignKeyPragmaError(str(exc), statement=exc.statement) from exc
            LOG.error(f"Failed to enable foreign key enforcement on '{self._file_path}': {exc}")

    async def close(self):
        """
        Release the SQLite connection. Closing a database that isn't open only logs a warning.
        """
        if self._conn is None:
            LOG.warning(f"Database '{self._file_path}' is not open; nothing to close.")
            return

        conn, self._conn = self._conn, None
        self._in_transaction = False
        await conn.close()
        LOG.info(f"Closed database connection to '{self._file_path}'.")

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["Database"]:
        """
        Run a block of operations inside a single transaction.

        `BEGIN` is issued on entry, `COMMIT` when the block finishes and
        `ROLLBACK` if anything inside it raises. The error from the block is
        always the one re-raised; a failed rollback is only logged.
        Only one transaction may be open per connection, including across tasks.
        Statements issued by other tasks on this connection while the block
        is running become part of the transaction too.

        Yields:
            This `Database` instance.

        Raises:
            DatabaseStateError: If a transaction is already in progress.
        """
        if self._in_transaction:
            raise DatabaseStateError("A transaction is already in progress on this connection.")

        self._in_transaction = True
        try:
            await self._execute("BEGIN")
        except BaseException:
            self._in_transaction = False
            raise

        try:
            yield self
            await self._execute("COMMIT")
        except BaseException:
            LOG.debug("Rolling back transaction.")
            try:
                await self._execute("ROLLBACK")
            except SqlFacadeError as rollback_exc:
                LOG.error(f"Failed to roll back transaction on '{self._file_path}': {rollback_exc}")
            raise
        finally:
            self._in_transaction = False

    ##########################
    # Statement execution    #
    ##########################

    def _get_connection(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise DatabaseStateError(f"The database '{self._file_path}' is not open. Await `connect()` first.")
        return self._conn

    async def _execute(self, statement: str, parameters: Sequence[Any] = ()):
        """
        Run a statement that produces no rows.

        Args:
            statement: The SQL to run.
            parameters: Positional values bound to the statement's `?` placeholders.

        Raises:
            StatementExecutionError: If SQLite rejects the statement.
        """
        conn = self._get_connection()
        LOG.debug(f"SQLite statement: {statement}")
        if parameters:
            LOG.debug(f"SQLite params: {parameters}")

        try:
            cursor = await conn.execute(statement, parameters)
            await cursor.close()
        except aiosqlite.Error as exc:
            raise StatementExecutionError(str(exc), statement=statement) from exc

    async def _fetch_all(self, statement: str, parameters: Sequence[Any] = ()) -> List[Row]:
        """
        Run a query and return every row as a dictionary.

        Args:
            statement: The SQL to run.
            parameters: Positional values bound to the statement's `?` placeholders.

        Returns:
            A list of rows keyed by column name, in the order SQLite returned them.

        Raises:
            StatementExecutionError: If SQLite rejects the query.
        """
        conn = self._get_connection()
        LOG.debug(f"SQLite query: {statement}")
        if parameters:
            LOG.debug(f"SQLite params: {parameters}")

        try:
            rows = await conn.execute_fetchall(statement, parameters)
        except aiosqlite.Error as exc:
            raise StatementExecutionError(str(exc), statement=statement) from exc

        return [dict(row) for row in rows]

    @staticmethod
    async def _gather(awaitables: Iterable[Awaitable[Any]]) -> List[Any]:
        """
        Await a batch concurrently and wait for every member to finish.

        Args:
            awaitables: The awaitables making up the batch.

        Returns:
            The result of each awaitable in the order given.

        Raises:
            Exception: The first failure in argument order, once the whole batch has settled.
        """
        results = await asyncio.gather(*awaitables, return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return results

    async def _execute_all(self, statements: Sequence[Statement]):
        """
        Run independent statements concurrently. Statements that succeed stay
        committed even if others fail, unless this runs inside `transaction`.

        Args:
            statements: `(sql, parameters)` pairs to run.
        """
        await self._gather(self._execute(statement, parameters) for statement, parameters in statements)

    ##########################
    # Table management       #
    ##########################

    async def get_version(self) -> str:
        """
        Query SQLite for the current version.

        Returns:
            The SQLite version string.
        """
        rows = await self._fetch_all("SELECT sqlite_version() AS version")
        return rows[0]["version"]

    async def create_table(self, table_name: str, *column_defs: str):
        """
        Create a table if it doesn't already exist.

        Args:
            table_name: The name of the table.
            column_defs: Raw column and constraint definitions, e.g. `"id INTEGER PRIMARY KEY"`
                or `"FOREIGN KEY (user_id) REFERENCES users(id)"`.
        """
        await self._execute(f"CREATE TABLE IF NOT EXISTS {table_name} ({', '.join(column_defs)})")

    async def drop_table(self, table_name: str):
        """
        Drop a table if it exists.

        Args:
            table_name: The name of the table to drop.
        """
        await self._execute(f"DROP TABLE IF EXISTS {table_name}")

    def alter_table(self, table_name: str, operation: Union[AlterOperation, str], *column_defs: str) -> Awaitable[None]:
        """
        Add or drop columns on an existing table.

        The operation is validated as soon as this method is called, before
        anything is awaited. One `ALTER TABLE` statement is issued per column
        definition; they run concurrently and are not rolled back as a group.

        Args:
            table_name: The name of the table to alter.
            operation: `AlterOperation.ADD` or `AlterOperation.DROP` (or their string values).
            column_defs: Column definitions to add, or column names to drop.

        Returns:
            An awaitable that finishes once every statement has run. With no
            column definitions it finishes without issuing any SQL.

        Raises:
            InvalidAlterOperationError: If `operation` isn't an `AlterOperation`.
        """
        alter_operation = self._validate_alter_operation(operation)
        statements = [
            (f"ALTER TABLE {table_name} {alter_operation.value} COLUMN {column_def}", ()) for column_def in column_defs
        ]
        return self._execute_all(statements)

    @staticmethod
    def _validate_alter_operation(operation: Union[AlterOperation, str]) -> AlterOperation:
        try:
            return AlterOperation(operation)
        except (ValueError, TypeError) as exc:
            allowed = ", ".join(member.value for member in AlterOperation)
            raise InvalidAlterOperationError(
                f"Invalid operation '{operation}'. The operation must be one of: {allowed}"
            ) from exc

    ##########################
    # Row operations         #
    ##########################

    @staticmethod
    def _build_insert(table_name: str, row: Row) -> Statement:
        if not row:
            return f"INSERT INTO {table_name} DEFAULT VALUES", ()
        columns = ", ".join(row.keys())
        placeholders = ", ".join("?" for _ in row)
        return f"INSERT INTO {table_name} ({columns}) VALUES ({placeholders})", tuple(row.values())

    async def insert_rows(self, table_name: str, *rows: Row):
        """
        Insert one or more rows into a table.

        Each row is its own `INSERT` statement and all of them run concurrently.
        If any insert fails the error is raised once the batch has settled, but
        rows that went in are not removed. Wrap the call in `transaction` to
        make the batch all-or-nothing.

        Args:
            table_name: The name of the table.
            rows: Dictionaries mapping column names to values. An empty dictionary
                inserts a row of default values.
        """
        await self._execute_all([self._build_insert(table_name, row) for row in rows])

    async def update_row(self, table_name: str, row: Row, condition: Optional[str] = None):
        """
        Update rows in a table.

        Args:
            table_name: The name of the table.
            row: Dictionary mapping the columns to change to their new values.
            condition: Optional raw fragment such as `WHERE id = 1`. Every row is
                updated if it's omitted.

        Raises:
            ValueError: If `row` has no columns.
        """
        if not row:
            raise ValueError(f"Cannot update '{table_name}' without any columns to set.")

        assignments = ", ".join(f"{column} = ?" for column in row)
        statement = _append_condition(f"UPDATE {table_name} SET {assignments}", condition)
        await self._execute(statement, tuple(row.values()))

    async def delete_rows(self, table_name: str, condition: Optional[str] = None):
        """
        Delete rows from a table.

        Args:
            table_name: The name of the table.
            condition: Optional raw fragment such as `WHERE id = 1`. Every row is
                deleted if it's omitted.
        """
        await self._execute(_append_condition(f"DELETE FROM {table_name}", condition))

    async def select_rows(self, table_name: str, condition: Optional[str] = None) -> List[Row]:
        """
        Retrieve rows from a table.

        Args:
            table_name: The name of the table.
            condition: Optional raw fragment such as `WHERE age > 30 ORDER BY name`.

        Returns:
            A list of rows keyed by column name.
        """
        return await self._fetch_all(_append_condition(f"SELECT * FROM {table_name}", condition))

    ##########################
    # Schema introspection   #
    ##########################

    async def get_all_tables(self) -> List[TableInfo]:
        """
        Get every user table in the database along with its columns.

        Tables are listed in the schema catalog's order (normally creation
        order). SQLite's internal `sqlite_*` tables are left out.

        Returns:
            A list of `TableInfo` objects.
        """
        rows = await self._fetch_all(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
        )
        table_names = [row["name"] for row in rows]
        column_lists = await self._gather(self.get_table_columns(table_name) for table_name in table_names)
        return [TableInfo(table_name, columns) for table_name, columns in zip(table_names, column_lists)]

    async def get_table_columns(self, table_name: str) -> List[ColumnInfo]:
        """
        Get the columns of a table in declared order.

        Args:
            table_name: The name of the table.

        Returns:
            A list of `ColumnInfo` objects. Empty if the table doesn't exist.
        """
        rows = await self._fetch_all(f"PRAGMA table_info({table_name})")
        return [ColumnInfo(name=row["name"], type=row["type"]) for row in rows]

    async def get_all_data(self) -> Dict[str, List[Row]]:
        """
        Get every row of every table. Tables are read one after another.

        Returns:
            A dictionary mapping each table name to its rows.
        """
        all_data = {}
        for table in await self.get_all_tables():
            all_data[table.table_name] = await self.select_rows(table.table_name)
        return all_data
