##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
Manages formatting for displaying database contents to the console.
"""
import json
from typing import Any, Dict, List

from tabulate import tabulate

from sqlfacade.config import Config
from sqlfacade.database.models import ColumnInfo, TableInfo


def _json_default(value: Any) -> Any:
    """Serialize values that `json` can't handle natively (BLOB columns)."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).hex()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(data: Any) -> str:
    """
    Dump query results as indented JSON. Binary values are written as hex strings.

    Args:
        data: Rows, tables or any other JSON-compatible structure.

    Returns:
        The JSON text.
    """
    return json.dumps(data, indent=2, default=_json_default)


def format_columns(columns: List[ColumnInfo]) -> str:
    """
    Format columns the way they'd appear in a table definition, e.g. `id INTEGER, name TEXT`.

    Args:
        columns: The columns to format.

    Returns:
        A comma separated string of columns.
    """
    return ", ".join(f"{column.name} {column.type}".strip() for column in columns)


def display_tables(tables: List[TableInfo]):
    """
    Print every table and its columns.

    Args:
        tables: The tables to display.
    """
    if not tables:
        print("No tables found.")
        return
    rows = [(table.table_name, format_columns(table.columns)) for table in tables]
    print(tabulate(rows, headers=["Table", "Columns"]))


def display_columns(table_name: str, columns: List[ColumnInfo]):
    """
    Print the columns of a single table.

    Args:
        table_name: The name of the table.
        columns: The columns of the table.
    """
    if not columns:
        print(f"Table '{table_name}' has no columns or does not exist.")
        return
    print(tabulate([(column.name, column.type) for column in columns], headers=["Column", "Type"]))


def display_rows(table_name: str, rows: List[Dict[str, Any]]):
    """
    Print the rows of a table.

    Args:
        table_name: The name of the table the rows came from.
        rows: The rows to display.
    """
    if not rows:
        print(f"No rows in '{table_name}'.")
        return
    print(tabulate(rows, headers="keys"))


def display_all_data(all_data: Dict[str, List[Dict[str, Any]]]):
    """
    Print the rows of every table, one section per table.

    Args:
        all_data: A mapping of table names to their rows.
    """
    if not all_data:
        print("No tables found.")
        return
    for table_name, rows in all_data.items():
        print(f"\n{table_name}")
        print("-" * len(table_name))
        display_rows(table_name, rows)


def display_config(config: Config):
    """
    Print the resolved configuration.

    Args:
        config: The configuration to display.
    """
    rows = []
    for section in config.FIELDS:
        namespace = getattr(config, section)
        if namespace is None:
            continue
        rows.extend((f"{section}.{key}", val) for key, val in namespace.__dict__.items())
    print(tabulate(rows, tablefmt="presto"))
