##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
Read-only records describing the schema of a database.

These are rebuilt from SQLite's schema catalog every time they're requested;
nothing here is cached.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class ColumnInfo:
    """
    A single column as reported by `PRAGMA table_info`.

    Attributes:
        name: The name of the column.
        type: The declared type of the column (empty string if none was declared).
    """

    name: str
    type: str

    def to_dict(self) -> Dict[str, str]:
        """
        Get a dictionary representation of this column.

        Returns:
            A dict with `name` and `type` keys.
        """
        return {"name": self.name, "type": self.type}


@dataclass
class TableInfo:
    """
    A table and its columns in declared order.

    Attributes:
        table_name: The name of the table.
        columns: The columns of the table.
    """

    table_name: str
    columns: List[ColumnInfo] = field(default_factory=list)

    @property
    def column_names(self) -> List[str]:
        """The names of this table's columns in declared order."""
        return [column.name for column in self.columns]

    def to_dict(self) -> Dict[str, Any]:
        """
        Get a dictionary representation of this table.

        Returns:
            A dict with `tableName` and `columns` keys.
        """
        return {"tableName": self.table_name, "columns": [column.to_dict() for column in self.columns]}
