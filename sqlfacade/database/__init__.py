##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""
SQLite facade for sqlfacade.

Modules:
    facade: Defines the `Database` class that maps structured calls onto SQL statements.
    models: Defines the `ColumnInfo` and `TableInfo` introspection records.
"""

from sqlfacade.database.facade import DEFAULT_DATABASE_FILE_PATH, IN_MEMORY_PATH, Database
from sqlfacade.database.models import ColumnInfo, TableInfo


__all__ = ["DEFAULT_DATABASE_FILE_PATH", "IN_MEMORY_PATH", "ColumnInfo", "Database", "TableInfo"]
