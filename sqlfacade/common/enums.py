##############################################################################
# Copyright (c) sqlfacade Project developers. See top-level LICENSE file
# for dates and other details.
##############################################################################

"""This module provides enumerations for the facade's public interface."""
from enum import Enum


__all__ = ("AlterOperation",)


class AlterOperation(str, Enum):
    """
    Enum for the operations accepted by `Database.alter_table`.

    The value of each member is the literal SQL keyword inserted into the
    generated `ALTER TABLE` statement.

    Attributes:
        ADD (str): Add a column to a table. SQL keyword: `ADD`.
        DROP (str): Drop a column from a table. SQL keyword: `DROP`.
    """

    ADD: str = "ADD"
    DROP: str = "DROP"
