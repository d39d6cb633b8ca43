"""Type definitions for dbparam."""

from dataclasses import dataclass
from enum import Enum
from typing import Any
from typing import Protocol
from typing import runtime_checkable


@runtime_checkable
class Serializable(Protocol):
    """
    Protocol for objects that define their own database value.

    Any object with a ``serialize()`` method is stored as whatever that
    method returns, before any date or JSON handling is tried.
    """

    def serialize(self) -> Any:
        """Return the value to store in the database."""
        ...


def is_serializable(value: Any) -> bool:
    """Check that value has a callable ``serialize()`` method."""
    return isinstance(value, Serializable) and callable(value.serialize)


class ColumnType(str, Enum):
    """Column type names produced by the column type advisor."""

    # Integers
    TINY_INT = 'tinyint'
    SMALL_INT = 'smallint'
    MEDIUM_INT = 'mediumint'
    INT = 'int'
    BIG_INT = 'bigint'
    DECIMAL = 'decimal'

    # Text
    TINY_TEXT = 'tinytext'
    TEXT = 'text'
    MEDIUM_TEXT = 'mediumtext'
    LONG_TEXT = 'longtext'
    STRING = 'string'  # Generic short string (VARCHAR)


class DialectFamily(str, Enum):
    """Database families with their own textual column rules."""

    MYSQL = 'mysql'
    PGSQL = 'pgsql'


@dataclass(frozen=True, slots=True)
class ColumnSizeSpec:
    """Value constraints for a numeric column."""

    min: int | None = None
    max: int | None = None
    decimals: int = 0

    def column_type(self) -> str:
        """
        Get the smallest column type that holds this range.

        Returns:
            Column type definition, e.g. ``'tinyint(3) unsigned'``
        """
        from namerec.dbparam.columns import get_numerical_column_type

        return get_numerical_column_type(self.min, self.max, self.decimals)
