"""Column type selection from value ranges and content lengths."""

import logging
import math
from collections.abc import Mapping
from decimal import Decimal
from decimal import InvalidOperation
from typing import Any

from namerec.dbparam.core.dialect import get_dialect_family
from namerec.dbparam.core.dialect import resolve_dialect
from namerec.dbparam.core.exceptions import UnknownColumnTypeError
from namerec.dbparam.core.exceptions import UnsupportedDialectError
from namerec.dbparam.core.types import ColumnType
from namerec.dbparam.core.types import DialectFamily

logger = logging.getLogger(__name__)

# Integer column sizes (signed range is [-size, size), unsigned is [0, size * 2))
INT_COLUMN_SIZES: Mapping[ColumnType, int] = {
    ColumnType.TINY_INT: 128,
    ColumnType.SMALL_INT: 32768,
    ColumnType.MEDIUM_INT: 8388608,
    ColumnType.INT: 2147483648,
    ColumnType.BIG_INT: 9223372036854775808,
}

# MySQL textual column capacities in bytes
MYSQL_TEXT_CAPACITIES: Mapping[ColumnType, int] = {
    ColumnType.TINY_TEXT: 255,  # 255 bytes
    ColumnType.TEXT: 65535,  # 64KB
    ColumnType.MEDIUM_TEXT: 16777215,  # 16MB
    ColumnType.LONG_TEXT: 4294967295,  # 4GB
}

_DEFAULT_MIN = -INT_COLUMN_SIZES[ColumnType.INT]
_DEFAULT_MAX = INT_COLUMN_SIZES[ColumnType.INT] - 1
_BIGINT_SIZE = INT_COLUMN_SIZES[ColumnType.BIG_INT]


def _to_number(value: Any) -> int | float | Decimal | None:
    """Return value as a number, or None if it is not numeric."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
        return number if number.is_finite() else None
    return None


def get_numerical_column_type(
    min: int | None = None,  # noqa: A002
    max: int | None = None,  # noqa: A002
    decimals: int | None = None,
) -> str:
    """
    Get a numeric column type for a value range and number of decimal places.

    Missing or non-numeric bounds default to the signed 32-bit range. Integer
    ranges beyond 64 bits are clamped to the bigint range; decimal types
    always cover the full range.

    Args:
        min: Smallest value the column must hold
        max: Largest value the column must hold
        decimals: Number of decimal places

    Returns:
        Column type definition, e.g. 'tinyint(3) unsigned' or 'decimal(3,2)'

    Examples:
        >>> get_numerical_column_type(0, 100)
        'tinyint(3) unsigned'
        >>> get_numerical_column_type(-5, 5, 2)
        'decimal(3,2)'
    """
    min_value = _to_number(min)
    max_value = _to_number(max)
    if min_value is None:
        min_value = _DEFAULT_MIN
    if max_value is None:
        max_value = _DEFAULT_MAX

    decimals_value = _to_number(decimals)
    decimals = int(decimals_value) if decimals_value is not None and decimals_value > 0 else 0

    unsigned = min_value >= 0

    if decimals > 0:
        length = _digit_count(min_value, max_value, unsigned) + decimals
        column_type = f'{ColumnType.DECIMAL.value}({length},{decimals})'
    else:
        # Integer types end at bigint
        min_value, max_value = _saturate(min_value, max_value, unsigned)

        # Smallest int type that fits min/max
        for int_type, size in INT_COLUMN_SIZES.items():
            if unsigned:
                if max_value < size * 2:
                    break
            elif min_value >= -size and max_value < size:
                break
        column_type = f'{int_type.value}({_digit_count(min_value, max_value, unsigned)})'

    if unsigned:
        column_type += ' unsigned'

    return column_type


def _digit_count(min_value: Any, max_value: Any, unsigned: bool) -> int:
    """Count the digits of the largest absolute value in a range (0 for zero)."""
    max_abs_size = int(max_value if unsigned else max(abs(min_value), abs(max_value)))
    return len(str(max_abs_size)) if max_abs_size else 0


def _saturate(min_value: Any, max_value: Any, unsigned: bool) -> tuple[Any, Any]:
    """Clamp a range to what a bigint column can hold."""
    if unsigned:
        low, high = 0, _BIGINT_SIZE * 2 - 1
    else:
        low, high = -_BIGINT_SIZE, _BIGINT_SIZE - 1

    if min_value < low or max_value > high:
        logger.warning(f'Range [{min_value}, {max_value}] exceeds bigint, clamping to [{low}, {high}]')
        return (max(min_value, low), min(max_value, high))
    return (min_value, max_value)


def _require_family(db: Any) -> tuple[DialectFamily, str]:
    """Resolve the dialect family, failing for unsupported dialects."""
    dialect = resolve_dialect(db)
    family = get_dialect_family(dialect)
    if family is None:
        raise UnsupportedDialectError(dialect.driver_name())
    return family, dialect.driver_name()


def get_textual_column_storage_capacity(column_type: str, db: Any = None) -> int | None:
    """
    Get the maximum number of bytes a textual column type can hold.

    Args:
        column_type: Textual column type (tinytext, text, mediumtext, longtext)
        db: Engine, connection, dialect, dialect name or SchemaDialect (None = default)

    Returns:
        Capacity in bytes, or None if unlimited

    Raises:
        UnknownColumnTypeError: If the column type is not a known textual type
        UnsupportedDialectError: If the dialect is neither MySQL nor PostgreSQL family
    """
    family, driver_name = _require_family(db)

    try:
        text_type = ColumnType(column_type.lower())
    except ValueError:
        text_type = None

    if text_type not in MYSQL_TEXT_CAPACITIES:
        raise UnknownColumnTypeError(str(column_type), driver_name)

    if family == DialectFamily.PGSQL:
        return None
    return MYSQL_TEXT_CAPACITIES[text_type]


def get_textual_column_type_by_content_length(content_length: int, db: Any = None) -> str:
    """
    Get the column type to use for content of a given length.

    Args:
        content_length: Content length in bytes
        db: Engine, connection, dialect, dialect name or SchemaDialect (None = default)

    Returns:
        Column type name ('string', 'text', 'mediumtext' or 'longtext')

    Raises:
        UnsupportedDialectError: If the dialect is neither MySQL nor PostgreSQL family
    """
    family, _ = _require_family(db)

    if family == DialectFamily.PGSQL:
        return ColumnType.TEXT.value

    if content_length <= MYSQL_TEXT_CAPACITIES[ColumnType.TINY_TEXT]:
        return ColumnType.STRING.value
    if content_length <= MYSQL_TEXT_CAPACITIES[ColumnType.TEXT]:
        return ColumnType.TEXT.value
    # No generic type for these two, use the MySQL names
    if content_length <= MYSQL_TEXT_CAPACITIES[ColumnType.MEDIUM_TEXT]:
        return ColumnType.MEDIUM_TEXT.value
    return ColumnType.LONG_TEXT.value


def is_type_supported(type_name: str, db: Any = None) -> bool:
    """
    Check whether a dialect's schema knows a column type.

    Args:
        type_name: Database type name, e.g. 'mediumtext'
        db: Engine, connection, dialect, dialect name or SchemaDialect (None = default)

    Returns:
        True if the dialect type map contains the type (in any letter case)
    """
    type_map = resolve_dialect(db).type_map()
    return any(name in type_map for name in (type_name, type_name.lower(), type_name.upper()))
