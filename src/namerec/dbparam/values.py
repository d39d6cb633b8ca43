"""Preparation of application values for database storage."""

from datetime import UTC
from datetime import date
from decimal import Decimal
from typing import Any
from uuid import UUID

from namerec.dbparam.core.types import is_serializable
from namerec.dbparam.helpers import json
from namerec.dbparam.helpers.arrays import to_mapping
from namerec.dbparam.helpers.dates import is_iso8601
from namerec.dbparam.helpers.dates import to_datetime

DB_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Values stored as they are
_SCALAR_TYPES = (str, bytes, int, float, Decimal, UUID)


def prepare_values_for_db(values: Any) -> dict[Any, Any]:
    """
    Prepare a mapping's or object's values to be sent to the database.

    Args:
        values: Mapping, sequence, pydantic model, dataclass or object

    Returns:
        Dict with the same keys and prepared values
    """
    return {key: prepare_value_for_db(value) for key, value in to_mapping(values).items()}


def prepare_value_for_db(value: Any) -> Any:
    """
    Prepare a value to be sent to the database.

    Checks, in order:
    1. Objects that define their own database value (``serialize()``)
    2. date/datetime objects and ISO-8601 strings -> UTC date string
    3. Other non-scalar values -> JSON

    Args:
        value: Value to prepare

    Returns:
        Prepared value (scalars are returned unchanged)
    """
    if is_serializable(value):
        return value.serialize()

    # Only date objects and ISO-8601 strings are detected as dates
    if isinstance(value, date) or is_iso8601(value):
        return prepare_date_for_db(value)

    if value is None or isinstance(value, _SCALAR_TYPES):
        return value

    return json.encode(value)


def prepare_date_for_db(value: Any) -> str | None:
    """
    Prepare a date to be sent to the database.

    Args:
        value: Anything to_datetime() accepts

    Returns:
        UTC date formatted as 'YYYY-MM-DD HH:MM:SS', or None if the value is not a date
    """
    converted = to_datetime(value)
    if converted is None:
        return None
    return converted.astimezone(UTC).strftime(DB_DATE_FORMAT)
