"""Date/time parsing helpers."""

import logging
import re
from collections.abc import Mapping
from datetime import UTC
from datetime import date
from datetime import datetime
from datetime import time
from datetime import tzinfo
from typing import Any
from zoneinfo import ZoneInfo
from zoneinfo import ZoneInfoNotFoundError

from dateutil import parser as date_parser
from dateutil.parser import ParserError

from namerec.dbparam.core.settings import get_settings

logger = logging.getLogger(__name__)

_ISO8601 = re.compile(r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?(?:Z|[+-]\d{2}:?\d{2})$')
_TIMESTAMP = re.compile(r'^-?\d+(?:\.\d+)?$')


def is_iso8601(value: Any) -> bool:
    """
    Check whether a value is an ISO-8601 date/time string with an offset.

    Args:
        value: Value to check

    Returns:
        True for strings like '2024-01-15T10:30:00+02:00' or '2024-01-15T08:30:00Z'
    """
    return isinstance(value, str) and _ISO8601.match(value) is not None


def system_timezone() -> tzinfo:
    """Get the configured system timezone."""
    return get_settings().system_timezone()


def to_datetime(value: Any, assume_system_timezone: bool = False) -> datetime | None:
    """
    Convert a mixed value into a timezone-aware datetime.

    Supported input:
    - datetime: naive values are taken to be in the system timezone
    - date: midnight in the system timezone
    - int/float or numeric string: Unix timestamp (UTC)
    - mapping with 'date', 'time' and/or 'timezone' keys (form input)
    - any string python-dateutil can parse

    Strings without offset are read as UTC, or in the system timezone when
    ``assume_system_timezone`` is set. Parsed values are returned in the
    system timezone; datetime input keeps its own timezone.

    Args:
        value: Value to convert
        assume_system_timezone: Read offset-less strings in the system timezone

    Returns:
        Aware datetime, or None if the value cannot be converted
    """
    system_tz = system_timezone()

    if isinstance(value, datetime):
        return value if value.tzinfo is not None else value.replace(tzinfo=system_tz)

    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=system_tz)

    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, (int, float)):
        return _from_timestamp(value, system_tz)

    if isinstance(value, Mapping):
        return _from_mapping(value, assume_system_timezone, system_tz)

    if not isinstance(value, str):
        return None

    value = value.strip()
    if not value:
        return None

    if _TIMESTAMP.match(value):
        return _from_timestamp(float(value), system_tz)

    try:
        parsed = date_parser.parse(value)
    except (ParserError, ValueError, OverflowError):
        logger.debug(f'Could not parse date: {value!r}')
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=system_tz if assume_system_timezone else UTC)

    return parsed.astimezone(system_tz)


def _from_timestamp(value: float, system_tz: tzinfo) -> datetime | None:
    """Convert a Unix timestamp into a datetime in the system timezone."""
    try:
        return datetime.fromtimestamp(value, tz=UTC).astimezone(system_tz)
    except (OverflowError, OSError, ValueError):
        logger.debug(f'Timestamp out of range: {value!r}')
        return None


def _from_mapping(value: Mapping[str, Any], assume_system_timezone: bool, system_tz: tzinfo) -> datetime | None:
    """
    Convert date/time form input, e.g. {'date': '2024-01-15', 'time': '10:30', 'timezone': 'Europe/Berlin'}.

    A missing date means today, a missing time means midnight.
    """
    date_part = value.get('date')
    time_part = value.get('time')
    if not date_part and not time_part:
        return None

    tz: tzinfo = system_tz if assume_system_timezone else UTC
    if tz_name := value.get('timezone'):
        try:
            tz = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.debug(f'Unknown timezone in date input: {tz_name!r}')
            return None

    text = f'{date_part or datetime.now(tz).date().isoformat()} {time_part or "00:00"}'
    try:
        parsed = date_parser.parse(text)
    except (ParserError, ValueError, OverflowError):
        logger.debug(f'Could not parse date input: {value!r}')
        return None

    return parsed.replace(tzinfo=tz).astimezone(system_tz)
