"""JSON encoding for database storage."""

import dataclasses
import json
from collections.abc import Set
from datetime import date
from datetime import time
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from namerec.dbparam.core.types import is_serializable


def _default(value: Any) -> Any:
    """Convert objects the json module cannot encode on its own."""
    if is_serializable(value):
        return value.serialize()
    if isinstance(value, (date, time)):
        return value.isoformat()
    if isinstance(value, (Decimal, UUID)):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Set):
        return list(value)
    if isinstance(value, BaseModel):
        return value.model_dump(mode='json')
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, bytes):
        return value.decode('utf-8', errors='replace')
    if hasattr(value, '__dict__'):
        return {key: val for key, val in vars(value).items() if not key.startswith('_')}

    msg = f'Object of type {type(value).__name__} is not JSON serializable'
    raise TypeError(msg)


def encode(value: Any) -> str:
    """
    Encode a value as compact JSON.

    Args:
        value: Value to encode

    Returns:
        JSON string without insignificant whitespace and without ASCII escaping

    Raises:
        TypeError: If value contains something that cannot be encoded
    """
    return json.dumps(value, default=_default, ensure_ascii=False, separators=(',', ':'))

