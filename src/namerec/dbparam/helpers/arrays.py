"""Normalization of mixed input into lists and mappings."""

import dataclasses
import re
from collections.abc import Mapping
from collections.abc import Set
from typing import Any

from pydantic import BaseModel

# Commas not preceded by a backslash
_UNESCAPED_COMMA = re.compile(r'(?<!\\),')


def split_escaped(value: str) -> list[str]:
    """
    Split a string on unescaped commas.

    Each piece is stripped, escaped commas are unescaped, and empty pieces
    are dropped.

    Args:
        value: Comma separated string

    Returns:
        List of pieces

    Examples:
        >>> split_escaped('a, b,,c')
        ['a', 'b', 'c']
        >>> split_escaped(r'a\\,b,c')
        ['a,b', 'c']
    """
    pieces = (piece.strip().replace('\\,', ',') for piece in _UNESCAPED_COMMA.split(value))
    return [piece for piece in pieces if piece]


def to_list(value: Any) -> list[Any]:
    """
    Normalize a value into a list.

    Args:
        value: None, string, mapping, sequence/set, or any single value

    Returns:
        List of values (strings are split on unescaped commas)
    """
    if value is None:
        return []
    if isinstance(value, str):
        return split_escaped(value)
    if isinstance(value, Mapping):
        return list(value.values())
    if isinstance(value, (list, tuple, Set)):
        return list(value)
    return [value]


def to_mapping(value: Any) -> dict[Any, Any]:
    """
    Normalize a mapping-like or object value into a dict.

    Args:
        value: Mapping, sequence, pydantic model, dataclass instance or object

    Returns:
        Dict preserving the source key order

    Raises:
        TypeError: If value cannot be turned into a mapping
    """
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, BaseModel):
        return value.model_dump()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, str):
        return dict(enumerate(split_escaped(value)))
    if isinstance(value, (list, tuple, Set)):
        return dict(enumerate(value))
    if hasattr(value, '__dict__'):
        return {key: val for key, val in vars(value).items() if not key.startswith('_')}

    msg = f'Cannot convert {type(value).__name__} to a mapping'
    raise TypeError(msg)
