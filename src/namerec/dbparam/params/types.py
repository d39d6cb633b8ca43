"""Condition tree produced by the param parser."""

from dataclasses import dataclass
from typing import Any
from typing import TypeAlias

from namerec.dbparam.params.constants import BoolOperator
from namerec.dbparam.params.constants import ParamOperator


@dataclass(frozen=True, slots=True)
class Comparison:
    """
    Column compared with a value.

    A None value with '=' means IS NULL, with '!=' IS NOT NULL.
    """

    operator: ParamOperator
    column: str
    value: Any


@dataclass(frozen=True, slots=True)
class Like:
    """Column matched against a LIKE pattern (no escaping is applied to the pattern)."""

    column: str
    pattern: str
    negated: bool = False
    case_sensitive: bool = False


@dataclass(frozen=True, slots=True)
class Group:
    """Conditions joined with AND or OR."""

    operator: BoolOperator
    conditions: tuple['Condition', ...]


@dataclass(frozen=True, slots=True)
class Not:
    """Negated condition."""

    condition: 'Condition'


Condition: TypeAlias = Comparison | Like | Group | Not


@dataclass(frozen=True, slots=True)
class ParamToken:
    """One param value after operator stripping."""

    operator: ParamOperator
    text: Any
    is_empty: bool = False
    is_not_empty: bool = False
