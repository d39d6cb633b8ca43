"""Convert param conditions to SQLAlchemy clause elements."""

from collections.abc import Callable
from collections.abc import Mapping
from typing import Any

from sqlalchemy import Table
from sqlalchemy import and_
from sqlalchemy import column as sa_column
from sqlalchemy import not_
from sqlalchemy import or_
from sqlalchemy.sql import operators
from sqlalchemy.sql.expression import ColumnElement

from namerec.dbparam.core.exceptions import ConditionError
from namerec.dbparam.params.constants import BoolOperator
from namerec.dbparam.params.constants import ParamOperator
from namerec.dbparam.params.types import Comparison
from namerec.dbparam.params.types import Condition
from namerec.dbparam.params.types import Group
from namerec.dbparam.params.types import Like
from namerec.dbparam.params.types import Not

COMPARISON_OP_TO_SQLALCHEMY: Mapping[ParamOperator, Callable[[Any, Any], Any]] = {
    ParamOperator.EQ: operators.eq,
    ParamOperator.NE: operators.ne,
    ParamOperator.LT: operators.lt,
    ParamOperator.LE: operators.le,
    ParamOperator.GT: operators.gt,
    ParamOperator.GE: operators.ge,
}


def to_clause(condition: Condition | None, table: Table | None = None) -> ColumnElement[bool] | None:
    """
    Convert a param condition to a SQLAlchemy clause element.

    Args:
        condition: Condition returned by parse_param()/parse_date_param()
        table: Optional table to take columns from (plain column() references otherwise)

    Returns:
        Clause usable in Select.where(), or None for an empty condition

    Raises:
        ConditionError: If the condition holds an unknown node or operator
    """
    if condition is None:
        return None
    return _convert(condition, table)


def _resolve_column(name: str, table: Table | None) -> ColumnElement[Any]:
    """Get column from table, or a free-standing column reference."""
    if table is None:
        return sa_column(name)
    try:
        return table.c[name]
    except KeyError as e:
        msg = f'Column {name} not found in table {table.name}'
        raise ConditionError(msg) from e


def _convert(condition: Condition, table: Table | None) -> ColumnElement[bool]:
    """Convert one condition node."""
    match condition:
        case Comparison(operator=operator, column=name, value=value):
            op = _comparison_operator(operator, condition)
            # == None / != None compile to IS NULL / IS NOT NULL
            return op(_resolve_column(name, table), value)
        case Like(column=name, pattern=pattern, negated=negated, case_sensitive=case_sensitive):
            col = _resolve_column(name, table)
            if case_sensitive:
                return col.not_like(pattern) if negated else col.like(pattern)
            return col.not_ilike(pattern) if negated else col.ilike(pattern)
        case Group(conditions=()):
            msg = 'Cannot convert an empty condition group'
            raise ConditionError(msg, condition)
        case Group(operator=BoolOperator.AND, conditions=conditions):
            return and_(*(_convert(c, table) for c in conditions))
        case Group(operator=BoolOperator.OR, conditions=conditions):
            return or_(*(_convert(c, table) for c in conditions))
        case Not(condition=inner):
            return not_(_convert(inner, table))
        case _:
            msg = f'Cannot convert condition: {condition!r}'
            raise ConditionError(msg, condition)


def _comparison_operator(operator: Any, condition: Condition) -> Callable[[Any, Any], Any]:
    """Look up the SQLAlchemy operator function for a comparison operator."""
    try:
        return COMPARISON_OP_TO_SQLALCHEMY[ParamOperator(operator)]
    except (ValueError, KeyError) as e:
        msg = f'Unknown comparison operator: {operator}'
        raise ConditionError(msg, condition) from e
