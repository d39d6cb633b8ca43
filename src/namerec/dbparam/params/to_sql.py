"""Render param conditions as SQL text via sqlglot."""

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

import sqlglot.expressions as exp
import sqlparse

from namerec.dbparam.core.exceptions import ConditionError
from namerec.dbparam.params.constants import BoolOperator
from namerec.dbparam.params.constants import ParamOperator
from namerec.dbparam.params.types import Comparison
from namerec.dbparam.params.types import Condition
from namerec.dbparam.params.types import Group
from namerec.dbparam.params.types import Like
from namerec.dbparam.params.types import Not
from namerec.dbparam.values import prepare_value_for_db

logger = logging.getLogger(__name__)

COMPARISON_OP_TO_SQLGLOT: Mapping[ParamOperator, type[exp.Expression]] = {
    ParamOperator.EQ: exp.EQ,
    ParamOperator.NE: exp.NEQ,
    ParamOperator.LT: exp.LT,
    ParamOperator.LE: exp.LTE,
    ParamOperator.GT: exp.GT,
    ParamOperator.GE: exp.GTE,
}

# Dialect names accepted here but spelled differently by sqlglot
_SQLGLOT_DIALECT_ALIASES: Mapping[str, str] = {
    'postgresql': 'postgres',
    'pgsql': 'postgres',
    'mariadb': 'mysql',
}


def condition_to_sqlglot(condition: Condition | None) -> exp.Expression | None:
    """
    Convert a param condition to a sqlglot expression.

    Args:
        condition: Condition returned by parse_param()/parse_date_param()

    Returns:
        sqlglot expression, or None for an empty condition

    Raises:
        ConditionError: If the condition holds an unknown node or operator
    """
    if condition is None:
        return None
    return _convert(condition)


def condition_to_sql(condition: Condition | None, dialect: str = 'generic', pretty: bool = False) -> str:
    """
    Render a param condition as SQL text.

    Values are rendered inline, so the output is meant for display and
    debugging; use to_clause() to build executable queries.

    Args:
        condition: Condition returned by parse_param()/parse_date_param()
        dialect: SQL dialect (generic, postgresql, mysql, sqlite, etc.)
        pretty: Format the output over several lines

    Returns:
        SQL condition text (empty string for an empty condition)
    """
    expression = condition_to_sqlglot(condition)
    if expression is None:
        return ''

    dialect = dialect.lower()
    write_dialect = None if dialect == 'generic' else _SQLGLOT_DIALECT_ALIASES.get(dialect, dialect)
    sql = expression.sql(dialect=write_dialect, pretty=pretty)

    if pretty:
        sql = sqlparse.format(sql, reindent=True, keyword_case='upper')

    logger.debug(f'Rendered condition ({dialect}): {sql}')
    return sql


def _value_to_sqlglot(value: Any) -> exp.Expression:
    """Convert a comparison value to a sqlglot literal."""
    value = prepare_value_for_db(value)
    if value is None:
        return exp.Null()
    if isinstance(value, bool):
        return exp.Boolean(this=value)
    if isinstance(value, (int, float, Decimal)):
        return exp.Literal.number(value)
    if isinstance(value, bytes):
        value = value.decode('utf-8', errors='replace')
    return exp.Literal.string(str(value))


def _convert(condition: Condition) -> exp.Expression:
    """Convert one condition node."""
    match condition:
        case Comparison(operator=operator, column=name, value=value):
            return _convert_comparison(condition, operator, exp.to_column(name), value)
        case Like(column=name, pattern=pattern, negated=negated, case_sensitive=case_sensitive):
            like_cls = exp.Like if case_sensitive else exp.ILike
            result = like_cls(this=exp.to_column(name), expression=exp.Literal.string(pattern))
            return exp.Not(this=result) if negated else result
        case Group(operator=operator, conditions=conditions):
            if not conditions:
                msg = 'Cannot convert an empty condition group'
                raise ConditionError(msg, condition)
            children = [_convert(c) for c in conditions]
            if operator == BoolOperator.AND:
                return exp.and_(*children, copy=False)
            if operator == BoolOperator.OR:
                return exp.or_(*children, copy=False)
            msg = f'Unknown boolean operator: {operator}'
            raise ConditionError(msg, condition)
        case Not(condition=inner):
            return exp.not_(_convert(inner), copy=False)
        case _:
            msg = f'Cannot convert condition: {condition!r}'
            raise ConditionError(msg, condition)


def _convert_comparison(
    condition: Comparison,
    operator: Any,
    left: exp.Expression,
    value: Any,
) -> exp.Expression:
    """Convert comparison, turning None comparisons into IS [NOT] NULL."""
    try:
        operator = ParamOperator(operator)
    except ValueError as e:
        msg = f'Unknown comparison operator: {operator}'
        raise ConditionError(msg, condition) from e

    if value is None and operator in (ParamOperator.EQ, ParamOperator.NE):
        is_null = exp.Is(this=left, expression=exp.Null())
        return is_null if operator == ParamOperator.EQ else exp.Not(this=is_null)

    operator_class = COMPARISON_OP_TO_SQLGLOT[operator]
    return operator_class(this=left, expression=_value_to_sqlglot(value))
