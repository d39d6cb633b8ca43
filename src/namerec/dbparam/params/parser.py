"""
Parser for the param DSL.

A param value is a comma separated list of values, optionally starting with
'and' or 'or' (default: 'or'):

    'active'                 -> status = 'active'
    'and,active,!=disabled'  -> status = 'active' AND status != 'disabled'
    '*foo*'                  -> status LIKE '%foo%'
    ':empty:'                -> status IS NULL OR status = ''
    'not :empty:'            -> NOT (status IS NULL OR status = '')

Values can begin with 'not ', '!=', '<=', '>=', '<', '>' or '='. Commas and
asterisks meant literally are escaped with a backslash (see escape_param()).
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from namerec.dbparam.helpers.arrays import to_list
from namerec.dbparam.helpers.dates import to_datetime
from namerec.dbparam.params.constants import EMPTY
from namerec.dbparam.params.constants import ESCAPE
from namerec.dbparam.params.constants import LIST_SEPARATOR
from namerec.dbparam.params.constants import NEGATED_EMPTY
from namerec.dbparam.params.constants import NOT_EMPTY
from namerec.dbparam.params.constants import NOT_PREFIX
from namerec.dbparam.params.constants import OPERATOR_PREFIXES
from namerec.dbparam.params.constants import WILDCARD
from namerec.dbparam.params.constants import BoolOperator
from namerec.dbparam.params.constants import ParamOperator
from namerec.dbparam.params.types import Comparison
from namerec.dbparam.params.types import Condition
from namerec.dbparam.params.types import Group
from namerec.dbparam.params.types import Like
from namerec.dbparam.params.types import Not
from namerec.dbparam.params.types import ParamToken
from namerec.dbparam.values import prepare_date_for_db

logger = logging.getLogger(__name__)

# Leading asterisk, or trailing asterisk that is not escaped
_WILDCARD_PATTERN = re.compile(r'^\*|(?<!\\)\*$')

_LIKE_OPERATORS = frozenset({ParamOperator.EQ, ParamOperator.NE})


def escape_param(value: str) -> str:
    """
    Escape commas and asterisks so parse_param() treats them literally.

    Args:
        value: Param value

    Returns:
        Escaped param value

    Examples:
        >>> escape_param('a,b*c')
        'a\\\\,b\\\\*c'
    """
    return value.replace(LIST_SEPARATOR, ESCAPE + LIST_SEPARATOR).replace(WILDCARD, ESCAPE + WILDCARD)


def normalize_empty_value(value: Any) -> Any:
    """Map None to ':empty:' and ':notempty:' to 'not :empty:'."""
    if value is None:
        return EMPTY
    if isinstance(value, str) and value.lower() == NOT_EMPTY:
        return NEGATED_EMPTY
    return value


def parse_param_operator(value: str) -> tuple[ParamOperator, str]:
    """
    Split the leading operator off a param value.

    Args:
        value: Param value

    Returns:
        Tuple of (operator, remaining text); '=' if there is no operator
    """
    lowered = value.lower()
    for prefix in OPERATOR_PREFIXES:
        if lowered.startswith(prefix):
            operator = ParamOperator.NE if prefix == NOT_PREFIX else ParamOperator(prefix)
            return operator, value[len(prefix):]
    return ParamOperator.EQ, value


def parse_param_token(value: Any) -> ParamToken:
    """
    Parse a single param value.

    Args:
        value: One value of a param list

    Returns:
        ParamToken; non-string values are compared with '=' as they are
    """
    value = normalize_empty_value(value)
    if not isinstance(value, str):
        return ParamToken(ParamOperator.EQ, value)

    operator, text = parse_param_operator(value)
    if text.lower() == EMPTY:
        is_empty = operator == ParamOperator.EQ
        return ParamToken(operator, text, is_empty=is_empty, is_not_empty=not is_empty)
    return ParamToken(operator, text)


def tokenize_param(value: Any) -> tuple[BoolOperator | None, list[Any]]:
    """
    Split a param into its leading 'and'/'or' and its values.

    Args:
        value: Param string, list of values or single value

    Returns:
        Tuple of (boolean operator or None if not given, values)
    """
    values = to_list(value)
    if values and isinstance(values[0], str) and values[0].lower() in {op.value for op in BoolOperator}:
        return BoolOperator(values[0].lower()), values[1:]
    return None, values


def parse_param(column: str, value: Any) -> Condition | None:
    """
    Parse a param value into a condition on a column.

    Args:
        column: Column the param targets
        value: Param string, list of values or single value

    Returns:
        Group of conditions, or None if the param holds no values
    """
    # Strict check, tokenizing would leave 'not'
    if isinstance(value, str) and value == NOT_PREFIX:
        return None

    bool_operator, values = tokenize_param(value)
    conditions = tuple(_token_to_condition(column, parse_param_token(val)) for val in values)
    if not conditions:
        return None

    condition = Group(bool_operator or BoolOperator.OR, conditions)
    logger.debug(f'Parsed param {value!r} for column {column}: {condition}')
    return condition


def parse_date_param(column: str, value: Any) -> Condition | None:
    """
    Parse a date param value into a condition on a column.

    Each value is read as a date in the system timezone and converted to a
    UTC database date before being handed to parse_param().

    Args:
        column: Column the param targets
        value: Param string, list of values, date/datetime, or date/time form mapping

    Returns:
        Group of conditions, or None if the param holds no values
    """
    if isinstance(value, str) and value == NOT_PREFIX:
        return None

    if isinstance(value, Mapping) and ('date' in value or 'time' in value):
        value = [value]

    bool_operator, values = tokenize_param(value)
    if not values:
        return None

    normalized: list[str] = [bool_operator.value] if bool_operator else []

    for val in values:
        token = parse_param_token(val)
        if token.is_empty:
            normalized.append(EMPTY)
            continue
        if token.is_not_empty:
            normalized.append(NEGATED_EMPTY)
            continue

        prepared = prepare_date_for_db(to_datetime(token.text, assume_system_timezone=True))
        if prepared is None:
            logger.warning(f'Could not parse date param value {val!r} for column {column}')
            prepared = ''

        normalized.append(f'{token.operator.value}{prepared}')

    return parse_param(column, normalized)


def _empty_condition(column: str) -> Group:
    """Condition matching NULL or empty string."""
    return Group(
        BoolOperator.OR,
        (
            Comparison(ParamOperator.EQ, column, None),
            Comparison(ParamOperator.EQ, column, ''),
        ),
    )


def _token_to_condition(column: str, token: ParamToken) -> Condition:
    """Build the condition for one parsed param value."""
    if token.is_empty:
        return _empty_condition(column)
    if token.is_not_empty:
        return Not(_empty_condition(column))

    if not isinstance(token.text, str):
        return Comparison(token.operator, column, token.text)

    text = token.text.strip()

    # A leading or unescaped trailing asterisk makes this a LIKE condition
    like = False
    if token.operator in _LIKE_OPERATORS:
        text, count = _WILDCARD_PATTERN.subn('%', text)
        like = count > 0

    text = text.replace(ESCAPE + WILDCARD, WILDCARD)

    if like:
        return Like(column, text, negated=token.operator == ParamOperator.NE)
    return Comparison(token.operator, column, text)
