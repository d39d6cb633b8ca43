"""Constants for the param DSL."""

from enum import Enum


class BoolOperator(str, Enum):
    """Operators joining the conditions of a group."""

    AND = 'and'
    OR = 'or'


class ParamOperator(str, Enum):
    """Comparison operators a param value can start with."""

    EQ = '='
    NE = '!='
    LT = '<'
    LE = '<='
    GT = '>'
    GE = '>='


# Recognized value prefixes, longest/most specific first
OPERATOR_PREFIXES: tuple[str, ...] = ('not ', '!=', '<=', '>=', '<', '>', '=')

# Prefix aliases
NOT_PREFIX = 'not '

# Empty sentinels ("NULL or empty string" and its negation)
EMPTY = ':empty:'
NOT_EMPTY = ':notempty:'
NEGATED_EMPTY = f'{NOT_PREFIX}{EMPTY}'

# Characters with special meaning in param values
WILDCARD = '*'
LIST_SEPARATOR = ','
ESCAPE = '\\'
