"""Param DSL parsing and condition output."""

from namerec.dbparam.params.constants import BoolOperator
from namerec.dbparam.params.constants import ParamOperator
from namerec.dbparam.params.parser import escape_param
from namerec.dbparam.params.parser import parse_date_param
from namerec.dbparam.params.parser import parse_param
from namerec.dbparam.params.parser import parse_param_token
from namerec.dbparam.params.parser import tokenize_param
from namerec.dbparam.params.to_clause import to_clause
from namerec.dbparam.params.to_sql import condition_to_sql
from namerec.dbparam.params.to_sql import condition_to_sqlglot
from namerec.dbparam.params.types import Comparison
from namerec.dbparam.params.types import Condition
from namerec.dbparam.params.types import Group
from namerec.dbparam.params.types import Like
from namerec.dbparam.params.types import Not
from namerec.dbparam.params.types import ParamToken

__all__ = [
    'BoolOperator',
    'ParamOperator',
    'Comparison',
    'Condition',
    'Group',
    'Like',
    'Not',
    'ParamToken',
    'escape_param',
    'parse_param',
    'parse_date_param',
    'parse_param_token',
    'tokenize_param',
    'to_clause',
    'condition_to_sql',
    'condition_to_sqlglot',
]
