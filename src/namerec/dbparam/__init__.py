"""
dbparam - database value preparation and param conditions

Prepares application values for storage, advises column types, and parses
the comma separated param DSL into conditions.
"""

from namerec.dbparam.columns import get_numerical_column_type
from namerec.dbparam.columns import get_textual_column_storage_capacity
from namerec.dbparam.columns import get_textual_column_type_by_content_length
from namerec.dbparam.columns import is_type_supported
from namerec.dbparam.core.dialect import SchemaDialect
from namerec.dbparam.core.dialect import SQLAlchemyDialect
from namerec.dbparam.core.dialect import resolve_dialect
from namerec.dbparam.core.exceptions import ConditionError
from namerec.dbparam.core.exceptions import DbParamError
from namerec.dbparam.core.exceptions import DialectNotConfiguredError
from namerec.dbparam.core.exceptions import UnknownColumnTypeError
from namerec.dbparam.core.exceptions import UnsupportedDialectError
from namerec.dbparam.core.settings import Settings
from namerec.dbparam.core.settings import get_settings
from namerec.dbparam.core.types import ColumnSizeSpec
from namerec.dbparam.core.types import ColumnType
from namerec.dbparam.core.types import DialectFamily
from namerec.dbparam.core.types import Serializable
from namerec.dbparam.params import BoolOperator
from namerec.dbparam.params import Comparison
from namerec.dbparam.params import Condition
from namerec.dbparam.params import Group
from namerec.dbparam.params import Like
from namerec.dbparam.params import Not
from namerec.dbparam.params import ParamOperator
from namerec.dbparam.params import ParamToken
from namerec.dbparam.params import condition_to_sql
from namerec.dbparam.params import condition_to_sqlglot
from namerec.dbparam.params import escape_param
from namerec.dbparam.params import parse_date_param
from namerec.dbparam.params import parse_param
from namerec.dbparam.params import to_clause
from namerec.dbparam.values import prepare_date_for_db
from namerec.dbparam.values import prepare_value_for_db
from namerec.dbparam.values import prepare_values_for_db

__version__ = '1.0'

__all__ = [
    # Core types
    'ColumnSizeSpec',
    'ColumnType',
    'DialectFamily',
    'Serializable',
    'SchemaDialect',
    'SQLAlchemyDialect',
    'resolve_dialect',
    # Settings
    'Settings',
    'get_settings',
    # Exceptions
    'DbParamError',
    'UnsupportedDialectError',
    'UnknownColumnTypeError',
    'DialectNotConfiguredError',
    'ConditionError',
    # Values
    'prepare_values_for_db',
    'prepare_value_for_db',
    'prepare_date_for_db',
    # Columns
    'get_numerical_column_type',
    'get_textual_column_storage_capacity',
    'get_textual_column_type_by_content_length',
    'is_type_supported',
    # Params
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
    'to_clause',
    'condition_to_sql',
    'condition_to_sqlglot',
]
