"""Database dialect lookup."""

import logging
from collections.abc import Mapping
from typing import Any
from typing import Protocol
from typing import runtime_checkable

from sqlalchemy.engine import Dialect
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.exc import NoSuchModuleError

from namerec.dbparam.core.exceptions import DialectNotConfiguredError
from namerec.dbparam.core.exceptions import UnsupportedDialectError
from namerec.dbparam.core.settings import get_settings
from namerec.dbparam.core.types import DialectFamily

logger = logging.getLogger(__name__)

# Driver names reported by SQLAlchemy (and common aliases) per family
DIALECT_FAMILIES: Mapping[str, DialectFamily] = {
    'mysql': DialectFamily.MYSQL,
    'mariadb': DialectFamily.MYSQL,
    'postgresql': DialectFamily.PGSQL,
    'postgres': DialectFamily.PGSQL,
    'pgsql': DialectFamily.PGSQL,
}

_DIALECT_NAME_ALIASES: Mapping[str, str] = {
    'postgres': 'postgresql',
    'pgsql': 'postgresql',
}


@runtime_checkable
class SchemaDialect(Protocol):
    """
    Protocol for the dialect information the column helpers need.

    Allows structural subtyping - any object with these two methods can
    stand in for a database connection.
    """

    def driver_name(self) -> str:
        """Get the driver (dialect) name, e.g. 'mysql' or 'postgresql'."""
        ...

    def type_map(self) -> Mapping[str, Any]:
        """Get the database type names the schema knows about."""
        ...


class SQLAlchemyDialect:
    """SchemaDialect backed by a SQLAlchemy dialect."""

    def __init__(self, dialect: Dialect) -> None:
        """
        Initialize adapter.

        Args:
            dialect: SQLAlchemy dialect instance
        """
        self._dialect = dialect

    @classmethod
    def from_name(cls, name: str) -> 'SQLAlchemyDialect':
        """
        Create adapter for a dialect name without connecting.

        Args:
            name: Dialect name, e.g. 'mysql', 'postgresql', 'sqlite'

        Returns:
            SQLAlchemyDialect instance

        Raises:
            UnsupportedDialectError: If the name is not a SQLAlchemy dialect
        """
        name = name.lower()
        name = _DIALECT_NAME_ALIASES.get(name, name)
        try:
            dialect_cls = make_url(f'{name}://').get_dialect()
        except (ArgumentError, NoSuchModuleError) as e:
            raise UnsupportedDialectError(name) from e
        return cls(dialect_cls())

    @property
    def dialect(self) -> Dialect:
        """Get wrapped SQLAlchemy dialect."""
        return self._dialect

    def driver_name(self) -> str:
        """Get dialect name."""
        return self._dialect.name

    def type_map(self) -> Mapping[str, Any]:
        """Get reflected type names known to the dialect."""
        return getattr(self._dialect, 'ischema_names', None) or {}

    def __repr__(self) -> str:
        """Detailed representation."""
        return f"SQLAlchemyDialect('{self.driver_name()}')"


def resolve_dialect(db: Any = None) -> SchemaDialect:
    """
    Turn a connection-like argument into a SchemaDialect.

    Accepts a SchemaDialect, a SQLAlchemy Dialect, anything with a
    ``dialect`` attribute (Engine, AsyncEngine, Connection, Session bind),
    or a dialect name. ``None`` uses the configured default dialect.

    Args:
        db: Connection-like object, dialect name or None

    Returns:
        SchemaDialect instance

    Raises:
        DialectNotConfiguredError: If db is None and no default is configured
        UnsupportedDialectError: If a dialect name is unknown to SQLAlchemy
        TypeError: If db cannot be interpreted
    """
    if db is None:
        default = get_settings().default_dialect
        if not default:
            raise DialectNotConfiguredError()
        logger.debug(f'Using default dialect: {default}')
        db = default

    if isinstance(db, SchemaDialect):
        return db
    if isinstance(db, Dialect):
        return SQLAlchemyDialect(db)
    if isinstance(getattr(db, 'dialect', None), Dialect):
        return SQLAlchemyDialect(db.dialect)
    if isinstance(db, str):
        return SQLAlchemyDialect.from_name(db)

    msg = f'Cannot determine database dialect from {type(db).__name__}'
    raise TypeError(msg)


def get_dialect_family(db: Any = None) -> DialectFamily | None:
    """
    Get the dialect family of a connection-like argument.

    Args:
        db: Anything accepted by resolve_dialect()

    Returns:
        DialectFamily, or None if the dialect belongs to neither family
    """
    return DIALECT_FAMILIES.get(resolve_dialect(db).driver_name().lower())
