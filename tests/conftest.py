"""Pytest configuration and fixtures."""

import logging
import os
import time
from collections.abc import Callable
from collections.abc import Iterator
from collections.abc import Mapping
from typing import Any

import pytest
from sqlalchemy import Column
from sqlalchemy import Engine
from sqlalchemy import Integer
from sqlalchemy import MetaData
from sqlalchemy import String
from sqlalchemy import Table
from sqlalchemy import create_engine

from namerec.dbparam import get_settings


@pytest.fixture(autouse=True)
def settings_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Pin settings to UTC with no default dialect."""
    monkeypatch.setenv('DBPARAM_TIMEZONE', 'UTC')
    monkeypatch.delenv('DBPARAM_DEFAULT_DIALECT', raising=False)
    get_settings.cache_clear()

    yield

    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo configure_logging() so records reach caplog again."""
    yield

    package_logger = logging.getLogger('namerec.dbparam')
    package_logger.handlers = []
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def host_berlin(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Leave DBPARAM_TIMEZONE unset and run with the host clock in Europe/Berlin."""
    if not hasattr(time, 'tzset'):
        pytest.skip('time.tzset() is not available')

    monkeypatch.delenv('DBPARAM_TIMEZONE')
    get_settings.cache_clear()
    previous = os.environ.get('TZ')
    os.environ['TZ'] = 'Europe/Berlin'
    time.tzset()

    yield

    if previous is None:
        os.environ.pop('TZ', None)
    else:
        os.environ['TZ'] = previous
    time.tzset()


@pytest.fixture
def set_env(monkeypatch: pytest.MonkeyPatch) -> Callable[[str, str], None]:
    """Set a DBPARAM_* variable and reload settings."""

    def _set_env(name: str, value: str) -> None:
        monkeypatch.setenv(f'DBPARAM_{name.upper()}', value)
        get_settings.cache_clear()

    return _set_env


@pytest.fixture
def berlin(set_env: Callable[[str, str], None]) -> None:
    """Use Europe/Berlin as system timezone (UTC+1 in January)."""
    set_env('timezone', 'Europe/Berlin')


class FakeDialect:
    """Minimal SchemaDialect implementation."""

    def __init__(self, name: str, types: Mapping[str, Any] | None = None) -> None:
        self._name = name
        self._types = dict(types or {})

    def driver_name(self) -> str:
        return self._name

    def type_map(self) -> Mapping[str, Any]:
        return self._types


@pytest.fixture
def fake_dialect() -> Callable[..., FakeDialect]:
    """Factory for FakeDialect instances."""
    return FakeDialect


@pytest.fixture
def metadata() -> MetaData:
    """Create test metadata with simple schema."""
    metadata = MetaData()

    Table(
        'users',
        metadata,
        Column('id', Integer, primary_key=True),
        Column('name', String(100), nullable=False),
        Column('email', String(100)),
        Column('status', String(20)),
        Column('logins', Integer, nullable=False, default=0),
    )

    return metadata


@pytest.fixture
def users(metadata: MetaData) -> Table:
    """Users table."""
    return metadata.tables['users']


@pytest.fixture
def engine(metadata: MetaData, users: Table) -> Iterator[Engine]:
    """Create in-memory SQLite engine with sample users."""
    engine = create_engine('sqlite:///:memory:')
    metadata.create_all(engine)

    with engine.begin() as conn:
        conn.execute(
            users.insert(),
            [
                {'id': 1, 'name': 'John Doe', 'email': 'john@example.com', 'status': 'active', 'logins': 10},
                {'id': 2, 'name': 'Jane Smith', 'email': '', 'status': 'active', 'logins': 3},
                {'id': 3, 'name': 'Bob Johnson', 'email': None, 'status': 'disabled', 'logins': 0},
                {'id': 4, 'name': 'Ann 50% Off', 'email': 'ann@example.com', 'status': 'pending', 'logins': 25},
            ],
        )

    yield engine

    engine.dispose()
