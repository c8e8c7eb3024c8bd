"""Shared fixtures: in-memory stand-ins for a psycopg2 connection."""

import pytest
from fastapi.testclient import TestClient

from shared.database.config import DatabaseConfig, get_db_config_users
from shared.utils.exceptions import DatabaseConnectionError
from users_api.dependencies import get_db_connector
from users_api.main import app


class FakeCursor:
    def __init__(self, rows=None, error=None):
        self.rows = rows if rows is not None else []
        self.error = error
        self.executed = []
        self.close_calls = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

    def execute(self, query, params=None):
        self.executed.append((query, params))
        if self.error is not None:
            raise self.error
        # psycopg2 refuses to adapt strings holding NUL bytes
        for value in (params or {}).values():
            if isinstance(value, str) and "\x00" in value:
                raise ValueError(
                    "A string literal cannot contain NUL (0x00) characters."
                )

    def fetchall(self):
        return list(self.rows)

    def close(self):
        self.close_calls += 1


class FakeConnection:
    def __init__(self, rows=None, error=None, encoding_error=None):
        self.rows = rows
        self.error = error
        self.encoding_error = encoding_error
        self.cursors = []
        self.close_calls = 0
        self.client_encoding = None

    def cursor(self, cursor_factory=None):
        cursor = FakeCursor(self.rows, self.error)
        self.cursors.append(cursor)
        return cursor

    def set_client_encoding(self, encoding):
        if self.encoding_error is not None:
            raise self.encoding_error
        self.client_encoding = encoding

    def close(self):
        self.close_calls += 1


class FakeConnector:
    """Callable that records every connect attempt."""

    def __init__(self, connection=None, fail=False):
        self.connection = connection
        self.fail = fail
        self.calls = []

    def __call__(self, config):
        self.calls.append(config)
        if self.fail:
            return DatabaseConnectionError()
        return self.connection


@pytest.fixture
def db_config():
    return DatabaseConfig(
        host="localhost", user="app", password="secret", dbname="app"
    )


@pytest.fixture
def make_client(db_config):
    """Returns a factory building a TestClient wired to the given connector."""

    def _make_client(connector, config=db_config):
        app.dependency_overrides[get_db_config_users] = lambda: config
        app.dependency_overrides[get_db_connector] = lambda: connector
        return TestClient(app)

    yield _make_client
    app.dependency_overrides.clear()
