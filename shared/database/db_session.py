from contextlib import contextmanager
from typing import Callable, Generator

from shared.database.config import DatabaseConfig
from shared.database.connections import connect
from shared.utils.exceptions import DatabaseConnectionError


@contextmanager
def get_db_users(
    config: DatabaseConfig, connector: Callable = connect
) -> Generator:
    conn = connector(config)
    if isinstance(conn, DatabaseConnectionError):
        raise conn
    try:
        yield conn
    finally:
        conn.close()
