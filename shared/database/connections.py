import logging
from typing import Union

import psycopg2
from psycopg2.extensions import connection as Connection
from psycopg2.extras import RealDictCursor

from shared.database.config import DatabaseConfig
from shared.utils.exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)

CLIENT_ENCODING = "UTF8"


def connect(config: DatabaseConfig) -> Union[Connection, DatabaseConnectionError]:
    """Opens a new connection to the users database.

    Driver failures are logged and returned as a DatabaseConnectionError
    instead of being raised.
    """
    try:
        conn = psycopg2.connect(
            **config.to_connect_kwargs(),
            cursor_factory=RealDictCursor,
        )
    except psycopg2.Error as e:
        logger.error(
            f"Error connecting to database {config.dbname} at {config.host}: {e}"
        )
        return DatabaseConnectionError()

    try:
        conn.set_client_encoding(CLIENT_ENCODING)
    except psycopg2.Error as e:
        logger.error(f"Error setting client encoding {CLIENT_ENCODING}: {e}")
        conn.close()
        return DatabaseConnectionError()

    return conn
