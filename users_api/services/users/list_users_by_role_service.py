import logging
from typing import Callable, Optional

import psycopg2

from shared.database.config import DatabaseConfig
from shared.database.connections import connect
from shared.database.db_session import get_db_users
from shared.utils.exceptions import (
    ClientInputError,
    ConfigurationError,
    QueryError,
)
from users_api.crud.authentication_tables.users import list_users_by_role
from users_api.schemas.users_schemas import UserResponse

logger = logging.getLogger(__name__)


def execute(
    role: Optional[str],
    db_config: Optional[DatabaseConfig],
    connector: Callable = connect,
) -> list:
    """Looks up the users holding ``role``.

    The role is validated before the configuration is checked or any
    connection is opened. Rows come back in the order the database returns
    them.

    Raises:
        ClientInputError: role is missing or blank.
        ConfigurationError: no database configuration is available.
        DatabaseConnectionError: the connector could not open a connection.
        QueryError: preparing, binding, executing or fetching failed.
    """
    role = role.strip() if role is not None else ""
    if not role:
        logger.warning("Rejected users lookup without role parameter")
        raise ClientInputError()

    if db_config is None:
        logger.error("Database configuration not found")
        raise ConfigurationError()

    with get_db_users(db_config, connector) as db:
        try:
            users = list_users_by_role(db, role)
        except (psycopg2.Error, ValueError) as e:
            logger.exception(f"Error listing users for role {role!r}: {e}")
            raise QueryError() from e

    logger.info(f"Found {len(users)} users for role {role!r}")
    return [UserResponse.model_validate(dict(user)).model_dump() for user in users]
