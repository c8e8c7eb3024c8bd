import logging
import os
from typing import Optional

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class DatabaseConfig(BaseModel):
    host: str
    user: str
    password: str
    dbname: str
    port: Optional[int] = None
    connect_timeout: Optional[int] = None

    def to_connect_kwargs(self) -> dict:
        return self.model_dump(exclude_none=True)


def get_db_config_users() -> Optional[DatabaseConfig]:
    """Builds the users database config from the environment.

    Returns None when any of DB_HOST, DB_USER, DB_PASS or DB_NAME is unset,
    or when DB_PORT / DB_CONNECT_TIMEOUT are not integers.
    """
    values = {
        "host": os.getenv("DB_HOST"),
        "user": os.getenv("DB_USER"),
        "password": os.getenv("DB_PASS"),
        "dbname": os.getenv("DB_NAME"),
    }
    if any(value is None for value in values.values()):
        return None

    if os.getenv("DB_PORT"):
        values["port"] = os.getenv("DB_PORT")
    if os.getenv("DB_CONNECT_TIMEOUT"):
        values["connect_timeout"] = os.getenv("DB_CONNECT_TIMEOUT")

    try:
        return DatabaseConfig(**values)
    except ValidationError as e:
        logger.error(f"Invalid database configuration: {e}")
        return None
