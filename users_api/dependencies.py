from typing import Callable

from shared.database.connections import connect


def get_db_connector() -> Callable:
    return connect
