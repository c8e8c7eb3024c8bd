import logging
from typing import Callable, List, Optional

from fastapi import APIRouter, Depends

from shared.database.config import DatabaseConfig, get_db_config_users
from shared.utils.exceptions import QueryError, UsersApiError
from shared.utils.http_responses import (
    generic_error_response,
    internal_server_error_response,
    success_response,
)
from users_api.dependencies import get_db_connector
from users_api.schemas.users_schemas import ErrorResponse, UserResponse
from users_api.services.users import list_users_by_role_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.get(
    "/",
    response_model=List[UserResponse],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def list_users_by_role_route(
    role: Optional[str] = None,
    db_config: Optional[DatabaseConfig] = Depends(get_db_config_users),
    connector: Callable = Depends(get_db_connector),
):
    try:
        users = list_users_by_role_service.execute(role, db_config, connector)
        return success_response(users)
    except UsersApiError as e:
        return generic_error_response(e.message, e.status_code)
    except Exception:
        logger.exception("Unexpected error listing users by role")
        return internal_server_error_response(QueryError.message)
