from fastapi.responses import JSONResponse
from fastapi import status
from typing import Any


def success_response(data: Any):
    return JSONResponse(status_code=status.HTTP_200_OK, content=data)


def internal_server_error_response(message: str):
    return generic_error_response(
        message, status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def generic_error_response(message: str, status_code: int):
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
    )
