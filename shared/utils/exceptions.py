from typing import Optional
from fastapi import status


class UsersApiError(Exception):
    """Base error carrying the public message and HTTP status of a failure."""

    message = "Ocurrió un error al procesar su solicitud."
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ClientInputError(UsersApiError):
    message = 'El parámetro "role" es requerido.'
    status_code = status.HTTP_400_BAD_REQUEST


class ConfigurationError(UsersApiError):
    message = (
        "Error interno del servidor: Fichero de configuración no encontrado."
    )


class DatabaseConnectionError(UsersApiError):
    message = "No se pudo establecer conexión con la base de datos."


class QueryError(UsersApiError):
    pass
