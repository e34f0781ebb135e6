from fastapi import status


class AppError(Exception):
    """Erro de domínio com status HTTP estável e mensagem legível."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "unauthorized"


class Unauthorized(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "forbidden"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "not found"


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "invalid data"


class InvalidTransition(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "event is not pending"


class AlreadyExists(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "already exists"


class Internal(AppError):
    pass
