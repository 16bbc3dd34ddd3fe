"""Domain errors raised by services and rendered by the API."""

from fastapi import status


class ParkaSmartError(Exception):
    """Base class. ``status_code`` is the HTTP status the API answers with."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ParkaSmartError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class ConflictError(ParkaSmartError):
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(ParkaSmartError):
    status_code = status.HTTP_404_NOT_FOUND


class ConfigurationError(ParkaSmartError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class DeliveryError(ParkaSmartError):
    status_code = status.HTTP_502_BAD_GATEWAY
