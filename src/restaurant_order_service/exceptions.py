"""Service errors raised by validators and handlers.

Every failure is a status code plus a human-readable message. The API layer
renders any ServiceError as an ``{"error": message}`` envelope.
"""


class ServiceError(Exception):
    """Base class for all request-terminating errors."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class ValidationError(ServiceError):
    """A required field is missing or malformed."""

    status_code = 400


class NotFoundError(ServiceError):
    """No record matches the requested id."""

    status_code = 404


class ConstraintError(ServiceError):
    """The request conflicts with a rule on the current record state."""

    status_code = 400


class MethodNotAllowedError(ServiceError):
    """The HTTP verb is not bound on the requested path."""

    status_code = 405
