# influx/client/core/exceptions.py
"""
Error hierarchy raised by the platform client.

``ApiClient`` maps HTTP status codes onto these; lookups that report
"not found" as ``None`` catch :class:`NotFoundError` themselves.
"""
from __future__ import annotations


class InfluxClientError(Exception):
    """Base class for every error raised by the client."""

    def __init__(self, message: str, *, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(InfluxClientError):
    pass


class UnauthorizedError(InfluxClientError):
    pass


class ConflictError(InfluxClientError):
    pass


class RequestValidationError(InfluxClientError, ValueError):
    """Rejected request: invalid locally or refused by the server (400/422)."""


class TransportError(InfluxClientError):
    """Network failure or timeout before a response was received."""


class ServerError(InfluxClientError):
    pass


_STATUS_ERRORS: dict[int, type[InfluxClientError]] = {
    400: RequestValidationError,
    401: UnauthorizedError,
    403: UnauthorizedError,
    404: NotFoundError,
    409: ConflictError,
    413: RequestValidationError,
    422: RequestValidationError,
}


def error_for_status(status_code: int, message: str) -> InfluxClientError:
    cls = _STATUS_ERRORS.get(status_code, ServerError)
    return cls(message, status_code=status_code)
