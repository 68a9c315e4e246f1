"""
Async client for the time-series platform REST API.
"""

from influx.client.core.exceptions import (
    ConflictError,
    InfluxClientError,
    NotFoundError,
    RequestValidationError,
    ServerError,
    TransportError,
    UnauthorizedError,
)
from influx.client.platform import PlatformClient
from influx.client.query.dialect import DEFAULT_DIALECT, EMPTY_DIALECT, QueryDialect
from influx.client.query.request import RequestQuery

__version__ = "0.1.0"

__all__ = [
    "ConflictError",
    "DEFAULT_DIALECT",
    "EMPTY_DIALECT",
    "InfluxClientError",
    "NotFoundError",
    "PlatformClient",
    "QueryDialect",
    "RequestQuery",
    "RequestValidationError",
    "ServerError",
    "TransportError",
    "UnauthorizedError",
]
