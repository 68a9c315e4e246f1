from influx.client.query.client import QueryClient, parse_csv
from influx.client.query.dialect import (
    DEFAULT_DIALECT,
    EMPTY_DIALECT,
    DialectBuilder,
    QueryDialect,
)
from influx.client.query.request import RequestQuery

__all__ = [
    "DEFAULT_DIALECT",
    "EMPTY_DIALECT",
    "DialectBuilder",
    "QueryClient",
    "QueryDialect",
    "RequestQuery",
    "parse_csv",
]
