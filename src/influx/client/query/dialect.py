# influx/client/query/dialect.py
"""
Result formatting options sent alongside a query.

The server answers queries with annotated CSV; a dialect controls the
delimiter, quoting, header row, annotation rows and comment prefix.
``EMPTY_DIALECT`` carries no options at all and serializes to ``None`` so
that the ``dialect`` key is left out of the request and the server
applies its own defaults.
"""
from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import ConfigDict, Field, field_validator

from influx.client.core.validation import RequestModel

Annotation = Literal["datatype", "group", "default"]


class QueryDialect(RequestModel):
    """Immutable dialect value; build it with :meth:`builder` or keywords."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    quote_char: str | None = Field(default=None, alias="quoteChar")
    comment_prefix: str | None = Field(default=None, alias="commentPrefix")
    delimiter: str | None = None
    header: bool | None = None
    annotations: tuple[Annotation, ...] | None = None

    @field_validator("delimiter", "quote_char")
    @classmethod
    def validate_single_char(cls, v: str | None) -> str | None:
        if v is not None and len(v) != 1:
            raise ValueError("must be exactly one character")
        return v

    @field_validator("comment_prefix")
    @classmethod
    def validate_comment_prefix(cls, v: str | None) -> str | None:
        if v is not None and len(v) > 1:
            raise ValueError("must be at most one character")
        return v

    @classmethod
    def builder(cls) -> DialectBuilder:
        return DialectBuilder()

    @property
    def is_empty(self) -> bool:
        return self.to_dict() is None

    def to_dict(self) -> dict[str, Any] | None:
        """Wire representation: only the fields that were set, or ``None``."""
        data = self.model_dump(
            by_alias=True, exclude_unset=True, exclude_none=True, mode="json"
        )
        return data or None

    def to_json(self) -> str | None:
        data = self.to_dict()
        if data is None:
            return None
        return json.dumps(data)

    def __str__(self) -> str:
        return self.to_json() or ""


class DialectBuilder:
    """Fluent builder for :class:`QueryDialect`."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def header(self, header: bool) -> DialectBuilder:
        self._values["header"] = header
        return self

    def delimiter(self, delimiter: str) -> DialectBuilder:
        self._values["delimiter"] = delimiter
        return self

    def quote_char(self, quote_char: str) -> DialectBuilder:
        self._values["quote_char"] = quote_char
        return self

    def comment_prefix(self, comment_prefix: str) -> DialectBuilder:
        self._values["comment_prefix"] = comment_prefix
        return self

    def annotations(self, annotations: list[str] | tuple[str, ...]) -> DialectBuilder:
        self._values["annotations"] = tuple(annotations)
        return self

    def build(self) -> QueryDialect:
        return QueryDialect(**self._values)


DEFAULT_DIALECT = (
    QueryDialect.builder()
    .header(True)
    .delimiter(",")
    .quote_char('"')
    .comment_prefix("#")
    .annotations(["datatype", "group", "default"])
    .build()
)

EMPTY_DIALECT = QueryDialect()
