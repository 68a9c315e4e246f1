from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, field_validator

from influx.client.core.validation import RequestModel
from influx.client.query.dialect import QueryDialect


class RequestQuery(RequestModel):
    """Query text plus optional dialect, as posted to ``/api/v2/query``.

    ``dialect=None`` (or ``EMPTY_DIALECT``) lets the server pick its default.
    """

    model_config = ConfigDict(validate_assignment=True)

    query: str
    dialect: QueryDialect | None = None

    def __init__(
        self, query: str | None = None, dialect: QueryDialect | None = None, **data: Any
    ) -> None:
        super().__init__(query=query, dialect=dialect, **data)

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Query cannot be empty")
        return v

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"query": self.query, "type": "flux"}
        dialect = self.dialect.to_dict() if self.dialect is not None else None
        if dialect is not None:
            body["dialect"] = dialect
        return body
