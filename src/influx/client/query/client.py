# influx/client/query/client.py
"""
Query execution against ``POST /api/v2/query``.
"""
from __future__ import annotations

import csv
import io
import logging

from influx.client.core.exceptions import RequestValidationError
from influx.client.core.http import ApiClient
from influx.client.query.dialect import DEFAULT_DIALECT, QueryDialect
from influx.client.query.request import RequestQuery

logger = logging.getLogger(__name__)


class QueryClient:
    """Runs queries and returns the annotated CSV response."""

    def __init__(self, api: ApiClient, *, org: str | None = None) -> None:
        self._api = api
        self._org = org

    async def query_raw(
        self,
        query: str,
        *,
        dialect: QueryDialect | None = DEFAULT_DIALECT,
        org: str | None = None,
    ) -> str:
        org = org or self._org
        if not org:
            raise RequestValidationError("An organization is required to run a query")

        request = RequestQuery(query, dialect)
        resp = await self._api.request(
            "POST",
            "/api/v2/query",
            json=request.to_dict(),
            params={"org": org},
            headers={"Accept": "application/csv"},
        )
        return resp.text

    async def query_rows(
        self,
        query: str,
        *,
        dialect: QueryDialect | None = DEFAULT_DIALECT,
        org: str | None = None,
    ) -> list[dict[str, str]]:
        text = await self.query_raw(query, dialect=dialect, org=org)
        rows = parse_csv(text, dialect or DEFAULT_DIALECT)
        logger.debug("Query returned %d row(s)", len(rows))
        return rows


def parse_csv(text: str, dialect: QueryDialect) -> list[dict[str, str]]:
    """
    Flatten (possibly multi-table) annotated CSV into dict rows.

    Annotation lines (starting with the comment prefix) and blank lines
    separate tables; the first data line of each table is its header and
    later copies of it inside the same table are skipped.
    A dialect without ``header`` yields rows keyed by column index.
    """
    delimiter = dialect.delimiter or ","
    quotechar = dialect.quote_char or '"'
    prefix = dialect.comment_prefix or "#"
    has_header = dialect.header is not False

    rows: list[dict[str, str]] = []
    header: list[str] | None = None
    reader = csv.reader(io.StringIO(text), delimiter=delimiter, quotechar=quotechar)
    for record in reader:
        if not record or all(not cell for cell in record):
            header = None
            continue
        if record[0].startswith(prefix):
            header = None
            continue
        if has_header and header is None:
            header = record
            continue
        if has_header and record == header:
            continue
        keys = header if has_header else [str(i) for i in range(len(record))]
        rows.append(dict(zip(keys, record)))
    return rows
