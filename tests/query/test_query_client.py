# tests/query/test_query_client.py
from __future__ import annotations

import json

import pytest

from influx.client.core.exceptions import RequestValidationError
from influx.client.query.client import QueryClient, parse_csv
from influx.client.query.dialect import DEFAULT_DIALECT, EMPTY_DIALECT, QueryDialect

ANNOTATED_CSV = (
    "#datatype,string,long,string,double\r\n"
    "#group,false,false,true,false\r\n"
    "#default,_result,,,\r\n"
    ",result,table,_measurement,_value\r\n"
    ",,0,cpu,1.5\r\n"
    ",,0,cpu,2.5\r\n"
    "\r\n"
    "#datatype,string,long,string\r\n"
    "#group,false,false,true\r\n"
    "#default,_result,,\r\n"
    ",result,table,host\r\n"
    ",,1,server-a\r\n"
)


def test_parse_annotated_csv_multiple_tables():
    rows = parse_csv(ANNOTATED_CSV, DEFAULT_DIALECT)

    assert rows == [
        {"": "", "result": "", "table": "0", "_measurement": "cpu", "_value": "1.5"},
        {"": "", "result": "", "table": "0", "_measurement": "cpu", "_value": "2.5"},
        {"": "", "result": "", "table": "1", "host": "server-a"},
    ]


def test_parse_honours_delimiter_and_quote():
    dialect = QueryDialect(delimiter=";", quote_char="'", header=True)
    text = "a;b\n'x;y';2\n"

    assert parse_csv(text, dialect) == [{"a": "x;y", "b": "2"}]


def test_parse_without_header_uses_positions():
    dialect = QueryDialect(header=False)

    assert parse_csv("1,2\n3,4\n", dialect) == [
        {"0": "1", "1": "2"},
        {"0": "3", "1": "4"},
    ]


@pytest.mark.asyncio
async def test_query_raw_posts_request(platform, api):
    platform.query_response = "_value\n1\n"
    client = QueryClient(api, org="my-org")

    text = await client.query_raw("buckets()")

    assert text == "_value\n1\n"
    request = platform.requests[-1]
    assert request.url.params["org"] == "my-org"
    assert request.headers["Accept"] == "application/csv"
    body = json.loads(request.content)
    assert body["query"] == "buckets()"
    assert body["dialect"] == DEFAULT_DIALECT.to_dict()


@pytest.mark.asyncio
async def test_query_with_empty_dialect_omits_key(platform, api):
    client = QueryClient(api, org="my-org")

    await client.query_raw("buckets()", dialect=EMPTY_DIALECT)

    assert "dialect" not in json.loads(platform.requests[-1].content)


@pytest.mark.asyncio
async def test_query_rows(platform, api):
    platform.query_response = ANNOTATED_CSV
    client = QueryClient(api)

    rows = await client.query_rows("buckets()", org="my-org")

    assert [r["table"] for r in rows] == ["0", "0", "1"]


@pytest.mark.asyncio
async def test_query_requires_org(api):
    client = QueryClient(api)

    with pytest.raises(RequestValidationError):
        await client.query_raw("buckets()")


@pytest.mark.asyncio
async def test_query_rejects_empty_text(api):
    client = QueryClient(api, org="my-org")

    with pytest.raises(RequestValidationError):
        await client.query_raw("  ")


def test_parse_skips_repeated_header():
    dialect = QueryDialect(header=True)

    assert parse_csv("a,b\n1,2\na,b\n3,4\n", dialect) == [
        {"a": "1", "b": "2"},
        {"a": "3", "b": "4"},
    ]


def test_parse_new_table_needs_separator():
    dialect = QueryDialect(header=True)

    assert parse_csv("a,b\n1,2\n\nc,d\n3,4\n", dialect) == [
        {"a": "1", "b": "2"},
        {"c": "3", "d": "4"},
    ]
    # without a separator the line is data of the current table
    assert parse_csv("a,b\n1,2\nc,d\n3,4\n", dialect)[1] == {"a": "c", "b": "d"}
