# influx/client/core/http.py
"""
Thin async HTTP transport for the platform REST API.

Every call opens a short-lived ``httpx.AsyncClient``; pooling, retries
and backoff are left to whatever ``transport`` the caller injects.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable
from urllib.parse import quote

import httpx

from influx.client.core.auth.provider import TokenProvider
from influx.client.core.exceptions import TransportError, error_for_status

logger = logging.getLogger(__name__)


class ApiClient:
    """HTTP collaborator shared by the resource clients.

    Contract::

        Authorization: Token <token>
        2xx            -> httpx.Response
        non-2xx        -> InfluxClientError subclass
    """

    def __init__(
        self,
        *,
        base_url: str,
        token_provider: TokenProvider | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base = base_url.rstrip("/")
        self._token_provider = token_provider
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base

    async def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if not self._token_provider:
            return headers
        token = await self._token_provider.get_token()
        headers["Authorization"] = f"Token {token.access_token}"
        return headers

    async def request(
        self,
        method: str,
        path: str,
        *,
        json: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        expected: Iterable[int] | None = None,
    ) -> httpx.Response:
        merged = await self._headers()
        if headers:
            merged.update(headers)
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        url = f"{self._base}{path}"
        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            try:
                resp = await client.request(
                    method, url, json=json, params=params or None, headers=merged
                )
            except httpx.TransportError as ex:
                logger.warning("Transport failure %s %s: %s", method, url, ex)
                raise TransportError(str(ex) or type(ex).__name__) from ex

        ok = resp.status_code in expected if expected else resp.is_success
        if not ok:
            message = _error_message(resp)
            logger.warning(
                "Request failed %s %s status=%s reason=%s",
                method,
                url,
                resp.status_code,
                message,
            )
            raise error_for_status(resp.status_code, message)

        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return resp

    async def get_json(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        resp = await self.request("GET", path, params=params)
        return resp.json()

    async def post_json(
        self, path: str, body: Any, *, params: dict[str, Any] | None = None
    ) -> Any:
        resp = await self.request("POST", path, json=body, params=params)
        return resp.json()

    async def patch_json(self, path: str, body: Any) -> Any:
        resp = await self.request("PATCH", path, json=body)
        return resp.json()

    async def delete(self, path: str) -> None:
        await self.request("DELETE", path)


def path_segment(value: str) -> str:
    """Percent-encode one URL path segment, including any slashes."""
    return quote(value, safe="")


def _error_message(resp: httpx.Response) -> str:
    """Prefer the server's ``{"code", "message"}`` body, fall back to raw text."""
    try:
        payload = resp.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and payload.get("message"):
        code = payload.get("code")
        return f"{code}: {payload['message']}" if code else str(payload["message"])
    return resp.text or resp.reason_phrase
