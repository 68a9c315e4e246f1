# influx/client/platform.py
"""
Entry point wiring the resource clients from :class:`Settings`.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from influx.client.buckets.api import BucketsApiClient
from influx.client.core.auth.provider import StaticTokenProvider, TokenProvider
from influx.client.core.config import Settings
from influx.client.core.http import ApiClient
from influx.client.organizations import OrganizationClient
from influx.client.query.client import QueryClient

logger = logging.getLogger(__name__)


class PlatformClient:
    """Facade over the platform API.

    Usage::

        async with PlatformClient() as client:
            bucket = await client.buckets.create_bucket("metrics", "my-org")
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        token_provider: TokenProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or Settings()
        if token_provider is None and self.settings.token:
            token_provider = StaticTokenProvider(self.settings.token)

        self.api = ApiClient(
            base_url=self.settings.url,
            token_provider=token_provider,
            timeout=self.settings.timeout,
            transport=transport,
        )
        self.organizations = OrganizationClient(self.api)
        self.buckets = BucketsApiClient(self.api, organizations=self.organizations)
        self.query = QueryClient(self.api, org=self.settings.org)
        logger.debug("Platform client configured for %s", self.api.base_url)

    async def health(self) -> dict[str, Any]:
        resp = await self.api.request("GET", "/health")
        return resp.json()

    async def aclose(self) -> None:
        # connections are opened per request; nothing is held between calls
        return None

    async def __aenter__(self) -> PlatformClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()
