# influx/client/organizations.py
"""
Organization lookups, used to resolve organization names when creating buckets.
"""
from __future__ import annotations

import logging

from influx.client.core.exceptions import NotFoundError
from influx.client.core.http import ApiClient, path_segment
from influx.client.domain.models import Organization, resource_id

logger = logging.getLogger(__name__)


class OrganizationClient:
    def __init__(self, api: ApiClient) -> None:
        self._api = api

    async def find_organizations(self, name: str | None = None) -> list[Organization]:
        try:
            payload = await self._api.get_json("/api/v2/orgs", params={"org": name})
        except NotFoundError:
            # the server answers 404 when filtering by an unknown name
            return []
        return [Organization.model_validate(o) for o in payload.get("orgs") or []]

    async def find_organization_by_name(self, name: str) -> Organization | None:
        for org in await self.find_organizations(name):
            if org.name == name:
                return org
        return None

    async def find_organization_by_id(self, org_id: str) -> Organization | None:
        path = f"/api/v2/orgs/{path_segment(resource_id(org_id))}"
        try:
            payload = await self._api.get_json(path)
        except NotFoundError:
            logger.debug("Organization %s not found", org_id)
            return None
        return Organization.model_validate(payload)
