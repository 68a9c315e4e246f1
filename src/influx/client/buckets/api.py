# influx/client/buckets/api.py
"""
HTTP implementation of :class:`BucketClient` on top of ``/api/v2/buckets``.
"""
from __future__ import annotations

import logging

from influx.client.buckets.client import (
    BucketClient,
    BucketRef,
    OrganizationRef,
    UserRef,
    resource_id,
)
from influx.client.core.exceptions import NotFoundError, RequestValidationError
from influx.client.core.http import ApiClient, path_segment
from influx.client.domain.models import (
    Bucket,
    MemberRole,
    Organization,
    ResourceMember,
    RetentionRule,
)
from influx.client.organizations import OrganizationClient

logger = logging.getLogger(__name__)

_BASE = "/api/v2/buckets"


class BucketsApiClient(BucketClient):
    """
    Bucket management over REST.

    Contract::

        POST   /api/v2/buckets                      create
        PATCH  /api/v2/buckets/{id}                 update
        DELETE /api/v2/buckets/{id}                 delete (404 ignored)
        GET    /api/v2/buckets[/{id}]               find
        GET    /api/v2/buckets/{id}/{members|owners}
        POST   /api/v2/buckets/{id}/{members|owners}          body: {id}
        DELETE /api/v2/buckets/{id}/{members|owners}/{userID}
    """

    def __init__(
        self,
        api: ApiClient,
        *,
        organizations: OrganizationClient | None = None,
    ) -> None:
        self._api = api
        self._organizations = organizations or OrganizationClient(api)

    async def create_bucket(
        self,
        bucket: Bucket | str,
        organization: OrganizationRef | None = None,
        *,
        retention_rule: RetentionRule | None = None,
    ) -> Bucket:
        if isinstance(bucket, str):
            if organization is None:
                raise RequestValidationError(
                    "An organization is required to create a bucket by name"
                )
            org = await self._resolve_organization(organization)
            bucket = Bucket(
                name=bucket,
                org_id=org.id,
                retention_rules=[retention_rule] if retention_rule else [],
            )
        elif not bucket.org_id:
            raise RequestValidationError(f"Bucket '{bucket.name}' has no orgID")

        payload = await self._api.post_json(_BASE, bucket.to_dict())
        created = Bucket.model_validate(payload)
        logger.info("Created bucket %s (%s)", created.name, created.id)
        return created

    async def update_bucket(self, bucket: Bucket) -> Bucket:
        payload = await self._api.patch_json(_bucket_path(bucket), bucket.to_dict())
        return Bucket.model_validate(payload)

    async def delete_bucket(self, bucket: BucketRef) -> None:
        if await self._delete(_bucket_path(bucket)):
            logger.info("Deleted bucket %s", resource_id(bucket))

    async def find_bucket_by_id(self, bucket_id: str) -> Bucket | None:
        try:
            payload = await self._api.get_json(_bucket_path(bucket_id))
        except NotFoundError:
            logger.debug("Bucket %s not found", bucket_id)
            return None
        return Bucket.model_validate(payload)

    async def find_buckets(self) -> list[Bucket]:
        return await self._list_buckets()

    async def find_buckets_by_organization(
        self, organization: Organization
    ) -> list[Bucket]:
        return await self._list_buckets(orgID=resource_id(organization))

    async def find_buckets_by_organization_name(
        self, organization_name: str | None
    ) -> list[Bucket]:
        return await self._list_buckets(org=organization_name)

    async def get_members(self, bucket: BucketRef) -> list[ResourceMember]:
        return await self._list_relations(bucket, MemberRole.MEMBER)

    async def add_member(self, member: UserRef, bucket: BucketRef) -> ResourceMember:
        return await self._add_relation(member, bucket, MemberRole.MEMBER)

    async def delete_member(self, member: UserRef, bucket: BucketRef) -> None:
        await self._delete_relation(member, bucket, MemberRole.MEMBER)

    async def get_owners(self, bucket: BucketRef) -> list[ResourceMember]:
        return await self._list_relations(bucket, MemberRole.OWNER)

    async def add_owner(self, owner: UserRef, bucket: BucketRef) -> ResourceMember:
        return await self._add_relation(owner, bucket, MemberRole.OWNER)

    async def delete_owner(self, owner: UserRef, bucket: BucketRef) -> None:
        await self._delete_relation(owner, bucket, MemberRole.OWNER)

    # ------------------------------------------------------------------

    async def _resolve_organization(self, organization: OrganizationRef) -> Organization:
        if isinstance(organization, Organization):
            return organization
        org = await self._organizations.find_organization_by_name(organization)
        if org is None:
            raise NotFoundError(f"Organization '{organization}' not found", status_code=404)
        return org

    async def _list_buckets(self, **params: str | None) -> list[Bucket]:
        try:
            payload = await self._api.get_json(_BASE, params=params)
        except NotFoundError:
            # filtering by an unknown organization answers 404
            return []
        return [Bucket.model_validate(b) for b in payload.get("buckets") or []]

    async def _list_relations(
        self, bucket: BucketRef, role: MemberRole
    ) -> list[ResourceMember]:
        payload = await self._api.get_json(_bucket_path(bucket, f"{role.value}s"))
        return [
            ResourceMember.model_validate({"role": role.value, **u})
            for u in payload.get("users") or []
        ]

    async def _add_relation(
        self, user: UserRef, bucket: BucketRef, role: MemberRole
    ) -> ResourceMember:
        path = _bucket_path(bucket, f"{role.value}s")
        body: dict[str, str] = {"id": resource_id(user)}
        if not isinstance(user, str) and user.name:
            body["name"] = user.name
        payload = await self._api.post_json(path, body)
        member = ResourceMember.model_validate({"role": role.value, **payload})
        logger.info("Added %s %s to bucket %s", role.value, member.id, resource_id(bucket))
        return member

    async def _delete_relation(
        self, user: UserRef, bucket: BucketRef, role: MemberRole
    ) -> None:
        path = _bucket_path(bucket, f"{role.value}s", resource_id(user))
        if await self._delete(path):
            logger.info(
                "Removed %s %s from bucket %s", role.value, resource_id(user), resource_id(bucket)
            )

    async def _delete(self, path: str) -> bool:
        """DELETE ``path``; False when the resource was already absent."""
        try:
            await self._api.delete(path)
        except NotFoundError:
            logger.debug("DELETE %s: already absent", path)
            return False
        return True


def _bucket_path(bucket: BucketRef, *segments: str) -> str:
    parts = [resource_id(bucket), *segments]
    return "/".join([_BASE, *(path_segment(p) for p in parts)])
