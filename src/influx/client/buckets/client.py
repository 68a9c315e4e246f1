from __future__ import annotations

from abc import ABC, abstractmethod

from influx.client.domain.models import (
    Bucket,
    Organization,
    ResourceMember,
    RetentionRule,
    User,
    resource_id,
)

BucketRef = Bucket | str
UserRef = User | ResourceMember | str
OrganizationRef = Organization | str


class BucketClient(ABC):
    """
    Management of buckets and their member/owner relations.

    Every ``*_ref`` argument accepts either the live resource or its ID.
    """

    @abstractmethod
    async def create_bucket(
        self,
        bucket: Bucket | str,
        organization: OrganizationRef | None = None,
        *,
        retention_rule: RetentionRule | None = None,
    ) -> Bucket: ...

    @abstractmethod
    async def update_bucket(self, bucket: Bucket) -> Bucket: ...

    @abstractmethod
    async def delete_bucket(self, bucket: BucketRef) -> None: ...

    @abstractmethod
    async def find_bucket_by_id(self, bucket_id: str) -> Bucket | None: ...

    @abstractmethod
    async def find_buckets(self) -> list[Bucket]: ...

    @abstractmethod
    async def find_buckets_by_organization(
        self, organization: Organization
    ) -> list[Bucket]: ...

    @abstractmethod
    async def find_buckets_by_organization_name(
        self, organization_name: str | None
    ) -> list[Bucket]: ...

    @abstractmethod
    async def get_members(self, bucket: BucketRef) -> list[ResourceMember]: ...

    @abstractmethod
    async def add_member(self, member: UserRef, bucket: BucketRef) -> ResourceMember: ...

    @abstractmethod
    async def delete_member(self, member: UserRef, bucket: BucketRef) -> None: ...

    @abstractmethod
    async def get_owners(self, bucket: BucketRef) -> list[ResourceMember]: ...

    @abstractmethod
    async def add_owner(self, owner: UserRef, bucket: BucketRef) -> ResourceMember: ...

    @abstractmethod
    async def delete_owner(self, owner: UserRef, bucket: BucketRef) -> None: ...

