"""Resources managed through the platform API."""

from influx.client.domain.models import (
    Bucket,
    MemberRole,
    Organization,
    ResourceMember,
    RetentionRule,
    User,
    resource_id,
)

__all__ = [
    "Bucket",
    "MemberRole",
    "Organization",
    "ResourceMember",
    "RetentionRule",
    "User",
    "resource_id",
]
