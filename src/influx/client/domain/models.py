from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from influx.client.core.exceptions import RequestValidationError


class PlatformModel(BaseModel):
    """Base for resources exchanged with the platform API (camelCase on the wire)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class RetentionRule(PlatformModel):
    type: Literal["expire"] = "expire"
    # 0 means infinite retention
    every_seconds: int = Field(..., ge=0, alias="everySeconds")


class Organization(PlatformModel):
    id: str
    name: str
    status: str | None = None


class User(PlatformModel):
    id: str
    name: str
    status: str | None = None


class MemberRole(str, Enum):
    MEMBER = "member"
    OWNER = "owner"


class ResourceMember(PlatformModel):
    id: str
    name: str | None = None
    role: MemberRole = MemberRole.MEMBER


class Bucket(PlatformModel):
    id: str | None = None
    name: str = Field(..., min_length=1)
    org_id: str | None = Field(default=None, alias="orgID")
    organization: str | None = None
    description: str | None = None
    rp: str | None = None
    retention_rules: list[RetentionRule] = Field(
        default_factory=list, alias="retentionRules"
    )
    created_at: datetime | None = Field(default=None, alias="createdAt")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Bucket name cannot be blank")
        return v


def resource_id(ref: Bucket | User | ResourceMember | Organization | str) -> str:
    """Return the ID of ``ref``, which may already be an ID."""
    if isinstance(ref, str):
        value = ref
    else:
        value = ref.id
    if not value:
        raise RequestValidationError(f"{type(ref).__name__} has no id")
    return value
