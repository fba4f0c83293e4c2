"""User management value types: users, invitations and organization memberships."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from workos_client.common import Timestamps, parse_timestamp


class UserId(str):
    """The ID of a :class:`User`."""


class InvitationId(str):
    """The ID of an :class:`Invitation`."""


class OrganizationMembershipId(str):
    """The ID of an :class:`OrganizationMembership`."""


def _optional_timestamp(value: Any) -> datetime | None:
    return None if value is None else parse_timestamp(value)


@dataclass(frozen=True)
class User:
    """A user managed by the API."""

    id: UserId
    email: str
    first_name: str
    last_name: str
    email_verified: bool
    metadata: Any
    timestamps: Timestamps
    profile_picture_url: str | None = None
    last_sign_in_at: datetime | None = None
    external_id: str | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> User:
        return cls(
            id=UserId(data["id"]),
            email=data["email"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            email_verified=bool(data["email_verified"]),
            metadata=data["metadata"],
            timestamps=Timestamps.from_json(data),
            profile_picture_url=data.get("profile_picture_url"),
            last_sign_in_at=_optional_timestamp(data.get("last_sign_in_at")),
            external_id=data.get("external_id"),
        )


class InvitationState(str, enum.Enum):
    """The state of an :class:`Invitation`."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REVOKED = "revoked"
    EXPIRED = "expired"


@dataclass(frozen=True)
class Invitation:
    """An invitation for a user to join an organization."""

    id: InvitationId
    email: str
    state: InvitationState
    organization_id: str
    inviter_user_id: UserId
    token: str
    accept_invitation_url: str
    expires_at: datetime
    timestamps: Timestamps
    accepted_at: datetime | None = None
    revoked_at: datetime | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Invitation:
        return cls(
            id=InvitationId(data["id"]),
            email=data["email"],
            state=InvitationState(data["state"]),
            organization_id=data["organization_id"],
            inviter_user_id=UserId(data["inviter_user_id"]),
            token=data["token"],
            accept_invitation_url=data["accept_invitation_url"],
            expires_at=parse_timestamp(data["expires_at"]),
            timestamps=Timestamps.from_json(data),
            accepted_at=_optional_timestamp(data.get("accepted_at")),
            revoked_at=_optional_timestamp(data.get("revoked_at")),
        )


class OrganizationMembershipStatus(str, enum.Enum):
    """The status of an :class:`OrganizationMembership`."""

    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass(frozen=True)
class OrganizationRole:
    """The role of a user in an organization."""

    slug: str


@dataclass(frozen=True)
class OrganizationMembership:
    """The membership of a user in an organization."""

    id: OrganizationMembershipId
    user_id: UserId
    organization_id: str
    role: OrganizationRole
    status: OrganizationMembershipStatus
    timestamps: Timestamps

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> OrganizationMembership:
        return cls(
            id=OrganizationMembershipId(data["id"]),
            user_id=UserId(data["user_id"]),
            organization_id=data["organization_id"],
            role=OrganizationRole(slug=data["role"]["slug"]),
            status=OrganizationMembershipStatus(data["status"]),
            timestamps=Timestamps.from_json(data),
        )