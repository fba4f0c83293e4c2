"""User management operations on organization memberships."""

from __future__ import annotations

from typing import Any

from workos_client.client import WorkOs, WorkOsError
from workos_client.common import PaginatedList, PaginationParams
from workos_client.users import OrganizationMembership

_MEMBERSHIPS_PATH = "/user_management/organization_memberships"


def _json(response: Any) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise WorkOsError(f"invalid JSON in response: {exc}") from exc


class UserManagement:
    """User management operations bound to a client."""

    def __init__(self, client: WorkOs) -> None:
        self.client = client

    def get_organization_membership(
        self, organization_membership_id: str
    ) -> OrganizationMembership:
        """Retrieve an organization membership by its ID."""
        response = self.client.request(
            "GET", f"{_MEMBERSHIPS_PATH}/{organization_membership_id}"
        )
        return OrganizationMembership.from_json(_json(response))

    def delete_organization_membership(self, organization_membership_id: str) -> None:
        """Delete an organization membership."""
        self.client.request(
            "DELETE", f"{_MEMBERSHIPS_PATH}/{organization_membership_id}"
        )

    def list_organization_memberships(
        self,
        organization_id: str,
        pagination: PaginationParams | None = None,
    ) -> PaginatedList[OrganizationMembership]:
        """Retrieve one page of the memberships of an organization."""
        params = {"organization_id": str(organization_id)}
        params.update((pagination or PaginationParams()).to_query())
        response = self.client.request("GET", _MEMBERSHIPS_PATH, params=params)
        return PaginatedList.from_json(_json(response), OrganizationMembership.from_json)