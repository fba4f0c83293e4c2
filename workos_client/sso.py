"""Single Sign-On operations: authorization URLs and connection management."""

from __future__ import annotations

import enum
from typing import Any
from urllib.parse import quote

from workos_client.client import WorkOs, WorkOsError
from workos_client.common import PaginatedList, PaginationParams
from workos_client.sso_types import Connection, ConnectionType

# Characters left as they are in a query component; everything else is percent-encoded.
_QUERY_SAFE = "!$%&()*+,/:;=?@[\\]^`{|}"


class Provider(str, enum.Enum):
    """An OAuth provider that can be used to initiate SSO."""

    GOOGLE_OAUTH = "GoogleOAuth"
    MICROSOFT_OAUTH = "MicrosoftOAuth"


def _query_value(value: str) -> str:
    return quote(str(value), safe=_QUERY_SAFE)


def _json(response: Any) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise WorkOsError(f"invalid JSON in response: {exc}") from exc


class Sso:
    """Single Sign-On operations bound to a client."""

    def __init__(self, client: WorkOs) -> None:
        self.client = client

    def get_authorization_url(
        self,
        client_id: str,
        redirect_uri: str,
        *,
        connection: str | None = None,
        organization: str | None = None,
        provider: Provider | str | None = None,
        state: str | None = None,
    ) -> str:
        """Return the URL that initiates SSO.

        Exactly one of ``connection``, ``organization`` or ``provider`` selects
        the connection to use; ``ValueError`` is raised otherwise.
        """
        selectors = [
            (name, value)
            for name, value in (
                ("connection", connection),
                ("organization", organization),
                ("provider", provider),
            )
            if value is not None
        ]
        if len(selectors) != 1:
            raise ValueError(
                "exactly one of connection, organization or provider must be given"
            )
        selector_name, selector_value = selectors[0]
        if selector_name == "provider":
            selector_value = Provider(selector_value).value

        pairs = [
            ("response_type", "code"),
            ("client_id", str(client_id)),
            ("redirect_uri", redirect_uri),
            (selector_name, str(selector_value)),
        ]
        if state is not None:
            pairs.append(("state", state))

        query = "&".join(f"{key}={_query_value(value)}" for key, value in pairs)
        return self.client.url(f"/sso/authorize?{query}")

    def get_connection(self, connection_id: str) -> Connection:
        """Retrieve a connection by its ID."""
        response = self.client.request("GET", f"/connections/{connection_id}")
        return Connection.from_json(_json(response))

    def delete_connection(self, connection_id: str) -> None:
        """Delete a connection."""
        self.client.request("DELETE", f"/connections/{connection_id}")

    def list_connections(
        self,
        pagination: PaginationParams | None = None,
        organization_id: str | None = None,
        connection_type: ConnectionType | str | None = None,
    ) -> PaginatedList[Connection]:
        """Retrieve one page of connections, optionally filtered."""
        params = (pagination or PaginationParams()).to_query()
        if organization_id is not None:
            params["organization_id"] = str(organization_id)
        if connection_type is not None:
            if isinstance(connection_type, enum.Enum):
                params["connection_type"] = connection_type.value
            else:
                params["connection_type"] = str(connection_type)
        response = self.client.request("GET", "/connections", params=params)
        return PaginatedList.from_json(_json(response), Connection.from_json)