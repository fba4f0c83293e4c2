"""Value types used by Single Sign-On: identifiers, connections and profiles."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping

from workos_client.common import Timestamps, parse_known


class AccessToken(str):
    """An access token that may be exchanged for a :class:`Profile`."""


class AuthorizationCode(str):
    """An authorization code that may be exchanged for a profile and access token."""


class ClientId(str):
    """The client ID of an environment, used to initiate SSO."""


class ConnectionId(str):
    """The ID of a :class:`Connection`."""


class ProfileId(str):
    """The ID of a :class:`Profile`."""


class ConnectionState(str, enum.Enum):
    """The state of a :class:`Connection`."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class ConnectionType(str, enum.Enum):
    """The identity provider type of a :class:`Connection`."""

    AD_FS_SAML = "ADFSSAML"
    ADP_OIDC = "ADPOIDC"
    AUTH0_SAML = "Auth0SAML"
    AZURE_SAML = "AzureSAML"
    CAS_SAML = "CASSAML"
    CLASS_LINK_SAML = "ClassLinkSAML"
    CLOUDFLARE_SAML = "CloudflareSAML"
    CYBER_ARK_SAML = "CyberArkSAML"
    DUO_SAML = "DuoSAML"
    GENERIC_OIDC = "GenericOIDC"
    GENERIC_SAML = "GenericSAML"
    GOOGLE_OAUTH = "GoogleOAuth"
    GOOGLE_SAML = "GoogleSAML"
    JUMP_CLOUD_SAML = "JumpCloudSAML"
    KEYCLOAK_SAML = "KeycloakSAML"
    MICROSOFT_OAUTH = "MicrosoftOAuth"
    MINI_ORANGE_SAML = "MiniOrangeSAML"
    NET_IQ_SAML = "NetIqSAML"
    OKTA_SAML = "OktaSAML"
    ONE_LOGIN_SAML = "OneLoginSAML"
    ORACLE_SAML = "OracleSAML"
    PING_FEDERATE_SAML = "PingFederateSAML"
    PING_ONE_SAML = "PingOneSAML"
    SALESFORCE_SAML = "SalesforceSAML"
    SHIBBOLETH_SAML = "ShibbolethSAML"
    SIMPLE_SAML_PHP_SAML = "SimpleSamlPhpSAML"
    VMWARE_SAML = "VMwareSAML"


def _optional(value: Any, kind: type) -> Any:
    return None if value is None else kind(value)


@dataclass(frozen=True)
class Connection:
    """An SSO connection. ``type`` and ``state`` keep unknown values as plain strings."""

    id: ConnectionId
    organization_id: str | None
    type: ConnectionType | str
    name: str
    state: ConnectionState | str
    timestamps: Timestamps

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Connection:
        return cls(
            id=ConnectionId(data["id"]),
            organization_id=data.get("organization_id"),
            type=parse_known(ConnectionType, data["connection_type"]),
            name=data["name"],
            state=parse_known(ConnectionState, data["state"]),
            timestamps=Timestamps.from_json(data),
        )


@dataclass(frozen=True)
class Profile:
    """A user profile returned by an identity provider."""

    id: ProfileId
    connection_id: ConnectionId
    organization_id: str | None
    connection_type: ConnectionType | str
    idp_id: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    raw_attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Profile:
        return cls(
            id=ProfileId(data["id"]),
            connection_id=ConnectionId(data["connection_id"]),
            organization_id=data.get("organization_id"),
            connection_type=parse_known(ConnectionType, data["connection_type"]),
            idp_id=data["idp_id"],
            email=data["email"],
            first_name=_optional(data.get("first_name"), str),
            last_name=_optional(data.get("last_name"), str),
            raw_attributes=dict(data["raw_attributes"]),
        )