"""Webhook payloads delivered by the API and the events they carry."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Union

from workos_client.sso_types import Connection


class WebhookId(str):
    """The ID of a :class:`Webhook`."""


@dataclass(frozen=True)
class ConnectionActivated:
    """The ``connection.activated`` event."""

    EVENT: ClassVar[str] = "connection.activated"

    connection: Connection


@dataclass(frozen=True)
class ConnectionDeactivated:
    """The ``connection.deactivated`` event."""

    EVENT: ClassVar[str] = "connection.deactivated"

    connection: Connection


@dataclass(frozen=True)
class ConnectionDeleted:
    """The ``connection.deleted`` event."""

    EVENT: ClassVar[str] = "connection.deleted"

    connection: Connection


WebhookEvent = Union[ConnectionActivated, ConnectionDeactivated, ConnectionDeleted]

_EVENT_TYPES: dict[str, type] = {
    kind.EVENT: kind
    for kind in (ConnectionActivated, ConnectionDeactivated, ConnectionDeleted)
}


@dataclass(frozen=True)
class Webhook:
    """A webhook delivery: its ID and the event it carries."""

    id: WebhookId
    event: WebhookEvent

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Webhook:
        """Build a webhook from its decoded JSON body; raises ValueError if malformed."""
        if not isinstance(data, Mapping):
            raise ValueError("webhook payload must be a JSON object")
        try:
            webhook_id = data["id"]
            event_name = data["event"]
            event_data = data["data"]
        except KeyError as exc:
            raise ValueError(f"webhook payload is missing field {exc.args[0]!r}") from exc

        event_type = _EVENT_TYPES.get(event_name)
        if event_type is None:
            raise ValueError(f"unknown webhook event: {event_name!r}")
        try:
            connection = Connection.from_json(event_data)
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid data for event {event_name!r}: {exc}") from exc
        return cls(id=WebhookId(webhook_id), event=event_type(connection))


def parse_webhook(payload: str | bytes | Mapping[str, Any]) -> Webhook:
    """Parse a webhook from a raw JSON body or an already decoded object."""
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid webhook JSON: {exc}") from exc
    return Webhook.from_json(payload)