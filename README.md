# workos_client

A Python client for the WorkOS API. It manages Single Sign-On (SSO)
connections and builds SSO authorization URLs, reads, lists and deletes
organization memberships, and parses the connection webhooks WorkOS sends
to your application.

## Installation

```
pip install workos_client
```

To run the test suite:

```
pip install "workos_client[test]"
pytest
```

## Creating a client

```python
from workos_client.client import WorkOs

workos = WorkOs("placeholder")
```

The client talks to `https://api.workos.com` unless told otherwise. Use the
builder to point it at a different API host or to swap the API key:

```python
workos = (
    WorkOs.builder("placeholder")
    .base_url("https://auth.example.com")
    .build()
)
```

`WorkOsBuilder.base_url` raises `ValueError` if the value is not an absolute
URL. Every request carries the API key as a bearer token and identifies the
client with a `User-Agent` header of `workos_client/0.2.0`.

## Single Sign-On

```python
from workos_client.sso import Provider, Sso

sso = Sso(workos)

# Build the URL that starts an SSO flow for one connection.
url = sso.get_authorization_url(
    "client_123456789",
    "https://your-app.example.com/callback",
    connection="conn_1234",
)

# Or for an organization, or an OAuth provider, optionally with a state
# value that is passed back to the redirect URI.
url = sso.get_authorization_url(
    "client_123456789",
    "https://your-app.example.com/callback",
    provider=Provider.GOOGLE_OAUTH,
    state="opaque-state",
)

connection = sso.get_connection("conn_01E4ZCR3C56J083X43JQXF3JK5")
print(connection.name, connection.state)

page = sso.list_connections(connection_type="OktaSAML")
for connection in page:
    print(connection.id)

sso.delete_connection("conn_01E2NPPCT7XQ2MVVYDHWGK1WN4")
```

Exactly one of `connection`, `organization` or `provider` must be passed to
`get_authorization_url`; otherwise it raises `ValueError`. The URL is built
locally and no request is sent.

`list_connections` can filter by `organization_id` and by
`connection_type`, given as a `ConnectionType` member or a plain string.

Connection types and states the client does not know are kept as plain
strings on `Connection` rather than rejected, so new values from the API do
not break parsing. The value types (`Connection`, `ConnectionType`,
`ConnectionState`, `Profile` and the ID types) live in
`workos_client.sso_types`.

## Organization memberships

```python
from workos_client.user_management import UserManagement

users = UserManagement(workos)

membership = users.get_organization_membership("org_membership_01EHZNVPK3SFK441A1RGBFSHRT")
print(membership.role.slug, membership.status)

page = users.list_organization_memberships("org_01EHZNVPK3SFK441A1RGBFSHRT")
for membership in page:
    print(membership.user_id)

users.delete_organization_membership("org_membership_01EHZNVPK3SFK441A1RGBFSHRT")
```

The types `User`, `Invitation` and `OrganizationMembership` are in
`workos_client.users`; each has a `from_json` class method that builds it
from a decoded API object.

## Pagination

List calls take a `PaginationParams` from `workos_client.common`, with
`limit`, `before`, `after` and `order` (`Order.DESC` by default):

```python
from workos_client.common import Order, PaginationParams

page = sso.list_connections(PaginationParams(limit=10, order=Order.ASC))
print(len(page), page.metadata.after)
```

They return a `PaginatedList`, which can be iterated and measured with
`len`, and whose `metadata` holds the `before` and `after` cursors for the
neighbouring pages.

## Webhooks

```python
from workos_client.webhooks import ConnectionActivated, parse_webhook

webhook = parse_webhook(request_body)
if isinstance(webhook.event, ConnectionActivated):
    print(webhook.id, webhook.event.connection.name)
```

`parse_webhook` accepts the raw JSON body of a webhook request (as `str` or
`bytes`) or an already decoded object, and returns a `Webhook` with its `id`
and a typed event: `ConnectionActivated`, `ConnectionDeactivated` or
`ConnectionDeleted`, each holding the `Connection`. Malformed payloads and
unknown event names raise `ValueError`.

## Errors

Failures while talking to the API raise a subclass of
`workos_client.client.WorkOsError`:

- `UnauthorizedError` when the API answers 401;
- `ApiError` for any other status of 400 or above, with `status` and `body`;
- `WorkOsError` itself for network failures and responses that are not valid JSON.

```python
from workos_client.client import UnauthorizedError

try:
    sso.get_connection("conn_01E4ZCR3C56J083X43JQXF3JK5")
except UnauthorizedError:
    print("check the API key")
```

## What it does not do

- There are no operations for exchanging an authorization code for a
  profile or access token; `Profile`, `AccessToken` and `AuthorizationCode`
  are types only.
- User management covers organization memberships only: there is no call
  to fetch users or to send or read invitations, though `User` and
  `Invitation` can be parsed from JSON you already have.
- There is no support for organizations, directory sync, multi-factor
  authentication or the admin portal.
- Webhook parsing knows only the three connection events; directory events
  are rejected as unknown. Webhook signatures are not verified.
- All calls are synchronous.