import pytest
import responses
from responses import matchers

from workos_client.client import UnauthorizedError, WorkOs
from workos_client.common import PaginationParams
from workos_client.sso import Provider, Sso
from workos_client.sso_types import ConnectionId, ConnectionState, ConnectionType

BASE = "http://api.test"
AUTH = matchers.header_matcher({"Authorization": "Bearer token"})


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def sso():
    return Sso(WorkOs.builder("token").base_url(BASE).build())


def _default_sso():
    return Sso(WorkOs("token"))


CONNECTION_JSON = {
    "object": "connection",
    "id": "conn_01E4ZCR3C56J083X43JQXF3JK5",
    "organization_id": "org_01EHWNCE74X7JSDV0X3SZ3KJNY",
    "connection_type": "GoogleOAuth",
    "name": "Foo Corp",
    "state": "active",
    "created_at": "2021-06-25T19:07:33.155Z",
    "updated_at": "2021-06-25T19:07:33.155Z",
    "domains": [
        {
            "id": "conn_domain_01EHWNFTAFCF3CQAE5A9Q0P1YB",
            "object": "connection_domain",
            "domain": "foo-corp.com",
        }
    ],
}


def test_authorization_url_with_connection_id():
    url = _default_sso().get_authorization_url(
        "client_123456789",
        "https://your-app.com/callback",
        connection="conn_1234",
    )
    assert url == (
        "https://api.workos.com/sso/authorize?response_type=code"
        "&client_id=client_123456789&redirect_uri=https://your-app.com/callback"
        "&connection=conn_1234"
    )


def test_authorization_url_with_organization_id():
    url = _default_sso().get_authorization_url(
        "client_123456789",
        "https://your-app.com/callback",
        organization="org_1234",
    )
    assert url == (
        "https://api.workos.com/sso/authorize?response_type=code"
        "&client_id=client_123456789&redirect_uri=https://your-app.com/callback"
        "&organization=org_1234"
    )


def test_authorization_url_with_provider():
    url = _default_sso().get_authorization_url(
        "client_123456789",
        "https://your-app.com/callback",
        provider=Provider.GOOGLE_OAUTH,
    )
    assert url == (
        "https://api.workos.com/sso/authorize?response_type=code"
        "&client_id=client_123456789&redirect_uri=https://your-app.com/callback"
        "&provider=GoogleOAuth"
    )


def test_authorization_url_with_microsoft_provider_and_state():
    url = _default_sso().get_authorization_url(
        "client_123456789",
        "https://your-app.com/callback",
        provider=Provider.MICROSOFT_OAUTH,
        state="abc",
    )
    assert url.endswith("&provider=MicrosoftOAuth&state=abc")


def test_authorization_url_encodes_spaces():
    url = _default_sso().get_authorization_url(
        "client_123456789",
        "https://your-app.com/callback",
        connection="conn_1234",
        state="a b",
    )
    assert url.endswith("&state=a%20b")


def test_authorization_url_requires_a_selector():
    with pytest.raises(ValueError):
        _default_sso().get_authorization_url(
            "client_123456789", "https://your-app.com/callback"
        )


def test_authorization_url_rejects_two_selectors():
    with pytest.raises(ValueError):
        _default_sso().get_authorization_url(
            "client_123456789",
            "https://your-app.com/callback",
            connection="conn_1234",
            organization="org_1234",
        )


def test_delete_connection(mocked, sso):
    mocked.add(
        responses.DELETE,
        f"{BASE}/connections/conn_01E2NPPCT7XQ2MVVYDHWGK1WN4",
        status=202,
        match=[AUTH],
    )
    result = sso.delete_connection(ConnectionId("conn_01E2NPPCT7XQ2MVVYDHWGK1WN4"))
    assert result is None
    assert len(mocked.calls) == 1


def test_get_connection(mocked, sso):
    mocked.add(
        responses.GET,
        f"{BASE}/connections/conn_01E4ZCR3C56J083X43JQXF3JK5",
        json=CONNECTION_JSON,
        status=200,
        match=[AUTH],
    )
    connection = sso.get_connection(ConnectionId("conn_01E4ZCR3C56J083X43JQXF3JK5"))
    assert connection.id == ConnectionId("conn_01E4ZCR3C56J083X43JQXF3JK5")
    assert connection.type is ConnectionType.GOOGLE_OAUTH
    assert connection.state is ConnectionState.ACTIVE


def test_get_connection_unauthorized(mocked, sso):
    mocked.add(
        responses.GET,
        f"{BASE}/connections/conn_01E4ZCR3C56J083X43JQXF3JK5",
        json={"message": "Unauthorized"},
        status=401,
        match=[AUTH],
    )
    with pytest.raises(UnauthorizedError):
        sso.get_connection("conn_01E4ZCR3C56J083X43JQXF3JK5")


def _listing(*connections):
    return {
        "data": list(connections),
        "list_metadata": {
            "after": "conn_01E2NPPCT7XQ2MVVYDHWGK1WN4",
            "before": None,
        },
    }


OKTA_JSON = {
    "object": "connection",
    "id": "conn_01E2NPPCT7XQ2MVVYDHWGK1WN4",
    "organization_id": "org_01EHWNCE74X7JSDV0X3SZ3KJNY",
    "connection_type": "OktaSAML",
    "name": "Example Co",
    "state": "active",
    "created_at": "2021-06-25T19:09:33.155Z",
    "updated_at": "2021-06-25T19:10:33.155Z",
}


def test_list_connections(mocked, sso):
    mocked.add(
        responses.GET,
        f"{BASE}/connections",
        json=_listing(CONNECTION_JSON, OKTA_JSON),
        status=200,
        match=[AUTH, matchers.query_param_matcher({"order": "desc"})],
    )
    page = sso.list_connections()
    assert page.metadata.after == "conn_01E2NPPCT7XQ2MVVYDHWGK1WN4"
    assert page.metadata.before is None
    assert [c.id for c in page.data] == [
        "conn_01E4ZCR3C56J083X43JQXF3JK5",
        "conn_01E2NPPCT7XQ2MVVYDHWGK1WN4",
    ]


def test_list_connections_with_connection_type(mocked, sso):
    mocked.add(
        responses.GET,
        f"{BASE}/connections",
        json=_listing(OKTA_JSON),
        status=200,
        match=[
            AUTH,
            matchers.query_param_matcher(
                {"order": "desc", "connection_type": "OktaSAML"}
            ),
        ],
    )
    page = sso.list_connections(connection_type=ConnectionType.OKTA_SAML)
    assert next(iter(page.data)).id == ConnectionId("conn_01E2NPPCT7XQ2MVVYDHWGK1WN4")


def test_list_connections_with_organization_and_pagination(mocked, sso):
    mocked.add(
        responses.GET,
        f"{BASE}/connections",
        json=_listing(OKTA_JSON),
        status=200,
        match=[
            AUTH,
            matchers.query_param_matcher(
                {
                    "order": "desc",
                    "limit": "5",
                    "organization_id": "org_01EHWNCE74X7JSDV0X3SZ3KJNY",
                    "connection_type": "UnknownType",
                }
            ),
        ],
    )
    page = sso.list_connections(
        PaginationParams(limit=5),
        organization_id="org_01EHWNCE74X7JSDV0X3SZ3KJNY",
        connection_type="UnknownType",
    )
    assert len(page) == 1
    assert page.data[0].type is ConnectionType.OKTA_SAML