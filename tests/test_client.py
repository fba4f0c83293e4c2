import pytest
import responses
from responses import matchers

from workos_client.client import (
    USER_AGENT,
    ApiError,
    UnauthorizedError,
    WorkOs,
    WorkOsError,
)

SERVER = "http://localhost:8000"


@pytest.fixture
def mocked():
    with responses.RequestsMock() as rsps:
        yield rsps


def test_it_supports_setting_the_base_url_through_the_builder():
    workos = WorkOs.builder("placeholder").base_url("https://auth.your-app.com").build()
    assert workos.base_url == "https://auth.your-app.com/"


def test_it_supports_setting_the_api_key_through_the_builder():
    workos = WorkOs.builder("placeholder").key("secret").build()
    assert workos.key == "secret"


def test_default_base_url():
    workos = WorkOs("placeholder")
    assert workos.url("/sso/authorize") == "https://api.workos.com/sso/authorize"


def test_invalid_base_url_is_rejected():
    with pytest.raises(ValueError):
        WorkOs.builder("placeholder").base_url("not a url")


def test_url_replaces_base_path():
    workos = WorkOs("placeholder", "https://auth.your-app.com/api/")
    assert workos.url("/connections/conn_1") == "https://auth.your-app.com/connections/conn_1"


def test_it_sets_the_user_agent_header_on_the_client(mocked):
    mocked.add(
        responses.GET,
        f"{SERVER}/health",
        body="User-Agent correctly set",
        status=200,
        match=[matchers.header_matcher({"User-Agent": USER_AGENT})],
    )
    workos = WorkOs.builder("placeholder").base_url(SERVER).build()
    response = workos.request("GET", "/health")
    assert response.text == "User-Agent correctly set"
    assert USER_AGENT.startswith("workos_client/")


def test_request_sends_bearer_key_and_params(mocked):
    mocked.add(
        responses.GET,
        f"{SERVER}/connections",
        json={"ok": True},
        status=200,
        match=[
            matchers.header_matcher({"Authorization": "Bearer placeholder"}),
            matchers.query_param_matcher({"order": "desc"}),
        ],
    )
    workos = WorkOs("placeholder", SERVER)
    assert workos.request("GET", "/connections", {"order": "desc"}).json() == {"ok": True}


def test_unauthorized_raises(mocked):
    mocked.add(
        responses.GET, f"{SERVER}/connections/x", json={"message": "Unauthorized"}, status=401
    )
    workos = WorkOs("placeholder", SERVER)
    with pytest.raises(UnauthorizedError):
        workos.request("GET", "/connections/x")


def test_other_error_status_raises_api_error(mocked):
    mocked.add(responses.DELETE, f"{SERVER}/connections/x", body="boom", status=500)
    workos = WorkOs("placeholder", SERVER)
    with pytest.raises(ApiError) as info:
        workos.request("DELETE", "/connections/x")
    assert info.value.status == 500
    assert info.value.body == "boom"
    assert isinstance(info.value, WorkOsError)


def test_connection_failure_raises_workos_error(mocked):
    workos = WorkOs("placeholder", SERVER)
    with pytest.raises(WorkOsError):
        workos.request("GET", "/nowhere")