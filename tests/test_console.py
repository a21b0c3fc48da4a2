"""HTML console: state transitions, API client and pages."""

import json

import httpx
import pytest
from fastapi import status

from app.console.client import ApiRequestError, VPCApiClient
from app.console.controller import ConsoleController
from app.console.state import ConsoleState, ConsoleStateError, Phase, empty_form


class TestConsoleState:
    def test_starts_idle(self):
        state = ConsoleState()
        assert state.phase is Phase.IDLE
        assert not state.controls_disabled
        assert state.form == empty_form()

    def test_success_updates_data(self):
        state = ConsoleState(error="old")
        state.begin()
        assert state.is_loading
        assert state.controls_disabled
        assert state.error is None

        state.succeed(vpcs=[{"id": "a"}], notice="done")

        assert state.phase is Phase.IDLE
        assert state.vpcs == [{"id": "a"}]
        assert state.notice == "done"

    def test_failure_keeps_data(self):
        state = ConsoleState(vpcs=[{"id": "a"}], form={**empty_form(), "name": "typed"})
        state.begin()
        state.fail("boom")

        assert state.phase is Phase.IDLE
        assert state.error == "boom"
        assert state.vpcs == [{"id": "a"}]
        assert state.form["name"] == "typed"

    def test_one_request_at_a_time(self):
        state = ConsoleState()
        state.begin()
        with pytest.raises(ConsoleStateError):
            state.begin()

    def test_finish_requires_loading(self):
        with pytest.raises(ConsoleStateError):
            ConsoleState().succeed()
        with pytest.raises(ConsoleStateError):
            ConsoleState().fail("x")


def _api(handler) -> VPCApiClient:
    return VPCApiClient(httpx.Client(base_url="http://api", transport=httpx.MockTransport(handler)))


class TestVPCApiClient:
    def test_list(self):
        api = _api(lambda request: httpx.Response(200, json=[{"id": "a"}]))
        assert api.list_vpcs() == [{"id": "a"}]

    def test_create_drops_blank_description(self):
        seen = {}

        def handler(request):
            seen["body"] = json.loads(request.content)
            return httpx.Response(201, json={"id": "a", **seen["body"]})

        _api(handler).create_vpc(
            {"name": "prod", "cidrBlock": "10.0.0.0/16", "region": "us-east-1", "description": ""}
        )

        assert seen["body"] == {"name": "prod", "cidrBlock": "10.0.0.0/16", "region": "us-east-1"}

    def test_server_message_surfaces(self):
        api = _api(lambda request: httpx.Response(400, json={"error": "VPC validation failed: x"}))
        with pytest.raises(ApiRequestError) as exc_info:
            api.create_vpc({"name": ""})
        assert exc_info.value.message == "VPC validation failed: x"
        assert exc_info.value.status_code == 400

    def test_non_json_error_falls_back_to_reason(self):
        api = _api(lambda request: httpx.Response(502, text="<html>bad gateway</html>"))
        with pytest.raises(ApiRequestError) as exc_info:
            api.list_vpcs()
        assert exc_info.value.message == "Bad Gateway"

    def test_transport_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ApiRequestError) as exc_info:
            _api(handler).list_vpcs()
        assert "connection refused" in exc_info.value.message
        assert exc_info.value.status_code is None

    def test_delete_quotes_id(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.raw_path
            return httpx.Response(200, json={"message": "VPC deleted successfully"})

        assert _api(handler).delete_vpc("a/b") == "VPC deleted successfully"
        assert seen["path"] == b"/vpcs/a%2Fb"


class TestConsoleController:
    def test_create_failure_keeps_form_and_list(self):
        def handler(request):
            if request.method == "POST":
                return httpx.Response(400, json={"error": "VPC validation failed: cidrBlock: Invalid CIDR block format"})
            return httpx.Response(200, json=[{"id": "a", "name": "existing"}])

        state = ConsoleController(_api(handler)).create(
            {"name": "prod", "cidrBlock": "bad", "region": "us-east-1"}
        )

        assert state.phase is Phase.IDLE
        assert state.error == "Error creating VPC: VPC validation failed: cidrBlock: Invalid CIDR block format"
        assert state.form["cidrBlock"] == "bad"
        assert state.vpcs == [{"id": "a", "name": "existing"}]

    def test_create_success_clears_form(self):
        def handler(request):
            if request.method == "POST":
                return httpx.Response(201, json={"id": "a"})
            return httpx.Response(200, json=[{"id": "a"}])

        state = ConsoleController(_api(handler)).create(
            {"name": "prod", "cidrBlock": "10.0.0.0/16", "region": "us-east-1"}
        )

        assert state.error is None
        assert state.notice == "VPC created successfully!"
        assert state.form == empty_form()
        assert state.vpcs == [{"id": "a"}]

    def test_load_failure(self):
        state = ConsoleController(
            _api(lambda request: httpx.Response(500, json={"error": "store unreachable"}))
        ).load()
        assert state.error == "Error fetching VPCs: store unreachable"
        assert not state.controls_disabled


class TestConsolePages:
    def test_empty_list(self, console):
        response = console.get("/console")
        assert response.status_code == status.HTTP_200_OK
        assert "No VPCs found. Create your first VPC above!" in response.text

    def test_create_from_form(self, console):
        response = console.post(
            "/console/vpcs",
            data={"name": "prod", "cidrBlock": "10.0.0.0/16", "region": "us-east-1", "description": "edge"},
        )

        assert response.status_code == status.HTTP_200_OK
        assert "VPC created successfully!" in response.text
        assert "10.0.0.0/16" in response.text
        assert console.get("/vpcs").json()[0]["description"] == "edge"

    def test_create_error_shows_server_message(self, console):
        response = console.post(
            "/console/vpcs", data={"name": "prod", "cidrBlock": "nope", "region": "us-east-1"}
        )

        assert "Error creating VPC: VPC validation failed: cidrBlock: Invalid CIDR block format" in response.text
        assert 'value="nope"' in response.text
        assert console.get("/vpcs").json() == []

    def test_delete_requires_confirmation(self, console, vpc_payload):
        vpc_id = console.post("/vpcs", json=vpc_payload).json()["id"]

        page = console.get(f"/console/vpcs/{vpc_id}/delete")
        assert "Are you sure you want to delete this VPC?" in page.text

        unconfirmed = console.post(
            f"/console/vpcs/{vpc_id}/delete", data={"confirm": "no"}, follow_redirects=False
        )
        assert unconfirmed.status_code == status.HTTP_303_SEE_OTHER
        assert console.get(f"/vpcs/{vpc_id}").status_code == status.HTTP_200_OK

        confirmed = console.post(f"/console/vpcs/{vpc_id}/delete", data={"confirm": "yes"})
        assert "VPC deleted successfully!" in confirmed.text
        assert console.get(f"/vpcs/{vpc_id}").status_code == status.HTTP_404_NOT_FOUND

    def test_delete_unknown_shows_error(self, console):
        response = console.post("/console/vpcs/ghost/delete", data={"confirm": "yes"})
        assert "Error deleting VPC: VPC not found" in response.text

    def test_confirm_unknown_shows_error(self, console):
        response = console.get("/console/vpcs/ghost/delete")
        assert "Error loading VPC: VPC not found" in response.text


def test_console_client_uses_configured_api(monkeypatch):
    from app.config import settings
    from app.dependencies.console import get_console_client

    monkeypatch.setattr(settings, "console_api_base_url", "http://api.internal:9000")
    monkeypatch.setattr(settings, "console_api_timeout_seconds", 2.5)

    dependency = get_console_client()
    api = next(dependency)
    http = api._http
    assert http.base_url.host == "api.internal"
    assert http.base_url.port == 9000
    assert http.timeout.read == 2.5

    with pytest.raises(StopIteration):
        next(dependency)
    assert http.is_closed
