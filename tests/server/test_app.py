"""Tests for the Starlette JSON-RPC endpoint."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
from starlette.testclient import TestClient

from asmscope.core.resources import MarkdownResources
from asmscope.protocols.errors import FramingError
from asmscope.protocols.mcp.dispatcher import RequestDispatcher
from asmscope.server.app import CORS_HEADERS, create_app
from asmscope.tools.registry import ToolRegistry


@pytest.fixture
def client(registry: ToolRegistry, resources: MarkdownResources) -> TestClient:
    dispatcher = RequestDispatcher(registry, resources, server_name="test-server")
    return TestClient(create_app(dispatcher, service_name="test-server"))


def _assert_cors(headers: Any) -> None:
    for name, value in CORS_HEADERS.items():
        assert headers[name] == value


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "test-server"}
        _assert_cors(response.headers)


class TestCors:
    def test_preflight(self, client: TestClient) -> None:
        response = client.options("/")
        assert response.status_code == 200
        _assert_cors(response.headers)

    def test_preflight_any_path(self, client: TestClient) -> None:
        assert client.options("/anything").status_code == 200


class TestRpcEndpoint:
    def test_ping(self, client: TestClient) -> None:
        response = client.post("/", json={"jsonrpc": "2.0", "id": 1, "method": "ping"})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == {"jsonrpc": "2.0", "id": 1, "result": {}}
        _assert_cors(response.headers)

    def test_tool_call(self, client: TestClient) -> None:
        response = client.post(
            "/",
            json={
                "jsonrpc": "2.0",
                "id": "t1",
                "method": "tools/call",
                "params": {"name": "get_type_fields", "arguments": {
                    "assembly_name": "Game.Core",
                    "type_full_name": "Game.PlayerStats",
                    "pattern": "*Bonus*",
                }},
            },
        )
        body = response.json()
        assert body["id"] == "t1"
        assert body["result"]["isError"] is False
        assert "rpBonusMultiplier" in body["result"]["content"][0]["text"]

    def test_unknown_method_is_http_200(self, client: TestClient) -> None:
        response = client.post("/", json={"jsonrpc": "2.0", "id": 2, "method": "bogus/method"})
        assert response.status_code == 200
        assert response.json()["error"]["code"] == -32601

    def test_malformed_body_is_400(self, client: TestClient) -> None:
        response = client.post("/", content=b"{not json", headers={"Content-Type": "application/json"})
        assert response.status_code == 400
        assert response.text == "Invalid request"
        _assert_cors(response.headers)

    def test_missing_method_is_400(self, client: TestClient) -> None:
        response = client.post("/", json={"jsonrpc": "2.0", "id": 1})
        assert response.status_code == 400

    def test_get_root_not_allowed(self, client: TestClient) -> None:
        assert client.get("/").status_code == 405

    def test_unexpected_failure_is_internal_error_envelope(self) -> None:
        dispatcher = MagicMock()
        dispatcher.handle_body.side_effect = RuntimeError("serializer crashed")
        client = TestClient(create_app(dispatcher))

        response = client.post("/", json={"jsonrpc": "2.0", "id": 1, "method": "ping"})
        assert response.status_code == 200
        assert response.json() == {
            "jsonrpc": "2.0",
            "error": {"code": -32603, "message": "Internal error", "data": "serializer crashed"},
        }

    def test_framing_error_from_dispatcher(self) -> None:
        dispatcher = MagicMock()
        dispatcher.handle_body.side_effect = FramingError("nope")
        client = TestClient(create_app(dispatcher))

        assert client.post("/", content=b"{}").status_code == 400
