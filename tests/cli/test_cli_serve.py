"""Tests for ``asmscope serve``."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner
from starlette.testclient import TestClient

from asmscope.cli import main
from asmscope.cli_commands.serve import build_server
from asmscope.config import AppConfig


def _write_snapshot(tmp_path: Path) -> Path:
    path = tmp_path / "engine.json"
    path.write_text(
        json.dumps({"assemblies": [{"name": "Engine", "modules": [{"name": "Engine.dll", "types": [
            {"namespace": "Engine", "name": "Vector3"}
        ]}]}]}),
        encoding="utf-8",
    )
    return path


class TestBuildServer:
    def test_wires_snapshots_and_resources(self, tmp_path: Path) -> None:
        docs = tmp_path / "docs"
        docs.mkdir()
        (docs / "guide.md").write_text("# Guide\n", encoding="utf-8")
        config = AppConfig(snapshots=[str(_write_snapshot(tmp_path))], resources_dir=str(docs))

        server = build_server(config)
        client = TestClient(server.app)

        call = client.post(
            "/",
            json={"jsonrpc": "2.0", "id": 1, "method": "tools/call",
                  "params": {"name": "list_types", "arguments": {"assembly_name": "engine"}}},
        ).json()
        assert "Engine.Vector3" in call["result"]["content"][0]["text"]

        listed = client.post("/", json={"jsonrpc": "2.0", "id": 2, "method": "resources/list"}).json()
        assert listed["result"]["resources"][0]["uri"] == "docs://guide"

    def test_requests_reach_log_buffer_at_default_verbosity(self) -> None:
        package = logging.getLogger("asmscope")
        package.setLevel(logging.NOTSET)
        server = build_server(AppConfig())
        try:
            TestClient(server.app).post("/", json={"jsonrpc": "2.0", "id": 1, "method": "ping"})
            assert any("MCP request: ping" in line for line in server.log_buffer.messages)
        finally:
            package.removeHandler(server.log_buffer)

    def test_log_capacity(self) -> None:
        server = build_server(AppConfig(log_capacity=7))
        assert server.log_buffer.capacity == 7


class TestServeCommand:
    def test_starts_and_waits(self, tmp_path: Path) -> None:
        snapshot = _write_snapshot(tmp_path)
        with patch("asmscope.cli_commands.serve.MCPServer") as mock_server_cls:
            instance = mock_server_cls.return_value
            instance.enabled = True
            instance.address = "http://localhost:4555"

            result = CliRunner().invoke(main, ["serve", "--snapshot", str(snapshot), "--port", "4555"])

        assert result.exit_code == 0, result.output
        assert "Serving MCP on http://localhost:4555" in result.output
        instance.start.assert_called_once()
        instance.wait.assert_called_once()
        settings = mock_server_cls.call_args.args[0]
        assert settings.port == 4555

    def test_disabled_in_config(self, tmp_path: Path) -> None:
        config = tmp_path / "asmscope.yaml"
        config.write_text("server:\n  enabled: false\n", encoding="utf-8")
        with patch("asmscope.cli_commands.serve.MCPServer") as mock_server_cls:
            mock_server_cls.return_value.enabled = False
            result = CliRunner().invoke(main, ["serve", "--config", str(config)])

        assert result.exit_code == 0
        assert "disabled" in result.output
        mock_server_cls.return_value.start.assert_not_called()

    def test_bad_config(self, tmp_path: Path) -> None:
        config = tmp_path / "asmscope.yaml"
        config.write_text("page_size: -1\n", encoding="utf-8")
        result = CliRunner().invoke(main, ["serve", "--config", str(config)])
        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_bad_snapshot(self, tmp_path: Path) -> None:
        snapshot = tmp_path / "broken.yaml"
        snapshot.write_text("- not\n- a mapping\n", encoding="utf-8")
        result = CliRunner().invoke(main, ["serve", "--snapshot", str(snapshot)])
        assert result.exit_code == 1
        assert "Snapshot error" in result.output
