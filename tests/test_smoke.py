"""Smoke test to verify the project scaffolding works."""

from __future__ import annotations


def test_import() -> None:
    import asmscope

    assert asmscope.__version__ == "0.1.0"


def test_cli_entrypoint() -> None:
    from asmscope.cli import main

    assert callable(main)


def test_package_imports() -> None:
    from asmscope.config import AppConfig, ConfigLoader
    from asmscope.core.graph import PathFinder
    from asmscope.core.metadata import SnapshotMetadataProvider
    from asmscope.core.paging import decode_cursor, encode_cursor
    from asmscope.protocols.mcp import MCPHttpClient, RequestDispatcher
    from asmscope.server import MCPServer, create_app
    from asmscope.tools import ToolRegistry

    assert all(
        obj is not None
        for obj in (
            AppConfig,
            ConfigLoader,
            PathFinder,
            SnapshotMetadataProvider,
            decode_cursor,
            encode_cursor,
            MCPHttpClient,
            RequestDispatcher,
            MCPServer,
            create_app,
            ToolRegistry,
        )
    )


def test_lazy_import_from_asmscope() -> None:
    import asmscope

    assert asmscope.ToolRegistry is not None
    assert asmscope.MCPServer is not None
