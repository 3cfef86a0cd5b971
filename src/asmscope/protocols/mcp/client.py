"""MCPHttpClient — talks to an MCP server over plain HTTP POST.

Used by the ``asmscope tools`` commands to exercise a running server.
"""

from __future__ import annotations

from typing import Any, cast

import httpx

from asmscope.protocols.errors import ConnectionError, RemoteCallError, ToolExecutionError
from asmscope.protocols.mcp.models import (
    PROTOCOL_VERSION,
    CallToolResult,
    InitializeResult,
    JsonRpcRequest,
    JsonRpcResponse,
    MCPToolDef,
)


class MCPHttpClient:
    """Async context manager wrapping :class:`httpx.AsyncClient`.

    Usage::

        async with MCPHttpClient("http://localhost:3000") as client:
            await client.initialize()
            tools = await client.list_tools()
            result = await client.call_tool("list_assemblies", {})
    """

    def __init__(self, base_url: str, *, timeout: float = 30.0) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None
        self._next_id = 1

    async def __aenter__(self) -> MCPHttpClient:
        self._client = httpx.AsyncClient(base_url=self._base_url, timeout=self._timeout)
        return self

    async def __aexit__(self, *_: object) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            msg = "MCPHttpClient must be used as an async context manager"
            raise RuntimeError(msg)
        return self._client

    async def health(self) -> dict[str, Any]:
        """GET ``/health``."""
        try:
            response = await self._http().get("/health")
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise ConnectionError(str(exc)) from exc
        return cast("dict[str, Any]", response.json())

    async def initialize(self) -> InitializeResult:
        result = await self._request(
            "initialize",
            {
                "protocolVersion": PROTOCOL_VERSION,
                "capabilities": {},
                "clientInfo": {"name": "asmscope", "version": "0.1.0"},
            },
        )
        return InitializeResult.model_validate(result)

    async def ping(self) -> None:
        await self._request("ping")

    async def list_tools(self) -> list[MCPToolDef]:
        result = await self._request("tools/list")
        raw_tools = cast("list[dict[str, Any]]", result.get("tools", []))
        return [MCPToolDef.model_validate(raw) for raw in raw_tools]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None = None) -> CallToolResult:
        """Send ``tools/call``.

        A tool-level failure comes back as a result with ``is_error`` set;
        a protocol-level failure raises :class:`ToolExecutionError`.
        """
        try:
            result = await self._request("tools/call", {"name": name, "arguments": arguments or {}})
        except RemoteCallError as exc:
            raise ToolExecutionError(name, str(exc)) from exc
        return CallToolResult.model_validate(result)

    async def _request(self, method: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        """POST a JSON-RPC request and return its ``result``."""
        request = JsonRpcRequest(method=method, id=self._next_id, params=params or {})
        self._next_id += 1

        try:
            response = await self._http().post("/", json=request.to_wire())
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise ConnectionError(str(exc)) from exc

        rpc = JsonRpcResponse.model_validate(response.json())
        if rpc.error is not None:
            raise RemoteCallError(method, rpc.error.code, rpc.error.message, rpc.error.data)
        return rpc.result or {}
