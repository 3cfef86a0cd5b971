"""MCP protocol — Model Context Protocol over HTTP."""

from asmscope.protocols.mcp.client import MCPHttpClient
from asmscope.protocols.mcp.dispatcher import RequestDispatcher
from asmscope.protocols.mcp.models import (
    CallToolResult,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    MCPToolDef,
    ResourceDef,
)

__all__ = [
    "CallToolResult",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MCPHttpClient",
    "MCPToolDef",
    "RequestDispatcher",
    "ResourceDef",
]
