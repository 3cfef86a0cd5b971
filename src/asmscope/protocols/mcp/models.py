"""MCP models — JSON-RPC 2.0 messages and protocol payloads.

Implements the message format used by the Model Context Protocol for
the server handshake (``initialize``), tool discovery (``tools/list``),
tool execution (``tools/call``) and documentation resources
(``resources/list`` / ``resources/read``).

Null-valued optional fields are never put on the wire: every payload is
rendered through :meth:`McpModel.to_wire`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

JSONRPC_VERSION = "2.0"
PROTOCOL_VERSION = "2024-11-05"

METHOD_NOT_FOUND = -32601
INTERNAL_ERROR = -32603


class McpModel(BaseModel):
    """Base for wire models: camelCase aliases, nulls dropped on output."""

    model_config = ConfigDict(populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Serialize with wire aliases, omitting ``None`` fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------


class JsonRpcRequest(McpModel):
    """A JSON-RPC 2.0 request message."""

    jsonrpc: str = JSONRPC_VERSION
    method: str
    id: int | str | None = None
    params: dict[str, Any] | None = None


class JsonRpcError(McpModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(McpModel):
    """A JSON-RPC 2.0 response message carrying exactly one of result/error."""

    jsonrpc: str = JSONRPC_VERSION
    id: int | str | None = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _exactly_one_outcome(self) -> JsonRpcResponse:
        if (self.result is None) == (self.error is None):
            msg = "response must carry exactly one of 'result' or 'error'"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, request_id: int | str | None, result: dict[str, Any]) -> JsonRpcResponse:
        return cls(id=request_id, result=result)

    @classmethod
    def failure(
        cls,
        request_id: int | str | None,
        code: int,
        message: str,
        data: Any = None,
    ) -> JsonRpcResponse:
        return cls(id=request_id, error=JsonRpcError(code=code, message=message, data=data))


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class MCPToolDef(McpModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str
    description: str = ""
    input_schema: dict[str, Any] = Field(default_factory=dict, alias="inputSchema")


class ToolContent(McpModel):
    """A single text part of a tool result."""

    type: str = "text"
    text: str


class CallToolResult(McpModel):
    """The payload of a ``tools/call`` response."""

    content: list[ToolContent] = []
    is_error: bool = Field(default=False, alias="isError")

    @classmethod
    def from_text(cls, text: str, *, is_error: bool = False) -> CallToolResult:
        """Create a result with a single text content part."""
        return cls(content=[ToolContent(text=text)], is_error=is_error)

    @property
    def text(self) -> str:
        """Concatenated text of all content parts."""
        return "\n".join(part.text for part in self.content)


class ServerInfo(McpModel):
    name: str
    version: str


class ServerCapabilities(McpModel):
    tools: dict[str, Any] = Field(default_factory=dict)
    resources: dict[str, Any] = Field(default_factory=dict)


class InitializeResult(McpModel):
    """The fixed capability descriptor returned by ``initialize``."""

    protocol_version: str = Field(default=PROTOCOL_VERSION, alias="protocolVersion")
    capabilities: ServerCapabilities = Field(default_factory=ServerCapabilities)
    server_info: ServerInfo = Field(alias="serverInfo")


class ListToolsResult(McpModel):
    tools: list[MCPToolDef] = []


class ResourceDef(McpModel):
    """A documentation resource as returned by ``resources/list``."""

    uri: str
    name: str
    description: str | None = None
    mime_type: str = Field(default="text/markdown", alias="mimeType")


class ListResourcesResult(McpModel):
    resources: list[ResourceDef] = []


class ResourceContent(McpModel):
    uri: str
    mime_type: str = Field(default="text/markdown", alias="mimeType")
    text: str


class ReadResourceResult(McpModel):
    contents: list[ResourceContent] = []
