"""Protocol layer — JSON-RPC/MCP models, dispatch and errors."""

from asmscope.protocols.errors import (
    ConnectionError,
    EntityNotFoundError,
    FramingError,
    InvalidCursorError,
    MethodNotFoundError,
    MissingArgumentError,
    ProtocolError,
    RemoteCallError,
    ToolExecutionError,
    ToolInputError,
    ToolNotFoundError,
)

__all__ = [
    "ConnectionError",
    "EntityNotFoundError",
    "FramingError",
    "InvalidCursorError",
    "MethodNotFoundError",
    "MissingArgumentError",
    "ProtocolError",
    "RemoteCallError",
    "ToolExecutionError",
    "ToolInputError",
    "ToolNotFoundError",
]
