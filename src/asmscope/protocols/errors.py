"""Shared error types for the protocol layer."""

from __future__ import annotations

from typing import Any


class ProtocolError(Exception):
    """Base error for all protocol-layer failures."""


class FramingError(ProtocolError):
    """The request body is not a JSON-RPC envelope.

    Reported at the HTTP level (status 400), never as a JSON-RPC error.
    """

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Invalid request" + (f": {detail}" if detail else ""))


class MethodNotFoundError(ProtocolError):
    """The JSON-RPC method is not served by this dispatcher."""

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__(f"Unknown method: {method}")


# ---------------------------------------------------------------------------
# Tool input validation — propagated to the dispatcher as protocol errors
# ---------------------------------------------------------------------------


class ToolInputError(ProtocolError):
    """A tool rejected its arguments before doing any work."""


class MissingArgumentError(ToolInputError):
    """A required tool argument was omitted."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"{argument} is required")


class InvalidCursorError(ToolInputError):
    """A pagination cursor could not be decoded or failed validation."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid cursor: {reason}")


class EntityNotFoundError(ToolInputError):
    """An assembly, type, member or resource named by the caller does not exist."""

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} not found: {name}")


# ---------------------------------------------------------------------------
# Tool dispatch and remote calls
# ---------------------------------------------------------------------------


class ToolNotFoundError(ProtocolError):
    """Requested tool does not exist in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ConnectionError(ProtocolError):
    """Failed to reach a remote server."""


class RemoteCallError(ProtocolError):
    """A remote server answered with a JSON-RPC error envelope."""

    def __init__(self, method: str, code: int, message: str, data: Any = None) -> None:
        self.method = method
        self.code = code
        self.data = data
        super().__init__(f"{method} failed ({code}): {message}")


class ToolExecutionError(ProtocolError):
    """A remote tool invocation failed at the protocol level."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Tool execution failed: {name}" + (f": {detail}" if detail else ""))
