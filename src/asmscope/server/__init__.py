"""HTTP transport — Starlette app and uvicorn lifecycle."""

from asmscope.server.app import CORS_HEADERS, create_app
from asmscope.server.lifecycle import MCPServer

__all__ = ["CORS_HEADERS", "MCPServer", "create_app"]
