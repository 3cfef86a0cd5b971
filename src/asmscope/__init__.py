"""asmscope — MCP server exposing reflected .NET assembly metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from asmscope.server.lifecycle import MCPServer as MCPServer
    from asmscope.tools.registry import ToolRegistry as ToolRegistry

_LAZY_EXPORTS = {
    "MCPServer": "asmscope.server.lifecycle",
    "ToolRegistry": "asmscope.tools.registry",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'asmscope' has no attribute {name!r}")
