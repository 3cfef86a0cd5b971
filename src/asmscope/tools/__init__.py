"""MCP tools over assembly metadata."""

from asmscope.tools.arguments import ToolArguments
from asmscope.tools.definitions import build_tool_definitions
from asmscope.tools.registry import ToolRegistry

__all__ = ["ToolArguments", "ToolRegistry", "build_tool_definitions"]
