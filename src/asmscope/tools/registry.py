"""ToolRegistry — the fixed catalogue of inspection tools and their handlers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from asmscope.core.graph import DEFAULT_MAX_DEPTH
from asmscope.core.paging import DEFAULT_PAGE_SIZE
from asmscope.protocols.errors import ToolInputError, ToolNotFoundError
from asmscope.protocols.mcp.models import CallToolResult
from asmscope.tools.arguments import ToolArguments
from asmscope.tools.definitions import build_tool_definitions
from asmscope.tools.inspection import InspectionTools
from asmscope.tools.paths import PathTools
from asmscope.tools.scaffold import generate_bepinex_plugin
from asmscope.utils.telemetry import ATTR_TOOL_IS_ERROR, ATTR_TOOL_NAME, get_tracer

if TYPE_CHECKING:
    from collections.abc import Callable

    from asmscope.core.metadata.provider import MetadataProvider
    from asmscope.protocols.mcp.models import MCPToolDef

    ToolHandler = Callable[[ToolArguments], CallToolResult]

logger = logging.getLogger(__name__)

_tracer = get_tracer(__name__)


class ToolRegistry:
    """Maps tool names to handlers and runs them against a metadata provider.

    Usage::

        registry = ToolRegistry(provider)
        registry.list_tools()                                   # descriptors
        registry.execute("list_types", {"assembly_name": "Game"})

    Argument and lookup failures (:class:`ToolInputError`) propagate to the
    caller.  Any other failure inside a handler is reported as a tool
    result with ``isError`` set.
    """

    def __init__(
        self,
        metadata: MetadataProvider,
        *,
        page_size: int = DEFAULT_PAGE_SIZE,
        default_max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        inspection = InspectionTools(metadata, page_size=page_size)
        paths = PathTools(metadata, inspection, default_max_depth=default_max_depth)

        self._definitions = build_tool_definitions()
        self._handlers: dict[str, ToolHandler] = {
            "list_assemblies": inspection.list_assemblies,
            "get_assembly_info": inspection.get_assembly_info,
            "list_types": inspection.list_types,
            "get_type_info": inspection.get_type_info,
            "decompile_method": inspection.decompile_method,
            "search_types": inspection.search_types,
            "generate_bepinex_plugin": generate_bepinex_plugin,
            "get_type_fields": inspection.get_type_fields,
            "get_type_property": inspection.get_type_property,
            "find_path_to_type": paths.find_path_to_type,
        }

    def list_tools(self) -> list[MCPToolDef]:
        return list(self._definitions)

    def execute(self, name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        """Run tool *name* with *arguments*."""
        with _tracer.start_as_current_span("asmscope.tool.execute") as span:
            span.set_attribute(ATTR_TOOL_NAME, name)
            result = self._execute(name, arguments)
            span.set_attribute(ATTR_TOOL_IS_ERROR, result.is_error)
            return result

    def _execute(self, name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        handler = self._handlers.get(name)
        if handler is None:
            return CallToolResult.from_text(str(ToolNotFoundError(name)), is_error=True)

        try:
            return handler(ToolArguments(arguments))
        except ToolInputError:
            raise
        except Exception as exc:
            logger.warning("Tool %s failed: %s", name, exc)
            return CallToolResult.from_text(f"Error executing tool {name}: {exc}", is_error=True)
