"""The ``find_path_to_type`` tool."""

from __future__ import annotations

from typing import TYPE_CHECKING

from asmscope.core.graph import PathFinder, find_matching_types
from asmscope.protocols.errors import EntityNotFoundError
from asmscope.protocols.mcp.models import CallToolResult
from asmscope.tools.inspection import json_result

if TYPE_CHECKING:
    from asmscope.core.metadata.provider import MetadataProvider
    from asmscope.tools.arguments import ToolArguments
    from asmscope.tools.inspection import InspectionTools


class PathTools:
    """Resolves the start and target types, then delegates to :class:`PathFinder`."""

    def __init__(
        self,
        metadata: MetadataProvider,
        inspection: InspectionTools,
        *,
        default_max_depth: int,
    ) -> None:
        self._metadata = metadata
        self._inspection = inspection
        self._finder = PathFinder(metadata)
        self._default_max_depth = default_max_depth

    def find_path_to_type(self, args: ToolArguments) -> CallToolResult:
        assembly_name = args.require_str("assembly_name")
        from_type = args.require_str("from_type")
        to_type = args.require_str("to_type")
        max_depth = args.lenient_int("max_depth", self._default_max_depth)

        assembly = self._inspection.find_assembly(assembly_name)
        start = self._inspection.find_type(assembly, from_type, kind="From type")

        targets = find_matching_types(self._metadata.iter_types(assembly), to_type)
        if not targets:
            raise EntityNotFoundError("Target type", to_type)

        paths = self._finder.find_paths(start, targets, max_depth)
        if not paths:
            return CallToolResult.from_text(
                f"No path found from {from_type} to {to_type} within depth {max_depth}"
            )

        return json_result(
            {
                "from_type": from_type,
                "to_type": to_type,
                "paths_found": len(paths),
                "paths": [p.to_dict() for p in paths],
            }
        )
