"""Tool descriptors advertised by ``tools/list``."""

from __future__ import annotations

from typing import Any

from asmscope.protocols.mcp.models import MCPToolDef

_CURSOR_HELP = "Optional cursor for pagination (opaque token from previous response)"


def _string(description: str) -> dict[str, Any]:
    return {"type": "string", "description": description}


def _schema(properties: dict[str, Any], required: list[str]) -> dict[str, Any]:
    return {"type": "object", "properties": properties, "required": required}


def build_tool_definitions() -> tuple[MCPToolDef, ...]:
    """Return every tool descriptor in advertisement order."""
    assembly_name = _string("Name of the assembly")
    cursor = _string(_CURSOR_HELP)

    return (
        MCPToolDef(
            name="list_assemblies",
            description="List all loaded assemblies",
            input_schema=_schema({}, []),
        ),
        MCPToolDef(
            name="get_assembly_info",
            description="Get detailed information about a specific assembly",
            input_schema=_schema(
                {"assembly_name": assembly_name, "cursor": cursor},
                ["assembly_name"],
            ),
        ),
        MCPToolDef(
            name="list_types",
            description="List all types in an assembly or namespace",
            input_schema=_schema(
                {
                    "assembly_name": assembly_name,
                    "namespace": _string("Optional namespace filter"),
                    "cursor": cursor,
                },
                ["assembly_name"],
            ),
        ),
        MCPToolDef(
            name="get_type_info",
            description="Get detailed information about a specific type including its members",
            input_schema=_schema(
                {
                    "assembly_name": assembly_name,
                    "type_full_name": _string("Full name of the type including namespace"),
                    "cursor": _string(
                        "Optional cursor for pagination of methods "
                        "(opaque token from previous response)"
                    ),
                },
                ["assembly_name", "type_full_name"],
            ),
        ),
        MCPToolDef(
            name="decompile_method",
            description="Decompile a specific method to C# code",
            input_schema=_schema(
                {
                    "assembly_name": assembly_name,
                    "type_full_name": _string("Full name of the type"),
                    "method_name": _string("Name of the method"),
                },
                ["assembly_name", "type_full_name", "method_name"],
            ),
        ),
        MCPToolDef(
            name="search_types",
            description="Search for types by name across all loaded assemblies",
            input_schema=_schema(
                {"query": _string("Substring of the type's full name"), "cursor": cursor},
                ["query"],
            ),
        ),
        MCPToolDef(
            name="generate_bepinex_plugin",
            description="Generate a BepInEx plugin template with hooks for specified methods",
            input_schema=_schema(
                {
                    "plugin_name": _string("Name of the plugin"),
                    "plugin_guid": _string("GUID for the plugin"),
                    "target_assembly": _string("Target assembly name"),
                    "hooks": {
                        "type": "array",
                        "description": "Array of methods to hook",
                        "items": {
                            "type": "object",
                            "properties": {
                                "type_name": {"type": "string"},
                                "method_name": {"type": "string"},
                            },
                        },
                    },
                },
                ["plugin_name", "plugin_guid", "target_assembly"],
            ),
        ),
        MCPToolDef(
            name="get_type_fields",
            description="Get fields from a type matching a name pattern (supports wildcards like *Bonus*)",
            input_schema=_schema(
                {
                    "assembly_name": assembly_name,
                    "type_full_name": _string("Full name of the type"),
                    "pattern": _string("Field name pattern (supports * wildcard)"),
                    "cursor": cursor,
                },
                ["assembly_name", "type_full_name", "pattern"],
            ),
        ),
        MCPToolDef(
            name="get_type_property",
            description="Get detailed information about a specific property from a type",
            input_schema=_schema(
                {
                    "assembly_name": assembly_name,
                    "type_full_name": _string("Full name of the type"),
                    "property_name": _string("Name of the property"),
                },
                ["assembly_name", "type_full_name", "property_name"],
            ),
        ),
        MCPToolDef(
            name="find_path_to_type",
            description=(
                "Find property/field chains connecting two types through their members "
                "(e.g. PlayerState -> RpBonus)"
            ),
            input_schema=_schema(
                {
                    "assembly_name": assembly_name,
                    "from_type": _string("Starting type full name"),
                    "to_type": _string("Target type full name or partial name"),
                    "max_depth": {"type": "number", "description": "Maximum search depth (default: 5)"},
                },
                ["assembly_name", "from_type", "to_type"],
            ),
        ),
    )
