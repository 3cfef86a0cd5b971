"""Read-only inspection tools over the metadata provider.

Each handler validates its arguments first, then queries the provider
and renders a JSON document as a single text content part.
"""

from __future__ import annotations

import json
import re
from typing import TYPE_CHECKING, Any

from asmscope.core.paging import decode_cursor, paginate
from asmscope.protocols.errors import EntityNotFoundError
from asmscope.protocols.mcp.models import CallToolResult

if TYPE_CHECKING:
    from asmscope.core.metadata.models import AssemblyDef, FieldDef, MethodDef, PropertyDef, TypeDef
    from asmscope.core.metadata.provider import MetadataProvider
    from asmscope.tools.arguments import ToolArguments


def json_result(payload: Any) -> CallToolResult:
    return CallToolResult.from_text(json.dumps(payload, indent=2))


def wildcard_regex(pattern: str) -> re.Pattern[str]:
    """Compile a ``*`` wildcard pattern into an anchored, case-insensitive regex."""
    return re.compile("^" + re.escape(pattern).replace(r"\*", ".*") + "$", re.IGNORECASE)


class InspectionTools:
    """Handlers for the assembly, type and member inspection tools."""

    def __init__(self, metadata: MetadataProvider, *, page_size: int) -> None:
        self._metadata = metadata
        self._page_size = page_size

    # -- lookups ------------------------------------------------------------

    def find_assembly(self, name: str) -> AssemblyDef:
        assembly = self._metadata.find_assembly(name)
        if assembly is None:
            raise EntityNotFoundError("Assembly", name)
        return assembly

    def find_type(self, assembly: AssemblyDef, full_name: str, *, kind: str = "Type") -> TypeDef:
        type_def = self._metadata.find_type(assembly, full_name)
        if type_def is None:
            raise EntityNotFoundError(kind, full_name)
        return type_def

    # -- tools --------------------------------------------------------------

    def list_assemblies(self, args: ToolArguments) -> CallToolResult:
        return json_result([_assembly_summary(a) for a in self._metadata.list_assemblies()])

    def get_assembly_info(self, args: ToolArguments) -> CallToolResult:
        assembly = self.find_assembly(args.require_str("assembly_name"))
        offset, page_size = decode_cursor(args.optional_str("cursor"), self._page_size)

        types = self._metadata.iter_types(assembly)
        namespaces = sorted({t.namespace for t in types})
        page = paginate(namespaces, offset, page_size)

        info: dict[str, Any] = {
            **_assembly_summary(assembly),
            "modules": [
                {
                    "name": m.name,
                    "kind": m.kind,
                    "architecture": m.architecture,
                    "runtime_version": m.runtime_version,
                }
                for m in assembly.modules
            ],
            "namespaces": page.items,
            "namespaces_total_count": page.total_count,
            "namespaces_returned_count": page.returned_count,
            "type_count": len(types),
        }
        if page.next_cursor is not None:
            info["nextCursor"] = page.next_cursor
        return json_result(info)

    def list_types(self, args: ToolArguments) -> CallToolResult:
        assembly = self.find_assembly(args.require_str("assembly_name"))
        namespace = args.optional_str("namespace")
        offset, page_size = decode_cursor(args.optional_str("cursor"), self._page_size)

        types = [
            _type_summary(t)
            for t in self._metadata.iter_types(assembly)
            if not namespace or t.namespace == namespace
        ]
        return json_result(paginate(types, offset, page_size).to_payload())

    def get_type_info(self, args: ToolArguments) -> CallToolResult:
        assembly_name = args.require_str("assembly_name")
        type_full_name = args.require_str("type_full_name")
        offset, page_size = decode_cursor(args.optional_str("cursor"), self._page_size)

        type_def = self.find_type(self.find_assembly(assembly_name), type_full_name)

        # Methods page; fields and properties are returned whole.
        methods = paginate([_method_summary(m) for m in type_def.methods], offset, page_size)
        info: dict[str, Any] = {
            **_type_summary(type_def),
            "interfaces": list(type_def.interfaces),
            "methods": methods.items,
            "methods_total_count": methods.total_count,
            "methods_returned_count": methods.returned_count,
            "fields": [_field_summary(f) for f in type_def.fields],
            "properties": [_property_summary(p) for p in type_def.properties],
        }
        if methods.next_cursor is not None:
            info["nextCursor"] = methods.next_cursor
        return json_result(info)

    def decompile_method(self, args: ToolArguments) -> CallToolResult:
        assembly_name = args.require_str("assembly_name")
        type_full_name = args.require_str("type_full_name")
        method_name = args.require_str("method_name")

        type_def = self.find_type(self.find_assembly(assembly_name), type_full_name)
        method = next((m for m in type_def.methods if m.name == method_name), None)
        if method is None:
            raise EntityNotFoundError("Method", method_name)

        return CallToolResult.from_text(self._metadata.decompile(type_def, method))

    def search_types(self, args: ToolArguments) -> CallToolResult:
        query = args.require_str("query").lower()
        offset, page_size = decode_cursor(args.optional_str("cursor"), self._page_size)

        matches = [
            {
                "assembly_name": assembly.name,
                "full_name": t.full_name,
                "namespace": t.namespace,
                "name": t.name,
                "is_public": t.is_public,
            }
            for assembly in self._metadata.list_assemblies()
            for t in self._metadata.iter_types(assembly)
            if query in t.full_name.lower()
        ]
        return json_result(paginate(matches, offset, page_size).to_payload())

    def get_type_fields(self, args: ToolArguments) -> CallToolResult:
        assembly_name = args.require_str("assembly_name")
        type_full_name = args.require_str("type_full_name")
        pattern = args.require_str("pattern")
        offset, page_size = decode_cursor(args.optional_str("cursor"), self._page_size)

        type_def = self.find_type(self.find_assembly(assembly_name), type_full_name)
        regex = wildcard_regex(pattern)
        matching = [
            {**_field_summary(f), "is_read_only": f.is_read_only, "attributes": f.attributes}
            for f in type_def.fields
            if regex.match(f.name)
        ]
        page = paginate(matching, offset, page_size)

        response: dict[str, Any] = {
            "type": type_full_name,
            "pattern": pattern,
            "match_count": page.total_count,
            "returned_count": page.returned_count,
            "fields": page.items,
        }
        if page.next_cursor is not None:
            response["nextCursor"] = page.next_cursor
        return json_result(response)

    def get_type_property(self, args: ToolArguments) -> CallToolResult:
        assembly_name = args.require_str("assembly_name")
        type_full_name = args.require_str("type_full_name")
        property_name = args.require_str("property_name")

        type_def = self.find_type(self.find_assembly(assembly_name), type_full_name)
        wanted = property_name.lower()
        prop = next((p for p in type_def.properties if p.name.lower() == wanted), None)
        if prop is None:
            raise EntityNotFoundError("Property", property_name)

        return json_result(
            {
                **_property_summary(prop),
                "get_method": prop.getter.model_dump() if prop.getter else None,
                "set_method": prop.setter.model_dump() if prop.setter else None,
                "attributes": prop.attributes,
                "custom_attributes": list(prop.custom_attributes),
            }
        )


# ---------------------------------------------------------------------------
# Rendering helpers
# ---------------------------------------------------------------------------


def _assembly_summary(assembly: AssemblyDef) -> dict[str, Any]:
    return {
        "name": assembly.name,
        "version": assembly.version or "N/A",
        "full_name": assembly.full_name,
        "culture": assembly.culture or "neutral",
        "public_key_token": assembly.public_key_token or "null",
    }


def _type_summary(type_def: TypeDef) -> dict[str, Any]:
    return {
        "full_name": type_def.full_name,
        "namespace": type_def.namespace,
        "name": type_def.name,
        "is_public": type_def.is_public,
        "is_class": type_def.is_class,
        "is_interface": type_def.is_interface,
        "is_enum": type_def.is_enum,
        "is_value_type": type_def.is_value_type,
        "is_abstract": type_def.is_abstract,
        "is_sealed": type_def.is_sealed,
        "base_type": type_def.base_type or "None",
    }


def _method_summary(method: MethodDef) -> dict[str, Any]:
    return {
        "name": method.name,
        "signature": method.signature,
        "is_public": method.is_public,
        "is_static": method.is_static,
        "is_virtual": method.is_virtual,
        "is_abstract": method.is_abstract,
        "return_type": method.return_type,
        "parameters": [{"name": p.name, "type": p.type} for p in method.parameters],
    }


def _field_summary(field: FieldDef) -> dict[str, Any]:
    return {
        "name": field.name,
        "type": field.type,
        "is_public": field.is_public,
        "is_static": field.is_static,
        "is_literal": field.is_literal,
    }


def _property_summary(prop: PropertyDef) -> dict[str, Any]:
    return {
        "name": prop.name,
        "type": prop.type,
        "can_read": prop.can_read,
        "can_write": prop.can_write,
    }
