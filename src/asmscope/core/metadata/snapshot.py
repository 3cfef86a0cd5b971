"""Snapshot metadata provider — serves metadata loaded from YAML/JSON files.

Typical usage::

    provider = SnapshotLoader([Path("game.yaml"), Path("engine.json")]).load()
    assembly = provider.find_assembly("Game.Core")
"""

from __future__ import annotations

import json
from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import BaseModel, ValidationError

from asmscope.core.metadata.models import AssemblyDef

if TYPE_CHECKING:
    from asmscope.core.metadata.models import MethodDef, TypeDef


class SnapshotError(Exception):
    """Raised when a metadata snapshot cannot be read or validated."""


class MetadataSnapshot(BaseModel):
    """Top-level document of a snapshot file."""

    assemblies: list[AssemblyDef] = []


class SnapshotMetadataProvider:
    """In-memory :class:`~asmscope.core.metadata.provider.MetadataProvider`.

    Assemblies are kept in load order; a later assembly with the same name
    as an earlier one is ignored.  Type resolution searches every loaded
    assembly and the first definition of a full name wins.
    """

    def __init__(self, assemblies: list[AssemblyDef]) -> None:
        self._assemblies: list[AssemblyDef] = []
        seen: set[str] = set()
        for assembly in assemblies:
            key = assembly.name.lower()
            if key in seen:
                continue
            seen.add(key)
            self._assemblies.append(assembly)

        self._types: dict[str, TypeDef] = {}
        for assembly in self._assemblies:
            for type_def in assembly.types:
                self._types.setdefault(type_def.full_name, type_def)

    def list_assemblies(self) -> list[AssemblyDef]:
        return list(self._assemblies)

    def find_assembly(self, name: str) -> AssemblyDef | None:
        wanted = name.lower()
        for assembly in self._assemblies:
            if assembly.name.lower() == wanted:
                return assembly
        return None

    def iter_types(self, assembly: AssemblyDef) -> list[TypeDef]:
        return assembly.types

    def find_type(self, assembly: AssemblyDef, full_name: str) -> TypeDef | None:
        for type_def in assembly.types:
            if type_def.full_name == full_name:
                return type_def
        return None

    def resolve_type(self, type_name: str) -> TypeDef | None:
        return self._types.get(type_name)

    def decompile(self, type_def: TypeDef, method: MethodDef) -> str:
        """Return the method's recorded source, or a stub built from its signature."""
        if method.source is not None:
            return method.source
        params = ", ".join(f"{p.type} {p.name}" for p in method.parameters)
        modifiers = " ".join(
            word
            for word, enabled in (
                ("public", method.is_public),
                ("static", method.is_static),
                ("abstract", method.is_abstract),
                ("virtual", method.is_virtual and not method.is_abstract),
            )
            if enabled
        )
        header = f"{modifiers} {method.return_type} {method.name}({params})".strip()
        return f"// {type_def.full_name}\n{header}\n{{\n\t// source not captured in snapshot\n}}\n"


def parse_snapshot(raw: str, *, format: str = "yaml") -> MetadataSnapshot:
    """Parse a raw string into a validated :class:`MetadataSnapshot`.

    Args:
        raw: The raw file contents.
        format: ``"yaml"`` (default) or ``"json"``.
    """
    try:
        data: Any = json.loads(raw) if format == "json" else yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SnapshotError(f"{format.upper()} parse error: {exc}") from exc

    if data is None:
        return MetadataSnapshot()
    if not isinstance(data, dict):
        raise SnapshotError("Snapshot must be a mapping with an 'assemblies' list")

    try:
        return MetadataSnapshot.model_validate(data)
    except ValidationError as exc:
        raise SnapshotError(str(exc)) from exc


class SnapshotLoader:
    """Load one or more snapshot files into a single provider.

    Files ending in ``.json`` are parsed as JSON, everything else as YAML.
    """

    def __init__(self, paths: list[Path]) -> None:
        self.paths = paths

    def load(self) -> SnapshotMetadataProvider:
        assemblies: list[AssemblyDef] = []
        for path in self.paths:
            assemblies.extend(self._load_file(path).assemblies)
        return SnapshotMetadataProvider(assemblies)

    def _load_file(self, path: Path) -> MetadataSnapshot:
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SnapshotError(f"Cannot read {path}: {exc}") from exc
        fmt = "json" if path.suffix == ".json" else "yaml"
        return parse_snapshot(raw, format=fmt)
