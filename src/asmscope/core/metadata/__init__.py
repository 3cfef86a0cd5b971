"""Reflected metadata — models, provider protocol, and snapshot provider."""

from asmscope.core.metadata.models import (
    AccessorDef,
    AssemblyDef,
    FieldDef,
    MethodDef,
    ModuleDef,
    ParameterDef,
    PropertyDef,
    TypeDef,
)
from asmscope.core.metadata.provider import MetadataProvider, TypeResolver
from asmscope.core.metadata.snapshot import (
    MetadataSnapshot,
    SnapshotError,
    SnapshotLoader,
    SnapshotMetadataProvider,
    parse_snapshot,
)

__all__ = [
    "AccessorDef",
    "AssemblyDef",
    "FieldDef",
    "MetadataProvider",
    "MetadataSnapshot",
    "MethodDef",
    "ModuleDef",
    "ParameterDef",
    "PropertyDef",
    "SnapshotError",
    "SnapshotLoader",
    "SnapshotMetadataProvider",
    "TypeDef",
    "TypeResolver",
    "parse_snapshot",
]
