"""MetadataProvider protocol — the host-owned source of reflected metadata.

The server queries a provider but never mutates it.  Providers must
tolerate concurrent reads: requests are served from a thread pool.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from asmscope.core.metadata.models import AssemblyDef, MethodDef, TypeDef


@runtime_checkable
class TypeResolver(Protocol):
    """Resolves a member's declared type name to a loaded type definition."""

    def resolve_type(self, type_name: str) -> TypeDef | None:
        """Return the definition for *type_name*, or ``None`` if it is not loaded."""
        ...


@runtime_checkable
class MetadataProvider(TypeResolver, Protocol):
    """Enumerates assemblies and types, and decompiles methods."""

    def list_assemblies(self) -> list[AssemblyDef]:
        """Return every loaded assembly, without duplicates, in load order."""
        ...

    def find_assembly(self, name: str) -> AssemblyDef | None:
        """Resolve an assembly by short name (case-insensitive)."""
        ...

    def iter_types(self, assembly: AssemblyDef) -> list[TypeDef]:
        """Return the types of *assembly* in declaration order."""
        ...

    def find_type(self, assembly: AssemblyDef, full_name: str) -> TypeDef | None:
        """Resolve a type in *assembly* by exact full name."""
        ...

    def decompile(self, type_def: TypeDef, method: MethodDef) -> str:
        """Return source text for *method*."""
        ...
