"""Documentation resources served through ``resources/list`` and ``resources/read``."""

from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Protocol, runtime_checkable

from asmscope.protocols.mcp.models import ResourceDef


@runtime_checkable
class ResourceProvider(Protocol):
    """Lists and reads named documentation resources."""

    def list_resources(self) -> list[ResourceDef]: ...

    def read_resource(self, uri: str) -> str | None:
        """Return the resource text, or ``None`` if *uri* is unknown."""
        ...


class MarkdownResources:
    """In-memory markdown documents keyed by URI.

    Usage::

        docs = MarkdownResources.from_directory(Path("docs"))
        docs.read_resource("docs://harmony-patching")
    """

    def __init__(self) -> None:
        self._entries: dict[str, tuple[ResourceDef, str]] = {}

    def add(self, uri: str, text: str, *, name: str | None = None, description: str | None = None) -> None:
        definition = ResourceDef(uri=uri, name=name or _title_of(text) or uri, description=description)
        self._entries[uri] = (definition, text)

    def list_resources(self) -> list[ResourceDef]:
        return [definition for definition, _ in self._entries.values()]

    def read_resource(self, uri: str) -> str | None:
        entry = self._entries.get(uri)
        return entry[1] if entry is not None else None

    @classmethod
    def from_directory(cls, directory: Path, *, scheme: str = "docs") -> MarkdownResources:
        """Load every ``*.md`` file in *directory* as ``<scheme>://<stem>``.

        A missing directory yields an empty collection.
        """
        resources = cls()
        if not directory.is_dir():
            return resources
        for path in sorted(directory.glob("*.md")):
            resources.add(f"{scheme}://{path.stem}", path.read_text(encoding="utf-8"))
        return resources


def _title_of(text: str) -> str | None:
    """First markdown heading, if any."""
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith("#"):
            return stripped.lstrip("#").strip() or None
    return None
