"""Bounded breadth-first search over the member-reference graph.

Nodes are types, identified by full name.  An edge ``A -> B`` exists when
``A`` declares a property or field whose type resolves to ``B``.  The
search answers "through which chain of members is type B reachable from
type A", returning the shortest chain.

Ties between equally short chains are broken by exploration order:
properties before fields, each in declaration order.  The same metadata
therefore always yields the same path.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from asmscope.utils.telemetry import (
    ATTR_PATH_FOUND,
    ATTR_PATH_FROM,
    ATTR_PATH_MAX_DEPTH,
    ATTR_PATH_TO,
    ATTR_PATH_VISITED,
    get_tracer,
)

if TYPE_CHECKING:
    from asmscope.core.metadata.models import TypeDef
    from asmscope.core.metadata.provider import TypeResolver

DEFAULT_MAX_DEPTH = 5

_tracer = get_tracer(__name__)


@dataclass(frozen=True)
class TypePath:
    """A chain of members leading from a start type to a target type.

    ``steps[0]`` is the start type's short name; every following step is
    the name of the property or field traversed.
    """

    target: str
    steps: tuple[str, ...]

    @property
    def depth(self) -> int:
        """Number of edges traversed."""
        return len(self.steps) - 1

    @property
    def rendered(self) -> str:
        return " -> ".join(self.steps)

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target,
            "path": self.rendered,
            "depth": self.depth,
            "steps": list(self.steps),
        }


class PathFinder:
    """Finds member chains between types.

    Holds no per-search state; one instance may serve concurrent searches.
    """

    def __init__(self, resolver: TypeResolver) -> None:
        self._resolver = resolver

    def find_path(self, start: TypeDef, target: TypeDef, max_depth: int) -> TypePath | None:
        """Return the shortest member chain from *start* to *target*, or ``None``.

        Chains longer than *max_depth* edges are not reported.
        """
        with _tracer.start_as_current_span("asmscope.path.search") as span:
            span.set_attribute(ATTR_PATH_FROM, start.full_name)
            span.set_attribute(ATTR_PATH_TO, target.full_name)
            span.set_attribute(ATTR_PATH_MAX_DEPTH, max_depth)

            queue: deque[tuple[TypeDef, tuple[str, ...]]] = deque([(start, (start.name,))])
            visited = {start.full_name}
            found: TypePath | None = None

            while queue:
                current, steps = queue.popleft()

                if len(steps) > max_depth + 1:
                    continue

                if current.full_name == target.full_name:
                    found = TypePath(target=target.full_name, steps=steps)
                    break

                for member_name, member_type in self._edges(current):
                    if member_type.full_name in visited:
                        continue
                    visited.add(member_type.full_name)
                    queue.append((member_type, (*steps, member_name)))

            span.set_attribute(ATTR_PATH_VISITED, len(visited))
            span.set_attribute(ATTR_PATH_FOUND, found is not None)
            return found

    def find_paths(
        self,
        start: TypeDef,
        targets: list[TypeDef],
        max_depth: int,
    ) -> list[TypePath]:
        """Run an independent search per target; targets without a path are omitted."""
        paths: list[TypePath] = []
        for target in targets:
            path = self.find_path(start, target, max_depth)
            if path is not None:
                paths.append(path)
        return paths

    def _edges(self, type_def: TypeDef) -> Iterator[tuple[str, TypeDef]]:
        """Yield ``(member name, member type)`` — properties first, then fields."""
        for prop in type_def.properties:
            resolved = self._resolver.resolve_type(prop.type)
            if resolved is not None:
                yield prop.name, resolved
        for field in type_def.fields:
            resolved = self._resolver.resolve_type(field.type)
            if resolved is not None:
                yield field.name, resolved


def find_matching_types(types: list[TypeDef], query: str) -> list[TypeDef]:
    """Return types whose full or short name contains *query*, ignoring case."""
    needle = query.lower()
    return [
        t for t in types if needle in t.full_name.lower() or needle in t.name.lower()
    ]
