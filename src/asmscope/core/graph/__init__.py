"""Type-graph search."""

from asmscope.core.graph.path_finder import (
    DEFAULT_MAX_DEPTH,
    PathFinder,
    TypePath,
    find_matching_types,
)

__all__ = ["DEFAULT_MAX_DEPTH", "PathFinder", "TypePath", "find_matching_types"]
