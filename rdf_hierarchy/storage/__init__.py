"""
Graph storage for the triple hierarchy.

Provides the mutable builder used during ingestion and the
frozen view used during rendering.
"""

from .graph import (
    CycleDetectedError,
    FrozenHierarchy,
    GraphFrozenError,
    HierarchyGraph,
    HierarchyGraphError,
)

__all__ = [
    "HierarchyGraph",
    "FrozenHierarchy",
    "HierarchyGraphError",
    "GraphFrozenError",
    "CycleDetectedError",
]
