"""
Domain models for the triple hierarchy.

Pydantic models for statements, items and run configuration.
"""

from .base import (
    Item,
    ItemView,
    Predicate,
    Triple,
    UnknownPredicate,
)

from .config import (
    FILTERS,
    HierarchyConfig,
    ItemFilter,
    UnknownFilterSelector,
    resolve_filter,
)

__all__ = [
    # Base models
    "Item",
    "ItemView",
    "Triple",
    "UnknownPredicate",
    # Enums
    "Predicate",
    # Configuration
    "FILTERS",
    "HierarchyConfig",
    "ItemFilter",
    "UnknownFilterSelector",
    "resolve_filter",
]
