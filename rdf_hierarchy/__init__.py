"""
RDF Hierarchy Library.

Parses a line-per-statement triples file describing classes,
properties and relationships, builds the subclass / subproperty /
powertype hierarchy, and prints it as an indented forest.

Quick Start:
    from rdf_hierarchy import HierarchyConfig, HierarchyService

    service = HierarchyService(HierarchyConfig(filter_name="types", max_depth=2))
    hierarchy = service.load_file("ies.rdf")
    for line in service.render(hierarchy):
        print(line)
"""

from .models import (
    FILTERS,
    HierarchyConfig,
    Item,
    ItemView,
    Predicate,
    Triple,
    UnknownFilterSelector,
    UnknownPredicate,
    resolve_filter,
)

from .storage import (
    CycleDetectedError,
    FrozenHierarchy,
    GraphFrozenError,
    HierarchyGraph,
    HierarchyGraphError,
)

from .services import (
    HierarchyRenderer,
    HierarchyService,
    IngestError,
    ParseError,
    SourceUnavailable,
    TripleIngestor,
    parse_line,
)

__all__ = [
    # Models
    "Item",
    "ItemView",
    "Triple",
    "Predicate",
    "UnknownPredicate",
    "HierarchyConfig",
    "FILTERS",
    "resolve_filter",
    "UnknownFilterSelector",
    # Storage
    "HierarchyGraph",
    "FrozenHierarchy",
    "HierarchyGraphError",
    "GraphFrozenError",
    "CycleDetectedError",
    # Services
    "TripleIngestor",
    "parse_line",
    "IngestError",
    "ParseError",
    "SourceUnavailable",
    "HierarchyRenderer",
    "HierarchyService",
]
