"""
Services layer for the triple hierarchy.

Provides ingestion, rendering and the facade that runs both.
"""

from .ingest_service import (
    IngestError,
    ParseError,
    SourceUnavailable,
    TripleIngestor,
    parse_line,
)
from .render_service import HierarchyRenderer
from .hierarchy_service import HierarchyService

__all__ = [
    "TripleIngestor",
    "parse_line",
    "IngestError",
    "ParseError",
    "SourceUnavailable",
    "HierarchyRenderer",
    "HierarchyService",
]
