"""
Hierarchy Service - main facade for reading and printing a triples file.

Runs ingestion to completion, freezes the graph, then renders it.
"""

import logging
import sys
from pathlib import Path
from typing import IO, Iterable, List

from ..models import HierarchyConfig, UnknownPredicate
from ..storage import FrozenHierarchy
from .ingest_service import TripleIngestor
from .render_service import HierarchyRenderer


logger = logging.getLogger(__name__)


class HierarchyService:
    """
    Coordinates the ingestor and the renderer for one run.

    Each load starts from an empty graph.
    """

    def __init__(self, config: HierarchyConfig | None = None) -> None:
        self._config = config or HierarchyConfig()
        self._renderer = HierarchyRenderer(self._config)
        self._diagnostics: List[UnknownPredicate] = []

    @property
    def diagnostics(self) -> List[UnknownPredicate]:
        """Unknown predicates reported by the last load."""
        return list(self._diagnostics)

    def load_lines(self, lines: Iterable[str]) -> FrozenHierarchy:
        """Ingest statements from an iterable of lines."""
        ingestor = TripleIngestor(self._config)
        graph = ingestor.ingest(lines)
        self._diagnostics = ingestor.diagnostics
        return graph.freeze()

    def load_file(self, path: str | Path | None = None) -> FrozenHierarchy:
        """Ingest a triples file; defaults to the configured source."""
        source = path or self._config.source
        logger.info(f"Loading triples from {source}")
        ingestor = TripleIngestor(self._config)
        graph = ingestor.ingest_file(source)
        self._diagnostics = ingestor.diagnostics
        return graph.freeze()

    def render(self, hierarchy: FrozenHierarchy) -> List[str]:
        return self._renderer.render(hierarchy)

    def run(self, path: str | Path | None = None, stream: IO[str] | None = None) -> int:
        """
        Load, render and print the configured source.

        The forest is rendered in full before anything is written, so a
        failure leaves the stream untouched. Returns the number of lines.
        """
        hierarchy = self.load_file(path)
        return self._renderer.write(hierarchy, stream if stream is not None else sys.stdout)
