"""
Triple ingestion.

Reads the line-per-statement triples format:

    ies:Person rdfs:subClassOf ies:Entity .

Blank lines, comments (#) and directives (@prefix ...) are skipped.
Every other line must be a three-field statement whose subject starts
with a recognized prefix or an angle-bracketed URI.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ..models import HierarchyConfig, Predicate, Triple, UnknownPredicate
from ..storage import HierarchyGraph


logger = logging.getLogger(__name__)

TERMINATOR = " ."
_FIELD_SEPARATOR = re.compile(r"\s")

_ATTRIBUTES = {
    Predicate.TYPE: "kind",
    Predicate.COMMENT: "comment",
    Predicate.DOMAIN: "domain",
    Predicate.RANGE: "range",
}


class IngestError(Exception):
    """Base exception for ingestion failures."""
    pass


class ParseError(IngestError):
    """Raised for a malformed statement line."""

    def __init__(self, line_number: int, reason: str, path: str | None = None):
        self.line_number = line_number
        self.reason = reason
        self.path = path
        super().__init__(self._format())

    def _format(self) -> str:
        location = f"{self.path}: " if self.path else ""
        return f"{location}error at line {self.line_number}: {self.reason}"

    def with_path(self, path: str) -> "ParseError":
        return ParseError(self.line_number, self.reason, path=path)


class SourceUnavailable(IngestError):
    """Raised when the triples file cannot be opened or read."""

    def __init__(self, path: str, cause: OSError | UnicodeDecodeError | None = None):
        if isinstance(cause, UnicodeDecodeError):
            message = f"failed to read file {path!r}: not valid UTF-8 ({cause.reason})"
        else:
            detail = f": {cause.strerror or cause}" if cause else ""
            message = f"failed to open file {path!r}{detail}"
        super().__init__(message)
        self.path = path
        self.cause = cause


def parse_line(
    raw: str,
    line_number: int,
    subject_prefixes: Sequence[str] = ("ies",),
) -> Optional[Triple]:
    """
    Parse one line into a Triple.

    Returns None for lines that carry no statement. Raises ParseError
    for anything else that is not a well-formed statement.
    """
    line = raw.strip()
    if not line or line.startswith("#") or line.startswith("@"):
        return None

    if not (line.startswith(tuple(subject_prefixes)) or line.startswith("<")):
        expected = " or ".join(repr(p) for p in (*subject_prefixes, "<"))
        raise ParseError(line_number, f"line {line!r} does not start with {expected}")

    if line.endswith(TERMINATOR):
        body = line[: -len(TERMINATOR)]
    else:
        body = line

    parts = _FIELD_SEPARATOR.split(body, maxsplit=2)
    if len(parts) != 3:
        raise ParseError(line_number, f"line {line!r} does not have 3 parts")

    subject, predicate, obj = (part.strip() for part in parts)
    if not subject:
        raise ParseError(line_number, f"line {line!r} does not have a subject")
    if not predicate:
        raise ParseError(line_number, f"line {line!r} does not have a predicate")
    if not obj:
        raise ParseError(line_number, f"line {line!r} does not have an object")

    return Triple(subject=subject, predicate=predicate, object=obj, line_number=line_number)


class TripleIngestor:
    """
    Folds statements into a HierarchyGraph.

    Lines are applied strictly in order; the first malformed line
    aborts ingestion and nothing after it is applied.
    """

    def __init__(
        self,
        config: HierarchyConfig | None = None,
        graph: HierarchyGraph | None = None,
    ) -> None:
        self._config = config or HierarchyConfig()
        self._graph = graph if graph is not None else HierarchyGraph()
        self.diagnostics: List[UnknownPredicate] = []

    @property
    def graph(self) -> HierarchyGraph:
        return self._graph

    def ingest(self, lines: Iterable[str]) -> HierarchyGraph:
        """Parse and apply every line, returning the populated graph."""
        statements = 0
        for line_number, raw in enumerate(lines, start=1):
            triple = parse_line(raw, line_number, self._config.subject_prefixes)
            if triple is None:
                continue
            self.apply(triple)
            statements += 1

        logger.info(
            f"Ingested {statements} statements into {len(self._graph)} items "
            f"({len(self.diagnostics)} unknown predicates)"
        )
        return self._graph

    def ingest_file(self, path: str | Path) -> HierarchyGraph:
        """Read a triples file as UTF-8 and ingest it."""
        path = str(path)
        try:
            with open(path, encoding="utf-8") as f:
                return self.ingest(f)
        except ParseError as e:
            raise e.with_path(path) from None
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailable(path, e) from e

    def apply(self, triple: Triple) -> None:
        """Fold a single statement into the graph."""
        self._graph.get_or_create(triple.subject)

        predicate = Predicate.lookup(triple.predicate)
        if predicate is None:
            diagnostic = UnknownPredicate(
                predicate=triple.predicate,
                line_number=triple.line_number,
                subject=triple.subject,
            )
            self.diagnostics.append(diagnostic)
            logger.warning(diagnostic.message)
            return

        if predicate in Predicate.hierarchy():
            self._graph.add_parent(triple.subject, triple.object)
        else:
            self._graph.set_attribute(triple.subject, _ATTRIBUTES[predicate], triple.object)
