"""
Run configuration for ingestion and rendering.

Values come from explicit arguments first, then from the environment:
- RDF_HIERARCHY_SOURCE: triples file to read (default: ies.rdf)
- RDF_HIERARCHY_FILTER: root filter preset (default: all)
- RDF_HIERARCHY_MAX_DEPTH: deepest level to print (default: unbounded)
- RDF_HIERARCHY_INDENT: spaces per depth level (default: 2)
- RDF_HIERARCHY_PREFIXES: comma separated subject prefixes (default: ies)
"""

import os
from typing import Any, Callable, Dict, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from .base import Item, ItemView


ItemFilter = Callable[[Item | ItemView], bool]


class UnknownFilterSelector(Exception):
    """Raised when a filter preset name is not known."""

    # Not a ValueError: pydantic would wrap it in a ValidationError.

    def __init__(self, selector: str):
        super().__init__(f"unknown filter {selector!r}")
        self.selector = selector


TYPE_ROOTS = frozenset({"rdf:type", "rdfs:Class", "rdfs:Resource"})

FILTERS: Dict[str, ItemFilter] = {
    "all": lambda item: True,
    "attributes": lambda item: item.subject == "ies:attribute",
    "relationships": lambda item: item.subject == "ies:relationship",
    "types": lambda item: item.subject in TYPE_ROOTS,
}


def resolve_filter(name: str) -> ItemFilter:
    """Look up a filter preset by name."""
    try:
        return FILTERS[name]
    except KeyError:
        raise UnknownFilterSelector(name) from None


class HierarchyConfig(BaseModel):
    """Settings shared by the ingestor and the renderer."""

    source: str = Field(default="ies.rdf", description="Path of the triples file")
    filter_name: str = Field(default="all", description="Root filter preset")
    max_depth: Optional[int] = Field(default=None, ge=0, description="None means unbounded")
    indent_width: int = Field(default=2, ge=0)
    subject_prefixes: Tuple[str, ...] = ("ies",)

    model_config = {"frozen": True}

    @field_validator("filter_name")
    @classmethod
    def _known_filter(cls, value: str) -> str:
        if value not in FILTERS:
            raise UnknownFilterSelector(value)
        return value

    @field_validator("subject_prefixes")
    @classmethod
    def _non_empty_prefixes(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value or not all(value):
            raise ValueError("at least one non-empty subject prefix is required")
        return value

    @property
    def include(self) -> ItemFilter:
        return resolve_filter(self.filter_name)

    @classmethod
    def from_env(cls, **overrides: Any) -> "HierarchyConfig":
        """
        Build a config from RDF_HIERARCHY_* variables.

        Keyword overrides win over the environment; None overrides are ignored.
        """
        values: Dict[str, Any] = {}

        if os.getenv("RDF_HIERARCHY_SOURCE"):
            values["source"] = os.getenv("RDF_HIERARCHY_SOURCE")
        if os.getenv("RDF_HIERARCHY_FILTER"):
            values["filter_name"] = os.getenv("RDF_HIERARCHY_FILTER")
        if os.getenv("RDF_HIERARCHY_MAX_DEPTH"):
            values["max_depth"] = int(os.getenv("RDF_HIERARCHY_MAX_DEPTH"))
        if os.getenv("RDF_HIERARCHY_INDENT"):
            values["indent_width"] = int(os.getenv("RDF_HIERARCHY_INDENT"))
        prefixes = tuple(
            p.strip() for p in os.getenv("RDF_HIERARCHY_PREFIXES", "").split(",") if p.strip()
        )
        if prefixes:
            values["subject_prefixes"] = prefixes

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
