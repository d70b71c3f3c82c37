"""
Base domain models for the triple hierarchy.

Item accumulates every fact seen about one subject identifier while
the triples file is being read. ItemView is the read-only record the
renderer works with once the graph has been frozen.
"""

from enum import Enum
from typing import Optional, Set, Tuple

from pydantic import BaseModel, Field


class Predicate(str, Enum):
    """Predicates understood by the ingestor."""
    TYPE = "rdf:type"
    COMMENT = "rdfs:comment"
    DOMAIN = "rdfs:domain"
    RANGE = "rdfs:range"
    POWERTYPE = "ies:powertype"
    SUBCLASS_OF = "rdfs:subClassOf"
    SUBPROPERTY_OF = "rdfs:subPropertyOf"

    @classmethod
    def hierarchy(cls) -> Tuple["Predicate", ...]:
        """Predicates that register a parent/child edge."""
        return (cls.POWERTYPE, cls.SUBCLASS_OF, cls.SUBPROPERTY_OF)

    @classmethod
    def lookup(cls, value: str) -> Optional["Predicate"]:
        try:
            return cls(value)
        except ValueError:
            return None


class Triple(BaseModel):
    """A single parsed statement."""

    subject: str
    predicate: str
    object: str
    line_number: int = Field(..., ge=1)

    model_config = {"frozen": True}


class Item(BaseModel):
    """
    All facts gathered about one subject identifier.

    parents and children are only touched through
    HierarchyGraph.add_parent, which keeps them mutually consistent.
    """

    subject: str = Field(..., description="Identifier, also used as display label")

    # Attributes (last write wins)
    kind: Optional[str] = Field(None, description="Value of rdf:type")
    domain: Optional[str] = None
    range: Optional[str] = None
    comment: Optional[str] = None

    # Edges
    parents: Set[str] = Field(default_factory=set)
    children: Set[str] = Field(default_factory=set)

    @property
    def is_root(self) -> bool:
        return not self.parents


class ItemView(BaseModel):
    """
    Immutable snapshot of an Item inside a FrozenHierarchy.

    Edges are stored as arena indices. The arena is sorted by subject,
    so ascending index order is ascending lexical order.
    """

    index: int
    subject: str
    kind: Optional[str] = None
    domain: Optional[str] = None
    range: Optional[str] = None
    comment: Optional[str] = None
    parents: Tuple[int, ...] = ()
    children: Tuple[int, ...] = ()

    model_config = {"frozen": True}

    @property
    def is_root(self) -> bool:
        return not self.parents


class UnknownPredicate(BaseModel):
    """Non-fatal diagnostic for a statement whose predicate is not recognized."""

    predicate: str
    line_number: int
    subject: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def message(self) -> str:
        return f"unknown predicate {self.predicate!r} on line {self.line_number}"
