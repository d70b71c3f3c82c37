"""
In-memory hierarchy graph.

HierarchyGraph is the mutable builder the ingestor writes into.
freeze() turns it into a FrozenHierarchy: an arena of ItemView records
addressed by integer index, with edges stored as index tuples.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from ..models import Item, ItemView


logger = logging.getLogger(__name__)


class HierarchyGraphError(Exception):
    """Base exception for hierarchy graph operations."""
    pass


class GraphFrozenError(HierarchyGraphError):
    """Raised when a frozen graph is written to."""
    pass


class CycleDetectedError(HierarchyGraphError):
    """Raised when an unbounded walk re-enters a node on its own path."""

    def __init__(self, message: str, path: List[str] | None = None):
        super().__init__(message)
        self.path = path or []


class HierarchyGraph:
    """
    Subject to Item mapping built while reading statements.

    Items are created on first reference. Parent/child edges are only
    added through add_parent so both directions stay consistent.
    """

    def __init__(self) -> None:
        self._items: Dict[str, Item] = {}
        self._frozen: Optional["FrozenHierarchy"] = None

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, subject: str) -> bool:
        return subject in self._items

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items.values())

    @property
    def is_frozen(self) -> bool:
        return self._frozen is not None

    def get(self, subject: str) -> Optional[Item]:
        """Get an item by subject, or None if it was never referenced."""
        return self._items.get(subject)

    def get_or_create(self, subject: str) -> Item:
        """Resolve the item for a subject, creating an empty one if needed."""
        self._check_writable()
        item = self._items.get(subject)
        if item is None:
            item = Item(subject=subject)
            self._items[subject] = item
        return item

    def set_attribute(self, subject: str, name: str, value: str) -> Item:
        """Set a single-valued attribute (kind, domain, range, comment)."""
        if name not in ("kind", "domain", "range", "comment"):
            raise HierarchyGraphError(f"Not an item attribute: {name}")
        item = self.get_or_create(subject)
        setattr(item, name, value)
        return item

    def add_parent(self, child_subject: str, parent_subject: str) -> None:
        """Register parent_subject as a parent of child_subject."""
        child = self.get_or_create(child_subject)
        child.parents.add(parent_subject)
        parent = self.get_or_create(parent_subject)
        parent.children.add(child_subject)

    def roots(self) -> List[Item]:
        """Items without parents, in ascending subject order."""
        return [self._items[s] for s in sorted(self._items) if self._items[s].is_root]

    def freeze(self) -> "FrozenHierarchy":
        """
        Build the read-only view of this graph.

        Further writes raise GraphFrozenError. Calling freeze() again
        returns the same view.
        """
        if self._frozen is None:
            self._frozen = FrozenHierarchy.from_items(self._items.values())
            logger.info(
                f"Froze hierarchy: {len(self._frozen)} items, "
                f"{len(self._frozen.roots())} roots"
            )
        return self._frozen

    def _check_writable(self) -> None:
        if self._frozen is not None:
            raise GraphFrozenError("Hierarchy graph is frozen")


class FrozenHierarchy:
    """
    Immutable arena of ItemView records sorted by subject.

    Indices are positions in the arena, so sorting indices sorts
    subjects lexically.
    """

    def __init__(self, items: Tuple[ItemView, ...]) -> None:
        self._items = items
        self._index: Dict[str, int] = {view.subject: view.index for view in items}

    @classmethod
    def from_items(cls, items) -> "FrozenHierarchy":
        by_subject = {item.subject: item for item in items}
        ordered = sorted(by_subject)
        position = {subject: i for i, subject in enumerate(ordered)}

        views = tuple(
            ItemView(
                index=position[subject],
                subject=subject,
                kind=by_subject[subject].kind,
                domain=by_subject[subject].domain,
                range=by_subject[subject].range,
                comment=by_subject[subject].comment,
                parents=tuple(sorted(position[p] for p in by_subject[subject].parents)),
                children=tuple(sorted(position[c] for c in by_subject[subject].children)),
            )
            for subject in ordered
        )
        return cls(views)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, subject: str) -> bool:
        return subject in self._index

    def __iter__(self) -> Iterator[ItemView]:
        return iter(self._items)

    def __getitem__(self, key: int | str) -> ItemView:
        if isinstance(key, str):
            return self._items[self._index[key]]
        return self._items[key]

    @property
    def items(self) -> Tuple[ItemView, ...]:
        return self._items

    def get(self, subject: str) -> Optional[ItemView]:
        index = self._index.get(subject)
        return None if index is None else self._items[index]

    def children_of(self, view: ItemView) -> List[ItemView]:
        """Direct children in ascending subject order."""
        return [self._items[i] for i in view.children]

    def parents_of(self, view: ItemView) -> List[ItemView]:
        """Direct parents in ascending subject order."""
        return [self._items[i] for i in view.parents]

    def roots(self) -> List[ItemView]:
        """Items without parents, in ascending subject order."""
        return [view for view in self._items if view.is_root]
