"""
Indented tree rendering of a frozen hierarchy.

Roots are items without parents, visited in subject order and filtered
by the configured preset. Each root is walked depth-first, pre-order,
children in subject order, one line per node:

    ies:Entity
      ies:Person
        ies:Employee
"""

import logging
from typing import IO, Iterator, List

from ..models import HierarchyConfig, ItemView
from ..storage import CycleDetectedError, FrozenHierarchy


logger = logging.getLogger(__name__)


class HierarchyRenderer:
    """Renders a FrozenHierarchy as an indented forest."""

    def __init__(self, config: HierarchyConfig | None = None) -> None:
        self._config = config or HierarchyConfig()

    def roots(self, hierarchy: FrozenHierarchy) -> List[ItemView]:
        """Parentless items accepted by the filter, in subject order."""
        include = self._config.include
        return [view for view in hierarchy.roots() if include(view)]

    def iter_lines(self, hierarchy: FrozenHierarchy) -> Iterator[str]:
        """Yield rendered lines for every selected root."""
        for root in self.roots(hierarchy):
            logger.debug(f"Rendering tree rooted at {root.subject}")
            yield from self._walk(hierarchy, root)

    def render(self, hierarchy: FrozenHierarchy) -> List[str]:
        return list(self.iter_lines(hierarchy))

    def write(self, hierarchy: FrozenHierarchy, stream: IO[str]) -> int:
        """
        Write the forest to a text stream. Returns the number of lines.

        The forest is rendered in full first, so a CycleDetectedError
        leaves the stream untouched.
        """
        lines = self.render(hierarchy)
        for line in lines:
            stream.write(line + "\n")
        return len(lines)

    def _walk(self, hierarchy: FrozenHierarchy, root: ItemView) -> Iterator[str]:
        """
        Depth-first pre-order walk from root.

        With a depth bound, cycles are unrolled until the bound stops
        them. Without one, reaching a node that is already on the
        current path raises CycleDetectedError.
        """
        max_depth = self._config.max_depth
        pad = " " * self._config.indent_width

        # (view, depth, path of indices from root to view)
        stack = [(root, 0, (root.index,))]
        while stack:
            view, depth, path = stack.pop()
            if max_depth is not None and depth > max_depth:
                continue

            yield f"{pad * depth}{view.subject}"

            if max_depth is not None and depth >= max_depth:
                continue

            for child_index in reversed(view.children):
                if max_depth is None and child_index in path:
                    cycle = [hierarchy[i].subject for i in path[path.index(child_index):]]
                    cycle.append(hierarchy[child_index].subject)
                    raise CycleDetectedError(
                        f"Hierarchy cycle detected: {' -> '.join(cycle)}", path=cycle
                    )
                stack.append((hierarchy[child_index], depth + 1, path + (child_index,)))
