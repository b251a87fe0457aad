"""Visitor implementations for OrderedTreeLib.

A visitor is any callable taking ``(element, level)``. It returns nothing
and communicates only through its own accumulated state. The classes here
cover the common cases; a plain function or lambda works just as well.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple
from ..config import RenderConfig


class Visitor(ABC):
    """Abstract base class for stateful visitors.

    Subclasses accumulate something from every visited element. The same
    visitor instance may be reused across traversals; call ``reset`` in
    between if the accumulated state should start over.
    """

    @abstractmethod
    def __call__(self, element: Any, level: int) -> None:
        """Receive one visited element.

        Args:
            element: The element held by the visited node
            level: 1-based level of the node (root = 1)
        """
        pass

    def reset(self) -> None:
        """Forget accumulated state."""
        pass


class CountingVisitor(Visitor):
    """Counts visited elements.

    Used by ``OrderedTree.recount``.
    """

    def __init__(self):
        self.count = 0

    def __call__(self, element: Any, level: int) -> None:
        self.count += 1

    def reset(self) -> None:
        self.count = 0


class ElementCollector(Visitor):
    """Collects visited elements in visit order."""

    def __init__(self):
        self.elements: List[Any] = []

    def __call__(self, element: Any, level: int) -> None:
        self.elements.append(element)

    def reset(self) -> None:
        self.elements = []


class LevelCollector(Visitor):
    """Collects ``(element, level)`` pairs and tallies nodes per level."""

    def __init__(self):
        self.visits: List[Tuple[Any, int]] = []
        self.widths: Dict[int, int] = {}

    def __call__(self, element: Any, level: int) -> None:
        self.visits.append((element, level))
        self.widths[level] = self.widths.get(level, 0) + 1

    def reset(self) -> None:
        self.visits = []
        self.widths = {}

    @property
    def max_level(self) -> int:
        """Deepest level seen so far (0 if nothing visited)."""
        return max(self.widths) if self.widths else 0


class TextRenderVisitor(Visitor):
    """Builds a text view of the tree, one line per element.

    Each line is the element's level as a run of level markers, preceded
    by the separator for every level below the root, followed by the
    element's string form. With the default markers a root ``m`` with
    children ``a`` and ``z`` renders as::

        -m
        |--a
        |--z
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()
        self.lines: List[str] = []

    def __call__(self, element: Any, level: int) -> None:
        self.lines.append(f"{self.config.prefix(level)}{element}")

    def reset(self) -> None:
        self.lines = []

    @property
    def text(self) -> str:
        """The rendered lines joined by the configured line separator."""
        return self.config.line_separator.join(self.lines)
