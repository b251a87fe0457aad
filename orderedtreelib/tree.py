"""OrderedTree: a binary search tree container.

The tree owns its root node and caches the number of elements it holds.
Elements must support ``<``, ``>`` and ``==`` consistent with a strict
total order. Duplicates are ignored on insert.

Removal works by pruning: the matched node is cut off together with its
entire subtree. Pruning does not touch the cached count, so call
``recount()`` after pruning when an exact size is needed::

    tree = OrderedTree()
    for word in ["m", "c", "x", "a"]:
        tree.insert(word)
    tree.remove_and_prune("c")   # drops "c" and "a"
    tree.size()                  # still 4
    tree.recount()               # 2
"""

import logging
from typing import Any, Callable, Generic, List, Optional, TypeVar, Union
from .core.adapter import BinaryTreeAdapter
from .core.collector import CountingVisitor, TextRenderVisitor
from .core.node import BinaryNode
from .config import (
    DepthConfig,
    RenderConfig,
    SearchPolicy,
    TraversalConfig,
    TraversalStrategy,
    parse_strategy,
)
from .errors import InvalidConfigurationError, UnsupportedOperationError
from .planning import TraversalPlan

logger = logging.getLogger(__name__)

T = TypeVar('T')


class OrderedTree(Generic[T]):
    """Binary search tree with prune-style removal and visitor traversal.

    Not thread-safe. Concurrent use must be serialized by the caller.
    """

    def __init__(self, search_policy: SearchPolicy = SearchPolicy.PRE_ORDER):
        """Create an empty tree.

        Args:
            search_policy: How ``find`` locates a node. PRE_ORDER walks the
                tree node, left subtree, right subtree; ORDERED follows
                comparisons. Both give the same answer on a valid tree.
        """
        self._root: Optional[BinaryNode[T]] = None
        self._count = 0
        self.search_policy = search_policy
        self.adapter = BinaryTreeAdapter()

    @property
    def root(self) -> Optional[BinaryNode[T]]:
        """The root node, or None if the tree is empty."""
        return self._root

    def size(self) -> int:
        """Return the cached element count."""
        return self._count

    def is_empty(self) -> bool:
        return self._root is None

    def recount(self) -> int:
        """Count reachable nodes and overwrite the cached count.

        Returns:
            The recomputed count
        """
        counter = CountingVisitor()
        self.traverse(counter)
        if counter.count != self._count:
            logger.info("Recount corrected cached size from %d to %d", self._count, counter.count)
        self._count = counter.count
        return self._count

    def insert(self, element: T) -> None:
        """Insert ``element`` unless an equal element is already present."""
        if self._root is None:
            self._root = BinaryNode(element)
            self._count = 1
            logger.debug("Inserted %r as root", element)
            return

        node = self._root
        while True:
            if element == node.element:
                logger.debug("Ignored duplicate %r", element)
                return
            if element < node.element:
                if node.left is None:
                    node.left = BinaryNode(element, parent=node)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = BinaryNode(element, parent=node)
                    break
                node = node.right

        self._count += 1
        logger.debug("Inserted %r under %r", element, node.element)

    def find(self, element: T) -> Optional[BinaryNode[T]]:
        """Locate the node holding an element equal to ``element``.

        Returns:
            The matching node, or None if not present
        """
        if self.search_policy is SearchPolicy.ORDERED:
            return self._find_ordered(element)
        return self._find_pre_order(element)

    def _find_pre_order(self, element: T) -> Optional[BinaryNode[T]]:
        if self._root is None:
            return None
        stack: List[BinaryNode[T]] = [self._root]
        while stack:
            node = stack.pop()
            if node.element == element:
                return node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return None

    def _find_ordered(self, element: T) -> Optional[BinaryNode[T]]:
        node = self._root
        while node is not None:
            if element < node.element:
                node = node.left
            elif element > node.element:
                node = node.right
            else:
                return node
        return None

    def contains(self, element: T) -> bool:
        return self.find(element) is not None

    def remove_and_prune(self, element: T) -> bool:
        """Remove the node matching ``element`` along with its whole subtree.

        Pruning the root empties the tree. The cached count is left as it
        was; call ``recount()`` afterwards for an exact size.

        Returns:
            True if a matching node was found and detached, False otherwise
        """
        node = self.find(element)
        if node is None:
            return False

        parent = node.parent
        if parent is None:
            self._root = None
            logger.debug("Pruned root %r, tree is now empty", element)
        else:
            if parent.left is node:
                parent.left = None
            else:
                parent.right = None
            node.parent = None
            logger.debug("Pruned %r from under %r", element, parent.element)

        return True

    def remove_and_rebuild(self, element: T) -> bool:
        """Remove a single node and reattach its children.

        Raises:
            UnsupportedOperationError: Always; no reattachment policy is
                defined for this tree
        """
        raise UnsupportedOperationError(
            "remove_and_rebuild",
            "no policy is defined for reattaching the removed node's children",
        )

    def clear(self) -> None:
        """Drop every node and reset the count."""
        self._root = None
        self._count = 0

    def height(self) -> int:
        """Number of levels in the tree (0 when empty)."""
        return self.adapter.subtree_height(self._root)

    def traverse(self,
                 visitor: Callable[[T, int], Any],
                 strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
                 min_level: int = 1,
                 max_level: Optional[int] = None) -> int:
        """Call ``visitor(element, level)`` for each node.

        The default order is pre-order: a node, then its entire left
        subtree, then its entire right subtree. The root is level 1. The
        visitor must not modify the tree.

        Args:
            visitor: Callable receiving each element and its level
            strategy: Traversal order (enum member or name such as "in_order")
            min_level: Skip nodes above this level
            max_level: Do not descend below this level

        Returns:
            Number of nodes visited

        Raises:
            InvalidConfigurationError: If the strategy or level bounds are invalid
        """
        try:
            parsed = parse_strategy(strategy)
        except ValueError as e:
            raise InvalidConfigurationError([str(e)]) from e

        config = TraversalConfig(
            strategy=parsed,
            depth=DepthConfig(min_level=min_level, max_level=max_level),
        )
        plan = TraversalPlan(config, self.adapter)
        return plan.execute(self._root, visitor)

    def render(self, config: Optional[RenderConfig] = None) -> str:
        """Render the tree as text, one pre-order line per element.

        Raises:
            InvalidConfigurationError: If the markers are invalid
        """
        config = config or RenderConfig()
        errors = config.validate()
        if errors:
            raise InvalidConfigurationError(errors)

        renderer = TextRenderVisitor(config)
        self.traverse(renderer)
        return renderer.text

    def __len__(self) -> int:
        return self._count

    def __contains__(self, element: object) -> bool:
        return self.contains(element)

    def __bool__(self) -> bool:
        # Follows the root; the cached count can be stale after pruning
        return self._root is not None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._count})"

    def __str__(self) -> str:
        return self.render()
