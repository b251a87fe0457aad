"""Tree traversal strategies for OrderedTreeLib.

Traversers implement different orders for walking a binary tree. Every
traverser works through a BinaryTreeAdapter and walks with an explicit
stack or queue, so a long one-sided chain of nodes cannot exhaust the
interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple
from .node import BinaryNode
from .adapter import BinaryTreeAdapter
from ..config import DepthConfig, TraversalStrategy, parse_strategy


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers yield ``(node, level)`` pairs where the root is level 1.
    Level bounds come from a DepthConfig. They never modify the tree.
    """

    def __init__(self, adapter: BinaryTreeAdapter, depth_config: Optional[DepthConfig] = None):
        """Initialize traverser with an adapter and optional level bounds.

        Args:
            adapter: BinaryTreeAdapter for navigating the tree
            depth_config: Configuration for level-based filtering
        """
        self.adapter = adapter
        self.depth_config = depth_config or DepthConfig()

    @abstractmethod
    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None = empty tree)

        Yields:
            Tuples of (node, level) where the root is level 1
        """
        pass

    def should_yield(self, level: int) -> bool:
        return self.depth_config.should_yield(level)

    def should_explore(self, level: int) -> bool:
        return self.depth_config.should_explore(level)


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node, then its entire left subtree, then its entire right
    subtree. This is the order used for rendering and recounting.
    """

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        if root is None:
            return
        stack: List[Tuple[BinaryNode, int]] = [(root, 1)]

        while stack:
            node, level = stack.pop()

            if self.should_yield(level):
                yield (node, level)

            if self.should_explore(level):
                # Right goes on the stack first so left comes off first
                right = self.adapter.get_right(node)
                if right is not None:
                    stack.append((right, level + 1))
                left = self.adapter.get_left(node)
                if left is not None:
                    stack.append((left, level + 1))


class InOrderTraverser(TreeTraverser):
    """Symmetric (in-order) traversal strategy.

    Visits the left subtree, the node, then the right subtree. On an
    ordered tree this yields elements in ascending order.
    """

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        stack: List[Tuple[BinaryNode, int]] = []
        node = root
        level = 1

        while stack or node is not None:
            while node is not None:
                stack.append((node, level))
                if not self.should_explore(level):
                    break
                node = self.adapter.get_left(node)
                level += 1

            node, level = stack.pop()
            if self.should_yield(level):
                yield (node, level)

            if self.should_explore(level):
                node = self.adapter.get_right(node)
                level += 1
            else:
                node = None


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent: left subtree, right subtree, node.
    """

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        if root is None:
            return
        # Last slot records whether the children were already expanded
        stack: List[Tuple[BinaryNode, int, bool]] = [(root, 1, False)]

        while stack:
            node, level, expanded = stack.pop()

            if expanded:
                if self.should_yield(level):
                    yield (node, level)
                continue

            stack.append((node, level, True))
            if self.should_explore(level):
                right = self.adapter.get_right(node)
                if right is not None:
                    stack.append((right, level + 1, False))
                left = self.adapter.get_left(node)
                if left is not None:
                    stack.append((left, level + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Level-order (breadth-first) traversal strategy.

    Visits all nodes at level N, left to right, before level N+1.
    """

    def traverse(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        if root is None:
            return
        queue: Deque[Tuple[BinaryNode, int]] = deque([(root, 1)])

        while queue:
            node, level = queue.popleft()

            if self.should_yield(level):
                yield (node, level)

            if self.should_explore(level):
                for child in self.adapter.get_children(node):
                    queue.append((child, level + 1))


TRAVERSERS = {
    TraversalStrategy.DEPTH_FIRST_PRE: DepthFirstPreOrderTraverser,
    TraversalStrategy.IN_ORDER: InOrderTraverser,
    TraversalStrategy.DEPTH_FIRST_POST: DepthFirstPostOrderTraverser,
    TraversalStrategy.LEVEL_ORDER: LevelOrderTraverser,
}


# Factory function for creating traversers by name
def create_traverser(strategy,
                     adapter: BinaryTreeAdapter,
                     depth_config: Optional[DepthConfig] = None) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy or any name accepted by parse_strategy
        adapter: BinaryTreeAdapter for the tree
        depth_config: Level bounds for the traverser

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return TRAVERSERS[parse_strategy(strategy)](adapter, depth_config)
