"""Test fixtures for OrderedTreeLib consumers.

These fixtures provide controlled access to internal structure for testing
purposes without exposing implementation details as part of the public API.
"""

from typing import Any, Dict, List, Optional, Tuple
from ..core.node import BinaryNode
from ..tree import OrderedTree


class TreeInvariantChecker:
    """Public test fixture for verifying tree structure.

    Walks the tree once and reports every broken invariant it finds:
    ordering, parent links, duplicate elements and a stale cached count.

    Example:
        tree = build_tree(words)
        checker = TreeInvariantChecker(tree)

        assert checker.violations() == []
        assert checker.get_summary()['reachable_nodes'] == tree.size()
    """

    def __init__(self, tree: OrderedTree):
        """Initialize with the tree to inspect.

        Args:
            tree: The OrderedTree under test
        """
        self._tree = tree

    def _walk(self) -> List[Tuple[BinaryNode, Optional[Any], Optional[Any]]]:
        # Each entry carries the exclusive (low, high) bounds its ancestors impose
        result = []
        root = self._tree.root
        if root is None:
            return result
        stack = [(root, None, None)]
        while stack:
            node, low, high = stack.pop()
            result.append((node, low, high))
            if node.right is not None:
                stack.append((node.right, node.element, high))
            if node.left is not None:
                stack.append((node.left, low, node.element))
        return result

    def ordering_violations(self) -> List[str]:
        """Elements that fall outside the bounds set by their ancestors."""
        problems = []
        for node, low, high in self._walk():
            if low is not None and not node.element > low:
                problems.append(f"{node.element!r} is not greater than ancestor {low!r}")
            if high is not None and not node.element < high:
                problems.append(f"{node.element!r} is not less than ancestor {high!r}")
        return problems

    def link_violations(self) -> List[str]:
        """Parent references that disagree with the child links."""
        problems = []
        root = self._tree.root
        if root is not None and root.parent is not None:
            problems.append(f"root {root.element!r} has a parent")
        for node, _, _ in self._walk():
            for child in node.children():
                if child.parent is not node:
                    problems.append(
                        f"{child.element!r} does not point back to parent {node.element!r}"
                    )
        return problems

    def count_violations(self) -> List[str]:
        """Report a cached count that differs from the reachable node count."""
        reachable = len(self._walk())
        if reachable != self._tree.size():
            return [f"cached size {self._tree.size()} != reachable nodes {reachable}"]
        return []

    def violations(self, include_count: bool = True) -> List[str]:
        """All detected problems (empty if the tree is sound).

        Args:
            include_count: Also check the cached count. Pass False right
                after pruning, where a stale count is expected.
        """
        problems = self.ordering_violations() + self.link_violations()
        if include_count:
            problems += self.count_violations()
        return problems

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level structural state for testing.

        Returns:
            Dictionary containing:
            - reachable_nodes: Nodes reachable from the root
            - cached_size: The tree's cached count
            - has_root: Whether the tree has a root
            - is_sound: Whether ordering and links are intact
        """
        return {
            'reachable_nodes': len(self._walk()),
            'cached_size': self._tree.size(),
            'has_root': self._tree.root is not None,
            'is_sound': not self.violations(include_count=False),
        }
