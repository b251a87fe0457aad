"""BinaryTreeAdapter for OrderedTreeLib.

The adapter holds the navigation logic for binary nodes, decoupling the
node representation from the traversal mechanism. Traversers only ever
talk to the tree through an adapter.
"""

from typing import Iterator, List, Optional
from .node import BinaryNode


class BinaryTreeAdapter:
    """Navigates the owning child links and weak parent links of BinaryNode.

    This separation allows:
    - The same traverser to walk in different orders
    - Navigation helpers to be shared by the tree, the traversers and tests
    """

    def get_children(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Get an iterator of child nodes for the given node.

        Args:
            node: The parent node

        Returns:
            Iterator yielding the left child (if any) then the right child
        """
        return node.children()

    def get_left(self, node: BinaryNode) -> Optional[BinaryNode]:
        return node.left

    def get_right(self, node: BinaryNode) -> Optional[BinaryNode]:
        return node.right

    def get_parent(self, node: BinaryNode) -> Optional[BinaryNode]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent BinaryNode or None if node is root
        """
        return node.parent

    def get_level(self, node: BinaryNode) -> int:
        """Calculate the level of a node in the tree.

        Walks up to the root.

        Args:
            node: The node to get the level for

        Returns:
            Level where root = 1
        """
        level = 1
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            level += 1
            current = parent
        return level

    def get_siblings(self, node: BinaryNode) -> Iterator[BinaryNode]:
        """Get the sibling of the given node (excluding the node itself).

        Args:
            node: The node to get siblings for

        Returns:
            Iterator yielding at most one sibling
        """
        parent = self.get_parent(node)
        if parent is None:
            return iter([])  # Root has no siblings
        return (child for child in self.get_children(parent) if child is not node)

    def is_attached(self, node: BinaryNode, root: Optional[BinaryNode]) -> bool:
        """Check that walking parent links from ``node`` reaches ``root``.

        A pruned subtree keeps its internal parent links but its top node
        no longer hangs off a live parent, so the walk stops short of root.
        """
        if root is None:
            return False
        current = node
        while current is not None:
            if current is root:
                return True
            parent = self.get_parent(current)
            if parent is not None and current is not parent.left and current is not parent.right:
                return False
            current = parent
        return False

    def subtree_size(self, node: Optional[BinaryNode]) -> int:
        """Count the nodes in the subtree rooted at ``node``.

        Args:
            node: Root of subtree to count, may be None

        Returns:
            Number of nodes, 0 for None
        """
        if node is None:
            return 0
        count = 0
        stack: List[BinaryNode] = [node]
        while stack:
            current = stack.pop()
            count += 1
            stack.extend(self.get_children(current))
        return count

    def subtree_height(self, node: Optional[BinaryNode]) -> int:
        """Number of levels in the subtree rooted at ``node`` (0 for None)."""
        if node is None:
            return 0
        height = 0
        stack = [(node, 1)]
        while stack:
            current, level = stack.pop()
            height = max(height, level)
            for child in self.get_children(current):
                stack.append((child, level + 1))
        return height
