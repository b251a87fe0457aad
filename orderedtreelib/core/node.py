"""BinaryNode abstraction for OrderedTreeLib.

The BinaryNode is intentionally kept simple - it's primarily a data container.
Ordering decisions are made by the OrderedTree, and navigation helpers live
in the BinaryTreeAdapter.
"""

import weakref
from typing import Any, Dict, Generic, Iterator, Optional, TypeVar

T = TypeVar('T')


class BinaryNode(Generic[T]):
    """A single node of an ordered binary tree.

    Each node owns at most two children through its ``left`` and ``right``
    links. The link back to the parent is a weak reference, so dropping a
    node's owning link releases the whole subtree below it.
    """

    __slots__ = ('_element', 'left', 'right', '_parent', '__weakref__')

    def __init__(self, element: T, parent: Optional['BinaryNode[T]'] = None):
        """Create a node holding ``element``.

        Args:
            element: The element this node wraps
            parent: Parent node, or None for a root
        """
        self._element = element
        self.left: Optional[BinaryNode[T]] = None
        self.right: Optional[BinaryNode[T]] = None
        self._parent: Optional[weakref.ref] = None
        self.parent = parent

    @property
    def element(self) -> T:
        """The element wrapped by this node."""
        return self._element

    @property
    def parent(self) -> Optional['BinaryNode[T]']:
        """The parent node, or None if this is a root (or detached)."""
        if self._parent is None:
            return None
        return self._parent()

    @parent.setter
    def parent(self, node: Optional['BinaryNode[T]']) -> None:
        self._parent = weakref.ref(node) if node is not None else None

    def children(self) -> Iterator['BinaryNode[T]']:
        """Yield the existing children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def is_leaf(self) -> bool:
        """Check if this node has no children.

        Returns:
            bool: True if both child links are empty
        """
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Check if this node has no parent."""
        return self.parent is None

    def level(self) -> int:
        """Return the 1-based level of this node (root = 1)."""
        level = 1
        current = self.parent
        while current is not None:
            level += 1
            current = current.parent
        return level

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight structural information about this node.

        Returns:
            Dict[str, Any]: element, level, leaf flag and child count
        """
        return {
            'element': self._element,
            'level': self.level(),
            'is_leaf': self.is_leaf(),
            'child_count': sum(1 for _ in self.children()),
        }

    def __str__(self) -> str:
        """String representation defaults to the element."""
        return str(self._element)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(element={self._element!r})"
