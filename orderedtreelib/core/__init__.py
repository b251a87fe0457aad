"""Core building blocks for OrderedTreeLib.

This package contains the node type, the navigation adapter, the
traversal strategies and the stock visitors.
"""

from .node import BinaryNode
from .adapter import BinaryTreeAdapter
from .traverser import (
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    InOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    Visitor,
    CountingVisitor,
    ElementCollector,
    LevelCollector,
    TextRenderVisitor,
)

__all__ = [
    "BinaryNode",
    "BinaryTreeAdapter",
    "TreeTraverser",
    "DepthFirstPreOrderTraverser",
    "InOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "Visitor",
    "CountingVisitor",
    "ElementCollector",
    "LevelCollector",
    "TextRenderVisitor",
]
