"""OrderedTreeLib - Ordered Binary Search Tree Library.

OrderedTreeLib provides a binary search tree container with silent
duplicate rejection, prune-style removal and visitor-based traversal.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from orderedtreelib import OrderedTree

    tree = OrderedTree()
    tree.insert("shame")
    tree.traverse(lambda element, level: print(level, element))
━━━━━━━━━━━━━━━━━━━━━━━━━━

Pruning removes a whole subtree and leaves the cached size untouched;
call ``recount()`` afterwards when an exact size is needed.
"""

import logging

__version__ = "0.1.0"

from .tree import OrderedTree
from .core import (
    BinaryNode,
    BinaryTreeAdapter,
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    InOrderTraverser,
    DepthFirstPostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
    Visitor,
    CountingVisitor,
    ElementCollector,
    LevelCollector,
    TextRenderVisitor,
)
from .config import (
    TraversalConfig,
    TraversalStrategy,
    SearchPolicy,
    DepthConfig,
    RenderConfig,
)
from .planning import TraversalPlan
from .errors import (
    OrderedTreeError,
    UnsupportedOperationError,
    InvalidConfigurationError,
)
from .api import (
    build_tree,
    collect_elements,
    collect_levels,
    count_nodes,
    render_tree,
    get_leaf_elements,
    get_tree_stats,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Tree
    "OrderedTree",
    # Core
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
    # Config
    "TraversalConfig",
    "TraversalStrategy",
    "SearchPolicy",
    "DepthConfig",
    "RenderConfig",
    "TraversalPlan",
    # Errors
    "OrderedTreeError",
    "UnsupportedOperationError",
    "InvalidConfigurationError",
    # API
    "build_tree",
    "collect_elements",
    "collect_levels",
    "count_nodes",
    "render_tree",
    "get_leaf_elements",
    "get_tree_stats",
]
