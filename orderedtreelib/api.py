"""High-level API for OrderedTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the OrderedTree methods for ease of use
in simple cases.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple, Union
from .config import RenderConfig, SearchPolicy, TraversalStrategy
from .core.collector import CountingVisitor, ElementCollector, LevelCollector
from .tree import OrderedTree


def build_tree(elements: Iterable[Any],
               search_policy: SearchPolicy = SearchPolicy.PRE_ORDER) -> OrderedTree:
    """Create a tree and insert every element in order.

    Duplicates are dropped, so the resulting size is the number of
    distinct elements.

    Example:
        >>> tree = build_tree(["shame", "on", "you", "you"])
        >>> tree.size()
        3
    """
    tree = OrderedTree(search_policy=search_policy)
    for element in elements:
        tree.insert(element)
    return tree


def collect_elements(
    tree: OrderedTree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
    max_level: Optional[int] = None
) -> List[Any]:
    """Return the tree's elements in the given traversal order.

    Args:
        tree: Tree to walk
        strategy: Traversal order (pre-order by default)
        max_level: Deepest level to include

    Returns:
        List of elements in visit order

    Example:
        >>> collect_elements(build_tree([2, 1, 3]), "in_order")
        [1, 2, 3]
    """
    collector = ElementCollector()
    tree.traverse(collector, strategy=strategy, max_level=max_level)
    return collector.elements


def collect_levels(tree: OrderedTree) -> List[Tuple[Any, int]]:
    """Return ``(element, level)`` pairs in pre-order."""
    collector = LevelCollector()
    tree.traverse(collector)
    return collector.visits


def count_nodes(tree: OrderedTree, max_level: Optional[int] = None) -> int:
    """Count reachable nodes without touching the cached size.

    Args:
        tree: Tree to count
        max_level: Only count nodes down to this level

    Returns:
        Number of nodes reached
    """
    counter = CountingVisitor()
    tree.traverse(counter, max_level=max_level)
    return counter.count


def render_tree(tree: OrderedTree,
                level_marker: str = "-",
                separator: str = "|") -> str:
    """Render a tree as text with the given markers.

    Example:
        >>> print(render_tree(build_tree(["m", "a", "z"])))
        -m
        |--a
        |--z
    """
    return tree.render(RenderConfig(level_marker=level_marker, separator=separator))


def get_leaf_elements(tree: OrderedTree) -> List[Any]:
    """Return the elements held by leaf nodes, in pre-order."""
    leaves = []
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        if node.is_leaf():
            leaves.append(node.element)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return leaves


def get_tree_stats(tree: OrderedTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    The cached size is reported as-is next to a fresh count, so a stale
    size after pruning shows up as a mismatch. The tree's cached size is
    not modified.

    Returns:
        Dictionary with structural statistics
    """
    levels = LevelCollector()
    tree.traverse(levels)

    return {
        'cached_size': tree.size(),
        'reachable_nodes': len(levels.visits),
        'size_is_stale': tree.size() != len(levels.visits),
        'height': levels.max_level,
        'leaf_count': len(get_leaf_elements(tree)),
        'level_widths': dict(sorted(levels.widths.items())),
        'root': tree.root.element if tree.root is not None else None,
    }
