"""Unit tests for the OrderedTree container.

Covers insertion, lookup, pruning, recounting and the unsupported
rebuild removal, including the worked example of thirteen distinct words.
"""

import gc
import unittest
import sys
import weakref
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from orderedtreelib import (
    OrderedTree,
    SearchPolicy,
    UnsupportedOperationError,
    build_tree,
    collect_elements,
)
from orderedtreelib.testing import TreeInvariantChecker


WORDS = [
    "shame", "on", "you", "if", "you", "step", "through",
    "to", "the", "old", "dirty", "bastard", "brooklyn", "zoo",
]


class TestInsert(unittest.TestCase):
    """Test insertion and duplicate handling."""

    def test_new_tree_is_empty(self):
        tree = OrderedTree()
        self.assertEqual(tree.size(), 0)
        self.assertTrue(tree.is_empty())
        self.assertIsNone(tree.root)
        self.assertFalse(tree)

    def test_first_insert_becomes_root(self):
        tree = OrderedTree()
        tree.insert(42)
        self.assertEqual(tree.size(), 1)
        self.assertEqual(tree.root.element, 42)
        self.assertIsNone(tree.root.parent)
        self.assertTrue(tree.root.is_root())

    def test_smaller_goes_left_larger_goes_right(self):
        tree = OrderedTree()
        for value in (50, 30, 70):
            tree.insert(value)
        self.assertEqual(tree.root.left.element, 30)
        self.assertEqual(tree.root.right.element, 70)
        self.assertIs(tree.root.left.parent, tree.root)
        self.assertIs(tree.root.right.parent, tree.root)

    def test_duplicate_is_ignored(self):
        tree = OrderedTree()
        tree.insert("x")
        before = tree.render()
        tree.insert("x")
        self.assertEqual(tree.size(), 1)
        self.assertEqual(tree.render(), before)

    def test_duplicate_deep_in_tree_leaves_shape_unchanged(self):
        tree = build_tree([50, 30, 70, 20, 40, 60, 80])
        before = collect_elements(tree)
        tree.insert(40)
        self.assertEqual(tree.size(), 7)
        self.assertEqual(collect_elements(tree), before)

    def test_insert_keeps_invariants(self):
        tree = build_tree([8, 3, 10, 1, 6, 14, 4, 7, 13])
        self.assertEqual(TreeInvariantChecker(tree).violations(), [])


class TestFind(unittest.TestCase):
    """Test lookup with both search policies."""

    def setUp(self):
        self.pre_order = build_tree(WORDS)
        self.ordered = build_tree(WORDS, search_policy=SearchPolicy.ORDERED)

    def test_find_present_element(self):
        node = self.pre_order.find("through")
        self.assertIsNotNone(node)
        self.assertEqual(node.element, "through")
        self.assertEqual(node.parent.element, "step")

    def test_find_absent_element(self):
        self.assertIsNone(self.pre_order.find("shames"))
        self.assertIsNone(self.ordered.find("shames"))

    def test_find_on_empty_tree(self):
        self.assertIsNone(OrderedTree().find("anything"))
        self.assertIsNone(OrderedTree(search_policy=SearchPolicy.ORDERED).find(1))

    def test_policies_agree(self):
        for word in set(WORDS) | {"aardvark", "shames", "zzz", "p"}:
            a = self.pre_order.find(word)
            b = self.ordered.find(word)
            self.assertEqual(a is None, b is None, word)
            if a is not None:
                self.assertEqual(a.element, b.element)

    def test_policy_returns_node_identity(self):
        tree = build_tree([5, 2, 8])
        tree.search_policy = SearchPolicy.PRE_ORDER
        first = tree.find(8)
        tree.search_policy = SearchPolicy.ORDERED
        self.assertIs(tree.find(8), first)

    def test_contains(self):
        self.assertIn("zoo", self.pre_order)
        self.assertNotIn("shames", self.pre_order)
        self.assertTrue(self.ordered.contains("bastard"))

    def test_find_does_not_change_size(self):
        self.pre_order.find("nothing")
        self.assertEqual(self.pre_order.size(), 13)


class TestRemoveAndPrune(unittest.TestCase):
    """Test subtree pruning."""

    def setUp(self):
        self.tree = build_tree(WORDS)

    def test_prune_on_empty_tree(self):
        tree = OrderedTree()
        self.assertFalse(tree.remove_and_prune("x"))
        self.assertEqual(tree.size(), 0)

    def test_prune_absent_element(self):
        before = collect_elements(self.tree)
        self.assertFalse(self.tree.remove_and_prune("shames"))
        self.assertEqual(self.tree.size(), 13)
        self.assertEqual(collect_elements(self.tree), before)

    def test_prune_leaf(self):
        self.assertTrue(self.tree.remove_and_prune("zoo"))
        self.assertIsNone(self.tree.find("zoo"))
        self.assertIsNone(self.tree.find("you").right)
        self.assertEqual(self.tree.recount(), 12)

    def test_prune_does_not_update_cached_size(self):
        self.tree.remove_and_prune("zoo")
        self.assertEqual(self.tree.size(), 13)
        checker = TreeInvariantChecker(self.tree)
        self.assertEqual(checker.violations(include_count=False), [])
        self.assertEqual(len(checker.count_violations()), 1)
        self.tree.recount()
        self.assertEqual(checker.violations(), [])

    def test_prune_inner_node_drops_subtree(self):
        self.assertTrue(self.tree.remove_and_prune("you"))
        for gone in ("you", "step", "through", "the", "to", "zoo"):
            self.assertNotIn(gone, self.tree)
        for kept in ("shame", "on", "if", "dirty", "bastard", "brooklyn", "old"):
            self.assertIn(kept, self.tree)
        self.assertEqual(self.tree.recount(), 7)

    def test_pruned_node_is_detached(self):
        node = self.tree.find("step")
        self.tree.remove_and_prune("step")
        self.assertIsNone(node.parent)
        self.assertIsNone(self.tree.find("you").left)
        self.assertFalse(self.tree.adapter.is_attached(node.right, self.tree.root))

    def test_prune_root_clears_tree(self):
        self.assertTrue(self.tree.remove_and_prune("shame"))
        self.assertIsNone(self.tree.root)
        self.assertTrue(self.tree.is_empty())
        # Truthiness follows the root while len() keeps the stale cached count
        self.assertFalse(self.tree)
        self.assertEqual(len(self.tree), 13)
        self.assertEqual(self.tree.recount(), 0)
        self.assertFalse(self.tree.remove_and_prune("through"))

    def test_pruned_subtree_is_released(self):
        grandchild = weakref.ref(self.tree.find("through"))
        leaf = weakref.ref(self.tree.find("the"))
        self.assertTrue(self.tree.remove_and_prune("you"))
        gc.collect()
        self.assertIsNone(grandchild())
        self.assertIsNone(leaf())
        self.assertIsNotNone(self.tree.find("on"))

    def test_insert_after_prune(self):
        self.tree.remove_and_prune("you")
        self.tree.insert("you")
        self.assertIs(self.tree.find("you").parent, self.tree.root)
        self.assertEqual(self.tree.recount(), 8)


class TestRemoveAndRebuild(unittest.TestCase):
    """Rebuild removal has no defined behaviour and must say so."""

    def test_raises_unsupported(self):
        tree = build_tree([2, 1, 3])
        with self.assertRaises(UnsupportedOperationError) as ctx:
            tree.remove_and_rebuild(1)
        self.assertEqual(ctx.exception.operation, "remove_and_rebuild")

    def test_is_a_not_implemented_error(self):
        with pytest.raises(NotImplementedError):
            OrderedTree().remove_and_rebuild(1)

    def test_leaves_tree_untouched(self):
        tree = build_tree([2, 1, 3])
        with pytest.raises(UnsupportedOperationError):
            tree.remove_and_rebuild(1)
        self.assertEqual(collect_elements(tree), [2, 1, 3])
        self.assertEqual(tree.size(), 3)


class TestRecountAndClear(unittest.TestCase):

    def test_recount_after_inserts_matches_accepted_inserts(self):
        tree = OrderedTree()
        accepted = 0
        for value in [5, 3, 9, 3, 1, 9, 7, 5, 2]:
            if value not in tree:
                accepted += 1
            tree.insert(value)
        self.assertEqual(tree.size(), accepted)
        self.assertEqual(tree.recount(), accepted)

    def test_recount_on_empty_tree(self):
        self.assertEqual(OrderedTree().recount(), 0)

    def test_clear(self):
        tree = build_tree(WORDS)
        tree.clear()
        self.assertEqual(tree.size(), 0)
        self.assertIsNone(tree.root)

    def test_len_and_repr(self):
        tree = build_tree([1, 2, 3])
        self.assertEqual(len(tree), 3)
        self.assertEqual(repr(tree), "OrderedTree(size=3)")

    def test_height(self):
        self.assertEqual(OrderedTree().height(), 0)
        self.assertEqual(build_tree(WORDS).height(), 6)


def test_worked_example():
    """The thirteen-word scenario from start to finish."""
    tree = OrderedTree()
    for word in WORDS:
        tree.insert(word)
    assert tree.size() == 13

    assert tree.remove_and_prune("zoo") is True
    assert tree.recount() == 12

    assert tree.remove_and_prune("shames") is False
    assert tree.size() == 12

    assert tree.remove_and_prune("shame") is True
    assert tree.recount() == 0

    assert tree.remove_and_prune("through") is False


def test_prune_logs_at_debug(caplog):
    tree = build_tree([2, 1, 3])
    with caplog.at_level("DEBUG", logger="orderedtreelib"):
        tree.remove_and_prune(1)
    assert any("Pruned 1" in message for message in caplog.messages)


def test_recount_logs_correction(caplog):
    tree = build_tree([2, 1, 3])
    tree.remove_and_prune(1)
    with caplog.at_level("INFO", logger="orderedtreelib"):
        tree.recount()
    assert any("from 3 to 2" in message for message in caplog.messages)
