"""Configuration system for OrderedTreeLib.

This module defines how users specify their traversal requirements:
which order to walk in, which levels to report, how lookups search, and
how the text rendering looks.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class TraversalStrategy(Enum):
    """How to traverse the tree.

    Pre-order is the default and the order every text view uses.
    """
    DEPTH_FIRST_PRE = "dfs_pre"     # Node, then left subtree, then right subtree
    IN_ORDER = "in_order"           # Left subtree, node, right subtree (sorted)
    DEPTH_FIRST_POST = "dfs_post"   # Children before node
    LEVEL_ORDER = "level"           # Level by level


class SearchPolicy(Enum):
    """How ``find`` looks for a matching node.

    Both policies return the same node on a tree that respects the
    ordering invariant; they differ in how many nodes get visited.
    """
    PRE_ORDER = "pre_order"   # Exhaustive: node, whole left subtree, then right
    ORDERED = "ordered"       # Follow comparisons down a single path


@dataclass
class DepthConfig:
    """Configuration for level-based filtering (levels are 1-based)."""

    min_level: int = 1                 # Minimum level to report
    max_level: Optional[int] = None    # Maximum level to descend to

    def should_yield(self, level: int) -> bool:
        """Check if nodes at this level should be reported.

        Args:
            level: Current level

        Returns:
            True if level is within configured range
        """
        if level < self.min_level:
            return False
        if self.max_level is not None and level > self.max_level:
            return False
        return True

    def should_explore(self, level: int) -> bool:
        """Check if children of a node at this level should be walked.

        Args:
            level: Current level

        Returns:
            True if we should go deeper
        """
        if self.max_level is not None:
            return level < self.max_level
        return True  # No limit


@dataclass
class RenderConfig:
    """Markers used by the text rendering of a tree."""

    level_marker: str = "-"      # Repeated once per level
    separator: str = "|"         # Placed before the level markers below the root
    line_separator: str = "\n"   # Joins rendered lines

    def prefix(self, level: int) -> str:
        """Build the line prefix for an element at ``level``."""
        markers = self.level_marker * level
        if level > 1:
            return self.separator + markers
        return markers

    def validate(self) -> List[str]:
        """Validate marker configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not self.level_marker:
            errors.append("level_marker cannot be empty")
        return errors


@dataclass
class TraversalConfig:
    """Complete configuration for a tree traversal.

    The TraversalPlan validates this configuration before any node is
    visited.
    """

    strategy: TraversalStrategy = TraversalStrategy.DEPTH_FIRST_PRE
    depth: DepthConfig = field(default_factory=DepthConfig)

    @classmethod
    def pre_order(cls, max_level: Optional[int] = None) -> 'TraversalConfig':
        """Create config for a plain pre-order walk.

        Args:
            max_level: How deep to walk (None = whole tree)

        Returns:
            TraversalConfig for pre-order traversal
        """
        return cls(
            strategy=TraversalStrategy.DEPTH_FIRST_PRE,
            depth=DepthConfig(max_level=max_level),
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, TraversalStrategy):
            errors.append(f"unknown traversal strategy: {self.strategy!r}")

        if self.depth.min_level < 1:
            errors.append("min_level must be at least 1")

        if self.depth.max_level is not None:
            if self.depth.max_level < 1:
                errors.append("max_level must be at least 1")
            if self.depth.max_level < self.depth.min_level:
                errors.append("max_level cannot be less than min_level")

        return errors


# Every accepted strategy name, lower-cased
STRATEGY_ALIASES = {
    'dfs_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'pre_order': TraversalStrategy.DEPTH_FIRST_PRE,
    'depth_first_pre': TraversalStrategy.DEPTH_FIRST_PRE,
    'in_order': TraversalStrategy.IN_ORDER,
    'dfs_post': TraversalStrategy.DEPTH_FIRST_POST,
    'post_order': TraversalStrategy.DEPTH_FIRST_POST,
    'depth_first_post': TraversalStrategy.DEPTH_FIRST_POST,
    'level': TraversalStrategy.LEVEL_ORDER,
    'level_order': TraversalStrategy.LEVEL_ORDER,
}


def parse_strategy(strategy) -> TraversalStrategy:
    """Parse a strategy given as an enum member or one of its names.

    Args:
        strategy: TraversalStrategy, or a case-insensitive name from
            STRATEGY_ALIASES such as "dfs_pre", "pre_order" or "LEVEL_ORDER"

    Returns:
        The matching TraversalStrategy

    Raises:
        ValueError: If the strategy is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    key = str(strategy).lower()
    if key not in STRATEGY_ALIASES:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(STRATEGY_ALIASES.keys())}"
        )
    return STRATEGY_ALIASES[key]
