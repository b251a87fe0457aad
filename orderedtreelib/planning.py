"""Traversal planning for OrderedTreeLib.

The TraversalPlan validates a TraversalConfig up front and then drives a
visitor over a tree. Validation happens before any node is visited, so a
bad configuration never produces a partial walk.
"""

import logging
from typing import Any, Callable, Dict, Iterator, Optional, Tuple
from .core.node import BinaryNode
from .core.adapter import BinaryTreeAdapter
from .core.traverser import TreeTraverser, create_traverser
from .config import TraversalConfig
from .errors import InvalidConfigurationError

logger = logging.getLogger(__name__)

VisitorFn = Callable[[Any, int], None]


class TraversalPlan:
    """Validated plan for walking a tree.

    Bridges user intent (TraversalConfig) and execution by picking the
    traverser that matches the configured strategy.
    """

    def __init__(self, config: TraversalConfig, adapter: Optional[BinaryTreeAdapter] = None):
        """Create and validate a traversal plan.

        Args:
            config: Traversal configuration
            adapter: Navigation adapter (a default one is created if omitted)

        Raises:
            InvalidConfigurationError: If the configuration is inconsistent
        """
        self.config = config
        self.adapter = adapter or BinaryTreeAdapter()

        config_errors = config.validate()
        if config_errors:
            raise InvalidConfigurationError(config_errors)

        self.traverser = self._select_traverser()
        self.nodes_visited = 0

    def _select_traverser(self) -> TreeTraverser:
        return create_traverser(self.config.strategy, self.adapter, self.config.depth)

    def walk(self, root: Optional[BinaryNode]) -> Iterator[Tuple[BinaryNode, int]]:
        """Yield ``(node, level)`` pairs according to the plan.

        Args:
            root: Root node to start from (None = empty tree)
        """
        self.nodes_visited = 0
        for node, level in self.traverser.traverse(root):
            self.nodes_visited += 1
            yield (node, level)

    def execute(self, root: Optional[BinaryNode], visitor: VisitorFn) -> int:
        """Run the plan, calling ``visitor(element, level)`` for each node.

        Exceptions raised by the visitor propagate to the caller and end
        the walk.

        Args:
            root: Root node to start from (None = empty tree)
            visitor: Callable receiving each element and its level

        Returns:
            Number of nodes handed to the visitor
        """
        for node, level in self.walk(root):
            visitor(node.element, level)
        logger.debug("%s visited %d nodes", self.traverser.__class__.__name__, self.nodes_visited)
        return self.nodes_visited

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of the plan.

        Useful for debugging and logging.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'min_level': self.config.depth.min_level,
            'max_level': self.config.depth.max_level,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
        }
