"""Execution planning for ValueTreeLib.

The ExecutionPlan validates that a TraversalConfig can be satisfied by a
tree's adapter and coordinates the actual traversal.
"""

import logging
from typing import Any, Dict, Iterator, List, Tuple

from .config import DataRequirement, TraversalConfig, TraversalStrategy
from .core.collector import (
    ChildCountCollector,
    DataCollector,
    DepthCollector,
    FullNodeCollector,
    PathCollector,
    ValueCollector,
)
from .core.node import TreeNode
from .core.traverser import TreeTraverser, create_traverser
from .errors import CapabilityMismatchError
from .trees.base import Tree

logger = logging.getLogger(__name__)


class ExecutionPlan:
    """Validated execution plan for tree traversal.

    The ExecutionPlan is the bridge between user intent (TraversalConfig)
    and execution. It checks the configuration and the adapter's
    capabilities up front, so a plan that constructs successfully can only
    fail later through user callbacks or concurrent mutation.
    """

    def __init__(self, config: TraversalConfig, tree: Tree):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            tree: Tree to traverse

        Raises:
            CapabilityMismatchError: If the tree can't satisfy config
        """
        self.config = config
        self.tree = tree
        self.adapter = tree.adapter

        config_errors = config.validate()
        if config_errors:
            raise CapabilityMismatchError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        capability_issues = self._validate_capabilities()
        if capability_issues:
            raise CapabilityMismatchError(
                f"Adapter limitations: {'; '.join(capability_issues)}"
            )

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()

        # Track execution state
        self.nodes_processed = 0
        self.errors_encountered: List[Tuple[Any, str]] = []

        logger.debug("Execution plan ready: %s", self.get_summary())

    def _validate_capabilities(self) -> List[str]:
        """Validate the adapter can satisfy configuration requirements.

        Returns:
            List of capability issues (empty if all satisfied)
        """
        issues = []

        if self.config.strategy == TraversalStrategy.IN_ORDER:
            if not self.adapter.supports_in_order():
                issues.append(
                    f"In-order traversal requested but "
                    f"{self.tree.__class__.__name__} nodes have no left/right slots"
                )

        return issues

    def _select_traverser(self) -> TreeTraverser:
        """Select the traverser named by the configuration."""
        if self.config.strategy == TraversalStrategy.CUSTOM:
            return self.config.custom_traverser

        strategy_map = {
            TraversalStrategy.PRE_ORDER: "pre_order",
            TraversalStrategy.IN_ORDER: "in_order",
            TraversalStrategy.POST_ORDER: "post_order",
            TraversalStrategy.BREADTH_FIRST: "bfs",
            TraversalStrategy.LEVEL_ORDER: "level",
        }

        return create_traverser(strategy_map[self.config.strategy], self.adapter)

    def _select_collector(self) -> DataCollector:
        """Select the data collector matching the data requirement."""
        if self.config.data_requirements == DataRequirement.CUSTOM:
            return self.config.custom_collector

        collector_map = {
            DataRequirement.VALUE: ValueCollector,
            DataRequirement.DEPTH: DepthCollector,
            DataRequirement.PATH: PathCollector,
            DataRequirement.CHILDREN_COUNT: ChildCountCollector,
            DataRequirement.FULL_NODE: FullNodeCollector,
        }

        collector_class = collector_map[self.config.data_requirements]
        return collector_class(self.adapter)

    def _check_limits(self) -> bool:
        """Check if the result limit has been reached."""
        if self.config.max_nodes is None:
            return True
        return self.nodes_processed < self.config.max_nodes

    def _handle_error(self, node: TreeNode, error: Exception) -> None:
        """Handle an error raised by a user callback.

        Args:
            node: Node being processed when the error occurred
            error: The exception that was raised
        """
        self.errors_encountered.append((node.value, str(error)))
        logger.debug("Error while processing %r: %s", node.value, error)

        if self.config.on_error:
            self.config.on_error(node.value, error)

        if not self.config.skip_errors:
            raise error

    def _is_pruned(self, node: TreeNode, pruned: Dict[int, bool]) -> bool:
        """Check whether an ancestor of ``node`` was excluded with pruning.

        Works for every traversal order, including post-order where a node
        is produced before its ancestors.
        """
        chain = []
        current = self.adapter.get_parent(node)
        result = False
        while current is not None:
            key = id(current)
            if key in pruned:
                result = pruned[key]
                break
            chain.append(current)
            current = self.adapter.get_parent(current)

        # Resolve from the top of the chain down, caching as we go
        for ancestor in reversed(chain):
            result = result or not self.config.filter.should_explore_children(ancestor.value)
            pruned[id(ancestor)] = result
        return result

    def execute(self) -> Iterator[Tuple[Any, Any]]:
        """Execute the traversal plan.

        The tree's state is pinned here, so a mutation made before the
        results are consumed is caught as well.

        Returns:
            Iterator of (value, collected_data) tuples

        Raises:
            RuntimeError: If the tree is mutated during execution
        """
        self.nodes_processed = 0
        self.errors_encountered = []
        self.collector.reset()
        depth_config = self.config.depth
        # specific_depths overrides the min/max range in should_yield
        min_depth = depth_config.min_depth if depth_config.specific_depths is None else 0

        pairs = self.tree.walk(
            self.traverser,
            max_depth=depth_config.effective_max_depth(),
            min_depth=min_depth
        )
        return self._run(pairs)

    def _run(self, pairs: Iterator[Tuple[TreeNode, int]]) -> Iterator[Tuple[Any, Any]]:
        pruned: Dict[int, bool] = {}
        prune = self.config.filter.prune_on_exclude
        depth_config = self.config.depth

        for node, depth in pairs:
            if not self._check_limits():
                break

            try:
                if prune and self._is_pruned(node, pruned):
                    continue

                if not depth_config.should_yield(depth):
                    continue

                if not self.config.filter.should_include(node.value):
                    continue

                data = self.collector.collect(node, depth)
            except Exception as e:
                self._handle_error(node, e)
                continue

            self.nodes_processed += 1
            yield (node.value, data)

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'strategy': self.config.strategy.value,
            'data_requirements': self.config.data_requirements.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'max_nodes': self.config.max_nodes,
            'tree': self.tree.__class__.__name__,
            'adapter': self.adapter.__class__.__name__,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
