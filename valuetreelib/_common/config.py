"""Configuration system for ValueTreeLib.

This module defines how users specify their traversal requirements:
which order to walk in, which depths and values to keep, and what data to
collect for each visited node.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Set


class TraversalStrategy(Enum):
    """How to traverse the tree."""
    PRE_ORDER = "pre_order"         # Parent before children
    IN_ORDER = "in_order"           # Left, parent, right (binary trees only)
    POST_ORDER = "post_order"       # Children before parent
    BREADTH_FIRST = "bfs"           # Level by level
    LEVEL_ORDER = "level"           # Level by level, a whole level at a time
    CUSTOM = "custom"               # User-defined traverser


class DataRequirement(Enum):
    """Specifies what data is collected for each visited node."""
    VALUE = "value"                     # The stored value
    DEPTH = "depth"                     # Depth below the root (root = 0)
    PATH = "path"                       # Values from the root down
    CHILDREN_COUNT = "children_count"   # Number of immediate children
    FULL_NODE = "full"                  # The node object itself
    CUSTOM = "custom"                   # User-defined collection


@dataclass
class FilterConfig:
    """Configuration for filtering values during traversal."""

    include_filter: Optional[Callable[[Any], bool]] = None  # Include predicate
    exclude_filter: Optional[Callable[[Any], bool]] = None  # Exclude predicate

    # Pruning behavior
    prune_on_exclude: bool = False  # Don't descend below excluded values

    def should_include(self, value: Any) -> bool:
        """Check if a value passes the filters.

        Exclusion takes precedence over inclusion.
        """
        if self.exclude_filter and self.exclude_filter(value):
            return False
        if self.include_filter:
            return self.include_filter(value)
        return True

    def should_explore_children(self, value: Any) -> bool:
        """Check if the subtree below a value should still be walked."""
        if not self.prune_on_exclude:
            return True
        return self.should_include(value)


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering. Root is depth 0."""

    min_depth: int = 0                          # Minimum depth to yield
    max_depth: Optional[int] = None             # Maximum depth to traverse
    specific_depths: Optional[Set[int]] = None  # Only these specific depths

    def should_yield(self, depth: int) -> bool:
        """Check if values at this depth should be yielded."""
        if self.specific_depths is not None:
            return depth in self.specific_depths
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def effective_max_depth(self) -> Optional[int]:
        """Deepest level the traverser needs to reach."""
        if self.specific_depths is not None:
            return max(self.specific_depths, default=0)
        return self.max_depth


@dataclass
class TraversalConfig:
    """Complete configuration for one traversal.

    The ExecutionPlan validates this configuration against the tree's
    adapter before anything is walked.
    """

    # Traversal algorithm
    strategy: TraversalStrategy = TraversalStrategy.PRE_ORDER
    custom_traverser: Optional[Any] = None  # Custom traverser instance

    # Depth control
    depth: DepthConfig = field(default_factory=DepthConfig)

    # Value filtering
    filter: FilterConfig = field(default_factory=FilterConfig)

    # Data collection
    data_requirements: DataRequirement = DataRequirement.VALUE
    custom_collector: Optional[Any] = None  # Custom collector instance

    # Limits
    max_nodes: Optional[int] = None  # Stop after this many results

    # Error handling for user callbacks (filters, custom collectors)
    on_error: Optional[Callable[[Any, Exception], None]] = None
    skip_errors: bool = False  # Continue on errors vs fail fast

    @classmethod
    def sorted_values(cls) -> 'TraversalConfig':
        """Config for reading a search tree in ascending order."""
        return cls(strategy=TraversalStrategy.IN_ORDER)

    @classmethod
    def shallow_scan(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Config for the top ``max_depth`` levels below the root."""
        return cls(
            strategy=TraversalStrategy.BREADTH_FIRST,
            depth=DepthConfig(max_depth=max_depth),
        )

    @classmethod
    def paths(cls) -> 'TraversalConfig':
        """Config yielding the root path of every value, pre-order."""
        return cls(
            strategy=TraversalStrategy.PRE_ORDER,
            data_requirements=DataRequirement.PATH,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.depth.specific_depths is not None:
            if any(d < 0 for d in self.depth.specific_depths):
                errors.append("specific_depths cannot contain negative depths")

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        if self.strategy == TraversalStrategy.CUSTOM and self.custom_traverser is None:
            errors.append("custom_traverser required when strategy is CUSTOM")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        return errors
