"""Tree traversal strategies for ValueTreeLib.

Traversers implement different algorithms for walking through trees.
They work with any TreeAdapter, making them shared by every tree shape.
Each one drives an explicit stack or queue rather than recursing, so very
deep trees (a degenerate search tree is a linked list) do not hit the
interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from .adapter import TreeAdapter
from .node import TreeNode
from ..errors import CapabilityMismatchError


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Traversers are stateless between calls: every ``traverse`` builds a
    fresh generator, so the same traverser can be reused and two walks of
    an unmodified tree yield identical sequences.
    """

    def __init__(self, adapter: TreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        """Check if a node at given depth should be yielded."""
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of node at given depth should be explored."""
        if max_depth is None:
            return True
        return depth < max_depth

    def _children(self, node: TreeNode, depth: int,
                  max_depth: Optional[int]) -> List[TreeNode]:
        # Snapshot so later pushes never depend on the live child list
        if not self._should_explore(depth, max_depth):
            return []
        return list(self.adapter.get_children(node))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1. Within a
    level, nodes come out in the order their parents were visited.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        queue: Deque[Tuple[TreeNode, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            for child in self._children(node, depth, max_depth):
                queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, children left to right (or in insertion
    order). Good for copying trees or prefix notation.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        stack: List[Tuple[TreeNode, int]] = [(root, 0)]

        while stack:
            node, depth = stack.pop()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            # Reversed so the first child is popped first
            for child in reversed(self._children(node, depth, max_depth)):
                stack.append((child, depth + 1))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. A node is yielded only after its entire
    subtree, which makes it the natural order for aggregation.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        # Third element marks nodes whose children are already on the stack
        stack: List[Tuple[TreeNode, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            for child in reversed(self._children(node, depth, max_depth)):
                stack.append((child, depth + 1, False))


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order traversal strategy (left, node, right).

    Only defined for trees whose nodes have at most two ordered children,
    so the adapter must support in-order access. On a search tree this
    yields values in ascending order.
    """

    def __init__(self, adapter: TreeAdapter):
        if not adapter.supports_in_order():
            raise CapabilityMismatchError(
                f"In-order traversal needs left/right child slots; "
                f"{adapter.__class__.__name__} does not provide them"
            )
        super().__init__(adapter)

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        stack: List[Tuple[TreeNode, int]] = []
        current: Optional[Tuple[TreeNode, int]] = (root, 0)

        while stack or current is not None:
            # Run down the left spine
            while current is not None:
                node, depth = current
                stack.append(current)
                left = None
                if self._should_explore(depth, max_depth):
                    left = self.adapter.get_left(node)
                current = (left, depth + 1) if left is not None else None

            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            right = None
            if self._should_explore(depth, max_depth):
                right = self.adapter.get_right(node)
            current = (right, depth + 1) if right is not None else None


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal with level grouping.

    Same output order as breadth-first, but a whole level is collected
    before the next is started. ``levels`` exposes the grouping directly.
    """

    def levels(self,
               root: TreeNode,
               max_depth: Optional[int] = None) -> Iterator[List[TreeNode]]:
        """Yield the nodes of each level as a list, shallowest first."""
        current_level: List[TreeNode] = [root]
        current_depth = 0

        while current_level and (max_depth is None or current_depth <= max_depth):
            yield current_level
            next_level: List[TreeNode] = []
            for node in current_level:
                next_level.extend(self._children(node, current_depth, max_depth))
            current_level = next_level
            current_depth += 1

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        for depth, level in enumerate(self.levels(root, max_depth)):
            if not self._should_yield(depth, min_depth, max_depth):
                continue
            for node in level:
                yield (node, depth)


# Factory function for creating traversers by name
def create_traverser(strategy: str, adapter: TreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (pre, in, post, bfs, level)
        adapter: TreeAdapter for the tree shape

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
        CapabilityMismatchError: If the adapter cannot support the strategy
    """
    strategies = {
        'pre': DepthFirstPreOrderTraverser,
        'pre_order': DepthFirstPreOrderTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'in': InOrderTraverser,
        'in_order': InOrderTraverser,
        'post': DepthFirstPostOrderTraverser,
        'post_order': DepthFirstPostOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
