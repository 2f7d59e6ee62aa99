"""Data collection strategies for ValueTreeLib.

DataCollectors define what information to extract from nodes during
traversal. This lets one traversal produce plain values, depths, root paths
or custom records depending on what the caller asked for.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List

from .adapter import TreeAdapter
from .node import TreeNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: TreeAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: TreeAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: TreeNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal (root = 0)

        Returns:
            Collected data (type depends on collector)
        """
        pass

    def reset(self) -> None:
        """Drop any state kept from a previous traversal."""
        pass


class ValueCollector(DataCollector):
    """Collects only the stored value. Cheapest collector."""

    def collect(self, node: TreeNode, depth: int) -> Any:
        return node.value


class DepthCollector(DataCollector):
    """Collects the depth at which each node was visited."""

    def collect(self, node: TreeNode, depth: int) -> int:
        return depth


class FullNodeCollector(DataCollector):
    """Collects the node object itself.

    Nodes are internal structure; callers should treat them as read-only.
    """

    def collect(self, node: TreeNode, depth: int) -> TreeNode:
        return node


class ChildCountCollector(DataCollector):
    """Collects a small record with the number of immediate children."""

    def collect(self, node: TreeNode, depth: int) -> Dict[str, Any]:
        child_count = sum(1 for _ in self.adapter.get_children(node))
        return {
            'value': node.value,
            'depth': depth,
            'child_count': child_count,
            'is_leaf': child_count == 0,
        }


class PathCollector(DataCollector):
    """Collects the list of values from the root down to each node."""

    def __init__(self, adapter: TreeAdapter):
        super().__init__(adapter)
        self._path_cache: Dict[int, List[Any]] = {}

    def reset(self) -> None:
        self._path_cache.clear()

    def collect(self, node: TreeNode, depth: int) -> List[Any]:
        key = id(node)
        if key in self._path_cache:
            return list(self._path_cache[key])

        parent = self.adapter.get_parent(node)
        if parent is None:
            path = [node.value]
        elif id(parent) in self._path_cache:
            # Parent seen earlier in a pre-order or breadth-first walk
            path = self._path_cache[id(parent)] + [node.value]
        else:
            path = [node.value]
            while parent is not None:
                path.insert(0, parent.value)
                parent = self.adapter.get_parent(parent)

        self._path_cache[key] = path
        return list(path)


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, adapter: TreeAdapter, collect_func: Callable[[TreeNode, int], Any]):
        """Initialize with custom collection function.

        Args:
            adapter: TreeAdapter for tree navigation
            collect_func: Function(node, depth) -> Any
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: TreeNode, depth: int) -> Any:
        return self.collect_func(node, depth)
