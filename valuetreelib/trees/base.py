"""Shared base for every tree shape.

A Tree owns its root node and an identity index, and hides both behind an
API that speaks only in values. Subclasses decide the node type, the
adapter and the insertion policy; everything else (lookup, parent/child
queries, metrics and traversal) is written here once.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, List, Optional, Tuple, Union

from ..core.adapter import TreeAdapter
from ..core.index import IdentityIndex, check_value
from ..core.metrics import calculate_depth, calculate_width
from ..core.node import TreeNode
from ..core.traverser import (
    BreadthFirstTraverser,
    DepthFirstPostOrderTraverser,
    DepthFirstPreOrderTraverser,
    TreeTraverser,
    create_traverser,
)

logger = logging.getLogger(__name__)


class Tree(ABC):
    """Abstract value-addressed tree.

    Values must be hashable, compare by equality and be unique within one
    tree. ``None`` is reserved to mean "absent" in query results and cannot
    be stored.

    The tree is not thread-safe. Traversals are lazy generators; mutating
    the tree while one is running makes its next step raise RuntimeError.
    """

    def __init__(self, root_value: Any):
        """Create a tree holding a single root value.

        Args:
            root_value: Value stored at the root

        Raises:
            InvalidValueError: If root_value is None or unhashable
        """
        check_value(root_value)
        self._adapter = self._create_adapter()
        self._index = IdentityIndex()
        self._root = self._create_node(root_value, None)
        self._index.register(self._root)
        self._version = 0

    @abstractmethod
    def _create_node(self, value: Any, parent: Optional[TreeNode]) -> TreeNode:
        """Allocate a node of the shape this tree uses."""
        pass

    @abstractmethod
    def _create_adapter(self) -> TreeAdapter:
        """Return the adapter that walks this tree's nodes."""
        pass

    # Mutation

    def _insert_node(self,
                     parent: TreeNode,
                     value: Any,
                     attach: Callable[[TreeNode, TreeNode], None]) -> TreeNode:
        """Link a new leaf under ``parent`` and index it in one step.

        This is the only path by which nodes enter a tree, so the graph and
        the index cannot drift apart. ``attach`` performs the shape-specific
        linking and may raise before touching ``parent``; in that case
        nothing is registered.

        Raises:
            DuplicateValueError: If value is already present
            InvalidValueError: If value cannot be indexed
        """
        self._index.check_absent(value)
        node = self._create_node(value, parent)
        attach(parent, node)
        self._index.register(node)
        self._version += 1
        logger.debug("Inserted %r under %r", value, parent.value)
        return node

    def _node_or_root(self, value: Any) -> TreeNode:
        """Resolve an optional parent argument; None means the root."""
        if value is None:
            return self._root
        return self._index.require(value)

    # Queries

    @property
    def root(self) -> Any:
        """The value stored at the root."""
        return self._root.value

    @property
    def adapter(self) -> TreeAdapter:
        """The adapter traversers use to walk this tree."""
        return self._adapter

    def contains(self, value: Any) -> bool:
        """Check if the tree holds ``value``."""
        return value in self._index

    def get_parent(self, value: Any) -> Optional[Any]:
        """Return the parent's value, or None when ``value`` is the root.

        Raises:
            NotFoundError: If value is not in the tree
        """
        parent = self._index.require(value).parent
        return parent.value if parent is not None else None

    def get_children(self, value: Any) -> List[Any]:
        """Return the values of the children of ``value``, in order.

        Raises:
            NotFoundError: If value is not in the tree
        """
        node = self._index.require(value)
        return [child.value for child in self._adapter.get_children(node)]

    def get_depth(self) -> int:
        """Number of nodes on the longest root-to-leaf path (root alone = 1)."""
        return calculate_depth(self._root, self._adapter)

    def get_width(self) -> int:
        """Number of leaves in the tree (root alone = 1)."""
        return calculate_width(self._root, self._adapter)

    def get_level(self, value: Any) -> int:
        """Return how many edges separate ``value`` from the root.

        Raises:
            NotFoundError: If value is not in the tree
        """
        return self._adapter.get_depth(self._index.require(value))

    # Traversal

    def pre_order(self) -> Iterator[Any]:
        """Yield values root first, then each subtree in child order."""
        return self._values(DepthFirstPreOrderTraverser(self._adapter))

    def post_order(self) -> Iterator[Any]:
        """Yield values with every subtree before its root."""
        return self._values(DepthFirstPostOrderTraverser(self._adapter))

    def breadth_first(self) -> Iterator[Any]:
        """Yield values level by level, shallowest first."""
        return self._values(BreadthFirstTraverser(self._adapter))

    def traverse(self,
                 strategy: Union[str, TreeTraverser] = "pre_order",
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Any]:
        """Yield values using a named strategy or a traverser instance.

        Args:
            strategy: Strategy name (see create_traverser) or a traverser
            max_depth: Deepest level to visit, root = 0
            min_depth: Shallowest level to yield

        Raises:
            ValueError: If the strategy name is unknown
            CapabilityMismatchError: If the strategy does not fit this tree
        """
        if isinstance(strategy, str):
            strategy = create_traverser(strategy, self._adapter)
        return self._values(strategy, max_depth=max_depth, min_depth=min_depth)

    def walk(self,
             traverser: TreeTraverser,
             max_depth: Optional[int] = None,
             min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Return an iterator of ``(node, depth)`` pairs from ``traverser``.

        The tree's state is pinned when walk is called, not on the first
        ``next()``, so mutating the tree between the two is also caught.
        Nodes are internal structure and must be treated as read-only.

        Raises:
            RuntimeError: On the next step after the tree has been mutated
        """
        return self._walk(traverser, self._version, max_depth, min_depth)

    def _walk(self,
              traverser: TreeTraverser,
              version: int,
              max_depth: Optional[int],
              min_depth: int) -> Iterator[Tuple[TreeNode, int]]:
        self._check_unchanged(version)
        for node, depth in traverser.traverse(self._root,
                                              max_depth=max_depth,
                                              min_depth=min_depth):
            self._check_unchanged(version)
            yield node, depth
        self._check_unchanged(version)

    def _values(self, traverser: TreeTraverser, **kwargs) -> Iterator[Any]:
        pairs = self.walk(traverser, **kwargs)
        return (node.value for node, _ in pairs)

    def _check_unchanged(self, version: int) -> None:
        if self._version != version:
            raise RuntimeError("tree changed during iteration")

    # Python protocol

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[Any]:
        return self.pre_order()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(root={self.root!r}, size={len(self)})"
