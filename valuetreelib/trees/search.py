"""Unbalanced binary search tree."""

from typing import Any, Callable, Optional, Tuple

from .binary import AbstractBinaryTree
from ..core.node import BinaryNode
from ..errors import DuplicateValueError


class BinarySearchTree(AbstractBinaryTree):
    """Binary search tree ordered by ``<`` on values (or on ``key(value)``).

    Everything in a node's left subtree sorts before it and everything in
    its right subtree sorts after it. There is no rebalancing, so inserting
    already-sorted data produces a tree as deep as it is long.

    Example:
        >>> tree = BinarySearchTree(0)
        >>> for v in (10, -10, 5):
        ...     tree.add(v)
        >>> list(tree.in_order())
        [-10, 0, 5, 10]
        >>> tree.find(7)
        5
    """

    def __init__(self, root_value: Any, key: Optional[Callable[[Any], Any]] = None):
        """Create a search tree.

        Args:
            root_value: Value stored at the root
            key: Optional function mapping a value to its sort key, as for
                sorted(). Values with equal keys count as duplicates.
        """
        self._key = key
        super().__init__(root_value)

    def add(self, value: Any) -> None:
        """Insert ``value`` as a new leaf at the end of its search path.

        Raises:
            DuplicateValueError: If an equal value (or key) is in the tree
        """
        self._index.check_absent(value)
        node, diff = self._descend(value)
        if diff == 0:
            raise DuplicateValueError(value)
        side = BinaryNode.LEFT if diff < 0 else BinaryNode.RIGHT
        self._insert_node(node, value, lambda parent, child: parent.set_slot(side, child))

    def find(self, value: Any) -> Any:
        """Return the value where a search for ``value`` stops.

        This is ``value`` itself when present. Otherwise it is the last node
        on the search path, i.e. the node the value would be attached to by
        ``add``. That is not necessarily the numerically closest value.
        """
        node, _ = self._descend(value)
        return node.value

    def _compare(self, a: Any, b: Any) -> int:
        if self._key is not None:
            a, b = self._key(a), self._key(b)
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def _descend(self, value: Any) -> Tuple[BinaryNode, int]:
        """Follow the search path for ``value``.

        Returns:
            The node where descent stops and how ``value`` compares to it
            (0 for an exact match)
        """
        node = self._root
        while True:
            diff = self._compare(value, node.value)
            if diff == 0:
                return node, 0
            following = node.left if diff < 0 else node.right
            if following is None:
                return node, diff
            node = following
