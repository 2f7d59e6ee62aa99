"""Identity index mapping values to the nodes that hold them.

The index turns every by-value query into a dictionary lookup instead of a
walk over the whole tree. It only stays correct if it is updated in
lock-step with the node graph, which is why trees touch it exclusively
through ``Tree._insert_node``.
"""

from typing import Any, Dict, Iterator, Optional

from .node import TreeNode
from ..errors import DuplicateValueError, InvalidValueError, NotFoundError


def check_value(value: Any) -> None:
    """Validate that ``value`` can be stored in an identity index.

    Raises:
        InvalidValueError: If value is None or unhashable
    """
    if value is None:
        raise InvalidValueError("None cannot be stored in a tree")
    try:
        hash(value)
    except TypeError as e:
        raise InvalidValueError(
            f"Tree values must be hashable, got {type(value).__name__}"
        ) from e


class IdentityIndex:
    """Mapping of value -> owning node."""

    def __init__(self):
        self._nodes: Dict[Any, TreeNode] = {}

    def lookup(self, value: Any) -> Optional[TreeNode]:
        """Return the node holding ``value``, or None if absent."""
        try:
            return self._nodes.get(value)
        except TypeError as e:
            raise InvalidValueError(
                f"Tree values must be hashable, got {type(value).__name__}"
            ) from e

    def require(self, value: Any) -> TreeNode:
        """Return the node holding ``value``.

        Raises:
            NotFoundError: If no node holds the value
        """
        node = self.lookup(value)
        if node is None:
            raise NotFoundError(value)
        return node

    def check_absent(self, value: Any) -> None:
        """Validate ``value`` and make sure it is not indexed yet.

        Raises:
            InvalidValueError: If value cannot be indexed
            DuplicateValueError: If value is already present
        """
        check_value(value)
        if value in self._nodes:
            raise DuplicateValueError(value)

    def register(self, node: TreeNode) -> None:
        """Index ``node`` under its value.

        Raises:
            DuplicateValueError: If the value is already present
        """
        self.check_absent(node.value)
        self._nodes[node.value] = node

    def __contains__(self, value: Any) -> bool:
        return self.lookup(value) is not None

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._nodes)
