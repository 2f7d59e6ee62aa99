"""Binary trees: two named child slots per node."""

from typing import Any, Iterator, Optional

from .base import Tree
from ..core.adapter import BinaryTreeAdapter, TreeAdapter
from ..core.node import BinaryNode
from ..core.traverser import InOrderTraverser
from ..errors import SlotOccupiedError


class AbstractBinaryTree(Tree):
    """Shared behaviour of BinaryTree and BinarySearchTree.

    Slot insertion is protected here: a plain binary tree exposes it, a
    search tree does not, because free placement would break its ordering.
    """

    def _create_node(self, value: Any, parent: Optional[BinaryNode]) -> BinaryNode:
        return BinaryNode(value, parent)

    def _create_adapter(self) -> TreeAdapter:
        return BinaryTreeAdapter()

    def get_left(self, parent: Any) -> Optional[Any]:
        """Return the value in the left slot of ``parent``, or None.

        Raises:
            NotFoundError: If parent is not in the tree
        """
        child = self._index.require(parent).left
        return child.value if child is not None else None

    def get_right(self, parent: Any) -> Optional[Any]:
        """Return the value in the right slot of ``parent``, or None.

        Raises:
            NotFoundError: If parent is not in the tree
        """
        child = self._index.require(parent).right
        return child.value if child is not None else None

    def in_order(self) -> Iterator[Any]:
        """Yield values left subtree first, then the node, then the right."""
        return self._values(InOrderTraverser(self._adapter))

    def _add_to_slot(self, side: str, value: Any, parent: Any = None) -> None:
        parent_node = self._node_or_root(parent)

        def attach(target: BinaryNode, node: BinaryNode) -> None:
            occupant = target.get_slot(side)
            if occupant is not None:
                raise SlotOccupiedError(target.value, side, occupant.value)
            target.set_slot(side, node)

        self._insert_node(parent_node, value, attach)


class BinaryTree(AbstractBinaryTree):
    """Binary tree whose shape is chosen entirely by the caller.

    There is no ordering between left and right values. A filled slot is
    never overwritten; adding to it raises SlotOccupiedError.
    """

    def add_left(self, value: Any, parent: Any = None) -> None:
        """Place ``value`` in the left slot of ``parent`` (default: root).

        Raises:
            NotFoundError: If parent is given but not in the tree
            DuplicateValueError: If value is already in the tree
            SlotOccupiedError: If the left slot already holds a subtree
        """
        self._add_to_slot(BinaryNode.LEFT, value, parent)

    def add_right(self, value: Any, parent: Any = None) -> None:
        """Place ``value`` in the right slot of ``parent`` (default: root).

        Raises:
            NotFoundError: If parent is given but not in the tree
            DuplicateValueError: If value is already in the tree
            SlotOccupiedError: If the right slot already holds a subtree
        """
        self._add_to_slot(BinaryNode.RIGHT, value, parent)
