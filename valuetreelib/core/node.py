"""Node types for ValueTreeLib.

Nodes are deliberately dumb: they hold a value, own their children and keep
a weak reference back to their parent. Navigation policy lives in the
TreeAdapter and bookkeeping (uniqueness, the identity index) lives in the
tree, so nodes never validate anything themselves.
"""

import weakref
from abc import ABC, abstractmethod
from typing import Any, List, Optional


class TreeNode(ABC):
    """Abstract base class for a position in a tree.

    A node owns its children. The parent link is a ``weakref.ref`` so the
    child -> parent direction never keeps a node alive and never forms a
    reference cycle with the owning direction.
    """

    def __init__(self, value: Any, parent: Optional['TreeNode'] = None):
        """Create a node.

        Args:
            value: The payload stored at this position
            parent: Owning node, or None for a root
        """
        self._value = value
        self._parent_ref: Optional[weakref.ref] = None
        self.set_parent(parent)

    @property
    def value(self) -> Any:
        """The payload stored at this position."""
        return self._value

    @property
    def parent(self) -> Optional['TreeNode']:
        """The owning node, or None for the root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def set_parent(self, parent: Optional['TreeNode']) -> None:
        """Point the back-reference at a new owner (or clear it)."""
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    @abstractmethod
    def children(self) -> List['TreeNode']:
        """Return the present children in traversal order.

        Returns:
            A new list; mutating it does not affect the node
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self._value!r})"


class GeneralNode(TreeNode):
    """Node with an unbounded, ordered list of children."""

    def __init__(self, value: Any, parent: Optional[TreeNode] = None):
        super().__init__(value, parent)
        self._children: List['GeneralNode'] = []

    def children(self) -> List['GeneralNode']:
        return list(self._children)

    def add_child(self, child: 'GeneralNode') -> None:
        """Append ``child`` as the last child and take ownership of it."""
        self._children.append(child)
        child.set_parent(self)

    def remove_child(self, child: 'GeneralNode') -> None:
        """Give up ownership of ``child``.

        Raises:
            ValueError: If ``child`` is not owned by this node
        """
        # Compare by identity; values are unique but nodes are what we own
        for i, existing in enumerate(self._children):
            if existing is child:
                del self._children[i]
                child.set_parent(None)
                return
        raise ValueError(f"{child!r} is not a child of {self!r}")


class BinaryNode(TreeNode):
    """Node with two named child slots, ``left`` and ``right``."""

    LEFT = "left"
    RIGHT = "right"

    def __init__(self, value: Any, parent: Optional[TreeNode] = None):
        super().__init__(value, parent)
        self.left: Optional['BinaryNode'] = None
        self.right: Optional['BinaryNode'] = None

    def children(self) -> List['BinaryNode']:
        return [child for child in (self.left, self.right) if child is not None]

    def get_slot(self, side: str) -> Optional['BinaryNode']:
        """Return the child in the ``left`` or ``right`` slot."""
        if side == self.LEFT:
            return self.left
        if side == self.RIGHT:
            return self.right
        raise ValueError(f"Unknown slot: {side!r}")

    def set_slot(self, side: str, child: 'BinaryNode') -> None:
        """Place ``child`` in a slot and take ownership of it."""
        if side == self.LEFT:
            self.left = child
        elif side == self.RIGHT:
            self.right = child
        else:
            raise ValueError(f"Unknown slot: {side!r}")
        child.set_parent(self)
