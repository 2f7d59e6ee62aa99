"""General (N-ary) tree: any number of ordered children per node."""

import logging
from typing import Any, Optional

from .base import Tree
from ..core.adapter import GeneralTreeAdapter, TreeAdapter
from ..core.node import GeneralNode
from ..errors import InvalidMoveError

logger = logging.getLogger(__name__)


class GeneralTree(Tree):
    """Tree whose nodes keep their children in insertion order.

    Example:
        >>> tree = GeneralTree("ROOT")
        >>> tree.add("A")
        >>> tree.add("1", parent="A")
        >>> list(tree.pre_order())
        ['ROOT', 'A', '1']
    """

    def _create_node(self, value: Any, parent: Optional[GeneralNode]) -> GeneralNode:
        return GeneralNode(value, parent)

    def _create_adapter(self) -> TreeAdapter:
        return GeneralTreeAdapter()

    def add(self, value: Any, parent: Any = None) -> None:
        """Attach ``value`` as the last child of ``parent`` (default: root).

        Raises:
            NotFoundError: If parent is given but not in the tree
            DuplicateValueError: If value is already in the tree
        """
        parent_node = self._node_or_root(parent)
        self._insert_node(parent_node, value, GeneralNode.add_child)

    def move(self, value: Any, new_parent: Any) -> None:
        """Re-parent the subtree rooted at ``value`` under ``new_parent``.

        The value being moved comes first, as in ``add(value, parent)``.
        The subtree keeps its shape and becomes the last child of
        ``new_parent``. Every parent link inside it is rebuilt.

        Raises:
            NotFoundError: If either value is not in the tree
            InvalidMoveError: If value is the root, or new_parent lies
                inside the subtree being moved
        """
        node = self._index.require(value)
        target = self._index.require(new_parent)

        if node is self._root:
            raise InvalidMoveError("The root cannot be moved")

        ancestor = target
        while ancestor is not None:
            if ancestor is node:
                raise InvalidMoveError(
                    f"Cannot move {value!r} under its own descendant {new_parent!r}"
                )
            ancestor = ancestor.parent

        node.parent.remove_child(node)
        target.add_child(node)
        self._relink(node)
        self._version += 1
        logger.debug("Moved %r under %r", value, new_parent)

    def _relink(self, subtree_root: GeneralNode) -> None:
        # Explicit stack; point every child back at the node that owns it
        stack = [subtree_root]
        while stack:
            node = stack.pop()
            for child in node.children():
                child.set_parent(node)
                stack.append(child)
