"""TreeAdapter abstraction for ValueTreeLib.

The adapter is the "child accessor" seam: traversal and metric algorithms
are written once against it, and each tree shape supplies its own adapter
describing how its nodes link to children. General trees expose an ordered
list of children; binary trees expose a named left/right pair.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from .node import BinaryNode, TreeNode


class TreeAdapter(ABC):
    """Abstract adapter for navigating one shape of tree.

    While TreeNode is just a data container, the adapter knows HOW to move
    through a tree of that node type. This keeps the traversers independent
    of child arity.
    """

    @abstractmethod
    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get an iterator of child nodes in traversal order.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child TreeNode instances
        """
        pass

    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent TreeNode or None if node is root
        """
        return node.parent

    def get_depth(self, node: TreeNode) -> int:
        """Calculate the depth of a node by walking up to the root.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = self.get_parent(node)
        while current is not None:
            depth += 1
            current = self.get_parent(current)
        return depth

    # Capability flags - adapters declare what they support

    def supports_in_order(self) -> bool:
        """Check if nodes have at most two ordered children.

        In-order traversal is only defined for such trees.

        Returns:
            True if get_left/get_right are implemented
        """
        return False

    def get_left(self, node: TreeNode) -> Optional[TreeNode]:
        """Left child, for adapters that support in-order traversal.

        Raises:
            NotImplementedError: If in-order traversal is not supported
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} has no left/right child slots"
        )

    def get_right(self, node: TreeNode) -> Optional[TreeNode]:
        """Right child, for adapters that support in-order traversal.

        Raises:
            NotImplementedError: If in-order traversal is not supported
        """
        raise NotImplementedError(
            f"{self.__class__.__name__} has no left/right child slots"
        )


class GeneralTreeAdapter(TreeAdapter):
    """Adapter for GeneralNode trees: children in insertion order."""

    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        return iter(node.children())


class BinaryTreeAdapter(TreeAdapter):
    """Adapter for BinaryNode trees: left child, then right child."""

    def get_children(self, node: BinaryNode) -> Iterator[BinaryNode]:
        if node.left is not None:
            yield node.left
        if node.right is not None:
            yield node.right

    def supports_in_order(self) -> bool:
        return True

    def get_left(self, node: BinaryNode) -> Optional[BinaryNode]:
        return node.left

    def get_right(self, node: BinaryNode) -> Optional[BinaryNode]:
        return node.right
