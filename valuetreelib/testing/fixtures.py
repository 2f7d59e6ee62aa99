"""Test fixtures for ValueTreeLib consumers.

These fixtures provide controlled access to internal state for testing
purposes without exposing implementation details as part of the public API.
"""

from typing import Any, Dict, Iterable, List

from ..core.traverser import BreadthFirstTraverser
from ..trees.base import Tree
from ..trees.binary import AbstractBinaryTree, BinaryTree
from ..trees.general import GeneralTree
from ..trees.search import BinarySearchTree


class TreeTestHelper:
    """Public test fixture for structural verification.

    Checks that the identity index and the node graph agree, that every
    parent link points at the owning node, and (for search trees) that the
    ordering holds. Designed for the test suites of projects that build on
    ValueTreeLib.

    Example:
        tree = GeneralTree("ROOT")
        ...
        helper = TreeTestHelper(tree)
        assert helper.check_invariants() == []
    """

    def __init__(self, tree: Tree):
        """Initialize with the tree under test."""
        self._tree = tree

    def reachable_values(self) -> List[Any]:
        """Values reachable from the root by following child links."""
        return [node.value for node, _ in
                BreadthFirstTraverser(self._tree.adapter).traverse(self._tree._root)]

    def indexed_values(self) -> List[Any]:
        """Values registered in the identity index."""
        return list(self._tree._index)

    def check_invariants(self) -> List[str]:
        """Return a description of every broken invariant (empty if sound)."""
        problems = []
        tree = self._tree
        adapter = tree.adapter

        reachable = self.reachable_values()
        if len(reachable) != len(set(reachable)):
            problems.append("a value is reachable more than once")

        indexed = set(self.indexed_values())
        if set(reachable) != indexed:
            problems.append(
                f"index and graph differ: only indexed {indexed - set(reachable)!r}, "
                f"only reachable {set(reachable) - indexed!r}"
            )

        if tree._root.parent is not None:
            problems.append("root has a parent")

        for node, _ in BreadthFirstTraverser(adapter).traverse(tree._root):
            if tree._index.lookup(node.value) is not node:
                problems.append(f"index entry for {node.value!r} is a different node")
            for child in adapter.get_children(node):
                if child.parent is not node:
                    problems.append(f"parent link of {child.value!r} is stale")

        if isinstance(tree, BinarySearchTree):
            ordered = list(tree.in_order())
            for a, b in zip(ordered, ordered[1:]):
                if tree._compare(a, b) >= 0:
                    problems.append(f"search order broken between {a!r} and {b!r}")

        return problems

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing."""
        return {
            'size': len(self._tree),
            'depth': self._tree.get_depth(),
            'width': self._tree.get_width(),
            'is_binary': isinstance(self._tree, AbstractBinaryTree),
            'sound': not self.check_invariants(),
        }


def build_symmetric_general_tree() -> GeneralTree:
    """ROOT with children A, B, C, each holding three leaves 1..9."""
    tree = GeneralTree("ROOT")
    for parent, leaves in (("A", "123"), ("B", "456"), ("C", "789")):
        tree.add(parent)
        for leaf in leaves:
            tree.add(leaf, parent=parent)
    return tree


def build_asymmetric_general_tree() -> GeneralTree:
    """ROOT -> A, B, C; A -> 1, 2, 3; B -> 4, 5; C -> 6; 3 -> a; a -> !"""
    tree = GeneralTree("ROOT")
    for value in "ABC":
        tree.add(value)
    for parent, value in (("A", "1"), ("A", "2"), ("A", "3"),
                          ("B", "4"), ("B", "5"), ("C", "6"),
                          ("3", "a"), ("a", "!")):
        tree.add(value, parent=parent)
    return tree


def build_symmetric_binary_tree() -> BinaryTree:
    """Full 15-node binary tree: ROOT / A B / 1 2 3 4 / a..h."""
    tree = BinaryTree("ROOT")
    tree.add_left("A")
    tree.add_right("B")
    for parent, left, right in (("A", "1", "2"), ("B", "3", "4"),
                                ("1", "a", "b"), ("2", "c", "d"),
                                ("3", "e", "f"), ("4", "g", "h")):
        tree.add_left(left, parent=parent)
        tree.add_right(right, parent=parent)
    return tree


def build_search_tree(values: Iterable[Any]) -> BinarySearchTree:
    """Search tree rooted at the first value, others added in order."""
    iterator = iter(values)
    tree = BinarySearchTree(next(iterator))
    for value in iterator:
        tree.add(value)
    return tree
