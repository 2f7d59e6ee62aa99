"""Large-tree tests.

These build trees big enough to overflow any recursive implementation, so
they are marked slow and skipped by the default test run.
"""

import pytest

from valuetreelib import BinarySearchTree, GeneralTree
from valuetreelib.testing import TreeTestHelper


@pytest.mark.slow
def test_degenerate_search_tree_traversals():
    """Sorted input degrades a search tree into a right-leaning chain."""
    size = 3000
    tree = BinarySearchTree(0)
    for value in range(1, size):
        tree.add(value)

    assert tree.get_depth() == size
    assert tree.get_width() == 1
    assert list(tree.in_order()) == list(range(size))
    assert list(tree.pre_order()) == list(range(size))
    assert list(tree.post_order()) == list(reversed(range(size)))
    assert tree.find(size + 10) == size - 1
    assert TreeTestHelper(tree).check_invariants() == []


@pytest.mark.slow
def test_wide_general_tree_metrics():
    """A root with 100 children, each holding 1000 leaves."""
    tree = GeneralTree("ROOT")
    for branch in range(100):
        tree.add(("branch", branch))
        for leaf in range(1000):
            tree.add((branch, leaf), parent=("branch", branch))

    assert len(tree) == 100101
    assert tree.get_depth() == 3
    assert tree.get_width() == 100000

    visited = list(tree.breadth_first())
    assert len(visited) == len(tree)
    assert visited[1:101] == [("branch", b) for b in range(100)]
    assert sum(1 for _ in tree.post_order()) == len(tree)
