"""Tests for the public testing helpers."""

import pytest

from valuetreelib.testing import (
    TreeTestHelper,
    build_asymmetric_general_tree,
    build_search_tree,
    build_symmetric_binary_tree,
    build_symmetric_general_tree,
)


@pytest.mark.parametrize("builder", [
    build_symmetric_general_tree,
    build_asymmetric_general_tree,
    build_symmetric_binary_tree,
    lambda: build_search_tree([0, 1, 10, 100, 1000, -1, -10, -100, -1000]),
])
def test_builders_produce_sound_trees(builder):
    assert TreeTestHelper(builder()).check_invariants() == []


def test_summary():
    summary = TreeTestHelper(build_symmetric_binary_tree()).get_summary()
    assert summary == {
        'size': 15,
        'depth': 4,
        'width': 8,
        'is_binary': True,
        'sound': True,
    }


def test_sound_after_moves():
    tree = build_asymmetric_general_tree()
    tree.move("3", "C")
    tree.move("B", "6")
    assert TreeTestHelper(tree).check_invariants() == []


def test_detects_stale_parent_link():
    tree = build_symmetric_general_tree()
    tree._index.require("1").set_parent(tree._root)

    problems = TreeTestHelper(tree).check_invariants()
    assert "parent link of '1' is stale" in problems


def test_detects_unreachable_index_entry():
    tree = build_symmetric_general_tree()
    node_a = tree._index.require("A")
    node_a.remove_child(tree._index.require("2"))

    helper = TreeTestHelper(tree)
    assert "2" not in helper.reachable_values()
    assert "2" in helper.indexed_values()
    assert any(p.startswith("index and graph differ") for p in helper.check_invariants())


def test_detects_broken_search_order():
    tree = build_search_tree([5, 3, 8])
    # Swap the children so in-order reads 8, 5, 3
    root = tree._root
    root.left, root.right = root.right, root.left

    problems = TreeTestHelper(tree).check_invariants()
    assert any(p.startswith("search order broken") for p in problems)
