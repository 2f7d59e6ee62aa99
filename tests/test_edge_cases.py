"""Unit tests for edge cases and error handling in ValueTreeLib.

Tests invalid values, failed mutations, mutation during traversal and the
exception hierarchy.
"""

import unittest

from valuetreelib import (
    BinarySearchTree,
    BinaryTree,
    CapabilityMismatchError,
    DuplicateValueError,
    ExecutionPlan,
    GeneralTree,
    InvalidMoveError,
    InvalidValueError,
    NotFoundError,
    SlotOccupiedError,
    TraversalConfig,
    TreeError,
    traverse_tree,
)
from valuetreelib.testing import (
    TreeTestHelper,
    build_asymmetric_general_tree,
    build_search_tree,
    build_symmetric_binary_tree,
)


def snapshot(tree):
    return (
        list(tree.pre_order()),
        list(tree.breadth_first()),
        tree.get_depth(),
        tree.get_width(),
        len(tree),
    )


class TestInvalidValues(unittest.TestCase):

    def test_none_root(self):
        for cls in (GeneralTree, BinaryTree, BinarySearchTree):
            with self.subTest(cls=cls.__name__):
                with self.assertRaises(InvalidValueError):
                    cls(None)

    def test_unhashable_value(self):
        tree = GeneralTree("ROOT")
        with self.assertRaises(InvalidValueError):
            tree.add(["a", "list"])
        with self.assertRaises(TypeError):
            tree.add({"a": 1})
        self.assertEqual(len(tree), 1)

    def test_unhashable_query(self):
        tree = GeneralTree("ROOT")
        with self.assertRaises(InvalidValueError):
            tree.contains(["ROOT"])

    def test_none_is_never_contained(self):
        tree = GeneralTree("ROOT")
        self.assertFalse(tree.contains(None))
        with self.assertRaises(NotFoundError):
            tree.get_parent(None)


class TestFailedMutationsLeaveTreeUnchanged(unittest.TestCase):

    def test_general_tree(self):
        tree = build_asymmetric_general_tree()
        before = snapshot(tree)

        for action in (lambda: tree.add("A"),
                       lambda: tree.add("new", parent="nowhere"),
                       lambda: tree.add(None),
                       lambda: tree.move("ROOT", "A"),
                       lambda: tree.move("A", "!")):
            with self.assertRaises(TreeError):
                action()

        self.assertEqual(snapshot(tree), before)
        self.assertEqual(TreeTestHelper(tree).check_invariants(), [])

    def test_binary_tree(self):
        tree = build_symmetric_binary_tree()
        before = snapshot(tree)

        for action in (lambda: tree.add_left("1"),
                       lambda: tree.add_right("new", parent="nowhere"),
                       lambda: tree.add_right("new", parent="A")):
            with self.assertRaises(TreeError):
                action()

        self.assertEqual(snapshot(tree), before)
        self.assertNotIn("new", tree)

    def test_search_tree(self):
        tree = build_search_tree([5, 3, 8])
        before = snapshot(tree)
        with self.assertRaises(DuplicateValueError):
            tree.add(3)
        with self.assertRaises(InvalidValueError):
            tree.add(None)
        self.assertEqual(snapshot(tree), before)


class TestMutationDuringTraversal(unittest.TestCase):

    def test_add_during_iteration(self):
        tree = build_asymmetric_general_tree()
        iterator = tree.pre_order()
        self.assertEqual(next(iterator), "ROOT")

        tree.add("late", parent="C")
        with self.assertRaises(RuntimeError):
            next(iterator)

    def test_move_during_iteration(self):
        tree = build_asymmetric_general_tree()
        iterator = tree.breadth_first()
        next(iterator)
        tree.move("a", "B")
        with self.assertRaises(RuntimeError):
            list(iterator)

    def test_single_node_tree(self):
        tree = BinarySearchTree(1)
        iterator = tree.in_order()
        next(iterator)
        tree.add(2)
        with self.assertRaises(RuntimeError):
            next(iterator)

    def test_mutation_before_first_step(self):
        tree = build_asymmetric_general_tree()
        iterators = [
            tree.pre_order(),
            tree.post_order(),
            tree.breadth_first(),
            tree.traverse("level"),
            iter(tree),
        ]
        tree.add("late", parent="C")
        for iterator in iterators:
            with self.assertRaises(RuntimeError):
                next(iterator)

    def test_in_order_mutation_before_first_step(self):
        tree = build_search_tree([5, 3, 8])
        iterator = tree.in_order()
        tree.add(4)
        with self.assertRaises(RuntimeError):
            next(iterator)

    def test_plan_mutation_before_first_step(self):
        tree = build_asymmetric_general_tree()
        results = ExecutionPlan(TraversalConfig(), tree).execute()
        values = traverse_tree(tree, strategy="bfs")
        tree.move("a", "B")
        with self.assertRaises(RuntimeError):
            next(results)
        with self.assertRaises(RuntimeError):
            next(values)

    def test_materialized_results_are_safe(self):
        tree = build_asymmetric_general_tree()
        for value in list(tree.pre_order()):
            if value.isdigit():
                tree.add(value * 2, parent=value)
        self.assertIn("33", tree)
        self.assertEqual(tree.get_parent("33"), "3")

    def test_fresh_traversal_after_mutation(self):
        tree = GeneralTree("ROOT")
        first = list(tree.breadth_first())
        tree.add("A")
        self.assertEqual(first, ["ROOT"])
        self.assertEqual(list(tree.breadth_first()), ["ROOT", "A"])


class TestExceptionHierarchy(unittest.TestCase):

    def test_builtin_bases(self):
        self.assertTrue(issubclass(DuplicateValueError, ValueError))
        self.assertTrue(issubclass(NotFoundError, LookupError))
        self.assertTrue(issubclass(SlotOccupiedError, ValueError))
        self.assertTrue(issubclass(InvalidMoveError, ValueError))
        self.assertTrue(issubclass(InvalidValueError, TypeError))

    def test_all_are_tree_errors(self):
        for cls in (DuplicateValueError, NotFoundError, SlotOccupiedError,
                    InvalidMoveError, InvalidValueError, CapabilityMismatchError):
            with self.subTest(cls=cls.__name__):
                self.assertTrue(issubclass(cls, TreeError))

    def test_messages(self):
        self.assertIn("'x'", str(DuplicateValueError("x")))
        self.assertIn("'x'", str(NotFoundError("x")))


class TestReprAndProtocol(unittest.TestCase):

    def test_repr(self):
        tree = build_search_tree([2, 1, 3])
        self.assertEqual(repr(tree), "BinarySearchTree(root=2, size=3)")

    def test_falsy_values_are_stored(self):
        tree = GeneralTree(0)
        tree.add("")
        tree.add((), parent="")
        self.assertIn("", tree)
        self.assertEqual(tree.get_parent(()), "")
        self.assertEqual(list(tree), [0, "", ()])

    def test_equal_values_collide(self):
        # 0 == False and they hash alike, so they are the same value
        tree = GeneralTree(0)
        with self.assertRaises(DuplicateValueError):
            tree.add(False)


if __name__ == '__main__':
    unittest.main()
