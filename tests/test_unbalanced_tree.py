"""Shape-dependent tests for the plain binary search tree."""

import math
import unittest

from sequence_trees.tree_stats import tree_stats_

from tests.test_base import UnbalancedTreeTestCase


class TestUnbalancedShape(UnbalancedTreeTestCase):
    """The tree keeps exactly the shape dictated by insertion order."""

    def setUp(self):
        super().setUp()
        #       5
        #     3   8
        #    1 4
        self.insert_keys(["5", "3", "8", "1", "4"])

    def test_shape(self):
        root = self.tree.root
        self.assertEqual(root.entry.key, "5")
        self.assertEqual(root.left.entry.key, "3")
        self.assertEqual(root.right.entry.key, "8")
        self.assertEqual(root.left.left.entry.key, "1")
        self.assertEqual(root.left.right.entry.key, "4")
        self.expected_keys = ["1", "3", "4", "5", "8"]

    def test_find_steps_follow_path(self):
        cases = [
            ("5", True, 1),
            ("3", True, 2),
            ("8", True, 2),
            ("4", True, 3),
            ("1", True, 3),
            ("6", False, 2),
            ("2", False, 3),
            ("0", False, 3),
            ("9", False, 2),
        ]
        for key, exp_found, exp_steps in cases:
            with self.subTest(key=key):
                self.assertEqual(self.tree.find(key), (exp_found, exp_steps))

    def test_remove_steps_follow_path(self):
        self.assertEqual(self.tree.remove("4"), (True, 3))
        self.assertEqual(self.tree.remove("7"), (False, 2))
        self.expected_keys = ["1", "3", "5", "8"]

    def test_remove_two_children_uses_successor(self):
        removed, steps = self.tree.remove("3")
        self.assertTrue(removed)
        # Only the descent to "3" counts, not the successor sub-deletion
        self.assertEqual(steps, 2)
        left = self.tree.root.left
        self.assertEqual(left.entry.key, "4")
        self.assertEqual(left.entry.tags, ["tag_4"])
        self.assertEqual(left.left.entry.key, "1")
        self.assertIsNone(left.right)
        self.expected_keys = ["1", "4", "5", "8"]

    def test_remove_node_with_one_child(self):
        self.tree.insert(self.make_entry("9"))
        self.tree.remove("8")
        self.assertEqual(self.tree.root.right.entry.key, "9")
        self.expected_keys = ["1", "3", "4", "5", "9"]

    def test_depth_statistics(self):
        # depths: 0 + 1 + 1 + 2 + 2
        self.assertEqual(self.tree.count_nodes(), 5)
        self.assertAlmostEqual(self.tree.calculate_avg_depth(), 6 / 5)
        self.assertAlmostEqual(self.tree.calculate_ratio(), (6 / 5) / math.log2(5))
        self.assertEqual(self.tree.height(), 3)


class TestUnbalancedSuccessorDeepInRightSubtree(UnbalancedTreeTestCase):

    def test_successor_with_right_child(self):
        #     5
        #   2   8
        #      6  9
        #       7
        self.insert_keys(["5", "2", "8", "6", "9", "7"])
        removed, steps = self.tree.remove("5")
        self.assertEqual((removed, steps), (True, 1))
        root = self.tree.root
        self.assertEqual(root.entry.key, "6")
        self.assertEqual(root.right.entry.key, "8")
        self.assertEqual(root.right.left.entry.key, "7")
        self.expected_keys = ["2", "6", "7", "8", "9"]


class TestUnbalancedDegeneratesOnSortedInput(UnbalancedTreeTestCase):

    def setUp(self):
        super().setUp()
        self.insert_keys([str(k) for k in range(1, 8)])

    def test_chain(self):
        stats = tree_stats_(self.tree)
        self.assertEqual(stats.height, 7)
        self.assertEqual(stats.depth_sum, 21)
        self.assertFalse(stats.is_balanced)
        self.assertEqual(self.tree.calculate_avg_depth(), 3.0)
        self.assertAlmostEqual(self.tree.calculate_ratio(), 3.0 / math.log2(7))

    def test_find_last_walks_whole_chain(self):
        self.assertEqual(self.tree.find("7"), (True, 7))
        self.assertEqual(self.tree.find("8"), (False, 7))

    def test_heights_are_not_maintained(self):
        node = self.tree.root
        while node is not None:
            self.assertEqual(node.height, 1)
            node = node.right


class TestUnbalancedLongSortedChain(UnbalancedTreeTestCase):
    """Sorted input degenerates into a chain deeper than the recursion limit."""

    N = 5000

    def setUp(self):
        super().setUp()
        self.keys = [f"{i:05d}" for i in range(self.N)]
        self.insert_keys(self.keys)

    def test_queries_and_statistics(self):
        self.assertEqual(self.tree.count_nodes(), self.N)
        self.assertEqual(self.tree.height(), self.N)
        self.assertEqual(self.tree.find("00000"), (True, 1))
        self.assertEqual(self.tree.find("04999"), (True, self.N))
        self.assertEqual(self.tree.find("99999"), (False, self.N))
        # depths 0 .. n-1
        avg = (self.N - 1) / 2
        self.assertAlmostEqual(self.tree.calculate_avg_depth(), avg)
        self.assertAlmostEqual(self.tree.calculate_ratio(), avg / math.log2(self.N))
        self.assertFalse(tree_stats_(self.tree).is_balanced)
        self.expected_keys = self.keys

    def test_updates_at_the_bottom(self):
        self.tree.insert(self.make_entry("04999", "extra"))
        self.assertEqual(self.tree.entries_between("04999", "04999")[0].tags, ["tag_04999", "extra"])
        self.assertEqual(self.tree.remove("04000"), (True, 4001))
        self.assertEqual(self.tree.remove("05000"), (False, self.N - 1))
        self.assertEqual(
            [e.key for e in self.tree.entries_between("03998", "04002")],
            ["03998", "03999", "04001", "04002"],
        )
        self.expected_node_count = self.N - 1


if __name__ == "__main__":
    unittest.main()
