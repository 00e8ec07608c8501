import unittest

from sequence_trees.avl import BalancedTree
from sequence_trees.base import SequenceEntry
from sequence_trees.bst import UnbalancedTree
from sequence_trees.display import print_pretty, print_structure


def _tree(cls, keys):
    tree = cls()
    for k in keys:
        tree.insert(SequenceEntry(k, [k.lower()]))
    return tree


class TestPrintPretty(unittest.TestCase):

    def test_none_and_empty(self):
        self.assertEqual(print_pretty(None), "NoneType: None")
        self.assertEqual(print_pretty(BalancedTree()), "BalancedTree: Empty")

    def test_rejects_other_types(self):
        with self.assertRaises(TypeError):
            print_pretty([1, 2, 3])

    def test_levels(self):
        text = print_pretty(_tree(BalancedTree, ["1", "2", "3"]))
        self.assertEqual(text, "BalancedTree\nDepth 0: 2\nDepth 1: 1 3\n")

    def test_missing_children_marked(self):
        text = print_pretty(_tree(UnbalancedTree, ["1", "2"]))
        self.assertEqual(text, "UnbalancedTree\nDepth 0: 1\nDepth 1: · 2\n")


class TestPrintStructure(unittest.TestCase):

    def test_empty(self):
        self.assertEqual(print_structure(UnbalancedTree()), "Empty UnbalancedTree")

    def test_dump(self):
        text = print_structure(_tree(BalancedTree, ["1", "2", "3"]))
        lines = text.splitlines()
        self.assertEqual(lines[0], "BalancedTree")
        self.assertIn("Root: 2 (height=2, tags=['2'])", lines[1])
        self.assertIn("L: 1 (height=1", lines[2])
        self.assertIn("R: 3 (height=1", lines[3])

    def test_max_depth(self):
        text = print_structure(_tree(UnbalancedTree, ["1", "2", "3", "4"]), max_depth=1)
        self.assertIn("max depth reached", text)
        self.assertNotIn(": 4 (", text)


if __name__ == "__main__":
    unittest.main()
