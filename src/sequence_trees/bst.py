"""Unbalanced binary search tree."""

from sequence_trees.search_tree_base import SearchTreeBase


class UnbalancedTree(SearchTreeBase):
    """
    Classic binary search tree: the ordering invariant only.

    The shape depends entirely on insertion order, so sorted input
    degenerates into a chain of depth n - 1.
    """
    __slots__ = ()
