"""
sequence_trees — Ordered containers of restriction-enzyme recognition sequences.

Quick-start imports::

    from sequence_trees import SequenceEntry, create_tree

    tree = create_tree("AVL")
    tree.insert(SequenceEntry("GAATTC", ["EcoRI"]))
    found, steps = tree.find("GAATTC")
"""

# Shared primitives
from sequence_trees.base import SequenceEntry, TreeNode

# Tree variants
from sequence_trees.search_tree_base import SearchTreeBase
from sequence_trees.bst import UnbalancedTree
from sequence_trees.avl import BalancedTree
from sequence_trees.factory import create_tree, get_tree_class

# Stats & invariants
from sequence_trees.invariants import (
    InvariantError,
    assert_tree_invariants_raise,
    check_keys,
)
from sequence_trees.tree_stats import Stats, tree_stats_

__all__ = [
    # Primitives
    "SequenceEntry",
    "TreeNode",
    # Trees
    "BalancedTree",
    "SearchTreeBase",
    "UnbalancedTree",
    "create_tree",
    "get_tree_class",
    # Stats & invariants
    "InvariantError",
    "Stats",
    "assert_tree_invariants_raise",
    "check_keys",
    "tree_stats_",
]
