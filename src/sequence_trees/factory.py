"""Sequence tree factory module."""

from typing import Dict, Iterable, Optional, Type

from sequence_trees.avl import BalancedTree
from sequence_trees.base import SequenceEntry
from sequence_trees.bst import UnbalancedTree
from sequence_trees.search_tree_base import SearchTreeBase

TREE_CLASSES: Dict[str, Type[SearchTreeBase]] = {
    "BST": UnbalancedTree,
    "AVL": BalancedTree,
}


def get_tree_class(kind: str) -> Type[SearchTreeBase]:
    """
    Look up the tree variant registered under ``kind``.

    Args:
        kind: "BST" for the unbalanced tree or "AVL" for the balanced one
            (case-insensitive).

    Returns:
        The tree class.

    Raises:
        ValueError: If ``kind`` names no known variant.
    """
    try:
        return TREE_CLASSES[kind.upper()]
    except (KeyError, AttributeError):
        known = ", ".join(TREE_CLASSES)
        raise ValueError(f"Unknown tree type {kind!r} (expected one of: {known})") from None


def create_tree(kind: str, entries: Optional[Iterable[SequenceEntry]] = None) -> SearchTreeBase:
    """
    Create a new tree of the given variant, optionally filled with ``entries``.

    Args:
        kind: Variant name, see :func:`get_tree_class`
        entries: Entries inserted in iteration order

    Returns:
        The new tree
    """
    tree = get_tree_class(kind)()
    if entries is not None:
        tree_insert = tree.insert
        for entry in entries:
            tree_insert(entry)
    return tree
