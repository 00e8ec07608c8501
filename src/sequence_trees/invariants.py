"""Shared invariant-checking utilities.

This module provides tree invariant validation that can be used by both
the stats scripts and the test suite.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from sequence_trees.logging_config import get_logger
from sequence_trees.tree_stats import iter_in_order

logger = get_logger(__name__)

if TYPE_CHECKING:
    from sequence_trees.search_tree_base import SearchTreeBase
    from sequence_trees.tree_stats import Stats

TREE_FLAGS = (
    "is_search_tree",
    "keys_in_order",
)

# Only checked on variants that maintain heights
BALANCE_FLAGS = (
    "is_balanced",
    "heights_consistent",
)


class InvariantError(Exception):
    """Raised when a sequence tree invariant is violated."""


def assert_tree_invariants_raise(
    t: SearchTreeBase,
    stats: Stats,
) -> None:
    """Check all invariants, raising :class:`InvariantError` on the first failure."""
    flags = TREE_FLAGS + BALANCE_FLAGS if t.BALANCED else TREE_FLAGS
    for flag in flags:
        if not getattr(stats, flag):
            raise InvariantError(f"Invariant failed: {flag} is False")

    if t.is_empty():
        if stats.node_count != 0:
            raise InvariantError(f"Invariant failed: node_count={stats.node_count} for empty tree")
        return

    if stats.node_count <= 0:
        raise InvariantError(f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree")
    if stats.height <= 0:
        raise InvariantError(f"Invariant failed: height={stats.height} ≤ 0 for non-empty tree")
    if stats.least_key is None or stats.greatest_key is None:
        raise InvariantError("Invariant failed: least/greatest key is None for non-empty tree")
    if stats.height > stats.node_count:
        raise InvariantError(
            f"Invariant failed: height={stats.height} > node_count={stats.node_count}"
        )

    count = t.count_nodes()
    if count != stats.node_count:
        raise InvariantError(
            f"Invariant failed: t.count_nodes()={count} ≠ stats.node_count={stats.node_count}"
        )


def check_keys(
    tree: SearchTreeBase,
    expected_keys: Optional[Iterable[str]] = None,
) -> Tuple[List[str], bool, bool, bool]:
    """Walk the tree in order and validate its keys and tags.

    Returns
    -------
    (keys, presence_ok, all_have_tags, order_ok)
    """
    keys: List[str] = []
    all_have_tags = True
    order_ok = True

    prev_key = None
    for node in iter_in_order(tree.root):
        key = node.entry.key
        if prev_key is not None and not prev_key < key:
            order_ok = False
        if not node.entry.tags:
            all_have_tags = False
        keys.append(key)
        prev_key = key

    presence_ok = True
    if expected_keys is not None:
        expected = sorted(set(expected_keys))
        presence_ok = keys == expected

    return keys, presence_ok, all_have_tags, order_ok
