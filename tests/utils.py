"""Utility functions for testing sequence tree invariants."""

from typing import Optional

from sequence_trees.invariants import BALANCE_FLAGS, TREE_FLAGS
from sequence_trees.search_tree_base import SearchTreeBase
from sequence_trees.tree_stats import Stats


def assert_tree_invariants_tc(tc, t: SearchTreeBase, stats: Stats, err_msg: Optional[str] = "") -> None:
    """TestCase version: use inside unittest.TestCase methods."""
    flags = TREE_FLAGS + BALANCE_FLAGS if t.BALANCED else TREE_FLAGS
    for flag in flags:
        tc.assertTrue(
            getattr(stats, flag),
            f"Invariant failed: {flag} is False \n\n{err_msg}"
        )

    if t.is_empty():
        tc.assertEqual(stats.node_count, 0, f"Empty tree reports nodes\n\n{err_msg}")
        return

    tc.assertGreater(
        stats.node_count, 0,
        f"Invariant failed: node_count={stats.node_count} ≤ 0 for non-empty tree\n\n{err_msg}"
    )
    tc.assertGreater(
        stats.height, 0,
        f"Invariant failed: height={stats.height} ≤ 0 for non-empty tree\n\n{err_msg}"
    )
    tc.assertIsNotNone(
        stats.least_key,
        f"Invariant failed: least_key is None for non-empty tree\n\n{err_msg}"
    )
    tc.assertIsNotNone(
        stats.greatest_key,
        f"Invariant failed: greatest_key is None for non-empty tree\n\n{err_msg}"
    )
    tc.assertEqual(
        t.count_nodes(), stats.node_count,
        f"Invariant failed: count_nodes()={t.count_nodes()} ≠ node_count={stats.node_count}\n\n{err_msg}"
    )
