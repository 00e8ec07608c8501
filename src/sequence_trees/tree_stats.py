"""Statistics and invariant inputs for sequence trees."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from sequence_trees.logging_config import get_logger

if TYPE_CHECKING:
    from sequence_trees.base import TreeNode
    from sequence_trees.search_tree_base import SearchTreeBase

logger = get_logger(__name__)


@dataclass
class Stats:
    """Aggregated statistics for a sequence tree (or one of its subtrees)."""

    height: int
    node_count: int
    depth_sum: int
    avg_depth: float
    ratio: float
    least_key: Optional[str]
    greatest_key: Optional[str]
    is_search_tree: bool
    is_balanced: bool
    heights_consistent: bool
    keys_in_order: bool
    tag_count: int = 0


def count_nodes(node: Optional[TreeNode]) -> int:
    """Number of nodes in the subtree rooted at ``node``."""
    count = 0
    stack = [node]
    while stack:
        current = stack.pop()
        if current is not None:
            count += 1
            stack.append(current.left)
            stack.append(current.right)
    return count


def sum_depths(node: Optional[TreeNode], depth: int = 0) -> int:
    """Sum of node depths below ``node``, where ``node`` sits at ``depth``."""
    total = 0
    stack = [(node, depth)]
    while stack:
        current, d = stack.pop()
        if current is not None:
            total += d
            stack.append((current.left, d + 1))
            stack.append((current.right, d + 1))
    return total


def subtree_height(node: Optional[TreeNode]) -> int:
    """Levels below and including ``node``; 0 for an empty subtree."""
    height = 0
    level = [node] if node is not None else []
    while level:
        height += 1
        level = [child for n in level for child in (n.left, n.right) if child is not None]
    return height


def average_depth(node: Optional[TreeNode]) -> float:
    """
    Average node depth with the root at depth 0.

    Returns 0.0 for an empty tree instead of dividing by zero.
    """
    n = count_nodes(node)
    if n == 0:
        logger.debug("average_depth() on empty tree, returning 0.0")
        return 0.0
    return sum_depths(node) / n


def depth_ratio(node: Optional[TreeNode]) -> float:
    """
    Ratio of the average depth to log2(n).

    log2(n) is zero for a single node and undefined for an empty tree, so
    0.0 is returned whenever n <= 1.
    """
    n = count_nodes(node)
    if n <= 1:
        logger.debug("depth_ratio() with %d node(s), returning 0.0", n)
        return 0.0
    return (sum_depths(node) / n) / math.log2(n)


def iter_in_order(node: Optional[TreeNode]) -> Iterator[TreeNode]:
    """Yield the nodes below ``node`` in ascending key order."""
    stack = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _empty_stats() -> Stats:
    return Stats(
        height=0,
        node_count=0,
        depth_sum=0,
        avg_depth=0.0,
        ratio=0.0,
        least_key=None,
        greatest_key=None,
        is_search_tree=True,
        is_balanced=True,
        heights_consistent=True,
        keys_in_order=True,
        tag_count=0,
    )


def _combine(node: TreeNode, depth: int, left: Stats, right: Stats) -> Stats:
    key = node.entry.key

    stats = _empty_stats()
    stats.height = 1 + max(left.height, right.height)
    stats.node_count = 1 + left.node_count + right.node_count
    stats.depth_sum = depth + left.depth_sum + right.depth_sum
    stats.tag_count = len(node.entry.tags) + left.tag_count + right.tag_count

    # Search tree property: strictly between the neighbouring subtrees
    stats.is_search_tree = left.is_search_tree and right.is_search_tree
    if left.greatest_key is not None and not left.greatest_key < key:
        stats.is_search_tree = False
    if right.least_key is not None and not key < right.least_key:
        stats.is_search_tree = False

    stats.is_balanced = (
        left.is_balanced and right.is_balanced and abs(left.height - right.height) <= 1
    )
    stats.heights_consistent = (
        left.heights_consistent and right.heights_consistent and node.height == stats.height
    )

    stats.least_key = left.least_key if left.least_key is not None else key
    stats.greatest_key = right.greatest_key if right.greatest_key is not None else key
    return stats


def _subtree_stats(node: Optional[TreeNode], depth: int) -> Stats:
    """Aggregate one subtree in a single post-order pass."""
    done: List[Stats] = []
    stack: List[Tuple[Optional[TreeNode], int, bool]] = [(node, depth, False)]
    while stack:
        current, d, children_done = stack.pop()
        if current is None:
            done.append(_empty_stats())
        elif children_done:
            right = done.pop()
            left = done.pop()
            done.append(_combine(current, d, left, right))
        else:
            stack.append((current, d, True))
            stack.append((current.right, d + 1, False))
            stack.append((current.left, d + 1, False))
    return done.pop()


def tree_stats_(t: Optional[SearchTreeBase]) -> Stats:
    """
    Returns aggregated statistics for a sequence tree in **O(n)** time.

    ``avg_depth`` uses the root-at-depth-0 convention; ``avg_depth`` and
    ``ratio`` fall back to 0.0 where they are undefined (see
    :func:`average_depth` and :func:`depth_ratio`).
    """
    if t is None or t.is_empty():
        return _empty_stats()

    stats = _subtree_stats(t.root, 0)
    n = stats.node_count
    stats.avg_depth = stats.depth_sum / n
    stats.ratio = stats.avg_depth / math.log2(n) if n > 1 else 0.0

    # Root-level walk: in-order keys must be strictly ascending
    prev_key = None
    for node in iter_in_order(t.root):
        if prev_key is not None and not prev_key < node.entry.key:
            stats.keys_in_order = False
            break
        prev_key = node.entry.key

    return stats
