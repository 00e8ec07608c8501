"""AVL tree: height-balanced variant of the sequence search tree."""

from __future__ import annotations
from typing import Optional

from sequence_trees.base import TreeNode, debug_log
from sequence_trees.search_tree_base import SearchTreeBase


def height(node: Optional[TreeNode]) -> int:
    return node.height if node is not None else 0


def update_height(node: TreeNode) -> None:
    node.height = 1 + max(height(node.left), height(node.right))


def balance_factor(node: Optional[TreeNode]) -> int:
    """height(left) - height(right), 0 for an empty subtree."""
    if node is None:
        return 0
    return height(node.left) - height(node.right)


def rotate_right(node: TreeNode) -> TreeNode:
    """Lift ``node.left`` above ``node``; returns the new subtree root."""
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    update_height(node)
    update_height(pivot)
    debug_log("Rotated right at %r, new root %r", node.entry.key, pivot.entry.key)
    return pivot


def rotate_left(node: TreeNode) -> TreeNode:
    """Lift ``node.right`` above ``node``; returns the new subtree root."""
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    update_height(node)
    update_height(pivot)
    debug_log("Rotated left at %r, new root %r", node.entry.key, pivot.entry.key)
    return pivot


class BalancedTree(SearchTreeBase):
    """
    AVL tree. Same contract as :class:`UnbalancedTree`; after every insert
    or remove the nodes on the modified path get their heights recomputed,
    bottom-up until one keeps its height, and any node whose balance factor
    left {-1, 0, 1} gets one single or double rotation.

    An insertion needs at most one rotation to restore balance, a deletion
    may rotate at several ancestors.
    """
    __slots__ = ()

    BALANCED = True

    def _rebalance(self, node: TreeNode) -> TreeNode:
        update_height(node)
        bf = balance_factor(node)

        if bf > 1:
            # Left-Right: straighten the left child first
            if balance_factor(node.left) < 0:
                node.left = rotate_left(node.left)
            return rotate_right(node)

        if bf < -1:
            # Right-Left: straighten the right child first
            if balance_factor(node.right) > 0:
                node.right = rotate_right(node.right)
            return rotate_left(node)

        return node
