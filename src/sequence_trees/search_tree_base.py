"""Binary search tree core shared by the unbalanced and AVL variants"""

from __future__ import annotations
from typing import List, Optional, TextIO, Tuple, Type

from sequence_trees.base import (
    AbstractSequenceTree,
    SequenceEntry,
    TreeNode,
    debug_log,
)
from sequence_trees import tree_stats

# (node, went_left) pairs from the root down to the parent of the change
Path = List[Tuple[TreeNode, bool]]


def _check_key(key, op: str) -> None:
    if not isinstance(key, str):
        raise TypeError(f"{op}(): key must be a str, got {type(key).__name__}")


class SearchTreeBase(AbstractSequenceTree):
    """
    A binary search tree of :class:`SequenceEntry` objects ordered by key.

    Descents are iterative, so a degenerate tree (e.g. built from sorted
    input) is limited by memory, not by the interpreter's recursion limit.
    Structural changes record the path they walked; on the way back up each
    node on it is handed to :meth:`_rebalance`, which is how subclasses add
    balancing without touching the search logic.

    Attributes:
        root (Optional[TreeNode]): The root node. If None, the tree is empty.
    """
    __slots__ = ("root",)

    NodeClass: Type[TreeNode] = TreeNode
    # True for variants that maintain node heights and the AVL invariant
    BALANCED = False

    def __init__(self, root: Optional[TreeNode] = None):
        self.root: Optional[TreeNode] = root

    def is_empty(self) -> bool:
        return self.root is None

    def __str__(self):
        name = type(self).__name__
        return f"Empty {name}" if self.is_empty() else f"{name}(root={self.root})"

    __repr__ = __str__

    def __len__(self) -> int:
        return self.count_nodes()

    def __contains__(self, key) -> bool:
        return isinstance(key, str) and self.find(key)[0]

    # Public API
    def insert(self, entry: SequenceEntry) -> None:
        """
        Insert an entry. If its key already exists, the stored entry absorbs
        the new tags instead of a second node being created.

        Args:
            entry (SequenceEntry): The entry to be inserted. The tree stores
                its own copy, so later merges never touch the caller's object.

        Raises:
            TypeError: If entry is not a SequenceEntry.
        """
        if not isinstance(entry, SequenceEntry):
            raise TypeError(f"insert(): expected SequenceEntry, got {type(entry).__name__}")
        self._insert(entry)

    def find(self, key: str) -> Tuple[bool, int]:
        """
        Searches for a key, counting one step per node compared.

        Returns:
            Tuple[bool, int]: ``(found, steps)``. An empty tree gives
            ``(False, 0)``; a miss reports the number of nodes on the path.
        """
        _check_key(key, "find")
        node, steps = self._find_node(key)
        return node is not None, steps

    def find_and_print(self, key: str, file: Optional[TextIO] = None) -> None:
        """Print the entry stored under ``key``, or ``Not Found``."""
        _check_key(key, "find_and_print")
        node, _ = self._find_node(key)
        if node is None:
            print("Not Found", file=file)
        else:
            print(node.entry, file=file)

    def remove(self, key: str) -> Tuple[bool, int]:
        """
        Removes the node holding ``key``.

        A node with two children takes over its in-order successor's entry
        and the successor is removed from the right subtree. Only the
        descent to the target is counted in ``steps``; the successor
        sub-deletion is not.

        Returns:
            Tuple[bool, int]: ``(removed, steps)``.
        """
        _check_key(key, "remove")
        return self._remove(key)

    def count_nodes(self) -> int:
        """Number of nodes, by full traversal."""
        return tree_stats.count_nodes(self.root)

    def calculate_avg_depth(self) -> float:
        """Average node depth (root at depth 0); 0.0 for an empty tree."""
        return tree_stats.average_depth(self.root)

    def calculate_ratio(self) -> float:
        """Average depth divided by log2(n); 0.0 when n <= 1."""
        return tree_stats.depth_ratio(self.root)

    def height(self) -> int:
        """Number of levels in the tree, 0 when empty."""
        return tree_stats.subtree_height(self.root)

    def entries_between(self, low: str, high: str) -> List[SequenceEntry]:
        """
        Collect the entries with ``low <= key <= high`` in ascending order.

        Subtrees that cannot hold a qualifying key are never visited.
        """
        _check_key(low, "entries_between")
        _check_key(high, "entries_between")
        return self._collect_between(low, high)

    def print_between(self, low: str, high: str, file: Optional[TextIO] = None) -> None:
        """Print every entry with ``low <= key <= high``, one per line, in order."""
        for entry in self.entries_between(low, high):
            print(entry, file=file)

    # Hooks
    def _rebalance(self, node: TreeNode) -> TreeNode:
        """
        Called bottom-up for the nodes on a modified path, stopping once a
        subtree keeps both its root and its height. Returns the node that now
        roots this subtree. The plain BST keeps the shape as is.
        """
        return node

    # Private Methods
    def _unwind(self, path: Path, child: Optional[TreeNode]) -> None:
        """Hang ``child`` below the last node of ``path`` and rebalance upwards."""
        for parent, went_left in reversed(path):
            if went_left:
                parent.left = child
            else:
                parent.right = child
            old_height = parent.height
            child = self._rebalance(parent)
            # Same subtree root with the same height: nothing above changes
            if child is parent and parent.height == old_height:
                return
        self.root = child

    def _insert(self, entry: SequenceEntry) -> None:
        key = entry.key
        path: Path = []
        node = self.root
        while node is not None:
            node_key = node.entry.key
            if key < node_key:
                path.append((node, True))
                node = node.left
            elif node_key < key:
                path.append((node, False))
                node = node.right
            else:
                debug_log("Merging %d tag(s) into existing key %r", len(entry.tags), key)
                node.entry.merge(entry)
                return

        debug_log("Inserting new node for key %r", key)
        self._unwind(path, self.NodeClass(entry.copy()))

    def _find_node(self, key: str) -> Tuple[Optional[TreeNode], int]:
        steps = 0
        node = self.root
        while node is not None:
            steps += 1
            node_key = node.entry.key
            if key < node_key:
                node = node.left
            elif node_key < key:
                node = node.right
            else:
                return node, steps
        return None, steps

    def _remove(self, key: str) -> Tuple[bool, int]:
        steps = 0
        path: Path = []
        node = self.root
        while node is not None:
            steps += 1
            node_key = node.entry.key
            if key < node_key:
                path.append((node, True))
                node = node.left
            elif node_key < key:
                path.append((node, False))
                node = node.right
            else:
                break
        if node is None:
            return False, steps

        if node.left is not None and node.right is not None:
            # Continue the path to the successor and unlink it instead
            path.append((node, False))
            successor = node.right
            while successor.left is not None:
                path.append((successor, True))
                successor = successor.left
            debug_log("Replacing %r with in-order successor %r", key, successor.entry.key)
            node.entry = successor.entry
            replacement = successor.right
        else:
            debug_log("Removing node %r", key)
            replacement = node.left if node.left is not None else node.right

        self._unwind(path, replacement)
        return True, steps

    def _collect_between(self, low: str, high: str) -> List[SequenceEntry]:
        out: List[SequenceEntry] = []
        stack: List[Tuple[TreeNode, str]] = []
        node = self.root
        while True:
            while node is not None:
                key = node.key
                stack.append((node, key))
                node = node.left if low < key else None
            if not stack:
                return out
            node, key = stack.pop()
            if low <= key <= high:
                out.append(node.entry)
            node = node.right if key < high else None
