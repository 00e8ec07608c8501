"""Pretty-printing and display utilities for sequence trees."""

from __future__ import annotations

import collections
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from sequence_trees.search_tree_base import SearchTreeBase


def print_pretty(tree: Optional[SearchTreeBase]) -> str:
    """
    Renders a tree level by level:
      • Line ``Depth d`` lists the keys at depth d, left→right in key order.
      • Missing children are shown as ``·`` so the shape stays readable.
    """
    from sequence_trees.search_tree_base import SearchTreeBase

    if tree is None:
        return "NoneType: None"

    if not isinstance(tree, SearchTreeBase):
        raise TypeError(f"print_pretty() expects SearchTreeBase, got {type(tree).__name__}")

    tree_type = type(tree).__name__
    if tree.is_empty():
        return f"{tree_type}: Empty"

    layers = collections.defaultdict(list)  # depth -> list of key texts
    max_depth = tree.height() - 1

    # Pre-order, right child pushed first so each layer reads left to right
    stack = [(tree.root, 0)]
    while stack:
        node, depth = stack.pop()
        if depth > max_depth:
            continue
        if node is None:
            layers[depth].append("·")
            continue
        layers[depth].append(node.entry.key)
        if node.left is not None or node.right is not None:
            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))

    out_lines = [f"Depth {depth}: " + " ".join(layers[depth]) for depth in sorted(layers)]
    return tree_type + "\n" + "\n".join(out_lines) + "\n"


def print_structure(
    tree: SearchTreeBase,
    indent: int = 0,
    max_depth: Optional[int] = None,
) -> str:
    """Return a debugging-oriented structural dump of a sequence tree.

    Each node is printed on its own line as ``L:``/``R:`` child of its
    parent, with its key, stored height and tags.
    """
    prefix = ' ' * indent
    if tree is None or tree.is_empty():
        return f"{prefix}Empty {tree.__class__.__name__}"

    result = [f"{prefix}{tree.__class__.__name__}"]

    stack = [(tree.root, "Root", 0)]
    while stack:
        node, label, depth = stack.pop()
        pad = prefix + "    " * (depth + 1)
        if node is None:
            result.append(f"{pad}{label}: Empty")
            continue
        if max_depth is not None and depth > max_depth:
            result.append(f"{pad}{label}: ... (max depth reached)")
            continue
        result.append(
            f"{pad}{label}: {node.entry.key} (height={node.height}, tags={node.entry.tags})"
        )
        if node.left is not None or node.right is not None:
            stack.append((node.right, "R", depth + 1))
            stack.append((node.left, "L", depth + 1))

    return "\n".join(result)
