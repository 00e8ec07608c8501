#!/usr/bin/env python3
"""
Build a tree from an enzyme database and report its shape and query costs.

Prints node count, average depth and depth ratio; searches every query;
removes every other query; then prints the shape statistics again.

Usage: python -m scripts.tree_report <database> <queries> <BST|AVL>
"""
import argparse
import sys
from typing import Iterable, List, Optional, TextIO, Tuple

from scripts.common import add_log_level_argument, apply_log_level, build_tree, logger
from sequence_trees.factory import TREE_CLASSES
from sequence_trees.parser import iter_queries
from sequence_trees.search_tree_base import SearchTreeBase


def search_queries(tree: SearchTreeBase, queries: Iterable[str]) -> Tuple[int, int, float]:
    """Run ``find`` for every query.

    Returns (successful, total, average steps).
    """
    found_count = total = sum_steps = 0
    for query in queries:
        total += 1
        found, steps = tree.find(query)
        if found:
            found_count += 1
        sum_steps += steps
    avg_steps = sum_steps / total if total else 0.0
    return found_count, total, avg_steps


def remove_every_other(tree: SearchTreeBase, queries: Iterable[str]) -> Tuple[int, int, float]:
    """Run ``remove`` on the 1st, 3rd, 5th ... query.

    Misses still count towards the average.
    Returns (successful, calls, average steps).
    """
    removed_count = calls = sum_steps = 0
    for i, query in enumerate(queries):
        if i % 2:
            continue
        calls += 1
        removed, steps = tree.remove(query)
        if removed:
            removed_count += 1
        sum_steps += steps
    avg_steps = sum_steps / calls if calls else 0.0
    return removed_count, calls, avg_steps


def print_shape(tree: SearchTreeBase, stdout: TextIO) -> None:
    print(f"This tree has {tree.count_nodes()} nodes.", file=stdout)
    print(f"The Average Depth of this tree is {tree.calculate_avg_depth():.4f}.", file=stdout)
    print(f"The ratio of the average depth to log2n is {tree.calculate_ratio():.4f}.", file=stdout)


def report(tree: SearchTreeBase, queries: List[str], stdout: TextIO) -> None:
    print_shape(tree, stdout)

    found, total, avg_find = search_queries(tree, queries)
    print(f"The number of successful queries was {found}.", file=stdout)
    print(f"The total number of queries was {total}.", file=stdout)
    print(f"The average number of recursion calls for find() was {avg_find:.2f}.", file=stdout)

    removed, _, avg_remove = remove_every_other(tree, queries)
    print(f"The number of successful removes was {removed}.", file=stdout)
    print(f"The average number of recursion calls for remove() was {avg_remove:.2f}.", file=stdout)

    print("After remove_every_other():", file=stdout)
    print_shape(tree, stdout)


def main(argv: Optional[List[str]] = None, stdout: TextIO = None) -> int:
    parser = argparse.ArgumentParser(description='Report shape and query costs of a BST or AVL tree')
    parser.add_argument('database', help='Enzyme database file')
    parser.add_argument('queries', help='File with one recognition sequence per line')
    parser.add_argument('tree_type', help='Tree variant: BST or AVL')
    add_log_level_argument(parser)
    args = parser.parse_args(argv)
    apply_log_level(args)

    stdout = stdout if stdout is not None else sys.stdout

    if args.tree_type.upper() not in TREE_CLASSES:
        print(f"Unknown tree type {args.tree_type} (User should provide BST, or AVL)", file=stdout)
        return 2

    print(f"Input file is {args.database}, and query file is {args.queries}", file=stdout)
    try:
        tree = build_tree(args.database, args.tree_type)
        with open(args.queries, encoding="utf-8") as f:
            queries = list(iter_queries(f))
    except FileNotFoundError as e:
        logger.error("File not found: %s", e.filename)
        return 1

    report(tree, queries, stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
