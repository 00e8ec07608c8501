#!/usr/bin/env python3
"""
Interactively query a tree built from an enzyme database.

Usage: python -m scripts.query_trees <database> <BST|AVL>
"""
import argparse
import sys
from typing import List, Optional, TextIO

from scripts.common import add_log_level_argument, apply_log_level, build_tree, logger
from sequence_trees.factory import TREE_CLASSES
from sequence_trees.search_tree_base import SearchTreeBase

PROMPT = "Query this tree by entering one recognition sequence and pressing 'Enter'"
AGAIN = "Would you like to query this tree again? Enter 'N' if no, and any other letter if yes."


def query_loop(tree: SearchTreeBase, stdin: TextIO, stdout: TextIO) -> int:
    """Answer queries from ``stdin`` until the user answers 'N' or input ends.

    Returns the number of queries answered.
    """
    answered = 0
    while True:
        print(PROMPT, file=stdout)
        line = stdin.readline()
        if not line:
            break
        sequence = line.strip()
        if not sequence:
            continue
        tree.find_and_print(sequence, file=stdout)
        answered += 1

        print(AGAIN, file=stdout)
        answer = stdin.readline()
        if not answer or answer.strip().upper() == "N":
            break
    return answered


def main(argv: Optional[List[str]] = None, stdin: TextIO = None, stdout: TextIO = None) -> int:
    parser = argparse.ArgumentParser(description='Query a BST or AVL tree of recognition sequences')
    parser.add_argument('database', help='Enzyme database file')
    parser.add_argument('tree_type', help='Tree variant: BST or AVL')
    add_log_level_argument(parser)
    args = parser.parse_args(argv)
    apply_log_level(args)

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    if args.tree_type.upper() not in TREE_CLASSES:
        print(f"Unknown tree type {args.tree_type} (User should provide BST, or AVL)", file=stdout)
        return 2

    print(f"Input filename is {args.database}", file=stdout)
    try:
        tree = build_tree(args.database, args.tree_type)
    except FileNotFoundError:
        logger.error("Database file not found: %s", args.database)
        return 1

    query_loop(tree, stdin, stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
