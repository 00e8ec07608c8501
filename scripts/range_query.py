#!/usr/bin/env python3
"""
Print every recognition sequence between two keys, using an AVL tree.

Usage: python -m scripts.range_query <database> <low> <high>
"""
import argparse
import sys
from typing import List, Optional, TextIO

from scripts.common import add_log_level_argument, apply_log_level, build_tree, logger


def main(argv: Optional[List[str]] = None, stdout: TextIO = None) -> int:
    parser = argparse.ArgumentParser(description='Range query over an AVL tree of recognition sequences')
    parser.add_argument('database', help='Enzyme database file')
    parser.add_argument('low', help='Lower recognition sequence (inclusive)')
    parser.add_argument('high', help='Upper recognition sequence (inclusive)')
    add_log_level_argument(parser)
    args = parser.parse_args(argv)
    apply_log_level(args)

    stdout = stdout if stdout is not None else sys.stdout
    print(f"Input file is {args.database}", file=stdout)
    print(f"String 1 is {args.low}   and string 2 is {args.high}", file=stdout)

    try:
        tree = build_tree(args.database, "AVL")
    except FileNotFoundError:
        logger.error("Database file not found: %s", args.database)
        return 1

    tree.print_between(args.low, args.high, file=stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
