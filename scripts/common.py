"""Helpers shared by the command-line front ends."""

import argparse
import logging

from sequence_trees.factory import create_tree
from sequence_trees.logging_config import get_logger, set_level
from sequence_trees.parser import load_database
from sequence_trees.search_tree_base import SearchTreeBase

logger = get_logger("scripts")

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def add_log_level_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--log-level',
        choices=LOG_LEVELS,
        default='WARNING',
        help='Set the logging level (default: WARNING)'
    )


def apply_log_level(args: argparse.Namespace) -> None:
    set_level(getattr(logging, args.log_level))


def build_tree(db_filename: str, kind: str) -> SearchTreeBase:
    """Create a ``kind`` tree and fill it from ``db_filename``."""
    tree = create_tree(kind)
    load_database(db_filename, tree)
    return tree
