"""Shape statistics for unbalanced vs. AVL sequence trees."""

import argparse
import logging
from statistics import mean
from typing import List, Optional

import numpy as np
from tqdm import tqdm

from sequence_trees.base import SequenceEntry
from sequence_trees.factory import create_tree
from sequence_trees.invariants import assert_tree_invariants_raise
from sequence_trees.logging_config import set_level
from sequence_trees.search_tree_base import SearchTreeBase
from sequence_trees.tree_stats import tree_stats_
from stats.config import ExperimentConfig, ExperimentSummary

logger = logging.getLogger(__name__)

DNA_ALPHABET = np.array(list("ACGT"))


def random_sequences(n: int, length: int, rng: np.random.Generator) -> List[str]:
    """Draw ``n`` random DNA strings of the given length (duplicates possible)."""
    letters = rng.choice(DNA_ALPHABET, size=(n, length))
    return ["".join(row) for row in letters]


def random_tree(kind: str, n: int, length: int, rng: np.random.Generator) -> SearchTreeBase:
    """Build a ``kind`` tree from ``n`` random sequences, each tagged with its index."""
    tree = create_tree(kind)
    tree_insert = tree.insert
    for i, seq in enumerate(random_sequences(n, length, rng)):
        tree_insert(SequenceEntry(seq, [f"E{i}"]))
    return tree


def repeated_experiment(
    kind: str,
    size: int,
    repetitions: int,
    key_length: int = 8,
    seed: Optional[int] = None,
    progress: bool = True,
) -> ExperimentSummary:
    """
    Repeatedly builds random trees of one variant and aggregates their
    average depth, depth ratio and height. Invariants are checked on every
    tree.
    """
    rng = np.random.default_rng(seed)
    results = []

    for _ in tqdm(range(repetitions), desc=f"{kind} n={size}", leave=False, disable=not progress):
        tree = random_tree(kind, size, key_length, rng)
        stats = tree_stats_(tree)
        assert_tree_invariants_raise(tree, stats)
        results.append(stats)

    avg_depth = mean(s.avg_depth for s in results)
    avg_ratio = mean(s.ratio for s in results)

    return ExperimentSummary(
        kind=kind,
        size=size,
        repetitions=repetitions,
        avg_node_count=mean(s.node_count for s in results),
        avg_depth=avg_depth,
        var_depth=mean((s.avg_depth - avg_depth) ** 2 for s in results),
        avg_ratio=avg_ratio,
        var_ratio=mean((s.ratio - avg_ratio) ** 2 for s in results),
        avg_height=mean(s.height for s in results),
        max_height=max(s.height for s in results),
        seed=seed,
    )


def run(config: ExperimentConfig, progress: bool = True) -> List[ExperimentSummary]:
    summaries = []
    for size in tqdm(config.sizes, desc="Sizes", disable=not progress):
        for kind in config.kinds:
            summary = repeated_experiment(
                kind,
                size,
                config.repetitions,
                key_length=config.key_length,
                seed=config.seed,
                progress=progress,
            )
            logger.info("\n%s", summary)
            summaries.append(summary)
    return summaries


def main(argv: Optional[List[str]] = None) -> int:
    config = ExperimentConfig.from_env()

    parser = argparse.ArgumentParser(description="Compare BST and AVL tree shapes on random DNA keys")
    parser.add_argument("--sizes", type=int, nargs="+", default=config.sizes)
    parser.add_argument("--kinds", nargs="+", default=config.kinds, choices=["BST", "AVL"])
    parser.add_argument("--repetitions", type=int, default=config.repetitions)
    parser.add_argument("--key-length", type=int, default=config.key_length)
    parser.add_argument("--seed", type=int, default=config.seed)
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=config.log_level,
    )
    args = parser.parse_args(argv)

    # Force=True makes this configuration override existing logger settings
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        force=True,
    )
    # Per-node debug output from the trees would drown the summaries
    set_level(logging.WARNING)

    config = ExperimentConfig(
        seed=args.seed,
        sizes=args.sizes,
        kinds=args.kinds,
        repetitions=args.repetitions,
        key_length=args.key_length,
        log_level=args.log_level,
    )
    run(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
