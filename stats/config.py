"""Experiment configuration."""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class ExperimentConfig:
    """Configuration for tree-shape experiments."""

    # Reproducibility
    seed: int = 42

    # Experiment parameters
    sizes: list[int] = None
    kinds: list[str] = None
    repetitions: int = 20
    key_length: int = 8

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        if self.sizes is None:
            self.sizes = [10, 100, 1000]
        if self.kinds is None:
            self.kinds = ["BST", "AVL"]

    @classmethod
    def from_env(cls) -> "ExperimentConfig":
        """Create config from environment variables."""
        return cls(
            seed=int(os.environ.get("SEQTREE_SEED", "42")),
            repetitions=int(os.environ.get("SEQTREE_REPETITIONS", "20")),
            log_level=os.environ.get("SEQTREE_LOG_LEVEL", "INFO"),
        )


@dataclass
class ExperimentSummary:
    """Mean and variance of the shape statistics for one (kind, size) pair."""

    kind: str
    size: int
    repetitions: int
    avg_node_count: float
    avg_depth: float
    var_depth: float
    avg_ratio: float
    var_ratio: float
    avg_height: float
    max_height: int
    seed: Optional[int] = None

    def __str__(self) -> str:
        lines = [
            f"Tree type: {self.kind}",
            f"Keys inserted (n): {self.size}",
            f"Repetitions: {self.repetitions}",
            f"Seed: {self.seed}",
            f"Node count:        {self.avg_node_count:.2f}",
            f"Average depth:     {self.avg_depth:.4f} (var {self.var_depth:.4f})",
            f"Depth / log2(n):   {self.avg_ratio:.4f} (var {self.var_ratio:.4f})",
            f"Height:            {self.avg_height:.2f} (max {self.max_height})",
        ]
        return "\n".join(lines)
