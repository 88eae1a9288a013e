"""
Random level-graph construction.

Nodes are materialized level by level with dense ids, so id order matches
level order. Each pair of nodes on two distinct levels is joined, lower to
higher, with the probability stored in the level-pair weight table. Every
edge goes upward in level, which is enough for acyclicity.
"""
from __future__ import annotations
import logging
from typing import Mapping, Sequence
import numpy as np

from .rng import bernoulli
from .types import CodeGraph, Node, Role

logger = logging.getLogger(__name__)


class MissingLevelWeightError(KeyError):
    """Raised when the weight table has no entry for a level pair the builder needs."""
    pass


def _pair_weight(weight_table: Mapping[tuple[int, int], float], a: int, b: int) -> float:
    try:
        return weight_table[(a, b)]
    except KeyError:
        raise MissingLevelWeightError(
            f"No edge weight for level pair ({a}, {b}); the weight table must cover every pair up to the graph depth"
        ) from None


def build_graph(rng: np.random.Generator, weight_table: Mapping[tuple[int, int], float],
                level_sizes: Sequence[int]) -> CodeGraph:
    """Build a role-less level graph (every node starts as COMPUTE).

    Args:
        rng: Random stream of the run.
        weight_table: Bernoulli parameter per level pair (a, b), a < b.
        level_sizes: Node count per level; level_sizes[i] nodes go to level i+1.

    Returns:
        CodeGraph with len(level_sizes) levels.

    Raises:
        MissingLevelWeightError: A needed level pair is absent from the table.
    """
    nodes: list[Node] = []
    by_level: list[list[int]] = []
    for idx, size in enumerate(level_sizes):
        ids = list(range(len(nodes), len(nodes) + size))
        nodes.extend(Node(id=i, level=idx + 1, role=Role.COMPUTE) for i in ids)
        by_level.append(ids)

    n_levels = len(level_sizes)
    # Resolve every weight before the first draw
    pairs = [(a, b) for a in range(1, n_levels + 1) for b in range(a + 1, n_levels + 1)]
    weights = {pair: _pair_weight(weight_table, *pair) for pair in pairs}

    edges: list[tuple[int, int]] = []
    for a, b in pairs:
        p = weights[(a, b)]
        for u in by_level[a - 1]:
            for v in by_level[b - 1]:
                if bernoulli(rng, p):
                    edges.append((u, v))

    logger.debug(f"[BUILD] {len(nodes)} nodes on {n_levels} levels, {len(edges)} edges")
    return CodeGraph.from_parts(nodes, edges, n_levels)
