"""Level-size sampling and the canonical level-pair weight table.

Level sizes are drawn independently per level from a fixed distribution:

  size    1     2     3     4     5     6
  weight  0.10  0.30  0.40  0.10  0.07  0.03

Edge weights decay geometrically with level distance, 1 / 2^(b - a), so
dependencies are mostly local.
"""
from __future__ import annotations
import logging
import numpy as np

from .rng import draw_categorical

logger = logging.getLogger(__name__)

LEVEL_SIZE_DISTRIBUTION = (
    (1, 0.1),
    (2, 0.3),
    (3, 0.4),
    (4, 0.1),
    (5, 0.07),
    (6, 0.03),
)

WeightTable = dict[tuple[int, int], float]


def sample_level_sizes(rng: np.random.Generator, levels: int) -> list[int]:
    """Draw one node count per level, in level order."""
    sizes, weights = zip(*LEVEL_SIZE_DISTRIBUTION)
    drawn = [int(draw_categorical(rng, sizes, weights)) for _ in range(levels)]
    logger.debug(f"[SAMPLE] level sizes: {drawn}")
    return drawn


def example_weight_table(n: int) -> WeightTable:
    """Weight 1 / 2^(b - a) for every level pair a < b in [1, n]."""
    return {
        (a, b): 1.0 / 2 ** (b - a)
        for a in range(1, n + 1)
        for b in range(a + 1, n + 1)
    }


def level_schedule(levels: int, total: int) -> list[int]:
    """Level counts of the units of a suite: 1, 2, ..., levels, 1, 2, ...

    Truncated to `total` units. Empty when either argument is 0.
    """
    if levels <= 0:
        return []
    return [(i % levels) + 1 for i in range(total)]


__all__ = ['LEVEL_SIZE_DISTRIBUTION', 'WeightTable', 'sample_level_sizes',
           'example_weight_table', 'level_schedule']
