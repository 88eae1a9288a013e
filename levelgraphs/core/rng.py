"""
Deterministic random source shared by every generation step.

A run creates one numpy Generator with make_rng() and passes it explicitly
to each sampler, so two runs with the same seed draw the same sequence.
"""
from __future__ import annotations
from typing import Optional, Sequence, TypeVar
import numpy as np

T = TypeVar("T")

UNSPECIFIED_SEED = -1


def make_rng(seed: Optional[int] = UNSPECIFIED_SEED) -> np.random.Generator:
    """Create the random stream for a run.

    Args:
        seed: Integer seed, used verbatim. UNSPECIFIED_SEED (-1) or None
            selects system entropy (non reproducible).
    """
    if seed is None or seed == UNSPECIFIED_SEED:
        return np.random.default_rng()
    return np.random.default_rng(seed)


def bernoulli(rng: np.random.Generator, p: float) -> bool:
    """One Bernoulli trial. p=1.0 always succeeds, p=0.0 never does."""
    return bool(rng.random() < p)


def draw_categorical(rng: np.random.Generator, values: Sequence[T], weights: Sequence[float]) -> T:
    """Draw one of `values` with probability proportional to `weights`.

    Weights need not sum exactly to 1; zero-weight values are never drawn.
    Consumes exactly one uniform draw.
    """
    cdf = np.cumsum(np.asarray(weights, dtype=float))
    if len(values) == 0 or len(cdf) == 0 or cdf[-1] <= 0.0:
        raise ValueError("categorical draw needs at least one positive weight")
    idx = int(np.searchsorted(cdf, rng.random() * cdf[-1], side="right"))
    return values[min(idx, len(values) - 1)]
