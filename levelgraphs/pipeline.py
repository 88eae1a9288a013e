"""
Benchmark generation: sample → build → roles → conditionals → text.

Draw order within one unit: level sizes, edge trials, role draws, then
conditional trials. Units are generated one after the other from the same
random stream, so a seed fixes the whole suite.
"""
from __future__ import annotations
import logging
from typing import Mapping, Optional, Sequence
import numpy as np

from .config import GeneratorConfig
from .core.builder import build_graph
from .core.conditionals import inject_conditionals
from .core.rng import make_rng
from .core.roles import assign_roles
from .core.sampling import example_weight_table, level_schedule, sample_level_sizes
from .core.types import CodeGraph
from .emit.suite import assemble_suite
from .emit.targets import Target

logger = logging.getLogger(__name__)


def random_example_benchmark(rng: np.random.Generator, weight_table: Mapping[tuple[int, int], float],
                             type_weights: Sequence[float], if_percentage: float, levels: int) -> CodeGraph:
    """Generate one benchmark unit with `levels` levels."""
    sizes = sample_level_sizes(rng, levels)
    graph = build_graph(rng, weight_table, sizes)
    graph = assign_roles(rng, graph, type_weights)
    return inject_conditionals(rng, if_percentage, graph)


def generate_graphs(config: GeneratorConfig, rng: Optional[np.random.Generator] = None) -> list[CodeGraph]:
    """All units of a suite, in schedule order (1, 2, ..., levels, 1, ...)."""
    if rng is None:
        rng = make_rng(config.seed)
    weight_table = example_weight_table(config.levels)
    schedule = level_schedule(config.levels, config.total_graphs)
    graphs = [
        random_example_benchmark(rng, weight_table, config.type_weights, config.percentage_ifs, lvl)
        for lvl in schedule
    ]
    logger.info(f"[SUITE] Generated {len(graphs)} units, {sum(len(g) for g in graphs)} nodes")
    return graphs


def generate_suite(config: GeneratorConfig, rng: Optional[np.random.Generator] = None) -> str:
    """Generate the suite and render it in the configured language."""
    target = Target.from_name(config.language)
    return assemble_suite(target, generate_graphs(config, rng))
