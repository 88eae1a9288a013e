from .types import Role, Node, CodeGraph
from .rng import UNSPECIFIED_SEED, make_rng
from .sampling import sample_level_sizes, example_weight_table, level_schedule
from .builder import build_graph, MissingLevelWeightError
from .roles import assign_roles
from .conditionals import inject_conditionals

__all__ = [
    'Role', 'Node', 'CodeGraph', 'UNSPECIFIED_SEED', 'make_rng',
    'sample_level_sizes', 'example_weight_table', 'level_schedule',
    'build_graph', 'MissingLevelWeightError', 'assign_roles', 'inject_conditionals',
]
