"""Top-level package exports for levelgraphs.

Convenience re-exports so users can:

	from levelgraphs import generate_suite, GeneratorConfig

Versioning kept simple (manual bump).
"""

__all__ = [
	'CodeGraph', 'Role', 'Target', 'GeneratorConfig',
	'random_example_benchmark', 'generate_graphs', 'generate_suite', 'assemble_suite', 'VERSION'
]

VERSION = '0.1.0'

from .core.types import CodeGraph, Role
from .emit import Target, assemble_suite
from .config import GeneratorConfig
from .pipeline import random_example_benchmark, generate_graphs, generate_suite
