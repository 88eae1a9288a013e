from .base import Emitter
from .haskell import HaskellEmitter
from .lisp import LispEmitter
from .graph import GraphEmitter
from .targets import Target, emit, emit_wrapped
from .suite import assemble_suite

__all__ = [
    'Emitter', 'HaskellEmitter', 'LispEmitter', 'GraphEmitter',
    'Target', 'emit', 'emit_wrapped', 'assemble_suite',
]
