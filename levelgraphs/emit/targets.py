"""
Closed set of output targets, each bound to its emitter.
"""
from __future__ import annotations
from enum import Enum
from typing import Optional

from ..core.types import CodeGraph
from .base import Emitter
from .graph import GraphEmitter
from .haskell import HaskellEmitter
from .lisp import LispEmitter


class Target(Enum):
    LISP = "Lisp"
    HASKELL = "Haskell"
    GRAPH = "Graph"

    @classmethod
    def from_name(cls, name: str) -> "Target":
        """Target for a command-line selector ("Lisp", "Haskell", "Graph")."""
        for target in cls:
            if target.value == name:
                return target
        raise ValueError(f"Unrecognized language {name!r} (expected one of "
                         f"{', '.join(t.value for t in cls)}; maybe not capitalized?)")

    @property
    def emitter(self) -> Emitter:
        return _EMITTERS[self]


_EMITTERS: dict[Target, Emitter] = {
    Target.LISP: LispEmitter(),
    Target.HASKELL: HaskellEmitter(),
    Target.GRAPH: GraphEmitter(),
}


def emit(target: Target, graph: CodeGraph, prefix: str = "") -> str:
    return target.emitter.emit(graph, prefix)


def emit_wrapped(target: Target, graph: CodeGraph, name: Optional[str] = None, prefix: str = "") -> str:
    return target.emitter.emit_wrapped(graph, name=name, prefix=prefix)
