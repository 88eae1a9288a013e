"""
Shared contract of the CodeGraph → text emitters.

Every emitter walks the graph in emission order (ascending level, then id),
so each expression only refers to names bound before it. The then/else
targets of a conditional are rendered inside its arms, not on their own.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

from ..core.types import CodeGraph, Node, Role


class Emitter(ABC):
    """Renders a CodeGraph in one target representation."""

    #: Selector used on the command line ("Lisp", "Haskell", "Graph")
    selector: str = ""
    #: Wrapped-unit name used when none is given
    default_name: str = "benchmark"

    @abstractmethod
    def bound_name(self, node_id: int, prefix: str = "") -> str:
        """Name bound to the value of a node."""

    @abstractmethod
    def unit_name(self, index: int) -> str:
        """Name of the index-th unit of a suite."""

    @abstractmethod
    def unit_prefix(self, index: int) -> str:
        """Identifier prefix of the index-th unit of a suite."""

    @abstractmethod
    def emit(self, graph: CodeGraph, prefix: str = "") -> str:
        """Body text for the graph, not necessarily standalone."""

    @abstractmethod
    def emit_wrapped(self, graph: CodeGraph, name: Optional[str] = None, prefix: str = "") -> str:
        """Standalone unit: body plus the target's boilerplate."""


def value_source(graph: CodeGraph, node_id: int) -> int:
    """Node whose bound name carries the value of `node_id`.

    A branch target is rendered inside its conditional, so its value is read
    through the outermost enclosing conditional.
    """
    owner = graph.branch_owner(node_id)
    while owner is not None:
        node_id = owner
        owner = graph.branch_owner(node_id)
    return node_id


def standalone_nodes(graph: CodeGraph) -> list[Node]:
    """Nodes emitted as their own statement, in emission order."""
    return [n for n in graph.in_order() if graph.branch_owner(n.id) is None]


def input_values(graph: CodeGraph, node: Node) -> list[int]:
    """Bound nodes a node reads, in emission order.

    Branch targets take the inputs of their conditional.
    """
    owner = graph.branch_owner(node.id)
    if owner is not None:
        return input_values(graph, graph.node(owner))
    sources = {value_source(graph, p) for p in graph.predecessors(node.id)}
    return sorted(sources, key=lambda s: graph.node(s).sort_key)


def selector_source(graph: CodeGraph, node: Node) -> Optional[int]:
    """Value that drives a conditional, None if it has no input."""
    inputs = input_values(graph, node)
    return inputs[0] if inputs else None


def terminal_values(graph: CodeGraph) -> list[Node]:
    """Bound nodes nothing consumes; a wrapped unit returns these."""
    consumed = {v for n in standalone_nodes(graph) for v in input_values(graph, n)}
    return [n for n in standalone_nodes(graph) if n.role is not Role.SINK and n.id not in consumed]
