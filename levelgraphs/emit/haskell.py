"""Haskell-like emitter: one monadic binding per node inside a do block."""
from __future__ import annotations
from typing import Optional

from ..core.types import CodeGraph, Node, Role
from .base import Emitter, input_values, selector_source, standalone_nodes, terminal_values


class HaskellEmitter(Emitter):
    selector = "Haskell"
    default_name = "benchmark"

    def bound_name(self, node_id: int, prefix: str = "") -> str:
        return f"{prefix}n{node_id}"

    def unit_name(self, index: int) -> str:
        return f"test{index}"

    def unit_prefix(self, index: int) -> str:
        return f"u{index}"

    def _args(self, graph: CodeGraph, node: Node, prefix: str) -> str:
        names = [self.bound_name(v, prefix) for v in input_values(graph, node)]
        return "[" + ", ".join(names) + "]"

    def _arm(self, graph: CodeGraph, node_id: int, prefix: str) -> str:
        target = graph.node(node_id)
        expr = self.expression(graph, target, prefix)
        return f"({expr})" if target.role is Role.CONDITIONAL else expr

    def expression(self, graph: CodeGraph, node: Node, prefix: str = "") -> str:
        """Right-hand side of a node; a conditional holds its targets' work."""
        if node.role is Role.SOURCE:
            return f"getData {node.id}"
        if node.role is Role.SINK:
            return f"sinkData {node.id} {self._args(graph, node, prefix)}"
        if node.role is Role.CONDITIONAL:
            then_id, else_id = node.branches
            sel = selector_source(graph, node)
            cond = f"cond {node.id} {self.bound_name(sel, prefix) if sel is not None else '()'}"
            return (f"if {cond} then {self._arm(graph, then_id, prefix)}"
                    f" else {self._arm(graph, else_id, prefix)}")
        return f"compute {node.id} {self._args(graph, node, prefix)}"

    def statement(self, graph: CodeGraph, node: Node, prefix: str = "") -> str:
        if node.role is Role.SINK:
            return self.expression(graph, node, prefix)
        return f"{self.bound_name(node.id, prefix)} <- {self.expression(graph, node, prefix)}"

    def emit(self, graph: CodeGraph, prefix: str = "") -> str:
        return "\n".join(self.statement(graph, n, prefix) for n in standalone_nodes(graph))

    def emit_wrapped(self, graph: CodeGraph, name: Optional[str] = None, prefix: str = "") -> str:
        name = name or self.default_name
        results = ", ".join(self.bound_name(n.id, prefix) for n in terminal_values(graph))
        lines = [f"{name} :: GenHaxl u Int", f"{name} = do"]
        lines += ["  " + s for s in self.emit(graph, prefix).splitlines()]
        lines.append(f"  return (collect [{results}])")
        return "\n".join(lines)
