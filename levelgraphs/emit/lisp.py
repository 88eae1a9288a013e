"""Lisp-like (Clojure flavored) emitter: one nested `let` per level."""
from __future__ import annotations
from typing import Optional

from ..core.types import CodeGraph, Node, Role
from .base import Emitter, input_values, selector_source, standalone_nodes, terminal_values


class LispEmitter(Emitter):
    selector = "Lisp"
    default_name = "benchmark"

    def bound_name(self, node_id: int, prefix: str = "") -> str:
        return f"{prefix}n{node_id}"

    def unit_name(self, index: int) -> str:
        return f"test-{index}"

    def unit_prefix(self, index: int) -> str:
        return f"u{index}-"

    def _call(self, head: str, node_id: int, args: list[str]) -> str:
        return "(" + " ".join([head, str(node_id)] + args) + ")"

    def expression(self, graph: CodeGraph, node: Node, prefix: str = "") -> str:
        """S-expression of a node; a conditional holds its targets' work."""
        args = [self.bound_name(v, prefix) for v in input_values(graph, node)]
        if node.role is Role.SOURCE:
            return f"(get-data {node.id})"
        if node.role is Role.SINK:
            return self._call("sink-data", node.id, args)
        if node.role is Role.CONDITIONAL:
            then_id, else_id = node.branches
            sel = selector_source(graph, node)
            cond = self._call("cond?", node.id, [self.bound_name(sel, prefix) if sel is not None else "nil"])
            then_arm = self.expression(graph, graph.node(then_id), prefix)
            else_arm = self.expression(graph, graph.node(else_id), prefix)
            return f"(if {cond} {then_arm} {else_arm})"
        return self._call("compute", node.id, args)

    def binding(self, graph: CodeGraph, node: Node, prefix: str = "") -> str:
        """`name expr` pair of a let vector; sinks bind to `_`."""
        name = "_" if node.role is Role.SINK else self.bound_name(node.id, prefix)
        return f"{name} {self.expression(graph, node, prefix)}"

    def emit(self, graph: CodeGraph, prefix: str = "") -> str:
        standalone = standalone_nodes(graph)
        levels = sorted({n.level for n in standalone})
        lines: list[str] = []
        for depth, level in enumerate(levels):
            indent = "  " * depth
            bindings = [self.binding(graph, n, prefix) for n in standalone if n.level == level]
            bindings[-1] += "]"
            lines.append(f"{indent}(let [{bindings[0]}")
            lines += [f"{indent}      {b}" for b in bindings[1:]]
        results = [self.bound_name(n.id, prefix) for n in terminal_values(graph)]
        collect = "(" + " ".join(["collect"] + results) + ")"
        lines.append("  " * len(levels) + collect + ")" * len(levels))
        return "\n".join(lines)

    def emit_wrapped(self, graph: CodeGraph, name: Optional[str] = None, prefix: str = "") -> str:
        name = name or self.default_name
        body = ["  " + line for line in self.emit(graph, prefix).splitlines()]
        body[-1] += ")"
        return "\n".join([f"(defn {name} []"] + body)
