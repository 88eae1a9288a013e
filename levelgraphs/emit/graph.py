"""
Graph (diagnostic) emitter.

Serializes nodes and edges as DOT-like text, for inspection and for the
round trip through levelgraphs.utils.graph_io.parse_graph_text. Example:

    digraph test_0 {
      levels=2;
      u0_n0 [id=0, level=1, role=source];
      u0_n1 [id=1, level=2, role=compute];
      u0_n0 -> u0_n1;
    }
"""
from __future__ import annotations
from typing import Optional

from ..core.types import CodeGraph, Node
from .base import Emitter


class GraphEmitter(Emitter):
    selector = "Graph"
    default_name = "benchmark"

    def bound_name(self, node_id: int, prefix: str = "") -> str:
        return f"{prefix}n{node_id}"

    def unit_name(self, index: int) -> str:
        return f"test_{index}"

    def unit_prefix(self, index: int) -> str:
        return f"u{index}_"

    def node_line(self, node: Node, prefix: str = "") -> str:
        attrs = f"id={node.id}, level={node.level}, role={node.role.label}"
        if node.branches is not None:
            attrs += f", then={node.branches[0]}, else={node.branches[1]}"
        return f"{self.bound_name(node.id, prefix)} [{attrs}];"

    def emit(self, graph: CodeGraph, prefix: str = "") -> str:
        order = graph.in_order()
        lines = [self.node_line(n, prefix) for n in order]
        for node in order:
            for succ in sorted(graph.successors(node.id), key=lambda s: graph.node(s).sort_key):
                edge = f"{self.bound_name(node.id, prefix)} -> {self.bound_name(succ, prefix)}"
                label = graph.branch_label(node.id, succ)
                lines.append(f"{edge} [branch={label}];" if label else f"{edge};")
        return "\n".join(lines)

    def emit_wrapped(self, graph: CodeGraph, name: Optional[str] = None, prefix: str = "") -> str:
        name = name or self.default_name
        body = self.emit(graph, prefix)
        lines = [f"digraph {name} {{", f"  levels={graph.levels};"]
        lines += ["  " + line for line in body.splitlines()]
        lines.append("}")
        return "\n".join(lines)
