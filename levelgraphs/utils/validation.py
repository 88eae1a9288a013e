import logging
import networkx as nx

from levelgraphs.core.types import Role
from levelgraphs.utils.graph_io import to_digraph

logger = logging.getLogger(__name__)


def invariant_violations(graph):
    """
    Check a CodeGraph against the level-graph invariants.

    - every level in [1, levels]
    - every edge goes from a lower to a higher level (hence acyclic)
    - SOURCE: in-degree 0, SINK: out-degree 0, COMPUTE: in-degree >= 1
    - CONDITIONAL: out-degree 2, branches are exactly its two successors,
      each fed by the conditional alone

    Returns:
        list[str]: one message per violation (empty when valid)
    """
    violations = []
    for node in graph.nodes:
        if not 1 <= node.level <= graph.levels:
            violations.append(f"node {node.id}: level {node.level} outside [1, {graph.levels}]")
    for u, v in graph.edges:
        if graph.node(u).level >= graph.node(v).level:
            violations.append(f"edge {u}->{v}: level {graph.node(u).level} >= {graph.node(v).level}")

    for node in graph.nodes:
        indeg, outdeg = graph.in_degree(node.id), graph.out_degree(node.id)
        if node.role is Role.SOURCE and indeg:
            violations.append(f"source {node.id} has {indeg} inputs")
        elif node.role is Role.SINK and outdeg:
            violations.append(f"sink {node.id} has {outdeg} outputs")
        elif node.role is Role.COMPUTE and not indeg:
            violations.append(f"compute {node.id} has no input")
        elif node.role is Role.CONDITIONAL:
            branches = node.branches or ()
            if outdeg != 2 or len(set(branches)) != 2 or set(branches) != set(graph.successors(node.id)):
                violations.append(f"conditional {node.id}: branches {branches}, successors {graph.successors(node.id)}")
            for target in sorted(set(branches) & set(graph.successors(node.id))):
                if graph.predecessors(target) != (node.id,):
                    violations.append(f"branch {target} of conditional {node.id} has other inputs "
                                      f"{graph.predecessors(target)}")
        if node.role is not Role.CONDITIONAL and node.branches is not None:
            violations.append(f"{node.role.label} {node.id} carries branches")

    if not nx.is_directed_acyclic_graph(to_digraph(graph)):
        violations.append("graph has a cycle")

    for msg in violations:
        logger.warning(f"[CHECK] Invariant violated: {msg}")
    return violations
