"""
Conditional injection: turn some COMPUTE nodes into two-way branches.

A branch target is fed by its conditional alone, so the emitters can render
the target's work inside the matching arm.
"""
from __future__ import annotations
import logging
import numpy as np

from .rng import bernoulli
from .roles import nearest_anchor
from .types import CodeGraph, Node, Role

logger = logging.getLogger(__name__)


def _ancestors(node_id: int, preds: dict[int, set[int]]) -> set[int]:
    seen: set[int] = set()
    stack = list(preds[node_id])
    while stack:
        n = stack.pop()
        if n not in seen:
            seen.add(n)
            stack.extend(preds[n])
    return seen


def inject_conditionals(rng: np.random.Generator, if_percentage: float, graph: CodeGraph) -> CodeGraph:
    """Promote COMPUTE nodes with out-degree >= 2 to CONDITIONAL.

    Nodes are visited in emission order and each node that still has at
    least two successors draws one Bernoulli(if_percentage) trial. On success
    the two successors with the lowest (level, id) become the then/else
    branches and:
      - the remaining outgoing edges are dropped; a successor left without
        any input is fed from the closest non-conditional ancestor instead
      - every other edge into the two branches is dropped, which can leave a
        later node with fewer than two successors and so ineligible

    Returns:
        New CodeGraph; `graph` is left untouched.
    """
    nodes = {n.id: n for n in graph.nodes}
    edges = set(graph.edges)
    succs = {n.id: set(graph.successors(n.id)) for n in graph.nodes}
    preds = {n.id: set(graph.predecessors(n.id)) for n in graph.nodes}

    def drop(u: int, v: int) -> None:
        edges.discard((u, v))
        succs[u].discard(v)
        preds[v].discard(u)

    converted, rerouted, detached = 0, 0, 0
    for node in graph.in_order():
        if node.role is not Role.COMPUTE or len(succs[node.id]) < 2:
            continue
        if not bernoulli(rng, if_percentage):
            continue

        targets = sorted(succs[node.id], key=lambda t: nodes[t].sort_key)
        then_id, else_id = targets[0], targets[1]
        nodes[node.id] = Node(id=node.id, level=node.level, role=Role.CONDITIONAL,
                              branches=(then_id, else_id))
        converted += 1

        for t in (then_id, else_id):
            for p in list(preds[t] - {node.id}):
                drop(p, t)
                detached += 1

        for w in targets[2:]:
            drop(node.id, w)
            if preds[w]:
                continue
            feeders = [nodes[a] for a in _ancestors(node.id, preds)
                       if nodes[a].role is not Role.CONDITIONAL]
            anchor = nearest_anchor(feeders, nodes[w].level)
            if anchor is None:
                if nodes[w].role is Role.COMPUTE:
                    nodes[w] = Node(id=w, level=nodes[w].level, role=Role.SOURCE)
                continue
            edges.add((anchor.id, w))
            succs[anchor.id].add(w)
            preds[w].add(anchor.id)
            rerouted += 1

    logger.debug(f"[COND] {converted} conditionals (p={if_percentage}), {rerouted} rerouted inputs, "
                 f"{detached} inputs detached from branches")
    return graph.evolve(nodes=nodes.values(), edges=edges)
