"""
Role assignment for level graphs.

Roles are drawn per node, in emission order, then the edge set is repaired
so that:
  - a SOURCE has no incoming edge
  - a SINK has no outgoing edge
  - a COMPUTE has at least one incoming edge

A node can only be COMPUTE when some non-sink node sits on a lower level
(never on level 1). Where that is impossible the compute weight is spread
over SOURCE and SINK in the requested ratio, and later nodes carry the
compute share that was not placed yet, so the pooled fractions still match
the request. A COMPUTE left without inputs after the repair is attached to
the closest lower-level non-sink node (highest level first, then lowest id).
The repair uses no draws.
"""
from __future__ import annotations
import logging
from typing import Iterable, Optional, Sequence
import numpy as np

from .rng import draw_categorical
from .types import CodeGraph, Node, Role

logger = logging.getLogger(__name__)

ROLE_ORDER = (Role.SOURCE, Role.SINK, Role.COMPUTE)


def role_weights(type_weights: Sequence[float]) -> tuple[float, float, float]:
    """(source, sink) fractions → (source, sink, compute) weights."""
    source, sink = float(type_weights[0]), float(type_weights[1])
    return source, sink, max(0.0, 1.0 - source - sink)


def compensated_weights(requested: tuple[float, float, float], compute_left: float,
                        remaining: int, can_compute: bool) -> tuple[float, float, float]:
    """Weights for the next draw.

    Args:
        requested: (source, sink, compute) weights from role_weights.
        compute_left: Compute nodes still owed to reach the requested share.
        remaining: Nodes left to draw, this one included.
        can_compute: False when no non-sink node exists on a lower level.
    """
    source, sink, _ = requested
    compute = min(1.0, max(0.0, compute_left / remaining)) if can_compute else 0.0
    open_share = source + sink
    if open_share <= 0.0:
        return 1.0 - compute, 0.0, compute
    scale = (1.0 - compute) / open_share
    return source * scale, sink * scale, compute


def nearest_anchor(candidates: Iterable[Node], below_level: int) -> Optional[Node]:
    """Closest candidate strictly below `below_level`, or None."""
    eligible = [n for n in candidates if n.level < below_level]
    if not eligible:
        return None
    return max(eligible, key=lambda n: (n.level, -n.id))


def assign_roles(rng: np.random.Generator, graph: CodeGraph, type_weights: Sequence[float]) -> CodeGraph:
    """Draw a role for every node and repair edges to match the roles.

    Args:
        rng: Random stream of the run.
        graph: Graph from build_graph (roles are overwritten).
        type_weights: (source_fraction, sink_fraction); the rest is compute.

    Returns:
        New role-consistent CodeGraph.
    """
    requested = role_weights(type_weights)
    ordered = graph.in_order()
    compute_left = requested[2] * len(ordered)

    roles: dict[int, Role] = {}
    feeders: list[Node] = []
    deferred = 0
    for index, node in enumerate(ordered):
        can_compute = nearest_anchor(feeders, node.level) is not None
        if not can_compute:
            deferred += 1
        weights = compensated_weights(requested, compute_left, len(ordered) - index, can_compute)
        role = draw_categorical(rng, ROLE_ORDER, weights)
        roles[node.id] = role
        if role is Role.COMPUTE:
            compute_left -= 1.0
        if role is not Role.SINK:
            feeders.append(node)

    edges = {
        (u, v) for u, v in graph.edges
        if roles[v] is not Role.SOURCE and roles[u] is not Role.SINK
    }
    dropped = len(graph.edges) - len(edges)

    has_input = {v for _, v in edges}
    nodes = [Node(id=n.id, level=n.level, role=roles[n.id]) for n in ordered]
    attached = 0
    for node in nodes:
        if node.role is Role.COMPUTE and node.id not in has_input:
            anchor = nearest_anchor((n for n in nodes if n.role is not Role.SINK), node.level)
            edges.add((anchor.id, node.id))
            has_input.add(node.id)
            attached += 1

    logger.debug(f"[ROLES] {deferred} nodes without a possible input, dropped {dropped} edges, "
                 f"attached {attached} orphan computes")
    return graph.evolve(nodes=nodes, edges=edges)
