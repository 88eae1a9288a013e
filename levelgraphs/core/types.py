"""
Types for level graphs: node roles, nodes and the immutable CodeGraph.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum, auto
from functools import cached_property
from typing import Iterable, Optional


class Role(Enum):
    """
    Role of a node in the generated benchmark code:
    - SOURCE → nullary data fetch, no incoming edges
    - SINK → terminal statement, no outgoing edges
    - COMPUTE → combines the values of all its predecessors
    - CONDITIONAL → branches to exactly two successors (then/else), each
      fed by the conditional alone
    """

    SOURCE = auto()
    SINK = auto()
    COMPUTE = auto()
    CONDITIONAL = auto()

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> "Role":
        try:
            return cls[label.upper()]
        except KeyError:
            raise ValueError(f"Unknown node role: {label!r}") from None


@dataclass(frozen=True)
class Node:
    id: int
    level: int
    role: Role = Role.COMPUTE
    branches: Optional[tuple[int, int]] = None  # (then, else) target ids

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.level, self.id)


@dataclass(frozen=True)
class CodeGraph:
    """Level graph with role and branch annotations.

    `nodes` is indexed by id (nodes[i].id == i) and `edges` is a sorted tuple
    of (from, to) pairs. Transforms never mutate a graph, they build a new one
    with `evolve()`.
    """
    nodes: tuple[Node, ...]
    edges: tuple[tuple[int, int], ...]
    levels: int

    @classmethod
    def from_parts(cls, nodes: Iterable[Node], edges: Iterable[tuple[int, int]], levels: int) -> "CodeGraph":
        ordered = tuple(sorted(nodes, key=lambda n: n.id))
        for idx, node in enumerate(ordered):
            if node.id != idx:
                raise ValueError(f"Node ids must be dense from 0, got {node.id} at position {idx}")
        return cls(nodes=ordered, edges=tuple(sorted(set(edges))), levels=levels)

    def evolve(self, nodes: Optional[Iterable[Node]] = None,
               edges: Optional[Iterable[tuple[int, int]]] = None) -> "CodeGraph":
        """Return a copy with nodes and/or edges replaced."""
        return replace(
            self,
            nodes=self.nodes if nodes is None else tuple(sorted(nodes, key=lambda n: n.id)),
            edges=self.edges if edges is None else tuple(sorted(set(edges))),
        )

    @cached_property
    def _succs(self) -> dict[int, tuple[int, ...]]:
        succs: dict[int, list[int]] = {n.id: [] for n in self.nodes}
        for u, v in self.edges:
            succs[u].append(v)
        return {k: tuple(sorted(v)) for k, v in succs.items()}

    @cached_property
    def _preds(self) -> dict[int, tuple[int, ...]]:
        preds: dict[int, list[int]] = {n.id: [] for n in self.nodes}
        for u, v in self.edges:
            preds[v].append(u)
        return {k: tuple(sorted(v)) for k, v in preds.items()}

    @cached_property
    def _owners(self) -> dict[int, int]:
        return {t: n.id for n in self.nodes if n.branches is not None for t in n.branches}

    def branch_owner(self, node_id: int) -> Optional[int]:
        """Conditional that has `node_id` as then/else target, or None."""
        return self._owners.get(node_id)

    def node(self, node_id: int) -> Node:
        return self.nodes[node_id]

    def successors(self, node_id: int) -> tuple[int, ...]:
        return self._succs[node_id]

    def predecessors(self, node_id: int) -> tuple[int, ...]:
        return self._preds[node_id]

    def in_degree(self, node_id: int) -> int:
        return len(self._preds[node_id])

    def out_degree(self, node_id: int) -> int:
        return len(self._succs[node_id])

    def in_order(self) -> list[Node]:
        """Nodes by ascending level, then ascending id (emission order)."""
        return sorted(self.nodes, key=lambda n: n.sort_key)

    def nodes_at_level(self, level: int) -> list[Node]:
        return [n for n in self.in_order() if n.level == level]

    def with_role(self, role: Role) -> list[Node]:
        return [n for n in self.in_order() if n.role is role]

    def branch_label(self, u: int, v: int) -> Optional[str]:
        """'then' / 'else' for the branch edges of a Conditional, else None."""
        branches = self.nodes[u].branches
        if branches is None:
            return None
        if v == branches[0]:
            return "then"
        if v == branches[1]:
            return "else"
        return None

    def __len__(self) -> int:
        return len(self.nodes)
