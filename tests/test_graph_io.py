# python -m pytest -q tests/test_graph_io.py
"""
Unit tests for NetworkX conversion, graph-text parsing, invariant checks and metrics.
"""
import networkx as nx
import pytest
from levelgraphs.core.types import CodeGraph, Node, Role
from levelgraphs.emit import GraphEmitter
from levelgraphs.utils.graph_io import (GraphTextError, example_graph, from_digraph,
                                        parse_graph_text, to_digraph)
from levelgraphs.utils.metrics import role_counts, role_fractions, suite_summary
from levelgraphs.utils.validation import invariant_violations

def same_roles(a, b):
    return a["role"] == b["role"] and a["level"] == b["level"]

# 1) NetworkX round trip
def test_digraph_round_trip():
    graph = example_graph()
    G = to_digraph(graph)
    assert nx.is_directed_acyclic_graph(G)
    assert G.edges[2, 3]["branch"] == "then"
    assert G.edges[2, 4]["branch"] == "else"
    assert G.edges[0, 2]["branch"] is None
    assert from_digraph(G, levels=4) == graph

# 2) Parsed text is isomorphic to the emitted graph
def test_parsed_text_is_isomorphic():
    graph = example_graph()
    parsed = parse_graph_text(GraphEmitter().emit_wrapped(graph, name="g", prefix="u7_"))["g"]
    assert nx.is_isomorphic(to_digraph(parsed), to_digraph(graph),
                            node_match=same_roles,
                            edge_match=lambda a, b: a["branch"] == b["branch"])
    assert set(parsed.edges) == set(graph.edges)

# 3) Malformed text
def test_parse_rejects_garbage():
    with pytest.raises(GraphTextError):
        parse_graph_text("digraph g {\n  not a node\n}")

def test_parse_rejects_unterminated_unit():
    with pytest.raises(GraphTextError):
        parse_graph_text("digraph g {\n  levels=1;\n  n0 [id=0, level=1, role=source];")

def test_parse_rejects_unknown_edge_endpoint():
    with pytest.raises(GraphTextError):
        parse_graph_text("n0 [id=0, level=1, role=source];\nn0 -> n9;")

def test_parse_rejects_unknown_role():
    with pytest.raises(ValueError):
        parse_graph_text("n0 [id=0, level=1, role=teapot];")

# 4) Invariant checks
def test_example_graph_is_valid():
    assert invariant_violations(example_graph()) == []

def test_violations_are_reported():
    nodes = [Node(0, 1, Role.COMPUTE), Node(1, 2, Role.SOURCE), Node(2, 2, Role.SINK),
             Node(3, 3, Role.CONDITIONAL, branches=(4, 4)), Node(4, 4, Role.COMPUTE)]
    edges = [(0, 1), (2, 3), (3, 4)]
    violations = invariant_violations(CodeGraph.from_parts(nodes, edges, levels=4))
    text = "\n".join(violations)
    assert "compute 0 has no input" in text
    assert "source 1 has 1 inputs" in text
    assert "sink 2 has 1 outputs" in text
    assert "conditional 3" in text

def test_shared_branch_input_is_reported():
    graph = example_graph()
    violations = invariant_violations(graph.evolve(edges=graph.edges + ((1, 3),)))
    assert any("branch 3 of conditional 2" in v for v in violations)

def test_level_order_violation():
    nodes = [Node(0, 2, Role.SOURCE), Node(1, 1, Role.COMPUTE)]
    violations = invariant_violations(CodeGraph.from_parts(nodes, [(0, 1)], levels=2))
    assert any("edge 0->1" in v for v in violations)

# 5) Metrics
def test_role_counts_and_summary():
    graph = example_graph()
    counts = role_counts(graph)
    assert counts[Role.SOURCE] == 2
    assert counts[Role.CONDITIONAL] == 1
    assert role_fractions([graph])[Role.SINK] == pytest.approx(1 / 6)
    assert role_fractions([]) == {role: 0.0 for role in Role}

    df = suite_summary([graph, graph])
    assert list(df["unit"]) == [0, 1]
    assert list(df.columns) == ["unit", "levels", "nodes", "edges",
                                "source", "sink", "compute", "conditional"]
    assert df.loc[0, "edges"] == 6
