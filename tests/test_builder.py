# python -m pytest -q tests/test_builder.py
"""
Unit tests for random level-graph construction.
"""
import pytest
from levelgraphs.core.builder import build_graph, MissingLevelWeightError
from levelgraphs.core.rng import make_rng
from levelgraphs.core.sampling import example_weight_table
from levelgraphs.core.types import Role

def full_table(n):
    return {(a, b): 1.0 for a in range(1, n + 1) for b in range(a + 1, n + 1)}

# 1) Nodes are laid out level by level with dense ids
def test_nodes_per_level():
    graph = build_graph(make_rng(0), example_weight_table(3), [2, 1, 2])
    assert graph.levels == 3
    assert [n.level for n in graph.nodes] == [1, 1, 2, 3, 3]
    assert [n.id for n in graph.nodes] == [0, 1, 2, 3, 4]
    assert all(n.role is Role.COMPUTE for n in graph.nodes)

# 2) Every edge goes upward
def test_edges_go_up_a_level():
    for seed in range(20):
        graph = build_graph(make_rng(seed), example_weight_table(8), [3, 4, 2, 6, 1, 3, 2, 5])
        for u, v in graph.edges:
            assert graph.node(u).level < graph.node(v).level

# 3) Weight 1.0 joins every cross-level pair
def test_full_weights_give_all_edges():
    graph = build_graph(make_rng(5), full_table(3), [2, 1, 2])
    assert len(graph.edges) == 2 * 1 + 2 * 2 + 1 * 2

def test_zero_weights_give_no_edges():
    table = {pair: 0.0 for pair in full_table(4)}
    graph = build_graph(make_rng(5), table, [3, 3, 3, 3])
    assert graph.edges == ()

# 4) Missing level pair is a configuration defect
def test_missing_weight_raises():
    table = example_weight_table(3)
    del table[(1, 3)]
    with pytest.raises(MissingLevelWeightError):
        build_graph(make_rng(0), table, [1, 1, 1])

def test_table_too_small_raises():
    with pytest.raises(MissingLevelWeightError):
        build_graph(make_rng(0), example_weight_table(2), [1, 1, 1])

# 5) Empty request, empty graph
def test_empty_graph():
    graph = build_graph(make_rng(0), {}, [])
    assert len(graph) == 0
    assert graph.edges == ()
    assert graph.levels == 0

# 6) Reproducible
def test_build_is_reproducible():
    table = example_weight_table(5)
    g1 = build_graph(make_rng(99), table, [2, 3, 1, 4, 2])
    g2 = build_graph(make_rng(99), table, [2, 3, 1, 4, 2])
    assert g1 == g2
