"""
Statistics over generated level graphs
"""
import pandas as pd

from levelgraphs.core.types import Role


def role_counts(graph):
    """
    Number of nodes per role.

    Returns:
        dict: {Role: count}, every role present (0 if absent)
    """
    counts = {role: 0 for role in Role}
    for node in graph.nodes:
        counts[node.role] += 1
    return counts


def role_fractions(graphs):
    """
    Observed role fractions over a sequence of graphs, pooled by node.

    Returns:
        dict: {Role: fraction}, all 0.0 when there are no nodes
    """
    totals = {role: 0 for role in Role}
    n = 0
    for graph in graphs:
        for role, count in role_counts(graph).items():
            totals[role] += count
        n += len(graph)
    return {role: (count / n if n else 0.0) for role, count in totals.items()}


def suite_summary(graphs):
    """
    One row per unit: levels, nodes, edges and node count per role.

    Args:
        graphs: sequence of CodeGraph, in suite order

    Returns:
        pd.DataFrame
    """
    rows = []
    for idx, graph in enumerate(graphs):
        row = {"unit": idx, "levels": graph.levels, "nodes": len(graph), "edges": len(graph.edges)}
        row.update({role.label: count for role, count in role_counts(graph).items()})
        rows.append(row)
    columns = ["unit", "levels", "nodes", "edges"] + [role.label for role in Role]
    return pd.DataFrame(rows, columns=columns)
