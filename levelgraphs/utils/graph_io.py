import re
import networkx as nx

from levelgraphs.core.types import CodeGraph, Node, Role


class GraphTextError(ValueError):
    """Raised when diagnostic graph text cannot be parsed."""
    pass


_HEADER = re.compile(r"^digraph\s+([A-Za-z0-9_\-]+)\s*\{$")
_LEVELS = re.compile(r"^levels=(\d+);$")
_NODE = re.compile(r"^([A-Za-z0-9_\-]+)\s*\[([^\]]*)\];$")
_EDGE = re.compile(r"^([A-Za-z0-9_\-]+)\s*->\s*([A-Za-z0-9_\-]+)(?:\s*\[branch=(then|else)\])?;$")


def example_graph():
    """
    Small hand-made CodeGraph for tests and demos.

    Levels 1..4: two sources feed a conditional that branches to a compute
    and a sink; a level-4 compute reads the branch result and a source.

    Returns:
        CodeGraph
    """
    nodes = [
        Node(0, 1, Role.SOURCE),
        Node(1, 1, Role.SOURCE),
        Node(2, 2, Role.CONDITIONAL, branches=(3, 4)),
        Node(3, 3, Role.COMPUTE),
        Node(4, 3, Role.SINK),
        Node(5, 4, Role.COMPUTE),
    ]
    edges = [(0, 2), (1, 2), (2, 3), (2, 4), (1, 5), (3, 5)]
    return CodeGraph.from_parts(nodes, edges, levels=4)


def to_digraph(graph):
    """
    Convert a CodeGraph to a NetworkX DiGraph.

    Node attributes: level, role (label string), branches.
    Edge attribute: branch ('then' / 'else' / None).

    Returns:
        DiGraph: NetworkX graph
    """
    G = nx.DiGraph()
    for node in graph.nodes:
        G.add_node(node.id, level=node.level, role=node.role.label, branches=node.branches)
    for u, v in graph.edges:
        G.add_edge(u, v, branch=graph.branch_label(u, v))
    return G


def from_digraph(G, levels=None):
    """
    Build a CodeGraph back from a DiGraph produced by to_digraph().

    Args:
        G: DiGraph with integer nodes and 'level' / 'role' attributes
        levels (int): level count; defaults to the highest node level

    Returns:
        CodeGraph
    """
    nodes = [
        Node(n, int(d["level"]), Role.from_label(d["role"]), d.get("branches"))
        for n, d in G.nodes(data=True)
    ]
    if levels is None:
        levels = max((n.level for n in nodes), default=0)
    return CodeGraph.from_parts(nodes, G.edges(), levels)


def _parse_attrs(text, lineno):
    attrs = {}
    for part in text.split(","):
        if "=" not in part:
            raise GraphTextError(f"line {lineno}: bad attribute {part.strip()!r}")
        key, value = part.split("=", 1)
        attrs[key.strip()] = value.strip()
    return attrs


def _finish(name, levels, nodes, names, edges):
    digraph = nx.DiGraph()
    for node_id, attrs in nodes.items():
        branches = None
        if "then" in attrs or "else" in attrs:
            branches = (int(attrs["then"]), int(attrs["else"]))
        digraph.add_node(node_id, level=int(attrs["level"]), role=attrs["role"], branches=branches)
    for src, dst, lineno in edges:
        if src not in names or dst not in names:
            raise GraphTextError(f"line {lineno}: edge references undeclared node")
        digraph.add_edge(names[src], names[dst])
    return name, from_digraph(digraph, levels)


def parse_graph_text(text):
    """
    Parse the output of the Graph emitter back into CodeGraphs.

    Accepts a whole suite (several `digraph NAME { ... }` units) as well as a
    bare body from emit(), which is returned under the name "".

    Expected format:
        digraph test_0 {
          levels=2;
          u0_n0 [id=0, level=1, role=source];
          u0_n0 -> u0_n1;
        }

    Returns:
        dict: {unit name: CodeGraph}, in text order

    Raises:
        GraphTextError: on any line that is not part of the format
    """
    units = {}
    name, levels = "", None
    nodes, names, edges = {}, {}, []
    in_unit = False
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        header = _HEADER.match(line)
        if header:
            if in_unit:
                raise GraphTextError(f"line {lineno}: nested digraph")
            name, levels = header.group(1), None
            nodes, names, edges = {}, {}, []
            in_unit = True
            continue
        if line == "}":
            if not in_unit:
                raise GraphTextError(f"line {lineno}: unmatched '}}'")
            key, graph = _finish(name, levels, nodes, names, edges)
            units[key] = graph
            in_unit = False
            continue
        m = _LEVELS.match(line)
        if m:
            levels = int(m.group(1))
            continue
        m = _EDGE.match(line)
        if m:
            edges.append((m.group(1), m.group(2), lineno))
            continue
        m = _NODE.match(line)
        if m:
            attrs = _parse_attrs(m.group(2), lineno)
            if not {"id", "level", "role"} <= attrs.keys():
                raise GraphTextError(f"line {lineno}: node needs id, level and role")
            node_id = int(attrs["id"])
            nodes[node_id] = attrs
            names[m.group(1)] = node_id
            continue
        raise GraphTextError(f"line {lineno}: cannot parse {line!r}")

    if in_unit:
        raise GraphTextError(f"unterminated digraph {name!r}")
    if nodes or edges:
        key, graph = _finish("", levels, nodes, names, edges)
        units[key] = graph
    return units
