from __future__ import annotations

import networkx as nx

from local_flags.flags.base import Flag


def flag_to_nx(flag: Flag, type_size: int = 0) -> nx.Graph:
    """
    Convert a flag to a NetworkX Graph.

    Nodes carry 'label' (vertex label) and 'labelled' (True for the first
    type_size vertices); an edge is added for every pair with a truthy edge
    label, carrying that label as 'label'.
    """
    G = nx.Graph()
    for v in range(flag.size):
        G.add_node(v, label=flag.vertex_label(v), labelled=v < type_size)
    for u in range(flag.size):
        for v in range(u + 1, flag.size):
            lab = flag.edge_label(u, v)
            if lab:
                G.add_edge(u, v, label=lab)
    return G


def graph_to_g6(flag: Flag) -> str:
    """graph6 string of the adjacency (is_edge) of a flag."""
    G = nx.Graph()
    G.add_nodes_from(range(flag.size))
    G.add_edges_from((u, v) for u in range(flag.size) for v in range(u + 1, flag.size) if flag.is_edge(u, v))
    return nx.to_graph6_bytes(G, header=False).decode("ascii").strip()


def graph_from_g6(g6: str):
    """
    Parse a graph6 string (optional '>>graph6<<' header) into a Graph flag.
    """
    from local_flags.flags.graph import Graph

    s = g6.strip()
    if s.startswith(">>graph6<<"):
        s = s[len(">>graph6<<") :].strip()
    G = nx.from_graph6_bytes(s.encode("ascii"))
    return Graph(G.number_of_nodes(), G.edges())
