from __future__ import annotations

import math

import networkx as nx
import matplotlib.pyplot as plt

from local_flags.algebra.basis import Basis
from local_flags.flags.base import Flag
from local_flags.io.graph6 import flag_to_nx

_PALETTE = ["tab:blue", "tab:orange", "tab:green", "tab:red", "tab:purple", "tab:brown"]
_EDGE_STYLES = ["solid", "dashed", "dotted", "dashdot"]


def _label_index(label) -> int:
    """Small integer summarizing a vertex or edge label, for styling."""
    while isinstance(label, tuple):
        label = label[0]
    return int(label)


def draw_flag(
    flag: Flag,
    ax=None,
    *,
    type_size: int = 0,
    node_size: int = 140,
    edge_width: float = 1.2,
    title: str | None = None,
):
    """
    Draw a flag on a circular layout.

    Vertex colors follow the vertex labels, edge styles follow the edge
    labels, and the first type_size (labelled) vertices are drawn as squares
    with their index.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(3, 3))
    G = flag_to_nx(flag, type_size)
    pos = nx.circular_layout(G)
    ax.set_axis_off()
    if title is not None:
        ax.set_title(title, fontsize=8)

    for shape, labelled in (("o", False), ("s", True)):
        nodes = [v for v, d in G.nodes(data=True) if d["labelled"] == labelled]
        if nodes:
            nx.draw_networkx_nodes(
                G,
                pos=pos,
                ax=ax,
                nodelist=nodes,
                node_shape=shape,
                node_size=node_size,
                node_color=[_PALETTE[_label_index(G.nodes[v]["label"]) % len(_PALETTE)] for v in nodes],
            )
    for u, v, d in G.edges(data=True):
        style = _EDGE_STYLES[(_label_index(d["label"]) - 1) % len(_EDGE_STYLES)]
        nx.draw_networkx_edges(G, pos=pos, ax=ax, edgelist=[(u, v)], width=edge_width, style=style)
    if type_size:
        nx.draw_networkx_labels(G, pos=pos, ax=ax, labels={v: str(v) for v in range(type_size)}, font_size=7)
    return ax


def draw_basis(basis: Basis, *, cols: int = 6, save_path: str | None = None):
    """
    Draw every flag of a basis in a grid, titled by its index.

    If save_path is set, saves a PNG there and closes the figure.
    """
    flags = basis.get()
    rows = max(1, math.ceil(len(flags) / cols))
    fig, axes = plt.subplots(rows, cols, figsize=(2 * cols, 2 * rows), squeeze=False)
    for ax in axes.flat:
        ax.set_axis_off()
    for i, (ax, g) in enumerate(zip(axes.flat, flags)):
        draw_flag(g, ax, type_size=basis.t.size, title=str(i))
    fig.suptitle(basis.print_concise())
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    return fig
