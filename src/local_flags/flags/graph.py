from __future__ import annotations

from functools import lru_cache
from itertools import combinations, product
from typing import Iterable, Iterator, Sequence

from local_flags.degree import Degree
from local_flags.flags.base import Flag


class Graph(Degree, Flag):
    """Simple graph on {0..size-1}."""

    name = "Graph"

    def __init__(self, size: int, edges: Iterable[tuple[int, int]] = ()) -> None:
        self.size = size
        adj = [0] * size
        for u, v in edges:
            if u == v or not (0 <= u < size and 0 <= v < size):
                raise ValueError(f"invalid edge ({u}, {v}) for a graph on {size} vertices")
            adj[u] |= 1 << v
            adj[v] |= 1 << u
        self._adj = tuple(adj)

    @classmethod
    def empty(cls, size: int = 0) -> "Graph":
        return cls(size)

    def edge(self, u: int, v: int) -> bool:
        return bool(self._adj[u] >> v & 1)

    def edges(self) -> list[tuple[int, int]]:
        return [(u, v) for u, v in combinations(range(self.size), 2) if self.edge(u, v)]

    def is_edge(self, u: int, v: int) -> bool:
        return self.edge(u, v)

    def edge_label(self, u: int, v: int) -> bool:
        return self.edge(u, v)

    def induce(self, vertices: Sequence[int]) -> "Graph":
        pos = {w: i for i, w in enumerate(vertices)}
        return Graph(len(vertices), ((pos[u], pos[v]) for u, v in self.edges() if u in pos and v in pos))

    def extensions(self) -> Iterator["Graph"]:
        n = self.size
        base = self.edges()
        for mask in range(1 << n):
            yield Graph(n + 1, base + [(u, n) for u in range(n) if mask >> u & 1])


class CGraph(Degree, Flag):
    """
    Complete graph with edges colored 0..colors-1, color 0 meaning no edge.

    Use CGraph.with_colors(C) to get the class of C-edge-colored graphs.
    """

    colors = 2
    name = "CGraph"

    def __init__(self, size: int, edges: Iterable[tuple[tuple[int, int], int]] = ()) -> None:
        self.size = size
        colors: dict[tuple[int, int], int] = {}
        for (u, v), c in edges:
            if u == v or not (0 <= u < size and 0 <= v < size):
                raise ValueError(f"invalid edge ({u}, {v}) for a graph on {size} vertices")
            if not 0 <= c < self.colors:
                raise ValueError(f"edge color {c} out of range 0..{self.colors - 1}")
            if c:
                colors[(min(u, v), max(u, v))] = c
        self._colors = colors

    @classmethod
    def with_colors(cls, colors: int) -> type:
        return _cgraph_class(colors)

    @classmethod
    def empty(cls, size: int = 0) -> "CGraph":
        return cls(size)

    def edge(self, u: int, v: int) -> int:
        return self._colors.get((min(u, v), max(u, v)), 0)

    def is_edge(self, u: int, v: int) -> bool:
        return self.edge(u, v) != 0

    def edge_label(self, u: int, v: int) -> int:
        return self.edge(u, v)

    def induce(self, vertices: Sequence[int]) -> "CGraph":
        pos = {w: i for i, w in enumerate(vertices)}
        return type(self)(
            len(vertices),
            (((pos[u], pos[v]), c) for (u, v), c in self._colors.items() if u in pos and v in pos),
        )

    def extensions(self) -> Iterator["CGraph"]:
        n = self.size
        base = list(self._colors.items())
        for cols in product(range(self.colors), repeat=n):
            yield type(self)(n + 1, base + [((u, n), c) for u, c in enumerate(cols) if c])


@lru_cache(maxsize=None)
def _cgraph_class(colors: int) -> type:
    if colors < 2:
        raise ValueError("a colored graph needs at least the colors 0 (no edge) and 1")
    return type(f"CGraph{colors}", (CGraph,), {"colors": colors, "name": f"CGraph<{colors}>"})
