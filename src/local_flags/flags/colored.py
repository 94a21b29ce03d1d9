from __future__ import annotations

from functools import lru_cache
from typing import Hashable, Iterator, Sequence

from local_flags.degree import Degree
from local_flags.flags.base import Flag


class Colored(Degree, Flag):
    """
    A flag of *content_cls* with its vertices colored 0..colors-1.

    Use Colored.of(content_cls, K) to get the class.  Instances expose the
    underlying flag as `content` and the coloring as `color`.
    """

    content_cls: type = Flag
    colors = 2
    name = "Colored"

    def __init__(self, content: Flag, color: Sequence[int]) -> None:
        if type(content) is not self.content_cls:
            raise TypeError(f"expected a {self.content_cls.name}, got {type(content).__name__}")
        if len(color) != content.size:
            raise ValueError(f"{len(color)} colors for a flag on {content.size} vertices")
        if any(not 0 <= c < self.colors for c in color):
            raise ValueError(f"vertex colors must lie in 0..{self.colors - 1}: {list(color)}")
        self.content = content
        self.color = tuple(color)
        self.size = content.size

    @classmethod
    def of(cls, content_cls: type, colors: int) -> type:
        return _colored_class(content_cls, colors)

    @classmethod
    def empty(cls) -> "Colored":
        return cls(cls.content_cls.empty(), ())

    def edge(self, u: int, v: int):
        return self.content.edge(u, v)

    def is_edge(self, u: int, v: int) -> bool:
        return self.content.is_edge(u, v)

    def vertex_label(self, v: int) -> Hashable:
        return (self.color[v], self.content.vertex_label(v))

    def edge_label(self, u: int, v: int) -> Hashable:
        return self.content.edge_label(u, v)

    def induce(self, vertices: Sequence[int]) -> "Colored":
        return type(self)(self.content.induce(vertices), [self.color[v] for v in vertices])

    def extensions(self) -> Iterator["Colored"]:
        for g in self.content.extensions():
            for c in range(self.colors):
                yield type(self)(g, self.color + (c,))

    def print_concise(self) -> str:
        return f"{self.content.print_concise()}|{''.join(str(c) for c in self.color)}"


@lru_cache(maxsize=None)
def _colored_class(content_cls: type, colors: int) -> type:
    if colors < 1:
        raise ValueError("a vertex coloring needs at least one color")
    name = f"Colored<{content_cls.name}, {colors}>"
    return type(
        f"Colored{content_cls.__name__}{colors}",
        (Colored,),
        {"content_cls": content_cls, "colors": colors, "name": name},
    )
