from __future__ import annotations

from typing import Hashable, Iterator, Sequence

from local_flags.degree import Degree
from local_flags.flags.base import Flag
from local_flags.flags.graph import Graph


class SubClass(Degree, Flag):
    """
    Restriction of *content_cls* to the flags accepted by is_in_subclass().

    Subclasses set content_cls, subclass_name and hereditary, and implement
    is_in_subclass(content).  A hereditary subclass is closed under taking
    induced subflags, which lets flag generation prune at every step; a
    non-hereditary one is only filtered at the requested size.
    """

    content_cls: type = Flag
    subclass_name = "subclass"
    hereditary = False

    def __init__(self, content: Flag) -> None:
        if type(content) is not self.content_cls:
            raise TypeError(f"expected a {self.content_cls.name}, got {type(content).__name__}")
        self.content = content
        self.size = content.size

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls.name = cls.subclass_name

    @classmethod
    def is_in_subclass(cls, flag: Flag) -> bool:
        raise NotImplementedError

    @classmethod
    def is_member(cls, flag: Flag) -> bool:
        return cls.is_in_subclass(flag.content)

    @classmethod
    def empty(cls) -> "SubClass":
        return cls(cls.content_cls.empty())

    def edge(self, u: int, v: int):
        return self.content.edge(u, v)

    def is_edge(self, u: int, v: int) -> bool:
        return self.content.is_edge(u, v)

    def vertex_label(self, v: int) -> Hashable:
        return self.content.vertex_label(v)

    def edge_label(self, u: int, v: int) -> Hashable:
        return self.content.edge_label(u, v)

    def induce(self, vertices: Sequence[int]) -> "SubClass":
        return type(self)(self.content.induce(vertices))

    def extensions(self) -> Iterator["SubClass"]:
        for g in self.content.extensions():
            yield type(self)(g)

    def print_concise(self) -> str:
        return self.content.print_concise()


class Connected(SubClass):
    """Connected graphs."""

    content_cls = Graph
    subclass_name = "Connected graphs"
    hereditary = False

    @classmethod
    def is_in_subclass(cls, flag: Graph) -> bool:
        return flag.is_connected()
