from __future__ import annotations

from typing import ClassVar, Hashable, Iterator, Sequence


class Flag:
    """
    A small labelled combinatorial structure on vertices {0..size-1}.

    Subclasses describe their structure through two symmetric queries:
      vertex_label(v)   -> hashable, comparable label of v
      edge_label(u, v)  -> hashable, comparable label of the pair {u, v}

    Everything generic (canonical forms, orbits, bases, products) is written
    against these queries plus induce() and extensions().
    """

    name: ClassVar[str] = "flag"
    hereditary: ClassVar[bool] = True

    size: int

    # ------------------------------------------------------------------
    # Structure queries
    # ------------------------------------------------------------------

    def vertex_label(self, v: int) -> Hashable:
        return 0

    def edge_label(self, u: int, v: int) -> Hashable:
        raise NotImplementedError

    def induce(self, vertices: Sequence[int]) -> "Flag":
        """Subflag on *vertices*; vertex i of the result is vertices[i]."""
        raise NotImplementedError

    def extensions(self) -> Iterator["Flag"]:
        """Every flag obtained by appending one vertex (with index self.size)."""
        raise NotImplementedError

    @classmethod
    def empty(cls) -> "Flag":
        raise NotImplementedError

    @classmethod
    def is_member(cls, flag: "Flag") -> bool:
        return True

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    def key(self) -> tuple:
        cached = self.__dict__.get("_key")
        if cached is not None:
            return cached
        n = self.size
        vl = tuple(self.vertex_label(v) for v in range(n))
        el = tuple(self.edge_label(u, v) for u in range(n) for v in range(u + 1, n))
        self._key = (vl, el)
        return self._key

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.key() == other.key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.key()))

    def __lt__(self, other: "Flag") -> bool:
        return self.key() < other.key()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.print_concise()})"

    def print_concise(self) -> str:
        n = self.size
        parts = []
        for u in range(n):
            for v in range(u + 1, n):
                lab = self.edge_label(u, v)
                if lab:
                    parts.append(f"{u}{v}" if lab is True else f"{u}{v}:{lab}")
        return f"{n}:" + ",".join(parts)
