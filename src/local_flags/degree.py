from __future__ import annotations

from typing import Callable

from local_flags.algebra.basis import Basis, Type
from local_flags.algebra.ineq import Ineq
from local_flags.algebra.qflag import QFlag
from local_flags.utils.automorphisms import vertex_orbits
from local_flags.utils.connectivity import is_connected_to


class Degree:
    """
    The notion of degree of a flag class.

    A class provides is_edge(u, v); the degree of u is the number of v with
    is_edge(u, v).  Extension vectors, regularity constraints and
    connectivity checks are derived from it.
    """

    size: int

    def is_edge(self, u: int, v: int) -> bool:
        raise NotImplementedError

    @classmethod
    def extension(cls, t: Type, i: int) -> QFlag:
        """Sum of the flags extending t by one vertex adjacent to vertex i."""
        assert i < t.size
        assert t.size <= 12
        b = Basis(t.flag_cls, t.size + 1).with_type(t)
        return b.qflag_from_indicator(lambda flag, type_size: flag.is_edge(i, type_size)).named(
            f"ext({{{t.print_concise()}}}, {i})"
        )

    def project(self, n: int) -> QFlag:
        """Flags of size n rooted at self where every new vertex is adjacent to vertex 0."""
        k = self.size
        assert k <= n
        assert 0 < k
        t = Type.from_flag(self)
        basis = Basis(type(self), n).with_type(t)

        def coeff(g, s):
            assert s == k
            return 1.0 if all(g.is_edge(0, i) for i in range(k, n)) else 0.0

        return basis.qflag_from_coeff(coeff).named(f"proj({{{t.print_concise()}}}, {n})")

    @classmethod
    def regularity(cls, basis: Basis) -> list[Ineq]:
        """Inequalities true if every vertex has the same degree.

        For every flag on basis.size - 1 vertices with r >= 2 vertex orbits,
        the extension counts of consecutive orbits (cyclically) are compared;
        the resulting chain of r inequalities forces them all to be equal.
        """
        assert basis.t.is_empty()
        assert basis.size >= 1
        flag_cls = basis.flag_cls
        type_size = basis.size - 1
        res = []
        for id, flag in enumerate(Basis(flag_cls, type_size).get()):
            orbits = vertex_orbits(flag)
            if len(orbits) >= 2:
                t = Type.new(flag_cls, type_size, id)
                for i in range(len(orbits)):
                    next_i = (i + 1) % len(orbits)
                    v = (flag_cls.extension(t, orbits[i]) - flag_cls.extension(t, orbits[next_i])).untype()
                    res.append(v.non_negative())
        return res

    @classmethod
    def weaker_regularity(cls, basis: Basis, type_size: int) -> list[Ineq]:
        """Regularity compared on types of *type_size*, lifted into *basis*."""
        assert basis.t.is_empty()
        assert type_size >= 1
        assert type_size < basis.size
        flag_cls = basis.flag_cls
        res = []
        for id, flag in enumerate(Basis(flag_cls, type_size).get()):
            orbits = vertex_orbits(flag)
            if len(orbits) >= 2:
                t = Type.new(flag_cls, type_size, id)
                for i in range(len(orbits)):
                    next_i = (i + 1) % len(orbits)
                    v = flag_cls.extension(t, orbits[i]) - flag_cls.extension(t, orbits[next_i])
                    res.append(v.non_negative().multiply_and_unlabel(basis))
        return res

    def is_connected_to(self, f: Callable[[int], bool]) -> bool:
        """True iff every vertex is reachable from the vertices satisfying f."""
        return is_connected_to(self.size, self.is_edge, f)

    def is_connected(self) -> bool:
        return self.is_connected_to(lambda i: i == 0)
