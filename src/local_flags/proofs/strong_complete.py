"""
If the square of the line graph of a graph G with maximum degree Delta is a
clique, then G has at most 5/4 * Delta^2 edges.
"""

from __future__ import annotations

import argparse

from local_flags.algebra import Basis, Problem, QFlag, Type, flags_are_nonnegative
from local_flags.flags import Connected, Graph
from local_flags.logging_setup import init_default_log

F = Connected


def strong_degree() -> QFlag:
    edge = F(Graph(2, [(0, 1)]))
    t = Type.from_flag(edge)
    return Basis(F, 4).with_type(t).qflag_from_indicator(lambda g, _: g.content.edge(2, 3))


def one(n: int) -> QFlag:
    single_vertex = F(Graph(1))
    return single_vertex.project(n).untype()


def contains_induced_2k2(g: Graph) -> bool:
    """Whether g has two edges with no edge between their endpoints."""
    n = g.size
    for a1, a2 in g.edges():
        for b1 in range(n):
            if b1 in (a1, a2):
                continue
            for b2 in range(b1 + 1, n):
                if (
                    g.edge(b1, b2)
                    and b2 not in (a1, a2)
                    and not g.edge(a1, b1)
                    and not g.edge(a2, b1)
                    and not g.edge(a1, b2)
                    and not g.edge(a2, b2)
                ):
                    return True
    return False


def not_strong_clique(size: int) -> QFlag:
    """Sum of the graphs containing an induced 2K2."""
    return Basis(F, size).qflag_from_indicator(lambda g, _: contains_induced_2k2(g.content))


def build_problem(n: int = 6) -> Problem:
    basis = Basis(F, n)
    edge = F(Graph(2, [(0, 1)]))
    # We optimize the average strong degree,
    # which is also the total number of edges (minus 1) in a strong clique
    obj = (strong_degree() * edge.project(n - 2)).untype()
    ineqs = [
        flags_are_nonnegative(basis),
        not_strong_clique(n).at_most(0.0),
        one(n).at_most(1.0),
    ]
    ineqs.extend(F.regularity(basis))

    return Problem(ineqs=ineqs, cs=basis.all_cs(), obj=-obj)


def main(argv=None) -> float:
    ap = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    ap.add_argument("--n", type=int, default=6, help="flag size (at least 4)")
    ap.add_argument("--log", default=None, help="logging level")
    args = ap.parse_args(argv)

    init_default_log(args.log)
    value = -build_problem(args.n).solve_csdp("strong_complete")
    print(f"Maximal number of edges: {value} times Δ choose 2")
    return value


if __name__ == "__main__":
    main()
