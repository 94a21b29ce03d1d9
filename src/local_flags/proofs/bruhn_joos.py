"""
Proof that the square of the line graph of a graph of maximum degree Delta
has maximum degree at most 3/2 * Delta^2.

Flags are 2-colored graphs in which every connected component contains a
vertex of color 0.
"""

from __future__ import annotations

import argparse

from local_flags.algebra import Basis, Problem, QFlag, flags_are_nonnegative
from local_flags.flags import Colored, Graph, SubClass
from local_flags.logging_setup import init_default_log

G = Colored.of(Graph, 2)


class BruhnJoosFlag(SubClass):
    content_cls = G
    subclass_name = "Connected 2-colored graphs"
    hereditary = False

    @classmethod
    def is_in_subclass(cls, flag) -> bool:
        # Each connected component contains a vertex colored 0
        return flag.is_connected_to(lambda i: flag.color[i] == 0)


F = BruhnJoosFlag

# The three ways to split a 4-element set into two parts of size 2
SPLIT = (
    ((0, 1), (2, 3)),
    ((0, 2), (1, 3)),
    ((0, 3), (1, 2)),
)


def connected_edges(g: F, e1, e2) -> bool:
    """Whether e1 and e2 are adjacent in the square of the line graph."""
    return any(g.content.content.edge(u1, u2) for u1 in e1 for u2 in e2)


def strong_density() -> QFlag:
    def coeff(g: F, _) -> float:
        res = 0
        for e1, e2 in SPLIT:
            if (
                g.content.content.edge(*e1)
                and g.content.content.edge(*e2)
                and any(g.content.color[v] == 0 for v in e1)
                and any(g.content.color[v] == 0 for v in e2)
                and connected_edges(g, e1, e2)
            ):
                res += 1
        return res / 24.0

    return Basis(F, 4).qflag_from_coeff(coeff).named("strong density")


def ones(n: int, k: int) -> QFlag:
    root = F(G(Graph.empty(k), [0] * k))
    return root.project(n)


def build_problem() -> Problem:
    # strong_density() lives on 4-vertex flags
    n = 4
    basis = Basis(F, n)
    obj = strong_density()

    ineqs = [
        flags_are_nonnegative(basis),
        ones(n, 1).untype().at_most(2.0),
        ones(n, 2).untype().at_most(4.0),
        ones(n, 3).untype().at_most(8.0),
    ]
    ineqs.extend(F.regularity(basis))

    return Problem(ineqs=ineqs, cs=basis.all_cs(), obj=-obj).no_scale()


def main(argv=None) -> float:
    ap = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    ap.add_argument("--log", default=None, help="logging level")
    args = ap.parse_args(argv)

    init_default_log(args.log)
    pb = build_problem()
    result = -pb.solve_csdp("maximum_strong_edge_degree")
    print(f"Optimal value: {result}")  # The answer must be 1.5
    return result


if __name__ == "__main__":
    main()
