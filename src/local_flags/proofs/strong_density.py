"""
Sparsity of the neighbourhoods in the square of the line graph, as a
function of the degeneracy parameter eta.

Flags are graphs with vertices colored X or Y and edges colored EDGE (the
edges to color) or SHADOW_EDGE (the other edges), restricted to flags where
  * shadow edges all lie in E(X, Y)
  * every connected component contains an element of X
"""

from __future__ import annotations

import argparse
import logging

from local_flags.algebra import Basis, Ineq, Problem, QFlag, Type, flags_are_nonnegative
from local_flags.flags import CGraph, Colored, SubClass
from local_flags.logging_setup import init_default_log

logger = logging.getLogger(__name__)

# Vertex-colored graphs with 3 edge colors (0 means no edge)
G = Colored.of(CGraph.with_colors(3), 2)

# Colors of vertices
X = 0
Y = 1
# Colors of edges
EDGE = 1
SHADOW_EDGE = 2


def shadow_edges_are_from_x_to_y(flag) -> bool:
    for u1 in range(flag.size):
        for u2 in range(u1):
            if flag.edge(u1, u2) == SHADOW_EDGE and flag.color[u1] == flag.color[u2]:
                return False
    return True


class StrongDensityFlag(SubClass):
    content_cls = G
    subclass_name = "Strong density graphs"
    hereditary = False

    @classmethod
    def is_in_subclass(cls, flag) -> bool:
        return (
            flag.is_connected_to(lambda i: flag.color[i] == X)  # components intersect X
            and shadow_edges_are_from_x_to_y(flag)
        )


F = StrongDensityFlag


def connected_edges(g: F, e1, e2) -> bool:
    """Whether e1 and e2 are adjacent in the square of the line graph."""
    return any(g.is_edge(u1, u2) for u1 in e1 for u2 in e2)


def degenerated_strong_degree(t: Type) -> QFlag:
    """Strong degree of an edge inside its neighbourhood, scaled by Delta^2 / 2."""
    assert t.size == 2  # t is the type of an edge
    basis = Basis(F, 4).with_type(t)

    def indicator(g: F, _) -> bool:
        assert g.is_edge(0, 1)
        return g.edge(2, 3) == EDGE and connected_edges(g, (0, 1), (2, 3))

    return basis.qflag_from_indicator(indicator)


def degree_in_neighbourhood(t: Type) -> QFlag:
    assert t.size == 2
    basis = Basis(F, 4).with_type(t)
    return basis.qflag_from_indicator(
        lambda g, _: (g.content.color[2] == X or g.content.color[3] == X)
        and g.edge(2, 3) == EDGE
        and connected_edges(g, (0, 1), (2, 3))
    )


def extension_in_x(t: Type) -> QFlag:
    """Sum of flags of type t on t.size + 1 vertices whose extra vertex is in X."""
    b = Basis(F, t.size + 1).with_type(t)
    return b.qflag_from_indicator(lambda g, type_size: g.content.color[type_size] == X).named(
        f"ext_in_x({{{t.print_concise()}}})"
    )


def size_of_x(n: int) -> list[Ineq]:
    """Extensions in X have twice the weight of extensions through an edge."""
    res = []
    for t in Type.types_with_size(F, n - 1):
        diff = F.extension(t, 0) - extension_in_x(t) * 0.5
        res.append(diff.equal(0.0).multiply_and_unlabel(Basis(F, n)))
    return res


def edge_type(color1: int, color2: int) -> Type:
    """The type of a (non-shadow) edge with endpoints colored color1 and color2."""
    e = F(G(CGraph.with_colors(3)(2, [((0, 1), EDGE)]), [color1, color2]))
    return Type.from_flag(e)


def objective(n: int) -> QFlag:
    xy_edge = edge_type(X, Y)
    xx_edge = edge_type(X, X)
    return (degree_in_neighbourhood(xy_edge) * F.extension(xy_edge, 0) ** (n - 4)).untype() * 0.25 + (
        degree_in_neighbourhood(xx_edge) * F.extension(xx_edge, 0) ** (n - 4)
    ).untype() * 0.125


def build_problem(eta: float, n: int = 4, obj: QFlag | None = None) -> Problem:
    basis = Basis(F, n)
    xy_edge = edge_type(X, Y)
    if obj is None:
        obj = objective(n)

    ineqs = [flags_are_nonnegative(basis)]

    # 1. The graph of non-shadow edges of E(X, Y) is not (2 - eta)Delta^2-degenerated
    ext = F.extension(xy_edge, 0)
    v1 = degenerated_strong_degree(xy_edge) - ext * ext * 2.0 * (2.0 - eta)
    ineqs.append(v1.non_negative().multiply_and_unlabel(basis))

    # 2. Every vertex has the same degree Delta
    ineqs.extend(F.weaker_regularity(basis, 3))

    # 3. X has size at most 2 Delta
    # 3.1. The size of X is twice the degree of any vertex
    ineqs.extend(size_of_x(n))
    # 3.2. The number of n-flags included in X is at most (2 Delta choose n) ~ 2^n (Delta choose n)
    flag_in_x = basis.qflag_from_indicator(lambda g, _: all(c == X for c in g.content.color))
    ineqs.append(flag_in_x.at_most(float(2**n)))

    return Problem(ineqs=ineqs, cs=basis.all_cs(), obj=-obj).no_scale()


def sweep(n: int = 4, steps: int = 20) -> list[tuple[float, float]]:
    obj = objective(n)
    acc = []
    for i in range(steps):
        eta = 0.025 * (i + 1)
        value = -build_problem(eta, n, obj).solve_csdp("strong_density")
        logger.info("eta=%s: %s", eta, value)
        acc.append((eta, value))
    return acc


def main(argv=None) -> list[tuple[float, float]]:
    ap = argparse.ArgumentParser(description="Sparsity of neighbourhoods in the square of the line graph.")
    ap.add_argument("--n", type=int, default=4, help="flag size (can be pushed to 5)")
    ap.add_argument("--steps", type=int, default=20, help="number of eta values")
    ap.add_argument("--log", default=None, help="logging level")
    args = ap.parse_args(argv)

    init_default_log(args.log)
    acc = sweep(args.n, args.steps)

    print("eta\tsparsity")
    for eta, value in acc:
        print(f"{eta}\t{value}")
    return acc


if __name__ == "__main__":
    main()
