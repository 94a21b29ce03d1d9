from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from local_flags.algebra.basis import Basis
from local_flags.algebra.operators import product_table


@dataclass
class Ineq:
    """
    A family of linear constraints on the flag densities of *basis*.

    Every row (v, b) states v . x >= b, or v . x == b when *equality* is set.
    """

    basis: Basis
    rows: list[tuple[np.ndarray, float]] = field(default_factory=list)
    equality: bool = False
    name: str = ""

    def __len__(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        op = "==" if self.equality else ">="
        return f"Ineq({self.name or op}, {len(self.rows)} rows on {self.basis.print_concise()})"

    def multiply_and_unlabel(self, outbasis: Basis) -> "Ineq":
        """Lift a typed family into the untyped basis *outbasis*.

        If f >= b holds for every labelling of the type, then so does
        (f - b) * g for every typed flag g of the complementary size, and
        unlabelling preserves the sign.  One row per (row, g) pair.
        """
        if not outbasis.t.is_empty():
            raise ValueError(f"{outbasis.print_concise()} is not an untyped basis")
        if outbasis.flag_cls is not self.basis.flag_cls:
            raise ValueError("cannot lift an inequality into another flag class")
        sigma = self.basis.t
        other_size = outbasis.size - self.basis.size + sigma.size
        if other_size < sigma.size:
            raise ValueError(f"{self.basis.print_concise()} does not fit in {outbasis.print_concise()}")
        other = Basis(self.basis.flag_cls, other_size, sigma)

        unit = np.ones(len(self.basis))
        folded = [vec - bound * unit if bound else vec for vec, bound in self.rows]
        lifted = [np.zeros((len(other), len(outbasis))) for _ in folded]
        for h, entries in enumerate(product_table(self.basis, other, outbasis)):
            for (a, b), w in entries.items():
                for r, vec in enumerate(folded):
                    if vec[a]:
                        lifted[r][b, h] += vec[a] * w

        rows = [(mat[j], 0.0) for mat in lifted for j in range(len(other))]
        return Ineq(outbasis, rows, equality=self.equality, name=f"[[({self.name}) * {other.print_concise()}]]")


def flags_are_nonnegative(basis: Basis) -> Ineq:
    """Every flag density is at least 0."""
    n = len(basis)
    rows = [(row, 0.0) for row in np.eye(n)]
    return Ineq(basis, rows, name="flags are non-negative")


def total_sum_is_one(basis: Basis) -> Ineq:
    """Flag densities sum to 1."""
    return Ineq(basis, [(np.ones(len(basis)), 1.0)], equality=True, name="total sum is one")
