from __future__ import annotations

import logging
import math
from collections import defaultdict
from dataclasses import dataclass
from functools import lru_cache
from itertools import combinations, permutations

import numpy as np

from local_flags.algebra.basis import Basis
from local_flags.utils.canonical import canonical_typed

logger = logging.getLogger(__name__)

SparseTable = list[dict[tuple[int, int], float]]


def _labellings(n: int, k: int, typed: bool) -> list[tuple[int, ...]]:
    if typed:
        return [tuple(range(k))]
    return list(permutations(range(n), k))


@lru_cache(maxsize=None)
def product_table(b1: Basis, b2: Basis, out: Basis) -> SparseTable:
    """Split densities of pairs (b1[i], b2[j]) inside the flags of *out*.

    b1 and b2 share a type sigma of size k.  If *out* is typed by sigma the
    entry table[h][(i, j)] is the probability that a uniform split of the
    unlabelled vertices of out[h] into parts of sizes |b1| - k and |b2| - k
    induces b1[i] and b2[j].  If *out* is untyped the probability is also
    taken over a uniform injective labelling of k vertices of out[h]
    (multiply, then unlabel).
    """
    if b1.flag_cls is not b2.flag_cls or b1.flag_cls is not out.flag_cls:
        raise ValueError("product of bases of different flag classes")
    if b1.t != b2.t:
        raise ValueError(f"product of bases with different types: {b1.t!r} and {b2.t!r}")
    sigma = b1.t
    k = sigma.size
    n = b1.size + b2.size - k
    if out.size != n:
        raise ValueError(f"product of sizes {b1.size} and {b2.size} lives on {n} vertices, not {out.size}")
    typed = out.t == sigma
    if not typed and not out.t.is_empty():
        raise ValueError(f"cannot express a product typed by {sigma!r} in {out.print_concise()}")

    tkey = sigma.flag().key()
    labellings = _labellings(n, k, typed)
    a = b1.size - k
    weight = 1.0 / (len(labellings) * math.comb(n - k, a))

    table: SparseTable = []
    for h in out.get():
        entries: dict[tuple[int, int], float] = defaultdict(float)
        for theta in labellings:
            if not typed and h.induce(theta).key() != tkey:
                continue
            head = list(theta)
            rest = [v for v in range(n) if v not in theta]
            for part in combinations(rest, a):
                other = [v for v in rest if v not in part]
                i = b1.lookup(canonical_typed(h.induce(head + list(part)), k))
                if i is None:
                    continue
                j = b2.lookup(canonical_typed(h.induce(head + other), k))
                if j is None:
                    continue
                entries[(i, j)] += weight
        table.append(dict(entries))

    logger.debug(
        "Product table %s x %s -> %s (%d entries)",
        b1.print_concise(), b2.print_concise(), out.print_concise(),
        sum(len(e) for e in table),
    )
    return table


@lru_cache(maxsize=None)
def unlabel_matrix(b: Basis, out: Basis) -> np.ndarray:
    """Matrix M with M[h, f] the density of the typed flag b[f] in out[h].

    The density is the probability that a uniform injective labelling of
    t.size vertices of out[h] yields b[f].
    """
    if not out.t.is_empty() or out.size != b.size or out.flag_cls is not b.flag_cls:
        raise ValueError(f"cannot unlabel {b.print_concise()} into {out.print_concise()}")
    k = b.t.size
    n = b.size
    tkey = b.t.flag().key()
    labellings = _labellings(n, k, False)
    weight = 1.0 / len(labellings)

    mat = np.zeros((len(out), len(b)))
    for hi, h in enumerate(out.get()):
        for theta in labellings:
            if h.induce(theta).key() != tkey:
                continue
            rest = [v for v in range(n) if v not in theta]
            fi = b.lookup(canonical_typed(h.induce(list(theta) + rest), k))
            if fi is not None:
                mat[hi, fi] += weight
    return mat


@dataclass(frozen=True)
class MulAndUnlabel:
    """
    One Cauchy-Schwarz block: for every vector v over *basis*,
    the unlabelled square [[v * v]] is non-negative in *output*.
    """

    basis: Basis
    output: Basis

    def __post_init__(self) -> None:
        if 2 * self.basis.size - self.basis.t.size != self.output.size:
            raise ValueError(
                f"{self.basis.print_concise()} squared does not live in {self.output.print_concise()}"
            )

    def table(self) -> SparseTable:
        return product_table(self.basis, self.basis, self.output)

    def __len__(self) -> int:
        return len(self.basis)
