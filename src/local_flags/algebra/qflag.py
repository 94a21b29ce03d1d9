from __future__ import annotations

from numbers import Real
from typing import Sequence

import numpy as np

from local_flags.algebra.basis import Basis
from local_flags.algebra.ineq import Ineq
from local_flags.algebra.operators import product_table, unlabel_matrix


class QFlag:
    """
    A quantum flag: a real linear combination of the flags of a basis.

    data[i] is the coefficient of basis.get()[i]; expr is a readable
    description carried along for logs and reports.
    """

    def __init__(self, basis: Basis, data: Sequence[float] | np.ndarray, expr: str = "") -> None:
        arr = np.asarray(data, dtype=float)
        if arr.shape != (len(basis),):
            raise ValueError(f"expected {len(basis)} coefficients for {basis.print_concise()}, got {arr.shape}")
        self.basis = basis
        self.data = arr
        self.expr = expr or f"<{basis.print_concise()}>"

    @classmethod
    def one(cls, basis: Basis) -> "QFlag":
        """The unit of the algebra of *basis.t*: the type itself, on t.size vertices."""
        t = basis.t
        unit = Basis(basis.flag_cls, t.size, t)
        return cls(unit, np.ones(len(unit)), expr="1")

    def _check(self, other: "QFlag") -> None:
        if other.basis != self.basis:
            raise ValueError(
                f"vectors on different bases: {self.basis.print_concise()} and {other.basis.print_concise()}"
            )

    def __add__(self, other: "QFlag") -> "QFlag":
        self._check(other)
        return QFlag(self.basis, self.data + other.data, f"{self.expr} + {other.expr}")

    def __sub__(self, other: "QFlag") -> "QFlag":
        self._check(other)
        return QFlag(self.basis, self.data - other.data, f"{self.expr} - ({other.expr})")

    def __neg__(self) -> "QFlag":
        return QFlag(self.basis, -self.data, f"-({self.expr})")

    def __mul__(self, other: "QFlag | Real") -> "QFlag":
        if isinstance(other, QFlag):
            return self._product(other)
        return QFlag(self.basis, self.data * float(other), f"({self.expr}) * {other}")

    def __rmul__(self, other: Real) -> "QFlag":
        return self * other

    def __truediv__(self, other: Real) -> "QFlag":
        return QFlag(self.basis, self.data / float(other), f"({self.expr}) / {other}")

    def __pow__(self, p: int) -> "QFlag":
        if p < 0:
            raise ValueError("negative powers of flags are undefined")
        res = QFlag.one(self.basis)
        for _ in range(p):
            res = res * self
        return res.named(f"({self.expr})^{p}")

    def _product(self, other: "QFlag") -> "QFlag":
        out = self.basis * other.basis
        table = product_table(self.basis, other.basis, out)
        x, y = self.data, other.data
        data = [sum(w * x[i] * y[j] for (i, j), w in entries.items()) for entries in table]
        return QFlag(out, data, f"({self.expr}) * ({other.expr})")

    def untype(self) -> "QFlag":
        """Unlabel: average over the labellings of the type."""
        if self.basis.t.is_empty():
            return self
        out = Basis(self.basis.flag_cls, self.basis.size)
        mat = unlabel_matrix(self.basis, out)
        return QFlag(out, mat @ self.data, f"[[{self.expr}]]")

    def named(self, name: str) -> "QFlag":
        return QFlag(self.basis, self.data.copy(), name)

    def __repr__(self) -> str:
        return f"QFlag({self.expr} on {self.basis.print_concise()})"

    # ------------------------------------------------------------------
    # Constraints
    # ------------------------------------------------------------------

    def at_least(self, x: float) -> Ineq:
        return Ineq(self.basis, [(self.data.copy(), float(x))], name=f"{self.expr} >= {x}")

    def at_most(self, x: float) -> Ineq:
        return Ineq(self.basis, [(-self.data, -float(x))], name=f"{self.expr} <= {x}")

    def non_negative(self) -> Ineq:
        return self.at_least(0.0)

    def equal(self, x: float) -> Ineq:
        return Ineq(self.basis, [(self.data.copy(), float(x))], equality=True, name=f"{self.expr} = {x}")
