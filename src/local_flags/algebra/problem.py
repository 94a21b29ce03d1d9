from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np

from local_flags import config
from local_flags.algebra.ineq import Ineq
from local_flags.algebra.operators import MulAndUnlabel
from local_flags.algebra.qflag import QFlag
from local_flags.external.csdp import CsdpResult, read_solution, run_csdp
from local_flags.io.sdpa import write_sdpa

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Solution:
    value: float
    x: QFlag
    result: CsdpResult


@dataclass
class Problem:
    """
    Minimize obj . x over flag density vectors x satisfying every
    inequality of *ineqs* and every Cauchy-Schwarz block of *cs*.

    With *scale* set, each inequality row is divided by its largest
    coefficient before being handed to the solver.
    """

    ineqs: list[Ineq]
    cs: list[MulAndUnlabel]
    obj: QFlag
    scale: bool = field(default=True)

    def no_scale(self) -> "Problem":
        return dataclasses.replace(self, scale=False)

    def check(self) -> None:
        basis = self.obj.basis
        if not basis.t.is_empty():
            raise ValueError(f"objective lives in the typed basis {basis.print_concise()}")
        for ineq in self.ineqs:
            if ineq.basis != basis:
                raise ValueError(f"{ineq!r} is not on the objective basis {basis.print_concise()}")
        for block in self.cs:
            if block.output != basis:
                raise ValueError(f"Cauchy-Schwarz block {block.basis.print_concise()} does not land in the objective basis")

    def _rows(self) -> list[tuple[np.ndarray, float]]:
        rows: list[tuple[np.ndarray, float]] = []
        for ineq in self.ineqs:
            for vec, bound in ineq.rows:
                if self.scale:
                    top = np.abs(vec).max(initial=0.0)
                    if top > 0:
                        vec, bound = vec / top, bound / top
                rows.append((vec, bound))
                if ineq.equality:
                    rows.append((-vec, -bound))
        return rows

    def write_sdpa(self, path: str | Path) -> Path:
        self.check()
        rows = self._rows()
        blocks = [block for block in self.cs if len(block) > 0]
        logger.info(
            "Writing SDP: %d flags, %d linear rows, %d Cauchy-Schwarz blocks",
            len(self.obj.basis), len(rows), len(blocks),
        )
        return write_sdpa(
            path,
            self.obj.data,
            rows,
            [block.table() for block in blocks],
            [len(block) for block in blocks],
        )

    def solve(self, name: str) -> Solution:
        """Write <data_dir>/<name>.dat-s, run csdp and read back the optimum."""
        directory = config.data_dir()
        problem_file = self.write_sdpa(directory / f"{name}.dat-s")
        solution_file = directory / f"{name}.sol"
        result = run_csdp(problem_file, solution_file)
        y = read_solution(solution_file, len(self.obj.basis))
        x = QFlag(self.obj.basis, y, expr=f"solution of {name}")
        return Solution(value=float(self.obj.data @ x.data), x=x, result=result)

    def solve_csdp(self, name: str) -> float:
        return self.solve(name).value
