from __future__ import annotations

import logging
import os
import re
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger(__name__)

CSDP = os.environ.get("CSDP", "csdp")

# Exit codes documented in the CSDP user guide.
CSDP_RETURN_CODES = {
    0: "success",
    1: "primal infeasible",
    2: "dual infeasible",
    3: "partial success",
    4: "maximum iterations reached",
    5: "stuck at edge of primal feasibility",
    6: "stuck at edge of dual feasibility",
    7: "lack of progress",
    8: "X, Z, or O was singular",
    9: "detected NaN or Inf values",
    10: "program stopped by signal",
}

_ACCEPTED = (0, 3)


class SolverError(RuntimeError):
    """CSDP is missing, crashed, or did not find an optimal solution."""


def csdp_available() -> bool:
    """Returns True iff csdp appears runnable."""
    return shutil.which(CSDP) is not None


@dataclass(frozen=True)
class CsdpResult:
    returncode: int
    primal_objective: float | None
    dual_objective: float | None
    output: str

    @property
    def status(self) -> str:
        return CSDP_RETURN_CODES.get(self.returncode, "unknown failure")


_OBJ_RE = re.compile(r"^(Primal|Dual) objective value:\s*(\S+)", re.MULTILINE)


def parse_csdp_output(output: str) -> tuple[float | None, float | None]:
    """Parse (primal, dual) objective values from csdp standard output."""
    primal = dual = None
    for m in _OBJ_RE.finditer(output):
        value = float(m.group(2))
        if m.group(1) == "Primal":
            primal = value
        else:
            dual = value
    return primal, dual


def run_csdp(problem_file: str | Path, solution_file: str | Path) -> CsdpResult:
    """Run csdp on an SDPA sparse file, writing its solution to *solution_file*."""
    if not csdp_available():
        raise SolverError("csdp not available (need 'csdp' in PATH, or set CSDP).")

    cmd = [CSDP, str(problem_file), str(solution_file)]
    logger.info("Running SDP solver: %s", " ".join(cmd))
    p = subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    output = p.stdout.decode("ascii", errors="replace") + p.stderr.decode("ascii", errors="replace")
    primal, dual = parse_csdp_output(output)
    result = CsdpResult(p.returncode, primal, dual, output)

    if p.returncode not in _ACCEPTED:
        raise SolverError(f"csdp failed with return code {p.returncode} ({result.status}).\n{output}")
    if dual is None:
        raise SolverError(f"Could not parse objective values from csdp output:\n{output}")

    logger.info("csdp: %s, primal=%s, dual=%s", result.status, primal, dual)
    return result


def read_solution(path: str | Path, m: int) -> list[float]:
    """Read the dual vector y (first line of a csdp solution file)."""
    with open(path) as f:
        first = f.readline().split()
    if len(first) != m:
        raise SolverError(f"expected {m} values on the first line of {path}, found {len(first)}")
    return [float(s) for s in first]
