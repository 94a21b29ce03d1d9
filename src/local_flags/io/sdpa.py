from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np


def write_sdpa(
    path: str | Path,
    objective: np.ndarray,
    diagonal: Sequence[tuple[np.ndarray, float]],
    blocks: Sequence[list[dict[tuple[int, int], float]]],
    block_sizes: Sequence[int],
) -> Path:
    """Write an SDPA sparse file for

        minimize   objective . y
        subject to sum_i y_i A_i - C  is positive semidefinite.

    The first block is diagonal: row r of *diagonal* is (v, b) and
    contributes v[i] to A_i and b to C.  Each further block k is given by
    blocks[k][i] = {(row, col): value}, the symmetric matrix A_i, with C = 0.
    Only entries with row <= col are written.
    """
    path = Path(path)
    m = len(objective)
    sizes: list[int] = []
    if diagonal:
        sizes.append(-len(diagonal))
    sizes.extend(block_sizes)
    if not sizes:
        raise ValueError("an SDP needs at least one constraint block")

    with open(path, "w") as f:
        f.write(f"{m}\n")
        f.write(f"{len(sizes)}\n")
        f.write(" ".join(str(s) for s in sizes) + "\n")
        f.write(" ".join(repr(float(c)) for c in objective) + "\n")

        blk = 0
        if diagonal:
            blk = 1
            for r, (vec, bound) in enumerate(diagonal):
                if bound:
                    f.write(f"0 1 {r + 1} {r + 1} {float(bound)!r}\n")
                for i in np.flatnonzero(vec):
                    f.write(f"{i + 1} 1 {r + 1} {r + 1} {float(vec[i])!r}\n")

        for k, table in enumerate(blocks):
            b = blk + k + 1
            for i, entries in enumerate(table):
                for (row, col), value in sorted(entries.items()):
                    if row <= col and value:
                        f.write(f"{i + 1} {b} {row + 1} {col + 1} {float(value)!r}\n")

    return path
