from __future__ import annotations

from typing import Callable


def is_connected_to(
    n: int,
    adjacent: Callable[[int, int], bool],
    seed: Callable[[int], bool],
) -> bool:
    """Check whether every vertex of {0..n-1} is reachable from the seeds.

    The seed set is every vertex satisfying *seed*; *adjacent* is the edge
    relation.  Traversal uses an explicit stack.

    Semantics for degenerate cases:
      - n == 0            -> True  (vacuously connected)
      - no seed vertex    -> False (for n >= 1)
    """
    if n == 0:
        return True

    visited = [False] * n
    stack = [u for u in range(n) if seed(u)]
    while stack:
        v = stack.pop()
        if visited[v]:
            continue
        visited[v] = True
        for u in range(n):
            if u != v and not visited[u] and adjacent(u, v):
                stack.append(u)
    return all(visited)

