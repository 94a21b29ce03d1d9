from __future__ import annotations

from functools import lru_cache
from itertools import permutations, product
from typing import Sequence

from local_flags.flags.base import Flag


def _refined_colors(flag: Flag, k: int) -> list[int]:
    """WL-1 color refinement seeded by labels and vertex labels.

    Labelled vertices 0..k-1 get their own singleton colors.
    Returns one integer color per vertex; the coloring is invariant under
    permutations that fix the labelled vertices.
    """
    n = flag.size
    seeds = [(0, (v,)) if v < k else (1, (flag.vertex_label(v),)) for v in range(n)]
    unique = sorted(set(seeds))
    colors = [unique.index(s) for s in seeds]

    for _ in range(n):
        sigs = []
        for v in range(n):
            nbr = sorted((flag.edge_label(v, u), colors[u]) for u in range(n) if u != v)
            sigs.append((colors[v], tuple(nbr)))

        unique = sorted(set(sigs))
        sig_to_color = {s: i for i, s in enumerate(unique)}
        new_colors = [sig_to_color[s] for s in sigs]

        if len(unique) == len(set(colors)):
            colors = new_colors
            break
        colors = new_colors

    return colors


def _color_classes(colors: Sequence[int], k: int) -> list[list[int]]:
    """Group unlabelled vertices by color, sorted by (color, vertex)."""
    groups: dict[int, list[int]] = {}
    for v, c in enumerate(colors):
        if v >= k:
            groups.setdefault(c, []).append(v)
    return [groups[c] for c in sorted(groups)]


@lru_cache(maxsize=None)
def canonical_typed(flag: Flag, k: int) -> Flag:
    """Canonical form of *flag* under permutations fixing vertices 0..k-1.

    The minimum key is taken over all relabelings that send each refined
    color class onto a fixed block of positions, so only permutations inside
    classes are tried.
    """
    n = flag.size
    if n - k <= 1:
        return flag

    classes = _color_classes(_refined_colors(flag, k), k)
    labelled = list(range(k))

    best: Flag | None = None
    best_key: tuple | None = None
    for perms in product(*(permutations(cls) for cls in classes)):
        order = labelled + [v for block in perms for v in block]
        candidate = flag.induce(order)
        key = candidate.key()
        if best_key is None or key < best_key:
            best, best_key = candidate, key
    return best  # type: ignore[return-value]


def canonical(flag: Flag) -> Flag:
    """Canonical form of an unlabelled flag."""
    return canonical_typed(flag, 0)


def select_type(flag: Flag, vertices: Sequence[int]) -> Flag:
    """Reorder *flag* so that *vertices* come first, in the given order."""
    chosen = list(vertices)
    rest = [v for v in range(flag.size) if v not in chosen]
    return flag.induce(chosen + rest)
