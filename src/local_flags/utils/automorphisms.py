from __future__ import annotations

from local_flags.flags.base import Flag
from local_flags.utils.canonical import canonical_typed, select_type


def vertex_orbits(flag: Flag) -> list[int]:
    """Representatives of the vertex orbits of *flag* under Aut(flag).

    Two vertices are in the same orbit iff labelling either one of them
    gives isomorphic 1-typed flags.  The first vertex of every orbit is
    returned, in increasing order.
    """
    res: list[int] = []
    seen: set[Flag] = set()
    for i in range(flag.size):
        rooted = canonical_typed(select_type(flag, [i]), 1)
        if rooted not in seen:
            seen.add(rooted)
            res.append(i)
    return res


def vertex_orbit_classes(flag: Flag) -> list[list[int]]:
    """Partition of the vertices of *flag* into automorphism orbits."""
    groups: dict[Flag, list[int]] = {}
    for i in range(flag.size):
        rooted = canonical_typed(select_type(flag, [i]), 1)
        groups.setdefault(rooted, []).append(i)
    return sorted(groups.values())
