from .canonical import canonical, canonical_typed, select_type
from .automorphisms import vertex_orbits, vertex_orbit_classes
from .connectivity import is_connected_to

__all__ = [
    "canonical",
    "canonical_typed",
    "select_type",
    "vertex_orbits",
    "vertex_orbit_classes",
    "is_connected_to",
]
