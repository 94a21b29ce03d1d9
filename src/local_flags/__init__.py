"""
local_flags: flag-algebra utilities for graphs of maximum degree Delta,
when 1 << Delta << n.  Degree-based extension vectors, vertex-orbit
regularity constraints, and SDP problems solved with CSDP.
"""

from .flags import Flag, Graph, CGraph, Colored, SubClass, Connected
from .degree import Degree
from .algebra import (
    Basis,
    Type,
    QFlag,
    Ineq,
    MulAndUnlabel,
    Problem,
    Solution,
    flags_are_nonnegative,
    total_sum_is_one,
)
from .external.csdp import SolverError, csdp_available
from .logging_setup import init_default_log

__all__ = [
    # Flags
    "Flag",
    "Graph",
    "CGraph",
    "Colored",
    "SubClass",
    "Connected",
    # Degree
    "Degree",
    # Algebra
    "Basis",
    "Type",
    "QFlag",
    "Ineq",
    "MulAndUnlabel",
    "Problem",
    "Solution",
    "flags_are_nonnegative",
    "total_sum_is_one",
    # Solver
    "SolverError",
    "csdp_available",
    # Logging
    "init_default_log",
]
