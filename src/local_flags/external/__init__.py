from .csdp import (
    CSDP,
    CsdpResult,
    SolverError,
    csdp_available,
    parse_csdp_output,
    read_solution,
    run_csdp,
)

__all__ = [
    "CSDP",
    "CsdpResult",
    "SolverError",
    "csdp_available",
    "parse_csdp_output",
    "read_solution",
    "run_csdp",
]
