from .basis import Basis, Type
from .operators import MulAndUnlabel, product_table, unlabel_matrix
from .ineq import Ineq, flags_are_nonnegative, total_sum_is_one
from .qflag import QFlag
from .problem import Problem, Solution

__all__ = [
    "Basis",
    "Type",
    "MulAndUnlabel",
    "product_table",
    "unlabel_matrix",
    "Ineq",
    "flags_are_nonnegative",
    "total_sum_is_one",
    "QFlag",
    "Problem",
    "Solution",
]
