from .draw import draw_flag, draw_basis

__all__ = [
    "draw_flag",
    "draw_basis",
]
