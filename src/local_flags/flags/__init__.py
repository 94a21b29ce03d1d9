from .base import Flag
from .graph import Graph, CGraph
from .colored import Colored
from .subclass import SubClass, Connected

__all__ = [
    "Flag",
    "Graph",
    "CGraph",
    "Colored",
    "SubClass",
    "Connected",
]
