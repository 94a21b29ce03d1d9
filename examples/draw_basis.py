import matplotlib.pyplot as plt

from local_flags.algebra import Basis, Type
from local_flags.flags import Graph
from local_flags.proofs.bruhn_joos import F as BruhnJoosFlag
from local_flags.viz.draw import draw_basis

# Graphs on 4 vertices
draw_basis(Basis(Graph, 4))

# Extensions of a labelled edge by one vertex
edge = Type.from_flag(Graph(2, [(0, 1)]))
draw_basis(Basis(Graph, 3).with_type(edge))

# Flags of the Bruhn-Joos problem
draw_basis(Basis(BruhnJoosFlag, 3), cols=8)

plt.show()
