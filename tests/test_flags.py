"""Tests for local_flags.flags and local_flags.utils.canonical."""
import pytest

from local_flags.algebra import Basis, Type
from local_flags.flags import CGraph, Colored, Connected, Graph, SubClass
from local_flags.utils.canonical import canonical, canonical_typed, select_type


class TriangleFree(SubClass):
    content_cls = Graph
    subclass_name = "Triangle-free graphs"
    hereditary = True

    @classmethod
    def is_in_subclass(cls, flag):
        n = flag.size
        return not any(
            flag.edge(a, b) and flag.edge(b, c) and flag.edge(a, c)
            for a in range(n) for b in range(a + 1, n) for c in range(b + 1, n)
        )


# --- flag classes ---

def test_graph_edges():
    g = Graph(3, [(0, 1), (2, 1)])
    assert g.edge(1, 0) and g.edge(1, 2)
    assert not g.edge(0, 2)
    assert g.edges() == [(0, 1), (1, 2)]


def test_graph_invalid_edge():
    with pytest.raises(ValueError):
        Graph(2, [(0, 2)])
    with pytest.raises(ValueError):
        Graph(2, [(1, 1)])


def test_graph_induce_reorders():
    g = Graph(3, [(0, 1)])
    h = g.induce([2, 1, 0])
    assert h.edges() == [(1, 2)]


def test_graph_extensions_count():
    assert len(list(Graph(3).extensions())) == 8


def test_cgraph_colors():
    C3 = CGraph.with_colors(3)
    assert CGraph.with_colors(3) is C3
    g = C3(3, [((0, 1), 2), ((1, 2), 1)])
    assert g.edge(1, 0) == 2
    assert g.is_edge(1, 2)
    assert not g.is_edge(0, 2)
    with pytest.raises(ValueError):
        C3(2, [((0, 1), 3)])


def test_colored_delegates_edges():
    G = Colored.of(Graph, 2)
    assert Colored.of(Graph, 2) is G
    g = G(Graph(2, [(0, 1)]), [0, 1])
    assert g.is_edge(0, 1)
    assert g.color == (0, 1)
    with pytest.raises(ValueError):
        G(Graph(2), [0, 2])


def test_subclass_name():
    assert Connected.name == "Connected graphs"
    assert Connected.is_member(Connected(Graph(3, [(0, 1), (1, 2)])))
    assert not Connected.is_member(Connected(Graph(3, [(0, 1)])))


# --- canonical forms ---

def test_canonical_relabelled_triangle_plus_vertex():
    a = Graph(4, [(0, 1), (1, 2), (0, 2)])
    b = Graph(4, [(1, 2), (2, 3), (1, 3)])
    assert canonical(a) == canonical(b)


def test_canonical_different_graphs():
    assert canonical(Graph(3, [(0, 1), (1, 2)])) != canonical(Graph(3, [(0, 1)]))


def test_canonical_typed_fixes_labels():
    # Vertex 0 labelled: an edge at the label vs an edge away from it
    assert canonical_typed(Graph(3, [(0, 1)]), 1) == canonical_typed(Graph(3, [(0, 2)]), 1)
    assert canonical_typed(Graph(3, [(0, 1)]), 1) != canonical_typed(Graph(3, [(1, 2)]), 1)


def test_select_type():
    g = Graph(3, [(1, 2)])
    assert select_type(g, [2, 1]).edges() == [(0, 1)]


# --- generation ---

@pytest.mark.parametrize("n,count", [(0, 1), (1, 1), (2, 2), (3, 4), (4, 11), (5, 34)])
def test_basis_graph_counts(n, count):
    assert len(Basis(Graph, n)) == count


@pytest.mark.parametrize("n,count", [(1, 1), (2, 1), (3, 2), (4, 6), (5, 21)])
def test_basis_connected_counts(n, count):
    assert len(Basis(Connected, n)) == count


def test_basis_hereditary_subclass():
    assert len(Basis(TriangleFree, 4)) == 7


def test_basis_colored_counts():
    G = Colored.of(Graph, 2)
    assert len(Basis(G, 1)) == 2
    assert len(Basis(G, 2)) == 6
    assert len(Basis(CGraph.with_colors(3), 2)) == 3


def test_typed_basis_edge():
    edge = Type.from_flag(Graph(2, [(0, 1)]))
    flags = Basis(Graph, 3).with_type(edge).get()
    # The new vertex sees any subset of the two labelled vertices
    assert len(flags) == 4
    for g in flags:
        assert g.edge(0, 1)


def test_typed_basis_vertex():
    vertex = Type.from_flag(Graph(1))
    assert len(Basis(Graph, 2).with_type(vertex)) == 2
    assert len(Basis(Graph, 3).with_type(vertex)) == 6


def test_type_from_flag_not_member():
    with pytest.raises(ValueError):
        Type.from_flag(Connected(Graph(2)))


def test_types_with_size():
    assert len(Type.types_with_size(Graph, 3)) == 4
    assert Type.types_with_size(Graph, 0) == [Type.empty(Graph)]
