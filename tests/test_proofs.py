"""Tests for the proofs in local_flags.proofs."""
import numpy as np
import pytest

from local_flags import config
from local_flags.algebra import Basis
from local_flags.external.csdp import csdp_available
from local_flags.flags import CGraph, Graph
from local_flags.proofs import bruhn_joos, strong_complete, strong_density


# --- bruhn_joos ---

def test_bruhn_joos_flags():
    F, G = bruhn_joos.F, bruhn_joos.G
    assert len(Basis(F, 1)) == 1
    # Two color-0 vertices (with or without an edge), or an edge to a color-1 vertex
    assert len(Basis(F, 2)) == 3
    assert F.is_member(F(G(Graph(2, [(0, 1)]), [0, 1])))
    assert not F.is_member(F(G(Graph(2), [0, 1])))


def test_bruhn_joos_strong_density():
    F, G = bruhn_joos.F, bruhn_joos.G
    obj = bruhn_joos.strong_density()
    basis = obj.basis
    # Edges 01 and 23 joined by 02; the other two splits do not pair edges
    path = F(G(Graph(4, [(0, 1), (2, 3), (0, 2)]), [0, 0, 0, 0]))
    assert obj.data[basis.index(path)] == pytest.approx(1 / 24)
    matching = F(G(Graph(4, [(0, 1), (2, 3)]), [0, 0, 0, 0]))
    assert obj.data[basis.index(matching)] == 0.0


def test_bruhn_joos_ones():
    q = bruhn_joos.ones(4, 1)
    assert q.basis.size == 4
    assert q.basis.t.size == 1
    assert q.data.sum() > 0


def test_bruhn_joos_has_no_size_option():
    with pytest.raises(SystemExit):
        bruhn_joos.main(["--n", "5"])


def test_bruhn_joos_problem_structure():
    problem = bruhn_joos.build_problem()
    problem.check()
    assert not problem.scale
    assert problem.obj.basis == Basis(bruhn_joos.F, 4)
    assert len(problem.cs) > 0


@pytest.mark.skipif(not csdp_available(), reason="csdp not installed")
def test_bruhn_joos_bound(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(config, "DATA_DIR", tmp_path)
    value = bruhn_joos.main([])
    assert value == pytest.approx(1.5, abs=1e-3)
    assert "Optimal value:" in capsys.readouterr().out


# --- strong_complete ---

def test_contains_induced_2k2():
    contains = strong_complete.contains_induced_2k2
    assert contains(Graph(4, [(0, 1), (2, 3)]))
    assert not contains(Graph(4, [(0, 1), (2, 3), (0, 2)]))
    assert not contains(Graph(5, [(i, (i + 1) % 5) for i in range(5)]))
    assert contains(Graph(5, [(i, i + 1) for i in range(4)]))
    assert not contains(Graph(3, [(0, 1), (1, 2)]))


def test_strong_complete_problem_structure():
    problem = strong_complete.build_problem(4)
    problem.check()
    assert problem.scale
    assert problem.obj.basis == Basis(strong_complete.F, 4)
    # Only flags that are strong cliques are forbidden away
    forbidden = strong_complete.not_strong_clique(4)
    assert forbidden.data.sum() == 0.0
    assert strong_complete.not_strong_clique(5).data.sum() > 0


# --- strong_density ---

def test_shadow_edges_are_from_x_to_y():
    G = strong_density.G
    C3 = CGraph.with_colors(3)
    shadow = strong_density.SHADOW_EDGE
    assert strong_density.shadow_edges_are_from_x_to_y(G(C3(2, [((0, 1), shadow)]), [0, 1]))
    assert not strong_density.shadow_edges_are_from_x_to_y(G(C3(2, [((0, 1), shadow)]), [0, 0]))
    assert strong_density.shadow_edges_are_from_x_to_y(G(C3(2, [((0, 1), 1)]), [1, 1]))


def test_strong_density_flags():
    F, G = strong_density.F, strong_density.G
    C3 = CGraph.with_colors(3)
    assert F.is_member(F(G(C3(2, [((0, 1), 2)]), [0, 1])))
    # Vertex in Y with no path to X
    assert not F.is_member(F(G(C3(2), [0, 1])))
    # Shadow edge inside X
    assert not F.is_member(F(G(C3(2, [((0, 1), 2)]), [0, 0])))


def test_edge_types_distinct():
    X, Y = strong_density.X, strong_density.Y
    xy = strong_density.edge_type(X, Y)
    xx = strong_density.edge_type(X, X)
    assert xy.size == xx.size == 2
    assert xy != xx
    assert strong_density.edge_type(Y, X) == xy


def test_extension_in_x():
    t = strong_density.edge_type(strong_density.X, strong_density.X)
    q = strong_density.extension_in_x(t)
    flags = q.basis.get()
    for g, c in zip(flags, q.data):
        assert c == (1.0 if g.content.color[2] == strong_density.X else 0.0)


def test_strong_density_problem_structure():
    problem = strong_density.build_problem(0.5)
    problem.check()
    assert not problem.scale
    assert np.all(np.isfinite(problem.obj.data))
