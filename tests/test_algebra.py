"""Tests for local_flags.algebra module."""
import numpy as np
import pytest

from local_flags.algebra import (
    Basis,
    Ineq,
    MulAndUnlabel,
    QFlag,
    Type,
    flags_are_nonnegative,
    total_sum_is_one,
    unlabel_matrix,
)
from local_flags.flags import Graph


def edge_density():
    return Basis(Graph, 2).qflag_from_indicator(lambda g, _: g.edge(0, 1))


def vertex_type():
    return Type.from_flag(Graph(1))


# --- QFlag arithmetic ---

def test_qflag_shape_checked():
    with pytest.raises(ValueError):
        QFlag(Basis(Graph, 3), [1.0, 2.0])


def test_qflag_linear_ops():
    e = edge_density()
    assert np.array_equal((e + e).data, [0.0, 2.0])
    assert np.array_equal((e - e).data, [0.0, 0.0])
    assert np.array_equal((-e).data, [-0.0, -1.0])
    assert np.array_equal((3 * e).data, [0.0, 3.0])
    assert np.array_equal((e / 2).data, [0.0, 0.5])


def test_qflag_mismatched_bases():
    with pytest.raises(ValueError):
        edge_density() + QFlag(Basis(Graph, 3), np.ones(4))


def test_product_of_units_is_unit():
    ones = QFlag(Basis(Graph, 2), np.ones(2))
    prod = ones * ones
    assert prod.basis == Basis(Graph, 4)
    assert np.allclose(prod.data, 1.0)


def test_product_of_edge_densities():
    e = edge_density()
    prod = e * e
    basis = prod.basis
    assert prod.data[basis.index(Graph(4, [(i, j) for i in range(4) for j in range(i + 1, 4)]))] == pytest.approx(1.0)
    assert prod.data[basis.index(Graph(4))] == 0.0
    # One of the three splits of a perfect matching gives two edges
    assert prod.data[basis.index(Graph(4, [(0, 1), (2, 3)]))] == pytest.approx(1 / 3)


def test_pow_zero_is_type_unit():
    vt = vertex_type()
    ext = Graph.extension(vt, 0)
    unit = ext ** 0
    assert unit.basis == Basis(Graph, 1, vt)
    assert np.array_equal(unit.data, [1.0])
    with pytest.raises(ValueError):
        ext ** -1


def test_pow_matches_product():
    ext = Graph.extension(vertex_type(), 0)
    assert np.allclose((ext ** 2).data, (ext * ext).data)


def test_untype_sum_of_typed_flags():
    b = Basis(Graph, 3, vertex_type())
    q = QFlag(b, np.ones(len(b))).untype()
    assert q.basis == Basis(Graph, 3)
    assert np.allclose(q.data, 1.0)


def test_untype_edge_extension():
    # [[ext(vertex, 0)]] is the edge density
    q = Graph.extension(vertex_type(), 0).untype()
    assert np.allclose(q.data, edge_density().data)


def test_untype_untyped_is_identity():
    e = edge_density()
    assert e.untype() is e


def test_unlabel_matrix_rejects_typed_output():
    b = Basis(Graph, 2, vertex_type())
    with pytest.raises(ValueError):
        unlabel_matrix(b, b)


# --- constraints ---

def test_at_least_and_at_most():
    e = edge_density()
    (vec, bound), = e.at_least(0.5).rows
    assert np.array_equal(vec, e.data) and bound == 0.5
    (vec, bound), = e.at_most(0.5).rows
    assert np.array_equal(vec, -e.data) and bound == -0.5


def test_equal_is_equality():
    ineq = edge_density().equal(0.25)
    assert ineq.equality
    assert len(ineq) == 1


def test_flags_are_nonnegative():
    ineq = flags_are_nonnegative(Basis(Graph, 3))
    assert len(ineq) == 4
    assert all(bound == 0.0 for _, bound in ineq.rows)


def test_total_sum_is_one():
    ineq = total_sum_is_one(Basis(Graph, 3))
    assert ineq.equality
    (vec, bound), = ineq.rows
    assert np.array_equal(vec, np.ones(4)) and bound == 1.0


def test_multiply_and_unlabel_rows():
    vt = vertex_type()
    one = QFlag(Basis(Graph, 2, vt), np.ones(2))
    lifted = one.non_negative().multiply_and_unlabel(Basis(Graph, 3))
    assert lifted.basis == Basis(Graph, 3)
    # One row per flag of Basis(Graph, 2, vertex)
    assert len(lifted) == 2
    total = sum(vec for vec, _ in lifted.rows)
    assert np.allclose(total, 1.0)
    assert all(bound == 0.0 for _, bound in lifted.rows)


def test_multiply_and_unlabel_folds_bound():
    vt = vertex_type()
    ext = Graph.extension(vt, 0)
    a = ext.at_least(0.5).multiply_and_unlabel(Basis(Graph, 2))
    b = (ext - QFlag(ext.basis, np.ones(len(ext.basis))) * 0.5).non_negative().multiply_and_unlabel(Basis(Graph, 2))
    assert len(a) == len(b) == 1
    assert np.allclose(a.rows[0][0], b.rows[0][0])


def test_multiply_and_unlabel_needs_untyped_target():
    vt = vertex_type()
    ineq = Graph.extension(vt, 0).non_negative()
    with pytest.raises(ValueError):
        ineq.multiply_and_unlabel(Basis(Graph, 3, vt))
    with pytest.raises(ValueError):
        ineq.multiply_and_unlabel(Basis(Graph, 1))


def test_ineq_repr():
    ineq = Ineq(Basis(Graph, 2), name="test")
    assert "test" in repr(ineq)
    assert len(ineq) == 0


# --- Cauchy-Schwarz ---

def test_all_cs_counts():
    # n = 4: k = 0 (m = 2) and k = 2 (m = 3, two types)
    blocks = Basis(Graph, 4).all_cs()
    assert len(blocks) == 3
    assert [b.basis.size for b in blocks] == [2, 3, 3]
    # n = 3: k = 1 (m = 2, one type)
    blocks = Basis(Graph, 3).all_cs()
    assert len(blocks) == 1
    assert blocks[0].basis.t.size == 1
    assert len(blocks[0]) == 2


def test_all_cs_typed_rejected():
    with pytest.raises(ValueError):
        Basis(Graph, 3, vertex_type()).all_cs()


def test_mul_and_unlabel_size_checked():
    with pytest.raises(ValueError):
        MulAndUnlabel(Basis(Graph, 2), Basis(Graph, 3))


def test_cs_table_is_symmetric():
    for block in Basis(Graph, 4).all_cs():
        for entries in block.table():
            for (i, j), w in entries.items():
                assert entries[(j, i)] == pytest.approx(w)


# --- bases ---

def test_basis_product_size():
    vt = vertex_type()
    assert Basis(Graph, 3, vt) * Basis(Graph, 2, vt) == Basis(Graph, 4, vt)
    with pytest.raises(ValueError):
        Basis(Graph, 3, vt) * Basis(Graph, 2)


def test_basis_type_validation():
    with pytest.raises(ValueError):
        Basis(Graph, 1, Type.from_flag(Graph(2)))


def test_basis_print_concise():
    assert Basis(Graph, 3).print_concise() == "Graph[3]"
    assert "Graph[3; " in Basis(Graph, 3, vertex_type()).print_concise()


def test_basis_index_unknown_flag():
    with pytest.raises(ValueError):
        Basis(Graph, 3).index(Graph(2))
