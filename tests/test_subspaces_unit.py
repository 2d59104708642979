"""Tests for the four fundamental subspaces and the dimension check."""

import random

import pytest
import sympy

from matrixspaces.matrix import Matrix
from matrixspaces.rational import Rational
from matrixspaces.rref import compute_rref
from matrixspaces.subspaces import (
    FundamentalSubspaces,
    Subspace,
    check_dimensions,
    column_space,
    compute_subspaces,
    left_null_space,
    null_space,
    row_space,
)


def _vec(*values):
    return tuple(Rational(v) if isinstance(v, int) else v for v in values)


def _random_matrices(count=40, seed=1234):
    rng = random.Random(seed)
    out = []
    for _ in range(count):
        rows, cols = rng.randint(1, 5), rng.randint(1, 5)
        # Small range keeps rank deficiency common.
        out.append([[rng.randint(-2, 2) for _ in range(cols)] for _ in range(rows)])
    return out


# ── Scenarios ───────────────────────────────────────────────────────────

def test_rank_one_bases():
    m = Matrix([[1, 2, 3], [2, 4, 6], [3, 6, 9]])
    spaces = compute_subspaces(m)

    # Column space comes from the original matrix, not from the RREF.
    assert spaces.column_space.basis == (_vec(1, 2, 3),)
    assert spaces.row_space.basis == (_vec(1, 2, 3),)
    assert spaces.null_space.basis == (_vec(-2, 1, 0), _vec(-3, 0, 1))
    assert spaces.left_null_space.basis == (_vec(-2, 1, 0), _vec(-3, 0, 1))


def test_two_by_three_bases():
    m = Matrix([[1, 2, 3], [4, 5, 6]])
    spaces = compute_subspaces(m)
    assert spaces.column_space.basis == (_vec(1, 4), _vec(2, 5))
    assert spaces.row_space.basis == (_vec(1, 0, -1), _vec(0, 1, 2))
    assert spaces.null_space.basis == (_vec(1, -2, 1),)
    assert spaces.left_null_space.is_trivial()
    assert spaces.left_null_space.dimension == 0


def test_identity_has_trivial_kernels():
    m = Matrix([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    spaces = compute_subspaces(m)
    assert spaces.column_space.dimension == 3
    assert spaces.null_space.basis == ()
    assert spaces.left_null_space.basis == ()
    assert spaces.null_space.description == "Subspace of R^3"


def test_fractional_null_space():
    m = Matrix([[2, 1], [4, 2]])
    spaces = compute_subspaces(m)
    assert spaces.null_space.basis == ((Rational(-1, 2), Rational(1)),)
    assert spaces.left_null_space.basis == ((Rational(-2), Rational(1)),)


def test_ambient_dimensions():
    m = Matrix([[1, 2, 3, 4], [0, 0, 1, 1]])
    spaces = compute_subspaces(m)
    assert spaces.column_space.ambient_dimension == 2
    assert spaces.row_space.ambient_dimension == 4
    assert spaces.null_space.ambient_dimension == 4
    assert spaces.left_null_space.ambient_dimension == 2
    assert spaces.left_null_space.description == "Subspace of R^2"


def test_individual_extractors_share_rref():
    m = Matrix([[0, 1, 2], [0, 2, 4]])
    rref = compute_rref(m)
    assert column_space(m, rref).basis == (_vec(1, 2),)
    assert row_space(rref).basis == (_vec(0, 1, 2),)
    assert null_space(m, rref).basis == (_vec(1, 0, 0), _vec(0, -2, 1))
    assert null_space(m).basis == null_space(m, rref).basis
    assert left_null_space(m).basis == (_vec(-2, 1),)


# ── Properties ──────────────────────────────────────────────────────────

@pytest.mark.parametrize("data", _random_matrices())
def test_null_space_vectors_are_exact_solutions(data):
    m = Matrix(data)
    spaces = compute_subspaces(m)
    for x in spaces.null_space.basis:
        assert all(v.is_zero() for v in m.multiply_vector(x))
    for y in spaces.left_null_space.basis:
        assert all(v.is_zero() for v in m.transpose().multiply_vector(y))


@pytest.mark.parametrize("data", _random_matrices())
def test_rank_nullity(data):
    m = Matrix(data)
    rank = compute_rref(m).rank
    spaces = compute_subspaces(m)
    assert spaces.column_space.dimension == rank == spaces.row_space.dimension
    assert spaces.column_space.dimension + spaces.null_space.dimension == m.cols
    assert spaces.row_space.dimension + spaces.left_null_space.dimension == m.rows
    assert check_dimensions(spaces, rank, m.rows, m.cols).valid


@pytest.mark.parametrize("data", _random_matrices(seed=99))
def test_dimensions_match_sympy(data):
    m = Matrix(data)
    sym = m.to_sympy()
    spaces = compute_subspaces(m)
    assert spaces.null_space.dimension == len(sym.nullspace())
    assert spaces.left_null_space.dimension == len(sym.T.nullspace())
    assert spaces.column_space.dimension == sym.rank()


@pytest.mark.parametrize(
    "data",
    [
        [[2, 1], [1, 1]],
        [[0, 1, 0], [0, 0, 1], [1, 0, 0]],
        [["1/2", 3, 0], [1, 0, -1], [2, 2, 2]],
        [[1, 1, 1, 1], [0, 1, 1, 1], [0, 0, 1, 1], [0, 0, 0, 1]],
    ],
)
def test_invertible_matrices(data):
    m = Matrix(data)
    assert m.to_sympy().det() != 0
    rref = compute_rref(m)
    n = m.rows
    assert rref.rank == n
    assert rref.reduced == Matrix([[1 if i == j else 0 for j in range(n)] for i in range(n)])
    spaces = compute_subspaces(m, rref)
    assert spaces.null_space.dimension == 0
    assert spaces.left_null_space.dimension == 0


# ── Dimension check ─────────────────────────────────────────────────────

def test_check_strings():
    m = Matrix([[1, 2, 3], [4, 5, 6]])
    check = check_dimensions(compute_subspaces(m), 2, 2, 3)
    assert check.rank_plus_nullity == "2 + 1 = 3 (columns)"
    assert check.rank_plus_left_nullity == "2 + 0 = 2 (rows)"
    assert check.valid is True


def test_check_reports_mismatch_without_raising():
    empty = Subspace("Null space", 3)
    bogus = FundamentalSubspaces(empty, empty, empty, empty)
    check = check_dimensions(bogus, rank=1, rows=2, cols=3)
    assert check.valid is False
    assert check.rank_plus_nullity == "1 + 2 = 3 (columns)"
