"""The four fundamental subspaces of a matrix."""

"""
All bases are derived from a single RREF computation:

- column space     — pivot columns of the *original* matrix
- row space        — non-zero rows of the RREF
- null space       — one vector per free column, by back-substitution
- left null space  — null space of the transpose
"""

from dataclasses import dataclass
from typing import Optional

from matrixspaces.matrix import Matrix
from matrixspaces.rational import ONE, ZERO
from matrixspaces.rref import RREFResult, compute_rref


@dataclass(frozen=True)
class Subspace:
    name: str
    ambient_dimension: int
    basis: tuple = ()

    @property
    def dimension(self) -> int:
        return len(self.basis)

    @property
    def description(self) -> str:
        return f"Subspace of R^{self.ambient_dimension}"

    def is_trivial(self) -> bool:
        return not self.basis


@dataclass(frozen=True)
class FundamentalSubspaces:
    column_space: Subspace
    row_space: Subspace
    null_space: Subspace
    left_null_space: Subspace


@dataclass(frozen=True)
class DimensionCheck:
    rank_plus_nullity: str
    rank_plus_left_nullity: str
    valid: bool


def column_space(matrix: Matrix, rref: RREFResult) -> Subspace:
    basis = tuple(matrix.column(j) for j in rref.pivot_columns)
    return Subspace("Column space", matrix.rows, basis)


def row_space(rref: RREFResult) -> Subspace:
    reduced = rref.reduced
    return Subspace("Row space", reduced.cols, tuple(reduced.nonzero_rows()))


def _kernel_basis(reduced: Matrix, pivots: tuple) -> tuple:
    """Basis of ``{x : R x = 0}`` for a matrix *reduced* already in RREF."""
    n = reduced.cols
    free_columns = [j for j in range(n) if j not in pivots]

    basis = []
    for free in free_columns:
        vector = [ZERO] * n
        vector[free] = ONE
        # Pivot variables, last pivot first.
        for i in range(len(pivots) - 1, -1, -1):
            p = pivots[i]
            total = ZERO
            for j in range(p + 1, n):
                total = total + reduced.get(i, j) * vector[j]
            vector[p] = -total
        basis.append(tuple(vector))
    return tuple(basis)


def null_space(matrix: Matrix, rref: Optional[RREFResult] = None) -> Subspace:
    if rref is None:
        rref = compute_rref(matrix)
    return Subspace("Null space", matrix.cols,
                    _kernel_basis(rref.reduced, rref.pivot_columns))


def left_null_space(matrix: Matrix) -> Subspace:
    transposed = matrix.transpose()
    rref = compute_rref(transposed)
    return Subspace("Left null space", matrix.rows,
                    _kernel_basis(rref.reduced, rref.pivot_columns))


def compute_subspaces(matrix: Matrix,
                      rref: Optional[RREFResult] = None) -> FundamentalSubspaces:
    """Bases for all four subspaces, reusing *rref* when the caller has one."""
    if rref is None:
        rref = compute_rref(matrix)
    return FundamentalSubspaces(
        column_space=column_space(matrix, rref),
        row_space=row_space(rref),
        null_space=null_space(matrix, rref),
        left_null_space=left_null_space(matrix),
    )


def check_dimensions(spaces: FundamentalSubspaces, rank: int,
                     rows: int, cols: int) -> DimensionCheck:
    """Rank–nullity summary.  A failed check is reported, never raised."""
    valid = (
        spaces.column_space.dimension == rank
        and spaces.row_space.dimension == rank
        and spaces.null_space.dimension == cols - rank
        and spaces.left_null_space.dimension == rows - rank
    )
    return DimensionCheck(
        rank_plus_nullity=f"{rank} + {cols - rank} = {cols} (columns)",
        rank_plus_left_nullity=f"{rank} + {rows - rank} = {rows} (rows)",
        valid=valid,
    )
