"""Rectangular grid of Rationals with elementary row operations."""

from collections.abc import Iterable

import numpy as np
import sympy

from matrixspaces.errors import (
    DimensionMismatchError,
    DivisionByZeroError,
    DimensionOutOfRangeError,
    EmptyMatrixError,
    InvalidNumberError,
)
from matrixspaces.rational import ZERO, Rational, to_rational
from matrixspaces.settings import MAX_DIMENSION


class Matrix:
    """A validated ``rows × cols`` grid of ``Rational`` values.

    The grid is owned exclusively: ``clone`` and ``transpose`` never share
    row lists with the source.  Row operations mutate in place unless the
    matrix has been frozen; clones of a frozen matrix are writable again.
    """

    def __init__(self, data, max_size: int = MAX_DIMENSION):
        grid = _as_rows(data)
        if not grid or any(len(row) == 0 for row in grid):
            raise EmptyMatrixError("Matrix cannot be empty.")
        cols = len(grid[0])
        if any(len(row) != cols for row in grid):
            raise DimensionMismatchError("All rows must have the same number of columns.")
        if len(grid) > max_size or cols > max_size:
            raise DimensionOutOfRangeError(
                f"Matrix dimensions must be between 1×1 and {max_size}×{max_size} "
                f"(got {len(grid)}×{cols})."
            )

        self._data = []
        for i, row in enumerate(grid):
            converted = []
            for j, value in enumerate(row):
                try:
                    converted.append(to_rational(value))
                except InvalidNumberError as e:
                    raise InvalidNumberError(
                        f"Invalid value at position ({i + 1}, {j + 1}): {e}") from e
                except DivisionByZeroError as e:
                    raise DivisionByZeroError(
                        f"Invalid value at position ({i + 1}, {j + 1}): {e}") from e
            self._data.append(converted)
        self._read_only = False

    @classmethod
    def _from_rationals(cls, grid) -> "Matrix":
        """Wrap an already-validated grid of Rationals without re-checking it."""
        m = cls.__new__(cls)
        m._data = [list(row) for row in grid]
        m._read_only = False
        return m

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        return cls._from_rationals([[ZERO] * cols for _ in range(rows)])

    # ── Shape and access ────────────────────────────────────────────────

    @property
    def rows(self) -> int:
        return len(self._data)

    @property
    def cols(self) -> int:
        return len(self._data[0])

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def get(self, i: int, j: int) -> Rational:
        return self._data[i][j]

    def set(self, i: int, j: int, value) -> None:
        self._check_writable()
        self._data[i][j] = to_rational(value)

    def __getitem__(self, index):
        i, j = index
        return self._data[i][j]

    def __setitem__(self, index, value):
        i, j = index
        self.set(i, j, value)

    def row(self, i: int) -> tuple:
        return tuple(self._data[i])

    def column(self, j: int) -> tuple:
        return tuple(row[j] for row in self._data)

    def clone(self) -> "Matrix":
        return Matrix._from_rationals(self._data)

    def transpose(self) -> "Matrix":
        return Matrix._from_rationals(
            [[self._data[i][j] for i in range(self.rows)] for j in range(self.cols)]
        )

    def is_zero_row(self, i: int) -> bool:
        return all(v.is_zero() for v in self._data[i])

    def nonzero_rows(self) -> list[tuple]:
        return [self.row(i) for i in range(self.rows) if not self.is_zero_row(i)]

    def multiply_vector(self, vector) -> tuple:
        """Exact product ``A · x`` for a vector of length ``cols``."""
        if len(vector) != self.cols:
            raise DimensionMismatchError(
                f"Vector of length {len(vector)} cannot multiply a "
                f"{self.rows}×{self.cols} matrix.")
        x = [to_rational(v) for v in vector]
        return tuple(sum((a * b for a, b in zip(row, x)), ZERO) for row in self._data)

    # ── Read-only snapshots ─────────────────────────────────────────────

    @property
    def is_read_only(self) -> bool:
        return self._read_only

    def freeze(self) -> "Matrix":
        """Make this matrix read-only in place and return it."""
        self._read_only = True
        return self

    def _check_writable(self) -> None:
        if self._read_only:
            raise TypeError("Matrix is read-only; clone() it to get a writable copy.")

    # ── Elementary row operations (in place) ────────────────────────────

    def swap_rows(self, i: int, j: int) -> None:
        self._check_writable()
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def scale_row(self, i: int, scalar) -> None:
        """Multiply row *i* by *scalar*.  The RREF engine never passes zero."""
        self._check_writable()
        c = to_rational(scalar)
        self._data[i] = [v * c for v in self._data[i]]

    def add_scaled_row(self, target: int, source: int, scalar) -> None:
        """``row[target] += scalar · row[source]``."""
        self._check_writable()
        c = to_rational(scalar)
        src = self._data[source]
        self._data[target] = [t + c * s for t, s in zip(self._data[target], src)]

    # ── Conversions ─────────────────────────────────────────────────────

    def to_numeric(self) -> np.ndarray:
        """Lossy float copy, for plotting and numeric display."""
        return np.array([[float(v) for v in row] for row in self._data], dtype=np.float64)

    def to_display(self) -> list[list[str]]:
        return [[v.to_display() for v in row] for row in self._data]

    def to_sympy(self) -> sympy.Matrix:
        return sympy.Matrix([[v.to_sympy() for v in row] for row in self._data])

    def to_latex(self) -> str:
        return sympy.latex(self.to_sympy(), mat_str="bmatrix", mat_delim="")

    def to_lists(self) -> list[list[Rational]]:
        return [list(row) for row in self._data]

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    __hash__ = None

    def __repr__(self):
        return f"Matrix({self.to_display()!r})"

    def __str__(self):
        width = max(len(s) for row in self.to_display() for s in row)
        return "\n".join(
            "[" + "  ".join(s.rjust(width) for s in row) + "]"
            for row in self.to_display()
        )


def _as_rows(data) -> list[list]:
    """Materialise *data* as a list of row lists, rejecting non-grid shapes."""
    if data is None:
        raise EmptyMatrixError("Matrix cannot be empty.")
    if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
        raise DimensionMismatchError("Matrix must be a list of rows.")
    grid = []
    for i, row in enumerate(data):
        if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
            raise DimensionMismatchError(f"Row {i + 1} must be a list of cells.")
        grid.append(list(row))
    return grid
