"""Gauss–Jordan elimination to reduced row-echelon form."""

"""
``compute_rref`` reduces a clone of the input with partial pivoting and,
when asked, records every elementary row operation it performs so the
reduction can be replayed step by step.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Optional

from matrixspaces.matrix import Matrix
from matrixspaces.rational import ONE, Rational

logger = logging.getLogger(__name__)


class OperationKind(str, enum.Enum):
    SWAP = "swap"
    SCALE = "scale"
    ADD = "add"


@dataclass(frozen=True)
class ElementaryOperation:
    """One row operation with read-only snapshots of the matrix around it.

    ``rows`` holds zero-based indices: ``(i, j)`` for a swap, ``(i,)`` for a
    scale and ``(target, source)`` for an add.  ``scalar`` is ``None`` for
    swaps.
    """

    kind: OperationKind
    rows: tuple
    scalar: Optional[Rational]
    before: Matrix
    after: Matrix

    @property
    def notation(self) -> str:
        """Elementary-matrix notation, rows 1-indexed."""
        if self.kind is OperationKind.SWAP:
            i, j = self.rows
            return f"E_{{{i + 1}{j + 1}}}"
        if self.kind is OperationKind.SCALE:
            (i,) = self.rows
            return f"E_{{({self.scalar.to_latex()})}}^{{{i + 1}}}"
        target, source = self.rows
        return f"E_{{({self.scalar.to_latex()})}}^{{{target + 1}{source + 1}}}"

    @property
    def description(self) -> str:
        if self.kind is OperationKind.SWAP:
            i, j = self.rows
            return f"Swap row {i + 1} and row {j + 1}"
        if self.kind is OperationKind.SCALE:
            (i,) = self.rows
            return f"Multiply row {i + 1} by {self.scalar.to_display()}"
        target, source = self.rows
        return (f"Multiply row {source + 1} by {self.scalar.to_display()} "
                f"and add to row {target + 1}")

    @property
    def params(self) -> dict:
        if self.kind is OperationKind.SWAP:
            return {"row1": self.rows[0], "row2": self.rows[1]}
        if self.kind is OperationKind.SCALE:
            return {"row": self.rows[0], "scalar": self.scalar.to_display()}
        return {
            "target_row": self.rows[0],
            "source_row": self.rows[1],
            "scalar": self.scalar.to_display(),
        }


@dataclass(frozen=True)
class RREFResult:
    reduced: Matrix
    pivot_columns: tuple
    operations: Optional[tuple] = None

    @property
    def rank(self) -> int:
        return len(self.pivot_columns)


def _apply(m: Matrix, log: Optional[list], kind: OperationKind,
           rows: tuple, scalar: Optional[Rational] = None) -> None:
    """Perform one row operation on *m*, appending it to *log* if tracking."""
    before = m.clone().freeze() if log is not None else None
    if kind is OperationKind.SWAP:
        m.swap_rows(*rows)
    elif kind is OperationKind.SCALE:
        m.scale_row(rows[0], scalar)
    else:
        m.add_scaled_row(rows[0], rows[1], scalar)
    if log is not None:
        log.append(ElementaryOperation(kind, rows, scalar, before, m.clone().freeze()))


def _find_pivot_row(m: Matrix, col: int, start: int) -> int:
    """First row in ``[start, rows)`` with the largest ``|entry|`` in *col*."""
    pivot_row = start
    best = abs(m.get(start, col))
    for row in range(start + 1, m.rows):
        value = abs(m.get(row, col))
        if value > best:
            pivot_row, best = row, value
    return pivot_row


def compute_rref(matrix: Matrix, track_operations: bool = False) -> RREFResult:
    """Reduce *matrix* to RREF without modifying it.

    Returns the reduced matrix, the ascending pivot columns and, when
    *track_operations* is set, the ordered tuple of operations performed
    (``None`` otherwise).
    """
    m = matrix.clone()
    log = [] if track_operations else None
    pivots = []
    current_row = 0

    for col in range(m.cols):
        if current_row >= m.rows:
            break

        pivot_row = _find_pivot_row(m, col, current_row)
        if m.get(pivot_row, col).is_zero():
            continue

        if pivot_row != current_row:
            _apply(m, log, OperationKind.SWAP, (current_row, pivot_row))

        pivot = m.get(current_row, col)
        if pivot != ONE:
            _apply(m, log, OperationKind.SCALE, (current_row,), pivot.reciprocal())

        for row in range(m.rows):
            entry = m.get(row, col)
            if row != current_row and not entry.is_zero():
                _apply(m, log, OperationKind.ADD, (row, current_row), -entry)

        pivots.append(col)
        current_row += 1

    logger.debug("RREF of %dx%d matrix: pivots=%s", m.rows, m.cols, pivots)
    return RREFResult(
        reduced=m.freeze(),
        pivot_columns=tuple(pivots),
        operations=tuple(log) if log is not None else None,
    )


def compute_rank(matrix: Matrix) -> int:
    return compute_rref(matrix).rank
