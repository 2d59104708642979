"""Matrix computation engine: raw grid in, report out."""

"""
Validates a raw grid of cells (numbers or strings such as ``"3"``,
``"-0.25"`` or ``"2/3"``), reduces it to RREF and extracts the four
fundamental subspaces.  Input errors are raised before any computation
starts; after that the pipeline cannot fail.
"""

import copy
import logging
import time

from matrixspaces.errors import MatrixError
from matrixspaces.matrix import Matrix
from matrixspaces.report import Report, build_report
from matrixspaces.rref import compute_rref
from matrixspaces.settings import MAX_DIMENSION
from matrixspaces.subspaces import check_dimensions, compute_subspaces

logger = logging.getLogger(__name__)


EXAMPLE_MATRICES = [
    {
        "name": "2×3 Matrix",
        "description": "Simple rectangular matrix",
        "matrix": [[1, 2, 3],
                   [4, 5, 6]],
    },
    {
        "name": "3×3 Identity",
        "description": "Full rank square matrix",
        "matrix": [[1, 0, 0],
                   [0, 1, 0],
                   [0, 0, 1]],
    },
    {
        "name": "3×3 Singular",
        "description": "Rank-deficient matrix",
        "matrix": [[1, 2, 3],
                   [2, 4, 6],
                   [3, 6, 9]],
    },
    {
        "name": "4×4 Mixed",
        "description": "Larger matrix with a dependent column",
        "matrix": [[1, 0, 2, 1],
                   [0, 1, 1, 0],
                   [2, 1, 5, 2],
                   [1, 1, 4, 1]],
    },
    {
        "name": "Projection Matrix",
        "description": "Rank 2 projection",
        "matrix": [[1, 0, 1],
                   [0, 1, 1],
                   [1, 1, 2]],
    },
]


# ── Grid helpers (for editors that hold raw strings) ────────────────────

def fill_zeros(grid) -> list[list]:
    """Return a copy of *grid* with blank cells replaced by ``"0"``."""
    return [
        ["0" if isinstance(cell, str) and not cell.strip() else cell for cell in row]
        for row in grid
    ]


def resize_grid(grid, rows: int, cols: int) -> list[list]:
    """Resize *grid*, keeping overlapping cells; new cells are blank.

    Target dimensions are clamped to ``1..MAX_DIMENSION``.
    """
    rows = max(1, min(MAX_DIMENSION, rows))
    cols = max(1, min(MAX_DIMENSION, cols))
    result = [["" for _ in range(cols)] for _ in range(rows)]
    for i, row in enumerate((grid or [])[:rows]):
        for j, cell in enumerate(list(row)[:cols]):
            result[i][j] = cell
    return result


# ── Main public entry points ────────────────────────────────────────────

def parse_matrix(data) -> Matrix:
    """Validate *data* and convert every cell to an exact Rational."""
    try:
        return Matrix(data)
    except MatrixError as e:
        logger.info("Rejected matrix input: %s", e)
        raise


def compute_report(data, track_operations: bool = True) -> Report:
    """
    Compute RREF, rank and the four fundamental subspaces of *data*.

    *data* may be a raw grid or an existing ``Matrix``; the caller's object
    is never modified.  Raises a ``MatrixError`` subclass for bad input.
    """
    t_start = time.perf_counter()

    matrix = data.clone() if isinstance(data, Matrix) else parse_matrix(data)
    matrix.freeze()
    logger.debug("Computing report for %dx%d matrix", matrix.rows, matrix.cols)

    rref = compute_rref(matrix, track_operations=track_operations)
    spaces = compute_subspaces(matrix, rref)
    check = check_dimensions(spaces, rref.rank, matrix.rows, matrix.cols)
    if not check.valid:
        logger.warning("Dimension check failed for %dx%d matrix of rank %d",
                       matrix.rows, matrix.cols, rref.rank)

    runtime_ms = round((time.perf_counter() - t_start) * 1000, 2)
    logger.debug("Rank %d, %d operations, %.2f ms", rref.rank,
                 len(rref.operations or ()), runtime_ms)
    return build_report(matrix, rref, spaces, check, runtime_ms)


def compute_matrix(data, track_operations: bool = True) -> dict:
    """Like ``compute_report`` but returns a success/error envelope.

    ``{"success": True, "data": {...}}`` on success,
    ``{"success": False, "error": message}`` for invalid input.
    """
    try:
        report = compute_report(data, track_operations=track_operations)
    except MatrixError as e:
        return {"success": False, "error": str(e)}
    return {"success": True, "data": report.to_dict()}


def get_examples() -> dict:
    return {"examples": copy.deepcopy(EXAMPLE_MATRICES)}
