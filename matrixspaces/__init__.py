"""MatrixSpaces: exact RREF and the four fundamental subspaces."""

from matrixspaces.errors import (
    MatrixError,
    InvalidNumberError,
    DivisionByZeroError,
    DimensionMismatchError,
    DimensionOutOfRangeError,
    EmptyMatrixError,
)
from matrixspaces.rational import Rational, to_rational
from matrixspaces.matrix import Matrix
from matrixspaces.rref import (
    ElementaryOperation,
    OperationKind,
    RREFResult,
    compute_rank,
    compute_rref,
)
from matrixspaces.subspaces import (
    DimensionCheck,
    FundamentalSubspaces,
    Subspace,
    check_dimensions,
    compute_subspaces,
)
from matrixspaces.report import Report, build_plain_text, build_report
from matrixspaces.engine import compute_matrix, compute_report, get_examples

__version__ = "1.0.0"
