"""Errors raised while reading and validating matrix input.

Every error is detected before elimination starts; once a ``Matrix`` has
been built the rest of the pipeline cannot fail.  All of them derive from
``ValueError`` so callers that already guard input with
``except ValueError`` keep working.
"""


class MatrixError(ValueError):
    """Base class for user-facing input errors."""


class InvalidNumberError(MatrixError):
    """A cell could not be read as an integer, decimal or fraction."""


class DivisionByZeroError(MatrixError, ZeroDivisionError):
    """Zero denominator in a fraction, or division by a zero Rational."""


class DimensionMismatchError(MatrixError):
    """Rows of the input grid have different lengths."""


class DimensionOutOfRangeError(MatrixError):
    """The grid has more rows or columns than allowed."""


class EmptyMatrixError(MatrixError):
    """The grid has no rows, or a row with no entries."""
