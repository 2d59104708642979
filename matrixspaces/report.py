"""Result formatting: the report object handed to presentation layers."""

"""
``Report`` bundles everything one computation produced.  ``to_dict`` turns
it into the JSON-ready structure used by the HTTP API, and
``build_plain_text`` renders the same data as a readable solution trail for
the terminal.
"""

from dataclasses import dataclass

import numpy as np
import sympy

from matrixspaces.matrix import Matrix
from matrixspaces.rref import ElementaryOperation, RREFResult
from matrixspaces.subspaces import DimensionCheck, FundamentalSubspaces, Subspace


# ── Numeric formatting helpers ──────────────────────────────────────────

def _fmt_num(value: float, max_decimals: int = 4) -> str:
    """Format a float compactly: ``7`` not ``7.0``, no trailing zeros."""
    if abs(value - round(value)) < 1e-12:
        return str(int(round(value)))
    return f"{value:.{max_decimals}f}".rstrip("0").rstrip(".")


def _numeric_vectors(basis: tuple) -> list[list[float]]:
    if not basis:
        return []
    return np.array([[float(v) for v in vec] for vec in basis], dtype=np.float64).tolist()


def _vector_latex(vector: tuple) -> str:
    column = sympy.Matrix([v.to_sympy() for v in vector])
    return sympy.latex(column, mat_str="bmatrix", mat_delim="")


def _format_vector(vector: tuple) -> str:
    return "(" + ", ".join(v.to_display() for v in vector) + ")"


def _format_rows(display: list[list[str]], indent: str = "    ") -> list[str]:
    """Right-aligned bracketed rows for a grid of display strings."""
    width = max(len(s) for row in display for s in row)
    return [indent + "[" + "  ".join(s.rjust(width) for s in row) + "]" for row in display]


# ── Report ──────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Report:
    matrix: Matrix
    rref: RREFResult
    spaces: FundamentalSubspaces
    dimension_check: DimensionCheck
    runtime_ms: float = 0.0

    @property
    def rank(self) -> int:
        return self.rref.rank

    @property
    def operations(self):
        return self.rref.operations

    def subspaces(self) -> list[Subspace]:
        s = self.spaces
        return [s.column_space, s.row_space, s.null_space, s.left_null_space]

    def to_dict(self) -> dict:
        """JSON-ready view: numeric, exact display and LaTeX forms side by side."""
        reduced = self.rref.reduced
        result = {
            "matrix": {
                "data": self.matrix.to_numeric().tolist(),
                "display": self.matrix.to_display(),
                "latex": self.matrix.to_latex(),
                "rows": self.matrix.rows,
                "cols": self.matrix.cols,
            },
            "rank": self.rank,
            "rref": {
                "matrix": reduced.to_numeric().tolist(),
                "display": reduced.to_display(),
                "latex": reduced.to_latex(),
                "pivots": list(self.rref.pivot_columns),
                "pivots_display": [p + 1 for p in self.rref.pivot_columns],
            },
            "column_space": _subspace_dict(self.spaces.column_space),
            "row_space": _subspace_dict(self.spaces.row_space),
            "null_space": _subspace_dict(self.spaces.null_space),
            "left_null_space": _subspace_dict(self.spaces.left_null_space),
            "dimension_check": {
                "rank_plus_nullity": self.dimension_check.rank_plus_nullity,
                "rank_plus_left_nullity": self.dimension_check.rank_plus_left_nullity,
                "valid": self.dimension_check.valid,
            },
            "summary": {
                "total_steps": len(self.operations or ()),
                "validation_status": "pass" if self.dimension_check.valid else "fail",
                "runtime_ms": self.runtime_ms,
                "library": f"SymPy {sympy.__version__}",
            },
        }
        if self.operations is not None:
            result["operations"] = [_operation_dict(op) for op in self.operations]
        return result


def _subspace_dict(space: Subspace) -> dict:
    return {
        "basis": _numeric_vectors(space.basis),
        "display": [[v.to_display() for v in vec] for vec in space.basis],
        "latex": [_vector_latex(vec) for vec in space.basis],
        "dimension": space.dimension,
        "description": space.description,
    }


def _operation_dict(op: ElementaryOperation) -> dict:
    return {
        "type": op.kind.value,
        "notation": op.notation,
        "description": op.description,
        "params": op.params,
        "matrix_before": op.before.to_display(),
        "matrix_after": op.after.to_display(),
    }


def build_report(matrix: Matrix, rref: RREFResult, spaces: FundamentalSubspaces,
                 check: DimensionCheck, runtime_ms: float = 0.0) -> Report:
    """Bundle the results; the report keeps a read-only copy of *matrix*."""
    if not matrix.is_read_only:
        matrix = matrix.clone().freeze()
    return Report(matrix=matrix, rref=rref, spaces=spaces,
                  dimension_check=check, runtime_ms=runtime_ms)


# ── Plain-text trail ────────────────────────────────────────────────────

def build_plain_text(report: Report, show_steps: bool = True,
                     decimals: int = 4) -> str:
    """Render *report* as a readable trail for the terminal or clipboard."""
    m = report.matrix
    lines: list[str] = []
    lines.append("=" * 56)
    lines.append("  MatrixSpaces — Fundamental Subspaces")
    lines.append("=" * 56)

    # GIVEN
    lines.append("\n── GIVEN ──────────────────────────────────")
    lines.append(f"  A ({m.rows}×{m.cols}):")
    lines.extend(_format_rows(m.to_display()))

    # STEPS
    if show_steps and report.operations is not None:
        lines.append("\n── ROW OPERATIONS ─────────────────────────")
        if not report.operations:
            lines.append("  Already in reduced row-echelon form.")
        for num, op in enumerate(report.operations, start=1):
            lines.append(f"\n  Step {num}: {op.description}")
            lines.extend(_format_rows(op.after.to_display()))

    # RREF
    pivots = ", ".join(str(p + 1) for p in report.rref.pivot_columns) or "none"
    lines.append("\n── RREF ───────────────────────────────────")
    lines.extend(_format_rows(report.rref.reduced.to_display()))
    lines.append(f"  Rank: {report.rank}")
    lines.append(f"  Pivot columns: {pivots}")

    # SUBSPACES
    lines.append("\n── SUBSPACES ──────────────────────────────")
    for space in report.subspaces():
        lines.append(f"\n  {space.name} — dimension {space.dimension} "
                     f"({space.description})")
        if space.is_trivial():
            lines.append("    {0}")
        for vec in space.basis:
            approx = ", ".join(_fmt_num(float(v), decimals) for v in vec)
            exact = _format_vector(vec)
            if all(v.is_integer() for v in vec):
                lines.append(f"    {exact}")
            else:
                lines.append(f"    {exact}  ≈ ({approx})")

    # SUMMARY
    check = report.dimension_check
    lines.append("\n── SUMMARY ────────────────────────────────")
    lines.append(f"  {check.rank_plus_nullity}")
    lines.append(f"  {check.rank_plus_left_nullity}")
    lines.append(f"  Validation: {'pass' if check.valid else 'fail'}")
    lines.append(f"  Runtime: {report.runtime_ms} ms")

    lines.append("\n" + "=" * 56)
    return "\n".join(lines)
