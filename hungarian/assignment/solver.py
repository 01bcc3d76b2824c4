"""
Assignment solvers for dense cost matrices.

Shortest-augmenting-path Hungarian algorithm
─────────────────────────────────────────────
Rows of the smaller side are matched one at a time. For each new row a
Dijkstra-style search runs over the reduced-cost graph

    reduced(i, j) = cost[i][j] - u[i] - v[j]   (always >= 0)

using a plain O(n) array scan per step instead of a heap (the graph is
complete, so a heap buys nothing). When the search reaches a free column the
potentials are shifted so the path is tight and the path is flipped, growing
the matching by exactly one row. min(w, h) rows × O(n²) per search → O(n³).

Orientation
───────────
Results always have one entry per row (length == height). A tall matrix
(height > width) is transposed internally so the fully matched side is the
smaller one; rows left over report None.

Solver menu
───────────
  HungarianSolver   pure-Python Kuhn-Munkres with potentials    ← DEFAULT
  ScipyLAPSolver    scipy.optimize.linear_sum_assignment        reference oracle

Both share the same public interface.

Quick start:
    from hungarian.assignment.solver import solve
    assignment, total = solve([4, 1, 3, 2, 0, 5, 3, 2, 2], width=3, height=3)
"""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Protocol, Sequence

import numpy as np

if TYPE_CHECKING:
    from hungarian.assignment.cost_matrix import CostMatrix


# ─────────────────────────────────────────────────────────────────────────────
# Public types
# ─────────────────────────────────────────────────────────────────────────────


class Weight(Protocol):
    """Anything ordered with + and - : int, float, Fraction, Decimal."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...


class InvalidDimensions(ValueError):
    """width/height is zero or the matrix length is not width * height."""


class UnreachableColumn(ValueError):
    """A row has no column of finite cost (matrix contains the sentinel)."""


class CertificateError(AssertionError):
    """Certify mode found a violated dual certificate."""


class SolverStatus(Enum):
    """Valid Solver status"""

    OPTIMAL = auto()  # every row matched
    PARTIAL = auto()  # height > width; surplus rows unmatched


@dataclass
class AssignmentResult:
    """Unified output — returned by every solver variant.

    assignment[i] is the column for row i, or None. Potentials are reported in
    the caller's orientation (one per row, one per column) and are empty for
    solvers that do not produce a dual solution.
    """

    assignment: list[int | None]
    total_cost: Weight
    solver_status: SolverStatus
    solve_time_ms: float = 0.0
    row_potentials: list = field(default_factory=list)
    column_potentials: list = field(default_factory=list)
    maximized: bool = False

    @property
    def n_matched(self) -> int:
        """Number of rows that received a column."""
        return sum(1 for col in self.assignment if col is not None)

    def pairs(self) -> list[tuple[int, int]]:
        """(row, column) pairs for matched rows, in row order."""
        return [(row, col) for row, col in enumerate(self.assignment) if col is not None]


@dataclass(frozen=True)
class SolverConfig:
    """Tunable parameters shared across solvers.

    infinity   : unreachable-cost sentinel, larger than any accumulated distance
    maximize   : solve the maximum-cost assignment instead (by negation)
    certify    : re-check the dual certificate after every solve
    tolerance  : slack allowed by the certificate check (float weights)
    """

    infinity: float = math.inf
    maximize: bool = False
    certify: bool = False
    tolerance: float = 1e-9


# ─────────────────────────────────────────────────────────────────────────────
# Private helpers
# ─────────────────────────────────────────────────────────────────────────────


def _flatten(matrix: Sequence | np.ndarray) -> list:
    """Return a plain list of Python scalars in row-major order."""
    if isinstance(matrix, np.ndarray):
        return matrix.ravel(order="C").tolist()
    return list(matrix)


def _validate(values: list, width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise InvalidDimensions(f"width and height must be positive, got {width}x{height}")
    if len(values) != width * height:
        raise InvalidDimensions(
            f"matrix has {len(values)} entries, expected width * height = {width * height}"
        )


def _transpose(values: list, width: int, height: int) -> list:
    return [values[i * width + j] for j in range(width) for i in range(height)]


@dataclass
class _SolveState:
    """Scratch state for one solve call, never shared between calls.

    Indices are 1-based; column 0 is a virtual column that holds the row
    currently being inserted, and row 0 means "unmatched".
    """

    n_rows: int
    n_cols: int
    row_potential: list
    col_potential: list
    owner: list[int]  # owner[j] = row matched to column j, 0 if free
    via: list[int]  # predecessor column on the shortest-path tree

    @classmethod
    def fresh(cls, n_rows: int, n_cols: int) -> _SolveState:
        return cls(
            n_rows=n_rows,
            n_cols=n_cols,
            row_potential=[0] * (n_rows + 1),
            col_potential=[0] * (n_cols + 1),
            owner=[0] * (n_cols + 1),
            via=[0] * (n_cols + 1),
        )


def _augment(state: _SolveState, cost: list, row: int, infinity: Any) -> None:
    """Match `row` (1-based) by one shortest augmenting path.

    Requires n_rows <= n_cols so a free column always exists.
    """
    n = state.n_cols
    u = state.row_potential
    v = state.col_potential
    owner = state.owner
    via = state.via

    owner[0] = row
    minv = [infinity] * (n + 1)
    visited = [False] * (n + 1)
    j0 = 0

    while True:
        visited[j0] = True
        i0 = owner[j0]
        base = (i0 - 1) * n - 1
        u_i0 = u[i0]
        delta = infinity
        j1 = 0

        for j in range(1, n + 1):
            if visited[j]:
                continue
            reduced = cost[base + j] - u_i0 - v[j]
            if reduced < minv[j]:
                minv[j] = reduced
                via[j] = j0
            if minv[j] < delta:
                delta = minv[j]
                j1 = j

        if j1 == 0:
            raise UnreachableColumn(f"row {row - 1} has no column of finite cost")

        # Shift potentials: visited columns stay tight, frontier distances shrink
        for j in range(n + 1):
            if visited[j]:
                u[owner[j]] += delta
                v[j] -= delta
            else:
                minv[j] -= delta

        j0 = j1
        if owner[j0] == 0:
            break

    # Flip the augmenting path back to the virtual column
    while j0:
        j1 = via[j0]
        owner[j0] = owner[j1]
        j0 = j1


def _run(values: list, width: int, height: int, infinity: Any) -> tuple[list, list, list]:
    """Solve a validated flat matrix; return (assignment, row_pot, col_pot)."""
    transposed = height > width
    if transposed:
        cost = _transpose(values, width, height)
        n_rows, n_cols = width, height
    else:
        cost = values
        n_rows, n_cols = height, width

    state = _SolveState.fresh(n_rows, n_cols)
    for row in range(1, n_rows + 1):
        _augment(state, cost, row, infinity)

    assignment: list[int | None] = [None] * height
    for j in range(1, n_cols + 1):
        i = state.owner[j]
        if i == 0:
            continue
        if transposed:
            assignment[j - 1] = i - 1
        else:
            assignment[i - 1] = j - 1

    if transposed:
        return assignment, state.col_potential[1:], state.row_potential[1:]
    return assignment, state.row_potential[1:], state.col_potential[1:]


def _total(values: list, width: int, assignment: list[int | None]) -> Weight:
    matched = [values[i * width + j] for i, j in enumerate(assignment) if j is not None]
    total = matched[0]
    for value in matched[1:]:
        total = total + value
    return total


# ─────────────────────────────────────────────────────────────────────────────
# Functional interface
# ─────────────────────────────────────────────────────────────────────────────


def solve(
    matrix: Sequence | np.ndarray,
    width: int,
    height: int,
    infinity: Any = math.inf,
) -> tuple[list[int | None], Weight]:
    """Minimum-cost assignment of a flat row-major `height × width` matrix.

    Args:
        matrix: width * height weights in row-major order.
        width: Number of columns.
        height: Number of rows.
        infinity: Sentinel larger than any finite accumulated distance.

    Returns:
        (assignment, total_cost) where assignment[i] is the column of row i,
        or None for the height - width rows left over when height > width.

    Raises:
        InvalidDimensions: zero dimension or length mismatch.
    """
    values = _flatten(matrix)
    _validate(values, width, height)
    assignment, _, _ = _run(values, width, height, infinity)
    return assignment, _total(values, width, assignment)


def minimize(matrix: Sequence | np.ndarray, width: int, height: int) -> list[int | None]:
    """Assignment vector only, for callers that compute cost themselves."""
    return solve(matrix, width, height)[0]


def maximize(
    matrix: Sequence | np.ndarray,
    width: int,
    height: int,
    infinity: Any = math.inf,
) -> tuple[list[int | None], Weight]:
    """Maximum-cost assignment; total is reported with the original sign."""
    values = _flatten(matrix)
    _validate(values, width, height)
    assignment, _, _ = _run([-x for x in values], width, height, infinity)
    return assignment, _total(values, width, assignment)


# ─────────────────────────────────────────────────────────────────────────────
# Solver 1 — HungarianSolver
# ─────────────────────────────────────────────────────────────────────────────


class HungarianSolver:
    """Pure-Python Kuhn-Munkres with row/column potentials.

    Each call builds fresh scratch state, so one instance may be shared by
    threads solving different matrices; only the counters are shared.
    """

    def __init__(self, solver_config: SolverConfig | None = None) -> None:
        self.config = solver_config or SolverConfig()
        self.total_solves: int = 0
        self.total_solve_time_ms: float = 0.0

    def solve(
        self,
        matrix: Sequence | np.ndarray,
        width: int,
        height: int,
    ) -> tuple[list[int | None], Weight]:
        """Return (assignment, total_cost)."""

        result = self.solve_with_diagnostics(matrix, width, height)
        return result.assignment, result.total_cost

    def solve_matrix(self, rows: Sequence[Sequence] | np.ndarray | CostMatrix) -> AssignmentResult:
        """Solve a nested 2-D matrix, numpy array or CostMatrix."""
        from hungarian.assignment.cost_matrix import as_cost_matrix  # pylint: disable=import-outside-toplevel

        cm = as_cost_matrix(rows)
        return self.solve_with_diagnostics(cm.values, cm.width, cm.height)

    def solve_with_diagnostics(
        self,
        matrix: Sequence | np.ndarray,
        width: int,
        height: int,
    ) -> AssignmentResult:
        """Solve with potentials, status and timing"""

        t0 = time.perf_counter()
        values = _flatten(matrix)
        _validate(values, width, height)

        cost = [-x for x in values] if self.config.maximize else values
        assignment, row_pot, col_pot = _run(cost, width, height, self.config.infinity)

        ms = (time.perf_counter() - t0) * 1e3
        self.total_solves += 1
        self.total_solve_time_ms += ms

        status = SolverStatus.PARTIAL if height > width else SolverStatus.OPTIMAL
        result = AssignmentResult(
            assignment=assignment,
            total_cost=_total(values, width, assignment),
            solver_status=status,
            solve_time_ms=ms,
            row_potentials=row_pot,
            column_potentials=col_pot,
            maximized=self.config.maximize,
        )

        if self.config.certify:
            from hungarian.assignment.verification import check_duality  # pylint: disable=import-outside-toplevel

            violations = check_duality(
                cost, width, height, assignment, row_pot, col_pot, self.config.tolerance
            )
            if violations:
                raise CertificateError("; ".join(violations[:5]))
        return result


# ─────────────────────────────────────────────────────────────────────────────
# Solver 2 — ScipyLAPSolver
# ─────────────────────────────────────────────────────────────────────────────


class ScipyLAPSolver:
    """Reference solver: scipy.optimize.linear_sum_assignment.

    Used as the oracle in tests and the benchmark. Produces no potentials.
    """

    def __init__(self, solver_config: SolverConfig | None = None) -> None:
        self.config = solver_config or SolverConfig()
        self.total_solves: int = 0
        self.total_solve_time_ms: float = 0.0

    def solve(
        self,
        matrix: Sequence | np.ndarray,
        width: int,
        height: int,
    ) -> tuple[list[int | None], Weight]:
        """Return (assignment, total_cost)."""

        result = self.solve_with_diagnostics(matrix, width, height)
        return result.assignment, result.total_cost

    def solve_with_diagnostics(
        self,
        matrix: Sequence | np.ndarray,
        width: int,
        height: int,
    ) -> AssignmentResult:
        """Solve with diagnostics"""

        from scipy.optimize import linear_sum_assignment  # type: ignore # pylint: disable=import-error, import-outside-toplevel

        t0 = time.perf_counter()
        values = _flatten(matrix)
        _validate(values, width, height)

        cost = np.asarray(values, dtype=np.float64).reshape(height, width)
        row_ind, col_ind = linear_sum_assignment(cost, maximize=self.config.maximize)

        assignment: list[int | None] = [None] * height
        for r, c in zip(row_ind, col_ind):
            assignment[int(r)] = int(c)

        ms = (time.perf_counter() - t0) * 1e3
        self.total_solves += 1
        self.total_solve_time_ms += ms
        status = SolverStatus.PARTIAL if height > width else SolverStatus.OPTIMAL
        return AssignmentResult(
            assignment=assignment,
            total_cost=_total(values, width, assignment),
            solver_status=status,
            solve_time_ms=ms,
            maximized=self.config.maximize,
        )


# ─────────────────────────────────────────────────────────────────────────────
# Factory
# ─────────────────────────────────────────────────────────────────────────────


def create_solver(
    strategy: str = "hungarian",
    solver_config: SolverConfig | None = None,
) -> HungarianSolver | ScipyLAPSolver:
    """Instantiate and return the requested solver.

    strategy options
    ─────────────────
    "hungarian" → HungarianSolver     pure Python, exact, reports potentials
    "scipy"     → ScipyLAPSolver      requires scipy, float64 only
    """
    if strategy == "hungarian":
        return HungarianSolver(solver_config)
    if strategy == "scipy":
        return ScipyLAPSolver(solver_config)
    raise ValueError(f"Unknown strategy {strategy!r}. Valid options: 'hungarian', 'scipy'.")
