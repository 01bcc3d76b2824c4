"""
Correctness certificates for assignment results.

Each check returns plain data (bool, number or a list of violation strings)
so tests, the benchmark and the diagnostic script can share them.
"""

from __future__ import annotations

from itertools import permutations
from typing import Any, Sequence

import numpy as np

from hungarian.assignment.solver import AssignmentResult, _flatten


def is_injective(assignment: Sequence[int | None]) -> bool:
    """No column is used by two rows."""
    cols = [c for c in assignment if c is not None]
    return len(cols) == len(set(cols))


def matched_count(assignment: Sequence[int | None]) -> int:
    return sum(1 for c in assignment if c is not None)


def assignment_cost(matrix: Sequence | np.ndarray, width: int, assignment: Sequence[int | None]) -> Any:
    values = _flatten(matrix)
    return sum(values[i * width + j] for i, j in enumerate(assignment) if j is not None)


def check_duality(
    matrix: Sequence | np.ndarray,
    width: int,
    height: int,
    assignment: Sequence[int | None],
    row_potentials: Sequence,
    column_potentials: Sequence,
    tolerance: float = 0.0,
) -> list[str]:
    """Check u[i] + v[j] <= cost[i][j] everywhere, with equality on matched pairs.

    Returns a list of violations; empty means the potentials certify the
    assignment as optimal.
    """
    values = _flatten(matrix)
    issues: list[str] = []
    if len(row_potentials) != height or len(column_potentials) != width:
        return [
            f"potential lengths {len(row_potentials)}/{len(column_potentials)} "
            f"do not match {height}x{width}"
        ]

    for i in range(height):
        u = row_potentials[i]
        for j in range(width):
            slack = values[i * width + j] - u - column_potentials[j]
            if slack < -tolerance:
                issues.append(f"infeasible potentials at ({i}, {j}): slack {slack}")

    for i, j in enumerate(assignment):
        if j is None:
            continue
        slack = values[i * width + j] - row_potentials[i] - column_potentials[j]
        if abs(slack) > tolerance:
            issues.append(f"matched pair ({i}, {j}) is not tight: slack {slack}")
    return issues


def brute_force_minimum(matrix: Sequence | np.ndarray, width: int, height: int) -> Any:
    """Cheapest total over every injective map of the smaller side.

    Exponential; intended for matrices up to roughly 8×8.
    """
    values = _flatten(matrix)
    best = None
    if height <= width:
        for cols in permutations(range(width), height):
            total = sum(values[i * width + j] for i, j in enumerate(cols))
            if best is None or total < best:
                best = total
    else:
        for rows in permutations(range(height), width):
            total = sum(values[i * width + j] for j, i in enumerate(rows))
            if best is None or total < best:
                best = total
    return best


def verify_result(
    matrix: Sequence | np.ndarray,
    width: int,
    height: int,
    result: AssignmentResult,
    tolerance: float = 1e-9,
) -> list[str]:
    """Run every structural check against a solver result.

    Duality is only checked when the result carries potentials and was a
    minimisation (a maximised result's potentials certify the negated matrix).
    """
    issues: list[str] = []
    if len(result.assignment) != height:
        issues.append(f"assignment has {len(result.assignment)} entries, expected {height}")
    if not is_injective(result.assignment):
        issues.append("a column is assigned to more than one row")
    if matched_count(result.assignment) != min(width, height):
        issues.append(
            f"{matched_count(result.assignment)} rows matched, expected {min(width, height)}"
        )
    if any(c is not None and not 0 <= c < width for c in result.assignment):
        issues.append("assignment references a column outside the matrix")
    if issues:
        return issues

    recomputed = assignment_cost(matrix, width, result.assignment)
    if abs(recomputed - result.total_cost) > tolerance:
        issues.append(f"reported total {result.total_cost} != recomputed {recomputed}")

    if result.row_potentials and not result.maximized:
        issues.extend(
            check_duality(
                matrix,
                width,
                height,
                result.assignment,
                result.row_potentials,
                result.column_potentials,
                tolerance,
            )
        )
    return issues
