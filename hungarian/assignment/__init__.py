"""
Linear assignment via the Hungarian (Kuhn-Munkres) algorithm.

Quick start:
    from hungarian.assignment import solve
    assignment, total = solve(flat_costs, width, height)
"""

from hungarian.assignment.solver import (
    AssignmentResult,
    CertificateError,
    HungarianSolver,
    InvalidDimensions,
    ScipyLAPSolver,
    SolverConfig,
    SolverStatus,
    UnreachableColumn,
    create_solver,
    maximize,
    minimize,
    solve,
)
from hungarian.assignment.cost_matrix import CostMatrix, as_cost_matrix
from hungarian.assignment.verification import check_duality, verify_result

__all__ = [
    "AssignmentResult",
    "CertificateError",
    "HungarianSolver",
    "InvalidDimensions",
    "ScipyLAPSolver",
    "SolverConfig",
    "SolverStatus",
    "UnreachableColumn",
    "create_solver",
    "maximize",
    "minimize",
    "solve",
    "CostMatrix",
    "as_cost_matrix",
    "check_duality",
    "verify_result",
]
