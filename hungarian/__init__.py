"""Minimum-cost bipartite assignment with the Hungarian algorithm."""

from hungarian.assignment import (
    AssignmentResult,
    CostMatrix,
    HungarianSolver,
    InvalidDimensions,
    SolverConfig,
    maximize,
    minimize,
    solve,
)
from hungarian.config import HungarianConfig, load_config

__all__ = [
    "AssignmentResult",
    "CostMatrix",
    "HungarianSolver",
    "InvalidDimensions",
    "SolverConfig",
    "maximize",
    "minimize",
    "solve",
    "HungarianConfig",
    "load_config",
]
