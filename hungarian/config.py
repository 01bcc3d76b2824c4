"""
Configuration dataclasses and YAML loader.

Solver and benchmark parameters live here as typed, frozen dataclasses.
Load from YAML with `load_config()` or construct directly for tests.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from hungarian.assignment.solver import SolverConfig


@dataclass(frozen=True)
class BenchmarkConfig:
    """Random-matrix benchmark parameters."""

    sizes: tuple[int, ...] = (5, 10, 25, 50)
    n_trials: int = 20
    low: int = 0  # inclusive lower bound of random weights
    high: int = 1000  # exclusive upper bound of random weights
    seed: int = 42  # random seed for reproducibility
    solvers: tuple[str, ...] = ("hungarian", "scipy")
    rectangular_ratio: float = 0.0  # > 0 adds a height = ratio * width run per size

    def __post_init__(self) -> None:
        if any(n <= 0 for n in self.sizes):
            raise ValueError(f"benchmark sizes must be positive, got {self.sizes}")
        if self.low >= self.high:
            raise ValueError(f"low must be < high, got low={self.low} high={self.high}")


@dataclass(frozen=True)
class HungarianConfig:
    """Top-level configuration aggregating all sub-configs."""

    solver: SolverConfig = field(default_factory=SolverConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)


def _solver_config(raw: dict) -> SolverConfig:
    raw = dict(raw)
    # plain "inf" loads as a string; only ".inf" is a YAML float
    inf = raw.get("infinity")
    if isinstance(inf, str):
        raw["infinity"] = math.inf if inf.lower() in ("inf", "infinity") else float(inf)
    return SolverConfig(**raw)


def _benchmark_config(raw: dict) -> BenchmarkConfig:
    raw = dict(raw)
    for key in ("sizes", "solvers"):
        if key in raw:
            raw[key] = tuple(raw[key])
    return BenchmarkConfig(**raw)


def load_config(path: str | Path) -> HungarianConfig:
    """Load a HungarianConfig from a YAML file.

    Args:
        path: Path to a YAML config file.

    Returns:
        Fully constructed HungarianConfig; missing sections use defaults.
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return HungarianConfig(
        solver=_solver_config(raw.get("solver", {})),
        benchmark=_benchmark_config(raw.get("benchmark", {})),
    )
