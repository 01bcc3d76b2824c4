"""
hungarian/assignment/benchmark.py
──────────────────────────────────────────────────────────────────────────────
Benchmark: assignment solvers head-to-head on random matrices.

Compares the pure-Python Hungarian solver against scipy's
linear_sum_assignment over a range of matrix sizes.

Metrics per size:
  • Solve time            (mean / p95 / max wall-clock, ms)
  • Total cost            (mean over trials)
  • Cost agreement        (trials where every solver found the same total)

Usage:
    python -m hungarian.assignment.benchmark                       # defaults
    python -m hungarian.assignment.benchmark --sizes 5 10 25 50 100
    python -m hungarian.assignment.benchmark --solvers hungarian
    python -m hungarian.assignment.benchmark --config config/default.yaml --plot bench.png
    python -m hungarian.assignment.benchmark --worst-case 300      # single (i+1)(j+1) solve
"""

from __future__ import annotations

import argparse
import time
from dataclasses import replace
from pathlib import Path

import numpy as np

from hungarian.assignment.cost_matrix import product_cost_matrix, random_cost_matrix
from hungarian.assignment.solver import SolverConfig, create_solver
from hungarian.config import BenchmarkConfig, HungarianConfig, load_config

ALL_SOLVERS = ("hungarian", "scipy")


def _shapes(cfg: BenchmarkConfig) -> list[tuple[int, int]]:
    """(height, width) pairs to run, square first."""
    shapes = [(n, n) for n in cfg.sizes]
    if cfg.rectangular_ratio > 0:
        shapes += [(max(1, round(n * cfg.rectangular_ratio)), n) for n in cfg.sizes]
    return shapes


# ── Main benchmark loop ───────────────────────────────────────────────────────


def run_benchmark(
    config: BenchmarkConfig | None = None,
    solver_config: SolverConfig | None = None,
    verbose: bool = True,
) -> dict[str, dict[str, list]]:
    """Run every solver over random matrices and print a comparison table.

    Returns:
        results[solver] = {"shape": [...], "time_ms": [...], "cost": [...]},
        plus results["agreement"] = {"shape": [...], "agreed": [...]}.
    """
    cfg = config or BenchmarkConfig()
    active = list(cfg.solvers)
    shapes = _shapes(cfg)

    if verbose:
        print("=" * 80)
        print("  Assignment Solver Benchmark")
        print("=" * 80)
        print(f"  Shapes: {len(shapes)}  |  Trials: {cfg.n_trials}  |  Seed: {cfg.seed}")
        print(f"  Weights: [{cfg.low}, {cfg.high})  |  Solvers: {', '.join(active)}")
        print()

    solvers = {name: create_solver(name, solver_config) for name in active}
    rng = np.random.default_rng(cfg.seed)

    results: dict[str, dict[str, list]] = {
        name: {"shape": [], "time_ms": [], "cost": []} for name in active
    }
    results["agreement"] = {"shape": [], "agreed": []}

    for height, width in shapes:
        for _ in range(cfg.n_trials):
            cm = random_cost_matrix(rng, width, height, cfg.low, cfg.high)
            costs = []
            for name in active:
                r = solvers[name].solve_with_diagnostics(cm.values, cm.width, cm.height)
                results[name]["shape"].append((height, width))
                results[name]["time_ms"].append(r.solve_time_ms)
                results[name]["cost"].append(r.total_cost)
                costs.append(r.total_cost)
            results["agreement"]["shape"].append((height, width))
            results["agreement"]["agreed"].append(len(set(costs)) <= 1)

    if verbose:
        _print_table(results, active, shapes)
    return results


def _print_table(
    results: dict[str, dict[str, list]],
    active: list[str],
    shapes: list[tuple[int, int]],
) -> None:
    col_w = 14

    def hdr(label: str) -> str:
        return f"{label:>{col_w}}"

    def val(v: float, fmt: str = ".2f") -> str:
        return f"{v:{col_w}{fmt}}"

    print(f"  {'Shape (h x w)':<14}{'Metric':<16}" + "".join(hdr(n) for n in active))
    print("  " + "─" * (30 + col_w * len(active)))

    for shape in shapes:
        label = f"{shape[0]} x {shape[1]}"
        for metric, fn in (
            ("mean ms", np.mean),
            ("p95 ms", lambda t: np.percentile(t, 95)),
            ("max ms", np.max),
        ):
            row = f"  {label:<14}{metric:<16}"
            for name in active:
                times = [
                    t for s, t in zip(results[name]["shape"], results[name]["time_ms"]) if s == shape
                ]
                row += val(float(fn(times)))
            print(row)
            label = ""

        agreement = results["agreement"]
        agreed = [a for s, a in zip(agreement["shape"], agreement["agreed"]) if s == shape]
        print(f"  {'':<14}{'cost agreement':<16}{sum(agreed):>{col_w}d}/{len(agreed)}")

    n_disagree = results["agreement"]["agreed"].count(False)
    print()
    if n_disagree:
        print(f"  ❌ {n_disagree} trial(s) where solvers disagreed on the optimal cost")
    else:
        print("  ✅ All solvers agreed on the optimal cost in every trial")
    print("\n" + "=" * 80)


def run_worst_case(n: int, solver_config: SolverConfig | None = None) -> float:
    """Solve the (i+1)(j+1) matrix of size n once; return wall-clock ms."""
    cm = product_cost_matrix(n)
    solver = create_solver("hungarian", solver_config)
    t0 = time.perf_counter()
    assignment, total = solver.solve(cm.values, cm.width, cm.height)
    ms = (time.perf_counter() - t0) * 1e3
    anti_diagonal = assignment == list(range(n - 1, -1, -1))
    print(f"  Worst case {n} x {n}: total={total}  time={ms:.1f} ms  anti-diagonal={anti_diagonal}")
    return ms


# ── CLI entry point ───────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    """Main"""

    parser = argparse.ArgumentParser(description="Benchmark assignment solvers")
    parser.add_argument("--config", type=str, default=None, help="Path to YAML config")
    parser.add_argument("--sizes", type=int, nargs="+", default=None)
    parser.add_argument("--trials", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--solvers",
        nargs="+",
        choices=list(ALL_SOLVERS),
        default=None,
        help="Subset of solvers to benchmark (default: from config)",
    )
    parser.add_argument("--plot", type=str, default=None, help="Write a timing plot to this PNG")
    parser.add_argument(
        "--worst-case", type=int, default=None, help="Solve one (i+1)(j+1) matrix of this size"
    )
    args = parser.parse_args(argv)

    config = load_config(args.config) if args.config else HungarianConfig()

    if args.worst_case is not None:
        run_worst_case(args.worst_case, config.solver)
        return

    overrides = {}
    if args.sizes is not None:
        overrides["sizes"] = tuple(args.sizes)
    if args.trials is not None:
        overrides["n_trials"] = args.trials
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.solvers is not None:
        overrides["solvers"] = tuple(args.solvers)
    bench_cfg = replace(config.benchmark, **overrides)

    results = run_benchmark(bench_cfg, config.solver)

    if args.plot:
        from hungarian.analysis.visualizations import plot_benchmark  # pylint: disable=import-outside-toplevel

        fig = plot_benchmark(results)
        fig.savefig(Path(args.plot), dpi=150, bbox_inches="tight")
        print(f"  Saved timing plot to {args.plot}")


if __name__ == "__main__":
    main()
