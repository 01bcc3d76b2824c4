"""Smoke tests for the matplotlib figures (headless backend)."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from hungarian.analysis.visualizations import plot_assignment, plot_benchmark  # noqa: E402
from hungarian.assignment.benchmark import run_benchmark  # noqa: E402
from hungarian.assignment.solver import HungarianSolver  # noqa: E402
from hungarian.config import BenchmarkConfig  # noqa: E402


def test_plot_assignment_outlines_matched_cells():
    rows = [[3, 1], [4, 1], [5, 9]]
    result = HungarianSolver().solve_matrix(rows)
    fig = plot_assignment(rows, result)
    ax = fig.axes[0]
    outlined = [p for p in ax.patches if p.get_hatch() is None]
    hatched = [p for p in ax.patches if p.get_hatch() == "//"]
    assert len(outlined) == 2
    assert len(hatched) == 1
    assert "total 4" in ax.get_title()
    plt.close(fig)


def test_plot_benchmark_has_one_line_per_solver(tmp_path):
    results = run_benchmark(BenchmarkConfig(sizes=(2, 4), n_trials=1), verbose=False)
    fig = plot_benchmark(results)
    assert len(fig.axes[0].get_lines()) == 2
    out = tmp_path / "bench.png"
    fig.savefig(out)
    assert out.exists()
    plt.close(fig)
