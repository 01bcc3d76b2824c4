"""
Assignment and benchmark visualization.

Renders:
- A cost-matrix heat-map with the matched cells outlined and unmatched
  rows hatched
- Benchmark solve time versus matrix size, one line per solver

Usage:
    from hungarian.assignment import HungarianSolver
    from hungarian.analysis.visualizations import plot_assignment

    result = HungarianSolver().solve_matrix(rows)
    fig = plot_assignment(rows, result)
    fig.savefig("assignment.png", dpi=150, bbox_inches="tight")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
import numpy as np

from hungarian.assignment.cost_matrix import as_cost_matrix

if TYPE_CHECKING:
    from matplotlib.figure import Figure

    from hungarian.assignment.cost_matrix import CostMatrix
    from hungarian.assignment.solver import AssignmentResult


# ── Styling constants ────────────────────────────────────────────

HEATMAP_CMAP = "Blues"
MATCH_EDGE_COLOR = "#e6550d"
MATCH_LINEWIDTH = 2.5
UNMATCHED_COLOR = "#969696"
SOLVER_COLORS = {
    "hungarian": "#3182bd",
    "scipy": "#31a354",
}
MAX_ANNOTATED_CELLS = 400  # skip per-cell numbers beyond 20×20


def plot_assignment(
    matrix,
    result: AssignmentResult,
    title: str | None = None,
    annotate: bool | None = None,
) -> Figure:
    """Draw the cost matrix with the assignment overlaid.

    Args:
        matrix: Nested rows, 2-D array or CostMatrix.
        result: Output of a solver's solve_with_diagnostics / solve_matrix.
        title: Figure title; defaults to a cost summary.
        annotate: Print each weight in its cell; defaults to small matrices only.
    """
    cm: CostMatrix = as_cost_matrix(matrix)
    data = cm.to_array(dtype=np.float64)
    if annotate is None:
        annotate = cm.width * cm.height <= MAX_ANNOTATED_CELLS

    fig, ax = plt.subplots(figsize=(max(4, 0.6 * cm.width + 2), max(3, 0.6 * cm.height + 1)))
    image = ax.imshow(data, cmap=HEATMAP_CMAP, aspect="auto")
    fig.colorbar(image, ax=ax, fraction=0.046, pad=0.04, label="cost")

    for row, col in result.pairs():
        ax.add_patch(
            mpatches.Rectangle(
                (col - 0.5, row - 0.5),
                1,
                1,
                fill=False,
                edgecolor=MATCH_EDGE_COLOR,
                linewidth=MATCH_LINEWIDTH,
            )
        )

    for row, col in enumerate(result.assignment):
        if col is None:
            ax.add_patch(
                mpatches.Rectangle(
                    (-0.5, row - 0.5),
                    cm.width,
                    1,
                    fill=False,
                    hatch="//",
                    edgecolor=UNMATCHED_COLOR,
                    linewidth=0,
                )
            )

    if annotate:
        threshold = (data.max() + data.min()) / 2.0
        for i in range(cm.height):
            for j in range(cm.width):
                ax.text(
                    j,
                    i,
                    str(cm.at(i, j)),
                    ha="center",
                    va="center",
                    fontsize=8,
                    color="white" if data[i, j] > threshold else "black",
                )

    ax.set_xticks(range(cm.width))
    ax.set_yticks(range(cm.height))
    ax.set_xlabel("column")
    ax.set_ylabel("row")
    kind = "Max" if result.maximized else "Min"
    ax.set_title(
        title or f"{kind}-cost assignment — total {result.total_cost}, "
        f"{result.n_matched}/{cm.height} rows matched",
        fontsize=11,
        fontweight="bold",
    )
    fig.tight_layout()
    return fig


def plot_benchmark(results: dict[str, dict[str, list]]) -> Figure:
    """Mean solve time (log scale) against matrix cell count, per solver."""
    fig, ax = plt.subplots(figsize=(8, 5))

    for name, data in results.items():
        if name == "agreement":
            continue
        cells: dict[int, list[float]] = {}
        for (h, w), ms in zip(data["shape"], data["time_ms"]):
            cells.setdefault(h * w, []).append(ms)
        xs = sorted(cells)
        means = [float(np.mean(cells[x])) for x in xs]
        ax.plot(
            xs,
            means,
            marker="o",
            linewidth=1.5,
            color=SOLVER_COLORS.get(name, "#636363"),
            label=name,
        )

    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("matrix cells (h × w)")
    ax.set_ylabel("mean solve time (ms)")
    ax.set_title("Assignment Solver Benchmark", fontsize=11, fontweight="bold")
    ax.grid(True, alpha=0.2, which="both")
    ax.legend(fontsize=9)
    fig.tight_layout()
    return fig
