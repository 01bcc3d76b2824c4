"""
Render an assignment as a cost-matrix heat-map.

Solves a matrix (random, or read from a whitespace-separated text file with
one row per line) and writes a PNG with the chosen cells outlined.

Usage:
    python plot_assignment.py                             # random 8×8
    python plot_assignment.py --rows 6 --cols 9 --seed 7
    python plot_assignment.py --matrix costs.txt --maximize
    python plot_assignment.py --output my_assignment.png
"""

import argparse
from pathlib import Path

import numpy as np

from hungarian.assignment.cost_matrix import CostMatrix, random_cost_matrix
from hungarian.assignment.solver import HungarianSolver, SolverConfig
from hungarian.assignment.verification import verify_result
from hungarian.analysis.visualizations import plot_assignment


def read_matrix(path: Path) -> CostMatrix:
    """Load a dense matrix from a text file (one row per line)."""
    return CostMatrix.from_array(np.loadtxt(path, ndmin=2))


def print_summary(cm: CostMatrix, result) -> None:
    """Print the assignment to console."""
    print(f"\nMatrix: {cm.height} rows × {cm.width} columns")
    for row, col in enumerate(result.assignment):
        if col is None:
            print(f"  row {row:>3} → unmatched")
        else:
            print(f"  row {row:>3} → col {col:>3}   cost {cm.at(row, col)}")
    print(f"Total cost: {result.total_cost}  ({result.solve_time_ms:.2f} ms)")

    issues = verify_result(cm.values, cm.width, cm.height, result)
    if issues:
        print("\n⚠️  Certificate violations:")
        for issue in issues:
            print(f"  - {issue}")
    else:
        print("\n✅ Assignment certified")


def main():
    """Main function"""

    parser = argparse.ArgumentParser(
        description="Plot a Hungarian assignment",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--matrix", "-m", type=str, default=None, help="Text file with the costs")
    parser.add_argument("--rows", type=int, default=8)
    parser.add_argument("--cols", type=int, default=8)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--maximize", action="store_true", help="Maximise total cost instead")
    parser.add_argument("--output", "-o", type=str, default="assignment.png")
    args = parser.parse_args()

    if args.matrix:
        cm = read_matrix(Path(args.matrix))
    else:
        cm = random_cost_matrix(np.random.default_rng(args.seed), args.cols, args.rows, 0, 100)

    solver = HungarianSolver(SolverConfig(maximize=args.maximize))
    result = solver.solve_matrix(cm)
    print_summary(cm, result)

    fig = plot_assignment(cm, result)
    fig.savefig(args.output, dpi=150, bbox_inches="tight")
    print(f"Saved {args.output}")


if __name__ == "__main__":
    main()
