"""
run_benchmark.py
──────────────────────────────────────────────────────────────────────────────
Quick-run script for the assignment solver benchmark.

Usage:
    python run_benchmark.py                                # config/default.yaml
    python run_benchmark.py --sizes 10 50 100 --trials 5
    python run_benchmark.py --solvers hungarian            # pure Python only
    python run_benchmark.py --plot benchmark.png
    python run_benchmark.py --worst-case 1000              # one (i+1)(j+1) solve

Solver options:
    hungarian  Pure-Python Kuhn-Munkres with potentials   exact for any weight type
    scipy      scipy.optimize.linear_sum_assignment       float64 reference
"""

import sys
from pathlib import Path

from hungarian.assignment.benchmark import main

DEFAULT_CONFIG = Path("config/default.yaml")


if __name__ == "__main__":
    argv = sys.argv[1:]
    if "--config" not in argv and DEFAULT_CONFIG.exists():
        print(f"Loaded config from {DEFAULT_CONFIG}")
        argv = ["--config", str(DEFAULT_CONFIG)] + argv
    main(argv)
