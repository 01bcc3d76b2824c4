"""
Solver diagnostic tool.

Runs the Hungarian solver through staged checks (input validation, fixed
scenarios, certificates on random matrices, agreement with scipy) and prints
PASS/FAIL per check.

This is the script you run FIRST when something looks wrong. Each stage is
independent, so the first failing stage tells you where to look.

Usage:
    python scripts/verify_solver.py
"""

import sys
from fractions import Fraction

import numpy as np

from hungarian.assignment.cost_matrix import product_cost_matrix, random_cost_matrix
from hungarian.assignment.solver import (
    HungarianSolver,
    InvalidDimensions,
    SolverStatus,
    solve,
)
from hungarian.assignment.verification import brute_force_minimum, verify_result

FAILURES: list[str] = []


def section(title: str) -> None:
    """Creates a section in the CLI display"""

    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}")


def check(label: str, condition: bool, detail: str = "") -> bool:
    """Checks if a condition is passed."""

    status = "✅ PASS" if condition else "❌ FAIL"
    msg = f"  {status}: {label}"
    if detail:
        msg += f" — {detail}"
    print(msg)
    if not condition:
        FAILURES.append(label)
    return condition


# ─────────────────────────────────────────────────────────────
# STAGE 1: Input validation
# ─────────────────────────────────────────────────────────────
def verify_validation() -> None:
    """Malformed dimensions are rejected before any work."""

    section("STAGE 1: Input Validation")

    for label, args in (
        ("width = 0 rejected", ([], 0, 3)),
        ("height = 0 rejected", ([], 3, 0)),
        ("length mismatch rejected", ([1, 2, 3], 2, 2)),
    ):
        try:
            solve(*args)
            check(label, False, "no exception raised")
        except InvalidDimensions as e:
            check(label, True, str(e))


# ─────────────────────────────────────────────────────────────
# STAGE 2: Fixed scenarios
# ─────────────────────────────────────────────────────────────
def verify_scenarios() -> None:
    """Hand-checked matrices with known answers."""

    section("STAGE 2: Fixed Scenarios")

    a, total = solve([0, 1, 1, 1, 1, 1, 0, 1, 1, 0, 1, 1, 1, 1, 1, 0], 4, 4)
    check("4×4 zero-cost permutation", a == [0, 2, 1, 3] and total == 0, f"{a}, cost {total}")

    a, total = solve([5], 1, 1)
    check("1×1", a == [0] and total == 5, f"{a}, cost {total}")

    a, total = solve([1, 2, 3, 4, 5, 6], 3, 2)
    check("2 rows × 3 columns", total == 6, f"{a}, cost {total}")

    wide = [34, 26, 17, 12, 43, 43, 36, 10, 97, 47, 66, 34]
    r = HungarianSolver().solve_with_diagnostics(wide, 4, 3)
    check("3 rows × 4 columns status", r.solver_status == SolverStatus.OPTIMAL)

    a, total = solve([3, 1, 4, 1, 5, 9], 2, 3)
    check("3 rows × 2 columns leaves one row unmatched", a.count(None) == 1, f"{a}, cost {total}")

    cm = product_cost_matrix(30)
    a, total = solve(cm.values, 30, 30)
    check("30×30 (i+1)(j+1) is anti-diagonal", a == list(range(29, -1, -1)), f"cost {total}")

    a, total = solve([Fraction(1, 3), Fraction(1, 2), Fraction(1, 4), Fraction(1, 5)], 2, 2)
    check("Fraction weights stay exact", total == Fraction(8, 15), f"cost {total}")


# ─────────────────────────────────────────────────────────────
# STAGE 3: Certificates on random matrices
# ─────────────────────────────────────────────────────────────
def verify_certificates(n_trials: int = 200) -> None:
    """Dual certificate + brute-force optimality on small random matrices."""

    section("STAGE 3: Certificates")

    rng = np.random.default_rng(42)
    solver = HungarianSolver()
    bad_cert, bad_opt = 0, 0
    for _ in range(n_trials):
        w, h = int(rng.integers(1, 6)), int(rng.integers(1, 6))
        cm = random_cost_matrix(rng, w, h, -20, 20)
        r = solver.solve_with_diagnostics(cm.values, w, h)
        if verify_result(cm.values, w, h, r):
            bad_cert += 1
        if r.total_cost != brute_force_minimum(cm.values, w, h):
            bad_opt += 1

    check("Dual certificate holds", bad_cert == 0, f"{bad_cert}/{n_trials} violations")
    check("Matches brute force", bad_opt == 0, f"{bad_opt}/{n_trials} mismatches")


# ─────────────────────────────────────────────────────────────
# STAGE 4: Agreement with scipy (needs scipy)
# ─────────────────────────────────────────────────────────────
def verify_against_scipy(n_trials: int = 50) -> None:
    """Total cost agrees with scipy.optimize.linear_sum_assignment."""

    section("STAGE 4: scipy Agreement")

    from hungarian.assignment.solver import ScipyLAPSolver

    rng = np.random.default_rng(7)
    ours, ref = HungarianSolver(), ScipyLAPSolver()
    mismatches = 0
    for _ in range(n_trials):
        w, h = int(rng.integers(1, 40)), int(rng.integers(1, 40))
        cm = random_cost_matrix(rng, w, h, 0, 1000)
        if ours.solve(cm.values, w, h)[1] != ref.solve(cm.values, w, h)[1]:
            mismatches += 1
    check("Same optimal cost as scipy", mismatches == 0, f"{mismatches}/{n_trials} mismatches")
    check(
        "Timing recorded",
        ours.total_solves == n_trials,
        f"hungarian {ours.total_solve_time_ms:.1f} ms, scipy {ref.total_solve_time_ms:.1f} ms",
    )


# ─────────────────────────────────────────────────────────────
# Main
# ─────────────────────────────────────────────────────────────
if __name__ == "__main__":
    print("Hungarian Solver — Verification")
    print("=" * 60)

    verify_validation()
    verify_scenarios()
    verify_certificates()

    try:
        import scipy  # noqa: F401
    except ImportError:
        print("\n⚠️  scipy not installed. Stage 4 requires: pip install scipy")
    else:
        verify_against_scipy()

    section("VERIFICATION COMPLETE")
    if FAILURES:
        print(f"  {len(FAILURES)} check(s) failed: {', '.join(FAILURES)}")
        sys.exit(1)
    print("  All checks passed.")
