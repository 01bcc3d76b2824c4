"""
Cost matrix construction for the assignment solvers.

The solvers consume a flat row-major sequence plus (width, height). This
module is the thin layer that gets a caller's data into that shape: nested
lists, numpy arrays, square padding, negation for maximisation, and the
matrix generators used by the benchmark and stress tests.

Usage:
    cm = CostMatrix.from_rows([[4, 1, 3], [2, 0, 5]])
    assignment, total = solve(cm.values, cm.width, cm.height)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np


@dataclass(frozen=True)
class CostMatrix:
    """Immutable row-major cost matrix.

    Attributes:
        values: Flat tuple of width * height weights, row-major.
        width: Number of columns.
        height: Number of rows.
    """

    values: tuple
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"CostMatrix needs positive dimensions, got {self.width}x{self.height}")
        if len(self.values) != self.width * self.height:
            raise ValueError(
                f"CostMatrix has {len(self.values)} values for a {self.height}x{self.width} shape"
            )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Any]]) -> CostMatrix:
        """Build from a nested list of equal-length rows."""
        if not rows or not rows[0]:
            raise ValueError("cost matrix must have at least one row and one column")
        width = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {i} has {len(row)} entries, expected {width}")
        return cls(tuple(x for row in rows for x in row), width, len(rows))

    @classmethod
    def from_array(cls, array: np.ndarray) -> CostMatrix:
        """Build from a 2-D numpy array (values become Python scalars)."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise ValueError(f"expected a 2-D array, got shape {array.shape}")
        height, width = array.shape
        return cls(tuple(array.ravel(order="C").tolist()), width, height)

    @property
    def shape(self) -> tuple[int, int]:
        """(height, width), numpy order."""
        return self.height, self.width

    def at(self, i: int, j: int) -> Any:
        """Weight of row i, column j."""
        return self.values[i * self.width + j]

    def row(self, i: int) -> tuple:
        return self.values[i * self.width : (i + 1) * self.width]

    def rows(self) -> list[tuple]:
        return [self.row(i) for i in range(self.height)]

    def transposed(self) -> CostMatrix:
        w, h = self.width, self.height
        return CostMatrix(tuple(self.values[i * w + j] for j in range(w) for i in range(h)), h, w)

    def negated(self) -> CostMatrix:
        """Negate every weight; minimising the result maximises the original."""
        return CostMatrix(tuple(-x for x in self.values), self.width, self.height)

    def padded(self, fill: Any = None) -> CostMatrix:
        """Square copy; new cells take `fill` (default: the matrix maximum).

        A constant fill adds the same amount to every complete assignment, so
        the optimal pairing of the original cells is unchanged.
        """
        n = max(self.width, self.height)
        if n == self.width == self.height:
            return self
        if fill is None:
            fill = max(self.values)
        out = []
        for i in range(n):
            if i < self.height:
                out.extend(self.row(i))
                out.extend([fill] * (n - self.width))
            else:
                out.extend([fill] * n)
        return CostMatrix(tuple(out), n, n)

    def to_array(self, dtype: Any = None) -> np.ndarray:
        return np.asarray(self.values, dtype=dtype).reshape(self.height, self.width)


def as_cost_matrix(data: Sequence[Sequence[Any]] | np.ndarray | CostMatrix) -> CostMatrix:
    """Coerce nested lists, 2-D arrays or an existing CostMatrix."""
    if isinstance(data, CostMatrix):
        return data
    if isinstance(data, np.ndarray):
        return CostMatrix.from_array(data)
    return CostMatrix.from_rows(data)


# ── Generators ────────────────────────────────────────────────────────────────


def random_cost_matrix(
    rng: np.random.Generator,
    width: int,
    height: int,
    low: int = 0,
    high: int = 100,
) -> CostMatrix:
    """Uniform random integer weights in [low, high)."""
    return CostMatrix.from_array(rng.integers(low, high, size=(height, width)))


def sequential_cost_matrix(n: int) -> CostMatrix:
    """cost[i][j] = i*n + j. Every permutation has the same total."""
    return CostMatrix(tuple(range(n * n)), n, n)


def product_cost_matrix(n: int) -> CostMatrix:
    """cost[i][j] = (i+1)(j+1). Unique optimum: row i → column n-1-i."""
    return CostMatrix(tuple((i + 1) * (j + 1) for i in range(n) for j in range(n)), n, n)
