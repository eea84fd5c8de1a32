"""Optimal rectangular assignment by the Munkres (Hungarian) algorithm."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import NamedTuple

_EPS = sys.float_info.epsilon


class AssignmentResult(NamedTuple):
    """Total cost and, for every row, its assigned column or -1 when unassigned."""

    cost: float
    assignment: list[int]


class _Munkres:
    def __init__(self, matrix: list[list[float]]) -> None:
        self.n_rows = len(matrix)
        self.n_cols = len(matrix[0])
        self.dist = [row[:] for row in matrix]
        self.star = [[False] * self.n_cols for _ in range(self.n_rows)]
        self.prime = [[False] * self.n_cols for _ in range(self.n_rows)]
        self.covered_rows = [False] * self.n_rows
        self.covered_cols = [False] * self.n_cols
        self.min_dim = min(self.n_rows, self.n_cols)

    def _is_zero(self, row: int, col: int) -> bool:
        return abs(self.dist[row][col]) < _EPS

    def _preliminary(self) -> None:
        rows, cols = range(self.n_rows), range(self.n_cols)
        if self.n_rows <= self.n_cols:
            for row in rows:
                smallest = min(self.dist[row])
                self.dist[row] = [v - smallest for v in self.dist[row]]
            for row in rows:
                for col in cols:
                    if self._is_zero(row, col) and not self.covered_cols[col]:
                        self.star[row][col] = True
                        self.covered_cols[col] = True
                        break
        else:
            for col in cols:
                smallest = min(self.dist[row][col] for row in rows)
                for row in rows:
                    self.dist[row][col] -= smallest
            for col in cols:
                for row in rows:
                    if self._is_zero(row, col) and not self.covered_rows[row]:
                        self.star[row][col] = True
                        self.covered_cols[col] = True
                        self.covered_rows[row] = True
                        break
            self.covered_rows = [False] * self.n_rows

    def _prime_zeros(self) -> tuple[int, int] | None:
        """Prime uncovered zeros; return a primed zero whose row has no star."""
        zeros_found = True
        while zeros_found:
            zeros_found = False
            for col in range(self.n_cols):
                if self.covered_cols[col]:
                    continue
                for row in range(self.n_rows):
                    if self.covered_rows[row] or not self._is_zero(row, col):
                        continue
                    self.prime[row][col] = True
                    star_col = self._star_col_in_row(row)
                    if star_col is None:
                        return row, col
                    self.covered_rows[row] = True
                    self.covered_cols[star_col] = False
                    zeros_found = True
                    break
        return None

    def _star_col_in_row(self, row: int) -> int | None:
        return next((c for c in range(self.n_cols) if self.star[row][c]), None)

    def _star_row_in_col(self, col: int) -> int | None:
        return next((r for r in range(self.n_rows) if self.star[r][col]), None)

    def _augment(self, row: int, col: int) -> None:
        new_star = [line[:] for line in self.star]
        new_star[row][col] = True
        star_col = col
        star_row = self._star_row_in_col(star_col)
        while star_row is not None:
            new_star[star_row][star_col] = False
            prime_row = star_row
            prime_col = next(c for c in range(self.n_cols) if self.prime[prime_row][c])
            new_star[prime_row][prime_col] = True
            star_col = prime_col
            star_row = self._star_row_in_col(star_col)
        self.star = new_star
        self.prime = [[False] * self.n_cols for _ in range(self.n_rows)]
        self.covered_rows = [False] * self.n_rows
        for c in range(self.n_cols):
            if any(self.star[r][c] for r in range(self.n_rows)):
                self.covered_cols[c] = True

    def _adjust(self) -> None:
        h = min(
            (
                self.dist[row][col]
                for row in range(self.n_rows)
                if not self.covered_rows[row]
                for col in range(self.n_cols)
                if not self.covered_cols[col]
            ),
            default=sys.float_info.max,
        )
        for row in range(self.n_rows):
            if self.covered_rows[row]:
                self.dist[row] = [v + h for v in self.dist[row]]
        for col in range(self.n_cols):
            if not self.covered_cols[col]:
                for row in range(self.n_rows):
                    self.dist[row][col] -= h

    def solve(self) -> list[int]:
        self._preliminary()
        while sum(self.covered_cols) != self.min_dim:
            while (found := self._prime_zeros()) is None:
                self._adjust()
            self._augment(*found)
        return [
            col if (col := self._star_col_in_row(row)) is not None else -1
            for row in range(self.n_rows)
        ]


def solve_assignment(cost_matrix: Sequence[Sequence[float]]) -> AssignmentResult:
    """Assign rows to columns so that the summed cost is minimal.

    The matrix must be rectangular, non-empty and hold no negative entries.
    """
    matrix = [[float(v) for v in row] for row in cost_matrix]
    if not matrix or not matrix[0]:
        raise ValueError("cost matrix must be non-empty")
    if any(len(row) != len(matrix[0]) for row in matrix):
        raise ValueError("cost matrix rows must all have the same length")
    if any(v < 0 for row in matrix for v in row):
        raise ValueError("all matrix elements have to be non-negative")

    assignment = _Munkres(matrix).solve()
    cost = sum(matrix[row][col] for row, col in enumerate(assignment) if col >= 0)
    return AssignmentResult(cost, assignment)