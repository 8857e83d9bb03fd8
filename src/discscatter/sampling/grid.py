"""Uniform acceleration grid over the disc's bounding square."""
from __future__ import annotations

import math
from typing import Iterator

import numpy as np

EMPTY = -1


class DiscGrid:
    """Flat ``row * width + col`` grid covering ``[-radius, radius]^2``.

    With ``cell = r_min / sqrt(2)`` a cell holds at most one sample, so the
    neighbours of a candidate closer than ``r_min`` all lie within two cells.
    """

    __slots__ = ("cell", "origin", "width", "height", "cells")

    def __init__(self, radius: float, cell: float):
        if not (radius > 0.0 and cell > 0.0):
            raise ValueError("radius and cell must be > 0")
        n = int(math.ceil(2.0 * radius / cell))
        if n < 1:
            raise ValueError(f"grid resolution must be >= 1, got {n}")
        self.cell = float(cell)
        self.origin = -float(radius)
        self.width = n
        self.height = n
        self.cells = np.full(n * n, EMPTY, dtype=np.int64)

    @property
    def shape(self) -> tuple[int, int]:
        return self.height, self.width

    def locate(self, x: float, y: float) -> tuple[int, int]:
        """Return ``(row, col)`` of the cell holding ``(x, y)``, clamped to the grid."""
        col = int((x - self.origin) / self.cell)
        row = int((y - self.origin) / self.cell)
        col = min(max(col, 0), self.width - 1)
        row = min(max(row, 0), self.height - 1)
        return row, col

    def store(self, row: int, col: int, index: int) -> None:
        self.cells[row * self.width + col] = index

    def put(self, x: float, y: float, index: int) -> None:
        self.store(*self.locate(x, y), index)

    def get(self, row: int, col: int) -> int:
        return int(self.cells[row * self.width + col])

    def around(self, row: int, col: int, reach: int = 2) -> Iterator[int]:
        """Yield stored sample indices in the ``(2*reach+1)^2`` block around a cell."""
        c0 = max(col - reach, 0)
        c1 = min(col + reach + 1, self.width)
        for r in range(max(row - reach, 0), min(row + reach + 1, self.height)):
            base = r * self.width
            for si in self.cells[base + c0 : base + c1]:
                if si != EMPTY:
                    yield int(si)

    def occupied(self) -> int:
        return int(np.count_nonzero(self.cells != EMPTY))


__all__ = ["DiscGrid", "EMPTY"]
