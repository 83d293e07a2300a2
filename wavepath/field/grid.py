"""Immutable passability snapshot the wave is grown over."""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

import numpy as np

from wavepath.errors import InvalidInput


class GridField:
    """Rectangular table of passable (True) and blocked (False) cells.

    The caller's table is copied row by row on construction, so mutating it
    afterwards never reaches the session. Any truthy cell value counts as
    passable: ``[[1, 1, 0], [0, 1, 1]]`` works as well as booleans.
    """

    def __init__(self, grid: Any):
        self._cells = _coerce_grid(grid)
        self._cells.flags.writeable = False

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        rows, cols = self._cells.shape
        return int(rows), int(cols)

    @property
    def rows(self) -> int:
        return self.shape[0]

    @property
    def cols(self) -> int:
        return self.shape[1]

    def in_bounds(self, row: int, col: int) -> bool:
        rows, cols = self.shape
        return 0 <= row < rows and 0 <= col < cols

    def is_passable(self, row: int, col: int) -> bool:
        """False for blocked cells and for anything outside the grid."""
        if not self.in_bounds(row, col):
            return False
        return bool(self._cells[row, col])

    def to_list(self) -> List[List[bool]]:
        return [[bool(cell) for cell in row] for row in self._cells]

    def __repr__(self) -> str:
        return f"GridField(rows={self.rows}, cols={self.cols})"


def _coerce_grid(grid: Any) -> np.ndarray:
    if isinstance(grid, np.ndarray):
        if grid.ndim != 2:
            raise InvalidInput(f"Incorrect matrix: expected 2 dimensions, got {grid.ndim}")
        return np.array(grid, dtype=bool, copy=True)
    if not _is_row_like(grid):
        raise InvalidInput(f"Incorrect matrix: {type(grid).__name__} is not a table")

    rows: List[List[bool]] = []
    width = None
    for idx, row in enumerate(grid):
        if isinstance(row, np.ndarray) and row.ndim == 1:
            row = row.tolist()
        if not _is_row_like(row):
            raise InvalidInput(f"Incorrect matrix: row {idx} is {type(row).__name__}, not a sequence")
        cells = [bool(value) for value in row]
        if width is None:
            width = len(cells)
        elif len(cells) != width:
            raise InvalidInput(
                f"Incorrect matrix: row {idx} has {len(cells)} cells, expected {width}"
            )
        rows.append(cells)

    if not rows:
        return np.zeros((0, 0), dtype=bool)
    return np.array(rows, dtype=bool).reshape(len(rows), width)


def _is_row_like(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
