"""Distance field produced by one wave expansion."""

from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

import numpy as np

from wavepath.types import UNVISITED, Coord


class DistanceField:
    """Per-cell minimum step counts from ``start``; ``UNVISITED`` marks unreachable cells.

    The backing array is frozen once the field is built, so a field can be
    handed to any number of readers while a newer expansion is running.
    """

    __slots__ = ("_steps", "start")

    def __init__(self, steps: np.ndarray, start: Coord):
        self._steps = np.array(steps, dtype=np.int64, copy=True)
        self._steps.flags.writeable = False
        self.start: Coord = start

    @property
    def steps(self) -> np.ndarray:
        return self._steps

    @property
    def shape(self) -> Tuple[int, int]:
        rows, cols = self._steps.shape
        return int(rows), int(cols)

    def in_bounds(self, row: int, col: int) -> bool:
        rows, cols = self.shape
        return 0 <= row < rows and 0 <= col < cols

    def raw(self, row: int, col: int) -> int:
        """Stored value including the sentinel; out-of-bounds reads as ``UNVISITED``."""
        if not self.in_bounds(row, col):
            return UNVISITED
        return int(self._steps[row, col])

    def distance(self, coord: Coord) -> Optional[int]:
        value = self.raw(*coord)
        return None if value == UNVISITED else value

    def is_reachable(self, coord: Coord) -> bool:
        return self.raw(*coord) != UNVISITED

    def reachable(self) -> Iterator[Tuple[Coord, int]]:
        """Yield ``((row, col), distance)`` for every labeled cell in row-major order."""
        for row, col in zip(*np.nonzero(self._steps != UNVISITED)):
            yield (int(row), int(col)), int(self._steps[row, col])

    @property
    def max_distance(self) -> Optional[int]:
        if self._steps.size == 0:
            return None
        top = int(self._steps.max())
        return None if top == UNVISITED else top

    def to_list(self) -> List[List[int]]:
        return self._steps.tolist()

    def __getitem__(self, coord: Coord) -> int:
        return self.raw(*coord)

    def __repr__(self) -> str:
        rows, cols = self.shape
        return f"DistanceField(start={self.start}, rows={rows}, cols={cols})"
