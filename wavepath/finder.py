"""Single-source, many-destination pathfinding session over one grid."""

from __future__ import annotations

import threading
from typing import Any, Optional

from wavepath.errors import InvalidState
from wavepath.field import DistanceField, GridField
from wavepath.search import backtrace, expand_wave
from wavepath.types import Coord, Path


class WavePathfinder:
    """Grow one wave per start, then answer any number of finish queries from it.

    All coordinates are ``(row, col)``. Typical use::

        finder = WavePathfinder([[1, 1, 1], [0, 0, 1], [1, 1, 1]])
        finder.expand_wave((0, 0))
        finder.backtrace_path((2, 0))  # [(0, 0), (0, 1), (0, 2), (1, 2), ...]
    """

    def __init__(self, grid: Any):
        self.grid = GridField(grid)
        self.result_path: Optional[Path] = None
        self._field: Optional[DistanceField] = None
        self._lock = threading.Lock()

    @classmethod
    def find_path_once(cls, grid: Any, start: Coord, finish: Coord) -> Optional[Path]:
        """Shorthand for building a throwaway session and calling ``find_path``."""
        return cls(grid).find_path(start, finish)

    @property
    def distance_field(self) -> Optional[DistanceField]:
        with self._lock:
            return self._field

    def expand_wave(self, start: Coord) -> DistanceField:
        """Replace the current distance field with a fresh one grown from ``start``."""
        field = expand_wave(self.grid, start)
        with self._lock:
            self._field = field
            self.result_path = None
        return field

    def backtrace_path(self, finish: Coord) -> Optional[Path]:
        """Shortest path from the last expansion's start to ``finish``, or ``None``."""
        with self._lock:
            field = self._field
        if field is None:
            raise InvalidState("Call expand_wave first to calculate the distance field")
        path = backtrace(field, finish)
        with self._lock:
            # A newer expansion owns result_path once it has been published.
            if self._field is field:
                self.result_path = path
        return path

    def find_path(self, start: Coord, finish: Coord) -> Optional[Path]:
        self.expand_wave(start)
        return self.backtrace_path(finish)

    def __repr__(self) -> str:
        field = self.distance_field
        origin = field.start if field is not None else None
        return f"WavePathfinder(rows={self.grid.rows}, cols={self.grid.cols}, start={origin})"


def find_path(grid: Any, start: Coord, finish: Coord) -> Optional[Path]:
    """Stateless construct + expand + backtrace; ``None`` when no path exists."""
    field = expand_wave(GridField(grid), start)
    return backtrace(field, finish)
