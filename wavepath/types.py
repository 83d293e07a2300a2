"""Core data contracts shared across the pathfinder."""

from __future__ import annotations

from typing import List, Tuple

# (row, col), row-major with row 0 at the top.
Coord = Tuple[int, int]
Path = List[Coord]

START_CELL = 0
UNVISITED = -1

# Wave propagation order: up, right, down, left.
NEIGHBOR_OFFSETS: Tuple[Coord, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

# Backtrace order: down, up, right, left. Decides which shortest path wins a tie.
BACKTRACE_OFFSETS: Tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))

__all__ = [
    "Coord",
    "Path",
    "START_CELL",
    "UNVISITED",
    "NEIGHBOR_OFFSETS",
    "BACKTRACE_OFFSETS",
]
