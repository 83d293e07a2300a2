"""Breadth-first wave expansion (Lee algorithm) over a passability grid."""

from __future__ import annotations

import logging
from collections import deque

import numpy as np

from wavepath.field import DistanceField, GridField
from wavepath.types import NEIGHBOR_OFFSETS, START_CELL, UNVISITED, Coord

LOGGER = logging.getLogger(__name__)


def expand_wave(grid: GridField, start: Coord) -> DistanceField:
    """Label every cell reachable from ``start`` with its minimum 4-way step count.

    The start cell is distance 0 whatever its own passability flag says; only
    neighbors have to be passable to be entered. A start outside the grid
    labels nothing. Cells are written once, in the order the FIFO frontier
    reaches them, which is non-decreasing distance.
    """
    rows, cols = grid.shape
    steps = np.full((rows, cols), UNVISITED, dtype=np.int64)
    start = (int(start[0]), int(start[1]))

    if not grid.in_bounds(*start):
        LOGGER.debug("Wave start %s lies outside %dx%d grid; nothing labeled", start, rows, cols)
        return DistanceField(steps, start)

    steps[start] = START_CELL
    frontier: deque[Coord] = deque([start])
    labeled = 1
    while frontier:
        r, c = frontier.popleft()
        step = steps[r, c]
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = r + dr, c + dc
            if not grid.is_passable(nr, nc):
                continue
            if steps[nr, nc] != UNVISITED:
                continue
            steps[nr, nc] = step + 1
            labeled += 1
            frontier.append((nr, nc))

    LOGGER.debug("Wave from %s labeled %d/%d cells", start, labeled, rows * cols)
    return DistanceField(steps, start)
