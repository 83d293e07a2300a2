"""Walk a distance field downhill from a finish cell back to the start."""

from __future__ import annotations

import logging
from typing import Optional

from wavepath.errors import InvalidState
from wavepath.field import DistanceField
from wavepath.types import BACKTRACE_OFFSETS, UNVISITED, Coord, Path

LOGGER = logging.getLogger(__name__)


def backtrace(field: DistanceField, finish: Coord) -> Optional[Path]:
    """Return the path ``[start, ..., finish]`` or ``None`` when ``finish`` was never reached.

    At each cell the first neighbor (down, up, right, left) holding exactly one
    step less is taken, so the same field and finish always give the same path.
    A field without such a neighbor was not produced by ``expand_wave`` and
    raises ``InvalidState``.
    """
    finish = (int(finish[0]), int(finish[1]))
    remaining = field.raw(*finish)
    if remaining == UNVISITED:
        LOGGER.debug("No path from %s to %s", field.start, finish)
        return None

    path: Path = [finish]
    current = finish
    while remaining >= 1:
        step = _downhill(field, current, remaining - 1)
        if step is None:
            raise InvalidState(
                f"Corrupt distance field: no neighbor of {current} holds {remaining - 1}"
            )
        path.append(step)
        current = step
        remaining -= 1

    path.reverse()
    return path


def _downhill(field: DistanceField, coord: Coord, target: int) -> Optional[Coord]:
    r, c = coord
    for dr, dc in BACKTRACE_OFFSETS:
        nr, nc = r + dr, c + dc
        if field.raw(nr, nc) == target:
            return (nr, nc)
    return None
