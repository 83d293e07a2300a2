"""Helpers for the ASCII maps used as fixtures and by the CLI.

Maps look like::

    |A|1|2|x| |
    |x|x|3|x| |
    | | |B|x| |

``x`` is blocked, ``A`` and ``B`` are the start and finish, digits number the
expected path steps and anything else is an open cell.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from wavepath.errors import InvalidInput
from wavepath.field import DistanceField
from wavepath.types import Coord, Path

BLOCKED_MARK = "x"
START_MARK = "A"
FINISH_MARK = "B"


@dataclass(slots=True)
class RenderConfig:
    path_token: str = "*"
    blocked_token: str = BLOCKED_MARK
    open_token: str = " "
    number_steps: bool = False  # Write step indices instead of path_token.


@dataclass(slots=True)
class AsciiMap:
    passable: List[List[bool]]
    start: Optional[Coord] = None
    finish: Optional[Coord] = None
    expected_path: Optional[Path] = None


def parse_ascii_map(drawing: str) -> AsciiMap:
    """Parse a ``|..|..|`` drawing; ``expected_path`` is set only when steps are numbered."""
    passable: List[List[bool]] = []
    start: Optional[Coord] = None
    finish: Optional[Coord] = None
    numbered: Dict[int, Coord] = {}

    lines = ["".join(line.split()) for line in drawing.splitlines()]
    for line in (line for line in lines if line):
        if len(line) < 2 or line[0] != "|" or line[-1] != "|":
            raise InvalidInput(f"Map line {line!r} must start and end with '|'")
        row = len(passable)
        cells = line[1:-1].split("|")
        passable.append([cell != BLOCKED_MARK for cell in cells])
        for col, cell in enumerate(cells):
            if cell.isdecimal():
                step = int(cell)
                if step in numbered:
                    raise InvalidInput(f"Step {step} appears twice in map")
                numbered[step] = (row, col)
            elif cell == START_MARK:
                if start is not None:
                    raise InvalidInput(f"Second start marker at {(row, col)}")
                start = (row, col)
            elif cell == FINISH_MARK:
                if finish is not None:
                    raise InvalidInput(f"Second finish marker at {(row, col)}")
                finish = (row, col)

    expected: Optional[Path] = None
    if numbered:
        if start is None or finish is None:
            raise InvalidInput("Numbered path steps need both start and finish markers")
        expected = [start] + [numbered[step] for step in sorted(numbered)] + [finish]
    return AsciiMap(passable=passable, start=start, finish=finish, expected_path=expected)


def render_path(
    passable: Sequence[Sequence[bool]],
    path: Optional[Sequence[Coord]] = None,
    start: Optional[Coord] = None,
    finish: Optional[Coord] = None,
    config: Optional[RenderConfig] = None,
) -> str:
    """Draw the grid in the fixture format with ``path`` overlaid."""
    config = config or RenderConfig()
    path = list(path or [])
    if path:
        start = start or path[0]
        finish = finish or path[-1]
    steps = {coord: idx for idx, coord in enumerate(path)}
    lines: List[str] = []
    for r, row in enumerate(passable):
        cells: List[str] = []
        for c, open_cell in enumerate(row):
            key = (r, c)
            if key == start:
                cell = START_MARK
            elif key == finish:
                cell = FINISH_MARK
            elif key in steps:
                cell = str(steps[key]) if config.number_steps else config.path_token
            elif not open_cell:
                cell = config.blocked_token
            else:
                cell = config.open_token
            cells.append(cell)
        lines.append("|" + "|".join(cells) + "|")
    return "\n".join(lines)


def render_distances(field: DistanceField, unvisited_token: str = ".") -> str:
    """Right-aligned table of step counts, ``unvisited_token`` for unreachable cells."""
    rows = field.to_list()
    if not rows:
        return ""
    top = field.max_distance
    width = max(len(unvisited_token), len(str(top)) if top is not None else 1)
    lines = []
    for row in rows:
        cells = [unvisited_token if value < 0 else str(value) for value in row]
        lines.append(" ".join(cell.rjust(width) for cell in cells))
    return "\n".join(lines)
