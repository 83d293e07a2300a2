"""Wave (Lee algorithm) shortest paths on passability grids."""

from .errors import InvalidInput, InvalidState, WavePathError
from .field import DistanceField, GridField
from .finder import WavePathfinder, find_path
from .search import backtrace, expand_wave
from .types import START_CELL, UNVISITED, Coord, Path

__all__ = [
    "Coord",
    "DistanceField",
    "GridField",
    "InvalidInput",
    "InvalidState",
    "Path",
    "START_CELL",
    "UNVISITED",
    "WavePathError",
    "WavePathfinder",
    "backtrace",
    "expand_wave",
    "find_path",
]
