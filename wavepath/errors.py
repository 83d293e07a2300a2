"""Exceptions raised by the pathfinder."""

from __future__ import annotations


class WavePathError(Exception):
    """Base class for pathfinder failures."""


class InvalidInput(WavePathError, ValueError):
    """The grid (or a coordinate) handed to the pathfinder is malformed."""


class InvalidState(WavePathError, RuntimeError):
    """An operation was called out of order, or the distance field is corrupt."""


__all__ = ["WavePathError", "InvalidInput", "InvalidState"]
