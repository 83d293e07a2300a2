"""Search exports."""

from .backtrace import backtrace
from .wave import expand_wave

__all__ = [
    "backtrace",
    "expand_wave",
]
