"""Field exports."""

from .distance import DistanceField
from .grid import GridField

__all__ = [
    "DistanceField",
    "GridField",
]
