"""Initialization strategies for clustering algorithms."""

from .first_points import FirstPointsInit
from .random import RandomInit
from .from_previous import FromPreviousInit

__all__ = [
    'FirstPointsInit',
    'RandomInit',
    'FromPreviousInit'
]
