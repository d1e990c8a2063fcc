"""
Error taxonomy for the kpartition clustering core.

All errors are raised immediately to the caller and are never retried.
"""

from typing import Optional


class ClusteringError(Exception):
    """Base class for errors raised by kpartition."""


class InvalidArgumentError(ClusteringError, ValueError):
    """Malformed call parameters (empty dataset, bad K, mixed dimensions...)."""


class DimensionMismatchError(ClusteringError, ValueError):
    """Points or centroids of differing dimension were combined."""

    def __init__(self, expected: int, actual: int, message: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"Expected dimension {expected}, got {actual}"
        super().__init__(message)


class IndexOutOfRangeError(ClusteringError, IndexError):
    """Coordinate index outside [0, dimension)."""

    def __init__(self, index: int, dimension: int):
        self.index = index
        self.dimension = dimension
        super().__init__(f"Coordinate index {index} out of range for dimension {dimension}")
