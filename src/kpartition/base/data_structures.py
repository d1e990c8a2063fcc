"""
Core data structures for the kpartition clustering engine.

This module provides the point/cluster data model the Lloyd loop operates
on, the identity generator used to label points, and the per-iteration
state records kept for convergence checking and debugging.
"""

from typing import Optional, List, Dict, Any, Iterator, Sequence, Union
from dataclasses import dataclass, field
from enum import Enum
import torch
from torch import Tensor
import numpy as np

from ..exceptions import (
    DimensionMismatchError, IndexOutOfRangeError, InvalidArgumentError
)


CoordinateLike = Union['Point', Tensor, np.ndarray, Sequence[float]]

DTYPE = torch.float64


def as_coordinate_tensor(value: CoordinateLike) -> Tensor:
    """Convert a point, tensor, array or sequence into a 1D float64 CPU tensor.

    Always returns fresh storage, never a view of the input.
    """
    if isinstance(value, Point):
        return value.coordinates.clone()
    if isinstance(value, Tensor):
        coords = value.detach().to(dtype=DTYPE, device='cpu').clone()
    else:
        try:
            coords = torch.tensor(np.asarray(value, dtype=np.float64), dtype=DTYPE)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Cannot convert {type(value)} to coordinates: {e}")
    if coords.dim() != 1:
        raise InvalidArgumentError(f"Coordinates must be 1D, got {coords.dim()}D")
    return coords


class IdentityGenerator:
    """Hands out monotonically increasing point identities.

    Owned by whoever builds a dataset; each engine run keeps its own for
    the centroids it creates, so runs never share counter state.
    """

    def __init__(self, start: int = 0):
        self._next = start

    def next_id(self) -> int:
        """Return the next identity and advance the counter."""
        value = self._next
        self._next += 1
        return value

    def make_point(self, coordinates: CoordinateLike) -> 'Point':
        """Create a point labelled with the next identity."""
        return Point(coordinates, point_id=self.next_id())

    @property
    def issued(self) -> int:
        return self._next

    def __repr__(self) -> str:
        return f"IdentityGenerator(next={self._next})"


class Point:
    """A numeric vector with an identity and a fixed dimension.

    Coordinates may be overwritten (see :meth:`relocate`) but never resized.
    Equality compares coordinates only; identity and flags are ignored.
    The ``visited`` and ``outlier`` flags are carried without behavior.
    """

    __hash__ = None  # equality is over mutable coordinates

    def __init__(self, coordinates: CoordinateLike, point_id: Optional[int] = None):
        """
        Args:
            coordinates: Coordinate vector (copied)
            point_id: Identity, usually from an IdentityGenerator
        """
        coords = as_coordinate_tensor(coordinates)
        if coords.shape[0] == 0:
            raise InvalidArgumentError("Point dimension must be positive")
        self._coordinates = coords
        self._dimension = coords.shape[0]
        self.point_id = point_id
        self.visited = False
        self.outlier = False

    @classmethod
    def zeros(cls, dimension: int, point_id: Optional[int] = None) -> 'Point':
        """Point at the origin of the given dimension."""
        if not isinstance(dimension, int) or dimension <= 0:
            raise InvalidArgumentError(f"Point dimension must be a positive int, got {dimension}")
        return cls(torch.zeros(dimension, dtype=DTYPE), point_id=point_id)

    def copy(self, point_id: Optional[int] = None) -> 'Point':
        """Independent point with the same coordinates."""
        return Point(self._coordinates, point_id=point_id)

    @property
    def dimension(self) -> int:
        return self._dimension

    @property
    def coordinates(self) -> Tensor:
        """(dimension,) float64 tensor holding this point's coordinates."""
        return self._coordinates

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._dimension:
            raise IndexOutOfRangeError(index, self._dimension)

    def get_coordinate(self, index: int) -> float:
        self._check_index(index)
        return float(self._coordinates[index].item())

    def set_coordinate(self, index: int, value: float) -> None:
        self._check_index(index)
        self._coordinates[index] = float(value)

    def relocate(self, target: CoordinateLike) -> None:
        """Overwrite all coordinates with those of ``target``.

        Raises:
            DimensionMismatchError: If target has a different length
        """
        coords = as_coordinate_tensor(target)
        if coords.shape[0] != self._dimension:
            raise DimensionMismatchError(self._dimension, coords.shape[0])
        self._coordinates.copy_(coords)

    def distance_to(self, other: 'Point', metric='euclidean') -> float:
        """Distance between this point and ``other``.

        Args:
            other: Point of the same dimension
            metric: Metric name, DistanceMetric instance or callable

        Returns:
            Non-negative distance
        """
        from ..distances import get_metric

        if other.dimension != self._dimension:
            raise DimensionMismatchError(self._dimension, other.dimension)
        return get_metric(metric).between(self._coordinates, other.coordinates)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        if other.dimension != self._dimension:
            return False
        return torch.equal(self._coordinates, other.coordinates)

    def __repr__(self) -> str:
        return f"Point {self.point_id} {{{self._coordinates.tolist()}}}"


class Cluster:
    """A centroid point plus the points currently assigned to it.

    The cluster exclusively owns its centroid. Members are non-exclusive
    references held in insertion order; the same object cannot be added twice.
    """

    def __init__(self, centroid: Point, metric=None):
        """
        Args:
            centroid: Seed centroid, owned by this cluster from now on
            metric: Metric this cluster is compared under (set by the engine)
        """
        self.centroid = centroid
        self.metric = metric
        self._members: Dict[int, Point] = {}

    @property
    def dimension(self) -> int:
        return self.centroid.dimension

    @property
    def members(self) -> List[Point]:
        return list(self._members.values())

    @property
    def size(self) -> int:
        return len(self._members)

    @property
    def is_empty(self) -> bool:
        return not self._members

    def add_member(self, point: Point) -> None:
        """Assign a point to this cluster."""
        if point.dimension != self.dimension:
            raise DimensionMismatchError(self.dimension, point.dimension)
        key = id(point)
        if key in self._members:
            raise InvalidArgumentError(f"{point!r} is already a member of this cluster")
        self._members[key] = point

    def clear_members(self) -> None:
        self._members.clear()

    def recompute_centroid(self) -> bool:
        """Move the centroid to the coordinate-wise mean of the members.

        An empty cluster keeps its centroid.

        Returns:
            True if the centroid moved
        """
        if not self._members:
            return False

        stacked = torch.stack([p.coordinates for p in self._members.values()])
        new_mean = stacked.mean(dim=0)
        moved = not torch.equal(new_mean, self.centroid.coordinates)
        self.centroid.relocate(new_mean)
        return moved

    def centroid_distance_to(self, point: Point, metric=None) -> float:
        """Distance from ``point`` to this cluster's centroid."""
        if metric is None:
            metric = self.metric if self.metric is not None else 'euclidean'
        return point.distance_to(self.centroid, metric)

    def __contains__(self, point) -> bool:
        return id(point) in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.members)

    def __repr__(self) -> str:
        return f"Cluster(centroid={self.centroid.coordinates.tolist()}, size={self.size})"


class EngineState(Enum):
    """Lifecycle of one clustering run."""
    UNINITIALIZED = 'uninitialized'
    INITIALIZED = 'initialized'
    ITERATING = 'iterating'
    CONVERGED = 'converged'
    ITERATION_LIMIT_REACHED = 'iteration_limit_reached'

    @property
    def is_terminal(self) -> bool:
        return self in (EngineState.CONVERGED, EngineState.ITERATION_LIMIT_REACHED)


@dataclass
class AlgorithmState:
    """State of a clustering run after one assign/update iteration.

    Used for convergence checking and debugging.
    """
    iteration: int
    centers: Tensor      # (K, d) centroids after the update step
    labels: Tensor       # (n,) assignments from the assignment step
    objective_value: float  # assignment cost against the pre-update centroids
    n_moved: int = 0     # clusters whose centroid moved
    converged: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def cluster_sizes(self) -> Tensor:
        return torch.bincount(self.labels, minlength=self.centers.shape[0])
