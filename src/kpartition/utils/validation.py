"""
Input validation and conversion utilities.

Turns caller input into Points and tensors, and checks run parameters
before any computation starts.
"""

from typing import Optional, Union, Sequence, List, Tuple
import numbers
import torch
from torch import Tensor
import numpy as np

from ..base.data_structures import Point, IdentityGenerator
from ..exceptions import InvalidArgumentError, DimensionMismatchError


PointsLike = Union[Sequence[Point], Tensor, np.ndarray, Sequence[Sequence[float]]]


def as_points(X: PointsLike,
              id_generator: Optional[IdentityGenerator] = None) -> List[Point]:
    """Convert a dataset into a list of Points.

    Points are passed through unchanged (the same objects are returned).
    Rows of a 2D tensor, array or nested list become new Points labelled by
    ``id_generator`` (a fresh one when not given).

    Raises:
        InvalidArgumentError: If the input cannot be interpreted as points
    """
    if isinstance(X, (Tensor, np.ndarray)):
        if X.ndim != 2:
            raise InvalidArgumentError(f"Expected 2D array, got {X.ndim}D")
        rows = list(X)
    elif isinstance(X, (list, tuple)):
        rows = list(X)
    else:
        raise InvalidArgumentError(f"Cannot convert {type(X)} to points")

    if all(isinstance(r, Point) for r in rows):
        return rows

    if id_generator is None:
        id_generator = IdentityGenerator()

    points = []
    for row in rows:
        if isinstance(row, Point):
            points.append(row)
        else:
            points.append(id_generator.make_point(row))
    return points


def points_to_tensor(points: Sequence[Point], device: Optional[torch.device] = None) -> Tensor:
    """Stack point coordinates into an (n, d) float64 tensor.

    Raises:
        InvalidArgumentError: If the points do not share one dimension
    """
    if len(points) == 0:
        raise InvalidArgumentError("Dataset is empty")

    dimension = points[0].dimension
    for i, p in enumerate(points):
        if p.dimension != dimension:
            raise InvalidArgumentError(
                f"Mixed dimensions: point 0 has dimension {dimension}, "
                f"point {i} has dimension {p.dimension}"
            )

    X = torch.stack([p.coordinates for p in points])
    if device is not None:
        X = X.to(device)
    return X


def validate_points(X: PointsLike,
                    id_generator: Optional[IdentityGenerator] = None,
                    device: Optional[torch.device] = None,
                    ensure_finite: bool = True) -> Tuple[List[Point], Tensor]:
    """Validate a dataset and return it as (points, (n, d) tensor).

    Raises:
        InvalidArgumentError: Empty dataset, mixed dimensions, repeated Point
            objects or non-finite values
    """
    points = as_points(X, id_generator)
    data = points_to_tensor(points, device)

    if len({id(p) for p in points}) != len(points):
        raise InvalidArgumentError("The same Point object appears more than once in the dataset")

    if ensure_finite:
        if torch.isnan(data).any():
            raise InvalidArgumentError("Input contains NaN values")
        if torch.isinf(data).any():
            raise InvalidArgumentError("Input contains infinite values")

    return points, data


def check_point_dimension(point: Point, dimension: int) -> None:
    """Raise DimensionMismatchError unless ``point`` has ``dimension``."""
    if point.dimension != dimension:
        raise DimensionMismatchError(dimension, point.dimension)


def check_n_clusters(n_clusters: int, n_samples: int) -> None:
    """Validate number of clusters.

    Args:
        n_clusters: Number of clusters
        n_samples: Number of samples

    Raises:
        InvalidArgumentError: If invalid
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, numbers.Integral):
        raise InvalidArgumentError(f"n_clusters must be int, got {type(n_clusters)}")

    if n_clusters <= 0:
        raise InvalidArgumentError(f"n_clusters must be positive, got {n_clusters}")

    if n_clusters > n_samples:
        raise InvalidArgumentError(f"n_clusters ({n_clusters}) cannot be larger than "
                                   f"n_samples ({n_samples})")


def check_max_iter(max_iter: int) -> None:
    if isinstance(max_iter, bool) or not isinstance(max_iter, numbers.Integral):
        raise InvalidArgumentError(f"max_iter must be int, got {type(max_iter)}")
    if max_iter < 1:
        raise InvalidArgumentError(f"max_iter must be at least 1, got {max_iter}")


def check_tol(tol: float) -> None:
    if not isinstance(tol, numbers.Real) or tol < 0 or not np.isfinite(tol):
        raise InvalidArgumentError(f"tol must be a finite non-negative number, got {tol}")


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> Optional[torch.Generator]:
    """Create generator from random state.

    Args:
        random_state: Seed or generator

    Returns:
        Generator or None
    """
    if random_state is None:
        return None
    elif isinstance(random_state, numbers.Integral) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    else:
        raise InvalidArgumentError(f"random_state must be int or Generator, got {type(random_state)}")
