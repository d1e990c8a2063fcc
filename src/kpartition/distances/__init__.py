"""Distance metrics for clustering algorithms."""

from typing import Callable, Union

from ..base.interfaces import DistanceMetric
from ..exceptions import InvalidArgumentError
from .euclidean import EuclideanDistance
from .manhattan import ManhattanDistance
from .custom import CallableDistance


_NAMED_METRICS = {
    'euclidean': EuclideanDistance,
    'l2': EuclideanDistance,
    'manhattan': ManhattanDistance,
    'cityblock': ManhattanDistance,
    'l1': ManhattanDistance,
}


def get_metric(metric: Union[str, DistanceMetric, Callable]) -> DistanceMetric:
    """Resolve a metric specification to a DistanceMetric instance.

    Args:
        metric: A name ('euclidean', 'manhattan', ...), a DistanceMetric,
            or a callable ``fn(a, b) -> float``

    Returns:
        DistanceMetric
    """
    if isinstance(metric, DistanceMetric):
        return metric
    if isinstance(metric, str):
        key = metric.lower()
        if key not in _NAMED_METRICS:
            raise InvalidArgumentError(
                f"Unknown metric: {metric!r}. Available: {sorted(_NAMED_METRICS)}"
            )
        return _NAMED_METRICS[key]()
    if callable(metric):
        return CallableDistance(metric)
    raise InvalidArgumentError(f"Cannot use {type(metric)} as a distance metric")


__all__ = [
    'DistanceMetric',
    'EuclideanDistance',
    'ManhattanDistance',
    'CallableDistance',
    'get_metric'
]
