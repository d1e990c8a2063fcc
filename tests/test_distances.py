# tests/test_distances.py
"""
Distance metrics: values, broadcasting, resolution by name, custom functions.
"""

from __future__ import annotations

import pytest
import torch

from kpartition.distances import (
    DistanceMetric,
    EuclideanDistance,
    ManhattanDistance,
    CallableDistance,
    get_metric,
)
from kpartition.exceptions import DimensionMismatchError, InvalidArgumentError


@pytest.fixture
def points():
    return torch.tensor([[0.0, 0.0], [3.0, 4.0], [1.0, 1.0]], dtype=torch.float64)


@pytest.fixture
def centers():
    return torch.tensor([[0.0, 0.0], [3.0, 4.0]], dtype=torch.float64)


def test_euclidean_compute(points):
    d = EuclideanDistance().compute(points, torch.zeros(2, dtype=torch.float64))
    assert d.tolist() == pytest.approx([0.0, 5.0, 2 ** 0.5])


def test_euclidean_squared(points):
    d = EuclideanDistance(squared=True).compute(points, torch.zeros(2, dtype=torch.float64))
    assert d.tolist() == pytest.approx([0.0, 25.0, 2.0])


def test_manhattan_compute(points):
    d = ManhattanDistance().compute(points, torch.zeros(2, dtype=torch.float64))
    assert d.tolist() == pytest.approx([0.0, 7.0, 2.0])


@pytest.mark.parametrize("metric", [EuclideanDistance(), ManhattanDistance()])
def test_pairwise_matches_column_wise_compute(metric, points, centers):
    full = metric.pairwise(points, centers)
    assert full.shape == (3, 2)
    for k in range(centers.shape[0]):
        assert torch.equal(full[:, k], metric.compute(points, centers[k]))


def test_pairwise_is_symmetric_on_swapped_roles(points):
    metric = ManhattanDistance()
    assert torch.equal(metric.pairwise(points, points), metric.pairwise(points, points).t())


def test_dimension_mismatch_is_rejected(points):
    with pytest.raises(DimensionMismatchError):
        EuclideanDistance().compute(points, torch.zeros(3, dtype=torch.float64))
    with pytest.raises(DimensionMismatchError):
        ManhattanDistance().pairwise(points, torch.zeros(1, 3, dtype=torch.float64))
    with pytest.raises(DimensionMismatchError):
        EuclideanDistance().between(torch.zeros(2), torch.zeros(3))


def test_between_returns_float():
    value = ManhattanDistance().between(torch.tensor([0.0, 0.0]), torch.tensor([3.0, 4.0]))
    assert isinstance(value, float)
    assert value == 7.0


@pytest.mark.parametrize("name,cls", [
    ("euclidean", EuclideanDistance),
    ("EUCLIDEAN", EuclideanDistance),
    ("l2", EuclideanDistance),
    ("manhattan", ManhattanDistance),
    ("cityblock", ManhattanDistance),
    ("l1", ManhattanDistance),
])
def test_get_metric_by_name(name, cls):
    assert isinstance(get_metric(name), cls)


def test_get_metric_passes_instances_through():
    metric = ManhattanDistance()
    assert get_metric(metric) is metric


def test_get_metric_wraps_callables():
    metric = get_metric(lambda a, b: float(torch.sum((a - b) ** 2)))
    assert isinstance(metric, CallableDistance)
    assert isinstance(metric, DistanceMetric)


@pytest.mark.parametrize("bad", ["cosine", 3, None])
def test_get_metric_rejects_unknown(bad):
    with pytest.raises(InvalidArgumentError):
        get_metric(bad)


def test_callable_distance_values(points, centers):
    def chebyshev(a, b):
        return torch.max(torch.abs(a - b)).item()

    metric = CallableDistance(chebyshev)
    assert metric.name == "chebyshev"
    full = metric.pairwise(points, centers)
    assert full.tolist() == [[0.0, 4.0], [4.0, 0.0], [1.0, 3.0]]


def test_callable_distance_rejects_negative_values(points):
    metric = CallableDistance(lambda a, b: -1.0)
    with pytest.raises(InvalidArgumentError):
        metric.compute(points, torch.zeros(2, dtype=torch.float64))


@pytest.mark.parametrize("bad", [float("nan"), float("inf")])
def test_callable_distance_rejects_non_finite_values(points, bad):
    def flaky(a, b):
        return bad if a[0].item() == 1.0 else torch.sum(torch.abs(a - b)).item()

    metric = CallableDistance(flaky)
    with pytest.raises(InvalidArgumentError):
        metric.compute(points, torch.zeros(2, dtype=torch.float64))
    with pytest.raises(InvalidArgumentError):
        metric.pairwise(points, points)


def test_callable_distance_requires_callable():
    with pytest.raises(InvalidArgumentError):
        CallableDistance("euclidean")
