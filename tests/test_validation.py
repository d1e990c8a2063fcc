# tests/test_validation.py
"""
Input conversion and parameter checks, plus device parsing.
"""

from __future__ import annotations

import numpy as np
import pytest
import torch

from kpartition import IdentityGenerator, Point
from kpartition.exceptions import InvalidArgumentError, DimensionMismatchError
from kpartition.utils.validation import (
    as_points,
    points_to_tensor,
    validate_points,
    check_point_dimension,
    check_n_clusters,
    check_max_iter,
    check_tol,
    check_random_state,
)
from kpartition.utils.device import parse_device


def test_as_points_passes_points_through():
    pts = [Point([1, 2]), Point([3, 4])]
    out = as_points(pts)
    assert all(a is b for a, b in zip(out, pts))


def test_as_points_labels_rows_with_generator():
    ids = IdentityGenerator(start=5)
    out = as_points(np.array([[1.0, 2.0], [3.0, 4.0]]), id_generator=ids)
    assert [p.point_id for p in out] == [5, 6]
    assert out[1].coordinates.tolist() == [3.0, 4.0]


@pytest.mark.parametrize("bad", [np.zeros(3), torch.zeros(2, 2, 2), 42, "points"])
def test_as_points_rejects_bad_input(bad):
    with pytest.raises(InvalidArgumentError):
        as_points(bad)


def test_points_to_tensor():
    X = points_to_tensor([Point([1, 2]), Point([3, 4])])
    assert X.dtype == torch.float64
    assert X.tolist() == [[1.0, 2.0], [3.0, 4.0]]

    with pytest.raises(InvalidArgumentError):
        points_to_tensor([])
    with pytest.raises(InvalidArgumentError):
        points_to_tensor([Point([1]), Point([1, 2])])


def test_validate_points_rejects_infinite_values():
    with pytest.raises(InvalidArgumentError):
        validate_points([[0.0, float("inf")]])
    points, X = validate_points([[0.0, 1.0]])
    assert len(points) == 1
    assert X.shape == (1, 2)


def test_check_point_dimension():
    check_point_dimension(Point([1, 2]), 2)
    with pytest.raises(DimensionMismatchError):
        check_point_dimension(Point([1, 2]), 3)


def test_check_n_clusters():
    check_n_clusters(3, 3)
    check_n_clusters(np.int64(2), 3)
    for bad in (0, 4, 1.5, False):
        with pytest.raises(InvalidArgumentError):
            check_n_clusters(bad, 3)


def test_check_max_iter_and_tol():
    check_max_iter(1)
    check_tol(0)
    check_tol(1e-9)
    with pytest.raises(InvalidArgumentError):
        check_max_iter(0)
    for bad in (-1e-3, float("nan"), "0"):
        with pytest.raises(InvalidArgumentError):
            check_tol(bad)


def test_check_random_state():
    assert check_random_state(None) is None
    gen = torch.Generator()
    assert check_random_state(gen) is gen
    a = torch.randperm(10, generator=check_random_state(1))
    b = torch.randperm(10, generator=check_random_state(1))
    assert torch.equal(a, b)
    c = torch.randperm(10, generator=check_random_state(np.int64(1)))
    assert torch.equal(a, c)
    for bad in ("seed", 1.5, True):
        with pytest.raises(InvalidArgumentError):
            check_random_state(bad)


def test_parse_device():
    assert parse_device(None) == torch.device("cpu")
    assert parse_device("cpu") == torch.device("cpu")
    with pytest.raises(InvalidArgumentError):
        parse_device("tpu")
    with pytest.raises(InvalidArgumentError):
        parse_device(0)
