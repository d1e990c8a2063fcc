# tests/test_metrics.py
"""
Evaluation metrics on small hand-checked partitions.
"""

from __future__ import annotations

import pytest
import torch

from kpartition.utils.metrics import pairwise_distances, inertia, silhouette_score


@pytest.fixture
def two_pairs():
    X = torch.tensor([[0.0, 0.0], [0.0, 1.0], [10.0, 10.0], [10.0, 11.0]], dtype=torch.float64)
    labels = torch.tensor([0, 0, 1, 1])
    centers = torch.tensor([[0.0, 0.5], [10.0, 10.5]], dtype=torch.float64)
    return X, labels, centers


def test_pairwise_distances_default_is_self(two_pairs):
    X, _, _ = two_pairs
    D = pairwise_distances(X)
    assert D.shape == (4, 4)
    assert torch.all(torch.diagonal(D) == 0)
    assert D[0, 1].item() == 1.0


def test_pairwise_distances_manhattan(two_pairs):
    X, _, centers = two_pairs
    D = pairwise_distances(X, centers, metric="manhattan")
    assert D[0].tolist() == [0.5, 20.5]


def test_inertia(two_pairs):
    X, labels, centers = two_pairs
    assert inertia(X, labels, centers) == pytest.approx(1.0)
    assert inertia(X, labels, centers, metric="manhattan") == pytest.approx(1.0)


def test_silhouette_well_separated(two_pairs):
    X, labels, _ = two_pairs
    assert silhouette_score(X, labels) > 0.9


def test_silhouette_single_cluster_is_zero(two_pairs):
    X, _, _ = two_pairs
    assert silhouette_score(X, torch.zeros(4, dtype=torch.long)) == 0.0
