"""
Clustering evaluation metrics.

Internal quality measures for a finished partition. They take the same
metric specifications as the engine ('euclidean', 'manhattan', a
DistanceMetric or a callable).
"""

from typing import Optional
import torch
from torch import Tensor

from ..distances import get_metric


def pairwise_distances(X: Tensor, Y: Optional[Tensor] = None,
                       metric='euclidean') -> Tensor:
    """Compute pairwise distances between points.

    Args:
        X: (n, d) first set of points
        Y: (m, d) second set of points (if None, uses X)
        metric: Distance metric specification

    Returns:
        (n, m) distance matrix
    """
    if Y is None:
        Y = X
    return get_metric(metric).pairwise(X, Y)


def inertia(X: Tensor, labels: Tensor, centers: Tensor, metric='euclidean') -> float:
    """Compute sum of squared distances from points to their assigned centers.

    Args:
        X: (n, d) data points
        labels: (n,) cluster labels
        centers: (k, d) cluster centers
        metric: Distance metric specification

    Returns:
        Total inertia (lower is better)
    """
    distance = get_metric(metric)
    total = 0.0
    n_clusters = centers.shape[0]

    for k in range(n_clusters):
        mask = labels == k
        if mask.sum() > 0:
            distances = distance.compute(X[mask], centers[k])
            total += torch.sum(distances * distances).item()

    return total


def silhouette_score(X: Tensor, labels: Tensor, metric='euclidean') -> float:
    """Compute mean Silhouette Coefficient.

    The Silhouette Coefficient is calculated using the mean intra-cluster
    distance (a) and the mean nearest-cluster distance (b) for each sample.
    The Silhouette Coefficient for a sample is (b - a) / max(a, b); samples
    in singleton clusters score 0.

    Args:
        X: (n, d) data points
        labels: (n,) cluster labels
        metric: Distance metric specification

    Returns:
        Mean silhouette coefficient in [-1, 1]
    """
    n_samples = len(X)
    present = torch.unique(labels)

    if len(present) < 2:
        return 0.0

    distances = pairwise_distances(X, metric=metric)
    silhouette_values = torch.zeros(n_samples, dtype=distances.dtype)

    for i in range(n_samples):
        same_cluster = labels == labels[i]
        same_cluster[i] = False  # Exclude self

        if same_cluster.sum() == 0:
            continue

        a = distances[i, same_cluster].mean()

        b = min(
            distances[i, labels == k].mean()
            for k in present if k != labels[i]
        )

        denom = torch.max(a, b)
        if denom > 0:
            silhouette_values[i] = (b - a) / denom

    return silhouette_values.mean().item()
