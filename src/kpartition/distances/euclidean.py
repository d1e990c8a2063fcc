"""
Euclidean distance metric for clustering.

The default metric, used when no other is requested.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class EuclideanDistance(DistanceMetric):
    """Euclidean (L2) distance metric.

    Computes ||x - μ|| where μ is the cluster center.
    """

    name = 'euclidean'

    def __init__(self, squared: bool = False):
        """
        Args:
            squared: If True, return squared distances.
                    If False (default), return actual Euclidean distances.
        """
        self.squared = squared

    def compute(self, points: Tensor, center: Tensor) -> Tensor:
        """Compute Euclidean distances from points to a center.

        Args:
            points: (n, d) tensor of points
            center: (d,) tensor

        Returns:
            (n,) tensor of distances
        """
        self._check_dimensions(points, center)

        diff = points - center.unsqueeze(0)
        squared_distances = torch.sum(diff * diff, dim=1)

        if self.squared:
            return squared_distances
        else:
            return torch.sqrt(squared_distances)

    def pairwise(self, points: Tensor, centers: Tensor) -> Tensor:
        """(n, k) distances computed by broadcasting.

        Differences are taken explicitly rather than through the
        ||x||² + ||y||² - 2<x,y> expansion so equal distances stay equal.
        """
        self._check_dimensions(points, centers)

        diff = points.unsqueeze(1) - centers.unsqueeze(0)  # (n, k, d)
        squared_distances = torch.sum(diff * diff, dim=2)

        if self.squared:
            return squared_distances
        else:
            return torch.sqrt(squared_distances)

    def __repr__(self) -> str:
        return f"EuclideanDistance(squared={self.squared})"
