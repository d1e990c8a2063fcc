"""
Manhattan (city block) distance metric.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class ManhattanDistance(DistanceMetric):
    """Manhattan (L1) distance: sum over dimensions of |x_i - μ_i|."""

    name = 'manhattan'

    def compute(self, points: Tensor, center: Tensor) -> Tensor:
        self._check_dimensions(points, center)
        return torch.sum(torch.abs(points - center.unsqueeze(0)), dim=1)

    def pairwise(self, points: Tensor, centers: Tensor) -> Tensor:
        self._check_dimensions(points, centers)
        diff = points.unsqueeze(1) - centers.unsqueeze(0)  # (n, k, d)
        return torch.sum(torch.abs(diff), dim=2)
