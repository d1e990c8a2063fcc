"""
Hard assignment strategy for clustering algorithms.

Assigns each point to its nearest cluster based on the distance metric.
"""

from typing import Any, Dict, Tuple, Union
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, DistanceMetric


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to nearest centroid.

    Each point is assigned to exactly one cluster based on minimum distance.
    On an exact tie the lowest-indexed cluster wins, so the result does not
    depend on evaluation order.
    """

    def compute_assignments(self, points: Tensor, centers: Tensor,
                            metric: DistanceMetric,
                            return_distances: bool = False,
                            **kwargs) -> Union[Tensor, Tuple[Tensor, Dict[str, Any]]]:
        """Assign each point to nearest centroid.

        Args:
            points: (n, d) data points
            centers: (K, d) centroids
            metric: Distance metric for this run
            return_distances: Also return the distance of each point to its
                assigned centroid, taken from the same distance matrix
            **kwargs: Ignored for basic hard assignment

        Returns:
            (n,) tensor of cluster indices, or (indices, info) with
            info['min_distances'] of shape (n,) when return_distances is set
        """
        distances = metric.pairwise(points, centers)
        assignments = self._nearest(distances)

        if return_distances:
            min_distances = torch.gather(distances, 1, assignments.unsqueeze(1)).squeeze(1)
            return assignments, {'min_distances': min_distances}
        return assignments

    @staticmethod
    def _nearest(distances: Tensor) -> Tensor:
        # argmin returns the first minimal index
        return torch.argmin(distances, dim=1)
