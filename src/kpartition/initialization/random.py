"""
Random initialization strategy for clustering algorithms.

Selects random points from the dataset as initial cluster centers.
"""

from typing import List, Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy
from ..base.data_structures import Cluster, IdentityGenerator
from ..exceptions import InvalidArgumentError
from .first_points import seed_clusters


class RandomInit(InitializationStrategy):
    """Random initialization by selecting points from the dataset.

    Selects n_clusters random points (without replacement) as initial centers.
    """

    def initialize(self, points: Tensor, n_clusters: int,
                   id_generator: Optional[IdentityGenerator] = None,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> List[Cluster]:
        """Initialize clusters with random points.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters
            id_generator: Identity source for the centroid points
            generator: Torch RNG; a seeded one makes the choice reproducible

        Returns:
            List of seeded clusters
        """
        n_points = points.shape[0]

        if n_clusters > n_points:
            raise InvalidArgumentError(f"Cannot create {n_clusters} clusters from {n_points} points")

        # Select random indices without replacement
        indices = torch.randperm(n_points, generator=generator)[:n_clusters]

        return seed_clusters(points[indices], id_generator)
