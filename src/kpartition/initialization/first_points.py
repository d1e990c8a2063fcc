"""
Deterministic seeding from the leading points of the dataset.

The default strategy: takes the first K points (in input order) whose
coordinate vectors are pairwise distinct as initial centroids.
"""

from typing import List, Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy
from ..base.data_structures import Cluster, IdentityGenerator
from ..exceptions import InvalidArgumentError


def seed_clusters(centers: Tensor,
                  id_generator: Optional[IdentityGenerator] = None) -> List[Cluster]:
    """Build clusters with fresh centroid points copied from ``centers`` rows."""
    if id_generator is None:
        id_generator = IdentityGenerator()
    return [Cluster(id_generator.make_point(center)) for center in centers]


class FirstPointsInit(InitializationStrategy):
    """Seed with the first K points having distinct coordinates.

    Points are chosen without replacement. If the data holds fewer than K
    distinct coordinate vectors, the remaining seeds are filled with the
    skipped duplicates in input order, so two centroids may coincide.
    """

    def initialize(self, points: Tensor, n_clusters: int,
                   id_generator: Optional[IdentityGenerator] = None,
                   **kwargs) -> List[Cluster]:
        """Initialize clusters from the leading distinct points.

        Args:
            points: (n, d) data points
            n_clusters: Number of clusters

        Returns:
            List of seeded clusters
        """
        n_points = points.shape[0]

        if n_clusters > n_points:
            raise InvalidArgumentError(f"Cannot create {n_clusters} clusters from {n_points} points")

        chosen: List[int] = []
        skipped: List[int] = []
        for idx in range(n_points):
            if len(chosen) == n_clusters:
                break
            row = points[idx]
            if any(torch.equal(row, points[c]) for c in chosen):
                skipped.append(idx)
            else:
                chosen.append(idx)

        # Not enough distinct vectors: accept duplicates
        for idx in skipped:
            if len(chosen) == n_clusters:
                break
            chosen.append(idx)

        return seed_clusters(points[chosen], id_generator)
