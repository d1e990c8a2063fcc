"""
Core interfaces for the kpartition clustering engine.

This module defines the abstract base classes that pluggable components
implement: distance metrics, assignment and update strategies, seeding
strategies and convergence criteria.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, TYPE_CHECKING

import torch
from torch import Tensor

from ..exceptions import DimensionMismatchError

if TYPE_CHECKING:
    from .data_structures import Cluster, IdentityGenerator


class DistanceMetric(ABC):
    """Abstract base class for point-to-center dissimilarities.

    A metric must be symmetric, non-negative and satisfy d(a, a) = 0.
    """

    name: str = 'custom'

    @abstractmethod
    def compute(self, points: Tensor, center: Tensor) -> Tensor:
        """Compute distances from points to a single center.

        Args:
            points: (n, d) tensor of points
            center: (d,) tensor

        Returns:
            (n,) tensor of distances
        """
        pass

    def pairwise(self, points: Tensor, centers: Tensor) -> Tensor:
        """Compute the full (n, k) distance matrix between points and centers."""
        self._check_dimensions(points, centers)
        distances = torch.zeros(points.shape[0], centers.shape[0],
                                dtype=points.dtype, device=points.device)
        for k in range(centers.shape[0]):
            distances[:, k] = self.compute(points, centers[k])
        return distances

    def between(self, a: Tensor, b: Tensor) -> float:
        """Distance between two single coordinate vectors."""
        if a.shape[0] != b.shape[0]:
            raise DimensionMismatchError(a.shape[0], b.shape[0])
        return float(self.compute(a.unsqueeze(0), b)[0].item())

    @staticmethod
    def _check_dimensions(points: Tensor, centers: Tensor) -> None:
        if points.dim() != 2:
            raise ValueError(f"Expected 2D tensor, got {points.dim()}D")
        if points.shape[1] != centers.shape[-1]:
            raise DimensionMismatchError(centers.shape[-1], points.shape[1])

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-cluster assignment strategies."""

    @abstractmethod
    def compute_assignments(self, points: Tensor, centers: Tensor,
                            metric: DistanceMetric, **kwargs) -> Tensor:
        """Compute cluster assignments for points.

        Args:
            points: (n, d) tensor of data points
            centers: (K, d) tensor of current centroids
            metric: Distance metric for this run

        Returns:
            (n,) tensor of cluster indices, or a tuple of (indices, info)
            for strategies that report extra data such as 'min_distances'
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for centroid update strategies."""

    @abstractmethod
    def update(self, cluster: 'Cluster', **kwargs) -> bool:
        """Update a cluster from its current membership.

        Returns:
            True if the centroid moved
        """
        pass


class InitializationStrategy(ABC):
    """Abstract base class for cluster seeding strategies."""

    @abstractmethod
    def initialize(self, points: Tensor, n_clusters: int,
                   id_generator: Optional['IdentityGenerator'] = None,
                   **kwargs) -> List['Cluster']:
        """Create seeded clusters with empty membership.

        Args:
            points: (n, d) tensor of data points
            n_clusters: Number of clusters to seed
            id_generator: Identity source for the centroid points

        Returns:
            List of K clusters
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if the run has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []
