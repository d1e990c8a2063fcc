"""
Initialization from previous solution or custom centers.

Useful for warm starts or when you have good initial guesses.
"""

from typing import List, Optional, Sequence, Union
import numpy as np
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy
from ..base.data_structures import Cluster, IdentityGenerator, Point, DTYPE
from ..exceptions import DimensionMismatchError, InvalidArgumentError
from .first_points import seed_clusters


class FromPreviousInit(InitializationStrategy):
    """Initialize from previous cluster centers or custom starting points.

    Accepts either:
    - A tensor or array of shape (n_clusters, dimension) with initial centers
    - A list of Points
    - A list of Clusters from a previous run (their centroids are copied,
      never shared)
    """

    def __init__(self, initial_state: Union[Tensor, np.ndarray, Sequence[Point], Sequence[Cluster]]):
        """
        Args:
            initial_state: Previous solution to use for initialization
        """
        self.initial_state = initial_state

    def _centers(self) -> Tensor:
        state = self.initial_state
        if isinstance(state, Tensor):
            return state.detach().to(dtype=DTYPE, device='cpu')
        if isinstance(state, np.ndarray):
            return torch.from_numpy(state.astype(np.float64))
        if isinstance(state, (list, tuple)) and state:
            if all(isinstance(s, Cluster) for s in state):
                return torch.stack([s.centroid.coordinates for s in state])
            if all(isinstance(s, Point) for s in state):
                return torch.stack([s.coordinates for s in state])
            return torch.tensor(np.asarray(state, dtype=np.float64), dtype=DTYPE)
        raise InvalidArgumentError(f"Unknown initial_state type: {type(state)}")

    def initialize(self, points: Tensor, n_clusters: int,
                   id_generator: Optional[IdentityGenerator] = None,
                   **kwargs) -> List[Cluster]:
        """Initialize from previous state.

        Args:
            points: (n, d) data points (used for validation)
            n_clusters: Expected number of clusters

        Returns:
            List of seeded clusters
        """
        dimension = points.shape[1]
        centers = self._centers()

        if centers.dim() != 2:
            raise InvalidArgumentError(f"Initial centers must be 2D, got {centers.dim()}D")
        if centers.shape[0] != n_clusters:
            raise InvalidArgumentError(f"Initial centers has {centers.shape[0]} clusters, "
                                       f"but n_clusters={n_clusters}")
        if centers.shape[1] != dimension:
            raise DimensionMismatchError(
                dimension, centers.shape[1],
                f"Initial centers has dimension {centers.shape[1]}, "
                f"but data has dimension {dimension}"
            )
        if not torch.isfinite(centers).all():
            raise InvalidArgumentError("Initial centers contain NaN or infinite values")

        return seed_clusters(centers.to(points.device), id_generator)
