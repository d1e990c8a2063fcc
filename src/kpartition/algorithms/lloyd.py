"""
Lloyd's algorithm (K-means) over Points and Clusters.

The classic assign-then-update loop implemented using the modular framework.
"""

from typing import Optional, List
import torch

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.data_structures import Point, Cluster
from ..assignments.hard import HardAssignment
from ..updates.mean import MeanUpdater
from ..initialization import FirstPointsInit, RandomInit, FromPreviousInit
from ..utils.convergence import CentroidShift
from ..exceptions import InvalidArgumentError


class ClusteringEngine(BaseClusteringAlgorithm):
    """Partitional clustering with Lloyd's algorithm.

    Each iteration assigns every point to its nearest centroid (lowest
    cluster index on ties), then moves every non-empty cluster's centroid
    to the mean of its members. Empty clusters keep their centroid. The run
    stops when no centroid moves or after ``max_iter`` iterations; hitting
    the cap is a normal outcome, not an error.

    Parameters
    ----------
    metric : str, DistanceMetric or callable, default='euclidean'
        Distance used for every point-to-centroid comparison in a run:
        - 'euclidean' : L2 distance
        - 'manhattan' : L1 distance
        - DistanceMetric instance or ``fn(a, b) -> float``
    max_iter : int, default=100
        Maximum number of iterations
    tol : float, default=0.0
        Largest centroid coordinate change still treated as "not moved".
        0.0 means centroids must be exactly unchanged.
    init : str or array-like, default='first'
        Seeding method:
        - 'first' : first K points with distinct coordinates
        - 'random' : K random points without replacement
        - array of shape (n_clusters, n_features), Points or Clusters :
          use as initial centers
    verbose : int, default=0
        Verbosity level
    random_state : int, optional
        Random seed for 'random' seeding
    device : torch.device or str, optional
        Device for the assignment step (CPU by default)

    Attributes
    ----------
    clusters_ : list of Cluster
        Clusters from the last run
    cluster_centers_ : Tensor of shape (n_clusters, n_features)
        Cluster centroids
    labels_ : Tensor of shape (n_samples,)
        Cluster index of each input point
    inertia_ : float
        Sum of squared distances to the assigned centroids
    n_iter_ : int
        Number of iterations run
    converged_ : bool
        Whether the last run converged before the iteration cap
    state_ : EngineState
        Lifecycle state of the last run
    """

    def __init__(self,
                 metric='euclidean',
                 max_iter: int = 100,
                 tol: float = 0.0,
                 init='first',
                 verbose: int = 0,
                 random_state: Optional[int] = None,
                 device: Optional[torch.device] = None):
        """Initialize the engine."""
        super().__init__(
            metric=metric,
            max_iter=max_iter,
            tol=tol,
            verbose=verbose,
            random_state=random_state,
            device=device
        )
        self.init = init

    def _create_components(self) -> None:
        """Create Lloyd-specific components."""
        # Assignment strategy
        self.assignment_strategy = HardAssignment()

        # Update strategy
        self.update_strategy = MeanUpdater()

        # Initialization
        if isinstance(self.init, str):
            if self.init == 'first':
                self.initialization_strategy = FirstPointsInit()
            elif self.init == 'random':
                self.initialization_strategy = RandomInit()
            else:
                raise InvalidArgumentError(f"Unknown init method: {self.init}")
        else:
            # Custom initial centers provided
            self.initialization_strategy = FromPreviousInit(self.init)

        # Convergence criterion
        self.convergence_criterion = CentroidShift(tol=self.tol)

    def get_params(self, deep: bool = True):
        params = super().get_params(deep)
        params['init'] = self.init
        return params


def cluster(points, n_clusters: int, metric='euclidean', max_iter: int = 100,
            tol: float = 0.0, init='first') -> List[Cluster]:
    """Run Lloyd's algorithm once and return the K clusters.

    Functional form of :meth:`ClusteringEngine.cluster`; every call builds
    a fresh engine, so no state is shared between calls.
    """
    engine = ClusteringEngine(metric=metric, max_iter=max_iter, tol=tol, init=init)
    return engine.cluster(points, n_clusters)


def assign_to_cluster(point: Point, clusters: List[Cluster], metric=None) -> Cluster:
    """Return the cluster in ``clusters`` whose centroid is nearest to ``point``.

    Uses the metric the clusters were produced under unless ``metric`` is given.
    """
    return ClusteringEngine().assign_to_cluster(point, clusters, metric=metric)
