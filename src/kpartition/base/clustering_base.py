"""
Base class for partitional clustering algorithms.

Provides the common algorithmic skeleton for alternating optimization
between assignment and update steps, over the Point/Cluster data model.
"""

from abc import abstractmethod
from typing import Optional, Dict, Any, List
import torch
from torch import Tensor
import time
import warnings

from .interfaces import (
    AssignmentStrategy, ParameterUpdater, InitializationStrategy,
    ConvergenceCriterion
)
from .data_structures import (
    Point, Cluster, IdentityGenerator, EngineState, AlgorithmState
)
from ..assignments.hard import HardAssignment
from ..distances import get_metric
from ..exceptions import DimensionMismatchError, InvalidArgumentError
from ..utils.device import parse_device
from ..utils.metrics import inertia
from ..utils.validation import (
    as_points, points_to_tensor, validate_points, check_n_clusters,
    check_max_iter, check_tol, check_random_state, check_point_dimension
)


class BaseClusteringAlgorithm:
    """Base class implementing the alternating optimization framework.

    Subclasses need to specify:
    - Assignment strategy
    - Parameter update strategy
    - Initialization strategy
    - Convergence criterion
    """

    def __init__(self,
                 metric='euclidean',
                 max_iter: int = 100,
                 tol: float = 0.0,
                 verbose: int = 0,
                 random_state: Optional[int] = None,
                 device: Optional[torch.device] = None):
        """
        Args:
            metric: Distance metric used when a run does not name one
            max_iter: Maximum iterations
            tol: Centroid movement tolerance (0.0 = exact equality)
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Random seed for reproducibility
            device: Torch device (None for CPU)
        """
        self.metric = metric
        self.max_iter = max_iter
        self.tol = tol
        self.verbose = verbose
        self.random_state = random_state
        self.device = parse_device(device)

        # These will be set by subclasses
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.update_strategy: Optional[ParameterUpdater] = None
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.convergence_criterion: Optional[ConvergenceCriterion] = None

        # Run state
        self._reset_run_state()

    def _reset_run_state(self) -> None:
        self.state_ = EngineState.UNINITIALIZED
        self.fitted_ = False
        self.converged_ = False
        self.n_iter_ = 0
        self.history_: List[AlgorithmState] = []
        self.clusters_: Optional[List[Cluster]] = None
        self.labels_: Optional[Tensor] = None
        self.metric_ = None

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.assignment_strategy
        - self.update_strategy
        - self.initialization_strategy
        - self.convergence_criterion
        """
        pass

    def cluster(self, points, n_clusters: int, metric=None,
                max_iter: Optional[int] = None) -> List[Cluster]:
        """Partition points into n_clusters clusters.

        Args:
            points: Sequence of Points (or a 2D tensor / array / nested list)
            n_clusters: Number of clusters K, 0 < K <= len(points)
            metric: Distance metric for this run (defaults to self.metric)
            max_iter: Iteration cap for this run (defaults to self.max_iter)

        Returns:
            List of exactly K clusters; every input point is a member of
            exactly one of them
        """
        return self._run(
            points,
            n_clusters,
            self.metric if metric is None else metric,
            self.max_iter if max_iter is None else max_iter
        )

    def _run(self, points, n_clusters: int, metric, max_iter: int) -> List[Cluster]:
        """Internal run method implementing the alternating optimization."""
        # Validate everything before any computation
        distance = get_metric(metric)
        check_max_iter(max_iter)
        check_tol(self.tol)
        points, X = validate_points(points, device=self.device)
        check_n_clusters(n_clusters, len(points))
        generator = check_random_state(self.random_state)

        self._create_components()

        # Initialize clusters; a bad seed raises before the previous run is discarded
        if self.verbose:
            print(f"Initializing {n_clusters} clusters...")

        start_time = time.time()
        clusters = self.initialization_strategy.initialize(
            X, n_clusters,
            id_generator=IdentityGenerator(),
            generator=generator
        )

        self._reset_run_state()
        self.convergence_criterion.reset()
        for c in clusters:
            c.metric = distance
        self.state_ = EngineState.INITIALIZED

        centers = self._stack_centers(clusters)
        labels = None
        converged = False

        # Main optimization loop
        for iteration in range(max_iter):
            iter_start_time = time.time()
            self.state_ = EngineState.ITERATING

            # Assignment step: the full label vector exists before any
            # membership changes
            assignment_result = self.assignment_strategy.compute_assignments(
                X, centers, distance, return_distances=True
            )
            if isinstance(assignment_result, tuple):
                assignments, aux_info = assignment_result
            else:
                assignments, aux_info = assignment_result, {}
            labels = assignments.cpu()

            for c in clusters:
                c.clear_members()
            for point, k in zip(points, labels.tolist()):
                clusters[k].add_member(point)

            # Update step
            n_moved = sum(int(self.update_strategy.update(c)) for c in clusters)
            new_centers = self._stack_centers(clusters)

            # Assignment cost, reusing the distances from the assignment step
            if 'min_distances' in aux_info:
                min_distances = aux_info['min_distances']
                objective_value = torch.sum(min_distances * min_distances).item()
            else:
                objective_value = inertia(X, assignments, new_centers, distance)

            converged = self.convergence_criterion.check({
                'iteration': iteration,
                'centers': new_centers,
                'previous_centers': centers
            })

            self.history_.append(AlgorithmState(
                iteration=iteration,
                centers=new_centers.cpu(),
                labels=labels,
                objective_value=objective_value,
                n_moved=n_moved,
                converged=converged,
                metadata={'n_empty': sum(c.is_empty for c in clusters)}
            ))

            centers = new_centers
            self.n_iter_ = iteration + 1

            # Logging
            iter_time = time.time() - iter_start_time
            if self.verbose >= 2 or (self.verbose >= 1 and iteration % 10 == 0):
                print(f"Iteration {iteration:3d}: objective = {objective_value:.6f} "
                      f"moved = {n_moved} ({iter_time:.3f}s)")

            if converged:
                if self.verbose:
                    print(f"Converged at iteration {iteration}")
                break

        total_time = time.time() - start_time

        if self.verbose:
            if not converged:
                warnings.warn(f"Failed to converge after {max_iter} iterations")
            print(f"Total fitting time: {total_time:.3f}s")

        self.state_ = (EngineState.CONVERGED if converged
                       else EngineState.ITERATION_LIMIT_REACHED)
        self.converged_ = converged
        self.clusters_ = clusters
        self.labels_ = labels
        self.metric_ = distance
        self.fitted_ = True
        return clusters

    def _stack_centers(self, clusters: List[Cluster]) -> Tensor:
        """(K, d) tensor of current centroids on the run device."""
        return torch.stack([c.centroid.coordinates for c in clusters]).to(self.device)

    def _resolve_clusters(self, clusters: Optional[List[Cluster]]) -> List[Cluster]:
        if clusters is None:
            if not self.fitted_:
                raise RuntimeError("Engine must be run before classifying without clusters")
            clusters = self.clusters_
        clusters = list(clusters)
        if not clusters:
            raise InvalidArgumentError("No clusters to assign to")

        dimension = clusters[0].dimension
        for c in clusters:
            if c.dimension != dimension:
                raise DimensionMismatchError(dimension, c.dimension)
        return clusters

    def _resolve_metric(self, clusters: List[Cluster], metric):
        if metric is not None:
            return get_metric(metric)
        if clusters[0].metric is not None:
            return get_metric(clusters[0].metric)
        return get_metric(self.metric)

    def assign_to_cluster(self, point: Point, clusters: Optional[List[Cluster]] = None,
                          metric=None) -> Cluster:
        """Return the cluster whose centroid is nearest to ``point``.

        Pure classification: cluster membership is not modified.

        Args:
            point: Point to classify
            clusters: Clusters to choose from (defaults to the last run's)
            metric: Override; defaults to the metric the clusters were
                produced under

        Returns:
            The nearest cluster (lowest index on ties)
        """
        clusters = self._resolve_clusters(clusters)
        check_point_dimension(point, clusters[0].dimension)
        distance = self._resolve_metric(clusters, metric)

        strategy = self.assignment_strategy or HardAssignment()
        centers = torch.stack([c.centroid.coordinates for c in clusters])
        index = strategy.compute_assignments(point.coordinates.unsqueeze(0), centers, distance)
        if isinstance(index, tuple):
            index = index[0]
        return clusters[int(index[0].item())]

    def predict(self, X, clusters: Optional[List[Cluster]] = None, metric=None) -> Tensor:
        """Predict cluster indices for many points at once.

        Args:
            X: Points, or a 2D tensor / array / nested list
            clusters: Clusters to choose from (defaults to the last run's)

        Returns:
            (n,) tensor of cluster indices
        """
        clusters = self._resolve_clusters(clusters)
        data = points_to_tensor(as_points(X))
        if data.shape[1] != clusters[0].dimension:
            raise DimensionMismatchError(clusters[0].dimension, data.shape[1])
        distance = self._resolve_metric(clusters, metric)

        strategy = self.assignment_strategy or HardAssignment()
        centers = torch.stack([c.centroid.coordinates for c in clusters])
        assignments = strategy.compute_assignments(data, centers, distance)
        if isinstance(assignments, tuple):
            assignments = assignments[0]
        return assignments

    @property
    def cluster_centers_(self) -> Tensor:
        """Get cluster centroids as a (K, d) tensor."""
        if not self.fitted_:
            raise RuntimeError("Engine must be run first")
        return torch.stack([c.centroid.coordinates for c in self.clusters_])

    @property
    def inertia_(self) -> float:
        """Sum of squared distances from each point to its final centroid."""
        if not self.fitted_:
            raise RuntimeError("Engine must be run first")
        total = 0.0
        for c in self.clusters_:
            if c.is_empty:
                continue
            members = torch.stack([p.coordinates for p in c.members])
            distances = self.metric_.compute(members, c.centroid.coordinates)
            total += torch.sum(distances * distances).item()
        return total

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'metric': self.metric,
            'max_iter': self.max_iter,
            'tol': self.tol,
            'verbose': self.verbose,
            'random_state': self.random_state,
            'device': self.device
        }

    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set parameters (sklearn compatibility)."""
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise InvalidArgumentError(f"Invalid parameter {key!r} for {self.__class__.__name__}")
            if key == 'device':
                value = parse_device(value)
            setattr(self, key, value)
        return self
