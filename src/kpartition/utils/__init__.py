"""Utility functions for kpartition."""

from .convergence import CentroidShift

from .metrics import (
    pairwise_distances,
    silhouette_score,
    inertia
)

from .validation import (
    as_points,
    points_to_tensor,
    validate_points,
    check_point_dimension,
    check_n_clusters,
    check_max_iter,
    check_tol,
    check_random_state
)

from .device import (
    get_default_device,
    parse_device
)

__all__ = [
    # Convergence criteria
    'CentroidShift',

    # Metrics
    'pairwise_distances',
    'silhouette_score',
    'inertia',

    # Validation
    'as_points',
    'points_to_tensor',
    'validate_points',
    'check_point_dimension',
    'check_n_clusters',
    'check_max_iter',
    'check_tol',
    'check_random_state',

    # Device management
    'get_default_device',
    'parse_device'
]
