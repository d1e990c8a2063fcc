"""
kpartition: partitional clustering of N-dimensional points.

Implements Lloyd's algorithm (K-means) over an explicit Point/Cluster data
model with pluggable distance metrics:
- Euclidean and Manhattan distances, or any custom function
- Deterministic seeding and lowest-index tie-breaking
- Exact or tolerance-based convergence

Example usage:
    >>> from kpartition import ClusteringEngine, IdentityGenerator
    >>>
    >>> ids = IdentityGenerator()
    >>> points = [ids.make_point(c) for c in [[0, 0], [0, 1], [10, 10], [10, 11]]]
    >>>
    >>> engine = ClusteringEngine(metric='euclidean')
    >>> clusters = engine.cluster(points, n_clusters=2)
    >>> [c.centroid.coordinates.tolist() for c in clusters]
    [[0.0, 0.5], [10.0, 10.5]]
    >>>
    >>> new_point = ids.make_point([9, 9])
    >>> engine.assign_to_cluster(new_point) is clusters[1]
    True
"""

__version__ = '0.1.0'

# Import main algorithm
from .algorithms.lloyd import ClusteringEngine, cluster, assign_to_cluster

# Convenience imports
from .base import (
    Point,
    Cluster,
    IdentityGenerator,
    EngineState,
    AlgorithmState
)
from .distances import (
    DistanceMetric,
    EuclideanDistance,
    ManhattanDistance,
    CallableDistance,
    get_metric
)
from .exceptions import (
    ClusteringError,
    InvalidArgumentError,
    DimensionMismatchError,
    IndexOutOfRangeError
)

__all__ = [
    # Algorithm
    'ClusteringEngine',
    'cluster',
    'assign_to_cluster',

    # Core data structures
    'Point',
    'Cluster',
    'IdentityGenerator',
    'EngineState',
    'AlgorithmState',

    # Distances
    'DistanceMetric',
    'EuclideanDistance',
    'ManhattanDistance',
    'CallableDistance',
    'get_metric',

    # Errors
    'ClusteringError',
    'InvalidArgumentError',
    'DimensionMismatchError',
    'IndexOutOfRangeError',

    # Version
    '__version__'
]
