"""Base classes, interfaces and data model for kpartition."""

from .interfaces import (
    DistanceMetric,
    AssignmentStrategy,
    ParameterUpdater,
    InitializationStrategy,
    ConvergenceCriterion
)

from .data_structures import (
    Point,
    Cluster,
    IdentityGenerator,
    EngineState,
    AlgorithmState
)

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Interfaces
    'DistanceMetric',
    'AssignmentStrategy',
    'ParameterUpdater',
    'InitializationStrategy',
    'ConvergenceCriterion',

    # Data structures
    'Point',
    'Cluster',
    'IdentityGenerator',
    'EngineState',
    'AlgorithmState',

    # Base algorithm
    'BaseClusteringAlgorithm'
]
