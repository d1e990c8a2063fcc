"""Clustering algorithms."""

from .lloyd import ClusteringEngine, cluster, assign_to_cluster

__all__ = [
    'ClusteringEngine',
    'cluster',
    'assign_to_cluster'
]
