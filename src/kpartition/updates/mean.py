"""
Mean update strategy for centroid-based clustering.
"""

from ..base.interfaces import ParameterUpdater
from ..base.data_structures import Cluster


class MeanUpdater(ParameterUpdater):
    """Updates a cluster's centroid to the mean of its assigned points."""

    def update(self, cluster: Cluster, **kwargs) -> bool:
        """Update cluster mean.

        Args:
            cluster: Cluster whose membership is complete for this iteration
            **kwargs: Ignored

        Returns:
            True if the centroid moved
        """
        # Just delegate to the cluster's own update
        return cluster.recompute_centroid()
