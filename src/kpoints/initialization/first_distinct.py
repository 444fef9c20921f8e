"""
First-distinct initialization strategy.

Deterministic seeding: scans the input in order and takes the first
``n_clusters`` points that are pairwise distinct under ``==``.
"""

from typing import List, Sequence

from ..base.interfaces import InitializationStrategy, DataPoint
from ..base.data_structures import Cluster
from ..base.exceptions import InsufficientDistinctPoints
from ..utils.validation import distinct_points


class FirstDistinctInit(InitializationStrategy):
    """Seed clusters with the first ``n_clusters`` distinct input points.

    Needs no randomness, so repeated runs over the same input always start
    from the same centroids.
    """

    def initialize(self, points: Sequence[DataPoint], n_clusters: int,
                   **kwargs) -> List[Cluster]:
        """Initialize clusters from the first distinct points.

        Args:
            points: Input points in order
            n_clusters: Number of clusters

        Returns:
            Clusters in scan order

        Raises:
            InsufficientDistinctPoints: If fewer than ``n_clusters`` distinct
                points exist
        """
        seeds = distinct_points(points, limit=n_clusters)
        if len(seeds) < n_clusters:
            raise InsufficientDistinctPoints(n_clusters, len(seeds))
        return [Cluster(seed) for seed in seeds]
