"""
Hard assignment strategy.

Assigns each point to its nearest centroid under the point type's distance.
"""

from typing import List, Sequence

import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, DataPoint
from ..base.data_structures import Cluster
from ..utils.metrics import distance_matrix
from ..utils.validation import check_distances


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to the nearest centroid.

    Ties go to the lowest cluster index. Each point's choice depends only on
    the current centroids, never on other points.
    """

    def compute_assignments(self, points: Sequence[DataPoint],
                            clusters: List[Cluster],
                            **kwargs) -> Tensor:
        """Assign each point to nearest cluster.

        Args:
            points: n data points
            clusters: K current clusters (read only)
            **kwargs: Ignored for basic hard assignment

        Returns:
            (n,) int64 tensor of cluster indices

        Raises:
            NonFiniteDistance: If any distance is NaN or infinite
        """
        centroids = [cluster.centroid for cluster in clusters]
        distances = check_distances(distance_matrix(points, centroids))

        # argmin returns the first index among equal minima
        return torch.argmin(distances, dim=1)
