"""
K-means++ initialization strategy.

Selects initial cluster centers using the K-means++ algorithm, which chooses
centers that are far apart to improve convergence speed and quality. Only the
point type's ``distance`` is used, so any clusterable type works.
"""

from typing import List, Optional, Sequence, Union

import torch

from ..base.interfaces import InitializationStrategy, DataPoint
from ..base.data_structures import Cluster
from ..base.exceptions import InsufficientDistinctPoints
from ..utils.validation import check_distance, check_random_state


class KMeansPlusPlusInit(InitializationStrategy):
    """K-means++ initialization for better starting positions.

    Algorithm:
    1. Choose first center uniformly at random
    2. For each remaining center:
       - Compute distance from each point to nearest existing center
       - Choose next center with probability proportional to squared distance

    Points equal to an already chosen center get zero weight, so centers are
    always pairwise distinct.
    """

    def __init__(self, random_state: Optional[Union[int, torch.Generator]] = None):
        """
        Args:
            random_state: Seed or generator for reproducible sampling
        """
        self.random_state = random_state

    def initialize(self, points: Sequence[DataPoint], n_clusters: int,
                   **kwargs) -> List[Cluster]:
        """Initialize cluster centers using K-means++.

        Args:
            points: Input points
            n_clusters: Number of clusters

        Returns:
            Clusters seeded with the chosen centers
        """
        generator = check_random_state(self.random_state)
        n_points = len(points)

        first_idx = torch.randint(n_points, (1,), generator=generator).item()
        centers = [points[first_idx]]

        # Squared distance from each point to its nearest chosen center
        distances = torch.tensor(
            [check_distance(p.distance(centers[0])) ** 2 for p in points],
            dtype=torch.float64
        )
        distances[self._duplicates_of(points, centers[0])] = 0.0

        while len(centers) < n_clusters:
            candidates = [i for i in range(n_points)
                          if not any(points[i] == c for c in centers)]
            if not candidates:
                raise InsufficientDistinctPoints(n_clusters, len(centers))

            total = distances.sum().item()
            if total > 0:
                idx = torch.multinomial(distances, 1, generator=generator).item()
            else:
                # Remaining points are all at distance zero from some center
                idx = candidates[0]

            centers.append(points[idx])

            new_distances = torch.tensor(
                [check_distance(p.distance(points[idx])) ** 2 for p in points],
                dtype=torch.float64
            )
            distances = torch.minimum(distances, new_distances)
            distances[self._duplicates_of(points, points[idx])] = 0.0

        return [Cluster(center) for center in centers]

    @staticmethod
    def _duplicates_of(points: Sequence[DataPoint], center: DataPoint) -> List[int]:
        return [i for i, p in enumerate(points) if p == center]
