"""
Random initialization strategy.

Selects distinct points from the dataset, in a seeded random order, as initial
cluster centers.
"""

from typing import List, Optional, Sequence, Union

import torch

from ..base.interfaces import InitializationStrategy, DataPoint
from ..base.data_structures import Cluster
from ..base.exceptions import InsufficientDistinctPoints
from ..utils.validation import check_random_state, distinct_points


class RandomInit(InitializationStrategy):
    """Random initialization by selecting points from the dataset.

    Points are visited in a random permutation drawn from the seeded generator
    and the first ``n_clusters`` distinct ones become the seeds.
    """

    def __init__(self, random_state: Optional[Union[int, torch.Generator]] = None):
        """
        Args:
            random_state: Seed or generator for reproducible sampling
        """
        self.random_state = random_state

    def initialize(self, points: Sequence[DataPoint], n_clusters: int,
                   **kwargs) -> List[Cluster]:
        """Initialize clusters with random distinct points.

        Args:
            points: Input points
            n_clusters: Number of clusters

        Returns:
            Clusters seeded with randomly chosen points
        """
        generator = check_random_state(self.random_state)
        order = torch.randperm(len(points), generator=generator).tolist()

        seeds = distinct_points((points[i] for i in order), limit=n_clusters)
        if len(seeds) < n_clusters:
            raise InsufficientDistinctPoints(n_clusters, len(seeds))
        return [Cluster(seed) for seed in seeds]
