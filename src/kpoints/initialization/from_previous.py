"""
Initialization from previous centroids or custom starting points.

Useful for warm starts or when you have good initial guesses.
"""

from typing import List, Sequence, Union

from ..base.interfaces import InitializationStrategy, DataPoint
from ..base.data_structures import Cluster
from ..base.exceptions import InsufficientDistinctPoints
from ..utils.validation import distinct_points


class FromPreviousInit(InitializationStrategy):
    """Initialize from previous cluster centers or custom starting points.

    Accepts either:
    - A sequence of points to use as centroids
    - A sequence of clusters from a previous run (their centroids are used)
    """

    def __init__(self, initial_state: Sequence[Union[DataPoint, Cluster]]):
        """
        Args:
            initial_state: Previous solution to use for initialization
        """
        self.initial_state = list(initial_state)

    def initialize(self, points: Sequence[DataPoint], n_clusters: int,
                   **kwargs) -> List[Cluster]:
        """Initialize from previous state.

        Args:
            points: Input points (unused)
            n_clusters: Expected number of clusters

        Returns:
            Clusters seeded with copies of the given centroids
        """
        if len(self.initial_state) != n_clusters:
            raise ValueError(f"Initial centers has {len(self.initial_state)} clusters, "
                             f"but n_clusters={n_clusters}")

        seeds = [item.centroid if isinstance(item, Cluster) else item
                 for item in self.initial_state]
        n_distinct = len(distinct_points(seeds))
        if n_distinct < n_clusters:
            raise InsufficientDistinctPoints(n_clusters, n_distinct)

        return [Cluster(seed) for seed in seeds]
