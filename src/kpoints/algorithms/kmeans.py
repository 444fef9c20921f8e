"""
K-means clustering algorithm.

The classic K-means algorithm over any point type that implements the point
capability (``distance`` and ``mean``).
"""

from typing import Iterable, List, Optional, Sequence, Union

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.interfaces import (
    DataPoint, InitializationStrategy, ClusteringObjective
)
from ..base.data_structures import Cluster
from ..assignments.hard import HardAssignment
from ..initialization import (
    FirstDistinctInit, RandomInit, KMeansPlusPlusInit, FromPreviousInit
)
from ..utils.convergence import ChangeInAssignments
from ..utils.metrics import inertia
from ..utils.validation import check_points


class KMeansObjective(ClusteringObjective):
    """K-means objective: sum of member distances to their centroids."""

    def compute(self, clusters: List[Cluster]) -> float:
        """Compute within-cluster distance total."""
        return inertia(clusters)

    @property
    def minimize(self) -> bool:
        return True


class KMeans(BaseClusteringAlgorithm):
    """K-means clustering algorithm.

    Partitions points into K clusters by alternately assigning every point to
    its nearest centroid and replacing each centroid by the mean of its
    members, until no point changes cluster or ``max_iter`` passes have run.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    init : str, InitializationStrategy or sequence of points, default='first-distinct'
        Initialization method:
        - 'first-distinct' : First n_clusters distinct points, in input order
        - 'random' : Distinct points in a seeded random order
        - 'k-means++' : Seeded K-means++ initialization
        - InitializationStrategy : Used as given
        - sequence of points or clusters : Use as initial centroids
    max_iter : int, default=100
        Maximum number of assign/update passes
    verbose : int, default=0
        Verbosity level
    random_state : int, optional
        Random seed for 'random' and 'k-means++'

    Attributes
    ----------
    clusters_ : list of Cluster
        Final clusters, in initialization order
    cluster_centers_ : list of points
        Copies of the final centroids
    labels_ : Tensor of shape (n_samples,)
        Cluster index of each input point
    inertia_ : float
        Sum of distances from points to their centroid
    n_iter_ : int
        Number of passes run
    converged_ : bool
        Whether the last pass changed no assignment
    """

    def __init__(self,
                 n_clusters: int,
                 init: Union[str, InitializationStrategy, Sequence] = 'first-distinct',
                 max_iter: int = 100,
                 verbose: int = 0,
                 random_state: Optional[int] = None):
        """Initialize K-means algorithm."""
        super().__init__(
            n_clusters=n_clusters,
            max_iter=max_iter,
            verbose=verbose,
            random_state=random_state
        )
        self.init = init

    def _create_components(self) -> None:
        """Create K-means specific components."""
        self.assignment_strategy = HardAssignment()

        if isinstance(self.init, str):
            if self.init == 'first-distinct':
                self.initialization_strategy = FirstDistinctInit()
            elif self.init == 'random':
                self.initialization_strategy = RandomInit(self.random_state)
            elif self.init == 'k-means++':
                self.initialization_strategy = KMeansPlusPlusInit(self.random_state)
            else:
                raise ValueError(f"Unknown init method: {self.init}")
        elif isinstance(self.init, InitializationStrategy):
            self.initialization_strategy = self.init
        else:
            # Custom initial centroids provided
            self.initialization_strategy = FromPreviousInit(self.init)

        self.convergence_criterion = ChangeInAssignments()
        self.objective = KMeansObjective()

    def get_params(self, deep: bool = True):
        params = super().get_params(deep)
        params['init'] = self.init
        return params

    def score(self, points: Iterable[DataPoint]) -> float:
        """Opposite of the K-means objective for ``points`` under the fitted centroids."""
        points = check_points(points)
        labels = self.predict(points)
        total = 0.0
        for point, label in zip(points, labels.tolist()):
            total += point.distance(self.clusters_[label].centroid)
        return -total


def kmeans(k: int, points: Iterable[DataPoint], **params) -> List[Cluster]:
    """Cluster ``points`` into ``k`` groups.

    Args:
        k: Number of clusters
        points: Non-empty collection of points implementing the point capability
        **params: Further ``KMeans`` parameters (init, max_iter, ...)

    Returns:
        The k clusters, in initialization order

    Raises:
        InvalidK: If k is not a positive integer
        EmptyInput: If there are no points
        InsufficientDistinctPoints: If fewer than k distinct points exist
        NonFiniteDistance: If a distance is NaN or infinite
    """
    return KMeans(n_clusters=k, **params).fit(points).clusters_
