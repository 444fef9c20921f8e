"""
Base class for clustering algorithms in the K-Points engine.

Provides the common algorithmic skeleton for alternating between the
assignment step and the centroid update step.
"""

from abc import abstractmethod
from typing import Any, Dict, Iterable, List, Optional
import time
import warnings

from torch import Tensor

from .interfaces import (
    DataPoint, AssignmentStrategy, InitializationStrategy,
    ConvergenceCriterion, ClusteringObjective
)
from .data_structures import Cluster, AssignmentMatrix, AlgorithmState
from ..utils.validation import (
    check_points, check_n_clusters, check_enough_distinct, check_max_iter
)


INITIALIZING = 'initializing'
ITERATING = 'iterating'
CONVERGED = 'converged'
ITERATION_CAP_REACHED = 'iteration_cap_reached'


class BaseClusteringAlgorithm:
    """Base class implementing the assign/update loop.

    A run moves through ``initializing`` and ``iterating`` and finishes either
    ``converged`` or ``iteration_cap_reached``; the current phase is kept in
    ``status_``. Reaching the cap is not an error: the clusters from the last
    pass are kept as a best-effort result.

    Subclasses need to specify:
    - Assignment strategy
    - Initialization strategy
    - Convergence criterion
    - Objective function
    """

    def __init__(self,
                 n_clusters: int,
                 max_iter: int = 100,
                 verbose: int = 0,
                 random_state: Optional[int] = None):
        """
        Args:
            n_clusters: Number of clusters K
            max_iter: Maximum assign/update passes
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            random_state: Random seed for randomized initializations
        """
        self.n_clusters = n_clusters
        self.max_iter = max_iter
        self.verbose = verbose
        self.random_state = random_state

        # These will be set by subclasses
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.convergence_criterion: Optional[ConvergenceCriterion] = None
        self.objective: Optional[ClusteringObjective] = None

        # Algorithm state
        self.clusters_: Optional[List[Cluster]] = None
        self.labels_: Optional[Tensor] = None
        self.fitted_ = False
        self.converged_ = False
        self.status_: Optional[str] = None
        self.n_iter_ = 0
        self.history_: List[AlgorithmState] = []

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.assignment_strategy
        - self.initialization_strategy
        - self.convergence_criterion
        - self.objective
        """
        pass

    def fit(self, points: Iterable[DataPoint], y=None) -> 'BaseClusteringAlgorithm':
        """Fit the clustering model.

        Args:
            points: Points implementing the point capability, or an
                (n, d) numeric array
            y: Ignored (for sklearn compatibility)

        Returns:
            Self
        """
        return self._fit(points)

    def fit_predict(self, points: Iterable[DataPoint], y=None) -> Tensor:
        """Fit and return cluster assignments.

        Returns:
            (n,) tensor of cluster assignments
        """
        self._fit(points)
        return self.labels_

    def predict(self, points: Iterable[DataPoint]) -> Tensor:
        """Assign points to the fitted centroids without updating them.

        Returns:
            (n,) tensor of cluster assignments
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")

        points = check_points(points)
        return self.assignment_strategy.compute_assignments(points, self.clusters_)

    def _fit(self, points: Iterable[DataPoint]) -> 'BaseClusteringAlgorithm':
        """Internal fit method implementing the assign/update loop."""
        check_n_clusters(self.n_clusters)
        check_max_iter(self.max_iter)
        points = check_points(points)
        check_enough_distinct(points, self.n_clusters)

        self._create_components()
        self.fitted_ = False
        self.status_ = INITIALIZING

        if self.verbose:
            print(f"Initializing {self.n_clusters} clusters...")

        start_time = time.time()
        clusters = self.initialization_strategy.initialize(points, self.n_clusters)
        if len(clusters) != self.n_clusters:
            raise RuntimeError(f"Initialization produced {len(clusters)} clusters, "
                               f"expected {self.n_clusters}")

        self.n_iter_ = 0
        self.history_ = []
        self.convergence_criterion.reset()
        self.status_ = ITERATING
        converged = False
        assignment_matrix = AssignmentMatrix.unassigned(len(points), self.n_clusters)

        for iteration in range(self.max_iter):
            iter_start_time = time.time()

            # Assignment step: centroids are read only here
            assignments = self.assignment_strategy.compute_assignments(points, clusters)
            assignment_matrix = AssignmentMatrix(assignments, self.n_clusters)

            for cluster in clusters:
                cluster.reset()
            for point, label in zip(points, assignments.tolist()):
                clusters[label].assign(point)

            # Update step: empty clusters keep their centroid
            for cluster in clusters:
                cluster.recompute_centroid()

            objective_value = self.objective.compute(clusters)

            converged = self.convergence_criterion.check({
                'iteration': iteration,
                'objective': objective_value,
                'assignments': assignment_matrix,
                'n_clusters': self.n_clusters
            })
            n_changed = getattr(self.convergence_criterion, 'last_n_changed', None)

            self.history_.append(AlgorithmState(
                iteration=iteration,
                assignments=assignment_matrix,
                objective_value=objective_value,
                n_changed=-1 if n_changed is None else n_changed,
                converged=converged
            ))
            self.n_iter_ = iteration + 1

            iter_time = time.time() - iter_start_time
            if self.verbose >= 2 or (self.verbose >= 1 and iteration % 10 == 0):
                obj_direction = "↓" if self.objective.minimize else "↑"
                print(f"Iteration {iteration:3d}: objective = {objective_value:.6f} "
                      f"{obj_direction} ({iter_time:.3f}s)")

            if converged:
                if self.verbose:
                    print(f"Converged at iteration {iteration}")
                break

        total_time = time.time() - start_time
        self.status_ = CONVERGED if converged else ITERATION_CAP_REACHED

        if self.verbose:
            if not converged:
                warnings.warn(f"Failed to converge after {self.max_iter} iterations")
            print(f"Total fitting time: {total_time:.3f}s")

        self.clusters_ = clusters
        self.labels_ = assignment_matrix.get_hard()
        self.converged_ = converged
        self.fitted_ = True
        return self

    @property
    def cluster_centers_(self) -> List[DataPoint]:
        """Centroids of the fitted clusters, in cluster order."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return Cluster.centroids(self.clusters_)

    @property
    def inertia_(self) -> float:
        """Final objective value."""
        if not self.fitted_:
            raise RuntimeError("Model must be fitted first")
        return self.history_[-1].objective_value

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'max_iter': self.max_iter,
            'verbose': self.verbose,
            'random_state': self.random_state
        }

    def set_params(self, **params) -> 'BaseClusteringAlgorithm':
        """Set parameters (sklearn compatibility)."""
        valid = self.get_params()
        for key, value in params.items():
            if key not in valid:
                raise ValueError(f"Invalid parameter {key!r} for {type(self).__name__}")
            setattr(self, key, value)
        return self
