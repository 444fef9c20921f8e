"""
Core interfaces for the K-Points clustering engine.

This module defines the abstract base classes that all components must implement.
The only thing the engine knows about the data is the point capability: a
``distance`` between two points and a ``mean`` over a non-empty group of them.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, TYPE_CHECKING
import copy

from torch import Tensor

if TYPE_CHECKING:
    from .data_structures import Cluster


class DataPoint(ABC):
    """Capability contract every clusterable value type must satisfy.

    Subclasses must also support ``==`` (used to detect duplicate seeds),
    and duplication through ``copy()`` so centroids never alias input points.

    Example:
        >>> @dataclass
        ... class Gray(DataPoint):
        ...     level: float
        ...     def distance(self, other):
        ...         return abs(self.level - other.level)
        ...     @classmethod
        ...     def mean(cls, points):
        ...         return cls(sum(p.level for p in points) / len(points))
    """

    @abstractmethod
    def distance(self, other: 'DataPoint') -> float:
        """Non-negative, finite distance between ``self`` and ``other``.

        Need not be a metric, but the closer it is to one the better the
        resulting clusters.
        """
        pass

    @classmethod
    @abstractmethod
    def mean(cls, points: Sequence['DataPoint']) -> 'DataPoint':
        """Representative aggregate of a non-empty sequence of points.

        The engine never calls this with an empty sequence.
        """
        pass

    def copy(self) -> 'DataPoint':
        """Independent duplicate of this point."""
        return copy.deepcopy(self)


class InitializationStrategy(ABC):
    """Abstract base class for seed centroid selection."""

    @abstractmethod
    def initialize(self, points: Sequence[DataPoint], n_clusters: int,
                   **kwargs) -> List['Cluster']:
        """Create the initial clusters.

        Args:
            points: Validated input points (non-empty, at least
                ``n_clusters`` distinct values)
            n_clusters: Number of clusters to create
            **kwargs: Strategy-specific parameters

        Returns:
            ``n_clusters`` clusters with centroids set and no members
        """
        pass


class AssignmentStrategy(ABC):
    """Abstract base class for point-to-cluster assignment strategies."""

    @abstractmethod
    def compute_assignments(self, points: Sequence[DataPoint],
                            clusters: List['Cluster'],
                            **kwargs) -> Tensor:
        """Compute cluster assignments for points.

        Reads the current centroids only; clusters are not modified.

        Args:
            points: Input points
            clusters: Current clusters
            **kwargs: Strategy-specific parameters

        Returns:
            (n,) int64 tensor of cluster indices
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []


class ClusteringObjective(ABC):
    """Abstract base class for clustering objective functions."""

    @abstractmethod
    def compute(self, clusters: List['Cluster']) -> float:
        """Compute objective value for the current clusters."""
        pass

    @property
    @abstractmethod
    def minimize(self) -> bool:
        """Whether to minimize (True) or maximize (False) this objective."""
        pass
