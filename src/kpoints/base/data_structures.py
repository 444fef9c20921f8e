"""
Core data structures for the K-Points clustering engine.

This module provides the cluster entity, the hard assignment record that the
convergence check compares between iterations, and per-iteration state.
"""

from typing import Any, Dict, List, Optional, Sequence
from dataclasses import dataclass, field
import copy

import torch
from torch import Tensor

from .interfaces import DataPoint


def copy_point(point: DataPoint) -> DataPoint:
    """Duplicate a point so it can serve as an independent centroid."""
    duplicate = getattr(point, 'copy', None)
    if callable(duplicate):
        return duplicate()
    return copy.deepcopy(point)


class Cluster:
    """One centroid and the points currently assigned to it.

    Created by an initialization strategy with an empty member list, then
    mutated in place by the driver: ``reset`` and ``assign`` during the
    assignment step, ``recompute_centroid`` during the update step.
    """

    def __init__(self, centroid: DataPoint, points: Optional[Sequence[DataPoint]] = None):
        """
        Args:
            centroid: Seed centroid (copied)
            points: Optional initial members
        """
        self._centroid = copy_point(centroid)
        self.points: List[DataPoint] = list(points) if points is not None else []

    @property
    def centroid(self) -> DataPoint:
        """Current representative point."""
        return self._centroid

    @property
    def size(self) -> int:
        """Number of assigned points."""
        return len(self.points)

    def assign(self, point: DataPoint) -> None:
        """Append a point to the member list."""
        self.points.append(point)

    def reset(self) -> None:
        """Clear members before a new assignment pass."""
        self.points = []

    def recompute_centroid(self) -> bool:
        """Replace the centroid with the mean of the members.

        An empty cluster keeps its centroid; ``mean`` is never called on an
        empty list.

        Returns:
            True if the centroid was recomputed
        """
        if not self.points:
            return False
        centroid = type(self.points[0]).mean(self.points)
        if any(centroid is member for member in self.points):
            centroid = copy_point(centroid)
        self._centroid = centroid
        return True

    @staticmethod
    def centroids(clusters: Sequence['Cluster']) -> List[DataPoint]:
        """Project clusters to their centroids, in cluster order."""
        return [copy_point(cluster.centroid) for cluster in clusters]

    def copy(self) -> 'Cluster':
        """Independent copy; members are shared, the centroid is duplicated."""
        return Cluster(self._centroid, self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cluster):
            return NotImplemented
        return self._centroid == other._centroid and self.points == other.points

    __hash__ = None

    def __repr__(self) -> str:
        return f"Cluster(centroid={self._centroid!r}, size={len(self.points)})"


class AssignmentMatrix:
    """Hard point-to-cluster assignments.

    Stores an (n,) int64 tensor of cluster indices. ``UNASSIGNED`` marks points
    not yet placed in any cluster, which is the state before the first pass.
    """

    UNASSIGNED = -1

    def __init__(self, assignments: Tensor, n_clusters: int):
        """
        Args:
            assignments: (n,) cluster indices, or ``UNASSIGNED``
            n_clusters: Number of clusters K
        """
        self.n_clusters = n_clusters
        self._validate_and_store(assignments)

    @classmethod
    def unassigned(cls, n_points: int, n_clusters: int) -> 'AssignmentMatrix':
        """Assignments with every point unassigned."""
        return cls(torch.full((n_points,), cls.UNASSIGNED, dtype=torch.long), n_clusters)

    def _validate_and_store(self, assignments: Tensor):
        """Validate and store assignments in canonical format."""
        assignments = torch.as_tensor(assignments)
        if assignments.dim() != 1:
            raise ValueError(f"Expected 1D assignments, got {assignments.dim()}D")
        if assignments.numel() > 0:
            if assignments.max() >= self.n_clusters:
                raise ValueError(f"Assignment index {assignments.max().item()} out of range "
                                 f"for {self.n_clusters} clusters")
            if assignments.min() < self.UNASSIGNED:
                raise ValueError(f"Invalid assignment index {assignments.min().item()}")
        self._labels = assignments.long()

    @property
    def n_points(self) -> int:
        """Number of data points."""
        return self._labels.shape[0]

    def get_hard(self) -> Tensor:
        """(n,) tensor of cluster indices."""
        return self._labels

    def get_cluster_indices(self, cluster_idx: int) -> Tensor:
        """Get indices of points assigned to a specific cluster."""
        return torch.where(self._labels == cluster_idx)[0]

    def count_per_cluster(self) -> Tensor:
        """Count points per cluster; unassigned points are not counted."""
        assigned = self._labels[self._labels != self.UNASSIGNED]
        return torch.bincount(assigned, minlength=self.n_clusters)

    def n_changed(self, other: 'AssignmentMatrix') -> int:
        """Number of points whose cluster differs from ``other``."""
        if other.n_points != self.n_points:
            raise ValueError(f"Cannot compare assignments of {self.n_points} and "
                             f"{other.n_points} points")
        return int((self._labels != other._labels).sum().item())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AssignmentMatrix):
            return NotImplemented
        return torch.equal(self._labels, other._labels)

    __hash__ = None


@dataclass
class AlgorithmState:
    """State of a clustering run after one assign/update pass.

    Kept in ``history_`` for convergence diagnostics.
    """
    iteration: int
    assignments: AssignmentMatrix
    objective_value: float
    n_changed: int
    converged: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)
