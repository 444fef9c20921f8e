"""
Clustering evaluation metrics.

Everything here works through the point capability only, so it applies to
any point type the engine can cluster.
"""

from typing import Sequence

import torch
from torch import Tensor

from ..base.data_structures import Cluster
from ..base.interfaces import DataPoint
from .validation import check_distance


def inertia(clusters: Sequence[Cluster]) -> float:
    """Sum of distances from every member to its cluster centroid.

    Args:
        clusters: Clusters with current members

    Returns:
        Total within-cluster distance
    """
    total = 0.0
    for cluster in clusters:
        for point in cluster.points:
            total += check_distance(point.distance(cluster.centroid))
    return total


def cluster_sizes(clusters: Sequence[Cluster]) -> Tensor:
    """(k,) int64 tensor of member counts, in cluster order."""
    return torch.tensor([len(cluster) for cluster in clusters], dtype=torch.long)


def distance_matrix(points: Sequence[DataPoint], centroids: Sequence[DataPoint]) -> Tensor:
    """Distances from every point to every centroid.

    Args:
        points: n points
        centroids: k centroids

    Returns:
        (n, k) float64 tensor
    """
    distances = torch.empty(len(points), len(centroids), dtype=torch.float64)
    for i, point in enumerate(points):
        for j, centroid in enumerate(centroids):
            distances[i, j] = float(point.distance(centroid))
    return distances


def labels_from_clusters(clusters: Sequence[Cluster], points: Sequence[DataPoint]) -> Tensor:
    """Cluster index of each point, found by identity among cluster members.

    Args:
        clusters: Clusters with current members
        points: n points, each held by exactly one cluster

    Returns:
        (n,) int64 tensor of cluster indices

    Raises:
        ValueError: If a point is not a member of any cluster
    """
    owner = {}
    for k, cluster in enumerate(clusters):
        for member in cluster.points:
            owner[id(member)] = k
    labels = []
    for i, point in enumerate(points):
        if id(point) not in owner:
            raise ValueError(f"Point {i} is not a member of any cluster")
        labels.append(owner[id(point)])
    return torch.tensor(labels, dtype=torch.long)
