# tests/test_data_structures.py
"""
Cluster entity and AssignmentMatrix behavior.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

import pytest
import torch

from kpoints import Cluster, DataPoint, VectorPoint, kmeans
from kpoints.base.data_structures import AssignmentMatrix


def test_cluster_copies_seed_centroid():
    seed = VectorPoint((1.0, 2.0))
    cluster = Cluster(seed)
    assert cluster.centroid == seed
    assert cluster.centroid is not seed
    assert len(cluster) == 0 and cluster.size == 0


def test_assign_reset_recompute():
    cluster = Cluster(VectorPoint((0.0, 0.0)))
    cluster.assign(VectorPoint((2.0, 0.0)))
    cluster.assign(VectorPoint((4.0, 2.0)))
    assert len(cluster) == 2

    assert cluster.recompute_centroid() is True
    assert cluster.centroid == VectorPoint((3.0, 1.0))

    cluster.reset()
    assert len(cluster) == 0
    # centroid survives a reset
    assert cluster.centroid == VectorPoint((3.0, 1.0))


def test_recompute_on_empty_keeps_centroid(gray):
    cluster = Cluster(gray(5.0))
    assert cluster.recompute_centroid() is False
    assert cluster.centroid == gray(5.0)
    assert gray.mean_calls == []


def test_centroids_projection_preserves_order():
    clusters = [Cluster(VectorPoint((i, i))) for i in range(3)]
    centroids = Cluster.centroids(clusters)
    assert centroids == [VectorPoint((0, 0)), VectorPoint((1, 1)), VectorPoint((2, 2))]
    # projections are copies, not the live centroids
    assert all(c is not cl.centroid for c, cl in zip(centroids, clusters))


def test_cluster_equality_and_copy():
    a = Cluster(VectorPoint((0, 0)), [VectorPoint((1, 1))])
    b = a.copy()
    assert a == b
    b.assign(VectorPoint((2, 2)))
    assert a != b
    assert "size=1" in repr(a)


def test_assignment_matrix_counts_and_indices():
    am = AssignmentMatrix(torch.tensor([0, 2, 2, 1, 2]), n_clusters=3)
    assert am.n_points == 5
    assert am.count_per_cluster().tolist() == [1, 1, 3]
    assert am.get_cluster_indices(2).tolist() == [1, 2, 4]


def test_unassigned_differs_everywhere():
    am = AssignmentMatrix(torch.tensor([0, 1, 0]), n_clusters=2)
    none = AssignmentMatrix.unassigned(3, 2)
    assert none.get_hard().tolist() == [-1, -1, -1]
    assert none.count_per_cluster().tolist() == [0, 0]
    assert am.n_changed(none) == 3
    assert am.n_changed(am) == 0
    assert am == AssignmentMatrix(torch.tensor([0, 1, 0]), n_clusters=2)


@pytest.mark.parametrize("labels", [[0, 3], [-2, 0]])
def test_assignment_matrix_rejects_out_of_range(labels):
    with pytest.raises(ValueError):
        AssignmentMatrix(torch.tensor(labels), n_clusters=3)


def test_n_changed_requires_same_length():
    with pytest.raises(ValueError):
        AssignmentMatrix.unassigned(2, 2).n_changed(AssignmentMatrix.unassigned(3, 2))


@dataclass
class Bag(DataPoint):
    """Mutable point whose mean of a single member is that member itself."""
    items: List[float] = field(default_factory=list)

    def distance(self, other: "Bag") -> float:
        return abs(sum(self.items) - sum(other.items))

    @classmethod
    def mean(cls, points: Sequence["Bag"]) -> "Bag":
        if len(points) == 1:
            return points[0]
        return cls([sum(sum(p.items) for p in points) / len(points)])


def test_recompute_does_not_alias_member_returned_by_mean():
    member = Bag([3.0])
    cluster = Cluster(Bag([0.0]), [member])
    assert cluster.recompute_centroid() is True
    assert cluster.centroid is not member
    member.items.append(99.0)
    assert cluster.centroid.items == [3.0]


def test_fitted_centroids_independent_of_mutable_inputs():
    points = [Bag([0.0]), Bag([10.0])]
    clusters = kmeans(2, points)
    assert clusters[0].centroid is not points[0]
    assert clusters[1].centroid is not points[1]

    points[0].items.append(99.0)
    assert clusters[0].centroid.items == [0.0]
    assert clusters[1].centroid.items == [10.0]
