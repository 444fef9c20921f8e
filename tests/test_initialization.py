# tests/test_initialization.py
"""
Initialization strategies: first-distinct, seeded random, seeded k-means++,
and explicit centroids.
"""

from __future__ import annotations

import pytest

from kpoints import (
    Cluster, VectorPoint, FirstDistinctInit, RandomInit, KMeansPlusPlusInit,
    FromPreviousInit, InsufficientDistinctPoints, kmeans
)


def _pts(*coords):
    return [VectorPoint(c) for c in coords]


def test_first_distinct_skips_duplicates():
    points = _pts((0, 0), (0, 0), (1, 1), (0, 0), (2, 2), (3, 3))
    clusters = FirstDistinctInit().initialize(points, 3)
    assert Cluster.centroids(clusters) == _pts((0, 0), (1, 1), (2, 2))
    assert all(len(c) == 0 for c in clusters)


def test_first_distinct_insufficient():
    points = _pts((0, 0), (1, 1), (0, 0), (1, 1))
    with pytest.raises(InsufficientDistinctPoints) as excinfo:
        FirstDistinctInit().initialize(points, 3)
    assert excinfo.value.n_distinct == 2
    assert excinfo.value.n_clusters == 3


def test_centroids_do_not_alias_inputs():
    points = _pts((0, 0), (1, 1))
    clusters = FirstDistinctInit().initialize(points, 2)
    assert all(c.centroid is not p for c, p in zip(clusters, points))


@pytest.mark.parametrize("strategy_cls", [RandomInit, KMeansPlusPlusInit])
def test_seeded_strategies_are_reproducible(strategy_cls, blobs):
    a = Cluster.centroids(strategy_cls(random_state=11).initialize(blobs, 3))
    b = Cluster.centroids(strategy_cls(random_state=11).initialize(blobs, 3))
    assert a == b
    assert len(a) == 3


@pytest.mark.parametrize("strategy_cls", [RandomInit, KMeansPlusPlusInit])
def test_seeded_strategies_pick_distinct_input_points(strategy_cls):
    points = _pts((0, 0), (0, 0), (0, 0), (5, 5), (5, 5), (9, 9))
    for seed in range(10):
        centroids = Cluster.centroids(strategy_cls(random_state=seed).initialize(points, 3))
        assert sorted(c.tolist() for c in centroids) == [[0, 0], [5, 5], [9, 9]]


def test_kmeans_plusplus_spreads_over_blobs(blobs):
    # second and third centers should not fall in the first center's blob
    centroids = Cluster.centroids(KMeansPlusPlusInit(random_state=3).initialize(blobs, 3))
    blob_of = [blobs.index(c) // 40 for c in centroids]
    assert sorted(blob_of) == [0, 1, 2]


def test_random_init_insufficient():
    with pytest.raises(InsufficientDistinctPoints):
        RandomInit(random_state=0).initialize(_pts((1, 1), (1, 1)), 2)


def test_from_previous_accepts_points_and_clusters():
    seeds = _pts((1, 2), (3, 4))
    from_points = FromPreviousInit(seeds).initialize([], 2)
    assert Cluster.centroids(from_points) == seeds

    from_clusters = FromPreviousInit(from_points).initialize([], 2)
    assert Cluster.centroids(from_clusters) == seeds
    assert from_clusters[0].centroid is not from_points[0].centroid


def test_from_previous_wrong_count():
    with pytest.raises(ValueError, match="n_clusters"):
        FromPreviousInit(_pts((1, 2))).initialize([], 2)


def test_from_previous_rejects_duplicate_seeds():
    with pytest.raises(InsufficientDistinctPoints) as excinfo:
        FromPreviousInit(_pts((1, 1), (1, 1))).initialize([], 2)
    assert excinfo.value.n_clusters == 2
    assert excinfo.value.n_distinct == 1


def test_kmeans_rejects_duplicate_explicit_centroids():
    points = _pts((0, 0), (1, 1), (9, 9))
    with pytest.raises(InsufficientDistinctPoints):
        kmeans(2, points, init=_pts((1, 1), (1, 1)))
