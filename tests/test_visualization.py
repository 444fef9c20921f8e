# tests/test_visualization.py

import matplotlib.pyplot as plt
import pytest

from kpoints import Cluster, VectorPoint, kmeans, plot_clusters_2d


def test_plot_clusters_2d_draws_members_and_centroids(square_points):
    clusters = kmeans(2, square_points)
    fig, ax = plt.subplots()
    try:
        out = plot_clusters_2d(clusters, ax=ax, title="squares")
        assert out is ax
        # one scatter for members and one for the centroid, per cluster
        assert len(ax.collections) == 4
        assert ax.get_title() == "squares"
        assert ax.get_legend() is not None
    finally:
        plt.close(fig)


def test_plot_handles_empty_cluster():
    clusters = [Cluster(VectorPoint((0, 0)), [VectorPoint((1, 1))]),
                Cluster(VectorPoint((5, 5)))]
    ax = plot_clusters_2d(clusters, show_legend=False)
    try:
        assert len(ax.collections) == 4
    finally:
        plt.close(ax.figure)


def test_plot_rejects_non_2d_points():
    clusters = [Cluster(VectorPoint((0, 0, 0)), [VectorPoint((1, 1, 1))])]
    with pytest.raises(ValueError, match="2D"):
        plot_clusters_2d(clusters)
    plt.close("all")
