"""
Cluster visualization utilities.

Plots a set of clusters whose points have exactly two coordinates, such as
two-dimensional vector points.
"""

from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np

from ..base.data_structures import Cluster


def _coordinates(points: Sequence) -> np.ndarray:
    """(n, 2) array of point coordinates."""
    if len(points) == 0:
        return np.empty((0, 2))
    coords = np.asarray([list(p) for p in points], dtype=np.float64)
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(f"Expected 2D points, got coordinates of shape {coords.shape}")
    return coords


def plot_clusters_2d(clusters: Sequence[Cluster],
                     ax: Optional[plt.Axes] = None,
                     colors: Optional[List] = None,
                     alpha: float = 0.7,
                     center_marker: str = 'X',
                     center_size: int = 200,
                     point_size: int = 50,
                     show_legend: bool = True,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot 2D clustering results.

    Args:
        clusters: Clusters whose points iterate to two coordinates
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        center_marker: Marker for centroids
        center_size: Size of centroid markers
        point_size: Size of data points
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    n_clusters = len(clusters)
    if colors is None:
        cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
        colors = [cmap(i % cmap.N) for i in range(n_clusters)]

    for k, cluster in enumerate(clusters):
        color = colors[k % len(colors)]
        members = _coordinates(cluster.points)
        ax.scatter(members[:, 0], members[:, 1],
                   color=color,
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {k}')

        center = _coordinates([cluster.centroid])
        ax.scatter(center[:, 0], center[:, 1],
                   color=color,
                   marker=center_marker,
                   s=center_size,
                   edgecolors='black',
                   linewidth=2)

    if show_legend and n_clusters > 0:
        ax.legend()
    if title:
        ax.set_title(title)

    ax.set_aspect('equal', adjustable='datalim')
    return ax
