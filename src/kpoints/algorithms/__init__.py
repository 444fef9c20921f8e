"""Clustering algorithm implementations."""

from .kmeans import KMeans, KMeansObjective, kmeans

__all__ = [
    'KMeans',
    'KMeansObjective',
    'kmeans'
]
