"""
K-Points: k-means clustering over any point type.

A point type becomes clusterable by implementing two operations: a distance
between two points and a mean over a non-empty group of points. The engine
supplies seeding, the assign/update loop and its convergence check.

Example usage:
    >>> from kpoints import kmeans, Cluster, VectorPoint
    >>>
    >>> points = [VectorPoint(p) for p in [(0, 0), (0, 1), (10, 10), (10, 11)]]
    >>> clusters = kmeans(2, points)
    >>> Cluster.centroids(clusters)
    [VectorPoint(0, 0.5), VectorPoint(10, 10.5)]
"""

__version__ = '0.1.0'

# Import main algorithms
from .algorithms.kmeans import KMeans, kmeans

# Ready-made point types
from .points import VectorPoint, IntegerVectorPoint, as_points

# Initialization strategies
from .initialization import (
    FirstDistinctInit,
    RandomInit,
    KMeansPlusPlusInit,
    FromPreviousInit
)

# Import visualization
from .visualization import plot_clusters_2d

# Convenience imports
from .base import (
    DataPoint,
    Cluster,
    AssignmentMatrix,
    KPointsError,
    InvalidK,
    EmptyInput,
    InsufficientDistinctPoints,
    NonFiniteDistance
)

__all__ = [
    # Algorithms
    'KMeans',
    'kmeans',

    # Points
    'DataPoint',
    'VectorPoint',
    'IntegerVectorPoint',
    'as_points',

    # Initialization
    'FirstDistinctInit',
    'RandomInit',
    'KMeansPlusPlusInit',
    'FromPreviousInit',

    # Core data structures
    'Cluster',
    'AssignmentMatrix',

    # Errors
    'KPointsError',
    'InvalidK',
    'EmptyInput',
    'InsufficientDistinctPoints',
    'NonFiniteDistance',

    # Visualization
    'plot_clusters_2d',

    # Version
    '__version__'
]
