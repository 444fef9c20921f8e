"""Utility functions for K-Points clustering."""

from .convergence import ChangeInAssignments

from .metrics import (
    inertia,
    cluster_sizes,
    distance_matrix,
    labels_from_clusters
)

from .validation import (
    validate_data,
    check_n_clusters,
    check_points,
    check_enough_distinct,
    distinct_points,
    check_distance,
    check_distances,
    check_random_state,
    check_max_iter
)

__all__ = [
    # Convergence
    'ChangeInAssignments',

    # Metrics
    'inertia',
    'cluster_sizes',
    'distance_matrix',
    'labels_from_clusters',

    # Validation
    'validate_data',
    'check_n_clusters',
    'check_points',
    'check_enough_distinct',
    'distinct_points',
    'check_distance',
    'check_distances',
    'check_random_state',
    'check_max_iter'
]
