"""Base classes and interfaces for K-Points clustering."""

from .interfaces import (
    DataPoint,
    AssignmentStrategy,
    InitializationStrategy,
    ConvergenceCriterion,
    ClusteringObjective
)

from .data_structures import (
    Cluster,
    AssignmentMatrix,
    AlgorithmState
)

from .exceptions import (
    KPointsError,
    InvalidK,
    EmptyInput,
    InsufficientDistinctPoints,
    NonFiniteDistance
)

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Interfaces
    'DataPoint',
    'AssignmentStrategy',
    'InitializationStrategy',
    'ConvergenceCriterion',
    'ClusteringObjective',

    # Data structures
    'Cluster',
    'AssignmentMatrix',
    'AlgorithmState',

    # Errors
    'KPointsError',
    'InvalidK',
    'EmptyInput',
    'InsufficientDistinctPoints',
    'NonFiniteDistance',

    # Base algorithm
    'BaseClusteringAlgorithm'
]
