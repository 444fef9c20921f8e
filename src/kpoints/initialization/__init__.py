"""Initialization strategies for clustering algorithms."""

from .first_distinct import FirstDistinctInit
from .random import RandomInit
from .kmeans_plusplus import KMeansPlusPlusInit
from .from_previous import FromPreviousInit

__all__ = [
    'FirstDistinctInit',
    'RandomInit',
    'KMeansPlusPlusInit',
    'FromPreviousInit'
]
