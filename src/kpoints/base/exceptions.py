"""Errors raised by the clustering engine.

All of them subclass ``ValueError`` so callers of the estimator API can catch
the conventional type.
"""


class KPointsError(ValueError):
    """Base class for clustering failures."""


class InvalidK(KPointsError):
    """Requested number of clusters is not a positive integer."""


class EmptyInput(KPointsError):
    """No points were given."""


class InsufficientDistinctPoints(KPointsError):
    """Fewer distinct points than requested clusters."""

    def __init__(self, n_clusters: int, n_distinct: int):
        self.n_clusters = n_clusters
        self.n_distinct = n_distinct
        super().__init__(f"Cannot create {n_clusters} clusters from "
                         f"{n_distinct} distinct points")


class NonFiniteDistance(KPointsError):
    """A distance computation produced NaN or infinity."""
