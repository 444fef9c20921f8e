"""Ready-made point types."""

from .vector import VectorPoint, IntegerVectorPoint, as_points

__all__ = [
    'VectorPoint',
    'IntegerVectorPoint',
    'as_points'
]
