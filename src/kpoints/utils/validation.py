"""
Input validation utilities.

Provides the checks run before a clustering pass starts, plus conversion of
array-like numeric data into tensors.
"""

from typing import Iterable, List, Optional, Sequence, Union
import math
import numbers

import numpy as np
import torch
from torch import Tensor

from ..base.exceptions import (
    EmptyInput, InsufficientDistinctPoints, InvalidK, NonFiniteDistance
)
from ..base.interfaces import DataPoint


def validate_data(X: Union[Tensor, np.ndarray, list],
                  dtype: torch.dtype = torch.float64,
                  ensure_2d: bool = True,
                  ensure_finite: bool = True,
                  ensure_min_samples: int = 1) -> Tensor:
    """Validate and convert numeric input data to a tensor.

    Args:
        X: Input data (tensor, numpy array, or nested list)
        dtype: Target data type
        ensure_2d: Whether to ensure 2D shape
        ensure_finite: Whether to check for inf/nan
        ensure_min_samples: Minimum number of samples required

    Returns:
        Validated tensor

    Raises:
        EmptyInput: If there are fewer than ``ensure_min_samples`` rows
        ValueError: If validation fails otherwise
    """
    if isinstance(X, Tensor):
        X = X.detach().to(dtype=dtype, device='cpu')
    elif isinstance(X, np.ndarray):
        X = torch.from_numpy(np.ascontiguousarray(X)).to(dtype=dtype)
    elif isinstance(X, (list, tuple)):
        X = torch.tensor(np.asarray(X, dtype=np.float64), dtype=dtype)
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    if ensure_2d:
        if X.dim() == 1:
            X = X.unsqueeze(1)
        elif X.dim() != 2:
            raise ValueError(f"Expected 2D array, got {X.dim()}D")

    if X.shape[0] < ensure_min_samples:
        raise EmptyInput(f"Found {X.shape[0]} samples, but need at least "
                         f"{ensure_min_samples}")

    if ensure_finite and X.is_floating_point():
        if torch.isnan(X).any():
            raise ValueError("Input contains NaN values")
        if torch.isinf(X).any():
            raise ValueError("Input contains infinite values")

    return X


def check_n_clusters(n_clusters: int) -> None:
    """Validate number of clusters.

    Raises:
        InvalidK: If ``n_clusters`` is not a positive integer
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, numbers.Integral):
        raise InvalidK(f"n_clusters must be int, got {type(n_clusters).__name__}")
    if n_clusters <= 0:
        raise InvalidK(f"n_clusters must be positive, got {n_clusters}")


def check_points(points: Iterable[DataPoint]) -> List[DataPoint]:
    """Materialize input points and check they can be clustered.

    Numeric arrays and tensors of shape (n, d) are converted to vector points.

    Returns:
        List of points in input order

    Raises:
        EmptyInput: If no points are given
        TypeError: If a point does not provide ``distance`` and ``mean``
    """
    if isinstance(points, (Tensor, np.ndarray)):
        from ..points import as_points
        return as_points(points)

    points = list(points)
    if not points:
        raise EmptyInput("Cannot cluster an empty collection of points")

    for point in points:
        if not callable(getattr(point, 'distance', None)) or \
                not callable(getattr(type(point), 'mean', None)):
            raise TypeError(f"{type(point).__name__} does not implement the point "
                            f"capability (distance, mean)")
    return points


def distinct_points(points: Sequence[DataPoint],
                    limit: Optional[int] = None) -> List[DataPoint]:
    """First pairwise-distinct points under ``==``, scanning in order.

    Args:
        points: Points to scan
        limit: Stop once this many distinct points are found

    Returns:
        Distinct points in order of first appearance
    """
    found: List[DataPoint] = []
    for point in points:
        if limit is not None and len(found) >= limit:
            break
        if not any(point == seen for seen in found):
            found.append(point)
    return found


def check_enough_distinct(points: Sequence[DataPoint], n_clusters: int) -> None:
    """Ensure at least ``n_clusters`` distinct points exist.

    Raises:
        InsufficientDistinctPoints: If there are fewer
    """
    n_distinct = len(distinct_points(points, limit=n_clusters))
    if n_distinct < n_clusters:
        raise InsufficientDistinctPoints(n_clusters, n_distinct)


def check_distance(value: float) -> float:
    """Return ``value`` as float, rejecting NaN and infinity.

    Raises:
        NonFiniteDistance: If the value is not finite
    """
    value = float(value)
    if not math.isfinite(value):
        raise NonFiniteDistance(f"Distance function returned {value}")
    return value


def check_distances(distances: Tensor) -> Tensor:
    """Tensor version of ``check_distance``."""
    if not torch.isfinite(distances).all():
        bad = distances[~torch.isfinite(distances)][0].item()
        raise NonFiniteDistance(f"Distance function returned {bad}")
    return distances


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> torch.Generator:
    """Create generator from random state.

    Args:
        random_state: Seed or generator; None draws a fresh seed

    Returns:
        Generator
    """
    if random_state is None:
        generator = torch.Generator()
        generator.seed()
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, numbers.Integral) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")


def check_max_iter(max_iter: int) -> None:
    """Validate the iteration cap."""
    if isinstance(max_iter, bool) or not isinstance(max_iter, numbers.Integral):
        raise TypeError(f"max_iter must be int, got {type(max_iter).__name__}")
    if max_iter < 1:
        raise ValueError(f"max_iter must be at least 1, got {max_iter}")
