"""
Vector point types.

Ready-made implementations of the point capability for fixed-length numeric
vectors, backed by 1D tensors.
"""

from typing import Iterator, List, Sequence, Type, Union

import numpy as np
import torch
from torch import Tensor

from ..base.interfaces import DataPoint
from ..utils.validation import validate_data


class VectorPoint(DataPoint):
    """Real-valued vector with Euclidean distance and componentwise mean.

    Coordinates are stored as a float64 tensor. Two points are equal when all
    coordinates are equal.
    """

    dtype = torch.float64

    def __init__(self, coordinates: Union[Tensor, np.ndarray, Sequence[float]]):
        """
        Args:
            coordinates: 1D coordinates
        """
        if isinstance(coordinates, Tensor):
            values = coordinates.detach().cpu()
        else:
            values = torch.as_tensor(np.asarray(coordinates))
        if values.dim() != 1:
            raise ValueError(f"Expected 1D coordinates, got {values.dim()}D")
        self._values = values.to(self.dtype).clone()

    @property
    def values(self) -> Tensor:
        """Coordinates as a 1D tensor."""
        return self._values

    @property
    def dimension(self) -> int:
        return self._values.shape[0]

    def distance(self, other: 'VectorPoint') -> float:
        """Euclidean distance."""
        self._check_dimension(other)
        diff = self._values.to(torch.float64) - other._values.to(torch.float64)
        return torch.sqrt(torch.sum(diff * diff)).item()

    @classmethod
    def mean(cls, points: Sequence['VectorPoint']) -> 'VectorPoint':
        """Componentwise average."""
        stacked = torch.stack([p._values for p in points])
        return cls(stacked.mean(dim=0))

    def copy(self) -> 'VectorPoint':
        return type(self)(self._values)

    def tolist(self) -> List[float]:
        return self._values.tolist()

    def _check_dimension(self, other: 'VectorPoint'):
        if other.dimension != self.dimension:
            raise ValueError(f"Expected dimension {self.dimension}, got {other.dimension}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorPoint):
            return NotImplemented
        return self.dimension == other.dimension and bool(torch.equal(
            self._values.to(torch.float64), other._values.to(torch.float64)
        ))

    __hash__ = None

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator:
        return iter(self._values.tolist())

    def __getitem__(self, index: int):
        return self._values[index].item()

    def __repr__(self) -> str:
        coords = ', '.join(f"{v:g}" for v in self._values.tolist())
        return f"{type(self).__name__}({coords})"


class IntegerVectorPoint(VectorPoint):
    """Integer-valued vector, for data such as pixel colors.

    The mean is the componentwise sum divided by the count, truncated toward
    zero, so centroids stay on the integer grid.
    """

    dtype = torch.int64

    @classmethod
    def mean(cls, points: Sequence['IntegerVectorPoint']) -> 'IntegerVectorPoint':
        """Componentwise average, truncated toward zero."""
        total = torch.stack([p._values for p in points]).sum(dim=0)
        return cls(torch.div(total, len(points), rounding_mode='trunc'))


def as_points(X: Union[Tensor, np.ndarray, list],
              point_class: Type[VectorPoint] = VectorPoint) -> List[VectorPoint]:
    """Convert an (n, d) numeric array into a list of vector points.

    Args:
        X: Tensor, numpy array or nested list with one row per point
        point_class: Vector point type to build

    Returns:
        List of n points

    Raises:
        EmptyInput: If X has no rows
    """
    dtype = torch.int64 if point_class.dtype == torch.int64 else torch.float64
    if dtype == torch.int64:
        data = validate_data(X, dtype=torch.float64)
        if not torch.equal(data, torch.round(data)):
            raise ValueError(f"{point_class.__name__} requires integer coordinates")
        data = data.to(torch.int64)
    else:
        data = validate_data(X, dtype=dtype)
    return [point_class(row) for row in data]
