"""
Global pytest fixtures for K-Points tests.

- Provides deterministic seeding across Python, NumPy, and PyTorch.
- Forces the non-interactive matplotlib backend so plotting tests run headless.
- Supplies small point types used to exercise the point capability.
"""

from __future__ import annotations

import math
import os
import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Generator, List, Sequence

import matplotlib
import numpy as np
import pytest
import torch

matplotlib.use("Agg")

# Add the project's src directory to the Python path so tests can import the code
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

from kpoints import DataPoint, VectorPoint  # noqa: E402


def _get_seed() -> int:
    """Resolve the test seed from env or default."""
    env = os.getenv("TEST_RANDOM_SEED", "1337")
    try:
        return int(env)
    except ValueError:
        return 1337


@pytest.fixture(scope="session", autouse=True)
def seed_all() -> int:
    """
    Seed Python, NumPy, and PyTorch RNGs once per session.

    Seed value comes from TEST_RANDOM_SEED (default 1337).
    """
    seed = _get_seed()
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
    return seed


@pytest.fixture(scope="function")
def rng(seed_all: int) -> Generator[np.random.Generator, None, None]:
    """
    Per-test NumPy Generator seeded from the session seed.
    """
    yield np.random.default_rng(seed_all)


@dataclass
class Gray(DataPoint):
    """One-dimensional point that records every call to ``mean``."""

    level: float

    mean_calls = []

    def distance(self, other: "Gray") -> float:
        return abs(self.level - other.level)

    @classmethod
    def mean(cls, points: Sequence["Gray"]) -> "Gray":
        cls.mean_calls.append(len(points))
        return cls(sum(p.level for p in points) / len(points))


@dataclass
class BrokenDistance(DataPoint):
    """Point whose distance to anything at or beyond ``poison`` is NaN."""

    level: float
    poison: float = math.inf

    def distance(self, other: "BrokenDistance") -> float:
        if max(self.level, other.level) >= self.poison:
            return math.nan
        return abs(self.level - other.level)

    @classmethod
    def mean(cls, points: Sequence["BrokenDistance"]) -> "BrokenDistance":
        return cls(sum(p.level for p in points) / len(points), points[0].poison)


@pytest.fixture
def gray():
    """The ``Gray`` point type with a cleared call log."""
    Gray.mean_calls = []
    yield Gray
    Gray.mean_calls = []


@pytest.fixture
def broken_point():
    return BrokenDistance


@pytest.fixture
def square_points() -> List[VectorPoint]:
    """Two well separated pairs: {(0,0),(0,1)} and {(10,10),(10,11)}."""
    return [VectorPoint(p) for p in [(0, 0), (0, 1), (10, 10), (10, 11)]]


@pytest.fixture
def blobs(rng) -> List[VectorPoint]:
    """Three Gaussian blobs in 2D, 40 points each, in blob order."""
    centers = np.array([[0.0, 0.0], [6.0, 0.0], [0.0, 6.0]])
    X = np.vstack([rng.normal(loc=c, scale=0.4, size=(40, 2)) for c in centers])
    return [VectorPoint(row) for row in X]
