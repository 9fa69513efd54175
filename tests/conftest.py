"""Pytest configuration shared by all test modules.

Every test starts from the same state of the global random streams, so
Monte Carlo tests and randomized BVH builds are reproducible.
"""

import random

import numpy as np
import pytest

from core.vector import Vector3


@pytest.fixture(autouse=True)
def seed_random_streams():
    """Seed the Python and numpy global generators before each test."""
    random.seed(42)
    np.random.seed(42)


def assert_vec_close(actual: Vector3, expected: Vector3, tol: float = 1e-9):
    """Componentwise absolute comparison of two vectors."""
    for a, e in zip(actual, expected):
        assert a == pytest.approx(e, abs=tol), f"{actual!r} != {expected!r}"
