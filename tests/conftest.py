"""Shared test fixtures for mini-matrix."""

import numpy as np
import pandas as pd
import pytest

from mini_matrix import Matrix


@pytest.fixture
def square_2x2():
    """2x2 matrix |1,2| / |3,4|."""
    return Matrix(2, 2, [1, 2, 3, 4])


@pytest.fixture
def rect_2x3():
    """2x3 matrix with distinct values."""
    return Matrix(2, 3, [1, 2, 3, 4, 5, 6])


@pytest.fixture
def rect_3x2():
    """3x2 matrix with distinct values."""
    return Matrix(3, 2, [7, 8, 9, 10, 11, 12])


@pytest.fixture
def random_4x3():
    """4x3 matrix of small integers (exact float arithmetic)."""
    rng = np.random.default_rng(42)
    data = rng.integers(-9, 10, size=12)
    return Matrix(4, 3, data)


@pytest.fixture
def numeric_df():
    """3x2 numeric DataFrame."""
    return pd.DataFrame(
        [[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]],
        index=["r1", "r2", "r3"],
        columns=["c1", "c2"],
    )
