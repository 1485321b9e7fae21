"""Input coercion and validation with clear error messages."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd


def coerce_dimension(value: Any) -> int:
    """Coerce a requested row/column count to a positive integer.

    Missing, NaN, zero and negative values all become 1. Fractional
    values truncate toward zero before clamping.
    """
    if value is None or not value > 0:
        return 1
    return max(1, int(value))


def coerce_flat_data(data: Any, dtype: type = np.float64) -> np.ndarray:
    """Copy an initializer into a fresh 1-D array in row-major order.

    Nested sequences and 2-D arrays are flattened. ``None`` gives an
    empty array.
    """
    if data is None:
        return np.zeros(0, dtype=dtype)
    flat = np.array(data, dtype=dtype, copy=True)
    return flat.reshape(-1)


def check_row_index(index: int, n_rows: int) -> int:
    """Raise IndexError unless 0 <= index < n_rows."""
    if index < 0 or index >= n_rows:
        raise IndexError(
            f"Row index {index} out of range for matrix with {n_rows} rows. "
            f"Valid indices are 0 to {n_rows - 1}."
        )
    return index


def check_column_index(index: int, n_cols: int) -> int:
    """Raise IndexError unless 0 <= index < n_cols."""
    if index < 0 or index >= n_cols:
        raise IndexError(
            f"Column index {index} out of range for matrix with {n_cols} columns. "
            f"Valid indices are 0 to {n_cols - 1}."
        )
    return index


def validate_array_matrix(data: Any) -> np.ndarray:
    """Validate that data is a numeric numpy array of rank 1 or 2.

    Returns the array promoted to 2-D (a 1-D array becomes one row).
    """
    if not isinstance(data, np.ndarray):
        raise TypeError(
            f"Expected a numpy ndarray, got {type(data).__name__}. "
            "Use Matrix(rows, columns, data) for plain sequences."
        )
    if not (np.issubdtype(data.dtype, np.number) or data.dtype == np.bool_):
        raise TypeError(
            f"Array must be numeric, got dtype {data.dtype}."
        )
    if data.ndim == 0 or data.ndim > 2:
        raise ValueError(
            f"Array must be 1-D or 2-D, got {data.ndim}-D with shape {data.shape}."
        )
    if data.size == 0:
        raise ValueError("Array is empty. Provide at least one value.")
    if data.ndim == 1:
        return data.reshape(1, -1)
    return data


def validate_dataframe_matrix(data: Any) -> pd.DataFrame:
    """Validate that data is a non-empty, all-numeric DataFrame.

    Returns the validated DataFrame (unchanged).
    """
    if not isinstance(data, pd.DataFrame):
        raise TypeError(
            f"Matrix.from_dataframe needs a pandas DataFrame, got {type(data).__name__}. "
            "Use Matrix.from_numpy for arrays or Matrix(rows, columns, data) for sequences."
        )
    if data.empty:
        raise ValueError("DataFrame is empty; a matrix needs at least one row and one column.")
    numeric_df = data.select_dtypes(include=[np.number])
    if numeric_df.shape[1] != data.shape[1]:
        non_numeric = [c for c in data.columns if c not in numeric_df.columns]
        raise TypeError(
            f"Matrix cells must be numeric; cannot convert columns {non_numeric[:5]}"
            + (f" (and {len(non_numeric) - 5} more)" if len(non_numeric) > 5 else "")
        )
    return data
