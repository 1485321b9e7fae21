"""Tests for input coercion and validation helpers."""

import numpy as np
import pandas as pd
import pytest

from mini_matrix.core.validation import (
    check_column_index,
    check_row_index,
    coerce_dimension,
    coerce_flat_data,
    validate_array_matrix,
    validate_dataframe_matrix,
)


class TestCoerceDimension:
    @pytest.mark.parametrize("value", [None, 0, -1, -5.5, float("nan")])
    def test_non_positive_becomes_one(self, value):
        assert coerce_dimension(value) == 1

    def test_positive_kept(self):
        assert coerce_dimension(4) == 4

    def test_fraction_truncated(self):
        assert coerce_dimension(2.7) == 2
        assert coerce_dimension(0.5) == 1

    def test_numpy_integer(self):
        assert coerce_dimension(np.int64(3)) == 3


class TestCoerceFlatData:
    def test_none_is_empty(self):
        assert len(coerce_flat_data(None)) == 0

    def test_nested_flattened(self):
        np.testing.assert_array_equal(coerce_flat_data([[1, 2], [3, 4]]), [1, 2, 3, 4])

    def test_result_is_float64_copy(self):
        source = np.array([1, 2, 3])
        flat = coerce_flat_data(source)
        assert flat.dtype == np.float64
        flat[0] = 9
        assert source[0] == 1


class TestIndexChecks:
    def test_row_in_range(self):
        assert check_row_index(1, 2) == 1

    def test_row_out_of_range(self):
        with pytest.raises(IndexError, match="Valid indices are 0 to 1"):
            check_row_index(2, 2)

    def test_column_out_of_range(self):
        with pytest.raises(IndexError, match="3 columns"):
            check_column_index(-1, 3)


class TestValidateArray:
    def test_rejects_non_array(self):
        with pytest.raises(TypeError, match="numpy ndarray"):
            validate_array_matrix([[1, 2]])

    def test_rejects_non_numeric(self):
        with pytest.raises(TypeError, match="numeric"):
            validate_array_matrix(np.array(["a", "b"]))

    def test_rejects_3d(self):
        with pytest.raises(ValueError, match="1-D or 2-D"):
            validate_array_matrix(np.zeros((2, 2, 2)))

    def test_rejects_empty(self):
        with pytest.raises(ValueError, match="empty"):
            validate_array_matrix(np.zeros((0, 3)))

    def test_1d_promoted_to_row(self):
        assert validate_array_matrix(np.arange(3)).shape == (1, 3)


class TestValidateDataFrame:
    def test_rejects_non_dataframe(self):
        with pytest.raises(TypeError, match="from_numpy for arrays"):
            validate_dataframe_matrix(np.array([[1, 2], [3, 4]]))

    def test_rejects_empty(self):
        with pytest.raises(ValueError, match="empty"):
            validate_dataframe_matrix(pd.DataFrame())

    def test_rejects_non_numeric(self):
        df = pd.DataFrame({"a": [1, 2], "b": ["x", "y"]})
        with pytest.raises(TypeError, match="numeric"):
            validate_dataframe_matrix(df)

    def test_accepts_numeric(self, numeric_df):
        assert validate_dataframe_matrix(numeric_df) is numeric_df
