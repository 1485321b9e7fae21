"""Matrix: immutable, row-major dense numeric matrix."""

from __future__ import annotations

import logging
import math
from typing import Any, Sequence

import numpy as np
import pandas as pd

from ..display_utils import format_grid, format_number
from .validation import (
    check_column_index,
    check_row_index,
    coerce_dimension,
    coerce_flat_data,
    validate_array_matrix,
    validate_dataframe_matrix,
)

logger = logging.getLogger(__name__)


def _padded(store: np.ndarray, length: int) -> np.ndarray:
    """Return store zero-extended to at least length entries."""
    if len(store) >= length:
        return store
    out = np.zeros(length, dtype=store.dtype)
    out[: len(store)] = store
    return out


class Matrix:
    """Immutable dense matrix backed by a flat row-major float64 array.

    Every operation returns a new Matrix; the backing array is copied on
    the way in and flagged read-only. Reads are permissive: flat offsets
    outside the backing array and NaN entries both read as 0. The
    backing array may hold more than ``rows * columns`` entries when the
    initializer was longer than the declared shape; the excess is only
    visible to out-of-bounds ``val`` reads and survives ``reshape`` and
    ``change_row``.
    """

    __slots__ = ("_rows", "_columns", "_data")

    DTYPE = np.float64

    def __init__(self, rows: Any = 1, columns: Any = 1, data: Any = None) -> None:
        rows = coerce_dimension(rows)
        columns = coerce_dimension(columns)
        flat = coerce_flat_data(data, self.DTYPE)
        if data is not None and len(flat) != rows * columns:
            logger.debug(
                "Initializer has %d values for a %dx%d matrix; "
                "missing cells read as 0, excess is kept unread.",
                len(flat), rows, columns,
            )
        self._rows = rows
        self._columns = columns
        self._data = _padded(flat, rows * columns)
        self._data.flags.writeable = False

    @classmethod
    def _from_store(cls, rows: int, columns: int, store: np.ndarray) -> Matrix:
        """Wrap a freshly built backing array (bypasses coercion).

        The caller hands over ownership of ``store``.
        """
        obj = object.__new__(cls)
        obj._rows = rows
        obj._columns = columns
        obj._data = _padded(store, rows * columns)
        obj._data.flags.writeable = False
        return obj

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    @classmethod
    def number(cls, n: float) -> Matrix:
        """1x1 matrix holding n."""
        return cls(1, 1, [n])

    @classmethod
    def unit(cls, n: int) -> Matrix:
        """n x n identity matrix.

        A non-positive n still yields a 1x1 matrix, but with no diagonal
        entry set.
        """
        size = coerce_dimension(n)
        if n is not None and n >= 1:
            store = np.eye(size, dtype=cls.DTYPE).reshape(-1)
        else:
            store = np.zeros(size * size, dtype=cls.DTYPE)
        return cls._from_store(size, size, store)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> Matrix:
        """Build a matrix from a 1-D (single row) or 2-D numeric array."""
        array = validate_array_matrix(array)
        n_rows, n_cols = array.shape
        return cls(n_rows, n_cols, array)

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> Matrix:
        """Build a matrix from a numeric DataFrame. Labels are discarded."""
        df = validate_dataframe_matrix(df)
        n_rows, n_cols = df.shape
        return cls(n_rows, n_cols, df.to_numpy(dtype=np.float64))

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._columns)

    def val(self, x: int, y: int) -> float:
        """Value at column x, row y.

        No bounds check against the declared shape: the read goes to flat
        offset ``y * columns + x`` of the backing array, and offsets
        outside the array, or not whole numbers, read as 0.
        """
        offset = y * self._columns + x
        if offset != int(offset) or offset < 0 or offset >= len(self._data):
            return 0.0
        value = float(self._data[int(offset)])
        return 0.0 if math.isnan(value) else value

    def _read_slice(self, start: int, stop: int, step: int = 1) -> np.ndarray:
        """Copy of a backing-array slice with NaN read as 0."""
        cells = self._data[start:stop:step].copy()
        cells[np.isnan(cells)] = 0.0
        return cells

    def _cells(self) -> np.ndarray:
        """Logical cells (first rows*columns entries) as a fresh flat array."""
        return self._read_slice(0, self._rows * self._columns)

    def _flat(self, length: int) -> np.ndarray:
        """Raw backing entries 0..length, zero-extended, NaN kept."""
        return _padded(self._data[:length].copy(), length)

    @property
    def values(self) -> np.ndarray:
        """Float64 cells (rows, columns), read-only."""
        v = self._cells().reshape(self._rows, self._columns)
        v.flags.writeable = False
        return v

    def to_numpy(self) -> np.ndarray:
        """Writable copy of the cells as a (rows, columns) array."""
        return self._cells().reshape(self._rows, self._columns)

    def to_dataframe(
        self,
        index: Sequence | None = None,
        columns: Sequence | None = None,
    ) -> pd.DataFrame:
        """Cells as a float64 DataFrame, optionally labelled by index and columns."""
        return pd.DataFrame(self.to_numpy(), index=index, columns=columns)

    def get_row(self, r: int) -> Matrix:
        """Row r as a 1 x columns matrix. Raises IndexError if out of range."""
        check_row_index(r, self._rows)
        start = r * self._columns
        return Matrix._from_store(
            1, self._columns, self._read_slice(start, start + self._columns)
        )

    def get_column(self, c: int) -> Matrix:
        """Column c as a rows x 1 matrix. Raises IndexError if out of range."""
        check_column_index(c, self._columns)
        stop = self._rows * self._columns
        return Matrix._from_store(
            self._rows, 1, self._read_slice(c, stop, self._columns)
        )

    # ------------------------------------------------------------------
    # Shape transforms
    # ------------------------------------------------------------------

    def reshape(self, rows: int, columns: int) -> Matrix:
        """Same flat data (excess included) viewed under a new shape.

        The cell count is not checked; missing cells read as 0.
        """
        rows = coerce_dimension(rows)
        columns = coerce_dimension(columns)
        if rows * columns != self._rows * self._columns:
            logger.debug(
                "Reshape %dx%d -> %dx%d changes the cell count.",
                self._rows, self._columns, rows, columns,
            )
        return Matrix._from_store(rows, columns, self._data.copy())

    @property
    def transpose(self) -> Matrix:
        """columns x rows matrix with result.val(x, y) == self.val(y, x)."""
        grid = self._cells().reshape(self._rows, self._columns)
        return Matrix._from_store(self._columns, self._rows, grid.T.flatten())

    # ------------------------------------------------------------------
    # Elementwise and linear-algebraic operations
    # ------------------------------------------------------------------

    def _log_shape_mismatch(self, other: Matrix, op_name: str) -> None:
        if other.shape != self.shape:
            logger.debug(
                "%s of %dx%d with %dx%d pairs cells by flat index.",
                op_name, self._rows, self._columns, other._rows, other._columns,
            )

    def add(self, other: Matrix) -> Matrix:
        """Elementwise sum over self's flat cells.

        Operands are paired by flat index with no shape check; entries
        missing from other count as 0. The result has self's shape.
        """
        self._log_shape_mismatch(other, "add")
        n = self._rows * self._columns
        return Matrix._from_store(
            self._rows, self._columns, self._flat(n) + other._flat(n)
        )

    def hadamard(self, other: Matrix) -> Matrix:
        """Elementwise product. Same pairing contract as add."""
        self._log_shape_mismatch(other, "hadamard")
        n = self._rows * self._columns
        return Matrix._from_store(
            self._rows, self._columns, self._flat(n) * other._flat(n)
        )

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product, self.rows x other.columns.

        Naive row-by-column dot products with no shape check. The column
        vector is read as ``right.val(0, i)``; it is one column wide, so
        that is its i-th entry, and entries past its end read as 0.
        """
        if self._columns != other._rows:
            logger.debug(
                "multiply of %dx%d by %dx%d: inner dimensions differ.",
                self._rows, self._columns, other._rows, other._columns,
            )
        out_cols = other._columns
        store = np.zeros(self._rows * out_cols, dtype=self.DTYPE)
        for r in range(self._rows):
            for c in range(out_cols):
                left = self.get_row(r)
                right = other.get_column(c)
                product = 0.0
                for i in range(self._columns):
                    product += left.val(i, 0) * right.val(0, i)
                store[r * out_cols + c] = product
        return Matrix._from_store(self._rows, out_cols, store)

    # ------------------------------------------------------------------
    # Elementary row operations
    # ------------------------------------------------------------------

    def change_row(self, r: int, row: Matrix) -> Matrix:
        """Copy with row r replaced by row.val(x, 0) for each column x.

        r is not bounds-checked: offsets past the backing array extend it
        with zeros, negative offsets are skipped.
        """
        base = r * self._columns
        store = _padded(self._data.copy(), base + self._columns)
        for x in range(self._columns):
            if base + x >= 0:
                store[base + x] = row.val(x, 0)
        return Matrix._from_store(self._rows, self._columns, store)

    def swap_row(self, r1: int, r2: int) -> Matrix:
        # Both rows are captured before either is replaced.
        row1 = self.get_row(r1)
        row2 = self.get_row(r2)
        return self.change_row(r1, row2).change_row(r2, row1)

    def row_multi_by(self, r: int, multi_by: float) -> Matrix:
        """Copy with row r scaled by multi_by (as a 1x1 by 1xN product)."""
        row = Matrix.number(multi_by).multiply(self.get_row(r))
        return self.change_row(r, row)

    def row_add_to_row(self, r: int, add_to: int) -> Matrix:
        """Copy with row add_to replaced by row add_to + row r."""
        row = self.get_row(add_to)
        add_by = self.get_row(r)
        return self.change_row(add_to, row.add(add_by))

    # ------------------------------------------------------------------
    # Presentation and coercion
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return format_grid(self.values)

    def __repr__(self) -> str:
        cells = ", ".join(format_number(v) for v in self._cells())
        return f"Matrix({self._rows}, {self._columns}, [{cells}])"

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return format(float(self), format_spec)

    def __float__(self) -> float:
        return self.val(0, 0)

    def __int__(self) -> int:
        return int(self.val(0, 0))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(
            np.array_equal(self._cells(), other._cells())
        )

    def __hash__(self) -> int:
        # + 0.0 folds -0.0 into 0.0 so equal matrices hash alike
        return hash((self._rows, self._columns, (self._cells() + 0.0).tobytes()))

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)
