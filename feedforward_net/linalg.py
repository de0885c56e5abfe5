"""
Fixed-size Matrix and Vector types backing the network.

Both keep their elements in a flat float64 numpy array. A Matrix is stored
row-major, element (r, c) lives at ``grid[r * columns + c]``.

Apart from ``randomize``, ``Vector.apply_sigmoid`` and indexed assignment,
every operation returns a new instance. Constructors copy the data they are
given, so a buffer always has exactly one owner.
"""

from typing import Optional, Sequence, Union

import numpy as np

from feedforward_net.activation import sigmoid_array
from feedforward_net.errors import DimensionMismatch, IndexOutOfRange


# Process-wide random source, used when no generator is passed in
_default_rng = np.random.default_rng()


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _check_dimension(name: str, value: int) -> int:
    if not _is_integer(value) or value < 0:
        raise DimensionMismatch(f"{name} must be a non-negative integer, got {value!r}")
    return int(value)


def _require(operation: str, item, kinds, expected: str) -> None:
    if not isinstance(item, kinds):
        raise TypeError(f"{operation} expects {expected}, got {type(item).__name__}")


def _as_flat(data, expected: int, shape_label: str) -> np.ndarray:
    values = np.array(data, dtype=float)
    if values.ndim != 1 or values.size != expected:
        raise DimensionMismatch(
            f"{shape_label} needs {expected} values, got data of shape {values.shape}"
        )
    return values


class Matrix(object):

    def __init__(self, rows: int, columns: int, data: Optional[Sequence[float]] = None):
        self.rows = _check_dimension("rows", rows)
        self.columns = _check_dimension("columns", columns)
        if data is None:
            self.grid = np.zeros(self.rows * self.columns)
        else:
            self.grid = _as_flat(data, self.rows * self.columns,
                                 f"{self.rows}r x {self.columns}c matrix")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        """Build a matrix from a list of equal length rows."""
        if len(rows) == 0:
            return cls(0, 0)
        columns = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != columns:
                raise DimensionMismatch(
                    f"row {index} has {len(row)} values, expected {columns}"
                )
        return cls(len(rows), columns, [value for row in rows for value in row])

    @property
    def shape(self):
        return (self.rows, self.columns)

    def randomize(self, rng: Optional[np.random.Generator] = None) -> None:
        """Overwrite every element with a uniform draw in [0, 1)."""
        rng = rng if rng is not None else _default_rng
        self.grid = rng.random(self.rows * self.columns)

    def index_is_valid(self, row: int, column: int) -> bool:
        return (_is_integer(row) and _is_integer(column)
                and 0 <= row < self.rows and 0 <= column < self.columns)

    def _offset(self, key) -> int:
        if not isinstance(key, tuple) or len(key) != 2:
            raise IndexOutOfRange(f"matrix index must be a (row, column) pair, got {key!r}")
        row, column = key
        if not self.index_is_valid(row, column):
            raise IndexOutOfRange(
                f"index ({row}, {column}) out of range for {self.rows}r x {self.columns}c matrix"
            )
        return row * self.columns + column

    def __getitem__(self, key) -> float:
        return float(self.grid[self._offset(key)])

    def __setitem__(self, key, value: float) -> None:
        self.grid[self._offset(key)] = value

    def to_vector(self) -> "Vector":
        if self.columns != 1:
            raise DimensionMismatch(
                f"only a single-column matrix converts to a vector, got {self.columns} columns"
            )
        return Vector(self.rows, self.grid)

    def to_rows(self):
        return self.grid.reshape(self.rows, self.columns).tolist()

    def copy(self) -> "Matrix":
        return Matrix(self.rows, self.columns, self.grid)

    def __matmul__(self, other):
        if isinstance(other, (Matrix, Vector)):
            return multiply(self, other)
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, (Matrix, Vector)):
            return equals(self, other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"Matrix(rows={self.rows}, columns={self.columns}, data={self.grid.tolist()!r})"

    def __str__(self):
        lines = [f"{self.rows}r x {self.columns}c matrix"]
        for start in range(0, self.rows * self.columns, max(self.columns, 1)):
            row = self.grid[start:start + self.columns]
            lines.append("\t" + " ".join(f"{item:.3f}" for item in row))
        return "\n".join(lines)


class Vector(object):

    def __init__(self, rows: int, data: Optional[Sequence[float]] = None):
        self.rows = _check_dimension("rows", rows)
        if data is None:
            self.values = np.zeros(self.rows)
        else:
            self.values = _as_flat(data, self.rows, f"{self.rows}r vector")

    @classmethod
    def from_matrix(cls, matrix: Matrix) -> "Vector":
        return matrix.to_vector()

    def randomize(self, rng: Optional[np.random.Generator] = None) -> None:
        """Overwrite every element with a uniform draw in [0, 1)."""
        rng = rng if rng is not None else _default_rng
        self.values = rng.random(self.rows)

    def apply_sigmoid(self) -> None:
        # The buffer is swapped in one assignment, never partially updated
        self.values = sigmoid_array(self.values)

    def index_is_valid(self, index: int) -> bool:
        return _is_integer(index) and 0 <= index < self.rows

    def _check(self, index: int) -> int:
        if not self.index_is_valid(index):
            raise IndexOutOfRange(f"index {index} out of range for {self.rows}r vector")
        return index

    def __getitem__(self, index: int) -> float:
        return float(self.values[self._check(index)])

    def __setitem__(self, index: int, value: float) -> None:
        self.values[self._check(index)] = value

    def __len__(self):
        return self.rows

    def to_matrix(self) -> Matrix:
        return Matrix(self.rows, 1, self.values)

    def tolist(self):
        return self.values.tolist()

    def copy(self) -> "Vector":
        return Vector(self.rows, self.values)

    def __add__(self, other):
        if isinstance(other, Vector):
            return add(self, other)
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, (Matrix, Vector)):
            return equals(self, other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return f"Vector(rows={self.rows}, data={self.values.tolist()!r})"

    def __str__(self):
        lines = [f"{self.rows}r vector"]
        lines.extend(f"\t{item:.3f}" for item in self.values)
        return "\n".join(lines)


def multiply(first: Matrix, second: Union[Matrix, Vector]) -> Union[Matrix, Vector]:
    """
    Dense product ``first * second``.

    A Vector operand is promoted to a single-column matrix and the result
    converted back, so ``multiply(m, v)`` and ``multiply(m, v.to_matrix())``
    give the same numbers.
    """
    _require("multiply", first, Matrix, "a Matrix on the left")
    _require("multiply", second, (Matrix, Vector), "a Matrix or Vector on the right")
    if isinstance(second, Vector):
        if first.columns != second.rows:
            raise DimensionMismatch(
                f"cannot multiply {first.rows}r x {first.columns}c matrix "
                f"by {second.rows}r vector"
            )
        return multiply(first, second.to_matrix()).to_vector()

    if first.columns != second.rows:
        raise DimensionMismatch(
            f"cannot multiply {first.rows}r x {first.columns}c matrix "
            f"by {second.rows}r x {second.columns}c matrix"
        )
    left = first.grid.reshape(first.rows, first.columns)
    right = second.grid.reshape(second.rows, second.columns)
    # (i, j) = sum_k left[i, k] * right[k, j]
    output = np.dot(left, right)
    return Matrix(first.rows, second.columns, output.ravel())


def add(first: Vector, second: Vector) -> Vector:
    _require("add", first, Vector, "Vector operands")
    _require("add", second, Vector, "Vector operands")
    if first.rows != second.rows:
        raise DimensionMismatch(
            f"cannot add {first.rows}r vector and {second.rows}r vector"
        )
    return Vector(first.rows, first.values + second.values)


def _elements(item):
    if isinstance(item, Matrix):
        return item.rows, item.columns, item.grid
    return item.rows, 1, item.values


def equals(first: Union[Matrix, Vector], second: Union[Matrix, Vector]) -> bool:
    """
    Shape and element-wise equality.

    A Vector of length N equals an N x 1 Matrix holding the same values,
    in either argument order.
    """
    _require("equals", first, (Matrix, Vector), "Matrix or Vector operands")
    _require("equals", second, (Matrix, Vector), "Matrix or Vector operands")
    first_rows, first_columns, first_values = _elements(first)
    second_rows, second_columns, second_values = _elements(second)
    if (first_rows, first_columns) != (second_rows, second_columns):
        return False
    return bool(np.array_equal(first_values, second_values))
