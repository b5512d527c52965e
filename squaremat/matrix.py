"""Square matrices of floats with arithmetic, transpose and determinant."""

from __future__ import annotations

import operator
from numbers import Integral, Real
from typing import Iterator


class _Row:
    """A bounds-checked view of one matrix row."""

    __slots__ = ("_values",)

    def __init__(self, values: list[float]) -> None:
        self._values = values

    def _check(self, col: int) -> int:
        col = operator.index(col)
        if not 0 <= col < len(self._values):
            raise IndexError("Column index out of range")
        return col

    def __getitem__(self, col: int) -> float:
        return self._values[self._check(col)]

    def __setitem__(self, col: int, value: float) -> None:
        self._values[self._check(col)] = float(value)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"_Row({self._values!r})"


def _modulo(a: float, b: int) -> float:
    """Remainder of a by b, non-negative when b is positive."""
    q = int(a / b)
    if a < 0 and a != b * q:
        q -= 1
    return a - b * q


def _determinant(rows: list[list[float]]) -> float:
    n = len(rows)
    if n == 1:
        return rows[0][0]
    if n == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    det = 0.0
    sign = 1
    for j, pivot in enumerate(rows[0]):
        minor = [row[:j] + row[j + 1:] for row in rows[1:]]
        det += sign * pivot * _determinant(minor)
        sign = -sign
    return det


class SquareMat:
    """An n x n matrix of floats, initialised to zeros.

    Comparison operators compare the sums of all elements.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, size: int) -> None:
        size = operator.index(size)
        if size <= 0:
            raise ValueError("Matrix size must be positive")
        self._rows: list[list[float]] = [[0.0] * size for _ in range(size)]

    @classmethod
    def _from_rows(cls, rows: list[list[float]]) -> SquareMat:
        result = cls.__new__(cls)
        result._rows = rows
        return result

    @staticmethod
    def identity(size: int) -> SquareMat:
        """Return the identity matrix of the given size."""
        result = SquareMat(size)
        for i, row in enumerate(result._rows):
            row[i] = 1.0
        return result

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return len(self._rows)

    def copy(self) -> SquareMat:
        """Return an independent copy."""
        return SquareMat._from_rows([list(row) for row in self._rows])

    def total(self) -> float:
        """Sum of all elements."""
        result = 0.0
        for row in self._rows:
            for value in row:
                result += value
        return result

    def __getitem__(self, row: int) -> _Row:
        row = operator.index(row)
        if not 0 <= row < self.size:
            raise IndexError("Row index out of range")
        return _Row(self._rows[row])

    # Helpers

    def _require_same_size(self, other: SquareMat, what: str) -> None:
        if self.size != other.size:
            raise ValueError(f"Matrix sizes do not match for {what}")

    def _map(self, func) -> SquareMat:
        return SquareMat._from_rows([[func(v) for v in row] for row in self._rows])

    def _zip(self, other: SquareMat, func) -> SquareMat:
        return SquareMat._from_rows(
            [[func(a, b) for a, b in zip(r1, r2)] for r1, r2 in zip(self._rows, other._rows)]
        )

    def _matmul(self, other: SquareMat) -> list[list[float]]:
        columns = list(zip(*other._rows))
        result = []
        for row in self._rows:
            new_row = []
            for col in columns:
                acc = 0.0
                for a, b in zip(row, col):
                    acc += a * b
                new_row.append(acc)
            result.append(new_row)
        return result

    @staticmethod
    def _check_modulus(scalar: int) -> int:
        if scalar <= 0:
            raise ValueError("Cannot perform modulo by zero or negative number")
        return int(scalar)

    # Arithmetic

    def __add__(self, other: SquareMat) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._require_same_size(other, "addition")
        return self._zip(other, operator.add)

    def __sub__(self, other: SquareMat) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._require_same_size(other, "subtraction")
        return self._zip(other, operator.sub)

    def __neg__(self) -> SquareMat:
        return self._map(operator.neg)

    def __mul__(self, other):
        if isinstance(other, SquareMat):
            self._require_same_size(other, "multiplication")
            return SquareMat._from_rows(self._matmul(other))
        if isinstance(other, Real):
            scalar = float(other)
            return self._map(lambda v: v * scalar)
        return NotImplemented

    def __rmul__(self, scalar):
        if isinstance(scalar, Real):
            return self * scalar
        return NotImplemented

    def __mod__(self, other):
        if isinstance(other, SquareMat):
            self._require_same_size(other, "element-wise multiplication")
            return self._zip(other, operator.mul)
        if isinstance(other, Integral):
            modulus = self._check_modulus(other)
            return self._map(lambda v: _modulo(v, modulus))
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ValueError("Cannot divide by zero")
        divisor = float(scalar)
        return self._map(lambda v: v / divisor)

    def __pow__(self, power):
        if not isinstance(power, Integral):
            return NotImplemented
        if power < 0:
            raise ValueError("Negative powers are not supported (inverse not implemented)")
        if power == 0:
            return SquareMat.identity(self.size)
        result = self.copy()
        for _ in range(power - 1):
            result *= self
        return result

    # In-place arithmetic

    def __iadd__(self, other: SquareMat) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._require_same_size(other, "+=")
        for row, other_row in zip(self._rows, other._rows):
            row[:] = [a + b for a, b in zip(row, other_row)]
        return self

    def __isub__(self, other: SquareMat) -> SquareMat:
        if not isinstance(other, SquareMat):
            return NotImplemented
        self._require_same_size(other, "-=")
        for row, other_row in zip(self._rows, other._rows):
            row[:] = [a - b for a, b in zip(row, other_row)]
        return self

    def __imul__(self, other):
        if isinstance(other, SquareMat):
            self._require_same_size(other, "*=")
            product = self._matmul(other)
            for row, new_row in zip(self._rows, product):
                row[:] = new_row
            return self
        if isinstance(other, Real):
            scalar = float(other)
            for row in self._rows:
                row[:] = [v * scalar for v in row]
            return self
        return NotImplemented

    def __imod__(self, other):
        if isinstance(other, SquareMat):
            self._require_same_size(other, "%=")
            for row, other_row in zip(self._rows, other._rows):
                row[:] = [a * b for a, b in zip(row, other_row)]
            return self
        if isinstance(other, Integral):
            modulus = self._check_modulus(other)
            for row in self._rows:
                row[:] = [_modulo(v, modulus) for v in row]
            return self
        return NotImplemented

    def __itruediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        if scalar == 0:
            raise ValueError("Cannot divide by zero")
        divisor = float(scalar)
        for row in self._rows:
            row[:] = [v / divisor for v in row]
        return self

    # Increment and decrement

    def increment(self) -> SquareMat:
        """Add 1 to every element in place and return this matrix."""
        for row in self._rows:
            row[:] = [v + 1.0 for v in row]
        return self

    def decrement(self) -> SquareMat:
        """Subtract 1 from every element in place and return this matrix."""
        for row in self._rows:
            row[:] = [v - 1.0 for v in row]
        return self

    def post_increment(self) -> SquareMat:
        """Add 1 to every element in place and return a copy from before."""
        before = self.copy()
        self.increment()
        return before

    def post_decrement(self) -> SquareMat:
        """Subtract 1 from every element in place and return a copy from before."""
        before = self.copy()
        self.decrement()
        return before

    # Matrix operations

    def transpose(self) -> SquareMat:
        """Return the transposed matrix."""
        return SquareMat._from_rows([list(col) for col in zip(*self._rows)])

    def __invert__(self) -> SquareMat:
        return self.transpose()

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        return _determinant(self._rows)

    # Comparisons by element sum

    def __eq__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() == other.total()

    def __ne__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() != other.total()

    def __lt__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() < other.total()

    def __gt__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() > other.total()

    def __le__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() <= other.total()

    def __ge__(self, other):
        if not isinstance(other, SquareMat):
            return NotImplemented
        return self.total() >= other.total()

    # Output

    def __str__(self) -> str:
        lines = []
        for row in self._rows:
            cells = "".join(f"{v:g} " for v in row)
            lines.append(f"|  {cells} |\n")
        return "".join(lines)

    def __repr__(self) -> str:
        return f"SquareMat.from_rows({self._rows!r})"