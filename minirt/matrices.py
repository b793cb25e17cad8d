"""Square matrices with determinant, inverse and tuple transformation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

from .tuples import Tuple

SIZE = 4


class NonInvertibleMatrixError(ArithmeticError):
    """Raised when a matrix with a zero determinant is inverted."""


@dataclass(frozen=True)
class Matrix:
    """An immutable square matrix stored as rows."""

    rows: Sequence[Sequence[float]]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.rows)
        if not rows or any(len(row) != len(rows) for row in rows):
            raise ValueError("matrix must be square and non-empty")
        object.__setattr__(self, "rows", rows)

    @property
    def size(self) -> int:
        return len(self.rows)

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, column = key
        return self.rows[row][column]

    def multiply(self, other: Matrix) -> Matrix:
        """Matrix product self x other."""
        if self.size != other.size:
            raise ValueError("matrices must have the same size")
        columns = list(zip(*other.rows))
        return Matrix(
            [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in self.rows]
        )

    def apply(self, t: Tuple) -> Tuple:
        """Transform a tuple by this 4x4 matrix."""
        if self.size != SIZE:
            raise ValueError("only 4x4 matrices transform tuples")
        return Tuple(*(sum(a * b for a, b in zip(row, t)) for row in self.rows))

    def __matmul__(self, other: object) -> Union[Matrix, Tuple]:
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, Tuple):
            return self.apply(other)
        return NotImplemented

    def transpose(self) -> Matrix:
        return Matrix(list(zip(*self.rows)))

    def submatrix(self, row: int, column: int) -> Matrix:
        """The matrix with the given row and column removed."""
        if self.size < 2:
            raise ValueError("a 1x1 matrix has no submatrix")
        return Matrix(
            [
                [v for c, v in enumerate(r) if c != column]
                for i, r in enumerate(self.rows)
                if i != row
            ]
        )

    def minor(self, row: int, column: int) -> float:
        return self.submatrix(row, column).determinant()

    def cofactor(self, row: int, column: int) -> float:
        value = self.minor(row, column)
        return -value if (row + column) % 2 else value

    def determinant(self) -> float:
        """Determinant by cofactor expansion along the first row."""
        if self.size == 1:
            return self.rows[0][0]
        if self.size == 2:
            (a, b), (c, d) = self.rows
            return a * d - b * c
        return sum(v * self.cofactor(0, c) for c, v in enumerate(self.rows[0]))

    def inverse(self) -> Matrix:
        """Inverse via the adjugate; raises if the determinant is zero."""
        det = self.determinant()
        if det == 0.0:
            raise NonInvertibleMatrixError("matrix is not invertible")
        n = self.size
        return Matrix(
            [[self.cofactor(c, r) / det for c in range(n)] for r in range(n)]
        )

    def describe(self) -> str:
        """Multi-line human-readable rendering of the entries."""
        return "\n".join(
            "".join(f" | m[{r}][{c}] : {v:6.3f}" for c, v in enumerate(row))
            for r, row in enumerate(self.rows)
        )


def zeros() -> Matrix:
    """The 4x4 zero matrix."""
    return Matrix([[0.0] * SIZE for _ in range(SIZE)])


def identity() -> Matrix:
    """The 4x4 identity matrix."""
    return Matrix([[1.0 if r == c else 0.0 for c in range(SIZE)] for r in range(SIZE)])