"""Dense matrices stored row by row."""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple


class MatrixError(ValueError):
    """Raised for bad sizes, bad indices or a null scalar."""


class Matrix:
    """A ``rows x cols`` matrix, initially filled with zeros."""

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise MatrixError("invalid number of rows or columns")
        self._rows = rows
        self._cols = cols
        self._data: List[List[Any]] = [[0] * cols for _ in range(rows)]

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    def tolist(self) -> List[List[Any]]:
        """Return the contents as a list of row lists."""
        return [list(row) for row in self._data]

    def _check_row(self, row: int) -> None:
        if not 0 <= row < self._rows:
            raise MatrixError("invalid row index")

    def _check_col(self, col: int) -> None:
        if not 0 <= col < self._cols:
            raise MatrixError("invalid column index")

    @staticmethod
    def _check_scalar(scalar: Any) -> None:
        if scalar == 0:
            raise MatrixError("null scalar")

    def __getitem__(self, index: Tuple[int, int]) -> Any:
        row, col = index
        self._check_row(row)
        self._check_col(col)
        return self._data[row][col]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def copy(self) -> "Matrix":
        """Return an independent copy of the same type."""
        result = object.__new__(type(self))
        result.__dict__.update(self.__dict__)
        result._data = self.tolist()
        return result

    def set_elem(self, row: int, col: int, value: Any) -> None:
        """Store ``value`` at (``row``, ``col``)."""
        self._check_row(row)
        self._check_col(col)
        self._data[row][col] = value

    def set_row(self, row: int, values: Sequence[Any]) -> None:
        """Replace row ``row`` with ``values``, which must have ``cols`` items."""
        if len(values) != self._cols:
            raise MatrixError("wrong row length")
        self._check_row(row)
        self._data[row] = list(values)

    def set_col(self, col: int, values: Sequence[Any]) -> None:
        """Replace column ``col`` with ``values``, which must have ``rows`` items."""
        if len(values) != self._rows:
            raise MatrixError("wrong column length")
        self._check_col(col)
        for row, value in zip(self._data, values):
            row[col] = value

    @classmethod
    def _from_rows(cls, data: List[List[Any]]) -> "Matrix":
        result = Matrix(len(data), len(data[0]))
        result._data = data
        return result

    def add(self, other: "Matrix") -> "Matrix":
        """Return the element-wise sum with a matrix of the same size."""
        if other.rows != self._rows or other.cols != self._cols:
            raise MatrixError("matrices have different sizes")
        return self._from_rows(
            [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self._data, other._data)]
        )

    def scalar_mul(self, scalar: Any) -> "Matrix":
        """Return the matrix with every element multiplied by a non-zero scalar."""
        self._check_scalar(scalar)
        return self._from_rows([[v * scalar for v in row] for row in self._data])

    def transpose(self) -> "Matrix":
        """Return the transposed matrix."""
        return self._from_rows([list(col) for col in zip(*self._data)])

    def multiply(self, other: "Matrix") -> "Matrix":
        """Return the row-by-column product ``self x other``."""
        if self._cols != other.rows:
            raise MatrixError("matrix sizes do not allow the product")
        columns = list(zip(*other._data))
        return self._from_rows(
            [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in self._data]
        )

    def row_switch(self, r1: int, r2: int) -> None:
        """Exchange two rows in place."""
        if not (0 <= r1 < self._rows and 0 <= r2 < self._rows):
            raise MatrixError("invalid row indices")
        self._data[r1], self._data[r2] = self._data[r2], self._data[r1]

    def col_switch(self, c1: int, c2: int) -> None:
        """Exchange two columns in place."""
        if not (0 <= c1 < self._cols and 0 <= c2 < self._cols):
            raise MatrixError("invalid column indices")
        for row in self._data:
            row[c1], row[c2] = row[c2], row[c1]

    def mult_row(self, row: int, scalar: Any) -> None:
        """Multiply one row by a non-zero scalar in place."""
        self._check_row(row)
        self._check_scalar(scalar)
        self._data[row] = [v * scalar for v in self._data[row]]

    def mult_col(self, col: int, scalar: Any) -> None:
        """Multiply one column by a non-zero scalar in place."""
        self._check_col(col)
        self._check_scalar(scalar)
        for values in self._data:
            values[col] = values[col] * scalar

    def submatrix(self, row: int, col: int) -> "Matrix":
        """Return the matrix without row ``row`` and column ``col``.

        ``row == rows`` keeps every row and ``col == cols`` keeps every column.
        """
        if not 0 <= row <= self._rows:
            raise MatrixError("invalid row index")
        if not 0 <= col <= self._cols:
            raise MatrixError("invalid column index")
        new_rows = self._rows - 1 if row < self._rows else self._rows
        new_cols = self._cols - 1 if col < self._cols else self._cols
        if new_rows <= 0 or new_cols <= 0:
            raise MatrixError("invalid number of rows or columns")
        return self._from_rows(
            [
                [v for j, v in enumerate(values) if j != col]
                for i, values in enumerate(self._data)
                if i != row
            ]
        )

    def __str__(self) -> str:
        return "\n".join(" ".join(str(v) for v in row) for row in self._data)


class SquareMatrix(Matrix):
    """An ``n x n`` matrix."""

    def __init__(self, n: int):
        super().__init__(n, n)

    @property
    def dim(self) -> int:
        """The side length."""
        return self._cols

    def trace(self) -> Any:
        """Return the sum of the diagonal elements."""
        return sum(self._data[i][i] for i in range(self._cols))