"""A strided view into a flat list, viewed as a matrix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class MatrixView:
    """`rows` rows of `cols` entries each, spaced `row_stride` apart in `data`."""

    data: list
    rows: int
    cols: int
    row_stride: int
    offset: int = 0

    @classmethod
    def from_list(cls, data: list, rows: int, cols: int) -> "MatrixView":
        """View `data` as `rows` consecutive rows of `cols` entries."""
        if len(data) != rows * cols:
            raise ValueError(
                f"list of length {len(data)} cannot hold a {rows}x{cols} matrix"
            )
        return cls(data, rows, cols, cols)

    def is_square(self) -> bool:
        """True when the view has as many rows as columns."""
        return self.rows == self.cols

    def _position(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"({row}, {col}) outside {self.rows}x{self.cols} matrix")
        return self.offset + row * self.row_stride + col

    def row(self, index: int) -> list:
        """Return a copy of the given row."""
        if not 0 <= index < self.rows:
            raise IndexError(f"row {index} outside matrix with {self.rows} rows")
        start = self.offset + index * self.row_stride
        return self.data[start : start + self.cols]

    def split_vertical(self, row: int) -> tuple["MatrixView", "MatrixView"]:
        """Split into the first `row` rows and the rest."""
        if not 0 <= row <= self.rows:
            raise ValueError(f"cannot split {self.rows} rows at {row}")
        upper = MatrixView(self.data, row, self.cols, self.row_stride, self.offset)
        lower = MatrixView(
            self.data,
            self.rows - row,
            self.cols,
            self.row_stride,
            self.offset + row * self.row_stride,
        )
        return upper, lower

    def split_horizontal(self, col: int) -> tuple["MatrixView", "MatrixView"]:
        """Split into the first `col` columns and the rest."""
        if not 0 <= col <= self.cols:
            raise ValueError(f"cannot split {self.cols} columns at {col}")
        left = MatrixView(self.data, self.rows, col, self.row_stride, self.offset)
        right = MatrixView(
            self.data, self.rows, self.cols - col, self.row_stride, self.offset + col
        )
        return left, right

    def split_quadrants(
        self, row: int, col: int
    ) -> tuple["MatrixView", "MatrixView", "MatrixView", "MatrixView"]:
        """Split into [A B; C D] where A is `row` x `col`."""
        upper, lower = self.split_vertical(row)
        a, b = upper.split_horizontal(col)
        c, d = lower.split_horizontal(col)
        return a, b, c, d

    def swap(self, a: tuple[int, int], b: tuple[int, int]) -> None:
        """Exchange the entries at positions `a` and `b`."""
        if a == b:
            return
        pa = self._position(*a)
        pb = self._position(*b)
        self.data[pa], self.data[pb] = self.data[pb], self.data[pa]

    def __getitem__(self, key: tuple[int, int]) -> Any:
        row, col = key
        return self.data[self._position(row, col)]

    def __setitem__(self, key: tuple[int, int], value: Any) -> None:
        row, col = key
        self.data[self._position(row, col)] = value