"""In-place and out-of-place matrix transposition over flat lists.

The recursive algorithms split along the longest axis (or into quadrants)
until a block fits a single workload, which keeps them cache-oblivious.
Square transposition assumes power-of-two sizes, since it recurses into
square quadrants of half the dimension.
"""

from __future__ import annotations

from whirkit.ntt.matrix import MatrixView
from whirkit.ntt.utils import is_power_of_two, workload_size

# Nominal size in bytes of one stored element; fixes the recursion cut-off.
_ITEM_SIZE = 32
_WORKLOAD = workload_size(_ITEM_SIZE)


def transpose(matrix: list, rows: int, cols: int) -> None:
    """Transpose `matrix` in place, viewed as `rows` x `cols`.

    If the list holds several such matrices back to back, each one is
    transposed. Both dimensions must be powers of two.
    """
    size = rows * cols
    if size == 0 or len(matrix) % size:
        raise ValueError(
            f"list of length {len(matrix)} is not a whole number of {rows}x{cols} matrices"
        )
    if not (is_power_of_two(rows) and is_power_of_two(cols)):
        raise ValueError(f"dimensions {rows}x{cols} must be powers of two")
    if rows == cols:
        for start in range(0, len(matrix), size):
            transpose_square(MatrixView(matrix, rows, cols, cols, start))
    else:
        for start in range(0, len(matrix), size):
            scratch = matrix[start : start + size]
            src = MatrixView.from_list(scratch, rows, cols)
            dst = MatrixView(matrix, cols, rows, rows, start)
            transpose_copy(src, dst)


def transpose_copy(src: MatrixView, dst: MatrixView) -> None:
    """Set `dst` to the transpose of `src`; their shapes must be compatible."""
    if src.rows != dst.cols or src.cols != dst.rows:
        raise ValueError(
            f"cannot copy the transpose of a {src.rows}x{src.cols} matrix "
            f"into a {dst.rows}x{dst.cols} matrix"
        )
    _transpose_copy(src, dst)


def _transpose_copy(src: MatrixView, dst: MatrixView) -> None:
    if src.rows * src.cols > _WORKLOAD:
        if src.rows > src.cols:
            n = src.rows // 2
            a, b = src.split_vertical(n)
            x, y = dst.split_horizontal(n)
        else:
            n = src.cols // 2
            a, b = src.split_horizontal(n)
            x, y = dst.split_vertical(n)
        _transpose_copy(a, x)
        _transpose_copy(b, y)
    else:
        for i in range(src.rows):
            for j, value in enumerate(src.row(i)):
                dst[j, i] = value


def transpose_square(m: MatrixView) -> None:
    """Transpose a square matrix in place; its size must be a power of two."""
    if not m.is_square():
        raise ValueError(f"matrix {m.rows}x{m.cols} is not square")
    if not is_power_of_two(m.rows):
        raise ValueError(f"size {m.rows} is not a power of two")
    _transpose_square(m)


def _transpose_square(m: MatrixView) -> None:
    size = m.rows
    if size * size > _WORKLOAD:
        n = size // 2
        a, b, c, d = m.split_quadrants(n, n)
        _transpose_square(a)
        _transpose_square(d)
        _transpose_square_swap(b, c)
    else:
        for i in range(size):
            for j in range(i + 1, size):
                m.swap((i, j), (j, i))


def transpose_square_swap(a: MatrixView, b: MatrixView) -> None:
    """Replace `a` by the transpose of `b` and `b` by the transpose of `a`.

    Both must be square of the same power-of-two size.
    """
    if not a.is_square():
        raise ValueError(f"matrix {a.rows}x{a.cols} is not square")
    if a.rows != b.cols or a.cols != b.rows:
        raise ValueError(
            f"matrices {a.rows}x{a.cols} and {b.rows}x{b.cols} have incompatible shapes"
        )
    if not is_power_of_two(a.rows):
        raise ValueError(f"size {a.rows} is not a power of two")
    _transpose_square_swap(a, b)


def _transpose_square_swap(a: MatrixView, b: MatrixView) -> None:
    size = a.rows
    if 2 * size * size > _WORKLOAD:
        n = size // 2
        aa, ab, ac, ad = a.split_quadrants(n, n)
        ba, bb, bc, bd = b.split_quadrants(n, n)
        _transpose_square_swap(aa, ba)
        _transpose_square_swap(ab, bc)
        _transpose_square_swap(ac, bb)
        _transpose_square_swap(ad, bd)
    else:
        for i in range(size):
            for j in range(size):
                a[i, j], b[j, i] = b[j, i], a[i, j]