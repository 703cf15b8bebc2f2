import pytest

from whirkit.ntt.matrix import MatrixView


def make_example(rows, cols):
    return [(i, j) for i in range(rows) for j in range(cols)]


def test_from_list_indexing():
    data = make_example(3, 5)
    m = MatrixView.from_list(data, 3, 5)
    assert (m.rows, m.cols) == (3, 5)
    assert all(m[(i, j)] == (i, j) for i in range(3) for j in range(5))


def test_from_list_wrong_length():
    with pytest.raises(ValueError):
        MatrixView.from_list([0] * 5, 2, 3)


def test_is_square():
    assert MatrixView.from_list(make_example(4, 4), 4, 4).is_square()
    assert not MatrixView.from_list(make_example(2, 4), 2, 4).is_square()


def test_row():
    m = MatrixView.from_list(make_example(3, 4), 3, 4)
    assert m.row(2) == [(2, j) for j in range(4)]
    with pytest.raises(IndexError):
        m.row(3)


def test_split_vertical():
    m = MatrixView.from_list(make_example(4, 3), 4, 3)
    top, bottom = m.split_vertical(1)
    assert (top.rows, bottom.rows) == (1, 3)
    assert top[(0, 2)] == (0, 2)
    assert bottom[(0, 0)] == (1, 0)
    assert bottom[(2, 1)] == (3, 1)


def test_split_horizontal():
    m = MatrixView.from_list(make_example(2, 6), 2, 6)
    left, right = m.split_horizontal(4)
    assert (left.cols, right.cols) == (4, 2)
    assert right[(1, 0)] == (1, 4)
    assert left[(1, 3)] == (1, 3)
    with pytest.raises(IndexError):
        left.__getitem__((0, 4))


def test_split_quadrants():
    m = MatrixView.from_list(make_example(4, 4), 4, 4)
    a, b, c, d = m.split_quadrants(2, 2)
    assert a[(1, 1)] == (1, 1)
    assert b[(0, 0)] == (0, 2)
    assert c[(0, 1)] == (2, 1)
    assert d[(1, 1)] == (3, 3)


def test_split_out_of_range():
    m = MatrixView.from_list(make_example(2, 2), 2, 2)
    with pytest.raises(ValueError):
        m.split_vertical(3)
    with pytest.raises(ValueError):
        m.split_horizontal(3)


def test_writes_go_to_underlying_list():
    data = make_example(4, 4)
    m = MatrixView.from_list(data, 4, 4)
    _, _, _, d = m.split_quadrants(2, 2)
    d[(0, 0)] = "x"
    assert data[m.row_stride * 2 + 2] == "x"
    assert m[(2, 2)] == "x"


def test_swap():
    data = make_example(3, 3)
    m = MatrixView.from_list(data, 3, 3)
    m.swap((0, 1), (1, 0))
    assert m[(0, 1)] == (1, 0)
    assert m[(1, 0)] == (0, 1)
    m.swap((2, 2), (2, 2))
    assert m[(2, 2)] == (2, 2)


def test_swap_out_of_bounds():
    m = MatrixView.from_list(make_example(2, 2), 2, 2)
    with pytest.raises(IndexError):
        m.swap((0, 0), (2, 0))


def test_index_out_of_bounds():
    data = make_example(2, 3)
    m = MatrixView.from_list(data, 2, 3)
    with pytest.raises(IndexError):
        m.__getitem__((2, 0))
    with pytest.raises(IndexError):
        m[(0, 3)] = 1
    assert data == make_example(2, 3)
    assert m[(1, 2)] == (1, 2)