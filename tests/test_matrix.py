import pytest

from algokit.matrix import Matrix, MatrixError, SquareMatrix

ROWS = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]


def from_rows(rows, cls=Matrix):
    if cls is SquareMatrix:
        m = SquareMatrix(len(rows))
    else:
        m = Matrix(len(rows), len(rows[0]))
    for i, row in enumerate(rows):
        m.set_row(i, row)
    return m


def test_new_matrix_is_zero():
    m = Matrix(2, 3)
    assert m.tolist() == [[0, 0, 0], [0, 0, 0]]
    assert (m.rows, m.cols) == (2, 3)


def test_invalid_dimensions():
    with pytest.raises(MatrixError):
        Matrix(0, 3)
    with pytest.raises(MatrixError):
        Matrix(2, -1)
    with pytest.raises(MatrixError):
        SquareMatrix(0)


def test_set_row_and_str():
    m = from_rows(ROWS)
    assert m.tolist() == ROWS
    assert str(m) == "1 2 3\n4 5 6\n7 8 9"


def test_set_elem_and_getitem():
    m = Matrix(2, 2)
    m.set_elem(1, 0, 42)
    assert m[1, 0] == 42
    with pytest.raises(MatrixError):
        m.set_elem(2, 0, 1)
    with pytest.raises(MatrixError):
        m.set_elem(0, 2, 1)
    with pytest.raises(MatrixError):
        m[0, 5]


def test_set_row_wrong_length():
    m = Matrix(2, 3)
    with pytest.raises(MatrixError):
        m.set_row(0, [1, 2])
    with pytest.raises(MatrixError):
        m.set_row(0, [1, 2, 3, 4])


def test_set_col():
    m = Matrix(3, 2)
    m.set_col(1, [7, 8, 9])
    assert [m[i, 1] for i in range(3)] == [7, 8, 9]
    with pytest.raises(MatrixError):
        m.set_col(0, [1, 2])


def test_copy_is_independent():
    m = from_rows(ROWS)
    c = m.copy()
    c.set_elem(0, 0, 100)
    assert m[0, 0] == 1
    assert c[0, 0] == 100


def test_add_commutes_and_checks_size():
    a = from_rows(ROWS)
    b = a.transpose()
    assert a.add(b) == b.add(a)
    assert a.add(b)[0, 1] == a[0, 1] + b[0, 1]
    with pytest.raises(MatrixError):
        a.add(Matrix(2, 3))


def test_scalar_mul():
    a = from_rows([[1, 2], [3, 4], [5, 6]])
    assert a.scalar_mul(1) == a
    doubled = a.scalar_mul(2)
    assert doubled == a.add(a)
    with pytest.raises(MatrixError):
        a.scalar_mul(0)


def test_transpose():
    a = from_rows([[1, 2, 3], [4, 5, 6]])
    t = a.transpose()
    assert (t.rows, t.cols) == (3, 2)
    assert t.tolist() == [[1, 4], [2, 5], [3, 6]]
    assert t.transpose() == a


def test_multiply():
    a = from_rows([[1, 2], [3, 4]])
    assert a.multiply(a).tolist() == [[7, 10], [15, 22]]
    identity = from_rows([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
    b = from_rows(ROWS)
    assert b.multiply(identity) == b
    assert identity.multiply(b) == b
    with pytest.raises(MatrixError):
        a.multiply(b)


def test_row_and_col_switch():
    m = from_rows(ROWS)
    m.row_switch(0, 2)
    assert m.tolist() == [ROWS[2], ROWS[1], ROWS[0]]
    m.row_switch(0, 2)
    assert m.tolist() == ROWS
    m.col_switch(0, 1)
    assert m.tolist() == [[2, 1, 3], [5, 4, 6], [8, 7, 9]]
    with pytest.raises(MatrixError):
        m.row_switch(0, 3)
    with pytest.raises(MatrixError):
        m.col_switch(-1, 0)


def test_mult_row_and_col():
    m = from_rows(ROWS)
    m.mult_row(1, 10)
    assert m.tolist()[1] == [40, 50, 60]
    m.mult_col(0, -1)
    assert [m[i, 0] for i in range(3)] == [-1, -40, -7]
    with pytest.raises(MatrixError):
        m.mult_row(1, 0)
    with pytest.raises(MatrixError):
        m.mult_col(3, 2)


def test_submatrix():
    m = from_rows(ROWS)
    assert m.submatrix(1, 1).tolist() == [[1, 3], [7, 9]]
    assert m.submatrix(3, 3) == m
    only_row = m.submatrix(0, 3)
    assert only_row.tolist() == ROWS[1:]
    with pytest.raises(MatrixError):
        m.submatrix(4, 0)
    with pytest.raises(MatrixError):
        m.submatrix(0, -1)


def test_square_matrix_trace():
    sm = from_rows([[1, 2, 3]] * 3, SquareMatrix)
    assert sm.dim == 3
    assert sm.trace() == 6


def test_trace_invariant_under_transpose():
    sm = from_rows(ROWS, SquareMatrix)
    t = sm.transpose()
    assert sum(t[i, i] for i in range(3)) == sm.trace()


def test_square_copy_keeps_type():
    sm = from_rows(ROWS, SquareMatrix)
    c = sm.copy()
    assert isinstance(c, SquareMatrix)
    assert c.trace() == sm.trace()