import math

import pytest

from algobox.linalg import determinant

MATRICES = [
    [[2, -1, 0], [1, 3, 4], [0, 5, -2]],
    [[1, 2, 3, 4], [0, -1, 2, 7], [3, 0, 1, 1], [2, 2, -3, 5]],
    [[4, 7], [2, 6]],
]


def test_identity():
    for size in range(1, 6):
        identity = [[int(i == j) for j in range(size)] for i in range(size)]
        assert determinant(identity) == 1


def test_single_element():
    assert determinant([[-17]]) == -17


def test_triangular_is_product_of_diagonal():
    matrix = [[3, 5, -2, 8], [0, -4, 1, 6], [0, 0, 7, 2], [0, 0, 0, 2]]
    assert determinant(matrix) == math.prod(matrix[i][i] for i in range(4))


@pytest.mark.parametrize("matrix", MATRICES)
def test_transpose_keeps_determinant(matrix):
    transposed = [list(column) for column in zip(*matrix)]
    assert determinant(transposed) == determinant(matrix)


@pytest.mark.parametrize("matrix", MATRICES)
def test_row_swap_negates(matrix):
    swapped = [matrix[1], matrix[0], *matrix[2:]]
    assert determinant(swapped) == -determinant(matrix)


@pytest.mark.parametrize("matrix", MATRICES)
def test_row_scaling(matrix):
    scaled = [[3 * value for value in matrix[0]], *matrix[1:]]
    assert determinant(scaled) == 3 * determinant(matrix)


def test_repeated_row_is_singular():
    assert determinant([[1, 2, 3], [4, 5, 6], [1, 2, 3]]) == 0


def test_non_square_raises():
    with pytest.raises(ValueError):
        determinant([[1, 2, 3], [4, 5, 6]])


def test_empty_raises():
    with pytest.raises(ValueError):
        determinant([])