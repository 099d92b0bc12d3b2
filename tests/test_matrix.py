import pytest

from drillbox.matrix import format_adjacency, rotate_clockwise, spiral_order


def test_rotate_square():
    assert rotate_clockwise([[1, 2], [3, 4]]) == [[3, 1], [4, 2]]


def test_rotate_single_row():
    assert rotate_clockwise([[1, 2, 3]]) == [[1], [2], [3]]


def test_rotate_swaps_dimensions():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8]]
    rotated = rotate_clockwise(matrix)
    assert len(rotated) == 4
    assert all(len(row) == 2 for row in rotated)


def test_rotate_four_times_is_identity():
    matrix = [[1, 2, 3], [4, 5, 6]]
    result = matrix
    for _ in range(4):
        result = rotate_clockwise(result)
    assert result == matrix


def test_rotate_twice_is_half_turn():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9], [10, 11, 12]]
    twice = rotate_clockwise(rotate_clockwise(matrix))
    assert twice == [row[::-1] for row in matrix[::-1]]


def test_rotate_does_not_modify_input():
    matrix = [[1, 2], [3, 4]]
    rotate_clockwise(matrix)
    assert matrix == [[1, 2], [3, 4]]


@pytest.mark.parametrize(
    "matrix",
    [
        [],
        [[]],
        [[1] * 11],
        [[1]] * 11,
        [[1, 2], [3]],
    ],
)
def test_rotate_rejects_bad_shapes(matrix):
    with pytest.raises(ValueError):
        rotate_clockwise(matrix)


def test_spiral_three_by_three():
    assert spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_spiral_visits_every_element_once():
    matrix = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]
    result = spiral_order(matrix)
    assert sorted(result) == sorted(v for row in matrix for v in row)
    assert result[:4] == matrix[0]


def test_spiral_single_row_and_column():
    assert spiral_order([[7, 8, 9]]) == [7, 8, 9]
    assert spiral_order([[7], [8], [9]]) == [7, 8, 9]


def test_spiral_empty():
    assert spiral_order([]) == []


def test_spiral_ragged():
    with pytest.raises(ValueError):
        spiral_order([[1, 2], [3]])


def test_format_adjacency_layout():
    text = format_adjacency("AB", [[0, 1], [1, 0]])
    lines = text.splitlines()
    assert len(lines) == 3
    assert lines[0].split("\t") == ["Nodes", "A", "B", ""]
    assert lines[1].split("\t") == ["A", "0", "1", ""]
    assert lines[2].split("\t") == ["B", "1", "0", ""]
    assert text.endswith("\n")


def test_format_adjacency_names_list():
    text = format_adjacency(["x", "y", "z"], [[0, 1, 0], [0, 0, 1], [1, 0, 0]])
    rows = [line.split("\t")[0] for line in text.splitlines()[1:]]
    assert rows == ["x", "y", "z"]


def test_format_adjacency_mismatch():
    with pytest.raises(ValueError):
        format_adjacency("ABC", [[0, 1], [1, 0]])


def test_format_adjacency_not_square():
    with pytest.raises(ValueError):
        format_adjacency("AB", [[0, 1, 1], [1, 0, 1]])