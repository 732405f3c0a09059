import pytest

from algosuite.structures import NestedIterator, NumMatrix, QueueStack

MATRIX = [
    [3, 0, 1, 4, 2],
    [5, 6, 3, 2, 1],
    [1, 2, 0, 1, 5],
    [4, 1, 0, 1, 7],
    [1, 0, 3, 0, 5],
]


def test_queue_stack_is_lifo():
    stack = QueueStack()
    items = [1, 2, 3]
    for item in items:
        stack.push(item)
    assert len(stack) == len(items)
    assert stack.top() == items[-1]
    assert [stack.pop() for _ in items] == items[::-1]
    assert len(stack) == 0


def test_queue_stack_interleaved():
    stack = QueueStack()
    stack.push("a")
    stack.push("b")
    assert stack.pop() == "b"
    stack.push("c")
    assert stack.top() == "c"
    assert stack.pop() == "c"
    assert stack.pop() == "a"


def test_queue_stack_empty_errors():
    stack = QueueStack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.top()


def test_num_matrix_example():
    matrix = NumMatrix(MATRIX)
    assert matrix.sum_region(2, 1, 4, 3) == 8


def test_num_matrix_whole_and_cells():
    matrix = NumMatrix(MATRIX)
    assert matrix.sum_region(0, 0, 4, 4) == sum(map(sum, MATRIX))
    for r, row in enumerate(MATRIX):
        for c, value in enumerate(row):
            assert matrix.sum_region(r, c, r, c) == value


def test_num_matrix_rows_add_up():
    matrix = NumMatrix(MATRIX)
    top = matrix.sum_region(0, 1, 1, 3)
    bottom = matrix.sum_region(2, 1, 4, 3)
    assert matrix.sum_region(0, 1, 4, 3) == top + bottom


@pytest.mark.parametrize("region", [(0, 0, 5, 0), (-1, 0, 2, 2), (3, 0, 2, 2), (0, 0, 0, 5)])
def test_num_matrix_bad_region(region):
    with pytest.raises(IndexError):
        NumMatrix(MATRIX).sum_region(*region)


def test_num_matrix_rejects_bad_shapes():
    with pytest.raises(ValueError):
        NumMatrix([])
    with pytest.raises(ValueError):
        NumMatrix([[1, 2], [3]])


def test_nested_iterator_flattens():
    assert list(NestedIterator([[1, 1], 2, [1, 1]])) == [1, 1, 2, 1, 1]
    assert list(NestedIterator([1, [4, [6]]])) == [1, 4, 6]


def test_nested_iterator_has_next_and_exhaustion():
    iterator = NestedIterator([[], [7]])
    assert iterator.has_next()
    assert next(iterator) == 7
    assert not iterator.has_next()
    with pytest.raises(StopIteration):
        next(iterator)


def test_nested_iterator_empty():
    iterator = NestedIterator([[], [[]]])
    assert not iterator.has_next()
    assert list(iterator) == []