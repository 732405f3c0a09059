"""Small data structures: a stack on a queue, 2-D range sums, nested flattening."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterable, Iterator, List, Sequence


class QueueStack:
    """A last-in, first-out stack kept in a single queue with the top at its front."""

    def __init__(self) -> None:
        self._queue: deque = deque()

    def push(self, x: Any) -> None:
        """Put ``x`` on top of the stack."""
        self._queue.append(x)
        self._queue.rotate(1)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._queue:
            raise IndexError("pop from an empty stack")
        return self._queue.popleft()

    def top(self) -> Any:
        """Return the top element without removing it."""
        if not self._queue:
            raise IndexError("top of an empty stack")
        return self._queue[0]

    def __len__(self) -> int:
        return len(self._queue)


class NumMatrix:
    """Answers sums over rectangular regions of a fixed matrix in constant time."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        rows = [list(row) for row in matrix]
        if not rows:
            raise ValueError("matrix must have at least one row")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("matrix rows must all have the same length")
        self._rows = len(rows)
        self._cols = width
        self._sums: List[List[int]] = [[0] * (width + 1)]
        for row in rows:
            above = self._sums[-1]
            line = [0]
            running = 0
            for column, value in enumerate(row, start=1):
                running += value
                line.append(above[column] + running)
            self._sums.append(line)

    def sum_region(self, row1: int, col1: int, row2: int, col2: int) -> int:
        """Sum of the cells from (row1, col1) to (row2, col2), both inclusive."""
        if not (0 <= row1 <= row2 < self._rows and 0 <= col1 <= col2 < self._cols):
            raise IndexError("region lies outside the matrix")
        sums = self._sums
        return (
            sums[row2 + 1][col2 + 1]
            - sums[row2 + 1][col1]
            - sums[row1][col2 + 1]
            + sums[row1][col1]
        )


def _flatten(items: Iterable[Any]) -> Iterator[Any]:
    for item in items:
        if isinstance(item, (list, tuple)):
            yield from _flatten(item)
        else:
            yield item


class NestedIterator:
    """Iterates over the integers of an arbitrarily nested list, depth first."""

    def __init__(self, nested_list: Iterable[Any]) -> None:
        self._values = list(_flatten(nested_list))
        self._position = 0

    def __iter__(self) -> "NestedIterator":
        return self

    def __next__(self) -> Any:
        if self._position >= len(self._values):
            raise StopIteration
        value = self._values[self._position]
        self._position += 1
        return value

    def has_next(self) -> bool:
        """Tell whether another value remains."""
        return self._position < len(self._values)