"""Exhaustive search: partitions, combinations, permutations, subsets and queens."""

from __future__ import annotations

from itertools import accumulate, combinations, product
from typing import Hashable, Iterator, List, Sequence

_KEYPAD = {
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def palindrome_partitions(s: str) -> List[List[str]]:
    """Every way to cut ``s`` into pieces that are all palindromes."""
    result: List[List[str]] = []
    path: List[str] = []

    def explore(start: int) -> None:
        if start == len(s):
            result.append(list(path))
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if piece == piece[::-1]:
                path.append(piece)
                explore(end)
                path.pop()

    explore(0)
    return result


def letter_combinations(digits: str) -> List[str]:
    """All letter strings a phone keypad can spell for ``digits`` (2-9)."""
    for digit in digits:
        if digit not in _KEYPAD:
            raise ValueError(f"digit {digit!r} has no letters")
    if not digits:
        return []
    return ["".join(letters) for letters in product(*(_KEYPAD[d] for d in digits))]


def combination_sum3(k: int, n: int) -> List[List[int]]:
    """All sets of ``k`` distinct numbers from 1 to 9 that add up to ``n``."""
    if k < 0:
        return []
    return [list(combo) for combo in combinations(range(1, 10), k) if sum(combo) == n]


def generate_parentheses(n: int) -> List[str]:
    """All well-formed strings of ``n`` pairs of parentheses."""
    if n < 0:
        raise ValueError("n must not be negative")

    def build(prefix: str, opening: int, closing: int) -> Iterator[str]:
        if opening == 0 and closing == 0:
            yield prefix
            return
        if opening > 0:
            yield from build(prefix + "(", opening - 1, closing)
        if closing > opening:
            yield from build(prefix + ")", opening, closing - 1)

    return list(build("", n, n))


def combination_sum(candidates: Sequence[int], target: int) -> List[List[int]]:
    """All combinations of candidates, each usable any number of times, summing to ``target``."""
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")
    chosen: List[int] = []

    def search(index: int, remaining: int) -> Iterator[List[int]]:
        if index == len(values):
            if remaining == 0:
                yield list(chosen)
            return
        value = values[index]
        if value <= remaining:
            chosen.append(value)
            yield from search(index, remaining - value)
            chosen.pop()
        yield from search(index + 1, remaining)

    return list(search(0, target))


def combination_sum2(candidates: Sequence[int], target: int) -> List[List[int]]:
    """All distinct combinations using each candidate at most once, summing to ``target``."""
    values = sorted(candidates)
    chosen: List[int] = []

    def search(start: int, remaining: int) -> Iterator[List[int]]:
        if remaining == 0:
            yield list(chosen)
            return
        for i in range(start, len(values)):
            if i > start and values[i] == values[i - 1]:
                continue
            if values[i] > remaining:
                break
            chosen.append(values[i])
            yield from search(i + 1, remaining - values[i])
            chosen.pop()

    return list(search(0, target))


def permutations(nums: Sequence) -> List[list]:
    """Every ordering of ``nums``, produced by successive swaps."""
    values = list(nums)
    result: List[list] = []

    def arrange(index: int) -> None:
        if index >= len(values):
            result.append(values.copy())
            return
        for i in range(index, len(values)):
            values[i], values[index] = values[index], values[i]
            arrange(index + 1)
            values[i], values[index] = values[index], values[i]

    arrange(0)
    return result


def unique_permutations(nums: Sequence[Hashable]) -> List[list]:
    """Every distinct ordering of ``nums``, which may hold repeated values."""
    values = list(nums)
    if len(values) < 2:
        return [values]
    result: List[list] = []

    def arrange(start: int) -> None:
        if start == len(values) - 1:
            result.append(values.copy())
            return
        seen = set()
        for i in range(start, len(values)):
            if values[i] in seen:
                continue
            values[start], values[i] = values[i], values[start]
            arrange(start + 1)
            values[start], values[i] = values[i], values[start]
            seen.add(values[i])

    arrange(0)
    return result


def solve_n_queens(n: int) -> List[List[str]]:
    """Every placement of ``n`` non-attacking queens, as rows of ``.`` and ``Q``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    board = [["."] * n for _ in range(n)]
    used_rows: set = set()
    used_sums: set = set()
    used_diffs: set = set()
    result: List[List[str]] = []

    def place(col: int) -> None:
        if col == n:
            result.append(["".join(row) for row in board])
            return
        for row in range(n):
            if row in used_rows or row + col in used_sums or col - row in used_diffs:
                continue
            board[row][col] = "Q"
            used_rows.add(row)
            used_sums.add(row + col)
            used_diffs.add(col - row)
            place(col + 1)
            board[row][col] = "."
            used_rows.discard(row)
            used_sums.discard(row + col)
            used_diffs.discard(col - row)

    place(0)
    return result


def subsets(nums: Sequence) -> List[list]:
    """Every subset of ``nums``, built by extending the subsets found so far."""
    result: List[list] = [[]]
    for num in nums:
        result += [subset + [num] for subset in result]
    return result


def subsets_with_dup(nums: Sequence) -> List[list]:
    """Every distinct subset of ``nums``, which may hold repeated values."""
    values = sorted(nums)
    chosen: list = []
    result: List[list] = []

    def collect(start: int) -> None:
        result.append(list(chosen))
        for i in range(start, len(values)):
            if i != start and values[i] == values[i - 1]:
                continue
            chosen.append(values[i])
            collect(i + 1)
            chosen.pop()

    collect(0)
    return result


def count_vowel_strings(n: int) -> int:
    """Number of length-``n`` strings of vowels in non-decreasing order."""
    if n < 1:
        raise ValueError("n must be at least 1")
    counts = [1] * 5
    for _ in range(n - 1):
        counts = list(accumulate(reversed(counts)))[::-1]
    return sum(counts)