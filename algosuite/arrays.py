"""Algorithms over sequences of numbers."""

from __future__ import annotations

import heapq
import math
from itertools import accumulate, pairwise
from typing import List, MutableSequence, Sequence


def two_sum(nums: Sequence[int], target: int) -> List[int]:
    """Return the indices of two numbers that add up to ``target``.

    The index of the smaller value comes first.
    """
    ordered = sorted((value, index) for index, value in enumerate(nums))
    front, rear = 0, len(ordered) - 1
    while front < rear:
        total = ordered[front][0] + ordered[rear][0]
        if total == target:
            return [ordered[front][1], ordered[rear][1]]
        if total > target:
            rear -= 1
        else:
            front += 1
    raise ValueError("no two numbers add up to the target")


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from a single buy followed by a single sell."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    best = 0
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Best profit when any number of buy and sell rounds is allowed."""
    return sum(max(after - before, 0) for before, after in pairwise(prices))


def three_sum(nums: Sequence[int]) -> List[List[int]]:
    """Return every distinct triplet of values that sums to zero."""
    values = sorted(nums)
    result: List[List[int]] = []
    count = len(values)
    for i, first in enumerate(values):
        if i > 0 and values[i - 1] == first:
            continue
        front, back = i + 1, count - 1
        while front < back:
            total = first + values[front] + values[back]
            if total < 0:
                front += 1
            elif total > 0:
                back -= 1
            else:
                triplet = [first, values[front], values[back]]
                result.append(triplet)
                while front < back and values[front] == triplet[1]:
                    front += 1
                while front < back and values[back] == triplet[2]:
                    back -= 1
    return result


def max_operations(nums: Sequence[int], k: int) -> int:
    """Count how many disjoint pairs summing to ``k`` can be removed."""
    values = sorted(nums)
    low, high = 0, len(values) - 1
    count = 0
    while low < high:
        total = values[low] + values[high]
        if total == k:
            count += 1
            low += 1
            high -= 1
        elif total < k:
            low += 1
        else:
            high -= 1
    return count


def find_gcd(nums: Sequence[int]) -> int:
    """Greatest common divisor of the smallest and largest number."""
    if not nums:
        raise ValueError("nums must not be empty")
    return math.gcd(min(nums), max(nums))


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the ``k``-th largest value, counting duplicates."""
    if not 1 <= k <= len(nums):
        raise ValueError("k is out of range")
    return heapq.nlargest(k, nums)[-1]


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Tell whether any value appears more than once."""
    return len(set(nums)) != len(nums)


def minimum_card_pickup(cards: Sequence[int]) -> int:
    """Length of the shortest run holding a matching pair, or -1 if none exists."""
    last_seen: dict = {}
    best = None
    for index, card in enumerate(cards):
        if card in last_seen:
            span = index - last_seen[card] + 1
            best = span if best is None else min(best, span)
        last_seen[card] = index
    return -1 if best is None else best


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next permutation in lexicographic order.

    The last permutation wraps around to the first (ascending) one.
    """
    pivot = len(nums) - 2
    while pivot >= 0 and nums[pivot] >= nums[pivot + 1]:
        pivot -= 1
    if pivot >= 0:
        successor = len(nums) - 1
        while nums[successor] <= nums[pivot]:
            successor -= 1
        nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1:] = list(reversed(nums[pivot + 1:]))


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Find ``target`` in a rotated ascending sequence; return its index or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target <= nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] <= target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return -1


def trap(height: Sequence[int]) -> int:
    """Units of rain water held between bars of the given heights."""
    left_max = accumulate(height, max)
    right_max = list(accumulate(reversed(height), max))[::-1]
    return sum(min(left, right) - bar for left, right, bar in zip(left_max, right_max, height))


def find_132_pattern(nums: Sequence[int]) -> bool:
    """Tell whether some i < j < k has nums[i] < nums[k] < nums[j]."""
    stack: List[int] = []
    second = -math.inf
    for value in reversed(nums):
        if value < second:
            return True
        while stack and value > stack[-1]:
            second = stack.pop()
        stack.append(value)
    return False


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = -math.inf
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def find_unsorted_subarray(nums: Sequence[int]) -> int:
    """Length of the shortest run whose sorting sorts the whole sequence."""
    ordered = sorted(nums)
    mismatches = [index for index, (a, b) in enumerate(zip(nums, ordered)) if a != b]
    if not mismatches:
        return 0
    return mismatches[-1] - mismatches[0] + 1


def find_closest_elements(arr: Sequence[int], k: int, x: int) -> List[int]:
    """The ``k`` values nearest to ``x``, smaller values winning ties, in ascending order."""
    if k < 0:
        raise ValueError("k must not be negative")
    return sorted(heapq.nsmallest(k, arr, key=lambda value: (abs(x - value), value)))


def sort_array_by_parity(nums: Sequence[int]) -> List[int]:
    """Return the values with every even number moved before every odd one."""
    result = list(nums)
    boundary = 0
    for index, value in enumerate(result):
        if value % 2 == 0:
            result[index], result[boundary] = result[boundary], result[index]
            boundary += 1
    return result