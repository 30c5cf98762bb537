"""Sliding-window, prefix and difference-array counts over integer sequences."""

from __future__ import annotations

import heapq
import math
from bisect import bisect_left
from collections import Counter, defaultdict
from itertools import accumulate, pairwise
from operator import itemgetter
from typing import List, Sequence


class ProductOfNumbers:
    """A stream of integers that answers products of its last k entries."""

    def __init__(self) -> None:
        self._prefix: List[int] = []

    def add(self, num: int) -> None:
        """Append a number; a zero makes all earlier entries unreachable."""
        if num == 0:
            self._prefix.clear()
        else:
            last = self._prefix[-1] if self._prefix else 1
            self._prefix.append(last * num)

    def get_product(self, k: int) -> int:
        """Return the product of the last k numbers added."""
        size = len(self._prefix)
        if size < k:
            return 0
        if size == k:
            return self._prefix[-1]
        return self._prefix[-1] // self._prefix[-k - 1]


def min_sub_array_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest contiguous run summing to at least target, or 0."""
    best = math.inf
    window = 0
    start = 0
    for end, value in enumerate(nums):
        window += value
        while window >= target and start < len(nums):
            best = min(best, end - start + 1)
            window -= nums[start]
            start += 1
    return 0 if best == math.inf else int(best)


def count_good(nums: Sequence[int], k: int) -> int:
    """Count subarrays holding at least k pairs of equal values."""
    counts: defaultdict[int, int] = defaultdict(int)
    pairs = 0
    start = 0
    total = 0
    for end, value in enumerate(nums):
        pairs += counts[value]
        counts[value] += 1
        while pairs >= k:
            total += len(nums) - end
            counts[nums[start]] -= 1
            pairs -= counts[nums[start]]
            start += 1
    return total


def count_fair_pairs(nums: Sequence[int], lower: int, upper: int) -> int:
    """Count index pairs whose sum lies within [lower, upper]."""
    ordered = sorted(nums)
    count = 0
    for i, value in enumerate(ordered):
        low = bisect_left(ordered, lower - value, i + 1)
        high = bisect_left(ordered, upper - value + 1, i + 1)
        count += high - low
    return count


def count_complete_subarrays(nums: Sequence[int]) -> int:
    """Count subarrays holding every distinct value of the whole array."""
    distinct = len(set(nums))
    window: Counter[int] = Counter()
    start = 0
    count = 0
    for end, value in enumerate(nums):
        window[value] += 1
        while len(window) >= distinct:
            count += len(nums) - end
            window[nums[start]] -= 1
            if window[nums[start]] == 0:
                del window[nums[start]]
            start += 1
    return count


def count_interesting_subarrays(nums: Sequence[int], modulo: int, k: int) -> int:
    """Count subarrays where the number of x with x % modulo == k is itself k mod modulo."""
    seen: Counter[int] = Counter({0: 1})
    matches = 0
    result = 0
    for value in nums:
        if value % modulo == k:
            matches += 1
        result += seen[(matches - k) % modulo]
        seen[matches % modulo] += 1
    return result


def count_subarrays_with_max(nums: Sequence[int], k: int) -> int:
    """Count subarrays in which the array's maximum appears at least k times."""
    largest = max(nums)
    result = 0
    start = 0
    hits = 0
    for end, value in enumerate(nums):
        hits += value == largest
        while hits >= k:
            result += len(nums) - end
            hits -= nums[start] == largest
            start += 1
    return result


def number_of_alternating_groups(colors: Sequence[int], k: int) -> int:
    """Count length-k runs of alternating colours around a circle."""
    extended = list(colors) + list(colors[: k - 1])
    total = 0
    run = 1
    longest = 0
    for current, following in pairwise(extended):
        if current != following:
            run += 1
        else:
            run = 1
            longest = 0
        longest = max(longest, run)
        if longest >= k:
            total += 1
    return total


def is_zero_array(nums: Sequence[int], queries: Sequence[Sequence[int]]) -> bool:
    """True when decrementing each queried range once can bring every value to zero."""
    cover = [0] * (len(nums) + 1)
    for left, right in queries:
        cover[left] += 1
        cover[right + 1] -= 1
    return all(value <= times for value, times in zip(nums, accumulate(cover)))


def min_zero_array(nums: Sequence[int], queries: Sequence[Sequence[int]]) -> int:
    """Fewest leading queries needed to bring every value to zero, or -1."""
    diff = [0] * (len(nums) + 1)
    running = 0
    applied = 0
    for i, need in enumerate(nums):
        while running + diff[i] < need:
            if applied == len(queries):
                return -1
            left, right, amount = queries[applied]
            applied += 1
            if right >= i:
                diff[max(left, i)] += amount
                diff[right + 1] -= amount
        running += diff[i]
    return applied


def max_removal(nums: Sequence[int], queries: Sequence[Sequence[int]]) -> int:
    """Most queries that can be dropped while the rest still zero the array, or -1."""
    ordered = sorted(queries, key=itemgetter(0))
    diff = [0] * (len(nums) + 1)
    ends: List[int] = []
    active = 0
    j = 0
    for i, need in enumerate(nums):
        active += diff[i]
        while j < len(ordered) and ordered[j][0] == i:
            heapq.heappush(ends, -ordered[j][1])
            j += 1
        while active < need and ends and -ends[0] >= i:
            active += 1
            diff[-heapq.heappop(ends) + 1] -= 1
        if active < need:
            return -1
    return len(ends)