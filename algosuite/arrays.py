"""Counting, partitioning and greedy routines over integer arrays."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections import Counter
from functools import reduce
from itertools import accumulate, combinations
from operator import mul, xor
from typing import Dict, List, Sequence

_INT_MAX = 2**31 - 1


def two_sum(nums: Sequence[int], target: int) -> List[int]:
    """Indices of two entries adding up to target, or an empty list."""
    seen: Dict[int, int] = {}
    for i, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], i]
        seen[value] = i
    return []


def sort_colors(nums: List[int]) -> None:
    """Sort, in place, a list of 0s, 1s and 2s; any other value counts as 2."""
    counts = Counter(nums)
    zeros, ones = counts[0], counts[1]
    nums[:] = [0] * zeros + [1] * ones + [2] * (len(nums) - zeros - ones)


def product_except_self(nums: Sequence[int]) -> List[int]:
    """For each position, the product of every other entry, without division."""
    if not nums:
        return []
    before = list(accumulate(nums[:-1], mul, initial=1))
    after = list(accumulate(reversed(nums[1:]), mul, initial=1))[::-1]
    return [a * b for a, b in zip(before, after)]


def _rotations_to_match(top: Sequence[int], bottom: Sequence[int]) -> int:
    first = top[0]
    top_swaps = bottom_swaps = 0
    for upper, lower in zip(top, bottom):
        if upper != first and lower != first:
            return -1
        if upper != first:
            top_swaps += 1
        elif lower != first:
            bottom_swaps += 1
    return min(top_swaps, bottom_swaps)


def min_domino_rotations(tops: Sequence[int], bottoms: Sequence[int]) -> int:
    """Fewest rotations making one row uniform, or -1 when impossible."""
    result = _rotations_to_match(tops, bottoms)
    if result != -1:
        return result
    return _rotations_to_match(bottoms, tops)


def num_equiv_domino_pairs(dominoes: Sequence[Sequence[int]]) -> int:
    """Count pairs of dominoes equal up to rotation."""
    counts = Counter(tuple(sorted(domino)) for domino in dominoes)
    return sum(c * (c - 1) // 2 for c in counts.values())


def three_consecutive_odds(arr: Sequence[int]) -> bool:
    """True when three odd numbers appear next to each other."""
    run = 0
    for value in arr:
        run = run + 1 if value % 2 else 0
        if run == 3:
            return True
    return False


def count_good_triplets(arr: Sequence[int], a: int, b: int, c: int) -> int:
    """Count ordered-index triplets whose pairwise differences stay within a, b and c."""
    return sum(
        1
        for x, y, z in combinations(arr, 3)
        if abs(x - y) <= a and abs(y - z) <= b and abs(z - x) <= c
    )


def subset_xor_sum(nums: Sequence[int]) -> int:
    """Sum of the XOR of every non-empty subset."""
    return sum(
        reduce(xor, subset)
        for size in range(1, len(nums) + 1)
        for subset in combinations(nums, size)
    )


def build_array(nums: Sequence[int]) -> List[int]:
    """Return ``nums[nums[i]]`` for every i."""
    return [nums[value] for value in nums]


def _can_assign(
    tasks: Sequence[int], workers: Sequence[int], size: int, pills: int, strength: int
) -> bool:
    pool = list(workers[len(workers) - size :])
    assigned = 0
    for task in reversed(tasks[:size]):
        if not pool:
            break
        if pool[-1] >= task:
            pool.pop()
            assigned += 1
        elif pills > 0:
            index = bisect_left(pool, task - strength)
            if index < len(pool) and pool[index] + strength >= task:
                pills -= 1
                assigned += 1
                del pool[index]
    return assigned == size


def max_task_assign(
    tasks: Sequence[int], workers: Sequence[int], pills: int, strength: int
) -> int:
    """Most tasks done when each pill adds strength to one worker."""
    ordered_tasks = sorted(tasks)
    ordered_workers = sorted(workers)
    low, high = 0, min(len(ordered_tasks), len(ordered_workers))
    result = 0
    while low <= high:
        mid = (low + high) // 2
        if _can_assign(ordered_tasks, ordered_workers, mid, pills, strength):
            result = mid
            low = mid + 1
        else:
            high = mid - 1
    return result


def number_of_arrays(difference: Sequence[int], lower: int, upper: int) -> int:
    """Count sequences within [lower, upper] having the given consecutive differences."""
    positions = list(accumulate(difference, initial=1))
    highest = max(positions) + lower - min(positions)
    return 0 if highest > upper else upper - highest + 1


def pivot_array(nums: Sequence[int], pivot: int) -> List[int]:
    """Stable three-way partition around pivot: smaller, equal, then larger."""
    return (
        [v for v in nums if v < pivot]
        + [v for v in nums if v == pivot]
        + [v for v in nums if v > pivot]
    )


def count_pairs(nums: Sequence[int], k: int) -> int:
    """Count index pairs holding equal values whose index product divides by k."""
    return sum(
        1
        for (i, a), (j, b) in combinations(enumerate(nums), 2)
        if a == b and (i * j) % k == 0
    )


def max_jump(stones: Sequence[int]) -> int:
    """Smallest largest jump of a trip to the last stone and back, using each stone once."""
    return max(
        stones[1] - stones[0],
        *(far - near for near, far in zip(stones, stones[2:])),
    )


def maximum_count(nums: Sequence[int]) -> int:
    """Larger of the counts of negative and positive values in a sorted sequence."""
    negatives = bisect_left(nums, 0)
    positives = len(nums) - bisect_right(nums, 0)
    return max(negatives, positives)


def maximum_triplet_value(nums: Sequence[int]) -> int:
    """Largest ``(nums[i] - nums[j]) * nums[k]`` over i < j < k, or 0."""
    n = len(nums)
    if n < 3:
        return 0
    prefix = list(accumulate(nums, max))
    suffix = list(accumulate(reversed(nums), max))[::-1]
    best = max((prefix[j - 1] - nums[j]) * suffix[j + 1] for j in range(1, n - 1))
    return max(0, best)


def min_sum(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Smallest equal sum after replacing zeros with positive numbers, or -1."""
    sum1 = sum(nums1)
    sum2 = sum(nums2)
    zeros1 = nums1.count(0) if isinstance(nums1, list) else sum(v == 0 for v in nums1)
    zeros2 = nums2.count(0) if isinstance(nums2, list) else sum(v == 0 for v in nums2)
    if sum2 > sum1:
        if zeros1 == 0 or (sum2 - sum1 < zeros1 and zeros2 == 0):
            return -1
    elif sum1 > sum2:
        if zeros2 == 0 or (sum1 - sum2 < zeros2 and zeros1 == 0):
            return -1
    elif (zeros1 > 0) != (zeros2 > 0):
        return -1
    return max(sum1 + zeros1, sum2 + zeros2)


def maximum_value_sum(
    nums: Sequence[int], k: int, edges: Sequence[Sequence[int]]
) -> int:
    """Largest node sum when XOR with k may be applied to both ends of tree edges."""
    total = 0
    flipped = 0
    cheapest = _INT_MAX
    for num in nums:
        toggled = num ^ k
        total += max(num, toggled)
        flipped += toggled > num
        cheapest = min(cheapest, abs(toggled - num))
    return total - cheapest if flipped % 2 else total


def min_operations(nums: Sequence[int], k: int) -> int:
    """Steps lowering values above k down to k, one distinct level at a time, or -1."""
    distinct = set(nums)
    lowest = min(distinct)
    if lowest < k:
        return -1
    return len(distinct) - 1 if lowest == k else len(distinct)


def minimum_operations(nums: Sequence[int]) -> int:
    """Fewest removals of the first three elements leaving all values distinct."""
    seen = set()
    for i in reversed(range(len(nums))):
        if nums[i] in seen:
            return (i + 3) // 3
        seen.add(nums[i])
    return 0


def count_subarrays_of_three(nums: Sequence[int]) -> int:
    """Count windows of three whose outer sum is half the middle value."""
    return sum(
        1 for a, b, c in zip(nums, nums[1:], nums[2:]) if 2 * (a + c) == b
    )