"""Dynamic-programming routines over sequences, grids of choices and bitmasks."""

from __future__ import annotations

import math
from functools import lru_cache
from itertools import groupby
from typing import List, Sequence

MOD = 1_000_000_007

# Width of the reachable-sum bit set and the bound of the sums searched.
_SUM_BITS = 5000
_SEARCH_LIMIT = 4900


def jump(nums: Sequence[int]) -> int:
    """Fewest jumps from the first index to the last."""
    n = len(nums)
    if n <= 1:
        return 0
    steps: List[float] = [0] * n
    steps[n - 1] = 1
    for i in reversed(range(n - 1)):
        reach = nums[i]
        if reach == 0:
            steps[i] = math.inf
        elif i + reach >= n - 1:
            steps[i] = 1
        else:
            steps[i] = min(steps[i + 1 : i + reach + 1]) + 1
    if steps[0] == math.inf:
        raise ValueError("the last index cannot be reached")
    return int(steps[0])


def max_sub_array(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = -math.inf
    running = 0
    for value in nums:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return int(best)


def can_jump(nums: Sequence[int]) -> bool:
    """True when the last index can be reached from the first."""
    furthest = 0
    for i, reach in enumerate(nums):
        if i > furthest:
            return False
        furthest = max(furthest, i + reach)
    return True


def climb_stairs(n: int) -> int:
    """Number of ways to climb n stairs taking one or two steps at a time."""
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return current


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one sale."""
    lowest = prices[0]
    best = 0
    for price in prices:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def rob(nums: Sequence[int]) -> int:
    """Most money from houses in a row without robbing two neighbours."""
    skip_next, take_from_next = 0, 0
    for value in reversed(nums):
        skip_next, take_from_next = take_from_next, max(value + skip_next, take_from_next)
    return take_from_next


def _rob_line(nums: Sequence[int]) -> int:
    previous = nums[0]
    before = 0
    for value in nums[1:]:
        previous, before = max(value + before, previous), previous
    return previous


def rob_circular(nums: Sequence[int]) -> int:
    """Most money from houses in a circle without robbing two neighbours."""
    if len(nums) == 1:
        return nums[0]
    return max(_rob_line(nums[1:]), _rob_line(nums[:-1]))


def largest_divisible_subset(nums: Sequence[int]) -> List[int]:
    """Largest subset in which every pair divides one way; largest value first."""
    ordered = sorted(nums)
    if not ordered:
        return []
    parent = [-1] * len(ordered)
    length = [1] * len(ordered)
    best = 0
    for i, value in enumerate(ordered):
        for j in reversed(range(i)):
            if value % ordered[j] == 0 and length[j] >= length[i]:
                parent[i] = j
                length[i] = length[j] + 1
                if length[i] > length[best]:
                    best = i
    result = []
    while best != -1:
        result.append(ordered[best])
        best = parent[best]
    return result


def combination_sum4(nums: Sequence[int], target: int) -> int:
    """Number of ordered sequences of nums that add up to target."""
    ways = [1] * (target + 1)
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - num] for num in nums if num <= total)
    return ways[target]


def can_partition(nums: Sequence[int]) -> bool:
    """True when nums splits into two parts of equal sum."""
    total = sum(nums)
    if total % 2:
        return False
    reachable = 1
    for value in nums:
        reachable |= reachable << value
    return bool(reachable >> (total // 2) & 1)


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the top, starting on step 0 or 1."""
    n = len(cost)
    nearer, further = cost[n - 2], cost[n - 1]
    current = min(further, nearer)
    for i in range(n - 3, 0, -1):
        current = cost[i] + min(further, nearer)
        further, nearer = nearer, current
    return min(current, further + cost[0])


def num_tilings(n: int) -> int:
    """Ways to tile a 2 x n board with dominoes and trominoes, modulo 10**9 + 7."""
    if n == 2:
        return 2
    if n == 1:
        return 1
    last, second, third = 5, 2, 1
    for _ in range(4, n + 1):
        last, second, third = (2 * last + third) % MOD, last, second
    return last


def fib(n: int) -> int:
    """The n-th Fibonacci number."""
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def tribonacci(n: int) -> int:
    """The n-th Tribonacci number, starting 0, 1, 1."""
    a, b, c = 0, 1, 1
    for _ in range(n):
        a, b, c = b, c, a + b + c
    return a


def max_compatibility_sum(
    students: Sequence[Sequence[int]], mentors: Sequence[Sequence[int]]
) -> int:
    """Best total of matching answers when pairing each student with one mentor."""
    n = len(students)
    scores = [
        [sum(a == b for a, b in zip(student, mentor)) for mentor in mentors]
        for student in students
    ]

    @lru_cache(maxsize=None)
    def best(mask: int) -> int:
        student = bin(mask).count("1")
        if student == n:
            return 0
        return max(
            (
                best(mask | 1 << j) + scores[student][j]
                for j in range(n)
                if not mask & 1 << j
            ),
            default=0,
        )

    return best(0)


def minimize_the_difference(mat: Sequence[Sequence[int]], target: int) -> int:
    """Smallest |target - sum| over sums built from one value per row."""
    window = (1 << _SUM_BITS) - 1
    reachable = 1
    for row in mat:
        combined = 0
        for value in row:
            combined |= reachable << value
        reachable = combined & window
    differences = [
        abs(target - total) for total in range(_SEARCH_LIMIT) if reachable >> total & 1
    ]
    if not differences:
        raise ValueError("no reachable sum within the searched range")
    return min(differences)


def most_points(questions: Sequence[Sequence[int]]) -> int:
    """Most points from answering questions in order, each skipping the next few."""
    n = len(questions)
    if n == 1:
        return questions[0][0]
    best = [0] * n
    best[n - 1] = questions[n - 1][0]
    result = 0
    for i in range(n - 2, -1, -1):
        points, skip = questions[i]
        resume = i + skip + 1
        taken = points + best[resume] if resume <= n - 1 else points
        best[i] = max(best[i + 1], taken)
        result = max(result, best[i])
    return result


def _one_apart(a: str, b: str) -> bool:
    return len(a) == len(b) and sum(x != y for x, y in zip(a, b)) == 1


def get_words_in_longest_subsequence(
    words: Sequence[str], groups: Sequence[int]
) -> List[str]:
    """Longest chain of words one letter apart whose neighbouring groups differ."""
    n = len(words)
    length = [1] * n
    parent = [-1] * n
    longest = 0
    last = -1
    for i, word in enumerate(words):
        for j in range(i):
            if groups[i] == groups[j]:
                continue
            if _one_apart(word, words[j]) and length[j] + 1 > length[i]:
                length[i] = length[j] + 1
                parent[i] = j
        if length[i] > longest:
            longest = length[i]
            last = i
    chain = []
    while last != -1:
        chain.append(words[last])
        last = parent[last]
    return chain[::-1]


def get_longest_subsequence(words: Sequence[str], groups: Sequence[int]) -> List[str]:
    """Words at each point where the group changes, starting with the first word."""
    return [
        next(run)[1]
        for _, run in groupby(zip(groups, words), key=lambda pair: pair[0])
    ]