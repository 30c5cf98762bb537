"""Number-theoretic and combinatorial routines over integers."""

from __future__ import annotations

import math
from collections import Counter
from itertools import pairwise, permutations
from typing import List, Sequence

MOD = 1_000_000_007
_INT_MIN = -(2**31)


def my_pow(x: float, n: int) -> float:
    """Raise x to the integer power n by repeated squaring."""
    if x == -1:
        return -1.0 if n % 2 else 1.0
    if x == 1:
        return 1.0
    if n == _INT_MIN:
        return 0.0
    base = float(x)
    result = 1.0
    power = abs(n)
    while power > 0:
        if power % 2 == 1:
            result *= base
        base *= base
        power //= 2
    if n > 0:
        return result
    if result == 0:
        return math.copysign(math.inf, result)
    return 1 / result


def _next_pascal_row(row: Sequence[int]) -> List[int]:
    return [1, *(a + b for a, b in pairwise(row)), 1]


def generate(num_rows: int) -> List[List[int]]:
    """Return the first num_rows rows of Pascal's triangle."""
    rows: List[List[int]] = []
    for _ in range(num_rows):
        rows.append(_next_pascal_row(rows[-1]) if rows else [1])
    return rows


def get_row(row_index: int) -> List[int]:
    """Return row row_index (counting from 0) of Pascal's triangle."""
    if row_index < 0:
        return []
    row = [1]
    for _ in range(row_index):
        row = _next_pascal_row(row)
    return row


def is_power_of_three(n: int) -> bool:
    """True when n equals 3**i for some i >= 0."""
    power = 1
    while power <= n:
        if power == n:
            return True
        power *= 3
    return False


def count_bits(n: int) -> List[int]:
    """Number of set bits of every integer from 0 to n."""
    return [i.bit_count() for i in range(n + 1)]


def count_largest_group(n: int) -> int:
    """How many digit-sum groups of 1..n share the largest size."""
    sizes = Counter(sum(map(int, str(i))) for i in range(1, n + 1))
    largest = max(sizes.values(), default=0)
    return sum(1 for size in sizes.values() if size == largest)


def check_powers_of_three(n: int) -> bool:
    """True when n is a sum of distinct powers of three."""
    while n > 0:
        n, digit = divmod(n, 3)
        if digit == 2:
            return False
    return True


def count_good_numbers(n: int) -> int:
    """Count length-n digit strings with even digits at even indices and primes at odd ones, mod 10**9 + 7."""
    first = 5 if n % 2 else 1
    return first * pow(20, n // 2, MOD) % MOD


def find_even_numbers(digits: Sequence[int]) -> List[int]:
    """All distinct even three-digit numbers formed from distinct positions of digits, sorted."""
    found = {
        a * 100 + b * 10 + c
        for a, b, c in permutations(digits, 3)
        if a != 0 and c % 2 == 0
    }
    return sorted(found)


def number_of_cuts(n: int) -> int:
    """Fewest straight cuts that divide a circle into n equal slices."""
    if n == 1:
        return 0
    return n // 2 if n % 2 == 0 else n


def closest_primes(left: int, right: int) -> List[int]:
    """The pair of consecutive primes in [left, right] with the smallest gap, or [-1, -1]."""
    if right < 2:
        return [-1, -1]
    sieve = bytearray([1]) * (right + 1)
    sieve[0] = sieve[1] = 0
    for p in range(2, math.isqrt(right) + 1):
        if sieve[p]:
            sieve[p * p :: p] = bytes(len(range(p * p, right + 1, p)))
    primes = [p for p in range(max(left, 2), right + 1) if sieve[p]]
    best: List[int] = [-1, -1]
    for a, b in pairwise(primes):
        if best[0] == -1 or b - a < best[1] - best[0]:
            best = [a, b]
    return best


def colored_cells(n: int) -> int:
    """Cells coloured after n minutes of growing a diamond from one cell."""
    return 1 + 2 * n * (n - 1)


def _is_symmetric(text: str) -> bool:
    half = len(text) // 2
    return sum(map(int, text[:half])) == sum(map(int, text[half:]))


def count_symmetric_integers(low: int, high: int) -> int:
    """Count integers in [low, high] with an even number of digits whose halves have equal digit sums."""
    count = 0
    current = max(low, 11)
    while current <= high:
        text = str(current)
        if len(text) % 2:
            current = 10 ** len(text)
            continue
        count += _is_symmetric(text)
        current += 1
    return count


def difference_of_sums(n: int, m: int) -> int:
    """Sum of 1..n not divisible by m minus the sum of those that are."""
    multiples = n // m
    return n * (n + 1) // 2 - multiples * (multiples + 1) * m


def _limited_digits_up_to(bound: int, limit: int) -> int:
    """Count integers in [0, bound] whose digits are all at most limit."""
    base = limit + 1
    text = str(bound)
    count = 0
    for position, char in enumerate(text):
        remaining = len(text) - position - 1
        digit = int(char)
        if digit > limit:
            return count + base ** (remaining + 1)
        count += digit * base**remaining
    return count + 1


def _powerful_up_to(bound: int, limit: int, suffix: str) -> int:
    tail = int(suffix)
    if bound < tail:
        return 0
    largest_prefix = (bound - tail) // 10 ** len(suffix)
    return _limited_digits_up_to(largest_prefix, limit)


def number_of_powerful_int(start: int, finish: int, limit: int, suffix: str) -> int:
    """Count integers in [start, finish] ending in suffix whose other digits are at most limit."""
    return _powerful_up_to(finish, limit, suffix) - _powerful_up_to(
        start - 1, limit, suffix
    )


def triangle_type(nums: Sequence[int]) -> str:
    """Classify three side lengths as "equilateral", "isosceles", "scalene" or "none"."""
    a, b, c = sorted(nums)
    if a + b <= c:
        return "none"
    if a == b == c:
        return "equilateral"
    if a == b or b == c:
        return "isosceles"
    return "scalene"


def count_good_integers(n: int, k: int) -> int:
    """Count n-digit integers whose digits can be rearranged into a palindrome divisible by k."""
    half_len = (n + 1) // 2
    skip = n % 2
    seen = set()
    total = 0
    for value in range(10 ** (half_len - 1), 10**half_len):
        half = str(value)
        palindrome = half + half[::-1][skip:]
        if int(palindrome) % k:
            continue
        digits = Counter(palindrome)
        key = tuple(digits[str(d)] for d in range(10))
        if key in seen:
            continue
        seen.add(key)
        arrangements = (n - key[0]) * math.factorial(n - 1)
        for count in key:
            arrangements //= math.factorial(count)
        total += arrangements
    return total