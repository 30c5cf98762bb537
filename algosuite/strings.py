"""String scans: palindromes, sliding windows and character transformations."""

from __future__ import annotations

from collections import Counter, deque
from itertools import groupby, zip_longest
from typing import List, Sequence

MOD = 1_000_000_007
ALPHABET = 26
VOWELS = frozenset("aeiou")


def longest_palindrome(s: str) -> str:
    """Return the longest palindromic substring; the earliest one wins ties."""
    if len(s) <= 1:
        return s
    spaced = "#" + "#".join(s) + "#"
    size = len(spaced)
    radius = [0] * size
    center = right = 0
    best_len, best_start = 1, 0
    for i in range(size):
        if i < right:
            radius[i] = min(right - i, radius[2 * center - i])
        while (
            i - radius[i] - 1 >= 0
            and i + radius[i] + 1 < size
            and spaced[i - radius[i] - 1] == spaced[i + radius[i] + 1]
        ):
            radius[i] += 1
        if i + radius[i] > right:
            center, right = i, i + radius[i]
        if radius[i] > best_len:
            best_len = radius[i]
            best_start = (i - radius[i]) // 2
    return s[best_start : best_start + best_len]


def count_and_say(n: int) -> str:
    """Return the n-th term of the count-and-say sequence, starting from "1"."""
    term = "1"
    for _ in range(1, n):
        term = "".join(f"{len(list(run))}{digit}" for digit, run in groupby(term))
    return term


def is_subsequence(s: str, t: str) -> bool:
    """True when s can be obtained from t by deleting characters."""
    remaining = iter(t)
    return all(ch in remaining for ch in s)


def push_dominoes(dominoes: str) -> str:
    """Return the final state of a row of dominoes pushed left ('L') and right ('R')."""
    n = len(dominoes)
    forces = [0] * n

    force = 0
    for i, ch in enumerate(dominoes):
        if ch == "R":
            force = n
        elif ch == "L":
            force = 0
        else:
            force = max(force - 1, 0)
        forces[i] += force

    force = 0
    for i in reversed(range(n)):
        ch = dominoes[i]
        if ch == "L":
            force = n
        elif ch == "R":
            force = 0
        else:
            force = max(force - 1, 0)
        forces[i] -= force

    return "".join("R" if f > 0 else "L" if f < 0 else "." for f in forces)


def number_of_substrings(s: str) -> int:
    """Count substrings holding at least three distinct characters."""
    window: Counter[str] = Counter()
    start = 0
    total = 0
    for end, ch in enumerate(s):
        window[ch] += 1
        while len(window) >= 3:
            total += len(s) - end
            window[s[start]] -= 1
            if window[s[start]] == 0:
                del window[s[start]]
            start += 1
    return total


def max_vowels(s: str, k: int) -> int:
    """Most vowels in any substring of length k; 0 when k exceeds the length."""
    if k > len(s):
        return 0
    current = sum(ch in VOWELS for ch in s[:k])
    best = current
    for entering, leaving in zip(s[k:], s):
        current += (entering in VOWELS) - (leaving in VOWELS)
        best = max(best, current)
    return best


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the two words letter by letter, appending the longer one's tail."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def longest_palindrome_from_pairs(words: Sequence[str]) -> int:
    """Length of the longest palindrome built by concatenating two-letter words."""
    counts = Counter(words)
    length = 0
    has_centre = False
    for word in list(counts):
        reverse = word[::-1]
        if reverse in counts:
            if reverse != word:
                length += 4 * min(counts[reverse], counts[word])
            else:
                length += 4 * (counts[word] // 2)
                if counts[word] % 2 == 1:
                    has_centre = True
            counts[reverse] = 0
        counts[word] = 0
    return length + 2 if has_centre else length


def smallest_number(pattern: str) -> str:
    """Smallest digit string following an 'I'ncrease/'D'ecrease pattern."""
    result: List[str] = []
    pending: List[int] = []
    for i in range(len(pattern) + 1):
        pending.append(i + 1)
        if i == len(pattern) or pattern[i] == "I":
            result.extend(str(d) for d in reversed(pending))
            pending.clear()
    return "".join(result)


def minimum_recolors(blocks: str, k: int) -> int:
    """Fewest 'W' blocks to repaint so that k consecutive blocks are all 'B'."""
    current = blocks[:k].count("W")
    best = current
    for leaving, entering in zip(blocks, blocks[k:]):
        if leaving == "W" and entering == "B":
            current -= 1
        elif leaving == "B" and entering == "W":
            current += 1
        best = min(best, current)
    return best


def find_words_containing(words: Sequence[str], x: str) -> List[int]:
    """Indices of the words that contain the character x."""
    return [i for i, word in enumerate(words) if x in word]


def _at_least_consonants(word: str, k: int) -> int:
    """Count substrings with all five vowels and at least k consonants."""
    vowels: Counter[str] = Counter()
    consonants = 0
    start = 0
    total = 0
    for end, ch in enumerate(word):
        if ch in VOWELS:
            vowels[ch] += 1
        else:
            consonants += 1
        while len(vowels) == len(VOWELS) and consonants >= k:
            total += len(word) - end
            leaving = word[start]
            if leaving in VOWELS:
                vowels[leaving] -= 1
                if vowels[leaving] == 0:
                    del vowels[leaving]
            else:
                consonants -= 1
            start += 1
    return total


def count_of_substrings(word: str, k: int) -> int:
    """Count substrings with every vowel and exactly k consonants."""
    return _at_least_consonants(word, k) - _at_least_consonants(word, k + 1)


def _letter_counts(s: str) -> List[int]:
    counts = [0] * ALPHABET
    for ch in s:
        counts[ord(ch) - ord("a")] += 1
    return counts


def length_after_transformations(s: str, t: int) -> int:
    """Length after t rounds where 'z' becomes "ab" and other letters advance one."""
    counts = deque(_letter_counts(s))
    for _ in range(t):
        wrapped = counts.pop()
        counts.appendleft(wrapped)
        counts[1] = (counts[1] + wrapped) % MOD
    return sum(counts) % MOD


def _multiply(a: List[List[int]], b: List[List[int]]) -> List[List[int]]:
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, column)) % MOD for column in columns]
        for row in a
    ]


def length_after_custom_transformations(s: str, t: int, nums: Sequence[int]) -> int:
    """Length after t rounds where each letter c becomes the next nums[c] letters, wrapping."""
    step = [[0] * ALPHABET for _ in range(ALPHABET)]
    for letter, spread in enumerate(nums[:ALPHABET]):
        for offset in range(1, spread + 1):
            step[(letter + offset) % ALPHABET][letter] = 1

    power = [[int(i == j) for j in range(ALPHABET)] for i in range(ALPHABET)]
    while t > 0:
        if t & 1:
            power = _multiply(step, power)
        step = _multiply(step, step)
        t >>= 1

    counts = _letter_counts(s)
    return sum(
        sum(weight * count for weight, count in zip(row, counts)) % MOD
        for row in power
    ) % MOD