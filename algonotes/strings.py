"""Puzzles over strings: palindromes, runs, rotations and expressions."""

import operator
import re
from functools import lru_cache
from itertools import groupby

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def is_palindrome_text(s):
    """True if the ASCII letters and digits of ``s`` form a palindrome, ignoring case."""
    kept = "".join(c for c in s if c.isascii() and c.isalnum()).lower()
    return kept == kept[::-1]


def longest_common_prefix(strs):
    """Longest prefix shared by every string in ``strs``; empty for no strings."""
    if not strs:
        return ""
    first = strs[0]
    for i, char in enumerate(first):
        if any(i >= len(other) or other[i] != char for other in strs[1:]):
            return first[:i]
    return first


def make_fancy_string(s):
    """Drop characters so that no three equal characters stand in a row."""
    return "".join(char * min(len(list(run)), 2) for char, run in groupby(s))


def is_anagram(s, t):
    """True if ``t`` holds exactly the characters of ``s``."""
    return sorted(s) == sorted(t)


def is_circular_sentence(sentence):
    """True if each word ends with the letter the next word starts with, wrapping round."""
    if len(sentence) <= 1:
        return True
    if sentence[0] != sentence[-1]:
        return False
    skip = False
    for position in range(2, len(sentence) - 1):
        if skip:
            skip = False
            continue
        if sentence[position] == " ":
            if sentence[position - 1] != sentence[position + 1]:
                return False
            skip = True
    return True


def min_changes(s):
    """Number of flips that make every aligned pair of characters equal."""
    return sum(a != b for a, b in zip(s[::2], s[1::2]))


def compressed_string(word):
    """Run-length encode ``word`` as count and character, with runs of at most nine."""
    parts = []
    for char, run in groupby(word):
        count = sum(1 for _ in run)
        while count:
            chunk = min(count, 9)
            parts.append(f"{chunk}{char}")
            count -= chunk
    return "".join(parts)


def longest_palindrome(s):
    """Longest palindromic substring of ``s``, the earliest one on a tie."""
    best = s[:1]
    for start in range(len(s) - 1):
        for stop in range(len(s), start + len(best), -1):
            candidate = s[start:stop]
            if candidate == candidate[::-1]:
                best = candidate
                break
    return best


def rotate_string(s, goal):
    """True if some rotation of ``s`` equals ``goal``."""
    return len(s) == len(goal) and goal in s + s


def shortest_palindrome(s):
    """Shortest palindrome made by adding characters in front of ``s``."""
    reversed_text = s[::-1]
    size = len(s)
    for i in range(size):
        if s[: size - i] == reversed_text[i:]:
            return reversed_text[:i] + s
    return reversed_text + s


def _trunc_div(left, right):
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _trunc_mod(left, right):
    return left - right * _trunc_div(left, right)


_OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _trunc_div,
    "%": _trunc_mod,
}


def _parse_leading_int(text):
    match = _LEADING_INT.match(text)
    if match is None:
        return 0
    return min(max(int(match.group(1)), _INT_MIN), _INT_MAX)


@lru_cache(maxsize=None)
def _ways(expression):
    results = []
    for i, char in enumerate(expression):
        apply = _OPERATORS.get(char)
        if apply is None:
            continue
        lefts = _ways(expression[:i])
        rights = _ways(expression[i + 1 :])
        results.extend(apply(left, right) for left in lefts for right in rights)
    if not results:
        results.append(_parse_leading_int(expression))
    return tuple(results)


def diff_ways_to_compute(expression):
    """Every value ``expression`` can take under each way of parenthesising it.

    Division and remainder truncate toward zero; an operand that is not a
    number counts as zero.
    """
    return list(_ways(expression))