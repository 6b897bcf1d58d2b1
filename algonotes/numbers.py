"""Puzzles over integers: palindromes, Roman numerals and digit tricks."""

_ROMAN_TABLE = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_INT_MAX = 2**31 - 1
_INT_MIN = -(2**31)
# Bounds of a 32-bit reversal before one more digit is appended.
_REV_HIGH = _INT_MAX // 10
_REV_LOW = -(-_INT_MIN // 10)


def is_palindrome_number(x):
    """Return True if the decimal text of ``x`` reads the same both ways."""
    text = str(x)
    return text == text[::-1]


def int_to_roman(num):
    """Write ``num`` in Roman numerals; zero and negatives give an empty string."""
    parts = []
    for value, symbol in _ROMAN_TABLE:
        if num == 0:
            break
        if num >= value:
            count, num = divmod(num, value)
            parts.append(symbol * count)
    return "".join(parts)


def roman_to_int(s):
    """Read a Roman numeral; characters that are not numerals count as zero."""
    total = 0
    previous = 0
    for char in reversed(s):
        value = _ROMAN_VALUES.get(char, 0)
        total += -value if value < previous else value
        previous = value
    return total


def reverse_integer(x):
    """Reverse the digits of ``x``, giving 0 when the result leaves 32-bit range."""
    reversed_value = 0
    while x:
        if reversed_value < _REV_LOW or reversed_value > _REV_HIGH:
            return 0
        quotient = abs(x) // 10
        if x < 0:
            quotient = -quotient
        digit = x - quotient * 10
        reversed_value = reversed_value * 10 + digit
        x = quotient
    return reversed_value


def fib(n):
    """Return the ``n``-th Fibonacci number, with fib(0) == 0 and fib(1) == 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def maximum_swap(num):
    """Largest number reachable from ``num`` by swapping at most two digits."""
    if num < 0:
        raise ValueError("num must not be negative")
    digits = str(num)
    best = num
    max_index = len(digits) - 1
    for i in range(len(digits) - 2, -1, -1):
        if digits[max_index] > digits[i]:
            swapped = list(digits)
            swapped[i], swapped[max_index] = swapped[max_index], swapped[i]
            best = max(best, int("".join(swapped)))
        elif digits[max_index] < digits[i]:
            max_index = i
    return best


def min_end(n, x):
    """Last element of the smallest strictly increasing run of ``n`` numbers whose AND is ``x``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if x < 0:
        raise ValueError("x must not be negative")
    result = x
    remaining = n - 1
    bit = 1
    while remaining:
        if not x & bit:
            if remaining & 1:
                result |= bit
            remaining >>= 1
        bit <<= 1
    return result