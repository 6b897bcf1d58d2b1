"""Puzzles over integer sequences: sums, ranks, rotations and in-place rearrangements."""

import heapq
from functools import cmp_to_key, reduce
from itertools import accumulate, combinations, pairwise
from operator import mul, xor


def two_sum(nums, target):
    """Indices ``[i, j]`` with ``i < j`` of the first pair adding up to ``target``."""
    for (i, first), (j, second) in combinations(enumerate(nums), 2):
        if first + second == target:
            return [i, j]
    raise ValueError("no two numbers add up to the target")


def max_profit(prices):
    """Best gain from buying on one day and selling on a later one; 0 if none."""
    if not prices:
        raise ValueError("prices must not be empty")
    best = 0
    lowest = prices[0]
    for price in prices[1:]:
        best = max(best, price - lowest)
        lowest = min(lowest, price)
    return best


def array_rank_transform(arr):
    """Replace each value by its rank among the distinct values, starting at 1."""
    ranks = {value: rank for rank, value in enumerate(sorted(set(arr)), start=1)}
    return [ranks[value] for value in arr]


def single_number(nums):
    """The value that appears an odd number of times when all others pair up."""
    return reduce(xor, nums, 0)


def min_subarray(nums, p):
    """Length of the shortest run whose removal leaves a sum divisible by ``p``.

    Returns 0 if the sum is already divisible and -1 if only removing
    everything would do.
    """
    if p <= 0:
        raise ValueError("p must be positive")
    remainder = sum(nums) % p
    if remainder == 0:
        return 0
    last_seen = {0: -1}
    shortest = len(nums)
    running = 0
    for i, num in enumerate(nums):
        running = (running + num) % p
        wanted = (running - remainder) % p
        if wanted in last_seen:
            shortest = min(shortest, i - last_seen[wanted])
        last_seen[running] = i
    return -1 if shortest == len(nums) else shortest


def majority_element(nums):
    """The element holding a strict majority of ``nums`` (Boyer-Moore vote)."""
    candidate = 0
    count = 0
    for num in nums:
        if count == 0:
            candidate = num
        count += 1 if num == candidate else -1
    return candidate


def rotate(nums, k):
    """Rotate ``nums`` right by ``k`` places, in place."""
    if not nums:
        return
    k %= len(nums)
    if k:
        nums[:] = nums[-k:] + nums[:-k]


def product_except_self(nums):
    """For each position, the product of every other element."""
    if not nums:
        return []
    prefix = accumulate(nums[:-1], mul, initial=1)
    suffix = list(accumulate(reversed(nums[1:]), mul, initial=1))[::-1]
    return [before * after for before, after in zip(prefix, suffix)]


def is_prime(num):
    """True if ``num`` is a prime number."""
    if num <= 1:
        return False
    if num in (2, 3):
        return True
    if num % 2 == 0 or num % 3 == 0:
        return False
    candidate = 5
    while candidate * candidate <= num:
        if num % candidate == 0 or num % (candidate + 2) == 0:
            return False
        candidate += 6
    return True


def is_strictly_increasing(nums):
    """True if every element is greater than the one before it."""
    return all(a < b for a, b in pairwise(nums))


def prime_sub_operation(nums):
    """True if subtracting a prime below each element can make ``nums`` strictly increasing.

    Each element, left to right, loses the largest prime that keeps it above
    its predecessor. ``nums`` itself is left unchanged.
    """
    values = list(nums)
    if is_strictly_increasing(values):
        return True
    for i, value in enumerate(values):
        previous = values[i - 1] if i else None
        prime = next(
            (
                candidate
                for candidate in range(value - 1, 1, -1)
                if is_prime(candidate) and (previous is None or value - candidate > previous)
            ),
            None,
        )
        if prime is not None:
            values[i] = value - prime
        if previous is not None and values[i] < previous:
            return False
        if is_strictly_increasing(values):
            return True
    return False


def remove_element(nums, val):
    """Move the elements not equal to ``val`` to the front, in place; return their count.

    Positions past the returned count keep whatever they held before.
    """
    kept = [num for num in nums if num != val]
    nums[: len(kept)] = kept
    return len(kept)


def plus_one(digits):
    """Add one to the number whose decimal digits are ``digits``, most significant first."""
    result = list(digits)
    for i in reversed(range(len(result))):
        if result[i] < 9:
            result[i] += 1
            return result
        result[i] = 0
    return [1, *result]


def sort_colors(nums):
    """Sort a sequence of 0s, 1s and 2s in place in one pass (Dutch national flag)."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 2:
            nums[mid], nums[high] = nums[high], 2
            high -= 1
        elif nums[mid] == 0:
            nums[mid], nums[low] = nums[low], 0
            low += 1
            mid += 1
        else:
            mid += 1


def merge_sorted(nums1, m, nums2, n):
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    if len(nums1) < m + n:
        raise ValueError("nums1 has no room for the merged result")
    if len(nums2) < n:
        raise ValueError("nums2 holds fewer than n elements")
    nums1[: m + n] = heapq.merge(nums1[:m], nums2[:n])


def _concat_order(a, b):
    return (a + b < b + a) - (a + b > b + a)


def largest_number(nums):
    """The largest number, as text, formed by concatenating ``nums`` in some order."""
    if not nums:
        raise ValueError("nums must not be empty")
    texts = sorted(map(str, nums), key=cmp_to_key(_concat_order))
    return "".join(texts).lstrip("0") or "0"