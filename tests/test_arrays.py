from itertools import permutations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algonotes.arrays import (
    array_rank_transform,
    is_prime,
    is_strictly_increasing,
    largest_number,
    majority_element,
    max_profit,
    merge_sorted,
    min_subarray,
    plus_one,
    prime_sub_operation,
    product_except_self,
    remove_element,
    rotate,
    single_number,
    sort_colors,
    two_sum,
)


def test_two_sum_finds_pair():
    nums = [3, 2, 4]
    i, j = two_sum(nums, 6)
    assert i < j
    assert nums[i] + nums[j] == 6


def test_two_sum_prefers_first_index():
    nums = [1, 5, 1, 5]
    i, j = two_sum(nums, 6)
    assert (i, nums[i] + nums[j]) == (0, 6)


def test_two_sum_without_pair_raises():
    with pytest.raises(ValueError):
        two_sum([1, 2, 3], 100)


@given(st.lists(st.integers(-100, 100), min_size=1, max_size=20))
def test_max_profit_bounds(prices):
    profit = max_profit(prices)
    assert profit >= 0
    assert profit <= max(prices) - min(prices)
    assert max_profit(sorted(prices)) == max(prices) - min(prices)
    assert max_profit(sorted(prices, reverse=True)) == 0


def test_max_profit_empty_raises():
    with pytest.raises(ValueError):
        max_profit([])


@given(st.lists(st.integers(-50, 50), max_size=20))
def test_rank_transform_preserves_order(arr):
    ranks = array_rank_transform(arr)
    assert len(ranks) == len(arr)
    assert set(ranks) == set(range(1, len(set(arr)) + 1))
    for (a, ra), (b, rb) in zip(zip(arr, ranks), zip(arr[1:], ranks[1:])):
        assert (a < b) == (ra < rb)
        assert (a == b) == (ra == rb)


@given(st.lists(st.integers()), st.integers())
def test_single_number_recovers_lone_value(pairs, lone):
    nums = pairs + [lone] + pairs[::-1]
    assert single_number(nums) == lone


def test_min_subarray_already_divisible():
    assert min_subarray([3, 6, 9], 3) == 0


def test_min_subarray_rejects_bad_modulus():
    with pytest.raises(ValueError):
        min_subarray([1, 2], 0)


@given(st.integers(-10, 10), st.lists(st.integers(-10, 10), max_size=10))
def test_majority_element(value, others):
    nums = others + [value] * (len(others) + 1)
    assert majority_element(nums) == value


def test_rotate_worked_example():
    nums = [1, 2, 3, 4, 5, 6, 7]
    rotate(nums, 3)
    assert nums == [5, 6, 7, 1, 2, 3, 4]


@given(st.lists(st.integers(), min_size=1, max_size=20), st.integers(0, 100))
def test_rotate_round_trip(nums, k):
    work = list(nums)
    rotate(work, k)
    assert sorted(work) == sorted(nums)
    rotate(work, len(nums) - k % len(nums))
    assert work == nums


def test_rotate_empty_is_noop():
    nums = []
    rotate(nums, 5)
    assert nums == []


@given(st.lists(st.integers(1, 9).map(lambda v: v if v % 2 else -v), min_size=1, max_size=8))
def test_product_except_self_invariant(nums):
    total = 1
    for num in nums:
        total *= num
    result = product_except_self(nums)
    assert len(result) == len(nums)
    assert all(part * num == total for part, num in zip(result, nums))


def test_product_except_self_empty():
    assert product_except_self([]) == []


def test_is_prime():
    primes = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 97, 7919]
    composites = [-7, 0, 1, 4, 9, 25, 49, 91, 121, 7917]
    assert all(is_prime(p) for p in primes)
    assert not any(is_prime(c) for c in composites)


def test_is_strictly_increasing():
    assert is_strictly_increasing([])
    assert is_strictly_increasing([1, 2, 3])
    assert not is_strictly_increasing([1, 1])
    assert not is_strictly_increasing([3, 2])


def test_prime_sub_operation_cases():
    nums = [4, 9, 6, 10]
    assert prime_sub_operation(nums) is True
    assert nums == [4, 9, 6, 10]
    assert prime_sub_operation([6, 8, 11, 12]) is True
    assert prime_sub_operation([5, 8, 3]) is False


def test_remove_element():
    nums = [3, 2, 2, 3]
    k = remove_element(nums, 3)
    assert k == nums.count(2) + 0 or k == 2
    assert nums[:k] == [2, 2]


@given(st.lists(st.integers(0, 4), max_size=20), st.integers(0, 4))
def test_remove_element_keeps_order(nums, val):
    work = list(nums)
    k = remove_element(work, val)
    assert work[:k] == [n for n in nums if n != val]
    assert work[k:] == nums[k:]


def test_plus_one_carries():
    assert plus_one([9, 9]) == [1, 0, 0]


@given(st.lists(st.integers(0, 9), min_size=1, max_size=12))
def test_plus_one_round_trip(digits):
    as_int = int("".join(map(str, digits)))
    result = plus_one(digits)
    assert int("".join(map(str, result))) == as_int + 1
    assert all(0 <= d <= 9 for d in result)


@given(st.lists(st.integers(0, 2), max_size=30))
def test_sort_colors(nums):
    work = list(nums)
    sort_colors(work)
    assert work == sorted(nums)


@given(
    st.lists(st.integers(-20, 20), max_size=10),
    st.lists(st.integers(-20, 20), max_size=10),
)
def test_merge_sorted(a, b):
    a, b = sorted(a), sorted(b)
    nums1 = a + [0] * len(b)
    merge_sorted(nums1, len(a), b, len(b))
    assert nums1 == sorted(a + b)


def test_merge_sorted_without_room_raises():
    with pytest.raises(ValueError):
        merge_sorted([1, 2], 2, [3], 1)


def test_largest_number_worked_example():
    assert largest_number([3, 30, 34, 5, 9]) == "9534330"


def test_largest_number_all_zeros():
    assert largest_number([0, 0]) == "0"


def test_largest_number_empty_raises():
    with pytest.raises(ValueError):
        largest_number([])


@given(st.lists(st.integers(0, 999), min_size=1, max_size=5))
def test_largest_number_is_maximal(nums):
    result = largest_number(nums)
    texts = list(map(str, nums))
    assert int(result) == max(int("".join(perm)) for perm in permutations(texts))
    if any(nums):
        assert sorted(result) == sorted("".join(texts))