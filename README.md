# algonotes

A collection of compact solutions to classic algorithm exercises, grouped by
the kind of data they work on. It uses nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algonotes.numbers`: `is_palindrome_number`, `int_to_roman`, `roman_to_int`,
  `reverse_integer` (returns 0 when the result leaves 32-bit range), `fib`,
  `maximum_swap`, `min_end`
- `algonotes.strings`: `is_palindrome_text`, `longest_common_prefix`,
  `make_fancy_string`, `is_anagram`, `is_circular_sentence`, `min_changes`,
  `compressed_string`, `longest_palindrome`, `rotate_string`,
  `shortest_palindrome`, `diff_ways_to_compute`
- `algonotes.search`: `search_rotated`, `search_insert`,
  `peak_index_in_mountain`
- `algonotes.arrays`: `two_sum`, `max_profit`, `array_rank_transform`,
  `single_number`, `min_subarray`, `majority_element`, `rotate`,
  `product_except_self`, `is_prime`, `is_strictly_increasing`,
  `prime_sub_operation`, `remove_element`, `plus_one`, `sort_colors`,
  `merge_sorted`, `largest_number`
- `algonotes.linked_list`: `ListNode` (iterable over its values), `build_list`,
  `to_pylist`, `remove_nth_from_end`, `remove_elements`, `reverse_list`,
  `merge_two_lists`, `is_palindrome_list`, `add_two_numbers`

## Examples

```python
from algonotes.numbers import int_to_roman, roman_to_int
from algonotes.strings import longest_common_prefix, compressed_string
from algonotes.arrays import two_sum, largest_number
from algonotes.linked_list import build_list, to_pylist, reverse_list

int_to_roman(1994)                                   # "MCMXCIV"
roman_to_int("MCMXCIV")                              # 1994
longest_common_prefix(["flower", "flow", "flight"])  # "fl"
compressed_string("aaaaaaaaaaaaaabb")                # "9a5a2b"

two_sum([2, 7, 11, 15], 9)                           # [0, 1]
largest_number([3, 30, 34, 5, 9])                    # "9534330"

to_pylist(reverse_list(build_list([1, 2, 3])))       # [3, 2, 1]
```

## Errors

Where an exercise has no answer for its input, the function raises
`ValueError`: for example `two_sum` when no pair adds up to the target,
`max_profit` and `largest_number` on an empty list, `fib` for a negative
index, `remove_nth_from_end` when `n` is out of range, and `merge_sorted`
when `nums1` has no room for the result.

## Changing data in place

`rotate`, `sort_colors`, `remove_element` and `merge_sorted` change the list
you pass in. `remove_nth_from_end`, `remove_elements`, `reverse_list` and
`merge_two_lists` relink the nodes of the lists they are given.
`plus_one` and `prime_sub_operation` leave their argument unchanged.