# algokata

Short solutions to well-known programming exercises, written as plain Python
functions. Use it to study and practise: read a solution, call it, and check
your own version against it. It needs nothing beyond the standard library.

## Installation

```
pip install algokata
```

To run the tests:

```
pip install "algokata[test]"
pytest
```

## Modules

- `algokata.numbers`: integer exercises. `is_palindrome_number`, `power`,
  `int_sqrt`, `hamming_weight`, `is_happy`, `is_power_of_two`,
  `is_power_of_three`, `is_power_of_four`, `find_complement`, `fib`,
  `divisor_game`, `subtract_product_and_sum`, `count_odds`, `min_bit_flips`,
  `add`, `smallest_even_multiple`, `count_bits` and `guess_number`.
- `algokata.strings`: `roman_to_int`, `is_valid_parentheses`,
  `is_palindrome_text`, `find_the_difference`, `to_lower_case`,
  `array_strings_are_equal`, `min_partitions`, `percentage_letter` and
  `longest_continuous_substring`.
- `algokata.arrays`: `two_sum`, `remove_element`, `search_insert`,
  `max_subarray`, `plus_one`, `subsets`, `merge_sorted`, `pascal_triangle`,
  `max_profit`, `longest_consecutive`, `contains_duplicate`, `move_zeroes`,
  `find_duplicate`, `binary_search`, `pivot_index`, `peak_index_in_mountain`,
  `sort_by_parity`, `running_sum`, `average_salary`,
  `can_make_arithmetic_progression`, `maximum_wealth`, `sum_of_unique`,
  `array_sign`, `sort_people`, `find_array` and `missing_number`.
- `algokata.linked_lists`: a `ListNode` dataclass (iterating over a node
  yields the values from it to the end of the list), the helpers `build_list`
  and `list_values`, and `add_two_numbers`, `merge_two_lists`, `has_cycle`,
  `get_intersection_node`, `remove_elements`, `is_palindrome_list`,
  `reverse_list`, `delete_middle`, `reverse_k_group`, `delete_duplicates`,
  `middle_node` and `get_decimal_value`.

## Examples

```python
from algokata.numbers import int_sqrt, is_happy
from algokata.strings import roman_to_int, is_valid_parentheses
from algokata.arrays import two_sum, pascal_triangle
from algokata.linked_lists import build_list, list_values, reverse_list

int_sqrt(8)                     # 2
is_happy(19)                    # True
roman_to_int("MCMXCIV")         # 1994
is_valid_parentheses("([]{})")  # True
two_sum([2, 7, 11, 15], 9)      # [0, 1]
pascal_triangle(3)              # [[1], [1, 1], [1, 2, 1]]

head = build_list([1, 2, 3])
list_values(reverse_list(head))  # [3, 2, 1]
```

`guess_number` takes the guessing function as an argument. That function
returns `-1` if the guess is too high, `1` if it is too low and `0` when it
is right. If it never answers `0`, `guess_number` raises `ValueError`:

```python
from algokata.numbers import guess_number

picked = 6
guess_number(10, lambda g: (picked > g) - (picked < g))  # 6
```

## Things to know

- `remove_element`, `merge_sorted`, `move_zeroes` and `plus_one` change the
  list they are given in place. The other array functions leave their input
  alone and return new values.
- The linked-list functions that remove, merge or reverse nodes relink the
  nodes they receive rather than copying them.
- Where an exercise has no answer for some input, the function raises
  instead of returning a marker: for example `max_subarray([])`,
  `average_salary` with fewer than three salaries, `find_duplicate` with no
  repeated value, `delete_middle(None)` and `reverse_k_group` with `k < 1`
  raise `ValueError`. `binary_search` and `pivot_index` return `-1` when
  nothing is found, and `two_sum` returns `[]`.

## What it does not do

This is a library of functions only. It has no command-line program and
reads no input or files of its own.