# algokit

Short solutions to classic algorithm exercises, written as plain Python
functions. The package has no runtime dependencies and needs Python 3.10 or
later.

## Installation

```
pip install algokit
```

To run the test suite, install the test extra and run pytest:

```
pip install "algokit[test]"
pytest
```

## Modules

- `algokit.numbers`: `add`, `alternate_digit_sum`, `distinct_integers`,
  `fib`, `fizz_buzz`, `count_odds`, `number_of_steps`,
  `subtract_product_and_sum`, `array_sign` and `single_number`.
- `algokit.strings`: `is_alien_sorted`, `make_strings_equal`,
  `gcd_of_strings`, `to_lower_case` (ASCII letters only),
  `min_flips_mono_incr`, `is_palindrome`, `palindrome_partitions`,
  `restore_ip_addresses` and `reverse_string`.
- `algokit.structures`: the `ListNode` and `TreeNode` dataclasses, with
  `ListNode.from_values` and `ListNode.values` for building and reading
  lists, and the functions `middle_node`, `preorder_traversal` and
  `is_same_tree`.
- `algokit.graphs`: `find_judge`, `min_time` (the time to collect every
  apple in a tree starting and ending at vertex 0) and `snakes_and_ladders`.
- `algokit.arrays`: `average_salary`, `max_profit`,
  `can_make_arithmetic_progression`, `intersection`, `largest_perimeter`,
  `nearest_valid_point`, `put_marbles`, `diagonal_sum`,
  `max_subarray_sum_circular`, `get_common`, `move_zeroes`,
  `maximum_wealth`, `running_sum`, `sort_the_students`,
  `subarrays_div_by_k` and `two_sum`.

Functions that cannot give a meaningful answer for their input raise
`ValueError` (for example `fib` with a negative number, `average_salary`
with fewer than three salaries, or `restore_ip_addresses` with a non-digit).
`reverse_string` and `move_zeroes` change the list they are given in place
and return `None`.

## Examples

```python
from algokit.numbers import fib, fizz_buzz
from algokit.strings import restore_ip_addresses
from algokit.structures import ListNode, middle_node
from algokit.arrays import two_sum

fib(10)                          # 55
fizz_buzz(5)                     # ['1', '2', 'Fizz', '4', 'Buzz']
restore_ip_addresses("25525511135")
# ['255.255.11.135', '255.255.111.35']

head = ListNode.from_values([1, 2, 3, 4, 5])
middle_node(head).values()       # [3, 4, 5]

two_sum([2, 7, 11, 15], 9)       # [0, 1]
```

## What it does not do

algokit is a library only: it has no command-line program and reads no
input of its own. Call the functions from your own code.