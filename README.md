# algosuite

A library of compact solutions to classic algorithm problems, organised by
theme. It is plain Python and has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `algosuite.arrays`: array puzzles such as `two_sum`, `sort_colors`,
  `product_except_self`, `pivot_array`, `max_task_assign`, `subset_xor_sum`,
  `min_domino_rotations`, `maximum_triplet_value` and `min_sum`.
- `algosuite.strings`: `longest_palindrome`, `count_and_say`,
  `is_subsequence`, `push_dominoes`, `merge_alternately`, `smallest_number`,
  `count_of_substrings`, `length_after_transformations` and
  `length_after_custom_transformations`, among others.
- `algosuite.subarrays`: sliding-window, prefix and difference-array
  techniques: `min_sub_array_len`, `count_good`, `count_fair_pairs`,
  `count_complete_subarrays`, `number_of_alternating_groups`,
  `is_zero_array`, `min_zero_array`, `max_removal`, and the
  `ProductOfNumbers` stream with its `add` and `get_product` methods.
- `algosuite.dynamic`: dynamic programming: `jump`, `climb_stairs`, `rob`,
  `rob_circular`, `can_partition`, `combination_sum4`, `num_tilings`,
  `max_compatibility_sum`, `most_points`, `get_words_in_longest_subsequence`
  and more.
- `algosuite.graphs`: `can_finish`, `find_order`, `find_min_height_trees`,
  `eventual_safe_nodes`, `snakes_and_ladders`, `check_if_prerequisite`,
  `largest_path_value`, `count_paths`, `closest_meeting_node`,
  `max_target_nodes` and `max_target_nodes_parity`.
- `algosuite.grids`: `unique_paths`, `unique_paths_with_obstacles`,
  `min_path_sum`, `set_zeroes`, `max_points`,
  `find_missing_and_repeated_values`, `min_time_to_reach` and
  `min_time_to_reach_alternating`.
- `algosuite.trees`: the `TreeNode` and `Node` dataclasses with
  `is_same_tree`, `level_order`, `zigzag_level_order`, `level_order_bottom`,
  `connect`, `max_depth` and `lca_deepest_leaves`.
- `algosuite.arithmetic`: `my_pow`, `generate` and `get_row` (Pascal's
  triangle), `is_power_of_three`, `count_bits`, `closest_primes`,
  `count_symmetric_integers`, `number_of_powerful_int`, `triangle_type`,
  `count_good_integers` and more.

## Examples

```python
from algosuite.arrays import two_sum
from algosuite.strings import longest_palindrome
from algosuite.trees import TreeNode, level_order
from algosuite.subarrays import ProductOfNumbers

two_sum([2, 7, 11, 15], 9)          # [0, 1]
longest_palindrome("babad")         # "bab"

root = TreeNode(3, TreeNode(9), TreeNode(20, TreeNode(15), TreeNode(7)))
level_order(root)                   # [[3], [9, 20], [15, 7]]

stream = ProductOfNumbers()
for value in (3, 0, 2, 5, 4):
    stream.add(value)
stream.get_product(2)               # 20
```

## Behaviour notes

- `set_zeroes` and `sort_colors` modify the list they are given and return
  `None`. `connect` sets the `next` pointers of the `Node` tree it is given.
- Where an answer does not exist, most functions return a sentinel as their
  docstrings describe: `-1`, `0`, `[]` or `[-1, -1]`.
- A few functions raise `ValueError` instead: `jump` when the last index
  cannot be reached, `max_sub_array` on an empty sequence,
  `minimize_the_difference` when no reachable sum lies in its searched range,
  and `find_missing_and_repeated_values` when the grid has no repeated value.

## What it does not do

The package is a library only. It has no command-line tool, reads no input
files and keeps no state beyond the `ProductOfNumbers` object you create.