# algokit

A collection of classic algorithms in pure Python, with no runtime
dependencies. It covers binary trees, graphs and grids, dynamic programming,
strings, arrays, heaps and bit manipulation. Every algorithm is a plain
function (or a small class) that takes ordinary Python values and returns a
result.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.nodes`: the node types `TreeNode`, `ListNode` and `NextNode`
  (a tree node with a `next` pointer), and helpers to build and flatten them:
  `build_tree` and `tree_values` work with level-order lists where `None`
  marks a missing child; `build_linked_list` and `linked_list_values` work
  with plain lists.
- `algokit.tree_traversal`: `level_order`, `zigzag_level_order`,
  `preorder_traversal`, `postorder_traversal`, `right_side_view`, `connect`
  (links each node of a perfect tree to its right neighbour) and
  `BSTIterator`, an ascending iterator over a search tree with `next()`,
  `has_next()` and the Python iterator protocol.
- `algokit.tree_construction`: `build_from_preorder_inorder`,
  `build_from_inorder_postorder` and `sorted_array_to_bst`.
- `algokit.tree_properties`: `is_symmetric`, `max_depth`, `is_balanced`,
  `max_path_sum`, `is_sub_path`, `max_sum_bst`, `count_nodes` (complete
  trees), `kth_smallest`, `lowest_common_ancestor_bst`,
  `lowest_common_ancestor`, `evaluate_boolean_tree` and `tree_queries`
  (tree height after removing each queried subtree).
- `algokit.heaps`: `find_kth_largest`, `smallest_chair`, `max_k_elements`
  and `min_groups`.
- `algokit.dynamic_programming`: `shortest_common_supersequence`,
  `longest_common_subsequence`, `num_distinct`, `minimum_total`,
  `count_squares`, `longest_palindrome_subsequence`, `min_insertions`,
  `rob`, `rob_circular`, `minimum_mountain_removals` and
  `minimum_difference`.
- `algokit.bits`: `XorTrie` (insert 32-bit numbers, `find_max` for the
  largest XOR), `xor_queries`, `find_kth_bit`, `maximize_xor`,
  `get_maximum_xor`, `wonderful_substrings`, `min_bit_flips`,
  `largest_combination` and `max_equal_rows_after_flips`.
- `algokit.strings`: `parse_bool_expr`, `remove_subfolders`,
  `find_the_longest_substring`, `max_unique_split`, `largest_number`,
  `are_sentences_similar`, `get_lucky`, `make_fancy_string`, `min_swaps`,
  `shortest_palindrome`, `diff_ways_to_compute`, `is_circular_sentence`,
  `take_characters` and `count_consistent_strings`.
- `algokit.graphs`: `num_enclaves`, `capture_surrounded_regions` (changes
  the board in place), `ladder_length`, `minimum_effort_path`,
  `num_islands`, `can_finish`, `find_order`, `count_unguarded`,
  `minimum_obstacles`, `get_maximum_gold` and `rotate_the_box`.
- `algokit.arrays`: `can_arrange`, `find_length_of_shortest_subarray`,
  `min_subarray`, `decrypt`, `chalk_replacer`, `max_matrix_sum`,
  `missing_rolls`, `minimized_maximum`, `maximum_beauty`, `spiral_matrix`,
  `longest_subarray`, `maximum_subarray_sum`, `divide_players` and
  `longest_square_streak`.

Where an input has no meaningful answer (for example an empty tree for
`max_path_sum`, or `k` out of range for `kth_smallest`), the functions raise
`ValueError` or `IndexError` rather than returning a sentinel.

## Example

```python
from algokit.nodes import build_tree
from algokit.tree_traversal import level_order, BSTIterator
from algokit.strings import parse_bool_expr

root = build_tree([4, 2, 6, 1, 3, 5, 7])
print(level_order(root))        # [[4], [2, 6], [1, 3, 5, 7]]
print(list(BSTIterator(root)))  # [1, 2, 3, 4, 5, 6, 7]

print(parse_bool_expr("&(t,|(f,t))"))  # True
```

## What it does not do

algokit is a library only: it has no command-line tool. It offers no
general-purpose stack or queue containers; use `list` and
`collections.deque` for those.