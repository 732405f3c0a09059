# algosuite

Well-known algorithms in plain Python, grouped by the kind of data they
work on. It needs nothing outside the standard library and supports
Python 3.10 and later.

## Installation

```
pip install .
```

With the test tools:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algosuite.arrays` | `two_sum`, `three_sum`, `max_profit`, `max_profit_unlimited`, `max_operations`, `max_subarray`, `trap`, `search_rotated`, `next_permutation`, `find_gcd`, `find_kth_largest`, `find_closest_elements`, `find_132_pattern`, `find_unsorted_subarray`, `contains_duplicate`, `minimum_card_pickup`, `sort_array_by_parity` |
| `algosuite.strings` | `defang_ip_address`, `remove_duplicates`, `is_valid_parentheses`, `apply_backspaces`, `backspace_compare`, `group_anagrams` |
| `algosuite.linked_lists` | `ListNode`, `build_list`, `list_values`, `add_two_numbers`, `remove_nth_from_end`, `merge_two_lists`, `swap_pairs`, `has_cycle`, `detect_cycle`, `get_intersection_node`, `reverse_list`, `is_palindrome`, `delete_node`, `delete_duplicates`, `swap_nodes` |
| `algosuite.trees` | `TreeNode`, `LinkedTreeNode`, `build_tree`, `build_linked_tree`, `is_same_tree`, `max_depth`, `connect`, `deepest_leaves_sum`, `preorder_traversal`, `inorder_traversal`, `postorder_traversal` |
| `algosuite.structures` | `QueueStack`, `NumMatrix`, `NestedIterator` |
| `algosuite.backtracking` | `palindrome_partitions`, `letter_combinations`, `combination_sum`, `combination_sum2`, `combination_sum3`, `generate_parentheses`, `permutations`, `unique_permutations`, `solve_n_queens`, `subsets`, `subsets_with_dup`, `count_vowel_strings` |
| `algosuite.graphs` | `network_delay_time` |

## Examples

```python
from algosuite.arrays import two_sum, three_sum, max_subarray
from algosuite.strings import backspace_compare, group_anagrams
from algosuite.linked_lists import build_list, list_values, reverse_list
from algosuite.trees import build_tree, inorder_traversal, max_depth
from algosuite.structures import QueueStack, NumMatrix, NestedIterator
from algosuite.backtracking import generate_parentheses, subsets
from algosuite.graphs import network_delay_time

two_sum([2, 7, 11, 15], 9)                      # [0, 1]
three_sum([-1, 0, 1, 2, -1, -4])                # [[-1, -1, 2], [-1, 0, 1]]
max_subarray([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6

backspace_compare("ab#c", "ad#c")               # True
group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"])
# [["eat", "tea", "ate"], ["tan", "nat"], ["bat"]]

head = build_list([1, 2, 3])
list_values(reverse_list(head))                 # [3, 2, 1]

root = build_tree([3, 9, 20, None, None, 15, 7])
inorder_traversal(root)                         # [9, 3, 15, 20, 7]
max_depth(root)                                 # 3

stack = QueueStack()
stack.push(1)
stack.push(2)
stack.pop()                                     # 2

NumMatrix([[1, 2], [3, 4]]).sum_region(0, 0, 1, 1)  # 10
list(NestedIterator([1, [2, [3, 4]], 5]))       # [1, 2, 3, 4, 5]

generate_parentheses(2)                         # ["(())", "()()"]
subsets([1, 2])                                 # [[], [1], [2], [1, 2]]

network_delay_time([[2, 1, 1], [2, 3, 1], [3, 4, 1]], 4, 2)  # 2
```

## Notes on behaviour

- Trees are built from level-order lists in which `None` marks a missing
  child. `build_linked_tree` builds `LinkedTreeNode` nodes, whose `next`
  pointers `connect` fills in level by level.
- Linked lists are built from any iterable; iterating a `ListNode` yields
  the values from that node to the end of the list.
- Functions that change a list or sequence in place say so:
  `next_permutation`, `reverse_list`, `swap_pairs`, `delete_node`,
  `delete_duplicates`, `swap_nodes` and `merge_two_lists` (which splices
  the existing nodes).
- Input that has no answer raises rather than returning a marker: for
  example `two_sum` raises `ValueError` when no pair matches,
  `max_profit` and `max_subarray` reject empty input, `delete_node` refuses
  the tail node, and `QueueStack.pop`/`top` raise `IndexError` on an empty
  stack. Functions whose answer is naturally "not found"
  (`search_rotated`, `minimum_card_pickup`, `network_delay_time`) return -1.
- `NestedIterator` treats lists and tuples as nesting and anything else as
  a value.

## What it does not do

This is a library only: it has no command-line program, and it does not
read or write files.