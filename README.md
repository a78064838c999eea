# algokit

Plain-Python solutions to well-known algorithm problems, grouped by technique.
The package has no runtime dependencies and needs Python 3.10 or later.

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

| Module | Contents |
| --- | --- |
| `algokit.nodes` | `TreeNode`, `ListNode` (with `ListNode.from_values` and iteration over values), `Node` (a tree node with a `next` link) |
| `algokit.text` | string problems: `is_palindrome`, `reverse_words`, `reverse_words_in_place`, `str_str`, `partition`, `gcd_of_strings`, `shortest_way`, ... |
| `algokit.bits` | `add_binary`, `hamming_weight`, `reverse_bits`, `single_number`, `single_number2`, `is_power_of_four`, `xor_operation` |
| `algokit.arrays` | `three_sum`, `two_sum_sorted`, `max_area`, `max_distance`, `wiggle_sort`, ... |
| `algokit.windows` | sliding windows: `min_sub_array_len`, `find_max_consecutive_ones`, `num_k_len_substr_no_repeats` |
| `algokit.greedy` | `can_complete_circuit`, `jump` |
| `algokit.monotonic` | `next_greater_element`, `remove_k_digits` |
| `algokit.binary_search` | `search_rotated`, `take_attendance`, `search_insert` |
| `algokit.linked_lists` | `reverse_list`, `merge_two_lists`, `merge_k_lists`, `sort_list`, `reorder_list`, `rotate_right`, `has_cycle`, ... |
| `algokit.containers` | `LRUCache`, `MyQueue` (a queue built from two stacks), `SyncMap` (a lock-guarded mapping) |
| `algokit.intervals` | `merge_intervals`, `can_attend_meetings`, `min_meeting_rooms`, `overlap` |
| `algokit.trees` | `build_tree`, `build_tree_from_postorder`, `connect`, `flatten`, `invert_tree`, `lowest_common_ancestor`, `sorted_array_to_bst`, ... |
| `algokit.tree_search` | `average_of_levels`, `closest_value`, `closest_k_values`, `max_path_sum`, `right_side_view`, `is_unival_tree` |
| `algokit.hashing` | `two_sum`, `group_anagrams`, `longest_consecutive`, `summary_ranges`, `word_pattern`, ... |
| `algokit.sorting` | `quick_sort`, `quick_sort_lomuto`, `find_kth_largest`, `counting_sort_naive`, `simple_bucket` |
| `algokit.dynamic` | `coin_change`, `longest_palindrome`, `min_distance`, `trap`, `word_break`, `longest_word` |
| `algokit.arithmetic` | `my_sqrt`, `plus_one`, `is_happy`, `day_of_the_week`, `confusing_number`, `div`, `add`, ... |
| `algokit.grid` | `num_islands`, `generate_matrix`, `search_matrix`, `flip_and_invert_image` |

## Examples

```python
from algokit.text import reverse_words, str_str
from algokit.hashing import summary_ranges
from algokit.nodes import ListNode
from algokit.linked_lists import sort_list
from algokit.containers import LRUCache, MyQueue

reverse_words("  hello world  ")          # "world hello"
str_str("sadbutsad", "sad")               # 0
summary_ranges([0, 1, 2, 4, 5, 7])        # ["0->2", "4->5", "7"]

head = sort_list(ListNode.from_values([2, 1, 3, 4]))
list(head)                                # [1, 2, 3, 4]

cache = LRUCache(2)
cache.put(1, 1)
cache.put(2, 2)
cache.get(1)                              # 1
cache.put(3, 3)                           # evicts key 2
cache.get(2)                              # -1

queue = MyQueue()
queue.push(1)
queue.push(2)
queue.peek()                              # 1
queue.pop()                               # 1
queue.is_empty()                          # False
```

## In-place operations

Some functions change their input, as the problem they solve demands:
`wiggle_sort`, `reverse_words_in_place`, `quick_sort`, `quick_sort_lomuto`,
`find_kth_largest`, `counting_sort_naive`, `flip_and_invert_image`,
`flatten`, `flip_tree`, `invert_tree`, `connect`, and the linked-list
operations that relink nodes, such as `reorder_list`, `sort_list` and
`rotate_right`. `num_islands` leaves its grid unchanged.

## Errors

Invalid input is reported with exceptions rather than sentinel values where a
result would be meaningless: for example `LRUCache` with a capacity below 1,
`remove_k_digits` with `k` out of range, `find_kth_largest` with `k` out of
range, and `closest_value` or `max_path_sum` on an empty tree raise
`ValueError`; `MyQueue.pop` and `MyQueue.peek` on an empty queue raise
`IndexError`. Functions whose problems define a "not found" answer, such as
`str_str` or `search_rotated`, return -1.

## What it does not include

`algokit` is a library only: it has no command-line interface, and nothing it
computes is stored between calls.