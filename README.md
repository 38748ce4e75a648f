# algodrills

Short, well-known algorithm exercises as plain Python functions and small
data structures. There are no runtime dependencies.

## Installation

```
pip install algodrills
```

Install with the `test` extra to get what the test suite needs:

```
pip install "algodrills[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algodrills.nodes` | `ListNode`, `TreeNode`, `GraphNode`, plus the helpers `build_list`, `list_values` and `build_tree` |
| `algodrills.linked_lists` | `add_two_numbers`, `rotate_right`, `reverse_list`, `reorder_list`, `odd_even_list` |
| `algodrills.strings` | `length_of_longest_substring`, `longest_palindrome` |
| `algodrills.arrays` | `reverse_integer`, `three_sum`, `search_rotated`, `max_subarray`, `unique_paths`, `sort_colors`, `rob`, `daily_temperatures` |
| `algodrills.matrix` | `spiral_order`, `set_zeroes`, `oranges_rotting` |
| `algodrills.trees` | `is_valid_bst`, `right_side_view`, `lowest_common_ancestor` |
| `algodrills.graphs` | `clone_graph`, `can_finish` |
| `algodrills.structures` | `MinStack`, `Trie` |

The node classes are dataclasses that compare by identity, so two separate
nodes holding the same value are different nodes.

## Examples

Linked lists store digits in reverse order:

```python
from algodrills.nodes import build_list, list_values
from algodrills.linked_lists import add_two_numbers

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
print(list_values(total))  # [7, 0, 8]
```

Arrays and strings:

```python
from algodrills.arrays import three_sum, daily_temperatures, reverse_integer
from algodrills.strings import length_of_longest_substring

three_sum([-1, 0, 1, 2, -1, -4])                      # [[-1, -1, 2], [-1, 0, 1]]
daily_temperatures([73, 74, 75, 71, 69, 72, 76, 73])  # [1, 1, 4, 2, 1, 1, 0, 0]
length_of_longest_substring("abcabcbb")               # 3
reverse_integer(-123)                                 # -321
```

`reverse_integer` returns 0 when the reversed number falls outside the signed
32-bit range.

Trees are built from a level-order list, with `None` marking a missing child:

```python
from algodrills.nodes import build_tree
from algodrills.trees import right_side_view, is_valid_bst

root = build_tree([1, 2, 3, None, 5, None, 4])
right_side_view(root)                 # [1, 3, 4]
is_valid_bst(build_tree([2, 1, 3]))   # True
```

Data structures:

```python
from algodrills.structures import MinStack, Trie

stack = MinStack()
for value in (-2, 0, -3):
    stack.push(value)
stack.get_min()  # -3
stack.pop()
stack.top()      # 0
stack.get_min()  # -2
len(stack)       # 2

trie = Trie()
trie.insert("apple")
trie.search("app")       # False
trie.starts_with("app")  # True
```

## In place and errors

These change what they are given: `sort_colors` and `set_zeroes` rewrite the
list or grid, and `reorder_list`, `reverse_list`, `rotate_right` and
`odd_even_list` relink the nodes of the list. `oranges_rotting` and `rob`
leave their input unchanged.

Invalid input raises rather than returning a marker value:

- `MinStack.pop`, `MinStack.top` and `MinStack.get_min` raise `IndexError`
  on an empty stack.
- `max_subarray` raises `ValueError` for an empty sequence.
- `unique_paths` raises `ValueError` unless both dimensions are positive.
- `rotate_right` raises `ValueError` for a negative rotation count.
- `can_finish` raises `ValueError` for a course number outside
  `0 .. num_courses - 1`.

## What it does not do

This is a library only: it has no command-line program, and it does not read
problems from files or print results.