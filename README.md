# algobox

A small library of well-known algorithm solutions, written as plain Python
functions and a few compact data structures. It depends only on the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.tree` | `TreeNode`, `max_depth`, `path_sum` |
| `algobox.bfs` | `min_jumps`, `oranges_rotting` |
| `algobox.subsequences` | `max_palindrome_product` |
| `algobox.greedy` | `two_city_sched_cost`, `candy`, `maximum_swap` |
| `algobox.hashing` | `subarray_sum` |
| `algobox.heaps` | `top_k_frequent`, `least_interval` |
| `algobox.recursion` | `check_move`, `generate_parenthesis`, `kth_grammar` |
| `algobox.linked_list` | `ListNode` (with `ListNode.from_iterable` and iteration), `add_two_numbers` |
| `algobox.sets` | `longest_consecutive`, `has_all_codes`, `find_repeated_dna_sequences`, `count_palindromic_subsequence`, `find_difference`, `distinct_names` |
| `algobox.sorting` | `rank_teams`, `largest_number` |
| `algobox.stacks` | `CustomStack`, `MinStack`, `QueueStack` |
| `algobox.brackets` | `min_swaps`, `is_valid`, `calculate`, `decode_string`, `score_of_parentheses`, `remove_duplicates`, `remove_stars` |
| `algobox.stack_problems` | `eval_rpn`, `find_132_pattern`, `cal_points`, `simplify_path`, `asteroid_collision`, `car_fleet` |

## Examples

```python
from algobox.brackets import decode_string, is_valid
from algobox.linked_list import ListNode, add_two_numbers
from algobox.stacks import MinStack
from algobox.stack_problems import simplify_path

decode_string("3[a]2[bc]")        # "aaabcbc"
is_valid("([]{})")                # True
simplify_path("/a/./b/../../c/")  # "/c"

total = add_two_numbers(ListNode.from_iterable([2, 4, 3]),
                        ListNode.from_iterable([5, 6, 4]))
list(total)                       # [7, 0, 8]

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                   # 1
```

## Behaviour worth knowing

- Functions take ordinary Python lists and strings and return new values;
  `oranges_rotting` works on a copy of the grid it is given.
- `top_k_frequent` returns values ordered from least to most frequent.
- `find_difference` and `find_repeated_dna_sequences` keep the order in which
  values first appear.
- `eval_rpn` truncates division toward zero.
- Malformed input, such as an unbalanced expression for `calculate` or
  `decode_string`, an operator without operands for `eval_rpn`, or mismatched
  votes for `rank_teams`, raises `ValueError`.
- `CustomStack.pop` returns `-1` when the stack is empty and `push` ignores
  values once `max_size` is reached; `MinStack` and `QueueStack` raise
  `IndexError` when read or popped while empty.

## What it does not do

algobox is a library only: it has no command-line program, and nothing is
stored or read from files.