# dsakit

A small collection of classic algorithms and data structures written in plain
Python, with no runtime dependencies.

## Installation

```
pip install dsakit
```

## What is inside

- `dsakit.sorting`: `bubble_sort` (descending order), `heap_sort`,
  `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` (ascending
  order). Each one takes any iterable, returns a new list and leaves its
  input alone.
- `dsakit.searching`: `linear_search`, `binary_search`, `fibonacci_search`
  (the last two on an ascending sequence) and `search_rotated` for an
  ascending sequence of distinct items that has been rotated. Each returns
  the index of the key, or `None` if the key is absent.
- `dsakit.numbers`: `factorial` (1 for any `n` of 1 or less), `fibonacci`
  (any `n` of 1 or less is returned as is) and `reverse_digits` (0 for any
  `n` of 0 or less).
- `dsakit.arrays`:
  - `has_pair_with_sum` and `has_pair_with_sum_sorted`: whether two
    positions add up to a target.
  - `majority_element`: the item occurring more than half the time, or
    `None`.
  - `majority_third` and `majority_third_brute`: the items occurring more
    than a third of the time, as a list.
  - `max_subarray_sum`: the largest sum of a non-empty contiguous run;
    raises `ValueError` on an empty input.
  - `merge_sorted`: merges two ascending sequences.
  - `find_missing` and `find_missing_brute`: the number from `1..n+1` that
    is absent.
  - `product_except_self`, `second_largest` (or `None`), `max_profit`
    (best single buy then sell, or 0).
  - `rotate_left_one`, `rotate_left` (raises `ValueError` unless
    `0 <= places <= len(values)`) and `remove_duplicates` (collapses runs
    of equal neighbours). These return new lists.
- `dsakit.stack`: `Stack`, backed by a list, and `LinkedStack`, backed by
  linked nodes. Both offer `push`, `pop`, `peek` and `len()`; `pop` and
  `peek` raise `IndexError` on an empty stack.
- `dsakit.linked_list`: a singly linked `LinkedList` of `Node` objects, with
  1-based positions. It can be built from an iterable and offers
  `insert_at_head`, `insert_at_tail`, `insert_at`, `delete_at`, `clear`,
  `reverse`, iteration, `len()` and `str()`.

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search
from dsakit.arrays import max_subarray_sum, rotate_left
from dsakit.linked_list import LinkedList
from dsakit.stack import Stack

values = merge_sort([5, 2, 9, 1])        # [1, 2, 5, 9]
binary_search(values, 5)                 # 2
binary_search(values, 4)                 # None
max_subarray_sum([22, -23, 45, 12, 7])   # 64
rotate_left([1, 2, 3, 4, 5], 2)          # [3, 4, 5, 1, 2]

items = LinkedList()
items.insert_at_head(10)
items.insert_at_tail(20)
items.insert_at_tail(30)
items.insert_at(2, 15)
str(items)                               # "10 -> 15 -> 20 -> 30 -> NULL"
items.delete_at(3)
list(items)                              # [10, 15, 30]
items.reverse()
list(items)                              # [30, 15, 10]

stack = Stack()
stack.push(10)
stack.push(20)
stack.peek()                             # 20
stack.pop()                              # 20
len(stack)                               # 1
```

## What it does not do

This is a library only: it has no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```