# dsakit

A small collection of classic data structures and algorithms, written in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.sorting`

- `heap_sort(items)`, `radix_sort(items)` and `quick_sort(items)` each return a new list holding the items in ascending order. The input is not modified.
- `radix_sort` takes integers only. It raises `TypeError` for non-integers and `ValueError` for negative numbers.
- `heapify(items, size, root)` sifts one element down inside a max-heap. `partition(items, low, high)` partitions `items[low:high]` around its first element and returns the pivot's final index. Both modify the list they are given.
- `write_numbers(path, numbers)` writes integers to a text file, each one followed by a space.
- `read_numbers(path, count=None)` reads whitespace-separated integers back from a file. When `count` is given, it returns exactly that many and raises `ValueError` if the file holds fewer.

### `dsakit.arrays`

- `first_odd_occurrence(items)` returns the first item that occurs an odd number of times. It returns `None` if there is no such item.
- `sieve_of_eratosthenes(limit)` returns the primes up to and including `limit`.

### `dsakit.min_stack`

`MinStack` is a stack that reports its minimum in constant time.

- `push(value)` adds a value.
- `pop()` removes and returns the top value.
- `top()` returns the top value without removing it.
- `get_min()` returns the smallest value, or `None` when the stack is empty.
- `pop()` and `top()` raise `IndexError` on an empty stack.
- `len()` gives the number of values on the stack.

### `dsakit.graphs`

- `Edge(source, target, weight=0)` is a frozen dataclass for a directed, weighted edge.
- `bellman_ford(vertex_count, edges, source)` returns a list of shortest distances from `source`. Vertices that cannot be reached get `math.inf`. It raises `NegativeCycleError`, a subclass of `ValueError`, when a negative-weight cycle can be reached.
- `kruskal_mst(vertex_count, edges)` returns a `(total_weight, chosen_edges)` pair for a minimum spanning forest. Edges are taken by weight, and ties are broken by target vertex.
- `bellman_ford` and `kruskal_mst` raise `ValueError` for a vertex outside `0..vertex_count-1`.
- `is_reachable(adjacency, source, target)` runs a breadth-first search over a mapping from each vertex to its neighbours.
- `has_path(target, edges)` tells whether `target` can be reached from vertex 1 along a list of `(start, end)` pairs.

### `dsakit.linked_list`

`LinkedList` is a singly linked list of `Node` objects. Its operations move nodes by relinking them rather than copying data.

Building and reading a list:

- `LinkedList.from_iterable(values)` builds a list in the given order.
- `push_front(value)` inserts a value at the head.
- A list supports iteration, `len()` and `repr()`.

Rearranging nodes:

- `swap_nodes(x, y)` swaps the first nodes holding `x` and `y`. Nothing changes if the two values are equal or either one is missing.
- `rotate(k)` makes the `k+1`-th node the new head. The list is left alone when `k` is 0 or at least the length of the list. A negative `k` raises `ValueError`.
- `detect_and_remove_loop()` finds a cycle using Floyd's method, cuts it, and returns whether one existed.
- `reverse_between(start, end)` reverses the nodes at 1-based positions `start` through `end`. Invalid positions raise `ValueError`.

Looking up and removing values:

- `middle()` returns the middle value. With an even number of nodes it returns the second of the two middles. An empty list raises `IndexError`.
- `remove_nth_from_end(n)` removes the `n`-th node from the end and returns its value. If `n` is at least the length of the list, it removes the head instead.

### `dsakit.trees`

- `TreeNode(data, left=None, right=None)` is a binary tree node.
- `build_level_order(values)` builds a tree from values given in level order. A `-1` or `None` marks a missing child. It raises `ValueError` if the values run out before every node's children have been given.
- `level_order_lines(root)` describes each node in level order as a string such as `"4:L2R6"`.
- `bst_contains(root, value)` searches a binary search tree.

## Example

```python
from dsakit.sorting import heap_sort
from dsakit.min_stack import MinStack
from dsakit.trees import build_level_order, bst_contains

print(heap_sort([12, 11, 13, 5, 6, 7]))  # [5, 6, 7, 11, 12, 13]

stack = MinStack()
for value in (5, 3, 8):
    stack.push(value)
print(stack.get_min())  # 3

root = build_level_order([4, 2, 6, 1, 3, 5, 7] + [-1] * 8)
print(bst_contains(root, 5))  # True
```

## What it does not do

dsakit is a library only:

- It has no command-line program and no interactive prompts.
- Input is passed to the functions directly.
- Results are returned rather than printed.