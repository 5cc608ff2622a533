# algokit

A collection of classic algorithms and data structures in plain Python.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## What is inside

Strings and sequences

- `algokit.kmp`: `lps` and `lps_naive` compute the prefix function, where each entry is the length of the longest proper prefix that is also a suffix. `count_matches` uses Knuth–Morris–Pratt to count occurrences, overlapping ones included.
- `algokit.bounds`: `lower_bound` and `upper_bound` find positions in a sorted sequence by binary search.
- `algokit.lis`: the longest strictly increasing subsequence, as `lis_length`, `lis_indices` and `lis_sequence`.
- `algokit.strings`: `all_unique` checks with a set and `all_unique_sorted` checks after an insertion sort. `insertion_sorted` returns the sorted characters and `remove_duplicates` keeps the first occurrence of each character.
- `algokit.suffix_array`: `suffix_array`, `rank_array` and `sorted_suffixes`, built by prefix doubling.
- `algokit.next_lower`: `next_lower_indices` gives, for each position, the index of the nearest later value that is not greater. Positions without one get `len(values)`.

Containers

- `algokit.linked_list.LinkedList`: a singly linked list with `push_back`, `remove`, iteration, `len` and `str` (`[1, 2, 3]`).
- `algokit.lru.LRUCache`: a least-recently-used cache of fixed capacity (3 by default). It has `set`, `get`, `recency`, `in` and `len`.
- `algokit.queues`: `MinQueue` is a FIFO queue built from two stacks whose `min()` is always known. `sliding_window_minimum` uses it. `drain_max`, `drain_min` and `drain_by_key` return values in the order a priority queue would release them.
- `algokit.ordered_set.OrderedSet`: a sorted set with `find_by_order` and `order_of_key`.
- `algokit.trie.PrefixTrie`: counts the inserted lowercase words that start with a given prefix. `run_commands` reads a command count followed by `<op> <word>` pairs. An `add` operation inserts the word. Any other operation records the prefix count for its word.
- `algokit.xor_trie.XorTrie`: a multiset of fixed-width integers with `insert`, `remove` and `max_xor`.
- `algokit.union_find.UnionFind`: disjoint sets with path halving and union by size. `random_tree_edges` builds a random spanning tree on vertices `1 .. n`.

Trees and graphs

- `algokit.bst`: `BinaryTree` is an unbalanced tree in which larger keys go left and duplicates are kept. It works with `TreeNode` and the helper functions `height` and `is_balanced`.
- `algokit.scc`: `tarjan_scc` finds strongly connected components. `parse_cases` reads `N M` headers, each followed by `M` edges, and stops at `0 0`.

Range queries

- `algokit.sparse_table.SparseTable`: the index of the maximum over a range.
- `algokit.segtree_min.MinSegmentTree`: range minimum with point updates.
- `algokit.segtree_max.LazyMaxTree`: range maximum with point assignment and lazy range addition.
- `algokit.segtree_assign.RangeAssignSumTree`: range sum with point and range assignment.
- `algokit.segtree_min_count.RangeAddMinCountTree`: range sum, minimum and count of minimums, with range addition. Queries return a `RangeSummary`.
- `algokit.segtree_2d.SegmentTree2D`: rectangle sums over a matrix, with point updates.

Number theory, randomness and concurrency

- `algokit.mobius.mobius_sieve`: values of the Möbius function for `0 .. limit`.
- `algokit.weighted_random`: `WeightedPicker` draws values with probability proportional to a weight. `InverseWeightedPicker` turns each weight `w` into `max(1, largest - w)` before drawing.
- `algokit.bank`: `Account` keeps a balance behind a reentrant lock. `Bank` transfers between accounts and holds both accounts' locks while it does so.

## Example

```python
from algokit.kmp import count_matches
from algokit.segtree_min import MinSegmentTree
from algokit.lru import LRUCache

print(count_matches("AACA", "AACBAACAACA"))  # 2

tree = MinSegmentTree([5, 3, 8, 6])
print(tree.query(1, 3))  # 3
tree.update(1, 10)
print(tree.query(0, 3))  # 5

cache = LRUCache(3)
for key, value in [("a", "1"), ("b", "2"), ("c", "3"), ("d", "4")]:
    cache.set(key, value)
print("a" in cache)  # False
```

## Command line

`algokit-words` reads whitespace-separated words from standard input. It prints each distinct five-letter word once, in sorted order:

```
echo "apple pear grape lemon apple" | algokit-words
```

## What it does not do

Everything else in the package is a library to call from Python, and all data lives in memory. There are no other commands and nothing is stored on disk. The package does not talk to message brokers, does not read scientific data files and starts no other programs.