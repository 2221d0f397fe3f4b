# cpkit

A collection of classic algorithms and solutions to short competitive-programming
problems. Each one is a plain Python function that takes its input as arguments
and returns the answer. A small command-line driver runs the problem solutions
over test-case input.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `cpkit.sorting`: `bubble_sort`, `insertion_sort`, `merge_sort`, `quick_sort`
  and `selection_sort` each take any iterable and return a new sorted list.
  `partition` is the Lomuto step, working in place on a list slice.
- `cpkit.searching`: `binary_search` (index or -1), `max_subarray_sum`
  (Kadane), `next_greater` (monotonic stack, -1 where none) and the 0/1
  `knapsack`.
- `cpkit.numtheory`: `sieve` (list of booleans for 0..n), `gcd`, `lcm`.
- `cpkit.structures`: `ListNode` and `DListNode` (iterating yields the data
  from that node onwards), `TreeNode`, and the `level_order` generator for
  breadth-first traversal of a binary tree.
- `cpkit.graphs`: `DisjointSet` (`find`, `union`), `bellman_ford`, `dijkstra`,
  `floyd_warshall`, `dfs`, `bfs`, `find_bridges`, `kosaraju`, `kruskal`,
  `topo_sort`. Vertices are `0..n-1`; unreachable distances are `math.inf`.
- `cpkit.contest_a`, `cpkit.contest_b`, `cpkit.practice_a`, `cpkit.practice_b`:
  one function per solved problem, such as `lock_permutation`, `max_teams`,
  `min_recolor` or `count_vacations`. Where a problem has no answer the
  function returns `None`; invalid arguments raise `ValueError`.

## Examples

```python
from cpkit.sorting import merge_sort
from cpkit.searching import binary_search, max_subarray_sum
from cpkit.graphs import dijkstra, kruskal

data = merge_sort([5, 2, 9, 1])                        # [1, 2, 5, 9]
binary_search(data, 9)                                 # 3
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])      # 6

adj = [[(1, 4), (2, 1)], [(3, 1)], [(1, 2), (3, 5)], []]
dijkstra(4, 0, adj)                                    # [0, 3, 1, 4]

kruskal(3, [(1, 0, 1), (2, 1, 2), (3, 0, 2)])          # 3
```

## Command line

Installing the package provides the `cpkit` command. It takes the name of a
problem and reads its input from a file or, if none is given, from standard
input:

```
cpkit PROBLEM [INPUT]
```

The input is whitespace-separated tokens: the number of test cases first, then
each case in the problem's own format (the `basketball` problem reads a single
case with no leading count). One answer is printed per case; answers that do
not exist are printed as `-1`. Malformed input ends the command with a message
on standard error and exit status 1.

```
$ printf '2\n3\n4\n' | cpkit lock
1 3 2
-1
```

The problem names are: `among`, `bench-olympiad`, `coin`, `fanum-easy`,
`fanum-hard`, `lock`, `mex`, `mex-or`, `new-world`, `olympiad-date`,
`player-end`, `perfect-square-perm`, `segment-sum`, `serval`, `skibidus`,
`square`, `subseq`, `team-training`, `third-side`, `xor-triangle`,
`basketball`, `bw-stripe`, `dist-split`, `helmet`, `lcm`, `luke`,
`merge-array`, `monsters`, `olya`, `pillar-bit`, `raspberries`, `rb-team`,
`shoe-size`, `ski-resort`, `swap-delete`, `traffic`.

## What it does not do

The command line runs only the problem solutions. The sorting, searching,
number-theory, data-structure and graph routines are available from Python
alone.