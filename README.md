# algokit

A small collection of classic algorithms and data structures written as plain
Python: graph traversal and ordering, shortest paths, spanning trees,
connectivity, prime sieves, linear recurrences, a range-minimum segment tree,
stack-based helpers and binary-tree utilities. It has no runtime dependencies.

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
| `algokit.unionfind` | `UnionFind`: disjoint sets with path compression, union by size or (with `by_rank=True`) by rank |
| `algokit.traversal` | `bfs`, `dfs`, `dfs_forest`, `two_color`, `has_cycle`, `NotBipartiteError` |
| `algokit.toposort` | `kahn_sort`, `dfs_sort`, `CycleError` |
| `algokit.shortest` | `bellman_ford`, `dijkstra`, `dijkstra_distance`, `floyd_warshall` |
| `algokit.spanning` | `kruskal`, `prim` |
| `algokit.connectivity` | `bridges`, `strongly_connected_components`, `eulerian_path` |
| `algokit.recurrence` | `LinearRecurrence`, `matmul`, `matpow` |
| `algokit.sieve` | `Sieve`, `SegmentedSieve` |
| `algokit.combinatorics` | `subsets`, `next_permutation`, `sorted_permutations`, `permutations` |
| `algokit.segment_tree` | `MinSegmentTree` |
| `algokit.stacks` | `infix_to_postfix`, `previous_greater`, `next_greater` |
| `algokit.binarytree` | `TreeNode`, `from_level_order`, recursive and iterative traversals, `height`, `diameter`, `is_balanced`, `is_valid_bst`, `lowest_common_ancestor`, `is_symmetric`, `path_to`, top/bottom/left/right views, `make_children_sum` |
| `algokit.bst` | `bst_insert`, `bst_min`, `bst_delete` on `TreeNode` trees |
| `algokit.avl` | `AVLTree` |
| `algokit.tree_dp` | `sum_of_distances` |
| `algokit.euler_lca` | `EulerLCA` |

## Conventions

- Graphs are adjacency lists indexed from 0: `graph[u]` lists the neighbours
  of node `u`. Weighted adjacency lists hold `(neighbour, weight)` pairs;
  edge lists hold `(u, v, weight)` triples.
- Shortest-path functions give `math.inf` for unreachable nodes.
- Errors are raised, not returned: `kahn_sort` and `dfs_sort` raise
  `CycleError`, `two_color` raises `NotBipartiteError`, `eulerian_path`
  raises `ValueError` when the degrees allow no such walk, and out-of-range
  nodes raise `IndexError`.

## Examples

Disjoint sets:

```python
from algokit.unionfind import UnionFind

uf = UnionFind(5)
uf.union(1, 2)
uf.union(3, 4)
uf.connected(2, 4)   # False
uf.connected(4, 3)   # True
```

Topological order of a directed acyclic graph:

```python
from algokit.toposort import kahn_sort, CycleError

kahn_sort([[1, 2], [3], [3], []])   # [0, 1, 2, 3]

try:
    kahn_sort([[1], [0]])
except CycleError:
    ...
```

Shortest paths and spanning trees:

```python
from algokit.shortest import bellman_ford
from algokit.spanning import kruskal

edges = [(0, 1, 4), (0, 2, 1), (2, 1, 2)]
bellman_ford(3, edges, 0)   # distances from node 0
kruskal(3, edges)           # total weight of a minimum spanning forest
```

Primes and recurrences:

```python
from algokit.sieve import Sieve, SegmentedSieve
from algokit.recurrence import LinearRecurrence

Sieve(30).primes()               # [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
SegmentedSieve(10, 30).primes()  # [11, 13, 17, 19, 23, 29]

fib = LinearRecurrence([0, 1], [1, 1])
fib.nth(10)                      # 55 (terms are reduced modulo 1_000_000_007)
```

Binary trees:

```python
from algokit.binarytree import from_level_order, inorder, height

root = from_level_order([4, 2, 6, 1, 3, 5, 7])
inorder(root)   # [1, 2, 3, 4, 5, 6, 7]
height(root)    # 3
```

A self-balancing search tree:

```python
from algokit.avl import AVLTree

tree = AVLTree()
for value in (9, 5, 10, 0, 6, 11, -1, 1, 2):
    tree.insert(value)
tree.preorder()     # [9, 1, 0, -1, 5, 2, 6, 10, 11]
tree.remove(10)
tree.preorder()     # [1, 0, -1, 9, 5, 2, 6, 11]
```

## What it does not do

algokit is a library only. It has no command-line programs and reads no
input files or standard input; build graphs and trees in Python and call the
functions directly. `bellman_ford` does not report negative cycles.