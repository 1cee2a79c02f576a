# algobook

A collection of classic algorithms and data structures in plain Python,
with no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobook.strings` | `AhoCorasick` multi-pattern search, `naive_search`, suffix arrays (`suffix_array_naive`, `suffix_array` by prefix doubling), `min_rotation`, `common_prefix_length`, `count_distinct_substrings` |
| `algobook.numbers` | `binary_search`, prime sieves (`prime_sieve`, `prime_sieve_mask` with `mask_has`, `smallest_factor_sieve` with `factorize_with_sieve`), `is_prime`, `prime_factors`, `binomial`, `divisor_counts`, `gcd`, `fibonacci`, `permutation_rank`, `count_maximal_stable_sets`, `count_compositions` |
| `algobook.geometry` | `Vector2`, `polygon_area`, `point_in_polygon`, `ccw`, `segments_intersect`, `convex_hull` (gift wrapping), `winning_margin` and `best_run_length` (ternary search over a run/cycle race) |
| `algobook.graphs` | `bfs` returning a `BfsResult`, `shortest_path`, `dfs_order`, `dfs_all`, `dfs_matrix`, `dijkstra`, `dijkstra_dense`, `cut_vertices`, `classify_edges` with `EdgeKind`, `euler_circuit`, `strongly_connected_components` |
| `algobook.disjoint_set` | `DisjointSet` (union-find with path compression) |
| `algobook.rmq` | `RangeMinQuery` segment tree and `FamilyTree` (distances between tree nodes through the lowest common ancestor) |
| `algobook.heap` | `MaxHeap` with `push`, `pop` and `peek` |
| `algobook.dynamic` | `longest_increasing_subsequence`, `max_meetings`, `morse_kth`, `snail_probability`, `fence_max_area`, `selection_sort`, `selection_sort_recursive` |
| `algobook.treap` | `Treap`, a randomised balanced binary search tree with `insert`, `erase`, `kth`, `count_less_than`, membership, length and sorted iteration |
| `algobook.tsp` | `shortest_tour`, an exact travelling-salesman solver for a symmetric distance matrix |
| `algobook.hanoi` | four-peg, twelve-disc tower puzzle search: `tops`, `adjacent_states`, `min_moves`, `min_moves_bidirectional` |

A few conventions worth knowing:

- Graph functions take adjacency lists indexed by vertex number. The
  weighted ones (`dijkstra`, `dijkstra_dense`) take `(weight, vertex)`
  pairs and report unreachable vertices as `inf`.
- `AhoCorasick.search` returns `(end_index, pattern_id)` pairs, where the
  pattern id is the pattern's position in the list given to the constructor.
- `Treap.kth` counts from 1; `Treap.erase` returns `False` when the key is
  absent.
- In `algobook.hanoi` a state packs the peg of each disc into two bits:
  disc `d` (0 is the smallest) sits on peg `(state >> 2 * (11 - d)) & 3`.

## Examples

```python
from algobook.strings import AhoCorasick, count_distinct_substrings
from algobook.numbers import binomial, gcd
from algobook.rmq import RangeMinQuery
from algobook.treap import Treap

matcher = AhoCorasick(["HE", "SHE", "HERS"])
for position, pattern_id in matcher.search("USHERS"):
    print(position, pattern_id)

count_distinct_substrings("banana")   # 15
binomial(4, 2)                        # 6
gcd(12, 18)                           # 6

rmq = RangeMinQuery([3, 4, 1, 2, 5])
rmq.query(0, 1)                       # 3

treap = Treap([5, 1, 9], seed=1)
treap.insert(3)
list(treap)                           # [1, 3, 5, 9]
treap.count_less_than(5)              # 2
```

## Command line

The `algobook-familytree` command answers family-tree distance queries. It
reads from the file named as its one optional argument, or from standard
input when none is given.

```
algobook-familytree input.txt
algobook-familytree < input.txt
```

The input starts with the number of test cases. Each case gives the number
of nodes `N` and the number of queries `Q`, then the parents of nodes
`1` to `N - 1` (node `0` is the root), then `Q` pairs of node numbers. For
each pair the command prints the number of edges between the two nodes,
and an empty line follows each test case.

## What it does not do

Apart from `algobook-familytree`, everything here is a library: there are
no commands for the other routines, and none of them read input or print
results on their own. Call the functions from Python instead.