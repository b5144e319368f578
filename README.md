# algokit

Classic algorithms and data structures in plain Python, with no dependencies
outside the standard library. It also includes a small travelling-salesman
toolkit: it generates problem instances, builds a starting tour by farthest
insertion, and improves it with 2-opt or 3-opt local search, random multistart
or tabu search.

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

- `algokit.linked_list`: `LinkedList`, a singly linked list (`append`, `remove`,
  `search`, `is_empty`, `head`, iteration, `len`), and the node types
  `ListNode` and `DoublyListNode`. `remove` deletes every node with the given
  value and returns how many it removed.
- `algokit.stack`: `Stack` with `push`, `pop`, `top` and `next_to_top`;
  iteration goes from the top down. Asking an empty stack for an element, or a
  one-element stack for `next_to_top`, raises `EmptyStackError` (an `IndexError`).
- `algokit.queues`: FIFO `Queue` with `enqueue`, `dequeue` and `first`. An
  empty queue raises `EmptyQueueError` (an `IndexError`).
- `algokit.heap`: `Heap`, a binary max-heap that rearranges a list in place,
  with `parent`, `left`, `right`, `swap`, `heapify`, `build_heap` and a
  settable `size`.
- `algokit.sorting`: in-place `insertion_sort`, `heap_sort`, `quick_sort`
  (with Hoare `partition`), `merge_sort` (stable, with an optional
  `less_equal` comparison, and its `merge` step) and `counting_sort(items, bound)`
  for integers in `range(bound)`; a value outside that range raises `ValueError`.
- `algokit.pattern_matching`: `naive`, `naive_sentinel`, `prefix_matching`,
  `knuth_morris_pratt`, `boyer_moore` and `shift_and`, each returning the list
  of positions where the pattern occurs, plus `prefix_function`.
- `algokit.matrix`: `Matrix(rows, cols)`, filled with zeros, and
  `SquareMatrix(n)` with `trace`. Element access is `m[row, col]`. `add`,
  `scalar_mul`, `transpose`, `multiply` and `submatrix` return new matrices;
  `set_elem`, `set_row`, `set_col`, `row_switch`, `col_switch`, `mult_row` and
  `mult_col` change the matrix in place. Bad sizes, bad indices and a zero
  scalar raise `MatrixError` (a `ValueError`).
- `algokit.points`: integer `Point`, `Segment` (with `Segment.from_coords`) and
  sweep-line `Event`, ordered by x with start events first on equal x.
- `algokit.geometry`: `angle_left` and `turn_left` (cross-product orientation),
  `segments_intersect`, `lowest_point`, `highest_point`, `compare_angles`,
  `polar_order`, the convex hulls `graham_scan` (returns a `Stack`) and
  `jarvis_march` (returns a list, counter-clockwise from the lowest point),
  `min_polar_right`, `min_polar_left`, and the sweep helpers `order_segments`
  and `event_sequence`.
- `algokit.tsp.model`: `Point`, `Move`, `TabuList`, `Solution` and
  `index_to_edge`, which locates the edge between two nodes in the flat edge list.
- `algokit.tsp.problem`: `TSP`, a problem instance with four layouts
  (`random_design`, `circle_design`, `linear_design`, `cluster_design`),
  `write_edges`, `write_nodes` and `init_solution` (farthest insertion from the
  longest edge).
- `algokit.tsp.search`: `two_opt`, `three_opt` and their cost deltas, the
  neighbourhood searches `neighborhood_solution` and
  `neighborhood_tabu_solution`, `resolve_tsp` (random multistart) and
  `tabu_search`.

## Examples

```python
from algokit.geometry import graham_scan
from algokit.pattern_matching import knuth_morris_pratt
from algokit.points import Point
from algokit.sorting import quick_sort

print(knuth_morris_pratt("TTAC", "GCTTACAGATTCAGTCTTACAGATGGT"))  # [2, 16]

data = [5, 3, 2, 1, 4]
quick_sort(data)
print(data)  # [1, 2, 3, 4, 5]

hull = graham_scan([Point(1, 1), Point(2, 1), Point(2, 3), Point(4, 4), Point(1, 3)])
print([str(p) for p in hull])  # ['(1,3)', '(4,4)', '(2,1)', '(1,1)']
```

Solving a travelling-salesman instance from Python:

```python
import random

from algokit.tsp.problem import TSP
from algokit.tsp.search import resolve_tsp, tabu_search

problem = TSP(30, rng=random.Random(1))
problem.random_design()

start = problem.init_solution()
multistart = resolve_tsp(problem, 5, True)      # 5 restarts, 2-opt
tabu = tabu_search(problem, 7, 20, False)       # tabu list of 7, stop after 20 idle steps, 3-opt
print(start.value, multistart.value, tabu.value)
print(tabu.tour)
```

## Travelling-salesman command

```
algokit-tsp NODES GENERATOR OPT RESTARTS TABU_LENGTH MAX_ITER
```

- `NODES`: the number of nodes in the problem.
- `GENERATOR`: how nodes are placed. `1` is random, `2` is on a circle, `3` is
  on a line, `4` is in two clusters.
- `OPT`: `1` uses 2-opt, `0` uses 3-opt.
- `RESTARTS`: the number of restarts for the random multistart solver.
- `TABU_LENGTH`: the length of the tabu list.
- `MAX_ITER`: how many steps in a row without improvement tabu search allows
  before it stops.

With fewer than six arguments the command prints a usage message. The command
writes the edge lengths to `archi.txt` and the node coordinates to `nodi.txt`
in the current directory. For the starting solution, the multistart solver and
tabu search it prints the time taken, the tour length and the tour. The
messages it prints are in Italian.

## What is not included

There are no graph types or graph algorithms (breadth-first or depth-first
search, topological sort, strongly connected components) in this package. The
command draws no plots; the two text files it writes are all it leaves behind.