# libdstruct

A collection of classic data structures together with a small framework for
measuring how the cost of an operation grows with the size of a structure.
It has no dependencies beyond the Python standard library (3.10 or later).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `libdstruct.adt` | `AbstractDataType`, `SequenceDataStructure`, `StructureError` |
| `libdstruct.priority_queue` | `PriorityQueue`, `PriorityQueueItem`, `UnsortedImplicitSequencePriorityQueue`, `UnsortedExplicitSequencePriorityQueue`, `SortedImplicitSequencePriorityQueue`, `SortedExplicitSequencePriorityQueue`, `TwoLists`, `BinaryHeap` |
| `libdstruct.hierarchy` | `HierarchyNode`, `Hierarchy`, `MultiWayExplicitHierarchy`, `KWayExplicitHierarchy`, `BinaryExplicitHierarchy` |
| `libdstruct.tree` | `GeneralTree`, `MultiwayTree`, `ExplicitKWayTree`, `ExplicitBinaryTree` |
| `libdstruct.network` | `NetworkNode`, `ExplicitNetwork` |
| `libdstruct.analyzer` | `Analyzer`, `CompositeAnalyzer`, `LeafAnalyzer`, `ComplexityAnalyzer` |
| `libdstruct.list_analyzer` | `ListAnalyzer`, `ListInsertAnalyzer`, `ListRemoveAnalyzer`, `ListsAnalyzer` |

Every structure offers `assign`, `clear`, `size`, `is_empty`, `equals` and
`len()`. Calling `assign` or `equals` with a structure of an incompatible kind
raises `TypeError`.

## Priority queues

A lower priority value means a higher priority.

```python
from libdstruct.priority_queue import BinaryHeap

heap = BinaryHeap()
heap.push(5, "five")
heap.push(1, "one")
heap.push(3, "three")
print(heap.peek())   # one
print(heap.pop())    # one
print(heap.pop())    # three
```

`peek` and `pop` on an empty queue raise `IndexError`. Priority queues do not
support `equals`; calling it raises `StructureError`.

`TwoLists(expected_size)` keeps a short sorted list of about
`ceil(sqrt(expected_size))` of the best items and a long unsorted list of the
rest, refilling the short list from the long one when it runs out.

## Hierarchies

```python
from libdstruct.hierarchy import MultiWayExplicitHierarchy

h = MultiWayExplicitHierarchy()
root = h.emplace_root()
root.data = 0
one = h.emplace_son(root, 0)
one.data = 1
two = h.emplace_son(root, 1)
two.data = 2

print(h.size())                              # 3
print(h.level(two))                          # 1
print([n.data for n in h.pre_order()])       # [0, 1, 2]
print([n.data for n in h.post_order()])      # [1, 2, 0]
print([n.data for n in h.level_order()])     # [0, 1, 2]
```

`KWayExplicitHierarchy(k)` gives every node `k` son slots, any of which may be
empty; `BinaryExplicitHierarchy` is the two-slot case with left/right helpers
and an `in_order` traversal. Iterating over a hierarchy yields node data in
pre-order (in-order for the binary hierarchy). `remove_son` removes a son
together with its descendants; `change_root(None)` empties the hierarchy.

## Trees

`GeneralTree` and its subclasses (`MultiwayTree`, `ExplicitKWayTree(k)`,
`ExplicitBinaryTree`) wrap a hierarchy as an abstract tree type with
`insert_root`, `emplace_son`, `remove_son`, `degree`, `node_count` and friends.
Unlike the hierarchy, `access_son` on a tree raises `IndexError` when there is
no such son. `copy()` returns a deep copy of the same kind of tree.

## Networks

```python
from libdstruct.network import ExplicitNetwork

net = ExplicitNetwork()
a = net.insert()
b = net.insert()
net.connect(a, b)
print(net.relation_exists(a, b))   # True
print(net.relation_count())        # 2 (each relation counts at both ends)
net.disconnect(a, b)
```

Disconnecting unrelated nodes, or removing a node that is not in the network,
raises `StructureError`.

## Complexity analysis

A `ComplexityAnalyzer` grows a structure step by step, times one operation at
each size for a number of replications, and writes the results as a
semicolon-separated CSV file named `<analyzer name>.csv` in its output
directory. The defaults are 100 replications of 10 steps of 10 000 elements.

`ListsAnalyzer` measures insertion and removal at the front of Python `list`
objects (`vector-insert`, `vector-remove`) and `collections.deque` objects
(`list-insert`, `list-remove`).

```python
from pathlib import Path
from libdstruct.list_analyzer import ListsAnalyzer

Path("results").mkdir(exist_ok=True)   # the output directory must exist
analyzers = ListsAnalyzer()
analyzers.set_output_directory("results")
analyzers.set_replication_count(10)
analyzers.set_step_size(1000)
analyzers.set_step_count(5)
analyzers.analyze()
```

The first line of each CSV holds the sizes; each following line holds the
durations, in nanoseconds, of one replication.

## What the package does not do

There is no positional list abstract data type (access, insert and remove by
index over array-backed or linked storage); the list analyzers measure Python's
own `list` and `deque`. There is no command-line program: everything is used
from Python code.