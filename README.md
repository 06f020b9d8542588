# lazydijkstra

This package finds single-source shortest paths with Dijkstra's algorithm. The
graph never has to be held in memory as a whole.

You do not pass the graph to the package. You pass a source node and a
`send_neighbors` callback. Each time the algorithm settles the node with the
best weight, it calls your callback with that node. The callback works out the
node's neighbours and their weights. It writes them into the result table and
tells the heap about them.

The result is a `HashInTree`, a fixed-size hash table of `Node` objects. Each
node holds `data`, `weight` and a `parent` link. The parent links form a tree
that leads back to the source. One table therefore holds both the distance to
every reachable node and the path to it.

## Installation

```
pip install lazydijkstra
```

## Usage

```python
from lazydijkstra.dijkstra import dijkstra_from_source

graph = {
    0: [(1, 3), (3, 2), (8, 4)],
    1: [(0, 3), (7, 4)],
    # ...
}

def hashfunc(size, data):
    return data % size

def is_equal(a, b):
    return a == b

def is_better_than(w1, w2):
    return w1 < w2

def send_neighbors(heap, tree, current):
    for neighbor, edge in graph.get(current.data, []):
        seat = tree.find_seat(neighbor)
        new_weight = current.weight + edge
        if seat.data is None:
            seat.data, seat.weight, seat.parent = neighbor, new_weight, current
            heap.update_key(seat, True)
        elif is_better_than(new_weight, seat.weight):
            seat.weight, seat.parent = new_weight, current
            heap.update_key(seat, False)

tree = dijkstra_from_source(0, 0, 9, hashfunc, is_equal, is_better_than, send_neighbors)
node = tree.get_node_by_data(7)
print(node.weight, [n.data for n in node.path()])
```

### Callbacks and limits

- `hashfunc(size, data)` must return an index in `range(size)`. Any other value
  raises `ValueError`. Collisions are resolved by linear probing.
- `is_equal(a, b)` decides whether two data values name the same node.
- `is_better_than(w1, w2)` is true when `w1` is a strictly better (lower) cost
  than `w2`.
- `total_number_of_nodes` sets the heap's capacity. The in-tree gets
  `2 * total_number_of_nodes + 1` seats. If a new node is pushed while the heap
  is full, `HeapFullError` is raised.

### Reading the result

- `HashInTree.find_seat(data)` returns the node that holds `data`. If `data` is
  not in the table, it returns the first empty seat for it, which has
  `data is None`. It returns `None` only when the table is full.
- `HashInTree.get_node_by_data(data)` returns `None` for a node that was never
  reached.
- `len(tree)` counts the occupied seats, and iterating over the tree yields the
  occupied nodes.
- `Node.path()` returns a list that starts with the node and then holds each
  parent in turn, back to the source.

### Helpers

`lazydijkstra.demo` has helpers that use integer or hashable data, `0` as the
source weight and `<` as the comparison:

- `solve_adjacency(graph, source)` solves an adjacency mapping of the form
  `{node: [(neighbour, edge weight), ...]}`.
- `solve_ring(num_nodes, num_neighbors, max_weight, gap)` solves a generated
  directed ring. In it, node `n` has an edge to `(n + i*gap) % num_nodes` of
  weight `(i*gap) % (max_weight - 1) + 1`, for each `i` in
  `1..num_neighbors`.
- `format_path(node)` renders a path as `(7: 9) <- (2: 7) <- ...`.

## Linked list

`lazydijkstra.linkedlist.LinkedList` is a circular doubly linked list with a
dummy header node. It accepts an optional iterable of initial items. Its
operations are:

- `add_end` and `add_first`
- `pop(position)` and `remove_first()`
- `swap(i, j)`
- `change(position, data)`, which returns the item that was replaced

A list supports `len()` and iteration. A position out of range raises
`IndexError`, and so does `remove_first` on an empty list. `str(lst)` shows the
items as `[a b c]`. `lst.output(file)` writes that text and a newline to `file`,
or to standard output if no file is given.

## Demo

```
lazydijkstra-demo
```

This command prints the shortest path from node 0 to every node of the
built-in nine-node example graph, one line per node.

```
lazydijkstra-demo --ring
```

This form solves the 100,000-node generated ring and looks up every node. It
prints nothing, so it serves only as a timing run.