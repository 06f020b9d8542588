"""Lazy single-source Dijkstra over an open-addressed in-tree of nodes.

The graph is never handed over whole. Instead a ``send_neighbors`` callback
is given each settled node in turn. It seats the node's neighbours in the
:class:`HashInTree` and reports new or improved ones to the :class:`MinHeap`.
When the search ends, the hash table holds a parent-pointer tree. That tree
gives the best weight of every reachable node and the path to it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator

HashFunc = Callable[[int, Any], int]
EqualFunc = Callable[[Any, Any], bool]
BetterFunc = Callable[[Any, Any], bool]


@dataclass(eq=False)
class Node:
    """A seat in the in-tree: an empty seat has ``data`` set to ``None``."""

    data: Any = None
    weight: Any = None
    parent: Node | None = field(default=None, repr=False)
    heap_index: int = 0

    def path(self) -> list[Node]:
        """Return the nodes from this one back to the source, in that order."""
        nodes = []
        node: Node | None = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        return nodes


class HeapFullError(Exception):
    """Raised when a node is pushed onto a heap that is already at capacity."""


class HashInTree:
    """Fixed-size hash table of :class:`Node` seats with linear probing."""

    def __init__(self, size: int, hashfunc: HashFunc, is_equal: EqualFunc) -> None:
        if size < 1:
            raise ValueError("a HashInTree needs at least one seat")
        self.size = size
        self._hashfunc = hashfunc
        self._is_equal = is_equal
        self.nodes = [Node() for _ in range(size)]

    def _probe(self, data: Any) -> Iterator[Node]:
        start = self._hashfunc(self.size, data)
        if not 0 <= start < self.size:
            raise ValueError(
                f"hash function returned {start}, outside a table of {self.size}"
            )
        for offset in range(self.size):
            yield self.nodes[(start + offset) % self.size]

    def find_seat(self, data: Any) -> Node | None:
        """Return the node holding ``data`` or the first empty seat for it.

        An empty seat has ``data`` set to ``None``. ``None`` is returned when
        the table is full and ``data`` is not in it.
        """
        for node in self._probe(data):
            if node.data is None or self._is_equal(data, node.data):
                return node
        return None

    def get_node_by_data(self, data: Any) -> Node | None:
        """Return the node holding ``data``, or ``None`` if it is not present."""
        for node in self._probe(data):
            if node.data is None:
                return None
            if self._is_equal(data, node.data):
                return node
        return None

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Node]:
        return (node for node in self.nodes if node.data is not None)


class MinHeap:
    """Array-backed binary heap of nodes that tracks each node's position."""

    def __init__(self, capacity: int, is_better_than: BetterFunc) -> None:
        self.capacity = capacity
        self._is_better_than = is_better_than
        self.heap: list[Node] = []

    def bubble_up(self, index: int) -> None:
        """Move the node at ``index`` towards the root while it is better."""
        heap = self.heap
        node = heap[index]
        while index > 0:
            parent = (index - 1) >> 1
            if not self._is_better_than(node.weight, heap[parent].weight):
                break
            heap[parent].heap_index = index
            heap[index] = heap[parent]
            index = parent
        node.heap_index = index
        heap[index] = node

    def pluck_min(self) -> Node | None:
        """Remove and return the best node, or ``None`` if the heap is empty."""
        heap = self.heap
        if not heap:
            return None
        best = heap[0]
        node = heap.pop()
        if not heap:
            return best

        size = len(heap)
        better = self._is_better_than
        index = 0
        while (left := 2 * index + 1) < size:
            child = left
            right = left + 1
            if right < size and better(heap[right].weight, heap[left].weight):
                child = right
            if not better(heap[child].weight, node.weight):
                break
            heap[child].heap_index = index
            heap[index] = heap[child]
            index = child
        heap[index] = node
        node.heap_index = index
        return best

    def update_key(self, node: Node, is_new: bool) -> None:
        """Insert a new node, or restore order after a node's weight improved."""
        if is_new:
            if len(self.heap) >= self.capacity:
                raise HeapFullError(f"heap is full at {self.capacity} nodes")
            self.heap.append(node)
            node.heap_index = len(self.heap) - 1
        self.bubble_up(node.heap_index)

    def __len__(self) -> int:
        return len(self.heap)


def dijkstra_from_source(
    source_data: Any,
    source_weight: Any,
    total_number_of_nodes: int,
    hashfunc: HashFunc,
    is_equal: EqualFunc,
    is_better_than: BetterFunc,
    send_neighbors: Callable[[MinHeap, HashInTree, Node], None],
) -> HashInTree:
    """Run Dijkstra from one source and return the resulting in-tree.

    ``send_neighbors(heap, tree, node)`` is called once for every settled
    node. It must seat each neighbour with :meth:`HashInTree.find_seat`,
    fill in or improve its data, weight and parent, and then call
    :meth:`MinHeap.update_key`.
    """
    heap = MinHeap(total_number_of_nodes, is_better_than)
    tree = HashInTree(2 * total_number_of_nodes + 1, hashfunc, is_equal)

    source = tree.find_seat(source_data)
    if source is None:
        raise RuntimeError("no seat available for the source node")
    source.data = source_data
    source.weight = source_weight
    source.parent = None
    heap.update_key(source, True)

    while (node := heap.pluck_min()) is not None:
        send_neighbors(heap, tree, node)
    return tree