"""Worked examples: a small weighted graph and a large generated ring."""

from __future__ import annotations

import argparse
from typing import Any, Hashable, Iterable, Mapping, Sequence

from .dijkstra import HashInTree, MinHeap, Node, dijkstra_from_source

#: Undirected sample graph: node -> [(neighbour, edge weight), ...].
GRAPH: dict[int, list[tuple[int, int]]] = {
    0: [(1, 3), (3, 2), (8, 4)],
    1: [(0, 3), (7, 4)],
    2: [(3, 6), (7, 2), (5, 1)],
    3: [(0, 2), (2, 6), (4, 1)],
    4: [(3, 1), (8, 8)],
    5: [(2, 1), (6, 8)],
    6: [(5, 8)],
    7: [(1, 4), (2, 2)],
    8: [(0, 4), (4, 8)],
}

RING_NODES = 100_000
RING_NEIGHBORS = 200
RING_MAX_WEIGHT = 100
RING_GAP = 3


def _hash(table_size: int, data: Hashable) -> int:
    return hash(data) % table_size


def _equal(first: Any, second: Any) -> bool:
    return first == second


def _better(first: Any, second: Any) -> bool:
    return first < second


def _relax(heap: MinHeap, tree: HashInTree, current: Node, neighbor: Any, edge: Any) -> None:
    seat = tree.find_seat(neighbor)
    if seat is None:
        raise RuntimeError("in-tree is full; node count was too small")
    weight = current.weight + edge
    if seat.data is None:
        seat.data = neighbor
        seat.weight = weight
        seat.parent = current
        heap.update_key(seat, True)
    elif _better(weight, seat.weight):
        seat.weight = weight
        seat.parent = current
        heap.update_key(seat, False)


def solve_adjacency(
    graph: Mapping[Any, Iterable[tuple[Any, Any]]], source: Any
) -> HashInTree:
    """Shortest paths from ``source`` over an adjacency mapping."""
    nodes = set(graph)
    nodes.add(source)
    for edges in graph.values():
        nodes.update(neighbor for neighbor, _ in edges)

    def send_neighbors(heap: MinHeap, tree: HashInTree, node: Node) -> None:
        for neighbor, edge in graph.get(node.data, ()):
            _relax(heap, tree, node, neighbor, edge)

    return dijkstra_from_source(
        source, 0, len(nodes), _hash, _equal, _better, send_neighbors
    )


def solve_ring(
    num_nodes: int = RING_NODES,
    num_neighbors: int = RING_NEIGHBORS,
    max_weight: int = RING_MAX_WEIGHT,
    gap: int = RING_GAP,
) -> HashInTree:
    """Shortest paths from node 0 over a generated directed ring graph.

    Node ``n`` has an edge to ``(n + i*gap) % num_nodes`` of weight
    ``(i*gap) % (max_weight - 1) + 1`` for ``i`` in ``1..num_neighbors``.
    """
    if num_nodes < 1:
        raise ValueError("num_nodes must be at least 1")
    if max_weight < 2:
        raise ValueError("max_weight must be at least 2")

    edges = [
        (i * gap, (i * gap) % (max_weight - 1) + 1)
        for i in range(1, num_neighbors + 1)
    ]

    def send_neighbors(heap: MinHeap, tree: HashInTree, node: Node) -> None:
        for step, edge in edges:
            _relax(heap, tree, node, (node.data + step) % num_nodes, edge)

    return dijkstra_from_source(
        0, 0, num_nodes, _hash, _equal, _better, send_neighbors
    )


def format_path(node: Node) -> str:
    """Render a node's path back to the source as ``(d: w) <- (d: w) ...``."""
    return " <- ".join(f"({step.data}: {step.weight})" for step in node.path())


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sample graph's shortest paths, or solve the generated ring."""
    parser = argparse.ArgumentParser(prog="lazydijkstra")
    parser.add_argument(
        "--ring", action="store_true", help="solve the large generated ring graph"
    )
    args = parser.parse_args(argv)

    if args.ring:
        tree = solve_ring()
        for data in range(RING_NODES):
            tree.get_node_by_data(data)
        return 0

    tree = solve_adjacency(GRAPH, 0)
    for data in sorted(GRAPH):
        node = tree.get_node_by_data(data)
        if node is not None:
            print(format_path(node))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())