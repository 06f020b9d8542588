"""Dijkstra's algorithm over lazily expanded graphs, a hashed in-tree result, and a circular linked list."""

__version__ = "0.1.0"
__all__ = ["dijkstra", "linkedlist", "demo"]