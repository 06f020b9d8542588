"""A circular doubly linked list with a dummy header node."""

from __future__ import annotations

import sys
from typing import Any, Iterable, Iterator, TextIO


class _Link:
    __slots__ = ("data", "next", "prev")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: _Link = self
        self.prev: _Link = self


class LinkedList:
    """Sequence of items kept in a ring of links around a dummy header."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._header = _Link(None)
        self._size = 0
        if items is not None:
            for item in items:
                self.add_end(item)

    def _check(self, position: int) -> None:
        if not 0 <= position < self._size:
            raise IndexError(f"position {position} out of range for size {self._size}")

    def _link_at(self, position: int) -> _Link:
        link = self._header
        if self._size - 1 - position < position:
            for _ in range(self._size - position):
                link = link.prev
        else:
            for _ in range(position + 1):
                link = link.next
        return link

    def _insert_after(self, before: _Link, data: Any) -> None:
        link = _Link(data)
        link.prev = before
        link.next = before.next
        before.next.prev = link
        before.next = link
        self._size += 1

    def _unlink(self, link: _Link) -> Any:
        link.prev.next = link.next
        link.next.prev = link.prev
        self._size -= 1
        return link.data

    def add_end(self, data: Any) -> None:
        """Append ``data`` after the last item."""
        self._insert_after(self._header.prev, data)

    def add_first(self, data: Any) -> None:
        """Insert ``data`` before the first item."""
        self._insert_after(self._header, data)

    def pop(self, position: int) -> Any:
        """Remove the item at ``position`` and return it."""
        self._check(position)
        return self._unlink(self._link_at(position))

    def remove_first(self) -> Any:
        """Remove the first item and return it."""
        if not self._size:
            raise IndexError("remove_first from an empty list")
        return self._unlink(self._header.next)

    def swap(self, i: int, j: int) -> None:
        """Exchange the items at positions ``i`` and ``j``."""
        self._check(i)
        self._check(j)
        first = self._link_at(i)
        second = self._link_at(j)
        first.data, second.data = second.data, first.data

    def change(self, position: int, data: Any) -> Any:
        """Replace the item at ``position`` with ``data``; return the old item."""
        self._check(position)
        link = self._link_at(position)
        old = link.data
        link.data = data
        return old

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        link = self._header.next
        while link is not self._header:
            yield link.data
            link = link.next

    def __str__(self) -> str:
        return "[" + " ".join(str(item) for item in self) + "]"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def output(self, file: TextIO | None = None) -> None:
        """Write the list, as ``str`` shows it, and a newline to ``file``."""
        print(self, file=file if file is not None else sys.stdout)