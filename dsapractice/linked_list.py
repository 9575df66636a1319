"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    data: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list supporting insertion and deletion by position or value."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_end(value)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_at_first(self, data: Any) -> None:
        """Put ``data`` in front of the first node."""
        self._head = _Node(data, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def insert_at_end(self, data: Any) -> None:
        """Put ``data`` after the last node."""
        node = _Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at_index(self, data: Any, index: int) -> None:
        """Insert ``data`` so that it ends up at position ``index``."""
        if not 0 <= index <= self._size:
            raise IndexError("insertion index out of range")
        if index == 0:
            self.insert_at_first(data)
        elif index == self._size:
            self.insert_at_end(data)
        else:
            previous = self._node_at(index - 1)
            previous.next = _Node(data, previous.next)
            self._size += 1

    def delete_at_first(self) -> Any:
        """Remove the first node and return its data."""
        if self._head is None:
            raise IndexError("delete from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.data

    def delete_at_index(self, index: int) -> Any:
        """Remove the node at position ``index`` and return its data."""
        if not 0 <= index < self._size:
            raise IndexError("deletion index out of range")
        if index == 0:
            return self.delete_at_first()
        previous = self._node_at(index - 1)
        target = previous.next
        assert target is not None
        previous.next = target.next
        if target is self._tail:
            self._tail = previous
        self._size -= 1
        return target.data

    def delete_at_last(self) -> Any:
        """Remove the last node and return its data."""
        if self._size == 0:
            raise IndexError("delete from empty list")
        return self.delete_at_index(self._size - 1)

    def delete_by_value(self, value: Any) -> None:
        """Remove the first node holding ``value``; ValueError if there is none."""
        previous: _Node | None = None
        node = self._head
        while node is not None and node.data != value:
            previous, node = node, node.next
        if node is None:
            raise ValueError(f"{value!r} not found in linked list")
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        self._size -= 1