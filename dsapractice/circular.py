"""A circular singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class _Node:
    data: Any
    next: _Node | None = None


class CircularLinkedList:
    """Circular list whose last node links back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __iter__(self) -> Iterator[Any]:
        """Yield every value once, starting from the first node."""
        if self._tail is None:
            return
        node = self._tail.next
        while True:
            assert node is not None
            yield node.data
            if node is self._tail:
                break
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def append(self, data: Any) -> None:
        """Add ``data`` after the last node, keeping the ring closed."""
        node = _Node(data)
        if self._tail is None:
            node.next = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node
        self._size += 1