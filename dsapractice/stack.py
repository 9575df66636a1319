"""A fixed-capacity stack."""

from __future__ import annotations

from typing import Any


class StackOverflowError(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(Exception):
    """Raised when popping from an empty stack."""


class Stack:
    """Stack holding at most ``size`` items."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("stack size must be positive")
        self.size = size
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, items={self._items!r})"

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def is_empty(self) -> bool:
        return not self._items

    def push(self, value: Any) -> None:
        if self.is_full():
            raise StackOverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackUnderflowError("stack is empty")
        return self._items.pop()

    def peek(self, position: int) -> Any:
        """Return the item ``position`` places from the top; 1 is the top."""
        if not 1 <= position <= len(self._items):
            raise IndexError("not a valid stack position")
        return self._items[-position]