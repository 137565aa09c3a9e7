"""A LIFO stack with an optional callback for discarded items."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional


class Stack:
    """Last-in first-out stack.

    ``capacity`` is the starting size, doubled whenever a push finds the
    stack full. ``free`` is called with every item removed by :meth:`clear`.
    """

    def __init__(
        self, capacity: int = 8, free: Optional[Callable[[Any], None]] = None
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._items: list[Any] = []
        self._capacity = capacity
        self.free = free

    @property
    def capacity(self) -> int:
        """Current capacity, doubled each time it is reached."""
        return self._capacity

    def push(self, item: Any) -> None:
        """Put an item on top."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def clear(self) -> None:
        """Remove every item, passing each (bottom first) to ``free`` if set."""
        if self.free is not None:
            for item in self._items:
                self.free(item)
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)