"""A doubly linked list whose nodes can be held, inserted around and removed in O(1)."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """One node of a LinkedList, holding a value and its neighbours."""

    value: Any
    prev: Optional["ListNode"] = None
    next: Optional["ListNode"] = None
    _owner: Optional["LinkedList"] = field(default=None, compare=False)

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class LinkedList:
    """Doubly linked list with optional dup, free and match callbacks.

    ``dup`` copies a value when the list is copied, ``free`` is called with a
    value when its node is removed or the list is cleared, and ``match(value,
    key)`` decides equality for :meth:`search` (``==`` is used without it).
    """

    def __init__(
        self,
        iterable: Iterable[Any] = (),
        dup: Optional[Callable[[Any], Any]] = None,
        free: Optional[Callable[[Any], None]] = None,
        match: Optional[Callable[[Any, Any], bool]] = None,
    ) -> None:
        self.dup = dup
        self.free = free
        self.match = match
        self._head: Optional[ListNode] = None
        self._tail: Optional[ListNode] = None
        self._len = 0
        for value in iterable:
            self.add_tail(value)

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes())

    def __reversed__(self) -> Iterator[Any]:
        return (node.value for node in self.nodes(reverse=True))

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def first(self) -> Optional[ListNode]:
        """The head node, or None when the list is empty."""
        return self._head

    def last(self) -> Optional[ListNode]:
        """The tail node, or None when the list is empty."""
        return self._tail

    def _new_node(self, value: Any) -> ListNode:
        return ListNode(value, _owner=self)

    def add_head(self, value: Any) -> ListNode:
        """Add a value at the head and return its node."""
        node = self._new_node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._len += 1
        return node

    def add_tail(self, value: Any) -> ListNode:
        """Add a value at the tail and return its node."""
        node = self._new_node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._len += 1
        return node

    def _check_owned(self, node: ListNode) -> None:
        if node._owner is not self:
            raise ValueError("node does not belong to this list")

    def insert(self, node: ListNode, value: Any, after: bool = True) -> ListNode:
        """Insert a value next to ``node`` (after it, or before it) and return the new node."""
        self._check_owned(node)
        new = self._new_node(value)
        if after:
            new.prev = node
            new.next = node.next
            if self._tail is node:
                self._tail = new
        else:
            new.next = node
            new.prev = node.prev
            if self._head is node:
                self._head = new
        if new.prev is not None:
            new.prev.next = new
        if new.next is not None:
            new.next.prev = new
        self._len += 1
        return new

    def remove(self, node: ListNode) -> None:
        """Unlink ``node`` from the list, passing its value to ``free`` if set."""
        self._check_owned(node)
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self._tail = node.prev
        if self.free is not None:
            self.free(node.value)
        node.prev = node.next = None
        node._owner = None
        self._len -= 1

    def nodes(self, reverse: bool = False) -> Iterator[ListNode]:
        """Yield the nodes from head (or from tail when ``reverse``).

        The node just yielded may be removed while iterating; others may not.
        """
        current = self._tail if reverse else self._head
        while current is not None:
            following = current.prev if reverse else current.next
            yield current
            current = following

    def copy(self) -> "LinkedList":
        """Return a new list with the same callbacks and values passed through ``dup``."""
        clone = LinkedList(dup=self.dup, free=self.free, match=self.match)
        for value in self:
            if self.dup is not None:
                value = self.dup(value)
                if value is None:
                    raise ValueError("dup callback failed to copy a value")
            clone.add_tail(value)
        return clone

    def search(self, key: Any) -> Optional[ListNode]:
        """Return the first node from the head whose value matches ``key``, or None."""
        for node in self.nodes():
            if self.match is not None:
                if self.match(node.value, key):
                    return node
            elif node.value == key:
                return node
        return None

    def node_at(self, index: int) -> Optional[ListNode]:
        """Node at a zero-based index; negative indexes count from the tail. None if out of range."""
        if index < 0:
            steps = -index - 1
            walker = self.nodes(reverse=True)
        else:
            steps = index
            walker = self.nodes()
        for position, node in enumerate(walker):
            if position == steps:
                return node
        return None

    def rotate(self) -> None:
        """Move the tail node to the head."""
        if self._len <= 1:
            return
        tail = self._tail
        assert tail is not None and self._head is not None
        self._tail = tail.prev
        assert self._tail is not None
        self._tail.next = None
        self._head.prev = tail
        tail.prev = None
        tail.next = self._head
        self._head = tail

    def clear(self) -> None:
        """Remove every node, passing each value to ``free`` if set."""
        for node in self.nodes():
            if self.free is not None:
                self.free(node.value)
            node.prev = node.next = None
            node._owner = None
        self._head = self._tail = None
        self._len = 0