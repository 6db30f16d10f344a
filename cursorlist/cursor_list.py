"""A doubly linked list with a movable cursor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a :class:`CursorList`."""

    data: Any
    next: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)


class CursorList:
    """Doubly linked list that keeps a cursor on one of its nodes.

    Navigation methods move the cursor and return the data under it, or
    ``None`` when the cursor leaves the list or the list is empty.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        self.cursor: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        """Yield the data from head to tail without moving the cursor."""
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _data_at_cursor(self) -> Any:
        return None if self.cursor is None else self.cursor.data

    def first(self) -> Any:
        """Move the cursor to the head and return its data."""
        if self.head is None:
            return None
        self.cursor = self.head
        return self.cursor.data

    def next(self) -> Any:
        """Advance the cursor one node and return its data."""
        if self.cursor is None:
            return None
        self.cursor = self.cursor.next
        return self._data_at_cursor()

    def last(self) -> Any:
        """Move the cursor to the tail and return its data."""
        if self.tail is None:
            return None
        self.cursor = self.tail
        return self.cursor.data

    def prev(self) -> Any:
        """Move the cursor back one node and return its data."""
        if self.cursor is None:
            return None
        self.cursor = self.cursor.prev
        return self._data_at_cursor()

    def current(self) -> Any:
        """Return the data under the cursor without moving it."""
        return self._data_at_cursor()

    def push_front(self, data: Any) -> None:
        """Insert ``data`` before the head; the cursor moves onto it."""
        node = Node(data)
        if self.head is None:
            self.head = self.tail = node
        else:
            node.next = self.head
            self.head.prev = node
            self.head = node
        self.cursor = node

    def push_back(self, data: Any) -> None:
        """Insert ``data`` after the tail; the cursor moves onto it."""
        self.cursor = self.tail
        self.push_current(data)

    def push_current(self, data: Any) -> None:
        """Insert ``data`` after the cursor; the cursor moves onto it.

        With no cursor the new node becomes the whole list.
        """
        node = Node(data)
        current = self.cursor
        if current is None:
            self.head = self.tail = node
        else:
            node.next = current.next
            node.prev = current
            if current.next is not None:
                current.next.prev = node
            else:
                self.tail = node
            current.next = node
        self.cursor = node

    def pop_front(self) -> Any:
        """Remove the head and return its data."""
        self.cursor = self.head
        return self.pop_current()

    def pop_back(self) -> Any:
        """Remove the tail and return its data."""
        self.cursor = self.tail
        return self.pop_current()

    def pop_current(self) -> Any:
        """Remove the node under the cursor and return its data.

        The cursor moves to the following node, or to the preceding one
        when the removed node was the tail.
        """
        node = self.cursor
        if node is None:
            return None
        left, right = node.prev, node.next

        if node is self.head:
            self.head = right
        else:
            left.next = right

        if node is self.tail:
            self.tail = left
        else:
            right.prev = left

        self.cursor = right if right is not None else left
        node.next = node.prev = None
        return node.data

    def clean(self) -> None:
        """Remove every node."""
        while self.head is not None:
            self.pop_front()