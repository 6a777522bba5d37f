"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Node | None = None


class LinkedList:
    """Singly linked list supporting push at both ends, mapping and clearing."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its new node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its new node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def clear(self, release: Callable[[Any], object] | None = None) -> None:
        """Remove every node, passing each content to ``release`` if given."""
        node = self.head
        while node is not None:
            following = node.next
            if release is not None:
                release(node.content)
            node.next = None
            node = following
        self.head = None
        self._tail = None
        self._size = 0

    def last(self) -> Node | None:
        """The final node, or ``None`` when the list is empty."""
        return self._tail

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """A new list holding ``func`` applied to each content, in order."""
        return LinkedList(func(content) for content in self)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"