"""A singly linked list whose nodes carry arbitrary content."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Node", "LinkedList"]

Deleter = Optional[Callable[[Any], object]]


@dataclass(eq=False)
class Node:
    """One element of a :class:`LinkedList`."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert *content* at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append *content* at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def last(self) -> Optional[Node]:
        """The final node, or ``None`` for an empty list."""
        return self._tail

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing each content to *delete* in order."""
        node = self.head
        self.head = self._tail = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def for_each(self, f: Callable[[Any], object]) -> None:
        """Call *f* on every content, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any], delete: Deleter = None) -> LinkedList:
        """Return a new list of ``f(content)`` for each content.

        If *f* raises, every content already produced is passed to *delete*
        before the exception propagates.
        """
        mapped = LinkedList()
        try:
            for content in self:
                mapped.push_back(f(content))
        except Exception:
            mapped.clear(delete)
            raise
        return mapped