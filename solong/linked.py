"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass
class Node(Generic[T]):
    """One link of a list: its content and the node after it."""

    content: T
    next: Optional["Node[T]"] = None


class LinkedList(Generic[T]):
    """A singly linked list reached through its first node."""

    def __init__(self) -> None:
        self.head: Node[T] | None = None

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> "LinkedList[T]":
        """Build a list holding ``items`` in order."""
        linked = cls()
        tail: Node[T] | None = None
        for item in items:
            node = Node(item)
            if tail is None:
                linked.head = node
            else:
                tail.next = node
            tail = node
        return linked

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def add_front(self, content: T) -> Node[T]:
        """Put a new node holding ``content`` at the front and return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: T) -> Node[T]:
        """Put a new node holding ``content`` at the back and return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node[T] | None:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[T], Any] | None = None) -> None:
        """Empty the list, passing every content to ``delete`` first if given."""
        for node in self._nodes():
            if delete is not None:
                delete(node.content)
            node.next = None
        self.head = None

    def iterate(self, func: Callable[[T], Any]) -> None:
        """Call ``func`` on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self, func: Callable[[T], U], delete: Callable[[U], Any] | None = None
    ) -> "LinkedList[U]":
        """Return a new list of ``func(content)`` for every content.

        If ``func`` raises, the contents already produced are handed to
        ``delete`` and the error propagates.
        """
        result: LinkedList[U] = LinkedList()
        tail: Node[U] | None = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.content