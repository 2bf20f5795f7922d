"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], object]]


@dataclass(eq=False)
class Node:
    """One link of a LinkedList."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A chain of Node objects reachable from ``head``."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Put *content* at the start of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Put *content* at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Deleter = None) -> None:
        """Empty the list, passing each content to *delete* in order."""
        node = self.head
        self.head = None
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
        """A new list of f(content) for every content of this one.

        If *f* returns None for any content, the contents mapped so far are
        handed to *delete* and ValueError is raised.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        for content in self:
            mapped = f(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError(f"mapping produced no value for {content!r}")
            node = Node(mapped)
            if tail is None:
                result.head = node
            else:
                tail.next = node
            tail = node
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"