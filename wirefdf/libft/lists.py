"""A singly linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One list cell holding a content value and the following node."""

    content: Any = None
    next: Node | None = None


class LinkedList:
    """Singly linked list of content values, built by pushing at the front."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._size = 0
        for item in reversed(list(items)):
            self.push_front(item)

    def push_front(self, content: Any) -> Node:
        """Insert a new node holding content at the front; return the node."""
        node = Node(content, self.head)
        self.head = node
        self._size += 1
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __len__(self) -> int:
        return self._size

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding func applied to each content, in order.

        The new list ends at the first element for which func returns None.
        """
        mapped = []
        for content in self:
            result = func(content)
            if result is None:
                break
            mapped.append(result)
        return LinkedList(mapped)

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, passing each content to delete first, front to back."""
        for node in list(self._nodes()):
            if delete is not None:
                delete(node.content)
            node.next = None
        self.head = None
        self._size = 0

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"