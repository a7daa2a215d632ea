"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One cell of a linked list."""

    value: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __bool__(self) -> bool:
        return self.head is not None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, value: Any) -> Node:
        """Insert value at the front and return its node."""
        node = Node(value, self.head)
        self.head = node
        return node

    def push_back(self, value: Any) -> Node:
        """Append value at the back and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call f on every value, front to back."""
        for value in self:
            f(value)

    def map(self, f: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding f applied to every value."""
        return LinkedList(f(value) for value in self)

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, handing each value to release first when it is given."""
        if release is not None:
            for value in self:
                release(value)
        self.head = None

    def remove_first(self, release: Optional[Callable[[Any], Any]] = None) -> Any:
        """Remove the front node and return its value, handing it to release first."""
        if self.head is None:
            raise IndexError("remove from empty list")
        node = self.head
        self.head = node.next
        if release is not None:
            release(node.value)
        return node.value