"""A singly linked list of arbitrary contents."""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One element of a linked list."""

    content: Any = None
    next: Optional["Node"] = None


def _nodes(head: Optional[Node]) -> Iterator[Node]:
    node = head
    while node is not None:
        following = node.next
        yield node
        node = following


class LinkedList:
    """A singly linked list with cheap insertion at the front."""

    def __init__(self, contents: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for content in contents or ():
            self.append(content)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def append(self, content: Any) -> Node:
        """Insert ``content`` at the end and return its node."""
        node = Node(content)
        if self.head is None:
            self.head = node
        else:
            last = self.head
            while last.next is not None:
                last = last.next
            last.next = node
        return node

    def pop_front(self, delete: Optional[Callable[[Any], None]] = None) -> Any:
        """Remove the first element, hand its content to ``delete``, and return it."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every element, handing each content to ``delete`` in order."""
        head, self.head = self.head, None
        for node in _nodes(head):
            if delete is not None:
                delete(node.content)
            node.next = None

    def for_each(self, func: Callable[[Node], None]) -> None:
        """Call ``func`` on every node, front to back."""
        for node in _nodes(self.head):
            func(node)

    def map(self, func: Callable[[Node], Optional[Node]]) -> "LinkedList":
        """Build a new list from ``func`` applied to a copy of each node.

        ``func`` receives a fresh node holding a shallow copy of the content
        and must return the node to put in the new list.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        for node in _nodes(self.head):
            produced = func(Node(copy.copy(node.content)))
            if produced is None:
                result.clear()
                raise ValueError("mapping function returned no node")
            produced.next = None
            if tail is None:
                result.head = produced
            else:
                tail.next = produced
            tail = produced
        return result

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in _nodes(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _nodes(self.head))