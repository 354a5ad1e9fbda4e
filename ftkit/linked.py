"""A singly linked list whose nodes can be visited and rewritten in place."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`: its content and the link after it."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list of arbitrary contents.

    New contents are pushed on the front. Iterating over the list yields
    the contents from front to back.
    """

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
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
            following = node.next
            yield node
            node = following

    def push(self, content: Any) -> Node:
        """Put ``content`` in a new node at the front of the list and return the node."""
        self.head = Node(content, self.head)
        return self.head

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, front to back, passing each content to ``delete`` first."""
        while self.head is not None:
            node = self.head
            if delete is not None:
                delete(node.content)
            self.head = node.next
            node.next = None

    def for_each(self, f: Callable[[Node], Any]) -> None:
        """Call ``f`` on every node, front to back.

        The next node is looked up before ``f`` is called, so ``f`` may
        change the node it is given.
        """
        for node in self._nodes():
            f(node)

    def map(self, f: Callable[[Node], Any]) -> LinkedList:
        """A new list holding ``f(node)`` for every node, in the same order.

        The original list is left as it is; an exception raised by ``f``
        propagates and no list is returned.
        """
        return LinkedList(f(node) for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"