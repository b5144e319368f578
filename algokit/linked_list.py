"""Singly linked list and its node types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A list node holding a value and a link to the next node."""

    value: Any
    next: Optional["ListNode"] = None


@dataclass(eq=False)
class DoublyListNode(ListNode):
    """A list node that also links back to the previous node."""

    prev: Optional[ListNode] = None


class LinkedList:
    """A singly linked list that keeps track of its head, tail and size."""

    def __init__(self):
        self._head: Optional[ListNode] = None
        self._tail: Optional[ListNode] = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    @property
    def head(self) -> Optional[ListNode]:
        """The first node, or None when the list is empty."""
        return self._head

    def is_empty(self) -> bool:
        """Return True when the list holds no elements."""
        return self._size == 0

    def append(self, value: Any) -> None:
        """Add a value at the end of the list."""
        node = ListNode(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove(self, value: Any) -> int:
        """Remove every node holding ``value``; return how many were removed."""
        previous: Optional[ListNode] = None
        node = self._head
        removed = 0
        while node is not None:
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                removed += 1
            else:
                previous = node
            node = node.next
        self._tail = previous
        self._size -= removed
        return removed

    def search(self, value: Any) -> Optional[ListNode]:
        """Return the first node holding ``value``, or None."""
        node = self._head
        while node is not None:
            if node.value == value:
                return node
            node = node.next
        return None

    def _push_front(self, value: Any) -> None:
        node = ListNode(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def _pop_front(self) -> Any:
        node = self._head
        assert node is not None
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value