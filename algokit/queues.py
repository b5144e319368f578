"""FIFO queue built on the linked list."""

from __future__ import annotations

from typing import Any

from .linked_list import LinkedList


class EmptyQueueError(IndexError):
    """Raised when an operation needs an element of an empty queue."""


class Queue(LinkedList):
    """A FIFO queue; iteration goes from the front to the back."""

    def __init__(self):
        super().__init__()

    def enqueue(self, value: Any) -> None:
        """Add a value at the back of the queue."""
        self.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise EmptyQueueError("queue is empty, cannot remove")
        return self._pop_front()

    def first(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise EmptyQueueError("queue is empty")
        return self.head.value