"""Stack built on the linked list."""

from __future__ import annotations

from typing import Any

from .linked_list import LinkedList


class EmptyStackError(IndexError):
    """Raised when a stack lacks the element an operation needs."""


class Stack(LinkedList):
    """A LIFO stack; iteration goes from the top down."""

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        self._push_front(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self.is_empty():
            raise EmptyStackError("stack is empty, cannot pop")
        return self._pop_front()

    def top(self) -> Any:
        """Return the top value without removing it."""
        if self.is_empty():
            raise EmptyStackError("stack is empty")
        return self.head.value

    def next_to_top(self) -> Any:
        """Return the value just below the top."""
        if self.is_empty():
            raise EmptyStackError("stack is empty")
        second = self.head.next
        if second is None:
            raise EmptyStackError("stack has no second element")
        return second.value