"""Binary max-heap working in place on a list."""

from __future__ import annotations

from typing import Any, MutableSequence


class Heap:
    """A max-heap view over a mutable sequence, which it rearranges in place."""

    def __init__(self, items: MutableSequence[Any]):
        if items is None:
            raise ValueError("empty array")
        if len(items) <= 0:
            raise ValueError("invalid heap size")
        self._items = items
        self._size = len(items)

    @property
    def items(self) -> MutableSequence[Any]:
        """The underlying sequence."""
        return self._items

    @property
    def size(self) -> int:
        """The number of leading elements that belong to the heap."""
        return self._size

    @size.setter
    def size(self, value: int) -> None:
        if not 0 <= value <= len(self._items):
            raise ValueError("invalid heap size")
        self._size = value

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def _check(self, i: int) -> None:
        if not 0 <= i < self._size:
            raise IndexError("invalid index")

    def parent(self, i: int) -> int:
        """Return the index of the parent of node ``i``."""
        self._check(i)
        return i // 2

    def left(self, i: int) -> int:
        """Return the index of the left child of node ``i``."""
        self._check(i)
        return 2 * i + 1

    def right(self, i: int) -> int:
        """Return the index of the right child of node ``i``."""
        self._check(i)
        return 2 * i + 2

    def swap(self, i: int, j: int) -> None:
        """Exchange the elements at positions ``i`` and ``j``."""
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def heapify(self, i: int) -> None:
        """Sift the element at ``i`` down until the subtree is a max-heap."""
        self._check(i)
        items = self._items
        while True:
            left = 2 * i + 1
            right = left + 1
            largest = i
            if left < self._size and items[left] > items[largest]:
                largest = left
            if right < self._size and items[right] > items[largest]:
                largest = right
            if largest == i:
                return
            self.swap(i, largest)
            i = largest

    def build_heap(self) -> None:
        """Rearrange the whole heap range into a max-heap."""
        for i in range(min(self._size // 2, self._size - 1), -1, -1):
            self.heapify(i)

    def __repr__(self) -> str:
        return f"Heap({list(self._items[: self._size])!r})"