"""Building blocks of the travelling salesman problem: points, moves, tours."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterator, List, Sequence, TextIO, Tuple


def index_to_edge(j: int, i: int) -> int:
    """Position in the edge list of the edge between nodes ``j`` and ``i``.

    Edges are stored node by node: for each node, its edges towards every
    node inserted before it, in insertion order.
    """
    if j > i:
        return j * (j - 1) // 2 + i
    return i * (i - 1) // 2 + j


@dataclass(frozen=True)
class Point:
    """A point in the plane with real coordinates."""

    x: float = 0.0
    y: float = 0.0

    def distance(self, other: "Point") -> float:
        """Euclidean distance to ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Move:
    """The tour positions touched by one neighbourhood move."""

    indices: Tuple[int, ...]


class TabuList:
    """A bounded list of recent moves, the newest first."""

    def __init__(self, size: int):
        if size < 0:
            raise ValueError("tabu list size must not be negative")
        self._size = size
        self._moves: Deque[Move] = deque(maxlen=size)

    @property
    def size(self) -> int:
        """The largest number of moves kept."""
        return self._size

    def add(self, move: Move) -> None:
        """Put ``move`` at the head, dropping the oldest move when full."""
        self._moves.appendleft(move)

    def __iter__(self) -> Iterator[Move]:
        return iter(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    def __repr__(self) -> str:
        return f"TabuList(size={self._size}, moves={list(self._moves)!r})"


@dataclass
class Solution:
    """A tour as a sequence of node indices, with its total length."""

    tour: List[int] = field(default_factory=list)
    value: float = 0.0

    def __init__(self) -> None:
        self.tour = []
        self.value = 0.0

    def copy(self) -> "Solution":
        """Return an independent copy."""
        result = Solution()
        result.tour = list(self.tour)
        result.value = self.value
        return result

    def insert(self, node: int, edges: Sequence[float]) -> None:
        """Insert ``node`` where it lengthens the tour the least.

        The first two nodes are simply appended and leave the value unchanged.
        """
        tour = self.tour
        if len(tour) < 2:
            tour.append(node)
            return

        def cost(a: int, b: int) -> float:
            return (
                edges[index_to_edge(a, node)]
                + edges[index_to_edge(b, node)]
                - edges[index_to_edge(a, b)]
            )

        best = math.inf
        position = -1
        for i, (a, b) in enumerate(zip(tour, tour[1:])):
            value = cost(a, b)
            if value < best:
                best = value
                position = i + 1
        closing = cost(tour[0], tour[-1])
        if closing < best:
            best = closing
            position = 0
        tour.insert(position, node)
        self.value += best

    def recompute_value(self, edges: Sequence[float]) -> None:
        """Recompute the tour length from scratch, closing edge included."""
        tour = self.tour
        if not tour:
            raise ValueError("empty tour has no value")
        self.value = edges[index_to_edge(tour[0], tour[-1])] + sum(
            edges[index_to_edge(a, b)] for a, b in zip(tour, tour[1:])
        )

    def write(self, stream: TextIO) -> None:
        """Write the value and then the node sequence to ``stream``."""
        stream.write(f"{self.value:f}\n\n")
        stream.write("".join(f"{node} " for node in self.tour))
        stream.write("\n\n")