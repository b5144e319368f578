"""A travelling salesman instance: point layouts and the starting tour."""

from __future__ import annotations

import math
import random
from typing import List, Optional, Sequence, TextIO

from .model import Point, Solution, index_to_edge


def distribution(n: int) -> int:
    """Smallest power of ten, at least 10, that is not below ``n``."""
    num = 10
    while num < n:
        num *= 10
    return num


def max_edge(edges: Sequence[float]) -> int:
    """Index of the longest edge, the first among equals."""
    if not edges:
        raise ValueError("no edges")
    best = 0
    for i, length in enumerate(edges):
        if length > edges[best]:
            best = i
    return best


def find_first_node(edge_index: int) -> int:
    """The higher-numbered endpoint of the edge at ``edge_index``."""
    j = 1
    while edge_index > index_to_edge(j, j - 1):
        j += 1
    return j


def find_second_node(edge_index: int, j: int) -> int:
    """The lower-numbered endpoint of the edge at ``edge_index`` whose other end is ``j``."""
    for k in range(j):
        if index_to_edge(j, k) == edge_index:
            return k
    raise ValueError(f"edge {edge_index} does not end at node {j}")


def farthest_insertion(
    j: int, k: int, edge_index: int, edges: Sequence[float], n: int
) -> Solution:
    """Build a tour of ``n`` nodes from the cycle ``j, k`` by farthest insertion.

    At each step the node with the largest total distance from the nodes
    already in the tour is inserted where it costs the least.
    """
    solution = Solution()
    solution.value = edges[edge_index] * 2
    solution.insert(j, edges)
    solution.insert(k, edges)
    inserted = [False] * n
    inserted[j] = inserted[k] = True
    distance = [
        0.0 if inserted[i] else edges[index_to_edge(j, i)] + edges[index_to_edge(k, i)]
        for i in range(n)
    ]
    while len(solution.tour) < n:
        farthest = max(
            (i for i in range(n) if not inserted[i]), key=lambda i: distance[i]
        )
        solution.insert(farthest, edges)
        inserted[farthest] = True
        for i in range(n):
            if not inserted[i]:
                distance[i] += edges[index_to_edge(farthest, i)]
    return solution


class TSP:
    """A problem instance: distinct points and the lengths of every edge."""

    def __init__(self, n: int, rng: Optional[random.Random] = None):
        self.n = n
        self.rng = rng if rng is not None else random.Random()
        self.points: List[Point] = []
        self.edges: List[float] = []

    def _frand(self, low: float, high: float) -> float:
        return low + self.rng.random() * (high - low)

    def insert_node(self, point: Point) -> bool:
        """Add ``point`` unless one with the same coordinates exists.

        Returns True when the point was added.
        """
        if any(p.x == point.x and p.y == point.y for p in self.points):
            return False
        self.edges.extend(point.distance(p) for p in self.points)
        self.points.append(point)
        return True

    def _insert_until_new(self, make_point) -> Point:
        while True:
            point = make_point()
            if self.insert_node(point):
                return point

    def random_design(self) -> None:
        """Scatter the points uniformly over a square."""
        span = distribution(self.n)
        for _ in range(self.n):
            self._insert_until_new(
                lambda: Point(self._frand(0, span), self._frand(0, span))
            )

    def cluster_design(self) -> None:
        """Gather the points in two clusters around random centres."""
        span = distribution(self.n)
        half = self.n // 2 - 1

        def around(centre: Point) -> Point:
            return Point(
                centre.x + self._frand(0, span) / 5,
                centre.y + self._frand(0, span) / 5,
            )

        first = Point(self._frand(0, span), self._frand(0, span))
        self.insert_node(first)
        for _ in range(half):
            self._insert_until_new(lambda: around(first))
        second = self._insert_until_new(
            lambda: Point(self._frand(0, span), self._frand(0, span))
        )
        for _ in range(half):
            self._insert_until_new(lambda: around(second))

    def linear_design(self) -> None:
        """Place the points on the line through two random points."""
        span = distribution(self.n)
        p1 = Point(self._frand(0, span), self._frand(0, span))
        self.insert_node(p1)
        p2 = self._insert_until_new(
            lambda: Point(self._frand(0, span), self._frand(0, span))
        )
        remaining = range(2, self.n)
        if p1.x != p2.x:
            slope = (p2.y - p1.y) / (p2.x - p1.x)
            intercept = (p2.x * p1.y - p1.x * p2.y) / (p2.x - p1.x)

            def on_line() -> Point:
                x = self._frand(p1.x, p2.x)
                return Point(x, x * slope + intercept)

            for _ in remaining:
                self._insert_until_new(on_line)
        else:
            for _ in remaining:
                self._insert_until_new(lambda: Point(p1.x, self._frand(p1.y, p2.y)))

    def circle_design(self) -> None:
        """Place the points on a circle of random centre and radius."""
        span = distribution(self.n)
        centre = Point(self._frand(0, span), self._frand(0, span))
        radius = self._frand(span // 6, span // 3)

        def on_circle() -> Point:
            angle = 360 * self._frand(0, span) * math.pi / 180
            return Point(
                centre.x + math.cos(angle) * radius,
                centre.y + math.sin(angle) * radius,
            )

        for _ in range(self.n):
            self._insert_until_new(on_circle)

    def write_edges(self, stream: TextIO) -> None:
        """Write the number of points and then every edge length."""
        stream.write(f"{self.n}\n\n")
        stream.write("".join(f"{length:f} " for length in self.edges))

    def write_nodes(self, stream: TextIO) -> None:
        """Write one ``x,y`` line per point."""
        stream.write("".join(f"{p.x:f},{p.y:f}\n" for p in self.points))

    def init_solution(self) -> Solution:
        """Starting tour by farthest insertion from the longest edge."""
        longest = max_edge(self.edges)
        j = find_first_node(longest)
        k = find_second_node(longest, j)
        return farthest_insertion(j, k, longest, self.edges, len(self.points))