"""Computational geometry on integer points: orientation, intersection, hulls."""

from __future__ import annotations

from typing import List, MutableSequence, Optional, Sequence

from .points import Event, Point, Segment
from .sorting import merge
from .stack import Stack

_AXIS_MIN = -(2**31)
_AXIS_MAX = 2**31 - 1


def angle_left(p0: Point, p1: Point, p2: Point) -> int:
    """Cross product of p0p1 and p0p2.

    Positive when p0p2 is counter-clockwise from p0p1, negative when
    clockwise, zero when the points are collinear.
    """
    return (p1.x - p0.x) * (p2.y - p0.y) - (p2.x - p0.x) * (p1.y - p0.y)


def turn_left(p0: Point, p1: Point, p2: Point) -> int:
    """Orientation of the turn p0 -> p1 -> p2; positive for a left turn."""
    return angle_left(p0, p1, p2)


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """Return True when segment p1p2 meets segment p3p4."""
    d1 = angle_left(p3, p4, p1)
    d2 = angle_left(p3, p4, p2)
    d3 = angle_left(p1, p2, p3)
    d4 = angle_left(p1, p2, p4)
    if d1 == 0 and d2 == 0 and d3 == 0 and d4 == 0:

        def between(a: Point, b: Point, c: Point) -> bool:
            return (b.x - c.x) * (a.x - c.x) <= 0 and (b.y - c.y) * (a.y - c.y) <= 0

        return between(p1, p2, p3) or between(p1, p2, p4) or between(p3, p4, p1)
    opposite_12 = (d1 <= 0 <= d2) or (d1 >= 0 >= d2)
    opposite_34 = (d3 <= 0 <= d4) or (d3 >= 0 >= d4)
    return opposite_12 and opposite_34


def _require_points(points: Sequence[Point]) -> None:
    if not points:
        raise ValueError("no points given")


def lowest_point(points: Sequence[Point]) -> int:
    """Index of the lowest point, the leftmost among equals."""
    _require_points(points)
    return min(range(len(points)), key=lambda i: (points[i].y, points[i].x))


def highest_point(points: Sequence[Point]) -> int:
    """Index of the highest point, the rightmost among equals."""
    _require_points(points)
    return max(range(len(points)), key=lambda i: (points[i].y, points[i].x))


def compare_angles(origin: Point, a: Point, b: Point) -> bool:
    """True when ``a`` comes before ``b`` in polar order around ``origin``.

    Collinear points are ordered by distance, the nearer first.
    """
    res = angle_left(origin, a, b)
    if res > 0:
        return True
    if res < 0:
        return False
    if origin.x != a.x and origin.x != b.x:
        return abs(origin.x - a.x) < abs(origin.x - b.x)
    return a.y < b.y


def polar_order(points: Sequence[Point], pivot: int) -> List[Point]:
    """Return the points with ``points[pivot]`` first and the rest in polar order around it."""
    if not 0 <= pivot < len(points):
        raise IndexError("pivot index out of range")
    ordered = [points[pivot], *points[:pivot], *points[pivot + 1 :]]
    origin = ordered[0]

    def less_equal(a: Point, b: Point) -> bool:
        return compare_angles(origin, a, b)

    def sort(left: int, right: int) -> None:
        if left < right:
            center = (left + right) // 2
            sort(left, center)
            sort(center + 1, right)
            merge(ordered, left, center, right, less_equal)

    sort(1, len(ordered) - 1)
    return ordered


def graham_scan(points: Sequence[Point]) -> Stack:
    """Convex hull by Graham's scan; the stack holds the hull with the last vertex on top."""
    _require_points(points)
    ordered = polar_order(points, lowest_point(points))
    hull = Stack()
    hull.push(ordered[0])
    for point in ordered[1:]:
        while len(hull) >= 2 and turn_left(hull.next_to_top(), hull.top(), point) <= 0:
            hull.pop()
        hull.push(point)
    return hull


def min_polar_right(p: Point, points: Sequence[Point]) -> Optional[Point]:
    """Point not below ``p`` with the smallest polar angle from the positive x axis."""
    best = Point(_AXIS_MIN, p.y)
    found: Optional[Point] = None
    for candidate in points:
        if p.y <= candidate.y and candidate != p and compare_angles(p, candidate, best):
            best = found = candidate
    return found


def min_polar_left(p: Point, points: Sequence[Point]) -> Optional[Point]:
    """Point not above ``p`` with the smallest polar angle from the negative x axis."""
    best = Point(_AXIS_MAX, p.y)
    found: Optional[Point] = None
    for candidate in points:
        if p.y >= candidate.y and candidate != p and compare_angles(p, candidate, best):
            best = found = candidate
    return found


def jarvis_march(points: Sequence[Point]) -> List[Point]:
    """Convex hull by gift wrapping, counter-clockwise from the lowest point."""
    _require_points(points)
    bottom = points[lowest_point(points)]
    top = points[highest_point(points)]
    hull = [bottom]

    def grow(point: Point) -> None:
        if len(hull) >= len(points):
            raise ValueError("hull construction does not terminate")
        hull.append(point)

    while hull[-1] != top:
        nxt = min_polar_right(hull[-1], points)
        if nxt is None:
            raise ValueError("hull construction does not terminate")
        grow(nxt)
    nxt = min_polar_left(hull[-1], points)
    while nxt is not None and nxt != bottom:
        grow(nxt)
        nxt = min_polar_left(hull[-1], points)
    return hull


def order_segments(segments: MutableSequence[Segment]) -> None:
    """Replace each segment in place so that its start is not greater than its end."""
    for i, segment in enumerate(segments):
        if segment.end < segment.start:
            segments[i] = Segment(segment.end, segment.start)


def event_sequence(segments: Sequence[Segment]) -> List[Event]:
    """One start and one end event for every segment, in segment order."""
    return [
        event
        for segment in segments
        for event in (Event(segment, True), Event(segment, False))
    ]