"""Integer points, segments and sweep-line events."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Point:
    """A point with integer coordinates, ordered by x and then by y."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True, order=True)
class Segment:
    """A segment between two points, ordered by start point and then end point."""

    start: Point
    end: Point

    @classmethod
    def from_coords(cls, xa: int, ya: int, xb: int, yb: int) -> "Segment":
        """Build a segment from the coordinates of its two endpoints."""
        return cls(Point(xa, ya), Point(xb, yb))


@dataclass(frozen=True)
class Event:
    """An endpoint of a segment, as met by a left-to-right sweep."""

    segment: Segment
    is_start: bool

    @property
    def point(self) -> Point:
        """The endpoint the event refers to."""
        return self.segment.start if self.is_start else self.segment.end

    def __le__(self, other: "Event") -> bool:
        """Order by x; on equal x start events come first, then by y."""
        if not isinstance(other, Event):
            return NotImplemented
        mine, theirs = self.point, other.point
        if mine.x != theirs.x:
            return mine.x < theirs.x
        if self.is_start != other.is_start:
            return self.is_start
        return mine.y <= theirs.y