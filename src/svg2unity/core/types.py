"""
Core data types for svg2unity.

Points, the path command parser state and the keyframe sequence that the
sampler grows and the writers consume.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, NamedTuple

import numpy as np


class Point(NamedTuple):
    """A 2-D coordinate, in SVG pixel space or normalized output space."""

    x: float
    y: float

    def offset(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)

    def distance_to(self, other: Point) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


ORIGIN = Point(0.0, 0.0)


class Command(str, Enum):
    """Supported SVG path commands.

    The active command persists across tokens until a new letter appears.
    """

    MOVE_ABS = "M"
    MOVE_REL = "m"
    CURVE_REL = "c"
    LINE_REL = "l"

    @property
    def is_move(self) -> bool:
        return self in (Command.MOVE_ABS, Command.MOVE_REL)

    @property
    def skipped_args(self) -> int:
        """Number of leading numbers consumed and discarded (Bezier control points)."""
        return 4 if self is Command.CURVE_REL else 0


class Bounds(NamedTuple):
    """Axis-aligned extent of a set of points."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float


@dataclass
class KeyframeSequence:
    """Append-only ordered keyframes plus the indices where disjoint curves meet.

    Index ``i`` doubles as the playback time ``i / fps``.
    """

    _points: list[Point] = field(default_factory=list)
    _breaks: list[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]

    @property
    def breaks(self) -> tuple[int, ...]:
        return tuple(self._breaks)

    @property
    def last(self) -> Point | None:
        return self._points[-1] if self._points else None

    def append(self, point: Point) -> None:
        self._points.append(Point(float(point.x), float(point.y)))

    def hold(self, point: Point, count: int) -> None:
        """Append ``count`` copies of ``point``."""
        for _ in range(count):
            self.append(point)

    def mark_break(self) -> int:
        """Record a break at the current end of the sequence and return its index."""
        index = len(self._points)
        self._breaks.append(index)
        return index

    @staticmethod
    def time_at(index: int, fps: int) -> float:
        return index / fps

    def duration(self, fps: int) -> float:
        return len(self._points) / fps

    def as_array(self) -> np.ndarray:
        """Return the points as an (N, 2) float array."""
        if not self._points:
            return np.empty((0, 2), dtype=float)
        return np.asarray(self._points, dtype=float)

    def bounds(self) -> Bounds | None:
        if not self._points:
            return None
        arr = self.as_array()
        lo = arr.min(axis=0)
        hi = arr.max(axis=0)
        return Bounds(float(lo[0]), float(lo[1]), float(hi[0]), float(hi[1]))
