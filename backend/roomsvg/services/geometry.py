"""
Plain value types for room boundary geometry.

The encoder works on three small immutable types: a ``Point`` in model
units, a ``BoundingBox`` describing the extent of a loop, and a directed
``Segment`` joining two points.  A loop is simply an ordered sequence of
segments.  None of these types know anything about SVG; they exist so the
path encoder can be exercised without the host application's geometry
API.

Points carry an optional ``z`` coordinate because room boundaries are
usually reported in 3D, but every operation that matters for the export
happens in the XY plane.  Every coordinate must be finite; infinities and
NaN raise ``NonFiniteCoordinateError`` on construction.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Literal, Sequence

import numpy as np

from .errors import EmptyLoopError, InvalidBoundingBoxError, NonFiniteCoordinateError

# Absolute tolerance, in model units, used when comparing end points.
DEFAULT_TOLERANCE: float = 1e-9

CurveType = Literal["line", "arc", "spline"]


@dataclass(frozen=True)
class Point:
    """Immutable coordinate in model space."""

    x: float
    y: float
    z: float = 0.0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.x) and math.isfinite(self.y) and math.isfinite(self.z)):
            raise NonFiniteCoordinateError(
                f"coordinates must be finite, got ({self.x}, {self.y}, {self.z})"
            )

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def almost_equal(self, other: "Point", tol: float = DEFAULT_TOLERANCE) -> bool:
        """Return True when every axis differs by at most ``tol``."""
        return (
            abs(self.x - other.x) <= tol
            and abs(self.y - other.y) <= tol
            and abs(self.z - other.z) <= tol
        )


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned extent of a loop.

    Attributes:
        min: Corner with the smallest coordinates.
        max: Corner with the largest coordinates.
    """

    min: Point
    max: Point

    def __post_init__(self) -> None:
        if self.min.x > self.max.x or self.min.y > self.max.y:
            raise InvalidBoundingBoxError(
                f"bounding box min {self.min} exceeds max {self.max}"
            )

    @property
    def size(self) -> Point:
        return self.max - self.min

    @property
    def midpoint(self) -> Point:
        return self.min + 0.5 * self.size

    @property
    def reference_dimension(self) -> float:
        """The larger of the X and Y extents, used for uniform scaling."""
        size = self.size
        return max(size.x, size.y)

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BoundingBox":
        """Compute the bounding box of a collection of points.

        Raises:
            EmptyLoopError: if ``points`` is empty.
        """
        coords = np.array([(p.x, p.y, p.z) for p in points], dtype=float)
        if coords.size == 0:
            raise EmptyLoopError("cannot compute a bounding box without points")
        lo = coords.min(axis=0)
        hi = coords.max(axis=0)
        return cls(
            min=Point(float(lo[0]), float(lo[1]), float(lo[2])),
            max=Point(float(hi[0]), float(hi[1]), float(hi[2])),
        )


@dataclass(frozen=True)
class Segment:
    """Directed boundary edge from ``start`` to ``end``."""

    start: Point
    end: Point
    curve_type: CurveType = "line"

    @property
    def is_linear(self) -> bool:
        return self.curve_type == "line"


def loop_points(loop: Sequence[Segment]) -> List[Point]:
    """Return every start and end point of ``loop`` in order."""
    points: List[Point] = []
    for seg in loop:
        points.append(seg.start)
        points.append(seg.end)
    return points


def segments_from_points(points: Sequence[Point]) -> List[Segment]:
    """Build a closed loop of line segments through ``points``.

    The last point is joined back to the first.  If the caller already
    repeated the first point at the end, the duplicate is dropped so no
    zero-length closing segment is produced.
    """
    pts = list(points)
    if len(pts) > 1 and pts[-1].almost_equal(pts[0]):
        pts.pop()
    if not pts:
        raise EmptyLoopError("cannot build a loop without points")
    return [Segment(pts[i], pts[(i + 1) % len(pts)]) for i in range(len(pts))]
