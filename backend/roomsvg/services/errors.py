"""
Exceptions raised while turning a room boundary into SVG path data.

Every error here describes malformed input supplied by the caller.  None
of them are transient, so callers should abort the export for the shape
in question rather than retry.  All derive from ``ValueError`` so that
generic validation handlers continue to catch them.
"""

from __future__ import annotations

from typing import Optional


class SvgExportError(ValueError):
    """Base class for all export failures."""


class EmptyLoopError(SvgExportError):
    """Raised when a boundary loop contains no segments."""


class DegenerateGeometryError(SvgExportError):
    """Raised when the bounding box has no extent, so no scale exists."""


class InvalidBoundingBoxError(SvgExportError):
    """Raised when a bounding box has ``min`` greater than ``max``."""


class InvalidCanvasSizeError(SvgExportError):
    """Raised when the target canvas size is not a positive integer."""


class DiscontinuousLoopError(SvgExportError):
    """Raised when a segment does not start where the previous one ended."""

    def __init__(self, index: int, message: Optional[str] = None) -> None:
        self.index = index
        super().__init__(
            message
            or f"segment {index} does not start at the end point of segment {index - 1}"
        )


class UnclosedLoopError(SvgExportError):
    """Raised when the last segment does not end at the loop start point."""


class UnsupportedCurveTypeError(SvgExportError):
    """Raised for arc or spline segments, which cannot be encoded as lines."""

    def __init__(self, index: int, curve_type: str) -> None:
        self.index = index
        self.curve_type = curve_type
        super().__init__(
            f"segment {index} is a non-linear curve ({curve_type!r}); "
            "only line segments can be encoded"
        )


class RoomSelectionError(SvgExportError):
    """Raised when no single room can be chosen from a room document."""


class NonFiniteCoordinateError(SvgExportError):
    """Raised when a coordinate is infinite or NaN."""
