"""
SVG path encoding for closed room boundary loops.

This module turns one closed loop of line segments into the compact SVG
path mini-language consumed by the viewer, e.g.::

    M0 100L100 100L100 0L0 0L0 100Z

Two steps are involved.  ``project_point`` maps a single model-space
point onto a square canvas: it translates by the bounding box midpoint,
scales uniformly so the larger bounding box dimension spans the canvas,
rounds to integers, flips the Y axis (model Y points up, SVG Y points
down) and finally shifts the origin to the canvas centre.
``encode_loop`` computes the shared scale parameters once, walks the loop
and emits one ``M`` command for the loop start, one ``L`` command per
segment end and a closing ``Z``.

The encoder refuses malformed input instead of producing a path that
looks plausible but is wrong: gaps between consecutive segments, a loop
that does not return to its start point and non-linear segments all
raise the errors defined in :mod:`.errors`.  Debug logs for each
projected vertex can be enabled via the ``SVG_DEBUG`` environment
variable.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .errors import (
    DegenerateGeometryError,
    DiscontinuousLoopError,
    EmptyLoopError,
    InvalidCanvasSizeError,
    UnclosedLoopError,
    UnsupportedCurveTypeError,
)
from .geometry import DEFAULT_TOLERANCE, BoundingBox, Point, Segment

logger = logging.getLogger(__name__)

# Side length of the square target canvas in output units.
DEFAULT_CANVAS_SIZE: int = 100


@dataclass(frozen=True)
class ScaleTransform:
    """Parameters shared by every vertex of one loop.

    Attributes:
        midpoint: Centre of the loop's bounding box in model units.
        scale: Canvas units per model unit.
        canvas_size: Side length of the square canvas.
    """

    midpoint: Point
    scale: float
    canvas_size: int


def compute_scale_transform(
    bounding_box: BoundingBox, canvas_size: int = DEFAULT_CANVAS_SIZE
) -> ScaleTransform:
    """Derive the midpoint and uniform scale for ``bounding_box``.

    Raises:
        InvalidCanvasSizeError: if ``canvas_size`` is not a positive int.
        DegenerateGeometryError: if the box has zero extent in X and Y, or
            an extent so small the scale is not finite.
    """
    if isinstance(canvas_size, bool) or not isinstance(canvas_size, int) or canvas_size <= 0:
        raise InvalidCanvasSizeError(
            f"canvas size must be a positive integer, got {canvas_size!r}"
        )
    size = bounding_box.reference_dimension
    if not size > 0.0:
        raise DegenerateGeometryError(
            f"bounding box {bounding_box.min} - {bounding_box.max} has no extent; "
            "scale is undefined"
        )
    scale = canvas_size / size
    if not math.isfinite(scale):
        # Extents below the smallest normal float overflow the division.
        raise DegenerateGeometryError(
            f"bounding box extent {size!r} is too small to scale to {canvas_size}"
        )
    return ScaleTransform(
        midpoint=bounding_box.midpoint,
        scale=scale,
        canvas_size=canvas_size,
    )


def project_point(
    p: Point,
    midpoint: Point,
    scale: float,
    canvas_size: int = DEFAULT_CANVAS_SIZE,
) -> Tuple[int, int]:
    """Map a model-space point to integer canvas coordinates.

    Rounding adds one half and floors, so ``-49.5`` becomes ``-50`` and
    ``49.5`` becomes ``50``.  The ``z`` coordinate is ignored.
    """
    q = (p - midpoint) * scale
    x = math.floor(q.x + 0.5)
    y = math.floor(q.y + 0.5)

    y = -y

    half = canvas_size // 2
    return x + half, y + half


def format_point(x: int, y: int) -> str:
    return f"{x} {y}"


def _emit(
    parts: List[str], command: str, p: Point, transform: ScaleTransform
) -> None:
    x, y = project_point(p, transform.midpoint, transform.scale, transform.canvas_size)
    if os.getenv("SVG_DEBUG"):
        logger.debug("%s (%s, %s) -> (%d, %d)", command, p.x, p.y, x, y)
    parts.append(command + format_point(x, y))


def encode_segments(
    loop: Sequence[Segment],
    transform: ScaleTransform,
    tolerance: float = DEFAULT_TOLERANCE,
) -> str:
    """Encode ``loop`` with an already computed ``transform``.

    Callers that report the scale alongside the path use this so the
    reported value is the one the path was encoded with.  Raises the same
    loop errors as :func:`encode_loop`.
    """
    if not loop:
        raise EmptyLoopError("boundary loop has no segments")

    parts: List[str] = []
    loop_start: Point | None = None
    prev_end: Point | None = None

    for index, seg in enumerate(loop):
        if not seg.is_linear:
            raise UnsupportedCurveTypeError(index, seg.curve_type)

        if prev_end is not None and not prev_end.almost_equal(seg.start, tolerance):
            raise DiscontinuousLoopError(index)

        if loop_start is None:
            loop_start = seg.start
            _emit(parts, "M", seg.start, transform)

        _emit(parts, "L", seg.end, transform)
        prev_end = seg.end

    parts.append("Z")

    if not prev_end.almost_equal(loop_start, tolerance):
        raise UnclosedLoopError(
            f"last segment ends at ({prev_end.x}, {prev_end.y}) but the loop "
            f"starts at ({loop_start.x}, {loop_start.y})"
        )

    path_data = "".join(parts)
    logger.debug(
        "Encoded loop of %d segments at scale %.6g into %d characters",
        len(loop),
        transform.scale,
        len(path_data),
    )
    return path_data


def encode_loop(
    bounding_box: BoundingBox,
    loop: Sequence[Segment],
    canvas_size: int = DEFAULT_CANVAS_SIZE,
    tolerance: float = DEFAULT_TOLERANCE,
) -> str:
    """Encode a closed loop of line segments as SVG path data.

    Args:
        bounding_box: Extent of the loop; its midpoint maps to the canvas
            centre and its larger dimension spans the canvas.
        loop: Ordered, directed segments.  Each segment must start where
            the previous one ended and the last must end at the first
            segment's start.
        canvas_size: Side length of the square target canvas.
        tolerance: Absolute tolerance in model units for end point
            comparisons.

    Returns:
        The path string, ``"M{x} {y}L{x} {y}...Z"``.

    Raises:
        EmptyLoopError: if ``loop`` has no segments.
        InvalidCanvasSizeError: if ``canvas_size`` is not positive.
        DegenerateGeometryError: if ``bounding_box`` has no usable extent.
        UnsupportedCurveTypeError: if a segment is an arc or spline.
        DiscontinuousLoopError: if consecutive segments do not meet.
        UnclosedLoopError: if the loop does not return to its start.
    """
    if not loop:
        raise EmptyLoopError("boundary loop has no segments")

    transform = compute_scale_transform(bounding_box, canvas_size)
    return encode_segments(loop, transform, tolerance)
