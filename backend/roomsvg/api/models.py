"""
Pydantic data models for the room SVG export API.

These models define the shapes of requests and responses used by the
backend, including the JSON room document accepted by both the HTTP API
and the command line exporter.  Conversion helpers turn the validated
payloads into the immutable geometry values used by the encoder.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field

from ..services.geometry import BoundingBox, Point, Segment


class LoopPoint(BaseModel):
    """Single model-space point.  ``z`` is optional and ignored."""

    x: float
    y: float
    z: float = 0.0

    def to_point(self) -> Point:
        return Point(self.x, self.y, self.z)


class BoundingBoxModel(BaseModel):
    """Axis-aligned bounding box of a loop or room."""

    min: LoopPoint = Field(..., description="Corner with the smallest coordinates")
    max: LoopPoint = Field(..., description="Corner with the largest coordinates")

    def to_bounding_box(self) -> BoundingBox:
        return BoundingBox(self.min.to_point(), self.max.to_point())


class BoundarySegment(BaseModel):
    """One directed edge of a room boundary loop."""

    start: LoopPoint
    end: LoopPoint
    curveType: Literal["line", "arc", "spline"] = Field(
        default="line",
        description="Curve kind reported by the source model; only 'line' can be encoded",
    )

    def to_segment(self) -> Segment:
        return Segment(self.start.to_point(), self.end.to_point(), self.curveType)


def to_loop(segments: List[BoundarySegment]) -> List[Segment]:
    return [seg.to_segment() for seg in segments]


class Room(BaseModel):
    """A room with one or more boundary loops."""

    id: str = Field(..., description="Unique identifier of the room in its document")
    name: str = Field(default="", description="Human readable room name")
    boundingBox: BoundingBoxModel | None = Field(
        default=None,
        description="Declared extent of the room; derived from the loops when omitted",
    )
    loops: List[List[BoundarySegment]] = Field(
        default_factory=list,
        description="Boundary loops; the first one is the outer boundary",
    )


class RoomDocument(BaseModel):
    """A collection of rooms exported from a building model."""

    rooms: List[Room] = Field(default_factory=list)


class SvgPathRequest(BaseModel):
    """Request body for encoding a single loop."""

    segments: List[BoundarySegment] = Field(
        ..., description="Ordered, closed loop of boundary segments"
    )
    boundingBox: BoundingBoxModel | None = Field(
        default=None,
        description="Extent of the loop; computed from the segment end points when omitted",
    )
    canvasSize: int | None = Field(
        default=None,
        description="Side length of the square target canvas; defaults to the configured size",
    )


class RoomSvgRequest(BaseModel):
    """Request body for encoding a room selected from a room document."""

    document: RoomDocument
    roomId: str | None = Field(
        default=None,
        description="Id or name of the room; optional when the document holds a single room",
    )
    canvasSize: int | None = None


class SvgPathResponse(BaseModel):
    """Encoded path data and the viewer URL that displays it."""

    pathData: str = Field(..., description="SVG path data, e.g. 'M0 100L100 100L100 0L0 0L0 100Z'")
    viewerUrl: str = Field(..., description="Viewer URL with the path data as query string")
    roomId: str | None = None
    roomName: str | None = None
    metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Additional metadata such as canvas size, segment count and scale",
    )
