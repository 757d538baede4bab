"""
API routes for SVG path export.

``POST /svg/path`` encodes a single loop supplied directly by the client.
``POST /rooms/svg`` accepts a whole room document, selects one room and
encodes its outer boundary.  Both return the path data together with the
viewer URL that displays it; they never open the viewer themselves.

Export errors are not handled here.  They propagate to the exception
handler registered in :func:`roomsvg.main.create_app`, which turns them
into 422 responses.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from ..config import load_settings
from ..services.errors import EmptyLoopError
from ..services.geometry import BoundingBox, loop_points
from ..services.rooms import encode_room, select_room
from ..services.svg_path import compute_scale_transform, encode_segments
from ..services.viewer import build_viewer_url
from .models import RoomSvgRequest, SvgPathRequest, SvgPathResponse, to_loop

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/svg/path", response_model=SvgPathResponse)
async def create_svg_path(body: SvgPathRequest) -> SvgPathResponse:
    """Encode one closed loop of boundary segments as SVG path data.

    When no bounding box is supplied it is computed from the segment end
    points.  The canvas size defaults to the configured value.
    """
    settings = load_settings()
    canvas_size = body.canvasSize if body.canvasSize is not None else settings.canvas_size
    loop = to_loop(body.segments)
    if not loop:
        raise EmptyLoopError("boundary loop has no segments")
    if body.boundingBox is not None:
        bbox = body.boundingBox.to_bounding_box()
    else:
        bbox = BoundingBox.from_points(loop_points(loop))

    transform = compute_scale_transform(bbox, canvas_size)
    path_data = encode_segments(loop, transform, settings.tolerance)
    return SvgPathResponse(
        pathData=path_data,
        viewerUrl=build_viewer_url(path_data, settings.viewer_base_url),
        metadata={
            "canvasSize": canvas_size,
            "segmentCount": len(loop),
            "scale": transform.scale,
        },
    )


@router.post("/rooms/svg", response_model=SvgPathResponse)
async def create_room_svg(body: RoomSvgRequest) -> SvgPathResponse:
    """Select a room from a room document and encode its outer boundary."""
    settings = load_settings()
    canvas_size = body.canvasSize if body.canvasSize is not None else settings.canvas_size
    room = select_room(body.document, body.roomId)
    encoded = encode_room(room, canvas_size, settings.tolerance)
    return SvgPathResponse(
        pathData=encoded.path_data,
        viewerUrl=build_viewer_url(encoded.path_data, settings.viewer_base_url),
        roomId=room.id,
        roomName=room.name,
        metadata={
            "canvasSize": canvas_size,
            "segmentCount": encoded.segment_count,
            "scale": encoded.scale,
            "loopCount": len(room.loops),
        },
    )
