"""
Room selection and boundary extraction for room documents.

A room document lists rooms with their boundary loops, as exported from
a building model.  The helpers here pick the room to export, take its
outer boundary loop and determine the bounding box used for scaling.

Selection follows the host application's command: a document holding a
single room needs no further input; otherwise the caller must name the
room by id or name.  There is no interactive fallback.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, NamedTuple, Optional

from ..api.models import Room, RoomDocument, to_loop
from .errors import EmptyLoopError, RoomSelectionError
from .geometry import DEFAULT_TOLERANCE, BoundingBox, Segment, loop_points
from .svg_path import DEFAULT_CANVAS_SIZE, compute_scale_transform, encode_segments

logger = logging.getLogger(__name__)


def load_room_document(path: Path | str) -> RoomDocument:
    """Read and validate a room document from a JSON file."""
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    document = RoomDocument.model_validate(data)
    logger.debug("Loaded %d rooms from %s", len(document.rooms), path)
    return document


def select_room(document: RoomDocument, room_id: Optional[str] = None) -> Room:
    """Pick the room to export from ``document``.

    A document with exactly one room yields that room.  Otherwise
    ``room_id`` is matched against room ids first and room names second.

    Raises:
        RoomSelectionError: if the document is empty, ``room_id`` is
            missing for a multi-room document, or nothing matches.
    """
    rooms = document.rooms
    if not rooms:
        raise RoomSelectionError("room document contains no rooms")
    if len(rooms) == 1:
        return rooms[0]
    if room_id is None:
        raise RoomSelectionError(
            f"document contains {len(rooms)} rooms; specify which room to export"
        )
    for room in rooms:
        if room.id == room_id:
            return room
    for room in rooms:
        if room.name == room_id:
            return room
    raise RoomSelectionError(f"no room with id or name {room_id!r}")


def room_loop(room: Room) -> List[Segment]:
    """Return the outer boundary loop of ``room``."""
    if not room.loops:
        raise EmptyLoopError(f"room {room.id!r} has no boundary loops")
    if len(room.loops) > 1:
        logger.debug(
            "Room %s has %d boundary loops; only the first is exported",
            room.id,
            len(room.loops),
        )
    return to_loop(room.loops[0])


def room_bounding_box(room: Room) -> BoundingBox:
    """Return the declared bounding box, or one spanning every loop."""
    if room.boundingBox is not None:
        return room.boundingBox.to_bounding_box()
    points = [p for loop in room.loops for p in loop_points(to_loop(loop))]
    return BoundingBox.from_points(points)


class EncodedRoom(NamedTuple):
    """Path data for a room and the parameters it was encoded with."""

    path_data: str
    segment_count: int
    scale: float


def encode_room(
    room: Room,
    canvas_size: int = DEFAULT_CANVAS_SIZE,
    tolerance: float = DEFAULT_TOLERANCE,
) -> EncodedRoom:
    """Encode the outer boundary of ``room``."""
    loop = room_loop(room)
    transform = compute_scale_transform(room_bounding_box(room), canvas_size)
    path_data = encode_segments(loop, transform, tolerance)
    logger.info("Encoded room %s (%s) with %d segments", room.id, room.name, len(loop))
    return EncodedRoom(path_data, len(loop), transform.scale)
