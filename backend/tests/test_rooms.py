"""
Tests for room selection and encoding in ``roomsvg/services/rooms.py``.

The fixtures in ``conftest.py`` describe a small two-room document; the
tests check that the right room and loop are chosen and that the
bounding box falls back to the loop extent when none is declared.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from roomsvg.api.models import RoomDocument
from roomsvg.services.errors import EmptyLoopError, RoomSelectionError
from roomsvg.services.geometry import Point
from roomsvg.services.rooms import (
    encode_room,
    load_room_document,
    room_bounding_box,
    room_loop,
    select_room,
)


def test_single_room_is_selected_automatically(room_document: dict) -> None:
    doc = RoomDocument.model_validate({"rooms": room_document["rooms"][:1]})
    assert select_room(doc).id == "101"
    # The id is irrelevant when there is nothing to choose from.
    assert select_room(doc, "999").id == "101"


def test_select_room_by_id_and_name(room_document: dict) -> None:
    doc = RoomDocument.model_validate(room_document)
    assert select_room(doc, "102").name == "Hall"
    assert select_room(doc, "Office").id == "101"


def test_select_room_requires_id_for_multiple_rooms(room_document: dict) -> None:
    doc = RoomDocument.model_validate(room_document)
    with pytest.raises(RoomSelectionError, match="2 rooms"):
        select_room(doc)


def test_select_room_unknown_id(room_document: dict) -> None:
    doc = RoomDocument.model_validate(room_document)
    with pytest.raises(RoomSelectionError, match="Kitchen"):
        select_room(doc, "Kitchen")


def test_select_room_empty_document() -> None:
    with pytest.raises(RoomSelectionError):
        select_room(RoomDocument())


def test_room_loop_returns_outer_boundary(room_document: dict) -> None:
    hall = RoomDocument.model_validate(room_document).rooms[1]
    loop = room_loop(hall)
    assert len(loop) == 4
    assert loop[1].start == Point(20.0, 0.0, 0.0)


def test_room_without_loops_raises() -> None:
    doc = RoomDocument.model_validate({"rooms": [{"id": "1", "loops": []}]})
    with pytest.raises(EmptyLoopError):
        room_loop(doc.rooms[0])


def test_room_bounding_box_declared_and_derived(room_document: dict) -> None:
    office, hall = RoomDocument.model_validate(room_document).rooms
    assert room_bounding_box(hall).max == Point(20.0, 10.0, 0.0)
    derived = room_bounding_box(office)
    assert derived.min == Point(0.0, 0.0, 0.0)
    assert derived.max == Point(10.0, 10.0, 0.0)


def test_encode_room(room_document: dict) -> None:
    office, hall = RoomDocument.model_validate(room_document).rooms
    assert encode_room(office) == ("M0 100L100 100L100 0L0 0L0 100Z", 4, 10.0)
    encoded = encode_room(hall)
    assert encoded.path_data == "M0 75L100 75L100 25L0 25L0 75Z"
    assert encoded.segment_count == 4
    assert encoded.scale == pytest.approx(5.0)


def test_load_room_document(tmp_path: Path, room_document: dict) -> None:
    path = tmp_path / "rooms.json"
    path.write_text(json.dumps(room_document), encoding="utf-8")
    doc = load_room_document(path)
    assert [room.id for room in doc.rooms] == ["101", "102"]
    assert doc.rooms[0].loops[0][0].curveType == "line"
