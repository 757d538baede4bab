"""Shared room document fixtures for the export tests."""

from __future__ import annotations

import pytest


def rectangle_loop(x0: float, y0: float, x1: float, y1: float) -> list[dict]:
    """JSON segments for a counter-clockwise axis-aligned rectangle."""
    corners = [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]
    segments = []
    for i, (sx, sy) in enumerate(corners):
        ex, ey = corners[(i + 1) % len(corners)]
        segments.append({"start": {"x": sx, "y": sy, "z": 0.0}, "end": {"x": ex, "y": ey, "z": 0.0}})
    return segments


@pytest.fixture
def square_segments() -> list[dict]:
    return rectangle_loop(0.0, 0.0, 10.0, 10.0)


@pytest.fixture
def room_document() -> dict:
    """Two rooms; the hall has a column cut out as a second loop."""
    return {
        "rooms": [
            {
                "id": "101",
                "name": "Office",
                "loops": [rectangle_loop(0.0, 0.0, 10.0, 10.0)],
            },
            {
                "id": "102",
                "name": "Hall",
                "boundingBox": {"min": {"x": 0.0, "y": 0.0}, "max": {"x": 20.0, "y": 10.0}},
                "loops": [
                    rectangle_loop(0.0, 0.0, 20.0, 10.0),
                    rectangle_loop(9.0, 4.0, 11.0, 6.0),
                ],
            },
        ]
    }
