"""
Export one room of a room document as SVG path data.

Usage::

    roomsvg-export rooms.json [--room ID] [--canvas-size N]
                   [--viewer-url URL] [--no-open]

The selected room's outer boundary is encoded, the path data is printed
and, unless ``--no-open`` is given, the viewer is opened in a browser.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_settings
from .services.rooms import encode_room, load_room_document, select_room
from .services.viewer import build_viewer_url, display_svg

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Export a room boundary as SVG path data")
    parser.add_argument("document", help="JSON room document")
    parser.add_argument("--room", default=None, help="Room id or name (optional for single-room documents)")
    parser.add_argument("--canvas-size", type=int, default=settings.canvas_size)
    parser.add_argument("--viewer-url", default=settings.viewer_base_url)
    parser.add_argument("--no-open", action="store_true", help="Print the path data only")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        document = load_room_document(args.document)
        room = select_room(document, args.room)
        path_data = encode_room(room, args.canvas_size, settings.tolerance).path_data
    except (OSError, ValueError) as exc:
        # Export errors, malformed JSON and schema violations all derive
        # from ValueError.  Bad paths surface as OSError.
        logger.error("Export aborted: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(path_data)
    if args.no_open:
        print(build_viewer_url(path_data, args.viewer_url))
    else:
        display_svg(path_data, args.viewer_url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
