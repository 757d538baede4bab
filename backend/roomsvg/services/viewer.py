"""
Hand encoded path data to the external SVG viewer.

The viewer is a small web server that renders the ``d`` query parameter
as an SVG path on a 100 x 100 canvas.  Path data only contains the
letters ``M``, ``L`` and ``Z``, digits, minus signs and spaces, so
replacing each space with ``+`` is enough to embed it in a URL.
"""

from __future__ import annotations

import logging
import webbrowser
from typing import Callable

logger = logging.getLogger(__name__)

LOCAL_VIEWER_URL = "http://127.0.0.1:5000"
REMOTE_VIEWER_URL = "https://shielded-hamlet-1585.herokuapp.com"


def build_viewer_url(path_data: str, base_url: str = REMOTE_VIEWER_URL) -> str:
    """Return ``base_url`` with ``path_data`` appended as the ``d`` parameter."""
    d = path_data.replace(" ", "+")
    return f"{base_url}?d={d}"


def display_svg(
    path_data: str,
    base_url: str = REMOTE_VIEWER_URL,
    opener: Callable[[str], object] = webbrowser.open,
) -> str:
    """Open the viewer for ``path_data`` and return the URL that was opened."""
    url = build_viewer_url(path_data, base_url)
    logger.info("Opening SVG viewer at %s", url)
    opener(url)
    return url
