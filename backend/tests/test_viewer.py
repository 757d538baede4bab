"""Tests for viewer URL construction in ``roomsvg/services/viewer.py``."""

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from roomsvg.services.viewer import (
    LOCAL_VIEWER_URL,
    REMOTE_VIEWER_URL,
    build_viewer_url,
    display_svg,
)


def test_build_viewer_url_replaces_spaces() -> None:
    url = build_viewer_url("M0 100L100 100L100 0L0 0L0 100Z", LOCAL_VIEWER_URL)
    assert url == "http://127.0.0.1:5000?d=M0+100L100+100L100+0L0+0L0+100Z"
    assert " " not in url


def test_build_viewer_url_defaults_to_remote_viewer() -> None:
    assert build_viewer_url("M0 0L1 1Z").startswith(REMOTE_VIEWER_URL + "?d=")


def test_display_svg_opens_url() -> None:
    opened: list[str] = []
    url = display_svg("M-1 2L3 4Z", "http://viewer.test", opener=opened.append)
    assert url == "http://viewer.test?d=M-1+2L3+4Z"
    assert opened == [url]
