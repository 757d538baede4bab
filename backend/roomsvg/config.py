"""
Runtime configuration for the room SVG exporter.

Settings are read once from environment variables prefixed with
``ROOMSVG_`` and validated with pydantic.  The viewer endpoint is an
explicit URL rather than a local/remote switch; the two well known
viewer deployments are exposed as constants so callers can pick one.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from .services.geometry import DEFAULT_TOLERANCE
from .services.svg_path import DEFAULT_CANVAS_SIZE
from .services.viewer import REMOTE_VIEWER_URL

ENV_PREFIX = "ROOMSVG_"


class ExportSettings(BaseModel):
    """Validated exporter settings."""

    canvas_size: int = Field(default=DEFAULT_CANVAS_SIZE, gt=0)
    viewer_base_url: str = Field(default=REMOTE_VIEWER_URL, min_length=1)
    tolerance: float = Field(default=DEFAULT_TOLERANCE, ge=0.0)
    log_level: str = "INFO"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> ExportSettings:
    """Build :class:`ExportSettings` from the environment.

    Recognised variables are ``ROOMSVG_CANVAS_SIZE``, ``ROOMSVG_VIEWER_URL``,
    ``ROOMSVG_TOLERANCE`` and ``ROOMSVG_LOG_LEVEL``.  Unset variables keep
    their defaults; malformed values raise ``pydantic.ValidationError``.
    """
    env = os.environ if environ is None else environ
    mapping = {
        "canvas_size": "CANVAS_SIZE",
        "viewer_base_url": "VIEWER_URL",
        "tolerance": "TOLERANCE",
        "log_level": "LOG_LEVEL",
    }
    values = {}
    for field, suffix in mapping.items():
        raw = env.get(ENV_PREFIX + suffix)
        if raw is not None and raw.strip():
            values[field] = raw.strip()
    if "log_level" in values:
        values["log_level"] = values["log_level"].upper()
    return ExportSettings(**values)
