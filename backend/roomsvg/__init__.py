"""Room boundary to SVG path export."""

__version__ = "0.3.0"
