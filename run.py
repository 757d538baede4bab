"""
Entry point for the room SVG export service.

Running this script with ``python run.py`` will start the FastAPI
server that exposes the SVG export API.  The application defined in
``backend/roomsvg/main.py`` is imported after adjusting the Python path
to include the backend directory.
"""

from __future__ import annotations

import sys
from pathlib import Path

import logging
import uvicorn


def main() -> None:
    """Run the Uvicorn server hosting the export API."""
    # Ensure ``roomsvg`` is importable when running from a source checkout
    # without installing the package.
    backend_dir = Path(__file__).resolve().parent / "backend"
    if str(backend_dir) not in sys.path:
        sys.path.append(str(backend_dir))

    from roomsvg.config import load_settings
    from roomsvg.main import app

    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    # Bind to all interfaces on port 8000 by default.
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
