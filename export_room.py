"""
Command line entry point for exporting a room as SVG path data.

Running ``python export_room.py rooms.json`` from a source checkout is
equivalent to the installed ``roomsvg-export`` command.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> int:
    # Ensure ``roomsvg`` is importable without installing the package.
    backend_dir = Path(__file__).resolve().parent / "backend"
    if str(backend_dir) not in sys.path:
        sys.path.append(str(backend_dir))

    from roomsvg.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
