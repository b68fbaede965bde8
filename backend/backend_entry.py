"""
Server entrypoint: picks a free port in 8000..8010 unless --port is given and runs uvicorn.

Run from the backend dir: python backend_entry.py [--host 127.0.0.1] [--port 8000]
"""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from pathlib import Path
from typing import Optional

_backend_dir = Path(__file__).resolve().parent
if str(_backend_dir) not in sys.path:
    sys.path.insert(0, str(_backend_dir))

logger = logging.getLogger("backend_entry")

PORT_RANGE = range(8000, 8011)


def find_free_port(host: str, ports=PORT_RANGE) -> Optional[int]:
    """First port in range that can be bound on host, or None."""
    for port in ports:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
            try:
                sock.bind((host, port))
            except OSError:
                continue
            return port
    return None


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the netball stats API")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=None, help="Port (default: first free in 8000-8010)")
    args = parser.parse_args()

    import uvicorn

    from main import app, settings

    port = args.port or find_free_port(args.host)
    if port is None:
        logger.error("No free port in %d..%d", PORT_RANGE.start, PORT_RANGE.stop - 1)
        return 1
    logger.info("Starting %s on %s:%d", settings.app_name, args.host, port)
    uvicorn.run(app, host=args.host, port=port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
