#!/usr/bin/env python3
"""
Run the greedy Battlesnake webhook server.

Usage: python main.py [--host HOST] [--port PORT] [--debug]
"""

import argparse
import logging

from app import create_app
from config import load_settings


def main() -> None:
    settings = load_settings()

    parser = argparse.ArgumentParser(description="Run the greedy Battlesnake server.")
    parser.add_argument("--host", default=settings.host, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on (default: %(default)s)")
    parser.add_argument("--debug", action="store_true", help="Run Flask in debug mode with DEBUG logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app(settings)
    logging.getLogger(__name__).info(
        f"Running Battlesnake at http://{args.host}:{args.port} (variant: {settings.player_variant})"
    )
    app.run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
