#!/usr/bin/env python3
"""Main entry point for the todo service."""

import argparse
import logging
import sys
from pathlib import Path
import uvicorn

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from config import settings

logger = logging.getLogger(__name__)


def configure_logging():
    """Configure root logging from settings."""
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        Path(settings.log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_file))

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def run_http_server():
    """Run the HTTP API server."""
    from api.http_server import create_app

    app = create_app(static_dir=settings.static_dir)

    logger.info(f"Starting HTTP server on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
        access_log=False
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="In-memory todo list server")
    parser.add_argument(
        "--host",
        default=settings.api_host,
        help=f"HTTP server host (default: {settings.api_host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.api_port,
        help=f"HTTP server port (default: {settings.api_port})"
    )
    parser.add_argument(
        "--static-dir",
        default=settings.static_dir,
        help=f"Directory holding the single-page UI (default: {settings.static_dir})"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})"
    )
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    # Update settings if provided
    settings.api_host = args.host
    settings.api_port = args.port
    settings.static_dir = args.static_dir
    settings.log_level = args.log_level

    configure_logging()

    try:
        run_http_server()
    except KeyboardInterrupt:
        logger.info("Shutting down todo server...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
