# File: media_scanner/main.py

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

import uvicorn

from media_scanner.api.app import create_app
from media_scanner.core.config.settings import ConfigurationError, Settings, load_env_file
from media_scanner.features.os_opener.service.api import get_opener

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Serve a browsable JSON tree and the media files under a directory."
    )
    parser.add_argument("--port", type=int, help="Port to listen on, or read from PORT.")
    parser.add_argument("--scan-path", help="Directory to scan, or read from SCAN_PATH.")
    parser.add_argument("--host", help="Bind address, or read from HOST (default: 127.0.0.1).")
    parser.add_argument("--max-depth", type=int, help="Directory levels to expand, or read from MAX_DEPTH (default: 3).")
    parser.add_argument("--env-file", type=Path, help="Path of the .env file (default: ./.env).")
    return parser.parse_args(argv)


def build_environment(args: argparse.Namespace) -> Dict[str, str]:
    """Process environment with command-line flags layered on top."""
    env = dict(os.environ)
    overrides = {
        "PORT": args.port,
        "SCAN_PATH": args.scan_path,
        "HOST": args.host,
        "MAX_DEPTH": args.max_depth,
    }
    for key, value in overrides.items():
        if value is not None:
            env[key] = str(value)
    return env


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    args = parse_args(argv)
    if not load_env_file(args.env_file):
        logger.info("No .env file found, using environment only")

    try:
        settings = Settings.from_env(build_environment(args))
    except ConfigurationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    logging.getLogger().setLevel(settings.log_level)

    if settings.port is None:
        logger.error("PORT is not set")
        return 1
    if settings.scan_path is None:
        logger.warning("SCAN_PATH is not set; scan and media endpoints will answer 500")

    app = create_app(settings, get_opener())

    logger.info(f"Media scanner server running at http://{settings.host}:{settings.port}")
    logger.info(f"API endpoint: http://{settings.host}:{settings.port}/api/scan")
    logger.info(f"Scan root: {settings.scan_path}")

    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
