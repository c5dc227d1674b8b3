#!/usr/bin/env python3
"""
docbridge - Main Application Entry Point

Serves the document editor page and its save callback, plus the bootstrap
script of the UI framework web loader.
"""

import sys

from loguru import logger

from docbridge.config import config
from docbridge.editor.server import run_server


def configure_logging(level: str) -> None:
    """Replace loguru's default sink with a stderr sink at ``level``."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


async def main():
    """Main entry point."""
    configure_logging(config.LOG_LEVEL)

    errors = config.validate_required()
    if errors:
        logger.error("Configuration errors:")
        for error in errors:
            logger.error(f"  - {error}")
        sys.exit(1)

    missing = config.missing_editor_settings()
    if missing:
        logger.warning(f"Document editor disabled, missing settings: {', '.join(missing)}")
    if not config.ONLYOFFICE_JWT_SECRET:
        logger.warning("ONLYOFFICE_JWT_SECRET is not set, editor configurations are not signed")

    logger.info(f"Starting docbridge on {config.HOST}:{config.HTTP_PORT}")
    await run_server(config)
