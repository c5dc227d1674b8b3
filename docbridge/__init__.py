# docbridge - document editor and web loader glue service

import asyncio

from docbridge.app import main as _main


def main():
    """Entry point for the docbridge CLI command."""
    asyncio.run(_main())
