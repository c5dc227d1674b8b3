#!/usr/bin/env python3
"""
Stamp the UI framework loader bootstrap at image build time.

Usage:
    python scripts/stamp_init.py web/init.js                      # No service worker version
    python scripts/stamp_init.py web/init.js --version 1234567    # Pin the service worker
    python scripts/stamp_init.py web/init.js --pdfjs 2.12.313     # Pick the PDF.js release
"""

import argparse
import sys

from docbridge.config import DEFAULT_PDFJS_VERSION
from docbridge.frontend import write_init_script


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render the web loader bootstrap script")
    parser.add_argument("output", help="Path of the init.js file to write")
    parser.add_argument("--version", default=None, help="Service worker version")
    parser.add_argument("--pdfjs", default=DEFAULT_PDFJS_VERSION, help="PDF.js CDN version")
    args = parser.parse_args(argv)

    try:
        write_init_script(args.output, args.version, args.pdfjs)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
