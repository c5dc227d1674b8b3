"""Bootstrap script for the UI framework web loader."""

import re
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined
from loguru import logger

from docbridge.config import DEFAULT_PDFJS_VERSION

TEMPLATE_DIR = Path(__file__).parent / "templates"
INIT_TEMPLATE = "init.js"

PDFJS_CDN = "https://cdn.jsdelivr.net/npm/pdfjs-dist@{version}"
LOADING_REMOVAL_DELAY_MS = 200

_VERSION_PATTERN = re.compile(r"^[0-9A-Za-z.\-]+$")

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def pdfjs_base_url(version: str) -> str:
    """CDN base URL of a PDF.js distribution.

    Raises
    ------
    ValueError
        If the version contains characters that do not belong in a version string.
    """
    if not _VERSION_PATTERN.match(version):
        raise ValueError(f"Invalid PDF.js version: {version!r}")
    return PDFJS_CDN.format(version=version)


def render_init_script(
    service_worker_version: Optional[str] = None,
    pdfjs_version: str = DEFAULT_PDFJS_VERSION,
) -> str:
    """Render the loader bootstrap script.

    Parameters
    ----------
    service_worker_version : Optional[str]
        Version of the built service worker; ``None`` disables the version check.
    pdfjs_version : str
        PDF.js version served from the CDN.

    Returns
    -------
    str
        The JavaScript source.
    """
    template = _env.get_template(INIT_TEMPLATE)
    return template.render(
        service_worker_version=service_worker_version,
        pdfjs_base=pdfjs_base_url(pdfjs_version),
        loading_removal_delay_ms=LOADING_REMOVAL_DELAY_MS,
    )


def write_init_script(
    path: str | Path,
    service_worker_version: Optional[str] = None,
    pdfjs_version: str = DEFAULT_PDFJS_VERSION,
) -> Path:
    """Render the bootstrap script and write it to ``path``."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(render_init_script(service_worker_version, pdfjs_version), encoding="utf-8")
    logger.info(f"Wrote loader bootstrap to {target} (service worker {service_worker_version})")
    return target
