"""Save callback: move an edited document from the editor server to the file server."""

import asyncio
from typing import Optional

import aiohttp
from loguru import logger
from pydantic import BaseModel, ConfigDict

from docbridge.config import CallbackTimeouts
from docbridge.editor.encoding import build_file_url
from docbridge.errors import DocumentFetchError, DocumentStoreError

# Editor status codes, see the document server callback handler documentation
STATUS_EDITING = 1
STATUS_READY_FOR_SAVE = 2
STATUS_SAVE_ERROR = 3
STATUS_CLOSED_UNCHANGED = 4

CHUNK_SIZE = 64 * 1024


class EditorCallback(BaseModel):
    """Body posted by the editor server to the callback URL."""

    model_config = ConfigDict(extra="ignore")

    key: str
    status: int
    url: str = ""
    token: Optional[str] = None

    @property
    def needs_save(self) -> bool:
        """The document was closed after editing and must be stored."""
        return self.status == STATUS_READY_FOR_SAVE


def _reason(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


def client_timeout(timeouts: CallbackTimeouts) -> aiohttp.ClientTimeout:
    """aiohttp timeout for the callback transfer session."""
    return aiohttp.ClientTimeout(total=timeouts.total, connect=timeouts.connect)


async def save_document(
    callback: EditorCallback,
    file: str,
    token: str,
    session: aiohttp.ClientSession,
) -> bool:
    """Store the edited document on the file server when the editor asks for it.

    Parameters
    ----------
    callback : EditorCallback
        The callback body.
    file : str
        The file server URL of the document.
    token : str
        The file server access token.
    session : aiohttp.ClientSession
        HTTP session used for both transfers.

    Returns
    -------
    bool
        True if the document was stored, False if there was nothing to save.

    Raises
    ------
    DocumentFetchError
        If the edited document could not be downloaded.
    DocumentStoreError
        If the document could not be uploaded to the file server.
    """
    if not callback.needs_save:
        logger.debug(f"Callback for {callback.key} with status {callback.status}, nothing to save")
        return False

    if not callback.url:
        raise DocumentFetchError(callback.url, "callback carries no document URL")

    target_url = build_file_url(file, token)
    logger.info(f"Saving document {callback.key} to {file}")

    try:
        async with session.get(callback.url) as response:
            if response.status >= 400:
                raise DocumentFetchError(callback.url, f"HTTP {response.status}")
            try:
                async with session.put(
                    target_url,
                    data=response.content.iter_chunked(CHUNK_SIZE),
                ) as upload:
                    if upload.status >= 400:
                        raise DocumentStoreError(file, f"HTTP {upload.status}")
            except aiohttp.ClientPayloadError as e:
                # The download stream broke while being forwarded
                raise DocumentFetchError(callback.url, _reason(e)) from e
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                raise DocumentStoreError(file, _reason(e)) from e
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise DocumentFetchError(callback.url, _reason(e)) from e

    logger.info(f"Document {callback.key} saved")
    return True
