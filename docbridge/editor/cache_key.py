"""Cache keys telling the editor when its copy of a document is stale."""

import hashlib

KEY_LENGTH = 20


def digest_message(message: str) -> str:
    """Hex SHA-256 digest of the UTF-8 encoded message."""
    return hashlib.sha256(message.encode("utf-8")).hexdigest()


def document_key(file_name: str, mtime: str) -> str:
    """Derive the editor document key from a file name and its modification time.

    Parameters
    ----------
    file_name : str
        The file name, without directories.
    mtime : str
        The modification time as received in the page URL.

    Returns
    -------
    str
        The first 20 hex characters of the SHA-256 digest of ``file_name + mtime``.
    """
    return digest_message(file_name + mtime)[:KEY_LENGTH]
