"""Exceptions shared across docbridge modules."""


class DocBridgeError(Exception):
    """Base class for docbridge errors."""

    pass


class EncodingError(DocBridgeError):
    """Raised when a value cannot be percent-encoded."""

    pass


class InvalidTokenError(DocBridgeError):
    """Raised when a token cannot be signed or does not verify."""

    pass


class DocumentTransferError(DocBridgeError):
    """Raised when a saved document cannot be moved to the file server."""

    message = "could not transfer the document"

    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        super().__init__(self.message)


class DocumentFetchError(DocumentTransferError):
    """Raised when the edited document cannot be downloaded from the editor server."""

    message = "could not get document from OnlyOffice server"


class DocumentStoreError(DocumentTransferError):
    """Raised when the edited document cannot be pushed to the file server."""

    message = "could not push the document to the file server"
