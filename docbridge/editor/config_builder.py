"""Configuration record for the document editor widget."""

from dataclasses import dataclass
from typing import Any

from docbridge.config import Config
from docbridge.editor.cache_key import document_key
from docbridge.editor.encoding import (
    build_file_url,
    encode_uri_component,
    file_extension,
    file_name,
)
from docbridge.editor.token import sign_token

SAVE_PATH = "/onlyoffice/save"


@dataclass
class DocumentRequest:
    """Query parameters of the editor page."""

    file: str
    token: str = ""
    user: str = ""
    mtime: str = ""


def editor_mode(extension: str, edit_extensions: tuple[str, ...]) -> str:
    """Open known office formats for editing, everything else read-only."""
    return "edit" if extension.lower() in edit_extensions else "view"


def build_callback_url(full_domain: str, file: str, token: str) -> str:
    """URL the editor server calls back when the document is saved.

    The raw file and token are encoded as query components so the callback
    endpoint decodes them back unchanged.
    """
    return (
        f"{full_domain.rstrip('/')}{SAVE_PATH}"
        f"?file={encode_uri_component(file)}&token={encode_uri_component(token)}"
    )


def build_editor_config(request: DocumentRequest, settings: Config) -> dict[str, Any]:
    """Build the configuration handed to ``DocsAPI.DocEditor``.

    Parameters
    ----------
    request : DocumentRequest
        The raw query parameters of the editor page.
    settings : Config
        Application configuration.

    Returns
    -------
    dict[str, Any]
        The editor configuration. When a JWT secret is configured it carries a
        ``token`` entry signing the rest of the record.
    """
    editor = settings.editor
    name = file_name(request.file)
    extension = file_extension(request.file)

    editor_config: dict[str, Any] = {
        "document": {
            "fileType": extension,
            "key": document_key(name, request.mtime),
            "title": name,
            "url": build_file_url(request.file, request.token),
        },
        "editorConfig": {
            "lang": editor.lang,
            "mode": editor_mode(extension, editor.edit_extensions),
            "callbackUrl": build_callback_url(settings.full_domain, request.file, request.token),
            "customization": {
                "autosave": False,
            },
            "user": {
                "id": request.user,
                "name": request.user,
            },
        },
    }

    if editor.jwt_secret:
        editor_config["token"] = sign_token(editor_config, editor.jwt_secret)

    return editor_config
