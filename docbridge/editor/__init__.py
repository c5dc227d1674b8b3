"""Document editor page, configuration and save callback."""

from docbridge.editor.cache_key import document_key
from docbridge.editor.config_builder import DocumentRequest, build_editor_config
from docbridge.editor.encoding import build_file_url, encode_uri_with_specials
from docbridge.editor.token import sign_token, verify_token
