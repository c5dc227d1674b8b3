"""Percent-encoding of document paths and tokens."""

from urllib.parse import quote

from docbridge.errors import EncodingError

# URI delimiters kept verbatim, like the browser's encodeURI. Letters, digits
# and "_.-~" are always kept by quote(). The remaining characters encodeURI
# leaves alone (!'()*) are encoded here.
URI_RESERVED = ";,/?:@&=+$#"


def encode_uri_with_specials(value: str) -> str:
    """Percent-encode a URI, including the characters ``!'()*``.

    Parameters
    ----------
    value : str
        The raw value, e.g. a file URL taken from a query string.

    Returns
    -------
    str
        The encoded value.

    Raises
    ------
    EncodingError
        If the value is not valid unicode text (lone surrogates).
    """
    try:
        return quote(value, safe=URI_RESERVED, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Cannot encode {value!r}: {e.reason}") from e


def encode_uri_component(value: str) -> str:
    """Percent-encode a single query value; every URI delimiter is escaped."""
    try:
        return quote(value, safe="", encoding="utf-8", errors="strict")
    except UnicodeEncodeError as e:
        raise EncodingError(f"Cannot encode {value!r}: {e.reason}") from e


def build_file_url(file: str, token: str) -> str:
    """URL the editor downloads the document from."""
    return f"{encode_uri_with_specials(file)}?token={encode_uri_with_specials(token)}"


def file_name(file: str) -> str:
    """Last path segment of the raw file path."""
    return file.split("/")[-1]


def file_extension(file: str) -> str:
    """Extension of the encoded file path, ``""`` when the file name has no dot."""
    name = file_name(encode_uri_with_specials(file))
    if "." not in name:
        return ""
    return name.split(".")[-1]
