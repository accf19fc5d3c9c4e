"""SVG to data URI conversion.

The SVG text is minified (BOM removed, whitespace trimmed and collapsed) and
then percent-encoded rather than base64-encoded, which keeps the URI readable
and usually shorter for markup.
"""

from __future__ import annotations

import re
from urllib.parse import quote

from .config import DATA_URI_SCHEME, SVG_MIME_TYPE

BYTE_ORDER_MARK = "\ufeff"

_WHITESPACE_RE = re.compile(r"\s+")

# quote() leaves these four unreserved characters alone; only [A-Za-z0-9]
# may appear unescaped in the payload.
_UNRESERVED_ESCAPES = str.maketrans(
    {
        "-": "%2D",
        ".": "%2E",
        "_": "%5F",
        "~": "%7E",
    }
)


def trim_byte_order_mark(text: str) -> str:
    """Drop a leading U+FEFF. A BOM anywhere else is left alone."""
    if text.startswith(BYTE_ORDER_MARK):
        return text[1:]
    return text


def collapse_whitespace(text: str) -> str:
    """Replace every run of whitespace with a single space."""
    return _WHITESPACE_RE.sub(" ", text)


def encode_uri_components(text: str) -> str:
    """
    Percent-encode every character that is not an ASCII letter or digit.

    Characters are encoded as UTF-8 and each byte is escaped as ``%XX``
    with uppercase hex digits.

    Strings holding lone surrogates are not valid text and raise
    ``UnicodeEncodeError``.

    Examples:
        >>> encode_uri_components("a-b.c")
        'a%2Db%2Ec'
        >>> encode_uri_components("é")
        '%C3%A9'
    """
    return quote(text, safe="").translate(_UNRESERVED_ESCAPES)


def normalize_svg(svg: str) -> str:
    """Strip the BOM, trim, and collapse interior whitespace."""
    return collapse_whitespace(trim_byte_order_mark(svg).strip())


def svg_str_to_data_uri(svg: str | bytes | bytearray | memoryview) -> str:
    """
    Convert SVG markup to a ``data:image/svg+xml,...`` URI.

    Args:
        svg: SVG markup. Bytes-like input is decoded as UTF-8 first.

    Returns:
        The data URI. Empty input yields ``"data:image/svg+xml,"``.

    Raises:
        UnicodeDecodeError: If bytes input is not valid UTF-8.
        UnicodeEncodeError: If the text contains lone surrogates.

    Examples:
        >>> svg_str_to_data_uri('<svg viewBox="0 0 1 1"/>')
        'data:image/svg+xml,%3Csvg%20viewBox%3D%220%200%201%201%22%2F%3E'
    """
    if isinstance(svg, (bytes, bytearray, memoryview)):
        svg = bytes(svg).decode("utf-8")

    payload = encode_uri_components(normalize_svg(svg))
    return f"{DATA_URI_SCHEME}{SVG_MIME_TYPE},{payload}"
