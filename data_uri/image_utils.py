"""Helpers for building and reading back data URLs."""

from __future__ import annotations

import base64
import io
from urllib.parse import unquote_to_bytes

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from .config import DATA_URI_SCHEME, PNG_MIME_TYPE


def decode_data_url(data_url: str) -> bytes:
    """
    Decode the payload of a data URL to raw bytes.

    Args:
        data_url: A data URL (e.g., "data:image/png;base64,iVBOR..." or
                  "data:image/svg+xml,%3Csvg%2F%3E") or a raw base64 string.

    Returns:
        Decoded bytes. Base64 payloads are base64-decoded, anything else is
        percent-decoded.

    Examples:
        >>> decode_data_url("data:image/png;base64,aGVsbG8=")
        b'hello'
        >>> decode_data_url("aGVsbG8=")
        b'hello'
        >>> decode_data_url("data:image/svg+xml,%3Csvg%2F%3E")
        b'<svg/>'
    """
    if "," not in data_url:
        return base64.b64decode(data_url)

    header, encoded = data_url.split(",", 1)
    if header.endswith(";base64"):
        return base64.b64decode(encoded)
    return unquote_to_bytes(encoded)


def encode_data_url(data: bytes, mime_type: str = PNG_MIME_TYPE) -> str:
    """
    Encode bytes as a base64 data URL.

    Examples:
        >>> encode_data_url(b'hello', 'text/plain')
        'data:text/plain;base64,aGVsbG8='
    """
    encoded = base64.b64encode(data).decode("ascii")
    return f"{DATA_URI_SCHEME}{mime_type};base64,{encoded}"



def image_bytes_to_array(data: bytes, mode: str | None = None) -> NDArray:
    """
    Convert encoded image bytes to a numpy array.

    Args:
        data: Encoded image bytes (PNG, JPEG, etc.)
        mode: Optional Pillow mode to convert to before building the array.
              The image's own mode is kept when omitted.
    Returns:
        Array of shape (H, W) for single-band images, (H, W, C) otherwise.
    """
    with Image.open(io.BytesIO(data)) as img:
        if mode is not None and img.mode != mode:
            img = img.convert(mode)
        return np.array(img)
