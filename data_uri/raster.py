"""
Raster image to data URI encoders.

PNG and JPEG encoding is delegated to Pillow; this module only gets the
input into a ``PIL.Image.Image``, encodes it into memory, and wraps the
base64 payload in a data URI.

Any failure from the conversion or the codec is raised as ``EncodeError``
with the original exception chained. Nothing is retried or logged on failure.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from .config import COLOR_TYPE_BYTES, DEFAULT_JPEG_QUALITY, JPEG_MIME_TYPE, PNG_MIME_TYPE
from .image_utils import encode_data_url

logger = logging.getLogger(__name__)


class EncodeError(Exception):
    """An image could not be encoded."""


@dataclass(frozen=True)
class PixelBuffer:
    """Raw pixel data with its declared dimensions and color type."""

    width: int
    height: int
    mode: str  # Pillow mode, e.g. "RGB", "RGBA", "L"
    data: bytes

    @property
    def bytes_per_pixel(self) -> int | None:
        return COLOR_TYPE_BYTES.get(self.mode)

    def to_image(self) -> Image.Image:
        """
        Build a Pillow image from the raw bytes.

        Raises:
            EncodeError: If the color type is unknown, the dimensions are not
                positive, or the byte length does not match the dimensions.
        """
        bytes_per_pixel = self.bytes_per_pixel
        if bytes_per_pixel is None:
            raise EncodeError(f"Unsupported color type: {self.mode}")
        _check_dimensions(self.width, self.height)

        expected = self.width * self.height * bytes_per_pixel
        if len(self.data) != expected:
            raise EncodeError(
                f"Buffer length {len(self.data)} does not match "
                f"{self.width}x{self.height} {self.mode} image ({expected} bytes)"
            )

        try:
            return Image.frombytes(self.mode, (self.width, self.height), bytes(self.data))
        except ValueError as e:
            raise EncodeError(str(e)) from e


ImageLike = Union[PixelBuffer, Image.Image, NDArray[Any]]


def _check_dimensions(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise EncodeError(f"Invalid image dimensions: {width}x{height}")


def _as_pil_image(image: ImageLike) -> Image.Image:
    """Coerce any supported image input to a Pillow image."""
    if isinstance(image, PixelBuffer):
        return image.to_image()

    if isinstance(image, np.ndarray):
        try:
            img = Image.fromarray(image)
        except (TypeError, ValueError) as e:
            raise EncodeError(str(e)) from e
    elif isinstance(image, Image.Image):
        img = image
    else:
        raise TypeError(f"Expected PixelBuffer, PIL image or numpy array, got {type(image).__name__}")

    _check_dimensions(img.width, img.height)
    return img


def _encode(image: ImageLike, format: str, mime_type: str, **params: Any) -> str:
    img = _as_pil_image(image)

    buffer = io.BytesIO()
    try:
        img.save(buffer, format=format, **params)
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(str(e)) from e

    data = buffer.getvalue()
    logger.debug(
        "Encoded %dx%d %s image as %s (%d bytes)",
        img.width,
        img.height,
        img.mode,
        format,
        len(data),
    )
    return encode_data_url(data, mime_type)


def image_to_png_data_uri(image: ImageLike) -> str:
    """
    Encode an image as a ``data:image/png;base64,...`` URI.

    Args:
        image: A PixelBuffer, PIL image, or numpy array. Arrays are uint8
               of shape (H, W) or (H, W, C), or single-band uint16 (H, W);
               Pillow has no 16-bit multi-band mode.

    Returns:
        The data URI.

    Raises:
        EncodeError: If the image cannot be encoded as PNG.
    """
    return _encode(image, "PNG", PNG_MIME_TYPE)


def image_to_jpeg_data_uri(image: ImageLike, quality: int = DEFAULT_JPEG_QUALITY) -> str:
    """
    Encode an image as a ``data:image/jpeg;base64,...`` URI.

    Args:
        image: A PixelBuffer, PIL image, or numpy array. Arrays are uint8
               of shape (H, W) or (H, W, C), or single-band uint16 (H, W);
               Pillow has no 16-bit multi-band mode.
        quality: JPEG quality factor, conventionally 0 (smallest) to 100
                 (best). Passed to the encoder unchecked.

    Returns:
        The data URI.

    Raises:
        EncodeError: If the image cannot be encoded as JPEG, e.g. it has an
            alpha channel.
    """
    return _encode(image, "JPEG", JPEG_MIME_TYPE, quality=quality)
