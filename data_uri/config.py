"""
Data URI and codec constants.

MIME types are the ones written into the ``data:`` prefix. Pixel layouts
describe how many bytes one pixel occupies in a raw ``PixelBuffer`` for
each supported Pillow mode.
"""

from typing import Final

# =============================================================================
# MIME Types
# =============================================================================

DATA_URI_SCHEME: Final[str] = "data:"

SVG_MIME_TYPE: Final[str] = "image/svg+xml"
PNG_MIME_TYPE: Final[str] = "image/png"
JPEG_MIME_TYPE: Final[str] = "image/jpeg"

# =============================================================================
# Codec Defaults
# =============================================================================

# Same default Pillow and libjpeg use when no quality is given
DEFAULT_JPEG_QUALITY: Final[int] = 75

# =============================================================================
# Pixel Layouts
# =============================================================================
# Bytes per pixel for each color type a raw buffer may declare.

COLOR_TYPE_BYTES: Final[dict[str, int]] = {
    "L": 1,  # 8-bit grayscale
    "LA": 2,  # 8-bit grayscale + alpha
    "I;16": 2,  # 16-bit grayscale, little endian
    "RGB": 3,
    "RGBA": 4,
    "CMYK": 4,
}
