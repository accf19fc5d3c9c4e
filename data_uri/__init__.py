"""Convert SVG markup and raster images to data URIs."""

from .image_utils import decode_data_url, encode_data_url
from .raster import EncodeError, PixelBuffer, image_to_jpeg_data_uri, image_to_png_data_uri
from .svg import svg_str_to_data_uri

__all__ = [
    # SVG
    "svg_str_to_data_uri",
    # Raster
    "image_to_png_data_uri",
    "image_to_jpeg_data_uri",
    "PixelBuffer",
    "EncodeError",
    # Data URL helpers
    "decode_data_url",
    "encode_data_url",
]
