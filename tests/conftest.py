"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from data_uri.raster import PixelBuffer


# SVG used by the reference data URI case
REFERENCE_SVG = """
            <svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 50 50">
                <path d="M22 38V51L32 32l19-19v12C44 26 43 10 38 0 52 15 49 39 22 38z"/>
            </svg>"""


@pytest.fixture
def reference_svg() -> str:
    """Multi-line SVG with indentation and a leading newline."""
    return REFERENCE_SVG


@pytest.fixture
def red_pixel() -> PixelBuffer:
    """1x1 red RGB pixel buffer."""
    return PixelBuffer(width=1, height=1, mode="RGB", data=bytes([255, 0, 0]))


@pytest.fixture
def rgba_image() -> Image.Image:
    """10x10 semi-transparent red image."""
    return Image.new("RGBA", (10, 10), (255, 0, 0, 128))


@pytest.fixture
def noisy_rgb_array() -> np.ndarray:
    """64x64 random RGB array (seeded) that compresses poorly."""
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, (64, 64, 3), dtype=np.uint8)
