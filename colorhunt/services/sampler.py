"""Center-window color sampling for captured camera frames."""

from __future__ import annotations

from typing import Union

import numpy as np
from PIL import Image

from .colors import RGB, round_half_up

# Big enough to smooth single-pixel sensor noise, small enough to stay local.
SAMPLE_WINDOW = 10

PixelBuffer = Union[bytes, bytearray, memoryview, np.ndarray]


def sample_center(rgba: PixelBuffer, width: int, height: int, window: int = SAMPLE_WINDOW) -> RGB:
    """Average the RGB channels of the window centered in an RGBA frame."""

    if width <= 0 or height <= 0:
        raise ValueError("Frame width and height must be positive")
    if window <= 0:
        raise ValueError("Sample window must be positive")

    if isinstance(rgba, np.ndarray):
        flat = np.asarray(rgba, dtype=np.uint8).reshape(-1)
    else:
        flat = np.frombuffer(rgba, dtype=np.uint8)
    if flat.size != width * height * 4:
        raise ValueError(
            f"Expected {width * height * 4} bytes for a {width}x{height} RGBA frame, got {flat.size}"
        )

    frame = flat.reshape(height, width, 4)
    win_w = min(window, width)
    win_h = min(window, height)
    left = width // 2 - win_w // 2
    top = height // 2 - win_h // 2

    region = frame[top : top + win_h, left : left + win_w, :3].astype(np.float64)
    r, g, b = (round_half_up(float(v)) for v in region.mean(axis=(0, 1)))
    return RGB(r, g, b)


def sample_image(image: Image.Image, window: int = SAMPLE_WINDOW) -> RGB:
    """Sample the center window of a Pillow image."""

    rgba = image.convert("RGBA")
    width, height = rgba.size
    return sample_center(np.asarray(rgba, dtype=np.uint8), width, height, window)


__all__ = ["SAMPLE_WINDOW", "sample_center", "sample_image"]
