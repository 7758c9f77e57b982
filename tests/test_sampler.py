from __future__ import annotations

import numpy as np
import pytest
from PIL import Image

from colorhunt.services.colors import RGB
from colorhunt.services.sampler import SAMPLE_WINDOW, sample_center, sample_image


def solid_frame(width, height, rgba):
    return bytes(rgba) * (width * height)


def test_solid_frame_returns_its_color():
    assert sample_center(solid_frame(64, 48, (183, 40, 46, 255)), 64, 48) == RGB(183, 40, 46)


def test_only_center_window_is_sampled():
    frame = np.zeros((40, 40, 4), dtype=np.uint8)
    frame[:, :] = (255, 255, 255, 255)
    frame[15:25, 15:25] = (10, 20, 30, 255)
    assert sample_center(frame.tobytes(), 40, 40) == RGB(10, 20, 30)


def test_mean_rounds_half_up():
    frame = np.zeros((10, 10, 4), dtype=np.uint8)
    frame[:, :5, 0] = 1  # mean red 0.5
    frame[:, :, 1] = 100
    assert sample_center(frame, 10, 10) == RGB(1, 100, 0)


def test_alpha_is_ignored():
    assert sample_center(solid_frame(20, 20, (50, 60, 70, 0)), 20, 20) == RGB(50, 60, 70)


def test_window_is_clamped_to_small_frames():
    assert sample_center(solid_frame(3, 2, (9, 8, 7, 255)), 3, 2) == RGB(9, 8, 7)


def test_odd_sized_frame_window_stays_inside():
    frame = np.zeros((11, 13, 4), dtype=np.uint8)
    frame[:, :] = (200, 100, 50, 255)
    assert sample_center(frame, 13, 11, window=SAMPLE_WINDOW) == RGB(200, 100, 50)


def test_rejects_mismatched_buffer():
    with pytest.raises(ValueError):
        sample_center(b"\x00" * 10, 2, 2)


@pytest.mark.parametrize("width, height, window", [(0, 4, 10), (4, -1, 10), (4, 4, 0)])
def test_rejects_bad_dimensions(width, height, window):
    with pytest.raises(ValueError):
        sample_center(b"", width, height, window)


def test_sample_image_converts_mode():
    image = Image.new("RGB", (32, 24), (12, 34, 56))
    assert sample_image(image) == RGB(12, 34, 56)
