"""Tests for the canvas sampling adapter."""

from __future__ import annotations

import numpy as np
import pytest

from wave_prism.ingest.canvas import (
    analyze_canvas,
    brightness_field,
    render_curve_image,
    sample_canvas_waveform,
)


def _blank(height: int, width: int) -> np.ndarray:
    return np.full((height, width), 255.0)


def test_blank_canvas_defaults_to_center() -> None:
    samples = sample_canvas_waveform(_blank(10, 7))
    assert samples.shape == (7,)
    np.testing.assert_array_equal(samples, np.zeros(7))


def test_row_to_amplitude_mapping() -> None:
    img = _blank(10, 3)
    img[0, 0] = 0  # top row
    img[5, 1] = 0  # centre row
    img[9, 2] = 0  # bottom row
    samples = sample_canvas_waveform(img)
    np.testing.assert_allclose(samples, [1.0, 0.0, (5 - 9) / 5])


def test_darkest_pixel_wins_first_on_ties() -> None:
    img = _blank(8, 2)
    img[6, 0] = 100
    img[2, 0] = 20
    img[1, 1] = 50
    img[7, 1] = 50
    samples = sample_canvas_waveform(img)
    np.testing.assert_allclose(samples, [(4 - 2) / 4, (4 - 1) / 4])


def test_rgba_brightness_is_rgb_mean() -> None:
    img = np.full((4, 1, 4), 255, dtype=np.uint8)
    img[3, 0] = [255, 255, 0, 255]  # mean 170, darker than background
    samples = sample_canvas_waveform(img)
    assert samples[0] == pytest.approx((2 - 3) / 2)


def test_flat_rgba_buffer_all_black() -> None:
    width, height = 4, 4
    data = np.zeros(width * height * 4, dtype=np.uint8)
    samples = sample_canvas_waveform(data, width, height)
    assert samples.shape == (width,)
    assert np.all(samples >= -1.0) and np.all(samples <= 1.0)


def test_flat_single_pixel() -> None:
    samples = sample_canvas_waveform(np.zeros(4, dtype=np.uint8), 1, 1)
    assert samples.shape == (1,)
    assert isinstance(float(samples[0]), float)


def test_flat_buffer_requires_size() -> None:
    with pytest.raises(ValueError, match="width and height"):
        sample_canvas_waveform(np.zeros(16))


def test_crop_to_requested_size() -> None:
    img = _blank(10, 10)
    img[0, :] = 0
    samples = sample_canvas_waveform(img, width=4, height=6)
    assert samples.shape == (4,)
    np.testing.assert_allclose(samples, 1.0)


def test_requested_size_larger_than_image() -> None:
    with pytest.raises(ValueError, match="exceeds"):
        brightness_field(_blank(4, 4), width=5)


def test_zero_height_gives_zeros() -> None:
    samples = sample_canvas_waveform(np.zeros((0, 3)))
    np.testing.assert_array_equal(samples, np.zeros(3))


def test_zero_width_gives_empty() -> None:
    assert sample_canvas_waveform(np.zeros((5, 0))).size == 0


def test_render_then_sample_recovers_curve() -> None:
    width, height = 48, 200
    theta = 2 * np.pi * np.arange(width) / width
    curve = 0.8 * np.sin(theta)
    samples = sample_canvas_waveform(render_curve_image(curve, height))
    # one-pixel quantisation of a 100-pixel half-height
    np.testing.assert_allclose(samples, curve, atol=1.0 / 100 + 1e-12)


def test_analyze_canvas_finds_fundamental() -> None:
    width = 64
    theta = 2 * np.pi * np.arange(width) / width
    result = analyze_canvas(render_curve_image(0.8 * np.sin(theta), 160))
    amps = [c.amplitude for c in result.components]
    assert int(np.argmax(amps)) == 1
    assert result.n_samples == width
