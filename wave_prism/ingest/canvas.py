"""Canvas sampling adapter.

Turns a drawn curve into one sample per column so it can be fed to
:func:`~wave_prism.analysis.fourier.analyze_waveform`.

Accepted image layouts
----------------------
- ``(height, width)`` luminance field, values 0-255 (0 = black)
- ``(height, width, 3)`` RGB or ``(height, width, 4)`` RGBA; brightness is the
  mean of R, G and B, alpha is ignored
- flat RGBA buffer of length ``height * width * 4`` (browser ``ImageData``
  layout); requires explicit ``width`` and ``height``
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from wave_prism.analysis.fourier import analyze_waveform
from wave_prism.models.spectrum import SpectralResult

BACKGROUND_BRIGHTNESS = 255.0


def brightness_field(image: np.ndarray, width: Optional[int] = None, height: Optional[int] = None) -> np.ndarray:
    """Return a ``(height, width)`` float brightness array cropped to the requested size."""
    img = np.asarray(image, dtype=float)

    if img.ndim == 1:
        if width is None or height is None:
            raise ValueError("flat RGBA buffers require explicit width and height")
        need = int(width) * int(height) * 4
        if img.size < need:
            raise ValueError(f"RGBA buffer too short: size={img.size}, need={need}")
        img = img[:need].reshape((int(height), int(width), 4))

    if img.ndim == 3:
        if img.shape[2] not in (3, 4):
            raise ValueError(f"colour images must have 3 or 4 channels, got shape {img.shape}")
        img = img[:, :, :3].mean(axis=2)
    elif img.ndim != 2:
        raise ValueError(f"image must be 2D or 3D, got shape {img.shape}")

    H, W = img.shape
    h = H if height is None else int(height)
    w = W if width is None else int(width)
    if not (0 <= h <= H) or not (0 <= w <= W):
        raise ValueError(f"requested size {w}x{h} exceeds image size {W}x{H}")

    return img[:h, :w]


def sample_canvas_waveform(
    image: np.ndarray,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> np.ndarray:
    """Extract one signed amplitude per column from a drawn curve.

    The darkest pixel of each column is taken as the line (first one wins on
    ties). A column with nothing darker than the white background falls back
    to the centre row. Rows map to amplitudes by
    ``(center_row - row) / center_row`` with ``center_row = height / 2``, so
    the top row gives ``+1`` and the centre gives ``0``.

    Returns
    -------
    np.ndarray
        Float array of length ``width``, column order.
    """
    b = brightness_field(image, width, height)
    h, w = b.shape
    if w == 0:
        return np.zeros(0, dtype=float)
    if h == 0:
        return np.zeros(w, dtype=float)

    center_row = h / 2
    darkest = b.argmin(axis=0)
    has_line = b.min(axis=0) < BACKGROUND_BRIGHTNESS
    row = np.where(has_line, darkest.astype(float), center_row)

    return (center_row - row) / center_row


def render_curve_image(samples: np.ndarray, height: int, *, line_brightness: float = 0.0) -> np.ndarray:
    """Draw ``samples`` (one per column, in [-1, 1]) onto a white luminance canvas.

    This is the inverse mapping of :func:`sample_canvas_waveform`: amplitude
    ``v`` lands on row ``round(center_row - v * center_row)``, clipped to the
    canvas. Used for preset curves in the GUI.
    """
    y = np.asarray(samples, dtype=float)
    if y.ndim != 1:
        raise ValueError(f"samples must be 1D, got shape {y.shape}")
    height = int(height)
    if height <= 0:
        raise ValueError(f"height must be > 0, got {height}")

    img = np.full((height, y.size), BACKGROUND_BRIGHTNESS, dtype=float)
    center_row = height / 2
    rows = np.clip(np.rint(center_row - np.clip(y, -1.0, 1.0) * center_row), 0, height - 1).astype(int)
    img[rows, np.arange(y.size)] = float(line_brightness)
    return img


def analyze_canvas(
    image: np.ndarray,
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> SpectralResult:
    """Sample a drawn curve and analyse it."""
    return analyze_waveform(sample_canvas_waveform(image, width, height))
