from __future__ import annotations

import math

import numpy as np

from wave_prism.models.spectrum import WaveParams

# Largest amplitude the single-sine slider allows; it fills 80% of the half-height.
MAX_DISPLAY_AMPLITUDE = 2.0


def calculate_sine_value(x: float, params: WaveParams) -> float:
    """``amplitude * sin(x + phase)`` with phase in degrees.

    Frequency is handled by the x-axis mapping, not here.
    """
    phase_rad = (params.phase * math.pi) / 180
    return params.amplitude * math.sin(x + phase_rad)


def generate_sine_points(width: int, height: int, params: WaveParams, resolution: int = 2) -> np.ndarray:
    """Pixel coordinates of exactly one sine period across a canvas.

    Returns
    -------
    np.ndarray
        Shape ``(n_points, 2)`` with columns ``(pixel_x, pixel_y)``; ``pixel_x``
        runs from 0 to ``width`` inclusive in steps of ``resolution``.
    """
    if width <= 0:
        raise ValueError(f"width must be > 0, got {width}")
    if resolution <= 0:
        raise ValueError(f"resolution must be > 0, got {resolution}")

    center_y = height / 2
    scale = (center_y * 0.8) / MAX_DISPLAY_AMPLITUDE

    pixel_x = np.arange(0, width + 1, resolution, dtype=float)
    math_x = (pixel_x / width) * 2 * np.pi
    phase_rad = (params.phase * np.pi) / 180
    math_y = params.amplitude * np.sin(math_x + phase_rad)
    pixel_y = center_y - math_y * scale

    return np.column_stack([pixel_x, pixel_y])
