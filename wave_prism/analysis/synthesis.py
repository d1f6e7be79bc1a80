"""Additive synthesis of one waveform period from spectral components."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from wave_prism.models.spectrum import SpectralComponent

#: Components at or below this amplitude are ignored entirely.
NOISE_FLOOR = 0.001


def synthesize_waveform(components: Iterable[SpectralComponent], num_points: int) -> np.ndarray:
    """Sum sinusoidal components over one full period.

    Parameters
    ----------
    components:
        Any number of components. Duplicate ``k`` values add together; callers
        wanting override semantics should pass them through
        :func:`~wave_prism.models.spectrum.merge_components` first.
    num_points:
        Number of output samples. Sample ``x`` sits at ``t = (x / num_points) * 2 pi``.

    Returns
    -------
    np.ndarray
        Float array of length ``num_points``. Each component contributes
        ``amplitude`` for ``k = 0`` (phase ignored) and
        ``amplitude * sin(k t + phase_rad)`` otherwise. Components with
        ``amplitude <= NOISE_FLOOR`` contribute nothing.
    """
    num_points = int(num_points)
    if num_points < 0:
        raise ValueError(f"num_points must be >= 0, got {num_points}")

    out = np.zeros(num_points, dtype=float)
    if num_points == 0:
        return out

    t = (np.arange(num_points, dtype=float) / num_points) * 2 * np.pi

    for c in components:
        # NaN amplitudes fail this test and propagate
        if c.amplitude <= NOISE_FLOOR:
            continue
        if c.k == 0:
            out += c.amplitude
        else:
            out += c.amplitude * np.sin(c.k * t + c.phase_rad)

    return out
