"""Oscillator bank mapping and offline rendering.

Each audible spectral component becomes one sine oscillator. The mapping is
kept separate from :mod:`wave_prism.analysis.synthesis`: synthesis draws one
period on the unit grid, this module produces buffers at a real sample rate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from wave_prism.models.profile import AudioProfile
from wave_prism.models.spectrum import SpectralComponent, WaveParams


@dataclass(frozen=True)
class OscillatorSpec:
    """One sine oscillator: harmonic index, frequency and linear gain."""

    k: int
    frequency_hz: float
    gain: float


def oscillator_bank(
    components: Iterable[SpectralComponent],
    profile: Optional[AudioProfile] = None,
) -> List[OscillatorSpec]:
    """Map non-DC components onto oscillators.

    Harmonic ``k`` plays at ``base_frequency_hz * (k + 1)`` with gain
    ``amplitude * component_gain``. DC and components below
    ``profile.min_amplitude`` are skipped.
    """
    profile = profile or AudioProfile()
    bank: List[OscillatorSpec] = []
    for c in components:
        if c.k == 0 or c.amplitude < profile.min_amplitude:
            continue
        bank.append(
            OscillatorSpec(
                k=int(c.k),
                frequency_hz=profile.base_frequency_hz * (c.k + 1),
                gain=c.amplitude * profile.component_gain,
            )
        )
    return bank


def _time_axis(duration_sec: float, sample_rate: int) -> np.ndarray:
    if duration_sec < 0:
        raise ValueError(f"duration_sec must be >= 0, got {duration_sec}")
    if sample_rate <= 0:
        raise ValueError(f"sample_rate must be > 0, got {sample_rate}")
    return np.linspace(0, duration_sec, int(sample_rate * duration_sec), endpoint=False)


def render_components(
    components: Iterable[SpectralComponent],
    duration_sec: float,
    *,
    profile: Optional[AudioProfile] = None,
) -> np.ndarray:
    """Render the oscillator bank of ``components`` to a mono float buffer."""
    profile = profile or AudioProfile()
    t = _time_axis(duration_sec, profile.sample_rate)
    out = np.zeros_like(t)
    for osc in oscillator_bank(components, profile):
        out += osc.gain * np.sin(2 * np.pi * osc.frequency_hz * t)
    return out * profile.master_gain


def render_tone(
    params: WaveParams,
    duration_sec: float,
    *,
    profile: Optional[AudioProfile] = None,
) -> np.ndarray:
    """Render the single-sine lesson tone at the base frequency."""
    profile = profile or AudioProfile()
    t = _time_axis(duration_sec, profile.sample_rate)
    phase_rad = (params.phase * np.pi) / 180
    gain = params.amplitude * profile.tone_gain
    return gain * np.sin(2 * np.pi * profile.base_frequency_hz * t + phase_rad)
