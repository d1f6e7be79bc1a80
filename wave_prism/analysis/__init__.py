"""Analysis package: the two pure transforms and their helpers.

Design principle:
  - The Analyzer consumes a sample sequence and produces a SpectralResult.
  - The Synthesizer consumes spectral components and produces a sample sequence.
  - Neither depends on the other; they meet only in the SpectralComponent type.

Both transforms are expressed on the implicit one-period grid
``t = 2 pi x / N``; no sample rate or wall-clock time is involved.
"""

from .fourier import (
    MAX_COMPONENTS,
    analyze_waveform,
    complex_magnitude,
    complex_phase_deg,
    direct_dft,
    full_spectrum_energy,
    to_synthesis_components,
)
from .sine import calculate_sine_value, generate_sine_points
from .synthesis import NOISE_FLOOR, synthesize_waveform

__all__ = [
    "MAX_COMPONENTS",
    "NOISE_FLOOR",
    "analyze_waveform",
    "calculate_sine_value",
    "complex_magnitude",
    "complex_phase_deg",
    "direct_dft",
    "full_spectrum_energy",
    "generate_sine_points",
    "synthesize_waveform",
    "to_synthesis_components",
]
