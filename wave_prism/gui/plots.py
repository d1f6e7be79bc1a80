"""Matplotlib drawing helpers shared by the lesson panels.

Every helper draws onto an ``Axes`` passed in by the caller and returns the
artists it created, so panels own figure lifetime and tests can run headless.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np

from wave_prism.analysis.fourier import MAX_COMPONENTS
from wave_prism.models.spectrum import SpectralComponent, pad_components


def _get_pyplot():
    """Import pyplot lazily (backend must already be configured)."""
    import matplotlib.pyplot as plt  # late import by design
    return plt


def plot_period(ax, samples: np.ndarray, *, label: Optional[str] = None, color: Optional[str] = None, linestyle: str = "-"):
    """Plot one period of samples against phase angle in degrees."""
    y = np.asarray(samples, dtype=float)
    x = np.arange(y.size, dtype=float) / max(y.size, 1) * 360.0
    (line,) = ax.plot(x, y, label=label, color=color, linestyle=linestyle)
    ax.set_xlim(0.0, 360.0)
    ax.set_xlabel("phase angle [deg]")
    ax.set_ylabel("amplitude")
    ax.axhline(0.0, color="#999999", linewidth=0.6)
    ax.grid(True)
    return line


def plot_spectral_bars(ax, components: Iterable[SpectralComponent], *, count: int = MAX_COMPONENTS) -> List:
    """Bar per harmonic ``k = 0..count-1``; missing harmonics show as empty bars."""
    padded = pad_components(components, count)
    ks = [c.k for c in padded]
    amps = [c.amplitude for c in padded]
    bars = ax.bar(ks, amps, color=["#555555"] + ["#1f77b4"] * (len(ks) - 1))
    for c, bar in zip(padded, bars):
        if c.amplitude > 0:
            ax.annotate(
                f"{c.phase:.0f}°",
                (bar.get_x() + bar.get_width() / 2, bar.get_height()),
                ha="center",
                va="bottom",
                fontsize=8,
            )
    ax.set_xticks(ks)
    ax.set_xticklabels(["DC" if k == 0 else str(k) for k in ks])
    ax.set_xlabel("harmonic k")
    ax.set_ylabel("amplitude")
    return list(bars)


def plot_sine_points(ax, points: np.ndarray, *, width: int, height: int, color: str = "#1f77b4"):
    """Plot canvas-space points (y grows downward) as produced by ``generate_sine_points``."""
    pts = np.asarray(points, dtype=float)
    (line,) = ax.plot(pts[:, 0], pts[:, 1], color=color)
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.axhline(height / 2, color="#999999", linewidth=0.6)
    return line
