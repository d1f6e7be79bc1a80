"""Spectral value objects shared by the analyzer and the synthesizer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

import pandas as pd


@dataclass(frozen=True)
class SpectralComponent:
    """One harmonic of a periodic waveform.

    Attributes
    ----------
    k:
        Harmonic index. ``k = 0`` is the DC (constant) term, ``k >= 1`` the
        sine harmonic at ``k`` cycles per period.
    amplitude:
        Non-negative magnitude of the harmonic.
    phase:
        Angle in degrees. Conventionally in ``[0, 360)`` but not required.
    """

    k: int
    amplitude: float
    phase: float = 0.0

    @property
    def phase_rad(self) -> float:
        return self.phase * math.pi / 180.0

    def to_dict(self) -> Dict[str, Any]:
        return {"k": int(self.k), "amplitude": float(self.amplitude), "phase": float(self.phase)}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> SpectralComponent:
        return cls(k=int(d["k"]), amplitude=float(d["amplitude"]), phase=float(d.get("phase", 0.0)))


@dataclass(frozen=True)
class SpectralResult:
    """Output of :func:`~wave_prism.analysis.fourier.analyze_waveform`.

    Attributes
    ----------
    components:
        Returned components in ascending ``k`` order, at most
        :data:`~wave_prism.analysis.fourier.MAX_COMPONENTS` entries.
    energy:
        Sum of ``amplitude**2`` over the *returned* components only. This is the
        truncated-spectrum energy; see
        :func:`~wave_prism.analysis.fourier.full_spectrum_energy` for the
        Parseval total over every order.
    n_samples:
        Length of the analysed sample sequence (0 for the empty result).
    """

    components: Tuple[SpectralComponent, ...] = ()
    energy: float = 0.0
    n_samples: int = 0

    @classmethod
    def empty(cls) -> SpectralResult:
        return cls(components=(), energy=0.0, n_samples=0)

    def component(self, k: int) -> Optional[SpectralComponent]:
        """Return the component with harmonic index ``k`` or None."""
        for c in self.components:
            if c.k == k:
                return c
        return None

    def to_frame(self) -> pd.DataFrame:
        """One row per component, columns ``k``, ``amplitude``, ``phase_deg``."""
        return pd.DataFrame(
            {
                "k": pd.Series([c.k for c in self.components], dtype="int64"),
                "amplitude": pd.Series([c.amplitude for c in self.components], dtype="float64"),
                "phase_deg": pd.Series([c.phase for c in self.components], dtype="float64"),
            }
        )


@dataclass(frozen=True)
class WaveParams:
    """Controls of a single sine wave."""

    amplitude: float = 1.0  # 0-2
    phase: float = 0.0  # 0-360 degrees


def merge_components(components: Iterable[SpectralComponent]) -> Tuple[SpectralComponent, ...]:
    """Collapse duplicate harmonic indices, last write per ``k`` wins.

    The synthesizer itself sums duplicates; editors that want override
    semantics call this before synthesizing. Result is sorted by ``k``.
    """
    by_k: Dict[int, SpectralComponent] = {}
    for c in components:
        by_k[int(c.k)] = c
    return tuple(by_k[k] for k in sorted(by_k))


def pad_components(components: Iterable[SpectralComponent], count: int = 6) -> Tuple[SpectralComponent, ...]:
    """Return exactly one component per ``k`` in ``0..count-1``.

    Missing indices are filled with ``(k, 0, 0)``. Components with ``k >= count``
    are dropped.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    existing = {c.k: c for c in merge_components(components)}
    return tuple(existing.get(k, SpectralComponent(k=k, amplitude=0.0, phase=0.0)) for k in range(count))
