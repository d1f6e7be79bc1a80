"""Configuration profiles -- feature flags and audio settings.

Each profile groups related settings into one frozen dataclass. A profile can be:

- Constructed with defaults and overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON storage
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, List


@dataclass(frozen=True)
class FeatureFlags:
    """Development and experimentation switches.

    Attributes
    ----------
    unlock_all_modules : bool
        Build every lesson tab regardless of progress. When False only the
        first lesson ("Single sine") is available.
    debug_spectral_analysis : bool
        Log the component table after each analysis.
    show_performance_metrics : bool
        Log the elapsed time of analysis and synthesis calls.
    """

    unlock_all_modules: bool = True
    debug_spectral_analysis: bool = False
    show_performance_metrics: bool = False

    def is_enabled(self, name: str) -> bool:
        """Return the value of flag ``name``; KeyError for unknown flags."""
        if name not in self.flag_names():
            raise KeyError(f"Unknown feature flag: {name!r}")
        return bool(getattr(self, name))

    def enabled_features(self) -> List[str]:
        return [name for name in self.flag_names() if getattr(self, name)]

    @classmethod
    def flag_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> FeatureFlags:
        unknown = sorted(set(d) - set(cls.flag_names()))
        if unknown:
            raise KeyError(f"Unknown feature flags: {unknown}")
        return cls(**{k: bool(v) for k, v in d.items()})


@dataclass(frozen=True)
class AudioProfile:
    """Settings that map spectral components onto audible oscillators.

    Attributes
    ----------
    base_frequency_hz : float
        Frequency of the lowest oscillator. Default is F3 (174.61 Hz).
        Harmonic ``k`` plays at ``base_frequency_hz * (k + 1)``.
    sample_rate : int
        Sample rate of rendered buffers in Hz.
    min_amplitude : float
        Components quieter than this are not given an oscillator.
    component_gain : float
        Per-oscillator gain factor applied to the component amplitude.
    master_gain : float
        Overall gain of the oscillator bank mix.
    tone_gain : float
        Gain factor of the single-sine tone relative to its amplitude.
    """

    base_frequency_hz: float = 174.61
    sample_rate: int = 44100
    min_amplitude: float = 0.01
    component_gain: float = 0.05
    master_gain: float = 0.1
    tone_gain: float = 0.1

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> AudioProfile:
        d = dict(d)  # shallow copy
        if "sample_rate" in d:
            d["sample_rate"] = int(d["sample_rate"])
        return cls(**d)
