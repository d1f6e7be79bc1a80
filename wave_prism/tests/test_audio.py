from __future__ import annotations

import numpy as np
import pytest

from wave_prism.audio.oscillators import OscillatorSpec, oscillator_bank, render_components, render_tone
from wave_prism.models.profile import AudioProfile
from wave_prism.models.spectrum import SpectralComponent as C
from wave_prism.models.spectrum import WaveParams


def test_bank_skips_dc_and_quiet_components() -> None:
    bank = oscillator_bank([C(0, 1.0), C(1, 0.5), C(2, 0.005), C(3, 0.2)])
    assert [o.k for o in bank] == [1, 3]


def test_bank_frequency_and_gain() -> None:
    bank = oscillator_bank([C(2, 0.4)], AudioProfile(base_frequency_hz=100.0, component_gain=0.5))
    assert bank == [OscillatorSpec(k=2, frequency_hz=300.0, gain=0.2)]


def test_bank_default_base_is_f3() -> None:
    (osc,) = oscillator_bank([C(1, 1.0)])
    assert osc.frequency_hz == pytest.approx(2 * 174.61)


def test_render_components_length_and_silence() -> None:
    profile = AudioProfile(sample_rate=8000)
    y = render_components([], 0.5, profile=profile)
    assert y.shape == (4000,)
    assert np.all(y == 0.0)


def test_render_components_single_oscillator() -> None:
    profile = AudioProfile(sample_rate=8000, base_frequency_hz=100.0)
    y = render_components([C(1, 1.0)], 0.25, profile=profile)
    t = np.arange(2000) / 8000
    expected = 0.1 * 0.05 * np.sin(2 * np.pi * 200.0 * t)
    np.testing.assert_allclose(y, expected, atol=1e-12)


def test_render_tone_phase_and_gain() -> None:
    profile = AudioProfile(sample_rate=1000)
    y = render_tone(WaveParams(amplitude=2.0, phase=90.0), 0.01, profile=profile)
    assert y.shape == (10,)
    assert y[0] == pytest.approx(0.2)


def test_negative_duration_rejected() -> None:
    with pytest.raises(ValueError):
        render_tone(WaveParams(), -1.0)
