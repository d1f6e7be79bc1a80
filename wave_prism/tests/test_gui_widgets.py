"""Headless smoke tests for the lesson GUI.

These tests run without a display and verify that:
1. w.Output() widgets are created for plot areas
2. Panel builders return valid ipywidgets
3. Button callbacks are wired and state updates without exceptions
"""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import ipywidgets as w
import numpy as np
import pytest

from wave_prism.analysis.fourier import MAX_COMPONENTS
from wave_prism.models.profile import FeatureFlags


def _find(widget, predicate):
    if predicate(widget):
        return widget
    for child in getattr(widget, "children", ()):
        result = _find(child, predicate)
        if result is not None:
            return result
    return None


def _find_all(widget, predicate, acc=None):
    acc = [] if acc is None else acc
    if predicate(widget):
        acc.append(widget)
    for child in getattr(widget, "children", ()):
        _find_all(child, predicate, acc)
    return acc


def _button(panel, description):
    return _find(panel, lambda x: isinstance(x, w.Button) and x.description == description)


@pytest.mark.parametrize(
    "builder",
    [
        "wave_prism.gui.single_sine:build_single_sine_panel",
        "wave_prism.gui.two_sines:build_two_sines_panel",
        "wave_prism.gui.prism:build_prism_panel",
    ],
)
def test_panel_creates_output_widget(builder: str) -> None:
    import importlib

    mod_name, func_name = builder.split(":")
    panel = getattr(importlib.import_module(mod_name), func_name)()

    assert isinstance(panel, w.Widget)
    assert _find(panel, lambda x: isinstance(x, w.Output)) is not None


def test_build_gui_returns_tab_with_all_lessons() -> None:
    from wave_prism.gui.app import build_gui

    gui = build_gui(clear_cell_output=False)
    assert isinstance(gui, w.Tab)
    assert len(gui.children) == 3


def test_build_gui_locked_shows_first_lesson_only() -> None:
    from wave_prism.gui.app import build_gui

    gui = build_gui(FeatureFlags(unlock_all_modules=False), clear_cell_output=False)
    assert len(gui.children) == 1


def test_prism_panel_buttons_wired() -> None:
    from wave_prism.gui.prism import build_prism_panel

    panel = build_prism_panel()
    for name in ("Split wave", "Reset", "Play"):
        btn = _button(panel, name)
        assert btn is not None, f"{name} button not found"
        assert len(btn._click_handlers.callbacks) > 0


def test_prism_split_sets_sliders_and_logs() -> None:
    from wave_prism.gui.prism import build_prism_panel

    panel = build_prism_panel(flags=FeatureFlags(debug_spectral_analysis=True, show_performance_metrics=True))
    dd = _find(panel, lambda x: isinstance(x, w.Dropdown))
    dd.value = "sine"
    _button(panel, "Split wave").click()

    amp_sliders = _find_all(panel, lambda x: isinstance(x, w.FloatSlider) and x.description.endswith("amp"))
    assert len(amp_sliders) == MAX_COMPONENTS
    values = [s.value for s in amp_sliders]
    assert int(np.argmax(values)) == 1
    assert values[1] == pytest.approx(0.8, abs=0.05)

    log_html = _find(panel, lambda x: isinstance(x, w.HTML) and "Analysed" in x.value)
    assert log_html is not None
    assert "analysis took" in log_html.value
    assert "phase_deg" in log_html.value


def test_single_sine_slider_redraws() -> None:
    from wave_prism.gui.single_sine import build_single_sine_panel

    panel = build_single_sine_panel()
    amp = _find(panel, lambda x: isinstance(x, w.FloatSlider) and x.description == "Amplitude")
    amp.value = 1.5
    log_html = _find(panel, lambda x: isinstance(x, w.HTML) and "ERROR" in x.value)
    assert log_html is None


# -----------------------------------------------------------------------
# PrismState edits
# -----------------------------------------------------------------------


def test_prism_edit_amplitude_then_phase_keeps_one_entry() -> None:
    from wave_prism.gui.prism import PrismState

    state = PrismState()
    state.edit(2, amplitude=0.4)
    state.edit(2, phase=90.0)
    entries = [c for c in state.edited if c.k == 2]
    assert len(entries) == 1
    assert (entries[0].amplitude, entries[0].phase) == (0.4, 90.0)


def test_prism_edit_last_write_wins_and_sorted() -> None:
    from wave_prism.gui.prism import PrismState

    state = PrismState()
    state.edit(3, amplitude=0.2)
    state.edit(1, amplitude=1.0, phase=45.0)
    state.edit(3, amplitude=0.7)
    assert [c.k for c in state.edited] == [1, 3]
    assert state.edited[1].amplitude == 0.7
    assert state.edited[0].phase == 45.0


def test_prism_resynthesize_matches_synthesizer() -> None:
    from wave_prism.analysis.synthesis import synthesize_waveform
    from wave_prism.gui.prism import PrismState, preset_image

    state = PrismState()
    state.analyze(preset_image("two harmonics"))
    state.edit(4, amplitude=0.3, phase=10.0)
    np.testing.assert_allclose(state.resynthesize(128), synthesize_waveform(state.edited, 128))


def test_prism_reset_clears_result_and_edits() -> None:
    from wave_prism.gui.prism import PrismState, preset_image

    state = PrismState()
    state.analyze(preset_image("square"))
    assert state.result.n_samples > 0
    state.reset()
    assert state.result.components == ()
    assert state.edited == ()
    assert state.resynthesize(16).tolist() == [0.0] * 16


def test_prism_slider_edits_state_and_redraws(monkeypatch) -> None:
    import wave_prism.gui.prism as prism

    drawn = []
    real_bars = prism.plot_spectral_bars

    def _record(ax, components, *args, **kwargs):
        drawn.append(tuple(components))
        return real_bars(ax, components, *args, **kwargs)

    monkeypatch.setattr(prism, "plot_spectral_bars", _record)

    state = prism.PrismState()
    panel = prism.build_prism_panel(state=state)
    _find(panel, lambda x: isinstance(x, w.Dropdown)).value = "sine"
    _button(panel, "Split wave").click()
    n_draws = len(drawn)

    amp = _find(panel, lambda x: isinstance(x, w.FloatSlider) and x.description == "k=2 amp")
    phase = _find(panel, lambda x: isinstance(x, w.FloatSlider) and x.description == "k=2 phase")
    amp.value = 0.5
    phase.value = 90.0

    k2 = [c for c in state.edited if c.k == 2]
    assert len(k2) == 1
    assert k2[0].amplitude == pytest.approx(0.5)
    assert k2[0].phase == pytest.approx(90.0)
    assert len(drawn) == n_draws + 2
    assert drawn[-1] == state.edited
    assert _find(panel, lambda x: isinstance(x, w.HTML) and "ERROR" in x.value) is None
