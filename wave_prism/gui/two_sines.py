"""
Lesson 1 -- two sines add up.

Wave A is fixed at the fundamental; wave B picks its own harmonic. Both are
synthesized separately and summed, which is exactly what the synthesizer does
for the combined component list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

import ipywidgets as w
from IPython.display import Audio, display

from wave_prism.analysis.synthesis import synthesize_waveform
from wave_prism.audio.oscillators import render_components
from wave_prism.models.profile import AudioProfile
from wave_prism.models.spectrum import SpectralComponent

from .log_view import HtmlLog
from .plots import _get_pyplot, plot_period

N_POINTS = 256


@dataclass
class TwoSinesState:
    wave_a: SpectralComponent = field(default_factory=lambda: SpectralComponent(k=1, amplitude=1.0, phase=0.0))
    wave_b: SpectralComponent = field(default_factory=lambda: SpectralComponent(k=2, amplitude=0.5, phase=0.0))

    @property
    def components(self) -> Tuple[SpectralComponent, SpectralComponent]:
        return (self.wave_a, self.wave_b)


def build_two_sines_panel(
    *,
    profile: Optional[AudioProfile] = None,
    play_seconds: float = 1.5,
) -> w.Widget:
    profile = profile or AudioProfile()
    state = TwoSinesState()
    log = HtmlLog(title="Log", height_px=120)

    amp_a = w.FloatSlider(value=state.wave_a.amplitude, min=0.0, max=2.0, step=0.05, description="A amp", continuous_update=False)
    phase_a = w.FloatSlider(value=state.wave_a.phase, min=0.0, max=360.0, step=5.0, description="A phase", continuous_update=False)
    amp_b = w.FloatSlider(value=state.wave_b.amplitude, min=0.0, max=2.0, step=0.05, description="B amp", continuous_update=False)
    phase_b = w.FloatSlider(value=state.wave_b.phase, min=0.0, max=360.0, step=5.0, description="B phase", continuous_update=False)
    k_b = w.IntSlider(value=state.wave_b.k, min=1, max=5, step=1, description="B harmonic", continuous_update=False)
    btn_play = w.Button(description="Play sum", button_style="primary", icon="play")

    out_plot = w.Output()
    out_audio = w.Output()

    def _read_controls() -> None:
        state.wave_a = SpectralComponent(k=1, amplitude=float(amp_a.value), phase=float(phase_a.value))
        state.wave_b = SpectralComponent(k=int(k_b.value), amplitude=float(amp_b.value), phase=float(phase_b.value))

    def _redraw() -> None:
        _read_controls()
        y_a = synthesize_waveform([state.wave_a], N_POINTS)
        y_b = synthesize_waveform([state.wave_b], N_POINTS)
        y_sum = synthesize_waveform(state.components, N_POINTS)

        out_plot.clear_output(wait=True)
        with out_plot:
            plt = _get_pyplot()
            fig, ax = plt.subplots(figsize=(8.0, 3.6))
            plot_period(ax, y_a, label="A (k=1)", color="#1f77b4", linestyle="--")
            plot_period(ax, y_b, label=f"B (k={state.wave_b.k})", color="#2ca02c", linestyle="--")
            plot_period(ax, y_sum, label="A + B", color="black")
            ax.legend(loc="upper right")
            plt.show()
            plt.close(fig)

    def _on_change(_change) -> None:
        try:
            _redraw()
        except Exception as exc:
            log.error(f"ERROR: {exc}")

    def _on_play(_btn) -> None:
        try:
            data = render_components(state.components, play_seconds, profile=profile)
            out_audio.clear_output(wait=True)
            with out_audio:
                display(Audio(data, rate=profile.sample_rate, autoplay=True, normalize=False))
            log.info(f"Playing k=1 and k={state.wave_b.k}.")
        except Exception as exc:
            log.error(f"ERROR: audio unavailable: {exc}")

    for ctrl in (amp_a, phase_a, amp_b, phase_b, k_b):
        ctrl.observe(_on_change, names="value")
    btn_play.on_click(_on_play)

    _redraw()

    header = w.HTML(
        "<h3>Lesson 1 — Two sines</h3>"
        "<div style='color:#666;'>The black curve is the point-by-point sum of the two dashed waves.</div>"
    )
    controls = w.VBox([w.HBox([amp_a, phase_a]), w.HBox([amp_b, phase_b, k_b]), btn_play])
    left = w.VBox([header, controls, out_plot, out_audio], layout=w.Layout(width="70%"))
    right = w.VBox([log.panel], layout=w.Layout(width="30%"))
    return w.HBox([left, right], layout=w.Layout(width="100%"))
