"""
Lesson 0 -- one sine wave.

Amplitude and phase sliders drive a single period drawn in canvas space, and
the Play button renders the tone at the base frequency.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import ipywidgets as w
from IPython.display import Audio, display

from wave_prism.analysis.sine import generate_sine_points
from wave_prism.audio.oscillators import render_tone
from wave_prism.models.profile import AudioProfile
from wave_prism.models.spectrum import WaveParams

from .log_view import HtmlLog
from .plots import _get_pyplot, plot_sine_points

CANVAS_WIDTH = 600
CANVAS_HEIGHT = 240


@dataclass
class SingleSineState:
    params: WaveParams = field(default_factory=WaveParams)
    n_redraws: int = 0


def build_single_sine_panel(
    *,
    profile: Optional[AudioProfile] = None,
    play_seconds: float = 1.5,
) -> w.Widget:
    profile = profile or AudioProfile()
    state = SingleSineState()
    log = HtmlLog(title="Log", height_px=120)

    amp = w.FloatSlider(value=1.0, min=0.0, max=2.0, step=0.05, description="Amplitude", continuous_update=False)
    phase = w.FloatSlider(value=0.0, min=0.0, max=360.0, step=5.0, description="Phase [deg]", continuous_update=False)
    btn_play = w.Button(description="Play", button_style="primary", icon="play")

    out_plot = w.Output()
    out_audio = w.Output()

    def _redraw() -> None:
        state.params = WaveParams(amplitude=float(amp.value), phase=float(phase.value))
        points = generate_sine_points(CANVAS_WIDTH, CANVAS_HEIGHT, state.params)
        out_plot.clear_output(wait=True)
        with out_plot:
            plt = _get_pyplot()
            fig, ax = plt.subplots(figsize=(8.0, 3.2))
            plot_sine_points(ax, points, width=CANVAS_WIDTH, height=CANVAS_HEIGHT)
            ax.set_title(f"y = {state.params.amplitude:.2f} sin(x + {state.params.phase:.0f}°)")
            plt.show()
            plt.close(fig)
        state.n_redraws += 1

    def _on_change(_change) -> None:
        try:
            _redraw()
        except Exception as exc:
            log.error(f"ERROR: {exc}")

    def _on_play(_btn) -> None:
        try:
            data = render_tone(state.params, play_seconds, profile=profile)
            out_audio.clear_output(wait=True)
            with out_audio:
                display(Audio(data, rate=profile.sample_rate, autoplay=True, normalize=False))
            log.info(f"Playing {profile.base_frequency_hz:.2f} Hz at amplitude {state.params.amplitude:.2f}.")
        except Exception as exc:
            log.error(f"ERROR: audio unavailable: {exc}")

    amp.observe(_on_change, names="value")
    phase.observe(_on_change, names="value")
    btn_play.on_click(_on_play)

    _redraw()

    header = w.HTML(
        "<h3>Lesson 0 — A single sine</h3>"
        "<div style='color:#666;'>Amplitude scales the wave; phase slides it along the period.</div>"
    )
    left = w.VBox([header, w.HBox([amp, phase, btn_play]), out_plot, out_audio], layout=w.Layout(width="70%"))
    right = w.VBox([log.panel], layout=w.Layout(width="30%"))
    return w.HBox([left, right], layout=w.Layout(width="100%"))
