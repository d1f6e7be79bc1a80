"""
Lesson 2 -- the mini prism.

Split a drawn curve into its first harmonics, edit them on sliders, and hear
and see the resynthesized result.

Flow:
  preset curve -> canvas image -> sample_canvas_waveform -> analyze_waveform
  -> to_synthesis_components -> sliders -> synthesize_waveform / oscillator bank
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
import ipywidgets as w
from IPython.display import Audio, display

from wave_prism.analysis.fourier import MAX_COMPONENTS, analyze_waveform, to_synthesis_components
from wave_prism.analysis.synthesis import synthesize_waveform
from wave_prism.audio.oscillators import oscillator_bank, render_components
from wave_prism.ingest.canvas import render_curve_image, sample_canvas_waveform
from wave_prism.models.profile import AudioProfile, FeatureFlags
from wave_prism.models.spectrum import SpectralComponent, SpectralResult, merge_components, pad_components

from .log_view import HtmlLog
from .plots import _get_pyplot, plot_period, plot_spectral_bars

CANVAS_WIDTH = 64
CANVAS_HEIGHT = 120
N_POINTS = 256

# Curves stay inside 80% of the canvas half-height so the line never clips.
_PRESET_SCALE = 0.8


def _square(theta: np.ndarray) -> np.ndarray:
    return np.where(theta < np.pi, 1.0, -1.0)


def _sawtooth(theta: np.ndarray) -> np.ndarray:
    return 1.0 - theta / np.pi


def _triangle(theta: np.ndarray) -> np.ndarray:
    x = theta / (2 * np.pi)
    return 4.0 * np.abs(x - np.floor(x + 0.5)) - 1.0


PRESET_SHAPES: Dict[str, Callable[[np.ndarray], np.ndarray]] = {
    "sine": np.sin,
    "two harmonics": lambda th: 0.6 * np.sin(th) + 0.4 * np.sin(3 * th),
    "square": _square,
    "sawtooth": _sawtooth,
    "triangle": _triangle,
}


def preset_image(name: str, *, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT) -> np.ndarray:
    """Luminance canvas with preset curve ``name`` drawn across one period."""
    try:
        shape = PRESET_SHAPES[name]
    except KeyError:
        raise KeyError(f"Unknown preset {name!r}; choose from {sorted(PRESET_SHAPES)}") from None
    theta = 2 * np.pi * np.arange(width, dtype=float) / width
    return render_curve_image(_PRESET_SCALE * shape(theta), height)


@dataclass
class PrismState:
    """Current analysis and the user's edits of it."""

    result: SpectralResult = field(default_factory=SpectralResult.empty)
    edited: Tuple[SpectralComponent, ...] = ()
    is_analyzing: bool = False
    last_elapsed_ms: float = 0.0

    def analyze(self, image: np.ndarray, log: Optional[HtmlLog] = None, flags: Optional[FeatureFlags] = None) -> SpectralResult:
        """Sample and analyse ``image``; on failure fall back to the empty result."""
        flags = flags or FeatureFlags()
        self.is_analyzing = True
        t0 = time.perf_counter()
        try:
            samples = sample_canvas_waveform(image)
            self.result = analyze_waveform(samples)
            self.edited = pad_components(to_synthesis_components(self.result), MAX_COMPONENTS)
        except Exception as exc:
            if log is not None:
                log.error(f"ERROR: analysis failed: {exc}")
            self.reset()
            return self.result
        finally:
            self.is_analyzing = False
            self.last_elapsed_ms = (time.perf_counter() - t0) * 1e3

        if log is not None:
            log.info(
                f"Analysed {self.result.n_samples} samples into {len(self.result.components)} components "
                f"(energy {self.result.energy:.4f})."
            )
            if flags.debug_spectral_analysis:
                log.table(self.result.to_frame())
            if flags.show_performance_metrics:
                log.info(f"analysis took {self.last_elapsed_ms:.2f} ms")
        return self.result

    def edit(self, k: int, *, amplitude: Optional[float] = None, phase: Optional[float] = None) -> None:
        """Replace harmonic ``k`` in the edited set (last write per k wins)."""
        current = {c.k: c for c in pad_components(self.edited, MAX_COMPONENTS)}
        base = current.get(k, SpectralComponent(k=k, amplitude=0.0, phase=0.0))
        if amplitude is not None:
            base = replace(base, amplitude=float(amplitude))
        if phase is not None:
            base = replace(base, phase=float(phase))
        self.edited = merge_components(list(self.edited) + [base])

    def resynthesize(self, num_points: int = N_POINTS) -> np.ndarray:
        return synthesize_waveform(self.edited, num_points)

    def reset(self) -> None:
        self.result = SpectralResult.empty()
        self.edited = ()


def build_prism_panel(
    *,
    flags: Optional[FeatureFlags] = None,
    profile: Optional[AudioProfile] = None,
    play_seconds: float = 1.5,
    state: Optional[PrismState] = None,
) -> w.Widget:
    flags = flags or FeatureFlags()
    profile = profile or AudioProfile()
    state = state if state is not None else PrismState()
    log = HtmlLog(title="Log", height_px=220)
    syncing = {"on": False}

    dd_preset = w.Dropdown(options=list(PRESET_SHAPES), value="square", description="Curve", layout=w.Layout(width="240px"))
    btn_split = w.Button(description="Split wave", button_style="primary", icon="bolt")
    btn_reset = w.Button(description="Reset", button_style="warning")
    btn_play = w.Button(description="Play", icon="play")

    amp_sliders: List[w.FloatSlider] = []
    phase_sliders: List[w.FloatSlider] = []
    rows = []
    for k in range(MAX_COMPONENTS):
        label = "DC" if k == 0 else f"k={k}"
        a = w.FloatSlider(value=0.0, min=0.0, max=2.0, step=0.01, description=f"{label} amp", continuous_update=False)
        p = w.FloatSlider(value=0.0, min=0.0, max=360.0, step=1.0, description=f"{label} phase", continuous_update=False)
        if k == 0:
            p.disabled = True  # DC has no phase
        amp_sliders.append(a)
        phase_sliders.append(p)
        rows.append(w.HBox([a, p]))

    out_plot = w.Output()
    out_audio = w.Output()

    def _sync_sliders() -> None:
        syncing["on"] = True
        try:
            for c in pad_components(state.edited, MAX_COMPONENTS):
                amp_sliders[c.k].value = float(min(max(c.amplitude, 0.0), amp_sliders[c.k].max))
                phase_sliders[c.k].value = float(np.mod(c.phase, 360.0))
        finally:
            syncing["on"] = False

    def _redraw(image: Optional[np.ndarray] = None) -> None:
        t0 = time.perf_counter()
        y_syn = state.resynthesize(N_POINTS)
        syn_ms = (time.perf_counter() - t0) * 1e3

        out_plot.clear_output(wait=True)
        with out_plot:
            plt = _get_pyplot()
            fig, (ax_wave, ax_bars) = plt.subplots(1, 2, figsize=(11.0, 3.6))
            if image is not None:
                plot_period(ax_wave, sample_canvas_waveform(image), label="drawn", color="#999999", linestyle="--")
            plot_period(ax_wave, y_syn, label="resynthesized", color="black")
            ax_wave.legend(loc="upper right")
            plot_spectral_bars(ax_bars, state.edited)
            plt.show()
            plt.close(fig)

        if flags.show_performance_metrics:
            log.info(f"synthesis of {N_POINTS} points took {syn_ms:.2f} ms")

    def _on_split(_btn) -> None:
        try:
            image = preset_image(dd_preset.value)
        except KeyError as exc:
            log.error(f"ERROR: {exc}")
            return
        state.analyze(image, log=log, flags=flags)
        _sync_sliders()
        _redraw(image)

    def _on_reset(_btn) -> None:
        state.reset()
        _sync_sliders()
        out_plot.clear_output(wait=True)
        out_audio.clear_output(wait=True)
        log.info("Reset.")

    def _on_slider(k: int, kind: str):
        def handler(change) -> None:
            if syncing["on"]:
                return
            try:
                if kind == "amp":
                    state.edit(k, amplitude=change["new"])
                else:
                    state.edit(k, phase=change["new"])
                _redraw()
            except Exception as exc:
                log.error(f"ERROR: {exc}")

        return handler

    def _on_play(_btn) -> None:
        bank = oscillator_bank(state.edited, profile)
        if not bank:
            log.warning("WARNING: nothing to play (all harmonics below the audible threshold).")
            return
        try:
            data = render_components(state.edited, play_seconds, profile=profile)
            out_audio.clear_output(wait=True)
            with out_audio:
                display(Audio(data, rate=profile.sample_rate, autoplay=True, normalize=False))
            log.info("Oscillators: " + ", ".join(f"{o.frequency_hz:.1f} Hz" for o in bank))
        except Exception as exc:
            log.error(f"ERROR: audio unavailable: {exc}")

    for k in range(MAX_COMPONENTS):
        amp_sliders[k].observe(_on_slider(k, "amp"), names="value")
        phase_sliders[k].observe(_on_slider(k, "phase"), names="value")
    btn_split.on_click(_on_split)
    btn_reset.on_click(_on_reset)
    btn_play.on_click(_on_play)

    header = w.HTML(
        "<h3>Lesson 2 — Mini prism</h3>"
        "<div style='color:#666;'>Pick a curve and split it into harmonics. "
        "Then move the sliders to rebuild it or make something new.</div>"
    )
    left = w.VBox(
        [header, w.HBox([dd_preset, btn_split, btn_reset, btn_play]), w.VBox(rows), out_plot, out_audio],
        layout=w.Layout(width="70%"),
    )
    right = w.VBox([log.panel], layout=w.Layout(width="30%"))
    return w.HBox([left, right], layout=w.Layout(width="100%"))
