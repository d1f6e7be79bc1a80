from .oscillators import OscillatorSpec, oscillator_bank, render_components, render_tone

__all__ = [
    "OscillatorSpec",
    "oscillator_bank",
    "render_components",
    "render_tone",
]
