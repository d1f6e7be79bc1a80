"""Ingest package - turns drawn input into sample sequences.

Currently one adapter: canvas sampling (darkest pixel per column).
"""

from .canvas import analyze_canvas, brightness_field, render_curve_image, sample_canvas_waveform

__all__ = [
    "analyze_canvas",
    "brightness_field",
    "render_curve_image",
    "sample_canvas_waveform",
]
