"""Wave Prism -- Python tooling for teaching sine-wave composition.

This package provides tools for:
- Analysing a sampled waveform into a handful of harmonic components
  (truncated direct DFT)
- Rebuilding a waveform from user-edited components (additive synthesis)
- Sampling a hand-drawn curve from a canvas brightness field
- Mapping components onto an oscillator bank and rendering audio buffers
- An interactive ipywidgets notebook GUI (single sine, two sines, mini prism)

Key principles:
- Pure transforms: analysis and synthesis never keep state between calls
- Direct transform: the DFT is computed explicitly, no FFT shortcut
- Plain numeric boundaries: collaborators pass lists/arrays in and get
  arrays or frozen dataclasses out

Main subpackages:
- analysis: Analyzer, Synthesizer, single-sine curve helpers
- audio: Oscillator bank mapping and offline rendering
- gui: Interactive ipywidgets GUI tabs
- ingest: Canvas sampling adapter
- models: Value objects (SpectralComponent, SpectralResult, WaveParams) and
  configuration (FeatureFlags, AudioProfile)
"""

__all__ = []
