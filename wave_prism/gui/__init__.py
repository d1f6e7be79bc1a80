"""GUI package - interactive ipywidgets interface.

This package provides the Jupyter notebook GUI with one tab per lesson:
1. Single sine: amplitude and phase of one wave
2. Two sines: superposition of two harmonics
3. Mini prism: split a drawn curve into harmonics, edit and resynthesize

Entry point:
    from wave_prism.gui.app import build_gui
    gui = build_gui()

Design principles:
- Panels only call the pure transforms in ``wave_prism.analysis``
- Plots go to ``ipywidgets.Output``; messages go to an ``HtmlLog``
"""
