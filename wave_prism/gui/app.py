from __future__ import annotations

from typing import Optional

import ipywidgets as w

from wave_prism.models.profile import AudioProfile, FeatureFlags

from .prism import build_prism_panel
from .single_sine import build_single_sine_panel
from .two_sines import build_two_sines_panel

# Keep a single active GUI instance per kernel to avoid duplicated callbacks / stacked widgets.
_ACTIVE_GUI: Optional[w.Widget] = None

LESSON_TITLES = ("Single sine", "Two sines", "Mini prism")


def build_gui(
    flags: Optional[FeatureFlags] = None,
    profile: Optional[AudioProfile] = None,
    *,
    clear_cell_output: bool = True,
) -> w.Tab:
    """
    Build the lesson GUI (Jupyter / VSCode notebooks).

    All lessons are built when ``flags.unlock_all_modules`` is set; otherwise
    only the first lesson is available.

    Notes on "widget multiplication":
      - This function closes the previous GUI instance created from this module.
      - ``clear_cell_output`` clears the calling cell first (requires IPython).
    """
    global _ACTIVE_GUI

    flags = flags or FeatureFlags()
    profile = profile or AudioProfile()

    if _ACTIVE_GUI is not None:
        _ACTIVE_GUI.close()
        _ACTIVE_GUI = None

    if clear_cell_output:
        from IPython.display import clear_output

        clear_output(wait=True)

    panels = [build_single_sine_panel(profile=profile)]
    if flags.unlock_all_modules:
        panels.append(build_two_sines_panel(profile=profile))
        panels.append(build_prism_panel(flags=flags, profile=profile))

    tabs = w.Tab(children=panels)
    for i, title in enumerate(LESSON_TITLES[: len(panels)]):
        tabs.set_title(i, title)

    _ACTIVE_GUI = tabs
    return tabs
