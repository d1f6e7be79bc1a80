from __future__ import annotations

import html
import io
import re
from contextlib import redirect_stderr, redirect_stdout
from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple

import ipywidgets as w
import pandas as pd


Level = Literal["info", "warning", "error"]

_COLORS = {
    "error": "#b00020",
    "warning": "#b26a00",
    "info": "#222222",
}

_MONO = "ui-monospace, SFMono-Regular, Menlo, Consolas, Liberation Mono, monospace"


@dataclass
class _Entry:
    level: Level
    message: str
    count: int = 1


class HtmlLog:
    """
    Lesson log rendered into a single ``ipywidgets.HTML`` widget.

    ``ipywidgets.Output`` capture is duplicated by some notebook front-ends, so
    panels log here instead and keep ``Output`` for plots only.

    Features:
      - severity coloring: warnings in orange, errors in red
      - consecutive identical messages collapse into one line with (xN)
      - bounded history (oldest entries dropped beyond max_entries)
      - ``capture()`` context manager routing printed lines into the log
    """

    def __init__(self, *, title: str | None = None, height_px: int = 180, max_entries: int = 500) -> None:
        self._entries: List[_Entry] = []
        self._height_px = int(height_px)
        self._max_entries = int(max_entries)
        self.widget = w.HTML()
        if title:
            self.panel = w.VBox([w.HTML(f"<b>{html.escape(str(title))}</b>"), self.widget])
        else:
            self.panel = self.widget
        self.clear()

    def clear(self) -> None:
        self._entries.clear()
        self._render()

    def info(self, message: str) -> None:
        self._add("info", message)

    def warning(self, message: str) -> None:
        self._add("warning", message)

    def error(self, message: str) -> None:
        self._add("error", message)

    def write(self, message: str) -> None:
        """Log free text, one entry per line, severity taken from the line prefix."""
        txt = "" if message is None else str(message)
        for line in re.sub(r"<[^>]+>", "", txt).splitlines() or [""]:
            self._add(classify(line), line)

    def table(self, df: pd.DataFrame, *, float_format: str = "{:.4f}") -> None:
        """Log a small DataFrame as fixed-width text lines."""
        text = df.to_string(index=False, float_format=float_format.format)
        for line in text.splitlines():
            self._add("info", line)

    def entries(self) -> List[Tuple[Level, str, int]]:
        return [(e.level, e.message, e.count) for e in self._entries]

    def capture(self) -> "_Capture":
        """
        Context manager capturing stdout/stderr into the log::

            with log.capture():
                print("WARNING: ...")
        """
        return _Capture(self)

    # -------------------------
    # Internals
    # -------------------------
    def _add(self, level: Level, message: str) -> None:
        msg = "" if message is None else str(message)

        last = self._entries[-1] if self._entries else None
        if last is not None and last.level == level and last.message == msg:
            last.count += 1
        else:
            self._entries.append(_Entry(level=level, message=msg))
            if len(self._entries) > self._max_entries:
                self._entries = self._entries[-self._max_entries :]
        self._render()

    def _render(self) -> None:
        rows = []
        for e in self._entries:
            suffix = f" (x{e.count})" if e.count > 1 else ""
            rows.append(
                f"<div style='color:{_COLORS[e.level]}; white-space:pre-wrap; font-family:{_MONO};'>"
                f"{html.escape(e.message + suffix)}</div>"
            )
        inner = "".join(rows) if rows else "<div style='color:#666;'>Log is empty.</div>"
        self.widget.value = (
            f"<div style='border:1px solid #ddd; padding:8px; height:{self._height_px}px; "
            f"overflow-y:auto; background:#fff;'>{inner}</div>"
        )


def classify(line: str) -> Level:
    s = (line or "").lstrip()
    if s.startswith(("ERROR:", "Error:", "Exception:", "Traceback")):
        return "error"
    if s.startswith(("WARNING:", "Warning:", "WARN")):
        return "warning"
    return "info"


class _Capture:
    def __init__(self, log: HtmlLog) -> None:
        self._log = log
        self._buf = io.StringIO()
        self._cm_out: Optional[redirect_stdout] = None
        self._cm_err: Optional[redirect_stderr] = None

    def __enter__(self) -> "_Capture":
        self._cm_out = redirect_stdout(self._buf)
        self._cm_err = redirect_stderr(self._buf)
        self._cm_out.__enter__()
        self._cm_err.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            if self._cm_err is not None:
                self._cm_err.__exit__(exc_type, exc, tb)
        finally:
            if self._cm_out is not None:
                self._cm_out.__exit__(exc_type, exc, tb)

        for line in self._buf.getvalue().splitlines():
            self._log._add(classify(line), line)

        # Do not suppress exceptions
        return False
