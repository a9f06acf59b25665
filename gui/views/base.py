"""Base class for GUI views."""

from __future__ import annotations

from tkinter import ttk


class BaseView(ttk.Frame):
    """A ttk frame that builds its widgets once, in ``_build``."""

    name = "base"

    def __init__(self, parent, **kwargs):
        kwargs.setdefault("style", "Main.TFrame")
        super().__init__(parent, **kwargs)
        self._build()

    def _build(self):  # pragma: no cover - UI code
        pass

    def on_show(self):  # pragma: no cover - UI code
        pass
