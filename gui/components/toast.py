"""Transient notification overlay ("Copied to Clipboard")."""

import tkinter as tk

from gui.theme import Theme

SLIDE_STEPS = 6
SLIDE_STEP_MS = 20


class Toast:
    """A label placed over ``parent`` that hides itself after ``duration_ms``.

    With animations enabled the label slides up from the bottom edge.
    """

    def __init__(self, parent: tk.Widget, duration_ms: int = 1500, animate: bool = True,
                 theme: Theme = Theme()):
        self.parent = parent
        self.duration_ms = duration_ms
        self.animate = animate
        self.theme = theme
        self._label = None
        self._after_ids = []

    @property
    def visible(self) -> bool:
        return self._label is not None

    def show(self, text: str) -> None:
        self.hide()
        self._label = tk.Label(
            self.parent,
            text=text,
            background=self.theme.toast_background,
            foreground=self.theme.toast_foreground,
            padx=14,
            pady=8,
        )
        if self.animate:
            for step in range(SLIDE_STEPS + 1):
                rely = 1.0 - 0.08 * step / SLIDE_STEPS
                self._after_ids.append(
                    self.parent.after(step * SLIDE_STEP_MS, self._place, rely)
                )
        else:
            self._place(0.92)
        self._after_ids.append(self.parent.after(self.duration_ms, self.hide))

    def _place(self, rely: float) -> None:
        if self._label is not None:
            self._label.place(relx=0.5, rely=rely, anchor="s")

    def hide(self) -> None:
        for after_id in self._after_ids:
            self.parent.after_cancel(after_id)
        self._after_ids = []
        if self._label is not None:
            self._label.destroy()
            self._label = None


def copy_to_clipboard(widget: tk.Widget, text: str, toast: "Toast" = None) -> None:
    widget.clipboard_clear()
    widget.clipboard_append(text)
    if toast is not None:
        toast.show("Copied to Clipboard")
