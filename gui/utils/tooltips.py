import tkinter as tk

from gui.theme import Theme


class ToolTip:
    """Hover help for toolbar buttons.

    Usage:
        tip = ToolTip(button, "Save")
        tip.text = "Cancel"  # takes effect on the next hover
    """

    def __init__(self, widget: tk.Widget, text: str, delay: int = 500, theme: Theme = Theme()):
        self.widget = widget
        self.text = text
        self.delay = delay
        self.theme = theme
        self.tipwindow = None
        self._after_id = None
        self.widget.bind("<Enter>", self._schedule, add="+")
        self.widget.bind("<Leave>", self._hide, add="+")
        self.widget.bind("<ButtonPress>", self._hide, add="+")

    def _schedule(self, _event=None):
        self._cancel()
        self._after_id = self.widget.after(self.delay, self._show)

    def _cancel(self):
        if self._after_id:
            self.widget.after_cancel(self._after_id)
            self._after_id = None

    def _show(self):
        self._after_id = None
        if self.tipwindow or not self.text:
            return
        x = self.widget.winfo_rootx()
        y = self.widget.winfo_rooty() + self.widget.winfo_height() + 4
        self.tipwindow = tw = tk.Toplevel(self.widget)
        tw.wm_overrideredirect(True)
        tw.wm_geometry(f"+{x}+{y}")
        tk.Label(
            tw,
            text=self.text,
            background=self.theme.toast_background,
            foreground=self.theme.toast_foreground,
            padx=6,
            pady=3,
        ).pack()

    def _hide(self, _event=None):
        self._cancel()
        tw = self.tipwindow
        self.tipwindow = None
        if tw:
            tw.destroy()
