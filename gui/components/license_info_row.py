import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from gui.components.toast import Toast, copy_to_clipboard


class LicenseInfoRow(ttk.Frame):
    """
    One labelled license field.

    Viewing: caption, the stored value and a copy button.
    Editing: caption and an entry; every keystroke is forwarded to
    ``on_change`` as the full new value.
    """

    def __init__(
        self,
        parent,
        label: str,
        value: str,
        on_change: Optional[Callable[[str], None]] = None,
        toast: Optional[Toast] = None,
    ):
        super().__init__(parent, style="Main.TFrame")
        self.columnconfigure(0, weight=1)
        ttk.Label(self, text=label, style="Caption.TLabel").grid(row=0, column=0, sticky="w")

        if on_change is not None:
            self.var = tk.StringVar(value=value)
            self.var.trace_add("write", lambda *_: on_change(self.var.get()))
            ttk.Entry(self, textvariable=self.var).grid(row=1, column=0, sticky="ew")
            return

        self.var = None
        ttk.Label(self, text=value or "—", style="Value.TLabel").grid(row=1, column=0, sticky="w")
        copy_btn = ttk.Button(
            self,
            text="Copy",
            width=6,
            command=lambda: copy_to_clipboard(self, value, toast),
        )
        copy_btn.grid(row=1, column=1, sticky="e")
        if not value:
            copy_btn.state(["disabled"])
