import tkinter as tk
from tkinter import messagebox, ttk

from valet.errors import PersistenceError
from gui.utils.logging import log


class NewLicenseDialog(tk.Toplevel):
    """The "Add App" sheet."""

    FIELDS = (
        ("Software Name", "software_name"),
        ("Download URL", "download_url"),
        ("Registered To", "registered_to_name"),
        ("Email", "registered_to_email"),
        ("License Key", "license_key"),
    )

    def __init__(self, parent, on_create, on_close=None):  # pragma: no cover - UI code
        super().__init__(parent)
        self.title("Add App")
        self.transient(parent)
        self.resizable(False, False)
        self.on_create = on_create
        self.on_close = on_close
        self.protocol("WM_DELETE_WINDOW", self._close)

        body = ttk.Frame(self, padding=12)
        body.pack(fill=tk.BOTH, expand=True)
        body.columnconfigure(1, weight=1)

        self.vars = {}
        for row, (label, key) in enumerate(self.FIELDS):
            ttk.Label(body, text=label).grid(row=row, column=0, sticky="w", padx=(0, 8), pady=2)
            var = tk.StringVar()
            ttk.Entry(body, textvariable=var, width=40).grid(row=row, column=1, sticky="ew", pady=2)
            self.vars[key] = var

        actions = ttk.Frame(body)
        actions.grid(row=len(self.FIELDS), column=0, columnspan=2, sticky="e", pady=(10, 0))
        ttk.Button(actions, text="Cancel", command=self._close).pack(side=tk.RIGHT)
        ttk.Button(actions, text="Add", command=self._submit).pack(side=tk.RIGHT, padx=(0, 6))
        self.bind("<Return>", lambda _e: self._submit())
        self.bind("<Escape>", lambda _e: self._close())

    def _submit(self):  # pragma: no cover - UI code
        values = {key: var.get().strip() for key, var in self.vars.items()}
        if not values["software_name"]:
            messagebox.showwarning("Add App", "Enter a software name first.", parent=self)
            return
        try:
            self.on_create(**values)
        except PersistenceError as exc:
            log(f"Add app failed: {exc}")
            messagebox.showerror("Add App", str(exc), parent=self)
            return
        self.destroy()

    def _close(self):  # pragma: no cover - UI code
        if self.on_close:
            self.on_close()
        self.destroy()
