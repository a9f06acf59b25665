import os
import tempfile
import tkinter as tk
import webbrowser
from pathlib import Path
from tkinter import filedialog, messagebox, ttk

from valet.errors import PersistenceError
from valet.licenses.gateway import LicenseStore
from valet.models.schemas import LicenseRecord
from gui.utils.logging import log


class AttachmentRow(ttk.Frame):
    """Attachment list for a license with add / open / remove actions."""

    def __init__(self, parent, store: LicenseStore, license: LicenseRecord, on_change=None):
        super().__init__(parent, style="Main.TFrame")
        self.store = store
        self.license = license
        self.on_change = on_change

        header = ttk.Frame(self, style="Main.TFrame")
        header.pack(fill=tk.X)
        ttk.Label(header, text="Attachments", style="Caption.TLabel").pack(side=tk.LEFT)
        ttk.Button(header, text="Add…", command=self._add).pack(side=tk.RIGHT)

        for attachment in license.attachments:
            row = ttk.Frame(self, style="Main.TFrame")
            row.pack(fill=tk.X, pady=1)
            ttk.Label(row, text=f"{attachment.filename} ({attachment.size:,} bytes)",
                      style="Value.TLabel").pack(side=tk.LEFT)
            ttk.Button(row, text="Remove",
                       command=lambda a=attachment: self._remove(a.id)).pack(side=tk.RIGHT)
            ttk.Button(row, text="Open",
                       command=lambda a=attachment: self._open(a.id, a.filename)).pack(side=tk.RIGHT)

    def _add(self):  # pragma: no cover - UI code
        path = filedialog.askopenfilename(parent=self, title="Attach file")
        if not path:
            return
        try:
            self.store.add_attachment(self.license.id, os.path.basename(path), Path(path).read_bytes())
        except (OSError, PersistenceError) as exc:
            messagebox.showerror("Attachments", f"Could not attach file: {exc}")
            return
        log(f"Attached {path} to {self.license.software_name}")
        self._changed()

    def _open(self, attachment_id: str, filename: str):  # pragma: no cover - UI code
        data = self.store.attachment_data(attachment_id)
        if data is None:
            return
        target = Path(tempfile.mkdtemp(prefix="valet-")) / filename
        target.write_bytes(data)
        webbrowser.open(target.as_uri())

    def _remove(self, attachment_id: str):  # pragma: no cover - UI code
        if not messagebox.askyesno("Attachments", "Remove this attachment?"):
            return
        try:
            self.store.remove_attachment(attachment_id)
        except PersistenceError as exc:
            messagebox.showerror("Attachments", f"Could not remove attachment: {exc}")
            return
        self._changed()

    def _changed(self):  # pragma: no cover - UI code
        if self.on_change:
            self.on_change()
