import tkinter as tk
from tkinter import ttk
from typing import Callable, Iterable, Optional

from valet.models.schemas import LicenseRecord
from gui.views.base import BaseView


class LicenseListView(BaseView):
    """Sidebar listing every license by software name."""

    name = "licenses"

    def __init__(self, parent, on_select: Callable[[str], None], **kwargs):
        self.on_select = on_select
        super().__init__(parent, **kwargs)

    def _build(self):  # pragma: no cover - UI code
        self.tree = ttk.Treeview(self, show="tree", selectmode="browse")
        self.tree.pack(fill=tk.BOTH, expand=True)
        self.tree.bind("<<TreeviewSelect>>", self._on_tree_select)

    def populate(self, licenses: Iterable[LicenseRecord], selected: Optional[str] = None):  # pragma: no cover - UI code
        self.tree.delete(*self.tree.get_children())
        for record in licenses:
            self.tree.insert("", tk.END, iid=record.id, text=record.software_name or "Untitled")
        if selected and self.tree.exists(selected):
            self.tree.selection_set(selected)
            self.tree.see(selected)

    def _on_tree_select(self, _event=None):  # pragma: no cover - UI code
        selection = self.tree.selection()
        if selection:
            self.on_select(selection[0])
