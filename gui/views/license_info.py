import tkinter as tk
import webbrowser
from tkinter import ttk

from valet.licenses.controller import EditController, EditMode
from valet.licenses.gateway import LicenseStore
from gui.components.attachment_row import AttachmentRow
from gui.components.license_info_row import LicenseInfoRow
from gui.components.toast import Toast
from gui.utils.tooltips import ToolTip
from gui.views.base import BaseView


class LicenseInfoView(BaseView):
    """Detail view for one license with Edit / Save / Cancel.

    Widgets never write to the draft directly: entries call
    ``controller.set_field`` and the view re-renders on mode changes.
    """

    name = "license_info"

    def __init__(self, parent, controller: EditController, store: LicenseStore,
                 toast: Toast, on_saved=None, **kwargs):
        self.controller = controller
        self.store = store
        self.toast = toast
        self.on_saved = on_saved
        super().__init__(parent, **kwargs)
        controller.add_listener(self._on_mode_change)

    def _build(self):  # pragma: no cover - UI code
        toolbar = ttk.Frame(self, style="Panel.TFrame", padding=(8, 4))
        toolbar.pack(fill=tk.X)
        self.edit_btn = ttk.Button(toolbar, command=self.controller.toggle_edit)
        self.edit_btn.pack(side=tk.RIGHT)
        self.edit_tip = ToolTip(self.edit_btn, "Edit")
        self.save_btn = ttk.Button(toolbar, text="Save", command=self._on_save)
        self.save_tip = ToolTip(self.save_btn, "Save")

        self.body = ttk.Frame(self, style="Main.TFrame", padding=12)
        self.body.pack(fill=tk.BOTH, expand=True)

        top = self.winfo_toplevel()
        top.bind("<Command-s>", self._on_save_key)
        top.bind("<Control-s>", self._on_save_key)
        self.render()

    def destroy(self):  # pragma: no cover - UI code
        self.controller.remove_listener(self._on_mode_change)
        top = self.winfo_toplevel()
        top.unbind("<Command-s>")
        top.unbind("<Control-s>")
        super().destroy()

    # ------------------- Rendering ------------------------------------
    def render(self):  # pragma: no cover - UI code
        for child in self.body.winfo_children():
            child.destroy()

        editing = self.controller.editing
        record = self.controller.record
        draft = self.controller.draft

        self.edit_btn.configure(text="Cancel" if editing else "Edit")
        self.edit_tip.text = "Cancel" if editing else "Edit"
        if editing:
            self.save_btn.pack(side=tk.RIGHT, padx=(0, 6))
        else:
            self.save_btn.pack_forget()
        self._update_save_state()

        header = ttk.Frame(self.body, style="Panel.TFrame", padding=10)
        header.pack(fill=tk.X, pady=(0, 10))
        if editing:
            header.columnconfigure(0, weight=1)
            self._entry(header, "software_name", draft.software_name).grid(row=0, column=0, sticky="ew")
            self._entry(header, "url_string", draft.url_string).grid(row=1, column=0, sticky="ew", pady=(4, 0))
        else:
            ttk.Label(header, text=record.software_name, style="Header.TLabel").pack(anchor="w")
            if record.download_url:
                label = "Download" if record.is_download_link else "Website"
                ttk.Button(
                    header,
                    text=label,
                    style="Accent.TButton",
                    command=lambda url=record.download_url: webbrowser.open(url),
                ).pack(anchor="w", pady=(6, 0))

        rows = (
            ("Registered To", "registered_to_name"),
            ("Email", "registered_to_email"),
            ("License Key", "license_key"),
        )
        for label, field_name in rows:
            on_change = None
            value = getattr(record, field_name)
            if editing:
                value = getattr(draft, field_name)
                on_change = lambda v, f=field_name: self._on_field(f, v)
            LicenseInfoRow(self.body, label, value, on_change=on_change, toast=self.toast).pack(
                fill=tk.X, pady=(0, 10)
            )

        AttachmentRow(self.body, self.store, record, on_change=self._on_attachments_changed).pack(
            fill=tk.X, pady=(0, 10)
        )
        ttk.Separator(self.body).pack(fill=tk.X, pady=(0, 6))
        ttk.Label(self.body, text="Notes", style="Caption.TLabel").pack(anchor="w")

        notes = tk.Text(self.body, wrap="word", height=8, relief=tk.FLAT)
        notes.insert("1.0", draft.notes if editing else record.notes)
        notes.pack(fill=tk.BOTH, expand=True)
        if editing:
            notes.edit_modified(False)
            notes.bind("<<Modified>>", lambda _e, w=notes: self._on_notes_modified(w))
        else:
            notes.configure(state="disabled")

    def _entry(self, parent, field_name: str, value: str):  # pragma: no cover - UI code
        var = tk.StringVar(value=value)
        var.trace_add("write", lambda *_: self._on_field(field_name, var.get()))
        entry = ttk.Entry(parent, textvariable=var)
        entry._var = var  # keep the variable alive with the widget
        return entry

    # ------------------- Events ---------------------------------------
    def _on_field(self, field_name: str, value: str):  # pragma: no cover - UI code
        self.controller.set_field(field_name, value)
        self._update_save_state()

    def _on_notes_modified(self, widget: tk.Text):  # pragma: no cover - UI code
        if not widget.edit_modified():
            return
        self._on_field("notes", widget.get("1.0", "end-1c"))
        widget.edit_modified(False)

    def _update_save_state(self):  # pragma: no cover - UI code
        self.save_btn.state(["!disabled"] if self.controller.can_save else ["disabled"])

    def _on_save_key(self, _event=None):  # pragma: no cover - UI code
        self._on_save()
        return "break"

    def _on_save(self):  # pragma: no cover - UI code
        if self.controller.save() and self.on_saved:
            self.on_saved(self.controller.record)

    def _on_mode_change(self, _mode: EditMode):  # pragma: no cover - UI code
        self.render()

    def _on_attachments_changed(self):  # pragma: no cover - UI code
        updated = self.store.get(self.controller.record.id)
        if updated is not None:
            self.controller.show_record(updated)
        self.render()
