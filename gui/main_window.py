import tkinter as tk
from tkinter import messagebox, ttk

from valet.errors import ExportError
from gui.components.toast import Toast
from gui.theme import configure_styles
from gui.utils.logging import log
from gui.views.license_info import LicenseInfoView
from gui.views.license_list import LicenseListView
from gui.views.new_license import NewLicenseDialog


class MainWindow(tk.Tk):  # pragma: no cover - UI code
    """Top-level window: menu bar, license sidebar and detail pane."""

    def __init__(self, app):
        super().__init__()
        self.app = app
        self.title("Valet")
        self.geometry("900x600")
        self.minsize(640, 420)
        configure_styles(ttk.Style(self))

        self.toast = Toast(
            self,
            duration_ms=app.settings.toast_ms,
            animate=not app.state.disable_animations,
        )
        self.new_app_dialog = None
        self.detail = None

        self._create_menu()

        self.status_var = tk.StringVar(value="")
        ttk.Label(self, textvariable=self.status_var, style="Muted.TLabel", padding=(6, 3)).pack(
            fill=tk.X, side=tk.BOTTOM
        )

        panes = ttk.PanedWindow(self, orient=tk.HORIZONTAL)
        panes.pack(fill=tk.BOTH, expand=True)
        self.sidebar = LicenseListView(panes, on_select=self._on_select, padding=4)
        self.detail_host = ttk.Frame(panes, style="Main.TFrame")
        panes.add(self.sidebar, weight=1)
        panes.add(self.detail_host, weight=3)

        licenses = self.app.store.licenses
        self.sidebar.populate(licenses, licenses[0].id if licenses else None)

    def _create_menu(self):
        menubar = tk.Menu(self)
        file_menu = tk.Menu(menubar, tearoff=0)
        file_menu.add_command(label="Add App", accelerator="Cmd+N", command=self._add_app)
        file_menu.add_separator()
        file_menu.add_command(label="Export", command=self._export)
        menubar.add_cascade(label="File", menu=file_menu)

        view_menu = tk.Menu(menubar, tearoff=0)
        self.animations_off = tk.BooleanVar(value=self.app.state.disable_animations)
        view_menu.add_checkbutton(
            label="Disable Animations",
            variable=self.animations_off,
            command=self._toggle_animations,
        )
        menubar.add_cascade(label="View", menu=view_menu)

        self.config(menu=menubar)
        self.bind("<Command-n>", lambda _e: self._add_app())
        self.bind("<Control-n>", lambda _e: self._add_app())

    # ------------------- Commands -------------------------------------
    def _add_app(self):
        self.app.add_app()
        if not self.app.state.show_new_app_sheet:
            if self.new_app_dialog is not None:
                self.new_app_dialog.destroy()
            self.new_app_dialog = None
            return
        self.new_app_dialog = NewLicenseDialog(self, on_create=self._create_license,
                                               on_close=self._close_new_app)

    def _close_new_app(self):
        self.app.state.show_new_app_sheet = False
        self.new_app_dialog = None

    def _create_license(self, **values):
        record = self.app.create_license(**values)
        self.new_app_dialog = None
        self.sidebar.populate(self.app.store.licenses, record.id)

    def _export(self):
        try:
            path = self.app.export()
        except ExportError as exc:
            messagebox.showerror("Export", str(exc))
            return
        self.status_var.set(f"{self.app.state.status_message} to {path}")
        log(f"Export written to {path}")

    def _toggle_animations(self):
        disabled = self.animations_off.get()
        self.app.set_disable_animations(disabled)
        self.toast.animate = not disabled

    # ------------------- Selection ------------------------------------
    def _on_select(self, license_id: str):
        controller = self.app.select_license(license_id)
        if controller is None:
            return
        if self.detail is not None:
            self.detail.destroy()
        self.detail = LicenseInfoView(
            self.detail_host,
            controller,
            self.app.store,
            self.toast,
            on_saved=self._on_saved,
        )
        self.detail.pack(fill=tk.BOTH, expand=True)

    def _on_saved(self, record):
        self.sidebar.populate(self.app.store.licenses, record.id)
