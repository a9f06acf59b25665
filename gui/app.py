"""Main GUI application object.

`ValetApp` holds the store, the UI state and the edit controller for the
selected license. It creates no Tk widgets until `run()` is called.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from valet.config import Settings, get_settings
from valet.licenses.controller import EditController
from valet.licenses.gateway import LicenseStore
from valet.models.schemas import LicenseRecord
from valet.utils.logger import setup_logging
from gui.services.licenses_service import export_all_licenses, open_store
from gui.services.settings_service import set_disable_animations
from gui.state import AppState
from gui.utils.logging import log


@dataclass
class ValetApp:
    store: LicenseStore
    settings: Settings = field(default_factory=get_settings)
    state: AppState = field(default_factory=AppState)
    controller: Optional[EditController] = None

    def __post_init__(self):
        self.state.disable_animations = self.settings.disable_animations

    def run(self) -> None:  # pragma: no cover - UI code
        from gui.main_window import MainWindow

        MainWindow(self).mainloop()

    def select_license(self, license_id: str) -> Optional[EditController]:
        """Show a license in the detail view.

        An unsaved edit on the previously selected license is discarded.
        """
        record = self.store.get(license_id)
        if record is None:
            return None
        if self.controller is not None and self.controller.editing:
            log(f"Discarding unsaved edits to {self.controller.record.software_name}")
            self.controller.cancel()
        self.controller = EditController(self.store, record)
        self.state.selected_license_id = license_id
        return self.controller

    # ------------------- Menu commands --------------------------------
    def add_app(self) -> None:
        """File > Add App: toggles the new-app sheet."""
        self.state.show_new_app_sheet = not self.state.show_new_app_sheet

    def create_license(self, software_name: str, **fields) -> LicenseRecord:
        record = self.store.add(software_name, **fields)
        self.state.show_new_app_sheet = False
        self.select_license(record.id)
        return record

    def export(self, path: Optional[str] = None) -> str:
        """File > Export: writes every license to CSV."""
        target = export_all_licenses(self.store, path)
        self.state.status_message = f"Exported {len(self.store.licenses)} licenses"
        return target

    def set_disable_animations(self, disabled: bool) -> None:
        self.state.disable_animations = disabled
        set_disable_animations(disabled)


def main() -> None:  # pragma: no cover - UI entry point
    settings = get_settings()
    setup_logging(settings.log_level)
    ValetApp(store=open_store(settings.database_url), settings=settings).run()
