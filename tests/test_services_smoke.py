"""
Smoke tests for GUI services.
These tests run against a throwaway SQLite file; no display is needed.
"""

import csv
from unittest.mock import patch


# ===========================================================================
# Licenses Service Tests
# ===========================================================================

class TestLicensesService:
    """Tests for gui/services/licenses_service.py."""

    def test_open_store_creates_tables(self, tmp_path):
        from gui.services.licenses_service import open_store

        url = f"sqlite:///{tmp_path / 'nested' / 'valet.db'}"
        store = open_store(url)

        assert store.licenses == []
        assert (tmp_path / "nested" / "valet.db").exists()

    def test_store_persists_between_opens(self, tmp_path):
        from gui.services.licenses_service import open_store

        url = f"sqlite:///{tmp_path / 'valet.db'}"
        open_store(url).add("App", license_key="ABC-123")

        reopened = open_store(url)
        assert [r.license_key for r in reopened.licenses] == ["ABC-123"]

    def test_export_all_licenses(self, tmp_path):
        from gui.services.licenses_service import export_all_licenses, open_store

        store = open_store(f"sqlite:///{tmp_path / 'valet.db'}")
        store.add("App")
        target = export_all_licenses(store, str(tmp_path / "export.csv"))

        with open(target, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert [row["software_name"] for row in rows] == ["App"]


# ===========================================================================
# Settings Service Tests
# ===========================================================================

class TestSettingsService:
    """Tests for gui/services/settings_service.py."""

    @patch("gui.services.settings_service.save_preference")
    def test_save_settings(self, mock_save):
        from gui.services.settings_service import save_settings

        save_settings({"VALET_TOAST_MS": "900", "VALET_LOG_LEVEL": "DEBUG"})
        assert mock_save.call_count == 2

    @patch("gui.services.settings_service.save_preference")
    def test_set_disable_animations(self, mock_save):
        from gui.services.settings_service import set_disable_animations

        set_disable_animations(True)
        mock_save.assert_called_once_with("VALET_DISABLE_ANIMATIONS", "1")
