"""
UI Component Smoke Tests.
Tests that views and components can be imported.
Note: Actual Tkinter rendering requires a display, so these tests focus on import/structure.
"""

import pytest

tk = pytest.importorskip("tkinter")


# ===========================================================================
# Theme Tests
# ===========================================================================


class TestTheme:
    """Tests for gui/theme.py."""

    def test_theme_defaults(self):
        from gui.theme import Theme

        theme = Theme()
        assert theme.toast_background.startswith("#")

    def test_theme_is_frozen(self):
        from gui.theme import Theme

        with pytest.raises(Exception):
            Theme().name = "Other"


# ===========================================================================
# State Tests
# ===========================================================================


class TestState:
    """Tests for gui/state.py."""

    def test_state_defaults(self):
        from gui.state import AppState

        state = AppState()
        assert state.selected_license_id is None
        assert state.show_new_app_sheet is False


# ===========================================================================
# Component Tests
# ===========================================================================


class TestComponents:
    """Tests for gui/components/."""

    def test_toast_import(self):
        from gui.components.toast import Toast, copy_to_clipboard

        assert Toast is not None
        assert callable(copy_to_clipboard)

    def test_copy_to_clipboard_shows_toast(self):
        from unittest.mock import MagicMock

        from gui.components.toast import copy_to_clipboard

        widget = MagicMock()
        toast = MagicMock()
        copy_to_clipboard(widget, "ABC-123", toast)

        widget.clipboard_clear.assert_called_once()
        widget.clipboard_append.assert_called_once_with("ABC-123")
        toast.show.assert_called_once_with("Copied to Clipboard")

    def test_license_info_row_import(self):
        from gui.components.license_info_row import LicenseInfoRow

        assert LicenseInfoRow is not None

    def test_attachment_row_import(self):
        from gui.components.attachment_row import AttachmentRow

        assert AttachmentRow is not None


# ===========================================================================
# View Import Tests
# ===========================================================================


class TestViewImports:
    """Tests that all views can be imported without error."""

    def test_base_view_import(self):
        from gui.views.base import BaseView

        assert BaseView.name == "base"

    def test_license_info_view_import(self):
        from gui.views.license_info import LicenseInfoView

        assert LicenseInfoView.name == "license_info"

    def test_license_list_view_import(self):
        from gui.views.license_list import LicenseListView

        assert LicenseListView.name == "licenses"

    def test_new_license_dialog_fields(self):
        from gui.views.new_license import NewLicenseDialog

        keys = [key for _, key in NewLicenseDialog.FIELDS]
        assert keys[0] == "software_name"

    def test_main_window_import(self):
        from gui.main_window import MainWindow

        assert MainWindow is not None

    def test_tooltip_import(self):
        from gui.utils.tooltips import ToolTip

        assert ToolTip is not None
