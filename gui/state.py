"""Application state container.

This is a small, import-safe state object used by the GUI layer. Edit mode
is not kept here: each license detail view owns an EditController.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class AppState:
    """Holds ephemeral UI state."""

    selected_license_id: Optional[str] = None
    show_new_app_sheet: bool = False
    disable_animations: bool = False
    status_message: str = ""
