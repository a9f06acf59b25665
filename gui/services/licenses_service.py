"""License catalog helpers for the GUI.

Builds the database-backed store the app runs against and wraps the CSV
export used by the Export menu command.
"""

from __future__ import annotations

from typing import Optional

from valet.csv_export import default_export_path, export_csv
from valet.database.engine import get_engine, init_db, make_session_factory
from valet.licenses.gateway import LicenseStore
from gui.utils.logging import log


def open_store(database_url: Optional[str] = None) -> LicenseStore:
    """Create tables if needed and return a store loaded with every license."""
    engine = get_engine(database_url)
    init_db(engine)
    store = LicenseStore(make_session_factory(engine))
    store.refresh()
    log(f"Loaded {len(store.licenses)} licenses")
    return store


def export_all_licenses(store: LicenseStore, path: Optional[str] = None) -> str:
    """Export the store's current list to CSV and return the file path."""
    target = path or default_export_path()
    export_csv(store.licenses, target)
    return target
