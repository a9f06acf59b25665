from . import licenses_service, settings_service  # noqa: F401

from .licenses_service import export_all_licenses, open_store

__all__ = ["export_all_licenses", "open_store"]
