"""Exception types shared across the catalog."""


class ValetError(Exception):
    """Base class for all Valet errors."""


class PersistenceError(ValetError):
    """Raised when the storage layer fails to read or write licenses.

    Callers must not assume a record changed when this is raised.
    """


class LicenseNotFoundError(PersistenceError):
    def __init__(self, license_id: str):
        super().__init__(f"License {license_id!r} does not exist")
        self.license_id = license_id


class ExportError(ValetError):
    """Raised when the CSV export cannot be written."""
