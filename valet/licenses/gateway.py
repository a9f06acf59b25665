"""Persistence gateway for the license catalog.

`PersistenceGateway` is the narrow interface the edit controller depends on.
`LicenseStore` implements it over the SQLAlchemy repository and also keeps
the in-memory list the UI renders from.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from valet.database import repository
from valet.errors import PersistenceError
from valet.models.schemas import LicenseRecord
from valet.utils.logger import get_logger

logger = get_logger(__name__)


class PersistenceGateway(Protocol):
    def update(self, record: LicenseRecord) -> None:
        """Persist the editable fields of ``record``.

        Raises PersistenceError on storage failure.
        """

    def refresh(self) -> None:
        """Reload the in-memory record collection from the backing store."""


class LicenseStore:
    """Database-backed license collection.

    Each operation opens a short-lived session from ``session_factory`` and
    always closes it. SQLAlchemy failures surface as PersistenceError.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory
        self.licenses: List[LicenseRecord] = []

    def _run(self, action: str, fn):
        db = self._session_factory()
        try:
            return fn(db)
        except PersistenceError:
            db.rollback()
            raise
        except SQLAlchemyError as exc:
            db.rollback()
            raise PersistenceError(f"Failed to {action}: {exc}") from exc
        finally:
            db.close()

    # ------------------- Gateway interface ----------------------------
    def update(self, record: LicenseRecord) -> None:
        self._run("update license", lambda db: repository.update_license(db, record))
        logger.info("Updated license %s (%s)", record.id, record.software_name)

    def refresh(self) -> None:
        try:
            self.licenses = self._run(
                "load licenses",
                lambda db: [repository.to_record(r) for r in repository.list_licenses(db)],
            )
        except PersistenceError as exc:
            # The previous list stays visible; the failure is ours to report.
            logger.error("ERROR: %s", exc)

    # ------------------- Catalog operations ---------------------------
    def get(self, license_id: str) -> Optional[LicenseRecord]:
        for record in self.licenses:
            if record.id == license_id:
                return record
        return None

    def add(self, software_name: str, **fields) -> LicenseRecord:
        record = self._run(
            "add license",
            lambda db: repository.to_record(
                repository.create_license(db, software_name, **fields)
            ),
        )
        logger.info("Added license %s (%s)", record.id, record.software_name)
        self.refresh()
        return record

    def delete(self, license_id: str) -> None:
        self._run("delete license", lambda db: repository.delete_license(db, license_id))
        logger.info("Deleted license %s", license_id)
        self.refresh()

    def add_attachment(self, license_id: str, filename: str, data: bytes) -> None:
        self._run(
            "add attachment",
            lambda db: repository.add_attachment(db, license_id, filename, data),
        )
        self.refresh()

    def attachment_data(self, attachment_id: str) -> Optional[bytes]:
        return self._run(
            "read attachment",
            lambda db: repository.get_attachment_data(db, attachment_id),
        )

    def remove_attachment(self, attachment_id: str) -> bool:
        removed = self._run(
            "remove attachment",
            lambda db: repository.remove_attachment(db, attachment_id),
        )
        if removed:
            self.refresh()
        return removed
