"""Thin repository helpers for licenses and attachments.

These functions provide a small abstraction over SQLAlchemy sessions so the
store and the menu commands share one set of CRUD operations. They commit on
success and leave rollback to the caller.
"""
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from valet.errors import LicenseNotFoundError
from valet.models.schemas import AttachmentInfo, LicenseRecord

from .models import Attachment, License

# Fields copied from a LicenseRecord on update. The id is never among them.
EDITABLE_COLUMNS = (
    "software_name",
    "download_url",
    "registered_to_name",
    "registered_to_email",
    "license_key",
    "notes",
    "icon_path",
)


def to_record(row: License) -> LicenseRecord:
    """Convert an ORM row into an immutable LicenseRecord."""
    return LicenseRecord(
        id=row.id,
        software_name=row.software_name,
        download_url=row.download_url,
        registered_to_name=row.registered_to_name,
        registered_to_email=row.registered_to_email,
        license_key=row.license_key,
        notes=row.notes,
        icon_path=row.icon_path,
        attachments=tuple(
            AttachmentInfo(
                id=a.id,
                license_id=a.license_id,
                filename=a.filename,
                size=a.size or 0,
                added_at=a.added_at,
            )
            for a in row.attachments
        ),
    )


def create_license(
    session: Session,
    software_name: str,
    download_url: Optional[str] = None,
    registered_to_name: str = "",
    registered_to_email: str = "",
    license_key: str = "",
    notes: str = "",
    icon_path: Optional[str] = None,
    license_id: Optional[str] = None,
) -> License:
    """Insert a new license row and return it."""
    row = License(
        software_name=software_name,
        download_url=download_url or None,
        registered_to_name=registered_to_name or "",
        registered_to_email=registered_to_email or "",
        license_key=license_key or "",
        notes=notes or "",
        icon_path=icon_path,
    )
    if license_id:
        row.id = license_id
    session.add(row)
    session.commit()
    session.refresh(row)
    return row


def get_license(session: Session, license_id: str) -> Optional[License]:
    return session.get(License, license_id)


def list_licenses(session: Session) -> List[License]:
    """Return all licenses ordered by software name, case-insensitive."""
    return (
        session.query(License)
        .order_by(func.lower(License.software_name), License.id)
        .all()
    )


def update_license(session: Session, record: LicenseRecord) -> License:
    """Overwrite the editable columns of an existing license.

    Raises:
        LicenseNotFoundError: no row has ``record.id``.
    """
    row = session.get(License, record.id)
    if row is None:
        raise LicenseNotFoundError(record.id)
    for column in EDITABLE_COLUMNS:
        setattr(row, column, getattr(record, column))
    session.commit()
    session.refresh(row)
    return row


def delete_license(session: Session, license_id: str) -> None:
    row = session.get(License, license_id)
    if row is None:
        raise LicenseNotFoundError(license_id)
    session.delete(row)
    session.commit()


def add_attachment(
    session: Session, license_id: str, filename: str, data: bytes
) -> Attachment:
    """Store a file's bytes against a license."""
    if session.get(License, license_id) is None:
        raise LicenseNotFoundError(license_id)
    attachment = Attachment(
        license_id=license_id,
        filename=filename,
        data=data,
        size=len(data),
    )
    session.add(attachment)
    session.commit()
    session.refresh(attachment)
    return attachment


def get_attachment_data(session: Session, attachment_id: str) -> Optional[bytes]:
    attachment = session.get(Attachment, attachment_id)
    return None if attachment is None else attachment.data


def remove_attachment(session: Session, attachment_id: str) -> bool:
    """Delete an attachment. Returns False when it did not exist."""
    attachment = session.get(Attachment, attachment_id)
    if attachment is None:
        return False
    session.delete(attachment)
    session.commit()
    return True
