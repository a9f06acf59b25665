"""Pydantic schemas for license records.

A `LicenseRecord` is the immutable value handed to the UI layer. Database rows
are converted into records by the repository. An edit builds a new record by
validating the old record's dump with the changed fields merged in, so the
validators below normalize edited values too.
"""
from datetime import datetime
from typing import Optional, Tuple
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

DOWNLOAD_EXTENSIONS = (
    ".dmg",
    ".zip",
    ".pkg",
    ".tar.gz",
    ".tgz",
    ".exe",
    ".msi",
)


def is_download_link(url: Optional[str]) -> bool:
    """True when the URL points straight at an installer or archive."""
    if not url:
        return False
    path = urlparse(url).path.lower()
    return path.endswith(DOWNLOAD_EXTENSIONS)


class AttachmentInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    license_id: str
    filename: str
    size: int = Field(default=0, ge=0)
    added_at: Optional[datetime] = None


class LicenseRecord(BaseModel):
    """One cataloged software license."""

    model_config = ConfigDict(frozen=True)

    id: str
    software_name: str = ""
    download_url: Optional[str] = None
    registered_to_name: str = ""
    registered_to_email: str = ""
    license_key: str = ""
    notes: str = ""
    icon_path: Optional[str] = None
    attachments: Tuple[AttachmentInfo, ...] = ()

    @field_validator(
        "software_name",
        "registered_to_name",
        "registered_to_email",
        "license_key",
        "notes",
        mode="before",
    )
    @classmethod
    def none_as_empty(cls, v):
        return "" if v is None else v

    @field_validator("download_url", mode="before")
    @classmethod
    def blank_url_as_none(cls, v):
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @property
    def download_url_string(self) -> str:
        return self.download_url or ""

    @property
    def is_download_link(self) -> bool:
        return is_download_link(self.download_url)
