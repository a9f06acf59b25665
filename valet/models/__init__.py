"""Data schemas and validation."""
from .schemas import AttachmentInfo, LicenseRecord, is_download_link

__all__ = [
    "AttachmentInfo",
    "LicenseRecord",
    "is_download_link",
]
