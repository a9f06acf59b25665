"""CSV export of the license catalog."""

from __future__ import annotations

import csv
import os
from datetime import datetime
from typing import Iterable, Optional

from valet.config import get_settings
from valet.errors import ExportError
from valet.models.schemas import LicenseRecord
from valet.utils.logger import get_logger

logger = get_logger(__name__)

CSV_COLUMNS = [
    "id",
    "software_name",
    "download_url",
    "registered_to_name",
    "registered_to_email",
    "license_key",
    "notes",
]


def default_export_path(now: Optional[datetime] = None) -> str:
    stamp = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
    return os.path.join(get_settings().export_dir, f"valet-licenses-{stamp}.csv")


def export_csv(licenses: Iterable[LicenseRecord], path: str) -> int:
    """Write one row per license to ``path``. Returns the number of rows."""
    count = 0
    try:
        directory = os.path.dirname(os.path.abspath(path))
        os.makedirs(directory, exist_ok=True)
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS)
            writer.writeheader()
            for record in licenses:
                writer.writerow(
                    {
                        "id": record.id,
                        "software_name": record.software_name,
                        "download_url": record.download_url_string,
                        "registered_to_name": record.registered_to_name,
                        "registered_to_email": record.registered_to_email,
                        "license_key": record.license_key,
                        "notes": record.notes,
                    }
                )
                count += 1
    except OSError as exc:
        raise ExportError(f"Could not write {path}: {exc}") from exc
    logger.info("Exported %d licenses to %s", count, path)
    return count
