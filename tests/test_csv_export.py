import csv
from datetime import datetime

import pytest

from valet.csv_export import CSV_COLUMNS, default_export_path, export_csv
from valet.errors import ExportError
from valet.models.schemas import LicenseRecord


def test_export_writes_header_and_rows(tmp_path):
    licenses = [
        LicenseRecord(id="1", software_name="App", license_key="ABC-123", download_url="https://a.example"),
        LicenseRecord(id="2", software_name="Tool", notes="line one\nline two, with comma"),
    ]
    target = tmp_path / "out" / "licenses.csv"

    count = export_csv(licenses, str(target))

    assert count == 2
    with open(target, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert list(rows[0].keys()) == CSV_COLUMNS
    assert rows[0]["license_key"] == "ABC-123"
    assert rows[0]["download_url"] == "https://a.example"
    assert rows[1]["download_url"] == ""
    assert rows[1]["notes"] == "line one\nline two, with comma"


def test_export_empty_catalog_writes_header_only(tmp_path):
    target = tmp_path / "empty.csv"
    assert export_csv([], str(target)) == 0
    assert target.read_text(encoding="utf-8").strip() == ",".join(CSV_COLUMNS)


def test_export_failure_raises_export_error(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x")
    with pytest.raises(ExportError):
        export_csv([], str(blocker / "licenses.csv"))


def test_default_export_path_uses_export_dir(monkeypatch, tmp_path):
    monkeypatch.setenv("VALET_EXPORT_DIR", str(tmp_path))
    path = default_export_path(datetime(2024, 3, 1, 9, 30, 0))
    assert path == str(tmp_path / "valet-licenses-20240301-093000.csv")
