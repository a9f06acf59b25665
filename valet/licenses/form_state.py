"""Editable draft of a license and the dirty check that gates saving.

The draft holds plain string copies of a record's editable fields. It is
filled from a record when editing starts, mutated by field-change events,
and either thrown away or folded back into a new record on save.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from valet.models.schemas import LicenseRecord

# Draft field -> record attribute it is compared against / written to.
# The URL is held in string form on the draft.
DRAFT_TO_RECORD = {
    "software_name": "software_name",
    "url_string": "download_url_string",
    "registered_to_name": "registered_to_name",
    "registered_to_email": "registered_to_email",
    "license_key": "license_key",
    "notes": "notes",
}

EDITABLE_FIELDS = tuple(DRAFT_TO_RECORD)


@dataclass
class LicenseDraft:
    software_name: str = ""
    url_string: str = ""
    registered_to_name: str = ""
    registered_to_email: str = ""
    license_key: str = ""
    notes: str = ""

    @classmethod
    def from_record(cls, record: LicenseRecord) -> "LicenseDraft":
        draft = cls()
        draft.load(record)
        return draft

    def load(self, record: LicenseRecord) -> None:
        """Overwrite every editable field with the record's value."""
        for name, attr in DRAFT_TO_RECORD.items():
            setattr(self, name, getattr(record, attr))

    def set(self, name: str, value: str) -> None:
        if name not in DRAFT_TO_RECORD:
            raise ValueError(f"Unknown draft field: {name!r}")
        value = "" if value is None else str(value)
        if name == "url_string":
            # same normalization LicenseRecord applies to download_url
            value = value.strip()
        setattr(self, name, value)

    def snapshot(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(frozen=True)
class FieldChanged:
    """A user edit to one draft field, emitted by the view."""

    field: str
    value: str


def is_edited(draft: LicenseDraft, record: LicenseRecord) -> bool:
    """Return True if any editable field of the draft differs from the record.

    Exact string comparison, URL compared in string form. No side effects.
    """
    for name, attr in DRAFT_TO_RECORD.items():
        if getattr(draft, name) != getattr(record, attr):
            return True
    return False


def apply_draft(record: LicenseRecord, draft: LicenseDraft) -> LicenseRecord:
    """Build a new record: a copy of ``record`` with the draft's editable values.

    The identifier, icon and attachments are carried over unchanged.
    """
    return LicenseRecord.model_validate(
        {
            **record.model_dump(),
            "software_name": draft.software_name,
            "download_url": draft.url_string,
            "registered_to_name": draft.registered_to_name,
            "registered_to_email": draft.registered_to_email,
            "license_key": draft.license_key,
            "notes": draft.notes,
        }
    )
