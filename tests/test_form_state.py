import pytest

from valet.licenses.form_state import (
    EDITABLE_FIELDS,
    LicenseDraft,
    apply_draft,
    is_edited,
)
from valet.models.schemas import AttachmentInfo, LicenseRecord


@pytest.fixture()
def record():
    return LicenseRecord(
        id="lic_1",
        software_name="App",
        download_url="https://example.com/App.dmg",
        registered_to_name="Jo Doe",
        registered_to_email="jo@example.com",
        license_key="ABC-123",
        notes="old",
        icon_path="/icons/app.png",
        attachments=(AttachmentInfo(id="att_1", license_id="lic_1", filename="receipt.pdf", size=10),),
    )


def test_draft_starts_empty():
    draft = LicenseDraft()
    assert all(value == "" for value in draft.snapshot().values())


def test_fresh_draft_is_not_edited(record):
    draft = LicenseDraft.from_record(record)
    assert draft.url_string == "https://example.com/App.dmg"
    assert is_edited(draft, record) is False


def test_fresh_draft_from_record_without_url_is_not_edited():
    record = LicenseRecord(id="x", software_name="NoUrl")
    draft = LicenseDraft.from_record(record)
    assert draft.url_string == ""
    assert is_edited(draft, record) is False


@pytest.mark.parametrize("field_name", EDITABLE_FIELDS)
def test_any_single_field_change_marks_dirty(record, field_name):
    draft = LicenseDraft.from_record(record)
    draft.set(field_name, getattr(draft, field_name) + "!")
    assert is_edited(draft, record) is True


def test_is_edited_is_repeatable(record):
    draft = LicenseDraft.from_record(record)
    draft.set("notes", "new")
    assert [is_edited(draft, record) for _ in range(3)] == [True, True, True]
    assert draft.notes == "new"
    assert record.notes == "old"


def test_reverting_a_change_is_clean_again(record):
    draft = LicenseDraft.from_record(record)
    draft.set("license_key", "XYZ")
    draft.set("license_key", "ABC-123")
    assert is_edited(draft, record) is False


def test_set_rejects_unknown_field(record):
    draft = LicenseDraft.from_record(record)
    with pytest.raises(ValueError):
        draft.set("id", "other")


def test_apply_draft_overwrites_editable_fields_only(record):
    draft = LicenseDraft.from_record(record)
    draft.set("license_key", "XYZ-999")
    draft.set("url_string", "")

    updated = apply_draft(record, draft)

    assert updated.id == record.id
    assert updated.license_key == "XYZ-999"
    assert updated.download_url is None
    assert updated.software_name == "App"
    assert updated.notes == "old"
    assert updated.icon_path == record.icon_path
    assert updated.attachments == record.attachments
    # the source record is untouched
    assert record.license_key == "ABC-123"


def test_whitespace_url_on_record_without_url_is_not_edited():
    record = LicenseRecord(id="x", software_name="NoUrl")
    draft = LicenseDraft.from_record(record)
    draft.set("url_string", "   ")
    assert draft.url_string == ""
    assert is_edited(draft, record) is False


def test_trailing_space_in_url_is_not_an_edit(record):
    draft = LicenseDraft.from_record(record)
    draft.set("url_string", record.download_url + " ")
    assert is_edited(draft, record) is False


def test_saved_url_equals_draft_value(record):
    draft = LicenseDraft.from_record(record)
    draft.set("url_string", "  https://example.com/new.zip ")

    updated = apply_draft(record, draft)

    assert is_edited(draft, record) is True
    assert updated.download_url_string == draft.url_string
    assert is_edited(draft, updated) is False
