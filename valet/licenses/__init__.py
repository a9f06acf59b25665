"""License editing: draft state, dirty check, controller and store."""
from .controller import EditController, EditMode
from .form_state import (
    EDITABLE_FIELDS,
    FieldChanged,
    LicenseDraft,
    apply_draft,
    is_edited,
)
from .gateway import LicenseStore, PersistenceGateway

__all__ = [
    "EditController",
    "EditMode",
    "EDITABLE_FIELDS",
    "FieldChanged",
    "LicenseDraft",
    "apply_draft",
    "is_edited",
    "LicenseStore",
    "PersistenceGateway",
]
