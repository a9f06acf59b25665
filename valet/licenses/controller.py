"""Edit-mode controller for the license detail view.

Two states: VIEWING (initial) and EDITING. The controller owns the draft and
receives user edits as `FieldChanged` events; render code reads `mode`,
`draft`, `record` and `can_save` and never writes to them directly.

    >>> controller = EditController(store, record)
    >>> controller.begin_edit()
    >>> controller.apply(FieldChanged("license_key", "XYZ-999"))
    >>> controller.save()
    True
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable, List

from valet.errors import PersistenceError
from valet.licenses.form_state import FieldChanged, LicenseDraft, apply_draft, is_edited
from valet.licenses.gateway import PersistenceGateway
from valet.models.schemas import LicenseRecord
from valet.utils.logger import get_logger

logger = get_logger(__name__)


class EditMode(Enum):
    VIEWING = auto()
    EDITING = auto()


class EditController:
    def __init__(self, gateway: PersistenceGateway, record: LicenseRecord):
        self._gateway = gateway
        self._record = record
        self._mode = EditMode.VIEWING
        self._draft = LicenseDraft()
        self._listeners: List[Callable[[EditMode], None]] = []

    # ------------------- Read-only state ------------------------------
    @property
    def mode(self) -> EditMode:
        return self._mode

    @property
    def editing(self) -> bool:
        return self._mode is EditMode.EDITING

    @property
    def record(self) -> LicenseRecord:
        return self._record

    @property
    def draft(self) -> LicenseDraft:
        return self._draft

    def is_edited(self) -> bool:
        return is_edited(self._draft, self._record)

    @property
    def can_save(self) -> bool:
        return self.editing and self.is_edited()

    # ------------------- Listeners ------------------------------------
    def add_listener(self, listener: Callable[[EditMode], None]) -> None:
        """Register a render callback, called with the mode on every transition."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[EditMode], None]) -> bool:
        if listener in self._listeners:
            self._listeners.remove(listener)
            return True
        return False

    def _set_mode(self, mode: EditMode) -> None:
        if mode is self._mode:
            return
        self._mode = mode
        for listener in list(self._listeners):
            listener(mode)

    # ------------------- Transitions ----------------------------------
    def show_record(self, record: LicenseRecord) -> None:
        """Display a different (or reloaded) record.

        Ignored while editing: the session keeps the record it started from.
        """
        if self.editing:
            logger.debug("Ignoring record change for %s while editing", record.id)
            return
        self._record = record

    def begin_edit(self) -> None:
        if self.editing:
            return
        self._draft.load(self._record)
        self._set_mode(EditMode.EDITING)

    def cancel(self) -> None:
        # The draft is left as-is; the next begin_edit overwrites it.
        if not self.editing:
            return
        self._set_mode(EditMode.VIEWING)

    def toggle_edit(self) -> None:
        """The Edit/Cancel toolbar button."""
        if self.editing:
            self.cancel()
        else:
            self.begin_edit()

    def apply(self, event: FieldChanged) -> None:
        if not self.editing:
            logger.debug("Dropping %s edit outside edit mode", event.field)
            return
        self._draft.set(event.field, event.value)

    def set_field(self, name: str, value: str) -> None:
        self.apply(FieldChanged(name, value))

    def _reloaded(self, saved: LicenseRecord) -> LicenseRecord:
        """The refreshed copy of ``saved`` when the gateway can look one up.

        Picks up changes made outside the draft, such as attachments added
        while editing.
        """
        lookup = getattr(self._gateway, "get", None)
        if lookup is None:
            return saved
        return lookup(saved.id) or saved

    def save(self) -> bool:
        """Commit the draft. Returns True if the record was saved.

        A no-op returning False unless editing with a dirty draft. On a
        persistence failure the error is logged and the session stays in
        EDITING with the draft intact.
        """
        if not self.can_save:
            return False
        updated = apply_draft(self._record, self._draft)
        try:
            self._gateway.update(updated)
        except PersistenceError as exc:
            logger.error("ERROR: %s", exc)
            return False
        self._gateway.refresh()
        self._record = self._reloaded(updated)
        self._set_mode(EditMode.VIEWING)
        return True
