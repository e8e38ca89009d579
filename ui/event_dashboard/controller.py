"""Event dashboard interaction state machine.

The controller sits between the Streamlit widgets and the `EventStore`.
Widget callbacks call into it; the next script run renders whatever state
it leaves behind. It has no Streamlit dependency so the whole flow can be
driven from tests.

States:
- Idle: the form adds a new event ("Add Event")
- Editing(id): the form holds a copy of record `id` ("Update Event")

Destructive actions (delete one, clear all) are two-step: `request_*`
stages a `PendingAction`, then `confirm()` applies it or `decline()` drops it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from core.errors import NotFoundError, ValidationError
from core.event_store import EventStore
from core.models import DEFAULT_EVENT_TYPE, SAMPLE_EVENTS, EventRecord

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this event?"
CLEAR_PROMPT = "Clear all events?"

ADD_LABEL = "Add Event"
UPDATE_LABEL = "Update Event"


@dataclass
class FormState:
    title: str = ""
    date: str = ""
    description: str = ""
    type: str = DEFAULT_EVENT_TYPE

    @classmethod
    def from_record(cls, rec: EventRecord) -> "FormState":
        return cls(title=rec.title, date=rec.date, description=rec.description, type=rec.type)


@dataclass(frozen=True)
class PendingAction:
    kind: str  # "delete" | "clear"
    prompt: str
    record_id: Optional[int] = None


@dataclass
class InteractionController:
    store: EventStore = field(default_factory=EventStore)
    form: FormState = field(default_factory=FormState)
    pending: Optional[PendingAction] = None
    message: Optional[Tuple[str, str]] = None
    # Bumped whenever `form` is rewritten so the UI knows to push it into widgets.
    form_revision: int = 0

    # -----------------------
    # Derived UI state
    # -----------------------
    @property
    def editing_id(self) -> Optional[int]:
        return self.store.editing_id

    @property
    def mode(self) -> str:
        return "edit" if self.store.editing_id is not None else "add"

    @property
    def submit_label(self) -> str:
        return UPDATE_LABEL if self.mode == "edit" else ADD_LABEL

    @property
    def show_cancel(self) -> bool:
        return self.mode == "edit"

    def take_message(self) -> Optional[Tuple[str, str]]:
        msg, self.message = self.message, None
        return msg

    def _reset_form(self) -> None:
        self.form = FormState()
        self.form_revision += 1

    # -----------------------
    # Form
    # -----------------------
    def submit(self, title: str, date: str, description: str = "", type: Optional[str] = None) -> EventRecord:
        """Add a new event, or save the one being edited.

        Raises `ValidationError` (and leaves every bit of state alone) when
        title or date is blank.
        """
        editing_id = self.store.editing_id
        try:
            if editing_id is None:
                rec = self.store.add(title, date, description, type)
            else:
                self.store.update(editing_id, title, date, description, type)
                rec = self.store.get(editing_id)
                self.store.cancel_edit()
        except ValidationError as e:
            self.message = ("error", str(e))
            raise

        self._reset_form()
        return rec

    def start_edit(self, record_id: int) -> Optional[EventRecord]:
        try:
            rec = self.store.start_edit(record_id)
        except NotFoundError:
            logger.warning("Edit requested for missing event %s", record_id)
            return None
        self.form = FormState.from_record(rec)
        self.form_revision += 1
        return rec

    def cancel_edit(self) -> None:
        self.store.cancel_edit()
        self._reset_form()

    # -----------------------
    # Card actions
    # -----------------------
    def dispatch(self, action: str, record_id: int) -> None:
        """Single entry point for actions attached to a rendered card."""
        if action == "edit":
            self.start_edit(record_id)
        elif action == "delete":
            self.request_delete(record_id)
        else:
            raise ValueError(f"Unknown card action: {action!r}")

    def request_delete(self, record_id: int) -> None:
        self.pending = PendingAction(kind="delete", prompt=DELETE_PROMPT, record_id=record_id)

    def request_clear(self) -> None:
        if not len(self.store):
            return
        self.pending = PendingAction(kind="clear", prompt=CLEAR_PROMPT)

    def confirm(self) -> None:
        pending, self.pending = self.pending, None
        if pending is None:
            return

        if pending.kind == "delete":
            was_editing = self.store.editing_id == pending.record_id
            self.store.remove(pending.record_id)
            if was_editing:
                self._reset_form()
        elif pending.kind == "clear":
            was_editing = self.store.editing_id is not None
            self.store.clear()
            if was_editing:
                self._reset_form()
        else:
            raise ValueError(f"Unknown pending action: {pending.kind!r}")

    def decline(self) -> None:
        self.pending = None

    def load_samples(self) -> None:
        # A staged delete refers to the old collection; drop it.
        self.pending = None
        was_editing = self.store.editing_id is not None
        self.store.replace_all(SAMPLE_EVENTS)
        if was_editing:
            self._reset_form()
