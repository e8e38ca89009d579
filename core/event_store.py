"""In-memory event collection.

The store owns the ordered list of `EventRecord`s and the editing pointer
(the id of the record currently loaded into the form, if any). Nothing here
touches Streamlit; the UI layer keeps one store per session in
`st.session_state`.

Invariants:
- ids are unique and never reused within a store's lifetime
- `editing_id`, when set, names a record that exists
"""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from core.errors import NotFoundError, ValidationError
from core.models import DEFAULT_EVENT_TYPE, EventRecord

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill in all required fields"


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


def _clean_fields(title, date, description, type) -> Tuple[str, str, str, str]:
    title = str(title or "").strip()
    date = str(date or "").strip()
    if not title or not date:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
    description = str(description or "").strip()
    type = str(type or "").strip() or DEFAULT_EVENT_TYPE
    return title, date, description, type


class EventStore:
    def __init__(self, id_source: Optional[Callable[[], int]] = None):
        self._records: List[EventRecord] = []
        self._editing_id: Optional[int] = None
        self._last_id = 0
        self._id_source = id_source or _wall_clock_ms

    # -----------------------
    # Read side
    # -----------------------
    @property
    def records(self) -> Tuple[EventRecord, ...]:
        return tuple(self._records)

    @property
    def editing_id(self) -> Optional[int]:
        return self._editing_id

    @property
    def editing_record(self) -> Optional[EventRecord]:
        if self._editing_id is None:
            return None
        return self.get(self._editing_id)

    def get(self, record_id: int) -> Optional[EventRecord]:
        for rec in self._records:
            if rec.id == record_id:
                return rec
        return None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[EventRecord]:
        return iter(tuple(self._records))

    # -----------------------
    # Mutations
    # -----------------------
    def _next_id(self) -> int:
        candidate = int(self._id_source())
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def _index_of(self, record_id: int) -> int:
        for i, rec in enumerate(self._records):
            if rec.id == record_id:
                return i
        return -1

    def add(self, title: str, date: str, description: str = "", type: Optional[str] = None) -> EventRecord:
        """Append a new record and return it.

        Raises `ValidationError` when title or date is blank.
        """
        title, date, description, type = _clean_fields(title, date, description, type)
        rec = EventRecord(id=self._next_id(), title=title, date=date, description=description, type=type)
        self._records.append(rec)
        logger.debug("Added event %s (%r)", rec.id, rec.title)
        return rec

    def update(
        self,
        record_id: int,
        title: str,
        date: str,
        description: str = "",
        type: Optional[str] = None,
    ) -> bool:
        """Replace every mutable field of `record_id` in place.

        Returns False (and changes nothing) when the id is unknown.
        """
        title, date, description, type = _clean_fields(title, date, description, type)
        idx = self._index_of(record_id)
        if idx < 0:
            logger.debug("Ignoring update for unknown event id %s", record_id)
            return False
        self._records[idx] = replace(
            self._records[idx], title=title, date=date, description=description, type=type
        )
        logger.debug("Updated event %s", record_id)
        return True

    def remove(self, record_id: int) -> bool:
        idx = self._index_of(record_id)
        if idx < 0:
            logger.debug("Ignoring delete for unknown event id %s", record_id)
            return False
        del self._records[idx]
        if self._editing_id == record_id:
            self._editing_id = None
        logger.debug("Removed event %s", record_id)
        return True

    def clear(self) -> None:
        self._records = []
        self._editing_id = None
        logger.debug("Cleared all events")

    def replace_all(self, records: Iterable[EventRecord]) -> None:
        new_records = list(records)
        ids = [r.id for r in new_records]
        if len(set(ids)) != len(ids):
            raise ValueError("Duplicate event ids in replacement set")
        self._records = new_records
        self._editing_id = None
        if ids:
            self._last_id = max(self._last_id, max(ids))
        logger.debug("Replaced collection with %d events", len(new_records))

    # -----------------------
    # Editing pointer
    # -----------------------
    def start_edit(self, record_id: int) -> EventRecord:
        rec = self.get(record_id)
        if rec is None:
            raise NotFoundError(record_id)
        self._editing_id = record_id
        return rec

    def cancel_edit(self) -> None:
        self._editing_id = None
