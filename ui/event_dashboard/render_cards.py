from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from core.formatting import badge_label, format_date, icon_for
from core.models import EventRecord
from core.sanitizer import escape


EMPTY_STATE_MESSAGE = "No events yet. Add your first event!"
DATE_ICON = "📅"

CardAction = Tuple[str, int]


@dataclass(frozen=True)
class EmptyState:
    message: str = EMPTY_STATE_MESSAGE


@dataclass(frozen=True)
class CardView:
    record_id: int
    title_html: str
    type: str
    badge: str
    icon: str
    date_label: str
    description_html: Optional[str]

    @property
    def edit_action(self) -> CardAction:
        return ("edit", self.record_id)

    @property
    def delete_action(self) -> CardAction:
        return ("delete", self.record_id)


def _inline_html(text: str) -> str:
    """Escape `text` and keep it on one line.

    `st.markdown` ends an HTML block at the first blank line, so a raw
    newline would let the rest of the text be parsed as markdown.
    """
    escaped = escape(text)
    return escaped.replace("\r\n", "\n").replace("\r", "\n").replace("\n", "<br>")


def card_view(rec: EventRecord) -> CardView:
    return CardView(
        record_id=rec.id,
        title_html=_inline_html(rec.title),
        type=rec.type,
        badge=badge_label(rec.type),
        icon=icon_for(rec.type),
        date_label=format_date(rec.date),
        description_html=_inline_html(rec.description) if rec.description else None,
    )


def render(records: Iterable[EventRecord]) -> List[Union[CardView, EmptyState]]:
    """Project the collection into card views, or a single empty-state placeholder."""
    views: List[Union[CardView, EmptyState]] = [card_view(r) for r in records]
    if not views:
        return [EmptyState()]
    return views


def card_markup(view: CardView) -> str:
    description = (
        f"<div class='event-description'>{view.description_html}</div>"
        if view.description_html
        else ""
    )
    return (
        f"<div class='event-card' id='event-{view.record_id}'>"
        "<div class='event-card-header'>"
        f"<h3>{view.title_html}</h3>"
        f"<span class='event-badge {escape(view.type)}'>{view.icon} {escape(view.badge)}</span>"
        "</div>"
        "<div class='event-details'>"
        f"<span class='event-detail-icon'>{DATE_ICON}</span> "
        f"<span>{escape(view.date_label)}</span>"
        "</div>"
        f"{description}"
        "</div>"
    )


def empty_state_markup(state: EmptyState) -> str:
    return f"<div class='empty-state'>{escape(state.message)}</div>"
