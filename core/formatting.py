from __future__ import annotations

from datetime import datetime
from typing import Any

_EVENT_ICONS = {
    "conference": "📊",
    "webinar": "💻",
    "workshop": "🛠️",
    "meeting": "📅",
}
_FALLBACK_ICON = _EVENT_ICONS["meeting"]

DATE_FORMAT = "%Y-%m-%d"


def format_date(date_str: Any) -> str:
    """Format an ISO calendar date as e.g. "Thu, Jan 1, 2026".

    The value is read as a plain calendar date, so there is no timezone
    shift. Anything that does not parse is returned unchanged.
    """
    raw = str(date_str or "").strip()
    try:
        d = datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError:
        return raw
    return f"{d:%a}, {d:%b} {d.day}, {d.year}"


def icon_for(event_type: Any) -> str:
    return _EVENT_ICONS.get(str(event_type or ""), _FALLBACK_ICON)


def badge_label(event_type: Any) -> str:
    t = str(event_type or "")
    return t[:1].upper() + t[1:]
