from dataclasses import dataclass
from typing import List


EVENT_TYPES = ("conference", "webinar", "workshop", "meeting")
DEFAULT_EVENT_TYPE = "conference"


@dataclass(frozen=True)
class EventRecord:
    id: int
    title: str
    date: str
    description: str = ""
    type: str = DEFAULT_EVENT_TYPE


# Fixed demo set for the "Load sample events" button.
SAMPLE_EVENTS: List[EventRecord] = [
    EventRecord(
        id=1,
        title="Web Development Conference",
        date="2026-02-15",
        type="conference",
        description="Annual conference on modern web technologies.",
    ),
    EventRecord(
        id=2,
        title="JavaScript Workshop",
        date="2026-02-20",
        type="workshop",
        description="Hands-on JavaScript learning session.",
    ),
]
