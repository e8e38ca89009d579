"""Unit tests for card rendering."""
import itertools

from core.event_store import EventStore
from core.models import EventRecord
from ui.event_dashboard.render_cards import (
    EMPTY_STATE_MESSAGE,
    CardView,
    EmptyState,
    card_markup,
    card_view,
    empty_state_markup,
    render,
)


def _store():
    counter = itertools.count(1)
    return EventStore(id_source=lambda: next(counter))


class TestRender:
    """Test cases for render."""

    def test_empty_collection_yields_only_placeholder(self):
        items = render([])

        assert items == [EmptyState()]
        assert not any(isinstance(i, CardView) for i in items)
        assert EMPTY_STATE_MESSAGE in empty_state_markup(items[0])

    def test_one_card_per_record_in_order(self):
        store = _store()
        store.add("A", "2026-01-01")
        store.add("B", "2026-01-02")
        store.add("C", "2026-01-03")

        items = render(store)

        assert [v.record_id for v in items] == [r.id for r in store.records]

    def test_workshop_card(self):
        store = _store()
        rec = store.add("Demo", "2026-01-01", type="workshop")

        (view,) = render(store)

        assert view.icon == "🛠️"
        assert view.badge == "Workshop"
        assert view.title_html == "Demo"
        assert view.date_label == "Thu, Jan 1, 2026"
        assert view.delete_action == ("delete", rec.id)
        assert view.edit_action == ("edit", rec.id)

    def test_render_is_idempotent(self):
        store = _store()
        store.add("A", "2026-01-01", "desc", "webinar")
        store.add("B", "2026-01-02")

        first = render(store)
        second = render(store)

        assert first == second
        assert [card_markup(v) for v in first] == [card_markup(v) for v in second]

    def test_clear_renders_empty_state(self):
        store = _store()
        for i in range(3):
            store.add(f"E{i}", "2026-01-01")

        store.clear()

        assert render(store) == [EmptyState()]


class TestCardMarkup:
    """Test cases for card_markup."""

    def test_user_text_is_escaped(self):
        rec = EventRecord(id=9, title="<img src=x onerror=alert(1)>", date="2026-01-01", description="a & 'b'")

        html = card_markup(card_view(rec))

        assert "<img" not in html
        assert "&lt;img src=x onerror=alert(1)&gt;" in html
        assert "a &amp; &#039;b&#039;" in html

    def test_description_omitted_when_empty(self):
        rec = EventRecord(id=3, title="T", date="2026-01-01", description="")

        view = card_view(rec)

        assert view.description_html is None
        assert "event-description" not in card_markup(view)

    def test_description_present(self):
        rec = EventRecord(id=3, title="T", date="2026-01-01", description="Bring laptop")

        assert "<div class='event-description'>Bring laptop</div>" in card_markup(card_view(rec))

    def test_card_carries_record_id_and_badge(self):
        rec = EventRecord(id=42, title="T", date="2026-01-01", type="webinar")

        html = card_markup(card_view(rec))

        assert "id='event-42'" in html
        assert "event-badge webinar" in html
        assert "💻 Webinar" in html
        assert "Thu, Jan 1, 2026" in html

    def test_multiline_description_stays_in_one_html_block(self):
        rec = EventRecord(id=5, title="T", date="2026-01-01", description="notes\n\n# Heading\r\n\n* item")

        html = card_markup(card_view(rec))

        assert "\n" not in html
        assert "\r" not in html
        assert (
            "<div class='event-description'>notes<br><br># Heading<br><br>* item</div></div>"
            in html
        )
