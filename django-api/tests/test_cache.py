"""Tests for seat holds kept in the cache.

Run with: pytest tests/test_cache.py -v
"""

from datetime import date

from django.core.cache import cache

from boxoffice.domain import SeatId, Show
from boxoffice.stores.cache_store import holds_cache_key

SHOW_DATE = date(2025, 8, 6)


class TestSeatHolds:
    """Tests for CacheSeatHoldStore."""

    def test_hold_records_terminal(self, hold_store):
        hold_store.hold([SeatId("CB-A", 1)], SHOW_DATE, Show.EVENING, "t1")
        assert hold_store.holds(SHOW_DATE, Show.EVENING) == {SeatId("CB-A", 1): "t1"}

    def test_holds_are_scoped_to_date_and_show(self, hold_store):
        hold_store.hold([SeatId("CB-A", 1)], SHOW_DATE, Show.EVENING, "t1")
        assert hold_store.holds(SHOW_DATE, Show.NIGHT) == {}
        assert hold_store.holds(date(2025, 8, 7), Show.EVENING) == {}

    def test_last_writer_wins(self, hold_store):
        seat = SeatId("CB-A", 1)
        hold_store.hold([seat], SHOW_DATE, Show.EVENING, "t1")
        hold_store.hold([seat], SHOW_DATE, Show.EVENING, "t2")
        assert hold_store.holds(SHOW_DATE, Show.EVENING)[seat] == "t2"

    def test_release_keeps_other_holds(self, hold_store):
        hold_store.hold([SeatId("CB-A", 1), SeatId("CB-A", 2)], SHOW_DATE, Show.EVENING, "t1")
        hold_store.release([SeatId("CB-A", 1)], SHOW_DATE, Show.EVENING)
        assert hold_store.holds(SHOW_DATE, Show.EVENING) == {SeatId("CB-A", 2): "t1"}

    def test_release_last_hold_deletes_key(self, hold_store):
        hold_store.hold([SeatId("CB-A", 1)], SHOW_DATE, Show.EVENING, "t1")
        hold_store.release([SeatId("CB-A", 1)], SHOW_DATE, Show.EVENING)
        assert cache.get(holds_cache_key(SHOW_DATE, Show.EVENING)) is None

    def test_cache_key_format(self):
        assert holds_cache_key(SHOW_DATE, Show.MATINEE) == "seats:holds:2025-08-06:MATINEE"
