"""Seat holds kept in the Django cache.

Holds are best-effort: read-modify-write on one cache key per (date, show),
last writer wins, entries expire after the configured TTL.
"""

from datetime import date

from django.core.cache import BaseCache

from boxoffice.domain import SeatId, Show
from boxoffice.stores.interfaces import SeatHoldStore


def holds_cache_key(on: date, show: Show) -> str:
    return f"seats:holds:{on.isoformat()}:{show.value}"


class CacheSeatHoldStore(SeatHoldStore):
    def __init__(self, cache: BaseCache, ttl_seconds: int) -> None:
        self._cache = cache
        self._ttl = ttl_seconds

    def holds(self, on: date, show: Show) -> dict[SeatId, str]:
        raw = self._cache.get(holds_cache_key(on, show), {})
        return {SeatId.from_string(seat): terminal for seat, terminal in raw.items()}

    def hold(self, seat_ids: list[SeatId], on: date, show: Show, terminal_id: str) -> None:
        key = holds_cache_key(on, show)
        raw = self._cache.get(key, {})
        raw.update({str(seat): terminal_id for seat in seat_ids})
        self._cache.set(key, raw, self._ttl)

    def release(self, seat_ids: list[SeatId], on: date, show: Show) -> None:
        key = holds_cache_key(on, show)
        raw = self._cache.get(key, {})
        for seat in seat_ids:
            raw.pop(str(seat), None)
        if raw:
            self._cache.set(key, raw, self._ttl)
        else:
            self._cache.delete(key)
