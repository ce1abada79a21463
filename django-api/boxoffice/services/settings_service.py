"""Theater settings: class prices, show times and the movie list."""

import logging
from collections.abc import Mapping

from boxoffice.domain import Money, PricingConfig, Show, ShowTime, TheaterSettings
from boxoffice.domain.errors import InvalidInputError
from boxoffice.services.pricing import PricingResolver
from boxoffice.services.validation import parse_enum, parse_money
from boxoffice.stores.interfaces import SettingsStore

logger = logging.getLogger(__name__)

SETTINGS_KEY = "theater-settings"

DEFAULT_SHOW_TIMES = (
    ShowTime(Show.MORNING, "Morning Show", "10:00 AM", "12:00 PM"),
    ShowTime(Show.MATINEE, "Matinee Show", "2:00 PM", "5:00 PM"),
    ShowTime(Show.EVENING, "Evening Show", "6:00 PM", "9:00 PM"),
    ShowTime(Show.NIGHT, "Night Show", "9:30 PM", "12:30 AM"),
)


class SettingsService:
    """Load and save operator-edited settings, falling back to defaults."""

    def __init__(self, store: SettingsStore, default_prices: Mapping[str, object]) -> None:
        self._store = store
        self._default_prices = {
            label: Money.of(price) for label, price in default_prices.items()
        }

    def defaults(self) -> TheaterSettings:
        return TheaterSettings(
            pricing=PricingConfig(prices=dict(self._default_prices)),
            show_times=DEFAULT_SHOW_TIMES,
        )

    def load(self) -> TheaterSettings:
        raw = self._store.load(SETTINGS_KEY)
        if raw is None:
            return self.defaults()
        return self._parse(raw, fallback=self.defaults())

    def save(self, pricing=None, show_times=None, movies=None) -> TheaterSettings:
        """Validate and persist settings; omitted sections keep their current value.

        Raises:
            InvalidInputError: On negative or non-numeric prices, unknown show
                keys, or sections of the wrong shape.
        """
        current = self.load()
        settings = self._parse(
            {"pricing": pricing, "showTimes": show_times, "movies": movies},
            fallback=current,
        )
        self._store.save(SETTINGS_KEY, to_document(settings))
        logger.info(
            "Settings saved: %d price(s), %d show time(s), %d movie(s)",
            len(settings.pricing.prices), len(settings.show_times), len(settings.movies),
        )
        return settings

    def pricing_resolver(self) -> PricingResolver:
        return PricingResolver(self.load().pricing)

    @staticmethod
    def _parse(raw: Mapping, fallback: TheaterSettings) -> TheaterSettings:
        pricing = fallback.pricing
        if raw.get("pricing") is not None:
            if not isinstance(raw["pricing"], Mapping):
                raise InvalidInputError("pricing must be an object")
            pricing = PricingConfig(
                prices={
                    str(label): parse_money(price, f"pricing.{label}")
                    for label, price in raw["pricing"].items()
                }
            )

        show_times = fallback.show_times
        if raw.get("showTimes") is not None:
            if not isinstance(raw["showTimes"], list):
                raise InvalidInputError("showTimes must be an array")
            show_times = tuple(
                ShowTime(
                    key=parse_enum(Show, item.get("key"), "showTimes.key"),
                    label=str(item.get("label") or ""),
                    start_time=str(item.get("startTime") or ""),
                    end_time=str(item.get("endTime") or ""),
                    enabled=bool(item.get("enabled", True)),
                )
                for item in raw["showTimes"]
                if isinstance(item, Mapping)
            )

        movies = fallback.movies
        if raw.get("movies") is not None:
            if not isinstance(raw["movies"], list):
                raise InvalidInputError("movies must be an array")
            movies = tuple(dict(m) for m in raw["movies"] if isinstance(m, Mapping))

        return TheaterSettings(pricing=pricing, show_times=show_times, movies=movies)


def to_document(settings: TheaterSettings) -> dict:
    """Serialize settings to the JSON document stored and served by the API."""
    return {
        "pricing": {label: float(money.amount) for label, money in settings.pricing.prices.items()},
        "showTimes": [
            {
                "key": show_time.key.value,
                "label": show_time.label,
                "startTime": show_time.start_time,
                "endTime": show_time.end_time,
                "enabled": show_time.enabled,
            }
            for show_time in settings.show_times
        ],
        "movies": list(settings.movies),
    }
