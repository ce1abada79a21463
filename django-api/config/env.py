"""Environment-driven configuration.

Every setting can be overridden with a ``BOXOFFICE_``-prefixed environment
variable or a ``.env`` file next to ``manage.py``.
"""

from decimal import Decimal
from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent


class Environment(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BOXOFFICE_",
        env_file=str(BASE_DIR / ".env"),
        env_ignore_empty=True,
        extra="ignore",
    )

    DEBUG: bool = False
    SECRET_KEY: SecretStr = SecretStr("insecure-dev-key-change-me")
    ALLOWED_HOSTS: str = "localhost,127.0.0.1"

    # Storage
    DATABASE_PATH: Path = BASE_DIR / "boxoffice.sqlite3"

    # Logging
    LOG_LEVEL: str = "INFO"
    AUDIT_LOG_PATH: Path | None = None

    # Admin operations are open when no token is set
    ADMIN_TOKEN: SecretStr | None = None

    # Theater
    THEATER_NAME: str = "Sree Lakshmi Theater"
    THEATER_LOCATION: str = "Main Road"
    THEATER_GSTIN: str = ""
    SCREEN: str = "Screen 1"

    # Tickets
    CGST_RATE: Decimal = Field(default=Decimal("0.09"), ge=0)
    SGST_RATE: Decimal = Field(default=Decimal("0.09"), ge=0)
    MAINTENANCE_CHARGE: Decimal = Field(default=Decimal("2.00"), ge=0)
    TICKET_ID_PREFIX: str = "TKT"
    TICKET_ID_PADDING: int = Field(default=6, ge=1)

    # Seats
    SEAT_HOLD_TTL: int = Field(default=300, gt=0)
    DEFAULT_PRICES: dict[str, Decimal] = {
        "BOX": Decimal("150"),
        "STAR CLASS": Decimal("150"),
        "CLASSIC": Decimal("120"),
        "FIRST CLASS": Decimal("70"),
        "SECOND CLASS": Decimal("50"),
    }

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def allowed_hosts(self) -> list[str]:
        return [host.strip() for host in self.ALLOWED_HOSTS.split(",") if host.strip()]


env = Environment()
