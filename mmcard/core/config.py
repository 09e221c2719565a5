"""
Configuration helpers for the card service.

Exposes a Settings object that reads environment variables (public base URL,
database, QR defaults, logging) so that routers/services do not fetch
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

QR_FORMATS = ("png", "svg")
DEFAULT_PROFILES_FILE = Path(__file__).resolve().parents[1] / "data.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    public_base_url: str
    database_url: str
    profiles_file: str
    qr_format: str
    qr_size: int
    qr_margin: int
    default_logo_url: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _choice(value: str | None, allowed: tuple[str, ...]) -> str:
        v = (value or "").strip().lower()
        return v if v in allowed else allowed[0]

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        public_base_url=(os.getenv("PUBLIC_BASE_URL") or "").strip().rstrip("/"),
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        profiles_file=os.getenv("PROFILES_FILE") or str(DEFAULT_PROFILES_FILE),
        qr_format=_choice(os.getenv("QR_FORMAT"), QR_FORMATS),
        qr_size=max(_int(os.getenv("QR_SIZE"), 320), 21),
        qr_margin=max(_int(os.getenv("QR_MARGIN"), 1), 0),
        default_logo_url=os.getenv("DEFAULT_LOGO_URL") or "/static/img/mm.svg",
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
