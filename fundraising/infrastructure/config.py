# fundraising/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

from fundraising.domain.shared.money import SUPPORTED_CURRENCIES

load_dotenv()


@dataclass(frozen=True)
class Settings:
    default_currency: str
    expiring_soon_days: int
    cors_origins: tuple[str, ...]
    access_log: bool
    debug: bool
    log_name: str = "fundraising"

    def __post_init__(self) -> None:
        if self.default_currency not in SUPPORTED_CURRENCIES:
            raise ValueError(f"Invalid FUNDRAISING_DEFAULT_CURRENCY: {self.default_currency!r}")
        if self.expiring_soon_days < 0:
            raise ValueError("FUNDRAISING_EXPIRING_SOON_DAYS must be >= 0")
        if not self.log_name:
            raise ValueError("FUNDRAISING_LOG_NAME must not be empty")


def _flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).strip().lower() == "true"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    origins = os.environ.get("FUNDRAISING_CORS_ORIGINS", "http://localhost:5173")
    return Settings(
        default_currency=os.environ.get("FUNDRAISING_DEFAULT_CURRENCY", "EUR").strip().upper(),
        expiring_soon_days=int(os.environ.get("FUNDRAISING_EXPIRING_SOON_DAYS", "7")),
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        access_log=_flag("FUNDRAISING_ACCESS_LOG", "true"),
        debug=_flag("API_DEBUG", "false"),
        log_name=os.environ.get("FUNDRAISING_LOG_NAME", "fundraising").strip(),
    )
