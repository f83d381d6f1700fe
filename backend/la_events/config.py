from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

# Downtown Los Angeles
LA_CENTER_LAT = 34.0522
LA_CENTER_LON = -118.2437


def _env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip()
    return value or default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    ticketmaster_api_key: Optional[str] = None
    yelp_api_key: Optional[str] = None
    eventbrite_api_key: Optional[str] = None
    center_lat: float = LA_CENTER_LAT
    center_lon: float = LA_CENTER_LON
    http_timeout: float = 10.0
    provider_timeout: float = 10.0
    frontend_origin: str = "*"
    log_level: str = "INFO"
    log_format: str = "json"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            ticketmaster_api_key=_env_str("TICKETMASTER_API_KEY"),
            yelp_api_key=_env_str("YELP_API_KEY"),
            eventbrite_api_key=_env_str("EVENTBRITE_API_KEY"),
            center_lat=_env_float("LA_EVENTS_CENTER_LAT", LA_CENTER_LAT),
            center_lon=_env_float("LA_EVENTS_CENTER_LON", LA_CENTER_LON),
            http_timeout=_env_float("HTTP_TIMEOUT_SECONDS", 10.0),
            provider_timeout=_env_float("PROVIDER_TIMEOUT_SECONDS", 10.0),
            frontend_origin=_env_str("FRONTEND_ORIGIN", "*"),
            log_level=(_env_str("LOG_LEVEL", "INFO") or "INFO").upper(),
            log_format=(_env_str("LOG_FORMAT", "json") or "json").lower(),
        )
