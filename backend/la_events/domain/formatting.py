from __future__ import annotations

import math
from datetime import date
from typing import Any, Iterable, Optional

TBA = "TBA"

# Locale-fixed month names so output does not depend on the process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_date(value: Optional[str]) -> str:
    """Render an ISO date or datetime string as ``Dec 15, 2025``."""
    if not value or not isinstance(value, str):
        return TBA
    try:
        parsed = date.fromisoformat(value[:10])
    except ValueError:
        return TBA
    return f"{_MONTHS[parsed.month - 1]} {parsed.day}, {parsed.year}"


def format_time(value: Optional[str]) -> str:
    """Render ``HH:MM[:SS]`` as ``7:30 PM``."""
    if not value or not isinstance(value, str):
        return TBA
    parts = value.split(":")
    if len(parts) < 2:
        return TBA
    try:
        hours = int(parts[0])
        minutes = int(parts[1][:2])
    except ValueError:
        return TBA
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        return TBA
    suffix = "PM" if hours >= 12 else "AM"
    hour12 = hours % 12 or 12
    return f"{hour12}:{minutes:02d} {suffix}"


def parse_display_date(value: Optional[str]) -> Optional[date]:
    """Inverse of :func:`format_date`; ``None`` for TBA, Ongoing and the like."""
    if not value or not isinstance(value, str):
        return None
    try:
        month_day, year = value.split(", ")
        month_name, day = month_day.split(" ")
        return date(int(year), _MONTHS.index(month_name) + 1, int(day))
    except ValueError:
        return None


def split_local_datetime(value: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    if not value or not isinstance(value, str):
        return None, None
    if "T" not in value:
        return value, None
    day, clock = value.split("T", 1)
    return day, clock


def select_best_image(images: Any) -> Optional[str]:
    """Largest image first; prefer wide 16:9 shots of at least 640px."""
    if not isinstance(images, list) or not images:
        return None
    candidates = [img for img in images if isinstance(img, dict)]
    if not candidates:
        return None

    def _size(img: dict) -> float:
        return _as_number(img.get("width")) * _as_number(img.get("height"))

    ordered = sorted(candidates, key=_size, reverse=True)
    for img in ordered:
        if _as_number(img.get("width")) >= 640 and img.get("ratio") == "16_9":
            return img.get("url")
    for img in ordered:
        if _as_number(img.get("width")) >= 400:
            return img.get("url")
    return ordered[0].get("url")


def join_parts(parts: Iterable[Optional[str]]) -> str:
    return ", ".join(part.strip() for part in parts if isinstance(part, str) and part.strip())


def parse_coordinate(value: Any, default: float, *, bound: float = 180.0) -> float:
    """Finite float within ``[-bound, bound]``, else ``default``."""
    if value is None or value == "":
        return default
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(parsed) or abs(parsed) > bound:
        return default
    return parsed


def _as_number(value: Any) -> float:
    try:
        return float(value or 0)
    except (TypeError, ValueError):
        return 0.0
