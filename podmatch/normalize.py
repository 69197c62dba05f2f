"""Field normalization for podmatch."""

import re
from collections.abc import Iterable

# Multi-value roster cells may use either separator
FIELD_DELIMITER = re.compile(r"[;,]")


def split_field(raw: str | None) -> list[str]:
    """
    Split a delimited roster cell into trimmed tokens.

    Commas and semicolons both separate values. Blank tokens are dropped,
    everything else is kept as entered (case is preserved).
    """
    if not raw:
        return []
    return [token.strip() for token in FIELD_DELIMITER.split(raw) if token.strip()]


def unique_in_order(values: Iterable[str]) -> list[str]:
    """De-duplicate values, keeping the first occurrence of each."""
    return list(dict.fromkeys(values))


SLOT_TIME = re.compile(r"(?<!\d)(\d{1,2}):\d{2}")


def slot_hours(slot: str) -> list[int]:
    """Hours of every HH:MM time in a timeslot label, e.g. [10, 12] for "Mon 10:00-12:00"."""
    return [int(hour) for hour in SLOT_TIME.findall(slot)]


def slot_hour(slot: str) -> int | None:
    """Return the hour of the first HH:MM time in a timeslot label, if any."""
    hours = slot_hours(slot)
    return hours[0] if hours else None


def is_midday(slot: str, midday_hours: Iterable[int]) -> bool:
    """True if any time in the slot label falls in a midday hour (e.g. "Tue 11:30")."""
    midday = set(midday_hours)
    return any(hour in midday for hour in slot_hours(slot))
