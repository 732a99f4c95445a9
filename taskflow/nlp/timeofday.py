from __future__ import annotations

from datetime import datetime


def to_24h(hour: int, meridiem: str | None) -> int:
    if not meridiem:
        return hour
    meridiem = meridiem.lower()
    if meridiem == "pm" and hour < 12:
        return hour + 12
    if meridiem == "am" and hour == 12:
        return 0
    return hour


def apply_time(base: datetime, hour: str, minute: str | None = None, meridiem: str | None = None) -> datetime:
    """
    Set the time of day on ``base`` from the raw hour/minute/am-pm tokens.

    Raises ValueError when the resulting hour or minute is out of range.
    """
    h = to_24h(int(hour), meridiem)
    m = int(minute) if minute else 0
    return base.replace(hour=h, minute=m, second=0, microsecond=0)
