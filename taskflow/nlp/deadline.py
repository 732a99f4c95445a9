from __future__ import annotations

from datetime import datetime, timedelta

from pydantic import BaseModel

DEFAULT_URGENT_WINDOW = timedelta(hours=24)


class DeadlineInfo(BaseModel):
    label: str  # "Overdue!", "3d left", "5h left", "Soon!"
    date_str: str  # "Oct 19, 9:00 AM"
    urgent: bool


def clock_str(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt.minute:02d} {'AM' if dt.hour < 12 else 'PM'}"


def format_deadline(dt: datetime) -> str:
    return f"{dt:%b} {dt.day}, {clock_str(dt)}"


def deadline_info(deadline: datetime, now: datetime, urgent_window: timedelta = DEFAULT_URGENT_WINDOW) -> DeadlineInfo:
    """Badge data for a deadline relative to ``now``."""
    diff = deadline - now
    date_str = format_deadline(deadline)
    if diff < timedelta(0):
        return DeadlineInfo(label="Overdue!", date_str=date_str, urgent=True)

    hours = int(diff.total_seconds() // 3600)
    days = hours // 24
    if days > 0:
        label = f"{days}d left"
    elif hours > 0:
        label = f"{hours}h left"
    else:
        label = "Soon!"
    return DeadlineInfo(label=label, date_str=date_str, urgent=diff < urgent_window)
