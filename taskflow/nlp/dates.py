from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from .timeofday import apply_time

logger = logging.getLogger(__name__)

# Sunday first, so the index matches isoweekday() % 7
WEEKDAYS = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")
_WEEKDAY_ALT = "|".join(WEEKDAYS)
_CLOCK = r"(\d{1,2})(?::(\d{2}))?(?:\s*(am|pm))?"

MORNING = (9, 0)
END_OF_DAY = (23, 59)


@dataclass(frozen=True)
class DateRule:
    name: str
    pattern: re.Pattern[str]
    resolve: Callable[[re.Match[str], datetime], datetime | None]


def _at(dt: datetime, hour: int, minute: int) -> datetime:
    return dt.replace(hour=hour, minute=minute, second=0, microsecond=0)


def weekday_index(dt: datetime) -> int:
    """0=Sunday .. 6=Saturday."""
    return dt.isoweekday() % 7


def next_weekday(now: datetime, name: str) -> datetime:
    """The named weekday strictly after ``now`` (today rolls a full week), at 09:00."""
    target = WEEKDAYS.index(name.lower())
    distance = (target - weekday_index(now) + 7) % 7 or 7
    return _at(now + timedelta(days=distance), *MORNING)


def _clock_on(days: int) -> Callable[[re.Match[str], datetime], datetime | None]:
    def resolve(m: re.Match[str], now: datetime) -> datetime | None:
        try:
            return apply_time(now + timedelta(days=days), m.group(1), m.group(2), m.group(3))
        except ValueError:
            # "at 25:00", "at 9:75" etc. are not times
            return None

    return resolve


def _weekday(m: re.Match[str], now: datetime) -> datetime:
    return next_weekday(now, m.group(1))


def _offset(m: re.Match[str], now: datetime) -> datetime | None:
    unit = m.group(2).lower()
    try:
        amount = int(m.group(1))
        if unit.startswith("hour") or unit == "hr":
            delta = timedelta(hours=amount)
        else:
            delta = timedelta(minutes=amount)
        if now.tzinfo is None:
            return now + delta
        # elapsed time, not wall-clock time, across DST changes
        return (now.astimezone(timezone.utc) + delta).astimezone(now.tzinfo)
    except (OverflowError, ValueError):
        # past the end of the calendar
        return None


def _rule(name: str, pattern: str, resolve) -> DateRule:
    return DateRule(name, re.compile(rf"\b{pattern}\b", re.IGNORECASE), resolve)


# Order matters: the first rule that matches anywhere in the text wins.
# Composite day+time phrases sit above the bare day and bare time rules.
DATE_RULES: tuple[DateRule, ...] = (
    _rule("tomorrow_at", rf"tomorrow\s+at\s+{_CLOCK}", _clock_on(1)),
    _rule("today_at", rf"today\s+at\s+{_CLOCK}", _clock_on(0)),
    _rule("next_weekday", rf"next\s+({_WEEKDAY_ALT})", _weekday),
    _rule("on_weekday", rf"on\s+({_WEEKDAY_ALT})", _weekday),
    _rule("tomorrow", "tomorrow", lambda m, now: _at(now + timedelta(days=1), *MORNING)),
    _rule("today", "today", lambda m, now: _at(now, *END_OF_DAY)),
    _rule("at_time", rf"at\s+{_CLOCK}", _clock_on(0)),
    _rule("in_offset", r"in\s+(\d+)\s+(hour|hr|minute|min)s?", _offset),
)


def match_date(text: str, now: datetime, rules: Sequence[DateRule] = DATE_RULES) -> tuple[str, datetime | None]:
    """
    Find the first rule (in table order) that matches the text.
    Returns (text_without_the_match, deadline); the text is untouched when
    nothing matches.
    """
    for rule in rules:
        m = rule.pattern.search(text)
        if not m:
            continue
        deadline = rule.resolve(m, now)
        if deadline is None:
            logger.debug("date rule %s matched %r but resolved to nothing", rule.name, m.group(0))
            continue
        logger.debug("date rule %s matched %r -> %s", rule.name, m.group(0), deadline.isoformat())
        return text[: m.start()] + text[m.end() :], deadline
    return text, None
