from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta

from .nlp.deadline import DEFAULT_URGENT_WINDOW, clock_str, deadline_info
from .nlp.parser import parse
from .schemas import MAX_TITLE_LENGTH, PreviewOut, Priority, TaskDraft, split_tags

logger = logging.getLogger(__name__)


class InvalidTitleError(ValueError):
    """The cleaned title cannot be stored as a task title."""


class EmptyTitleError(InvalidTitleError):
    """Nothing is left of the text once tags and the date phrase are removed."""


class TitleTooLongError(InvalidTitleError):
    pass


def _uniq_union(a: list[str] | None, b: list[str] | None) -> list[str]:
    # preserve order, remove dups
    return list(dict.fromkeys((a or []) + (b or [])))


def build_task(
    text: str,
    now: datetime,
    *,
    deadline: datetime | None = None,
    tags: Sequence[str] | str | None = None,
    details: str = "",
    priority: Priority = "medium",
) -> TaskDraft:
    """
    Turn a quick-capture line into a task draft.

    An explicitly picked ``deadline`` wins over one parsed from the text.
    Manual ``tags`` are appended after the parsed ones, duplicates dropped.
    """
    parsed = parse(text, now)
    if not parsed.title:
        logger.info("rejecting capture with empty title: %r", text)
        raise EmptyTitleError("Task title is empty once tags and dates are removed")
    if len(parsed.title) > MAX_TITLE_LENGTH:
        logger.info("rejecting capture with %d-character title", len(parsed.title))
        raise TitleTooLongError(f"Task title is longer than {MAX_TITLE_LENGTH} characters")

    return TaskDraft(
        title=parsed.title,
        details=details.strip(),
        priority=priority,
        deadline=deadline or parsed.deadline,
        tags=_uniq_union(parsed.tags, split_tags(tags)),
        created_at=now,
    )


def summarize(deadline: datetime | None, tags: list[str]) -> str:
    parts = []
    if deadline is not None:
        parts.append(f"due {deadline:%A} {clock_str(deadline)}")
    parts.extend(f"#{t}" for t in tags)
    return " ".join(parts)


def render_preview(text: str, now: datetime, urgent_window: timedelta = DEFAULT_URGENT_WINDOW) -> PreviewOut:
    """Live preview for a draft; never raises on odd input."""
    parsed = parse(text, now)
    info = deadline_info(parsed.deadline, now, urgent_window) if parsed.deadline else None
    return PreviewOut(parsed=parsed, deadline=info, summary=summarize(parsed.deadline, parsed.tags))
