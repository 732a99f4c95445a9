from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .dates import match_date
from .tags import extract_tags


class ParsedTaskInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    deadline: datetime | None = None
    tags: list[str] = Field(default_factory=list)


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def parse(text: str, now: datetime) -> ParsedTaskInput:
    """
    Quick-capture parser:
    - tags via #word (all of them, in order, duplicates kept)
    - deadline via the first matching date rule ('tomorrow at 9am', 'next fri', 'in 45 minutes')
    - strips tags/date from the title; keeps the rest as the title

    ``now`` is the single reference instant for every relative phrase.
    """
    work, tags = extract_tags(text)
    work, deadline = match_date(work, now)
    return ParsedTaskInput(title=collapse_whitespace(work), deadline=deadline, tags=tags)
