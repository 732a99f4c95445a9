from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .nlp.deadline import DeadlineInfo
from .nlp.parser import ParsedTaskInput

Priority = Literal["low", "medium", "high"]
MAX_TITLE_LENGTH = 280


def split_tags(value):
    # The form field is "a, b, c"; lists pass through
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    if not isinstance(value, (list, tuple)):
        raise ValueError("tags must be a list of strings or a comma-separated string")
    tags = []
    for t in value:
        if not isinstance(t, str):
            raise ValueError(f"tag must be a string, got {type(t).__name__}")
        if t.strip():
            tags.append(t.strip())
    return tags


class TaskDraft(BaseModel):
    title: str = Field(..., min_length=1, max_length=MAX_TITLE_LENGTH)
    details: str = ""
    priority: Priority = "medium"
    deadline: datetime | None = None
    tags: list[str] = Field(default_factory=list)
    completed: bool = False
    created_at: datetime


class CaptureIn(BaseModel):
    text: str
    now: datetime | None = None  # reference instant; server clock when omitted
    deadline: datetime | None = None  # picked on the calendar, beats a parsed one
    tags: list[str] | None = None
    details: str = ""
    priority: Priority = "medium"

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, v):
        return split_tags(v)


class PreviewIn(BaseModel):
    text: str
    now: datetime | None = None


class PreviewOut(BaseModel):
    parsed: ParsedTaskInput
    deadline: DeadlineInfo | None = None
    summary: str
