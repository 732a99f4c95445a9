import logging
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from fastapi import APIRouter, HTTPException

from ..capture import InvalidTitleError, build_task, render_preview
from ..config import settings
from ..schemas import CaptureIn, PreviewIn, PreviewOut, TaskDraft

logger = logging.getLogger(__name__)

router = APIRouter()


def _reference_now(given: datetime | None) -> datetime:
    # One instant per request, shared by every rule in the parse
    return given or datetime.now(ZoneInfo(settings.timezone))


@router.post("", response_model=TaskDraft)
def capture(payload: CaptureIn):
    now = _reference_now(payload.now)
    try:
        return build_task(
            payload.text,
            now,
            deadline=payload.deadline,
            tags=payload.tags,
            details=payload.details,
            priority=payload.priority,
        )
    except InvalidTitleError as exc:
        raise HTTPException(400, str(exc)) from exc


@router.post("/preview", response_model=PreviewOut)
def preview(payload: PreviewIn):
    now = _reference_now(payload.now)
    return render_preview(payload.text, now, timedelta(hours=settings.urgent_window_hours))
