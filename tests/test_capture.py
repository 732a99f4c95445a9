from datetime import datetime

import pytest

from taskflow.capture import EmptyTitleError, TitleTooLongError, build_task, render_preview, summarize

NOW = datetime(2024, 1, 15, 10, 30)  # Monday


def test_build_task_from_text():
    t = build_task("Submit report #work tomorrow at 9am", NOW, details="  Q1 numbers ")
    assert t.title == "Submit report"
    assert t.deadline == datetime(2024, 1, 16, 9, 0)
    assert t.tags == ["work"]
    assert t.details == "Q1 numbers"
    assert t.priority == "medium"
    assert t.completed is False
    assert t.created_at == NOW


def test_explicit_deadline_wins():
    picked = datetime(2024, 2, 1, 17, 0)
    t = build_task("Pay rent tomorrow", NOW, deadline=picked)
    assert t.deadline == picked
    assert t.title == "Pay rent"


def test_tags_union_keeps_order():
    t = build_task("Plan trip #travel #fun #travel", NOW, tags=["fun", "budget"])
    assert t.tags == ["travel", "fun", "budget"]


def test_tags_from_comma_string():
    t = build_task("Plan trip", NOW, tags="home, , errands ")
    assert t.tags == ["home", "errands"]


@pytest.mark.parametrize("text", ["", "   ", "#only #tags", "tomorrow at 9am #x"])
def test_empty_title_rejected(text):
    with pytest.raises(EmptyTitleError):
        build_task(text, NOW)


def test_summary():
    assert summarize(datetime(2024, 1, 19, 9, 0), ["work"]) == "due Friday 9:00 AM #work"
    assert summarize(None, ["a", "b"]) == "#a #b"
    assert summarize(None, []) == ""


def test_render_preview():
    p = render_preview("Standup next friday #work", NOW)
    assert p.parsed.title == "Standup"
    assert p.summary == "due Friday 9:00 AM #work"
    assert p.deadline is not None
    assert p.deadline.label == "3d left"
    assert p.deadline.date_str == "Jan 19, 9:00 AM"


def test_render_preview_without_deadline():
    p = render_preview("", NOW)
    assert p.parsed.title == ""
    assert p.deadline is None
    assert p.summary == ""


def test_too_long_title_rejected():
    with pytest.raises(TitleTooLongError):
        build_task("a" * 300 + " tomorrow", NOW)


def test_title_at_limit_accepted():
    assert build_task("a" * 280, NOW).title == "a" * 280


def test_non_string_tags_rejected():
    with pytest.raises(ValueError):
        build_task("Plan trip", NOW, tags=["ok", 1])


def test_render_preview_huge_offset():
    p = render_preview("x in 9999999999 minutes", NOW)
    assert p.deadline is None
    assert p.parsed.title == "x in 9999999999 minutes"
