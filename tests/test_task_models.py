# tests/test_task_models.py

from __future__ import annotations

from datetime import date, datetime

from bob_companion.tasks.task_models import Deadline, Event, TaskKind, ToDo


def test_render_formats_per_kind() -> None:
    assert ToDo("read book").render() == "[T][ ] read book"
    assert (
        Deadline("return book", datetime(2026, 10, 20, 18, 0), done=True).render()
        == "[D][X] return book (by: Oct 20 2026 1800)"
    )
    assert (
        Event("meeting", datetime(2026, 10, 20, 14, 0), datetime(2026, 10, 20, 16, 0)).render()
        == "[E][ ] meeting (from: Oct 20 2026 1400 to: Oct 20 2026 1600)"
    )


def test_kind_tags() -> None:
    assert ToDo("a").kind is TaskKind.TODO
    assert Deadline("a", datetime(2026, 1, 1)).kind is TaskKind.DEADLINE
    assert Event("a", datetime(2026, 1, 1), datetime(2026, 1, 2)).kind is TaskKind.EVENT


def test_mark_as_done_is_idempotent() -> None:
    task = Deadline("submit report", datetime(2026, 3, 1, 12, 0))
    task.mark_as_done()
    rendered = task.render()

    task.mark_as_done()

    assert task.done is True
    assert task.render() == rendered


def test_mark_as_undone_is_idempotent() -> None:
    task = ToDo("a")
    task.mark_as_undone()
    assert task.done is False
    task.mark_as_done()
    task.mark_as_undone()
    task.mark_as_undone()
    assert task.render() == "[T][ ] a"


def test_todo_is_never_relevant() -> None:
    assert ToDo("anything").is_relevant(date(2026, 1, 1)) is False


def test_deadline_relevant_only_on_due_date() -> None:
    task = Deadline("pay rent", datetime(2024, 3, 15, 23, 59))
    assert task.is_relevant(date(2024, 3, 15))
    assert not task.is_relevant(date(2024, 3, 14))
    assert not task.is_relevant(date(2024, 3, 16))


def test_event_relevant_over_inclusive_range() -> None:
    task = Event("trip", datetime(2024, 1, 1, 8, 0), datetime(2024, 1, 5, 20, 0))
    for day in (1, 3, 5):
        assert task.is_relevant(date(2024, 1, day))
    assert not task.is_relevant(date(2023, 12, 31))
    assert not task.is_relevant(date(2024, 1, 6))


def test_equality_covers_kind_fields_and_done() -> None:
    due = datetime(2026, 5, 5, 10, 0)
    assert Deadline("x", due) == Deadline("x", due)
    assert Deadline("x", due) != Deadline("x", due, done=True)
    assert ToDo("x") != Deadline("x", due)
