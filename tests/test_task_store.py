# tests/test_task_store.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest

from bob_companion.core.errors import LoadError, SaveError
from bob_companion.tasks.task_list import TaskList
from bob_companion.tasks.task_models import Deadline, Event, ToDo
from bob_companion.tasks.task_store import FileTaskStore


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    assert FileTaskStore(tmp_path / "nope.txt").load() == []


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    store = FileTaskStore(tmp_path / "data" / "tasks.txt")
    tasks = [
        ToDo("read book", done=True),
        Deadline("return book | library", datetime(2026, 10, 20, 18, 0)),
        Event(
            "project meeting",
            datetime(2026, 10, 20, 14, 0),
            datetime(2026, 10, 21, 16, 30),
            done=True,
        ),
    ]

    store.save(TaskList(tasks))
    loaded = store.load()

    assert loaded == tasks
    assert [type(t) for t in loaded] == [ToDo, Deadline, Event]


def test_file_format_is_line_oriented(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    store = FileTaskStore(path)
    store.save(
        TaskList(
            [
                ToDo("read book"),
                Deadline("return book", datetime(2026, 10, 20, 18, 0), done=True),
                Event("meet", datetime(2026, 10, 20, 14, 0), datetime(2026, 10, 20, 16, 0)),
            ]
        )
    )

    assert path.read_text("utf-8").splitlines() == [
        "T | 0 | read book",
        "D | 1 | return book | 2026-10-20 1800",
        "E | 0 | meet | 2026-10-20 1400 | 2026-10-20 1600",
    ]
    assert not path.with_suffix(".txt.tmp").exists()


def test_blank_lines_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("\nT | 0 | a\n\n", "utf-8")
    assert FileTaskStore(path).load() == [ToDo("a")]


@pytest.mark.parametrize(
    "line",
    [
        "X | 0 | unknown kind",
        "T | 2 | bad flag",
        "T | 0",
        "T | 0 | ",
        "D | 0 | no due date",
        "D | 0 | bad due | 2026-10-20",
        "E | 0 | one endpoint | 2026-10-20 1400",
        "T | 0 | dangling escape \\",
        "T | 0 | unknown \\q escape",
    ],
)
def test_corrupt_line_raises_load_error(tmp_path: Path, line: str) -> None:
    path = tmp_path / "tasks.txt"
    path.write_text("T | 0 | fine\n" + line + "\n", "utf-8")
    with pytest.raises(LoadError, match="line 2"):
        FileTaskStore(path).load()


def test_save_failure_raises_save_error(tmp_path: Path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", "utf-8")
    store = FileTaskStore(blocker / "tasks.txt")
    with pytest.raises(SaveError):
        store.save(TaskList([ToDo("a")]))


@pytest.mark.parametrize(
    "sep",
    ["\x0c", "\x1c", "\x1d", "\x1e", "\x85", "\u2028", "\u2029", "\r", "\n", "\r\n", "\\", "\\n"],
)
def test_descriptions_with_line_break_characters_round_trip(tmp_path: Path, sep: str) -> None:
    store = FileTaskStore(tmp_path / "tasks.txt")
    tasks = [
        ToDo("keep me"),
        ToDo(f"pasted{sep}text"),
        Deadline(f"due{sep}soon", datetime(2026, 10, 20, 18, 0)),
        Event(f"meet{sep}up", datetime(2026, 10, 20, 14, 0), datetime(2026, 10, 20, 16, 0)),
        ToDo("keep me too", done=True),
    ]

    store.save(TaskList(tasks))

    assert store.load() == tasks


def test_line_breaks_in_descriptions_are_escaped_on_disk(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    FileTaskStore(path).save(TaskList([ToDo("a\nb\rc\\d")]))

    assert path.read_bytes() == b"T | 0 | a\\nb\\rc\\\\d\n"


def test_crlf_line_endings_are_accepted(tmp_path: Path) -> None:
    path = tmp_path / "tasks.txt"
    path.write_bytes(b"T | 0 | a\r\nD | 1 | b | 2026-10-20 1800\r\n")

    assert FileTaskStore(path).load() == [
        ToDo("a"),
        Deadline("b", datetime(2026, 10, 20, 18, 0), done=True),
    ]
