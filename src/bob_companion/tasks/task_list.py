# src/bob_companion/tasks/task_list.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator
from datetime import datetime
from typing import Any

from ..core.errors import EmptyKeyword, InvalidTaskNumber
from ..core.parser import parse_date
from .task_models import DISPLAY_DATE_FORMAT, Deadline, Event, Task, TaskLike

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"(\d+)")


def _natural_key(text: str) -> list[Any]:
    """Case-insensitive natural order: 'task 2' sorts before 'task 10'."""
    out: list[Any] = []
    for i, chunk in enumerate(_DIGITS.split(text.casefold())):
        # split() alternates text/digits, so odd positions are always digit runs.
        out.append((1, int(chunk), chunk) if i % 2 else (0, 0, chunk))
    return out


def _description_key(task: Task) -> list[Any]:
    return _natural_key(task.description)


def _date_key(task: Task) -> tuple[int, datetime]:
    # ToDo tasks have no date and go after every dated task.
    if isinstance(task, Deadline):
        return (0, task.due)
    if isinstance(task, Event):
        return (0, task.start)
    return (1, datetime.min)


def _render_numbered(tasks: Iterable[TaskLike]) -> str:
    return "\n".join(f"{i}. {t.render()}" for i, t in enumerate(tasks, start=1))


def _with_summary(listing: str, summary: str) -> str:
    return f"{listing}\n{summary}" if listing else summary


class TaskList:
    """
    Ordered, exclusively owned collection of tasks.

    Insertion order is the display order. Public methods take 1-based task numbers.
    """

    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __repr__(self) -> str:
        return f"TaskList({self._tasks!r})"

    # ---- basic access ----

    def count(self) -> int:
        return len(self._tasks)

    def is_empty(self) -> bool:
        return not self._tasks

    def tasks(self) -> list[Task]:
        return list(self._tasks)

    def _index(self, task_num: int) -> int:
        if not 1 <= task_num <= len(self._tasks):
            raise InvalidTaskNumber(
                f"The task number provided is invalid. "
                f"Choose a number between 1 and {len(self._tasks)}."
                if self._tasks
                else "The task number provided is invalid. Your list is empty."
            )
        return task_num - 1

    def add(self, task: Task) -> None:
        assert task is not None, "Task to be added should not be None"
        self._tasks.append(task)

    def get(self, task_num: int) -> Task:
        return self._tasks[self._index(task_num)]

    def delete(self, task_num: int) -> Task:
        return self._tasks.pop(self._index(task_num))

    # ---- rendering / queries ----

    def render_all(self) -> str:
        return _render_numbered(self._tasks)

    def filter_by_date(self, date_str: str) -> str:
        on = parse_date(date_str)
        matches = [t for t in self._tasks if t.is_relevant(on)]
        logger.debug("filter_by_date date=%s matches=%d", on, len(matches))
        summary = (
            f"Total number of relevant tasks for {on.strftime(DISPLAY_DATE_FORMAT)}: "
            f"{len(matches)}"
        )
        return _with_summary(_render_numbered(matches), summary)

    def filter_by_keyword(self, keyword: str) -> str:
        needle = (keyword or "").strip()
        if not needle:
            raise EmptyKeyword()
        folded = needle.casefold()
        matches = [t for t in self._tasks if folded in t.describe().casefold()]
        logger.debug("filter_by_keyword keyword=%r matches=%d", needle, len(matches))
        summary = f'Total number of tasks containing "{needle.lower()}": {len(matches)}'
        return _with_summary(_render_numbered(matches), summary)

    # ---- sorting (always returns a new list) ----

    def sort(self, key: Callable[[Task], Any]) -> TaskList:
        # sorted() is stable, so equal keys keep their relative order.
        return TaskList(sorted(self._tasks, key=key))

    def sort_by_description(self) -> TaskList:
        return self.sort(_description_key)

    def sort_by_date(self) -> TaskList:
        return self.sort(_date_key)
