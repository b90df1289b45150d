# src/bob_companion/tasks/task_models.py

"""
Task variants.

Three plain dataclasses share one capability surface (is_relevant/describe/render and the
done flag). `Task` is the tagged union of them; the `kind` tag drives storage encoding.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from typing import Protocol, TypeAlias

DISPLAY_DATE_FORMAT = "%b %d %Y"
DISPLAY_DATETIME_FORMAT = "%b %d %Y %H%M"


class TaskKind(StrEnum):
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"


def _fmt(dt: datetime) -> str:
    return dt.strftime(DISPLAY_DATETIME_FORMAT)


class _DoneFlag:
    """Shared done-state behaviour. Marking is idempotent."""

    __slots__ = ()

    done: bool

    def mark_as_done(self) -> None:
        self.done = True

    def mark_as_undone(self) -> None:
        self.done = False

    @property
    def status_icon(self) -> str:
        return "X" if self.done else " "


@dataclass(slots=True)
class ToDo(_DoneFlag):
    description: str
    done: bool = False
    kind: TaskKind = field(default=TaskKind.TODO, init=False, repr=False)

    def is_relevant(self, on: date) -> bool:
        return False

    def describe(self) -> str:
        return self.description

    def render(self) -> str:
        return f"[{self.kind}][{self.status_icon}] {self.description}"


@dataclass(slots=True)
class Deadline(_DoneFlag):
    description: str
    due: datetime
    done: bool = False
    kind: TaskKind = field(default=TaskKind.DEADLINE, init=False, repr=False)

    def is_relevant(self, on: date) -> bool:
        return self.due.date() == on

    def describe(self) -> str:
        return self.description

    def render(self) -> str:
        return f"[{self.kind}][{self.status_icon}] {self.description} (by: {_fmt(self.due)})"


@dataclass(slots=True)
class Event(_DoneFlag):
    """
    Time-ranged task.

    start <= end is checked by the command layer before construction, not here.
    """

    description: str
    start: datetime
    end: datetime
    done: bool = False
    kind: TaskKind = field(default=TaskKind.EVENT, init=False, repr=False)

    def is_relevant(self, on: date) -> bool:
        return self.start.date() <= on <= self.end.date()

    def describe(self) -> str:
        return self.description

    def render(self) -> str:
        return (
            f"[{self.kind}][{self.status_icon}] {self.description} "
            f"(from: {_fmt(self.start)} to: {_fmt(self.end)})"
        )


Task: TypeAlias = ToDo | Deadline | Event


class TaskLike(Protocol):
    """Capability surface every task variant provides."""

    description: str
    done: bool
    kind: TaskKind

    def is_relevant(self, on: date) -> bool: ...
    def describe(self) -> str: ...
    def render(self) -> str: ...
    def mark_as_done(self) -> None: ...
    def mark_as_undone(self) -> None: ...
