# src/bob_companion/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
import re
from pathlib import Path

from ..core.errors import BobError, LoadError, SaveError
from ..core.parser import format_datetime, parse_datetime
from .task_list import TaskList
from .task_models import Deadline, Event, Task, TaskKind, ToDo

logger = logging.getLogger(__name__)

SEP = " | "

# Records end with "\n" only. Backslash, "\n" and "\r" inside a description are escaped,
# every other character is stored as-is.
_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r"}
_UNESCAPES = {"\\": "\\", "n": "\n", "r": "\r"}
_ESCAPE_RE = re.compile(r"[\\\n\r]")
_UNESCAPE_RE = re.compile(r"\\(.?)", re.DOTALL)


def _escape(text: str) -> str:
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], text)


def _unescape(text: str) -> str:
    def repl(m: re.Match[str]) -> str:
        try:
            return _UNESCAPES[m.group(1)]
        except KeyError:
            raise ValueError(f"bad escape {m.group(0)!r}") from None

    return _UNESCAPE_RE.sub(repl, text)


class FileTaskStore:
    """
    Flat-file task store, one task per line:

        T | 0 | read book
        D | 1 | return book | 2026-10-20 1800
        E | 0 | project meeting | 2026-10-20 1400 | 2026-10-20 1600

    Time fields are split off from the right, so a description may itself contain " | ".
    Line breaks and backslashes in a description are stored escaped ("\\n", "\\r", "\\\\").
    Writes go to a temp file first and are swapped in with os.replace().
    """

    def __init__(self, path: str | Path = "tasks.txt") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- encoding ----

    @staticmethod
    def encode(task: Task) -> str:
        done = "1" if task.done else "0"
        if isinstance(task, Deadline):
            fields = [task.kind, done, _escape(task.description), format_datetime(task.due)]
        elif isinstance(task, Event):
            fields = [
                task.kind,
                done,
                _escape(task.description),
                format_datetime(task.start),
                format_datetime(task.end),
            ]
        else:
            fields = [task.kind, done, _escape(task.description)]
        return SEP.join(str(f) for f in fields)

    @staticmethod
    def decode(line: str) -> Task:
        """Decode one stored line. Raises ValueError or BobError on malformed input."""
        kind_s, done_s, rest = line.split(SEP, 2)
        kind = TaskKind(kind_s.strip())
        if done_s not in ("0", "1"):
            raise ValueError(f"bad done flag {done_s!r}")
        done = done_s == "1"

        if kind is TaskKind.TODO:
            task: Task = ToDo(_unescape(rest), done=done)
        elif kind is TaskKind.DEADLINE:
            description, due_s = rest.rsplit(SEP, 1)
            task = Deadline(_unescape(description), parse_datetime(due_s), done=done)
        else:
            description, start_s, end_s = rest.rsplit(SEP, 2)
            task = Event(
                _unescape(description),
                parse_datetime(start_s),
                parse_datetime(end_s),
                done=done,
            )

        if not task.description.strip():
            raise ValueError("empty description")
        return task

    # ---- public API ----

    def load(self) -> list[Task]:
        if not self._path.exists():
            logger.info("No task file at %s, starting empty.", self._path)
            return []

        try:
            with open(self._path, encoding="utf-8", newline="") as fp:
                text = fp.read()
        except (OSError, UnicodeDecodeError) as e:
            raise LoadError(f"Could not read saved tasks from {self._path}: {e}") from e

        tasks: list[Task] = []
        for lineno, line in enumerate(text.split("\n"), start=1):
            # A raw "\r" is never written, so a trailing one is a CRLF line ending.
            line = line.removesuffix("\r")
            if not line.strip():
                continue
            try:
                tasks.append(self.decode(line))
            except (ValueError, BobError) as e:
                raise LoadError(
                    f"Saved tasks in {self._path} are corrupted (line {lineno}): {line!r}"
                ) from e

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save(self, task_list: TaskList) -> None:
        body = "".join(self.encode(t) + "\n" for t in task_list)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self._path.with_suffix(self._path.suffix + ".tmp")
            with open(tmp, "w", encoding="utf-8", newline="") as fp:
                fp.write(body)
            os.replace(tmp, self._path)
        except OSError as e:
            logger.exception("Failed to save tasks to %s", self._path)
            raise SaveError(f"Could not save tasks to {self._path}: {e}") from e

        with contextlib.suppress(OSError):
            # Best-effort: the task list is personal data, keep it private on disk.
            os.chmod(self._path, 0o600)
        logger.debug("Saved %d tasks to %s", len(task_list), self._path)
