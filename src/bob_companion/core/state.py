# src/bob_companion/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from ..tasks.task_list import TaskList
from .ports import TaskStorage, UserInterface


@dataclass
class Session:
    # Settings are kept on the session so handlers never read global config.
    settings: object

    storage: TaskStorage
    ui: UserInterface
    task_list: TaskList = field(default_factory=TaskList)

    # Source of "now" for past-date checks; injectable for tests.
    clock: Callable[[], datetime] = datetime.now

    def save(self) -> None:
        self.storage.save(self.task_list)
