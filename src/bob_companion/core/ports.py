# src/bob_companion/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The command layer depends on Protocols instead of concrete implementations.
This keeps storage and the user interface swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol

from .errors import BobError

if TYPE_CHECKING:
    from ..tasks.task_list import TaskList
    from ..tasks.task_models import Task


class TaskStorage(Protocol):
    """Persists the whole task list. Both calls are synchronous."""

    def load(self) -> list[Task]: ...  # raises LoadError
    def save(self, task_list: TaskList) -> None: ...  # raises SaveError


class UserInterface(Protocol):
    """
    Line-oriented user interface.

    read_command() blocks until one line is available; it may raise EOFError or
    KeyboardInterrupt, which the console loop treats as a request to exit.
    """

    def read_command(self) -> str: ...
    def show_welcome(self) -> None: ...
    def show_goodbye(self) -> None: ...
    def show_message(self, text: str) -> None: ...
    def show_error(self, err: BobError) -> None: ...
    def show_no_tasks(self) -> None: ...
    def show_loading_success(self) -> None: ...
