# src/bob_companion/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- ensures local (gitignored) directories exist,
- wires the file store and console UI into a Session,
- loads saved tasks, falling back to an empty list when they cannot be read.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..config import Settings, get_settings
from ..connectors.console_connector import ConsoleUi
from ..core.errors import LoadError
from ..core.ports import TaskStorage, UserInterface
from ..core.state import Session
from ..tasks.task_list import TaskList
from ..tasks.task_store import FileTaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_path.parent.mkdir(parents=True, exist_ok=True)


def _backup_name(path: Path) -> Path:
    """First free name of <name>.corrupt, <name>.corrupt.1, <name>.corrupt.2, ..."""
    target = path.with_name(path.name + ".corrupt")
    n = 0
    while target.exists():
        n += 1
        target = path.with_name(f"{path.name}.corrupt.{n}")
    return target


def _move_aside(path: Path) -> Path | None:
    """Keep an unreadable tasks file from being overwritten by the next save."""
    if not path.exists():
        return None
    target = _backup_name(path)
    try:
        os.replace(path, target)
    except OSError:
        logger.exception("Failed to move corrupt tasks file %s aside", path)
        return None
    logger.warning("Moved unreadable tasks file to %s", target)
    return target


def load_task_list(storage: TaskStorage, ui: UserInterface) -> TaskList:
    """
    Load saved tasks through the storage port.

    LoadError is shown to the user and downgraded to an empty list.
    """
    try:
        tasks = storage.load()
    except LoadError as e:
        logger.warning("Load failed, starting with an empty list: %s", e)
        ui.show_error(e)
        path = getattr(storage, "path", None)
        if path is not None:
            _move_aside(Path(path))
        return TaskList()

    ui.show_loading_success()
    return TaskList(tasks)


def create_session(
    *,
    settings: Settings | None = None,
    storage: TaskStorage | None = None,
    ui: UserInterface | None = None,
) -> Session:
    """
    Create a Session from the provided settings.

    Every collaborator is injectable; missing ones are built from settings.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    if storage is None:
        storage = FileTaskStore(settings.tasks_path)
    if ui is None:
        ui = ConsoleUi(settings.app_name)

    return Session(
        settings=settings,
        storage=storage,
        ui=ui,
        task_list=load_task_list(storage, ui),
    )
