# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_tracker.manager import TaskManager
from task_tracker.storage import TaskStorage


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def storage(tasks_file: Path) -> TaskStorage:
    return TaskStorage(tasks_file)


@pytest.fixture()
def manager(storage: TaskStorage) -> TaskManager:
    """Fresh store backed by a tmp file that does not exist yet."""
    return TaskManager(storage)
