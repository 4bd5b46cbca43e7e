"""
TASK TRACKER - Personal Task List
=================================

Add, update, delete, status-mark and list short textual tasks.
State lives in a local file and is rewritten after every change.

Usage:
    from task_tracker import TaskManager, TaskStorage

    manager = TaskManager(TaskStorage("tasks.json"))
    task = manager.add_task("buy milk")
    manager.mark_status(task.id, "done")
    print(manager.list_tasks("done"))
"""

from .schema import (
    Task,
    TaskStatus,
    STATUSES,
    is_valid_status
)

from .storage import TaskStorage, DEFAULT_TASKS_FILE
from .manager import TaskManager, InvalidStatusError

__version__ = "1.0.0"
__all__ = [
    "TaskManager",
    "TaskStorage",
    "Task",
    "TaskStatus",
    "STATUSES",
    "InvalidStatusError",
    "DEFAULT_TASKS_FILE",
    "is_valid_status"
]
