"""
TASK TRACKER - Task Manager
===========================
In-memory task collection plus the mutations allowed on it.
Every successful mutation writes the whole collection back to storage.
"""

from typing import Optional, List
import logging

from .schema import Task, TaskStatus, is_valid_status, STATUSES
from .storage import TaskStorage

logger = logging.getLogger(__name__)


class InvalidStatusError(ValueError):
    """Status outside the closed set (todo, in-progress, done)"""

    def __init__(self, status: object):
        self.status = status
        super().__init__(f"Invalid status: {status}")


class TaskManager:
    """
    Task store for a single invocation.

    Built from whatever the storage currently holds. IDs are handed out from
    a counter that starts above the highest loaded ID and only moves forward,
    so an ID is never reused after a delete.
    """

    def __init__(self, storage: Optional[TaskStorage] = None):
        self.storage = storage or TaskStorage()
        self._tasks: List[Task] = self.storage.load()
        self._next_id = max((t.id for t in self._tasks), default=0) + 1

    @property
    def next_id(self) -> int:
        return self._next_id

    # ========================================
    # PERSISTENCE
    # ========================================

    def save(self) -> bool:
        """Write the current collection to storage"""
        saved = self.storage.save(self._tasks)
        if not saved:
            logger.warning("⚠️ Changes kept in memory only; storage was not updated")
        return saved

    # ========================================
    # TASK OPERATIONS
    # ========================================

    def add_task(self, description: str = "") -> Task:
        """Create a task with the next ID and status todo"""
        task = Task(id=self._next_id, description=description)
        task.updated_at = task.created_at
        self._tasks.append(task)
        self._next_id += 1

        self.save()
        logger.info(f"➕ Added task {task.id}")
        return task

    def update_task(self, task_id: int, description: str) -> Optional[Task]:
        """Replace a task's description"""
        task = self.get_task(task_id)
        if not task:
            return None

        task.description = description
        task.touch()

        self.save()
        logger.info(f"✏️ Updated task {task_id}")
        return task

    def delete_task(self, task_id: int) -> Optional[Task]:
        """Remove a task; the rest keep their IDs and order"""
        for i, task in enumerate(self._tasks):
            if task.id == task_id:
                del self._tasks[i]
                self.save()
                logger.info(f"🗑️ Deleted task {task_id}")
                return task
        return None

    def mark_status(self, task_id: int, status: str) -> Optional[Task]:
        """
        Set a task's status.

        Returns None if the task does not exist. Raises InvalidStatusError,
        leaving the task untouched, if status is not one of STATUSES.
        """
        task = self.get_task(task_id)
        if not task:
            return None

        if not is_valid_status(status):
            logger.warning(f"Rejected status {status!r} for task {task_id}; expected one of {STATUSES}")
            raise InvalidStatusError(status)

        task.status = TaskStatus(status)
        task.touch()

        self.save()
        logger.info(f"🔵 Task {task_id} marked as {task.status.value}")
        return task

    def list_tasks(self, status: Optional[str] = None) -> List[Task]:
        """Tasks in insertion order, optionally only those with the given status"""
        if not status:
            return list(self._tasks)
        return [t for t in self._tasks if t.status.value == status]

    # ========================================
    # HELPER METHODS
    # ========================================

    def get_task(self, task_id: int) -> Optional[Task]:
        """Get task by ID"""
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def __len__(self) -> int:
        return len(self._tasks)
