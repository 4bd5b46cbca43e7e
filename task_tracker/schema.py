"""
TASK TRACKER - Task Schema Definition
=====================================
Record layout shared by the in-memory store and the storage file.

Wire keys are camelCase (createdAt / updatedAt); Python attributes are
snake_case. Dump with ``by_alias=True`` when writing to disk.
"""

from enum import Enum
from typing import Any, Dict, Tuple
from datetime import datetime, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskStatus(str, Enum):
    """Task lifecycle states"""
    TODO = "todo"                 # Default on creation
    IN_PROGRESS = "in-progress"   # Being worked on
    DONE = "done"                 # Finished


STATUSES: Tuple[str, ...] = tuple(status.value for status in TaskStatus)


def is_valid_status(value: Any) -> bool:
    """True if value names one of the closed set of statuses"""
    return isinstance(value, str) and value in STATUSES


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Task(BaseModel):
    """Individual task record"""
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    id: int = Field(gt=0)
    description: str = ""
    status: TaskStatus = TaskStatus.TODO

    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")
    updated_at: datetime = Field(default_factory=utcnow, alias="updatedAt")

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        # Records written without an offset are read as UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    def touch(self) -> None:
        """Refresh updated_at, never letting it fall behind created_at"""
        self.updated_at = max(utcnow(), self.created_at)

    def to_record(self) -> Dict[str, Any]:
        """Storage/JSON representation with camelCase keys"""
        return self.model_dump(mode="json", by_alias=True)
