"""
TASK TRACKER - Storage
======================
Whole-collection snapshot of the task list in a single local file.

File format: JSON objects written back to back, one per line, no enclosing
array. Every save truncates and rewrites the file.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, List, Union

from pydantic import ValidationError

from .schema import Task

logger = logging.getLogger(__name__)

DEFAULT_TASKS_FILE = "tasks.json"


class TaskStorage:
    """
    Load/save the task collection.

    Failures never propagate to the caller:
    - missing file      -> empty collection (first run)
    - unreadable file   -> empty collection, error logged
    - malformed record  -> records before it, error logged
    - unwritable file   -> save() returns False, error logged
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_TASKS_FILE):
        self.path = Path(path)

    def load(self) -> List[Task]:
        """Read every task record from the file, in file order"""
        try:
            with open(self.path, "r", encoding="utf-8", errors="replace") as f:
                text = f.read()
        except FileNotFoundError:
            logger.debug(f"No tasks file at {self.path}, starting empty")
            return []
        except OSError as e:
            logger.error(f"Error opening tasks file {self.path}: {e}")
            return []

        tasks = self._decode(text)

        logger.info(f"Loaded {len(tasks)} task(s) from {self.path}")
        return tasks

    def _decode(self, text: str) -> List[Task]:
        """Decode concatenated JSON objects; stop at the first bad record"""
        decoder = json.JSONDecoder()
        tasks: List[Task] = []
        pos = 0
        end = len(text)
        while True:
            while pos < end and text[pos].isspace():
                pos += 1
            if pos >= end:
                break
            try:
                obj, pos = decoder.raw_decode(text, pos)
                tasks.append(Task.model_validate(obj))
            except (json.JSONDecodeError, ValidationError) as e:
                logger.error(f"Error decoding task in {self.path}: {e}")
                break
        return tasks

    def save(self, tasks: Iterable[Task]) -> bool:
        """Replace the file contents with the given tasks (SNAPSHOT, not append)"""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                count = 0
                for task in tasks:
                    f.write(json.dumps(task.to_record(), ensure_ascii=False))
                    f.write("\n")
                    count += 1
        except OSError as e:
            logger.error(f"Error writing tasks file {self.path}: {e}")
            return False

        logger.debug(f"Saved {count} task(s) to {self.path}")
        return True
