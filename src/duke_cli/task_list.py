"""Bounded, ordered task store."""

import logging
from typing import Iterable, Iterator, List, Optional

from .errors import DukeError, ErrorKind
from .task import Task

logger = logging.getLogger(__name__)

MAX_STORED_TASKS = 100


class TaskList:
    """Ordered collection of tasks with a fixed capacity.

    Positions are 0-based here; the shell shows them 1-based. Deleting a task
    shifts every later task down by one.
    """

    def __init__(self, tasks: Optional[Iterable[Task]] = None, capacity: int = MAX_STORED_TASKS):
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._tasks: List[Task] = []
        for task in tasks or []:
            self.append(task)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def total(self) -> int:
        """Return the number of stored tasks."""
        return len(self._tasks)

    def is_full(self) -> bool:
        return len(self._tasks) >= self.capacity

    def append(self, task: Task) -> int:
        """Add a task at the end of the list.

        Returns:
            The new total

        Raises:
            DukeError: TASK_ARRAY_FULL if the list is at capacity
        """
        if self.is_full():
            raise DukeError(ErrorKind.TASK_ARRAY_FULL)
        self._tasks.append(task)
        return len(self._tasks)

    def get(self, index: int) -> Task:
        self._check_index(index)
        return self._tasks[index]

    def delete(self, index: int) -> Task:
        """Remove and return the task at ``index``."""
        self._check_index(index)
        return self._tasks.pop(index)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._tasks):
            logger.debug("Index %s outside [0, %s)", index, len(self._tasks))
            raise DukeError(ErrorKind.INDEX_OOB)
