"""Storage layer for Duke CLI using one save-form line per task.

File layout::

    T | 0 | read book
    D | 1 | submit report | 2024 May 01
    E | 0 | conference | 2024 Dec 31
"""

import logging
from pathlib import Path
from typing import List, Union

from .config import ConfigModel
from .errors import StorageError
from .task import Task
from .task_list import TaskList

logger = logging.getLogger(__name__)


class Storage:
    """Reads and writes the task file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    @classmethod
    def from_config(cls, config: ConfigModel) -> "Storage":
        return cls(config.get_data_path())

    def load_tasks(self) -> List[Task]:
        """Read every task in the file.

        Returns:
            Tasks in file order. Empty if the file does not exist.
            Malformed lines are skipped with a warning.
        """
        if not self.path.exists():
            logger.info("No task file at %s, starting empty", self.path)
            return []

        tasks = []
        # Lines are decoded one at a time; an undecodable line is skipped
        with open(self.path, 'rb') as f:
            for line_no, raw in enumerate(f, start=1):
                if not raw.strip():
                    continue
                try:
                    line = raw.decode('utf-8').rstrip('\r\n')
                    tasks.append(Task.from_save_string(line))
                except ValueError as e:
                    logger.warning("Skipping line %s of %s: %s", line_no, self.path, e)

        logger.info("Loaded %s tasks from %s", len(tasks), self.path)
        return tasks

    def load(self, capacity: int) -> TaskList:
        """Load the file into a task list of the given capacity.

        Tasks beyond capacity are dropped with a warning.
        """
        tasks = self.load_tasks()
        if len(tasks) > capacity:
            logger.warning("Task file holds %s tasks; keeping the first %s", len(tasks), capacity)
            tasks = tasks[:capacity]
        return TaskList(tasks, capacity=capacity)

    def save(self, tasks: TaskList) -> None:
        """Write every task to the file, replacing its contents.

        Raises:
            StorageError: If the file cannot be written
        """
        content = "".join(task.to_save_string() + "\n" for task in tasks)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as f:
                f.write(content)
            tmp_path.replace(self.path)
        except OSError as e:
            raise StorageError(f"Could not save tasks to {self.path}: {e}", self.path) from e
        logger.debug("Saved %s tasks to %s", tasks.total(), self.path)
