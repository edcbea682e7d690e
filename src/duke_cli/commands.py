"""Executable commands produced by the parser.

Each command runs once against the task list and reports what it did
through the UI.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Tuple

from .task import Task
from .task_list import TaskList
from .ui import UI

logger = logging.getLogger(__name__)

FIND_HEADER = "Here are the matching tasks in your list:"


def format_entry(position: int, task: Task) -> str:
    """Format a task with its 1-based position, e.g. ``1. [T][ ] read book``."""
    return f"{position}. {task}"


def total_message(total: int) -> str:
    return f"You have a total of {total} tasks now."


class Command(ABC):
    """Base class for parsed commands."""

    #: Whether running the command changes the task list
    mutates: bool = False

    @abstractmethod
    def execute(self, tasks: TaskList, ui: UI) -> None:
        """Run the command.

        Args:
            tasks: Task list to act on
            ui: Output surface for the acknowledgement
        """

    def __eq__(self, other):
        return type(self) is type(other) and vars(self) == vars(other)

    def __repr__(self) -> str:
        fields = ", ".join(f"{key}={value!r}" for key, value in vars(self).items())
        return f"{type(self).__name__}({fields})"


class AddCommand(Command):
    mutates = True

    def __init__(self, task: Task):
        self.task = task

    def execute(self, tasks: TaskList, ui: UI) -> None:
        total = tasks.append(self.task)
        logger.debug("Added %s task, total %s", self.task.kind.name, total)
        ui.show("Gotcha. I've added this task:", str(self.task), total_message(total))


class DoneCommand(Command):
    mutates = True

    def __init__(self, index: int):
        self.index = index

    def execute(self, tasks: TaskList, ui: UI) -> None:
        task = tasks.get(self.index)
        task.mark_complete()
        ui.show(f"Task {task.description} marked as complete.")


class DeleteCommand(Command):
    mutates = True

    def __init__(self, index: int):
        self.index = index

    def execute(self, tasks: TaskList, ui: UI) -> None:
        task = tasks.delete(self.index)
        logger.debug("Deleted task at position %s", self.index + 1)
        ui.show(f"Removed task: {task}", total_message(tasks.total()))


class FindCommand(Command):
    """List tasks whose description contains ``key`` (case-sensitive)."""

    def __init__(self, key: str):
        self.key = key

    def matches(self, tasks: TaskList) -> List[Tuple[int, Task]]:
        """Return ``(position, task)`` pairs for matching tasks, positions 1-based."""
        return [
            (position, task)
            for position, task in enumerate(tasks, start=1)
            if self.key in task.description
        ]

    def execute(self, tasks: TaskList, ui: UI) -> None:
        found = self.matches(tasks)
        logger.debug("Find %r matched %s of %s tasks", self.key, len(found), tasks.total())
        ui.show(FIND_HEADER, *(format_entry(position, task) for position, task in found))


class ListCommand(Command):

    def execute(self, tasks: TaskList, ui: UI) -> None:
        ui.show(*(format_entry(position, task) for position, task in enumerate(tasks, start=1)))
