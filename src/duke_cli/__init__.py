"""Duke CLI - an interactive command-line task tracker."""

__version__ = "0.1.0"

from .errors import DukeError, ErrorKind
from .task import Task, TaskKind
from .task_list import TaskList

__all__ = ["DukeError", "ErrorKind", "Task", "TaskKind", "TaskList", "__version__"]
