"""Error catalogue for Duke CLI.

Every failure the parser or the task list can report is one of a closed set
of kinds, each with a fixed user-facing message.
"""

from enum import Enum


class ErrorKind(Enum):
    """Failure kinds with their user-facing messages."""
    COMMAND_INVALID = "Unknown command."
    INDEX_INVALID = "Index is not a valid number."
    INDEX_OOB = "Index outside range."
    TASK_ARRAY_FULL = "Task list is full."
    TODO_BLANK_DESC = "Todo description is blank."
    DEADLINE_NO_SLASH = "Deadline is missing '/by'."
    DEADLINE_BLANK_DESC = "Deadline description is blank."
    DEADLINE_BLANK_DATE = "Deadline date is blank."
    EVENT_NO_SLASH = "Event is missing '/at'."
    EVENT_BLANK_DESC = "Event description is blank."
    EVENT_BLANK_DATE = "Event date is blank."
    DATE_INVALID = "Date could not be parsed."

    @property
    def message(self) -> str:
        return self.value


class DukeError(Exception):
    """Exception raised when a command cannot be parsed or applied."""

    def __init__(self, kind: ErrorKind):
        self.kind = kind
        super().__init__(kind.message)


class StorageError(Exception):
    """Exception raised when the task file cannot be written."""

    def __init__(self, message: str, path=None):
        self.path = path
        super().__init__(message)
