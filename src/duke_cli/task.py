"""Task data model for the Duke CLI application."""

from dataclasses import dataclass
import datetime as dt
from enum import Enum
from typing import Optional


DATE_DISPLAY_FORMAT = "%Y %b %d"
SAVE_SEPARATOR = " | "


class TaskKind(Enum):
    """Task kinds, keyed by their one-letter tag."""
    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def is_dated(self) -> bool:
        return self is not TaskKind.TODO

    @property
    def date_prefix(self) -> Optional[str]:
        """Word shown before the date in the human form."""
        return {
            TaskKind.DEADLINE: "by",
            TaskKind.EVENT: "at",
        }.get(self)


def format_date(value: dt.date) -> str:
    """Format a date as ``YYYY MMM dd`` (e.g. ``2024 Jan 07``)."""
    # %Y is not zero-padded below year 1000 on every platform
    return f"{value.year:04d} {value:%b %d}"


def parse_display_date(text: str) -> dt.date:
    """Parse a date written by :func:`format_date`."""
    return dt.datetime.strptime(text.strip(), DATE_DISPLAY_FORMAT).date()


@dataclass
class Task:
    """A tracked task.

    Attributes:
        kind: Variant tag (todo, deadline or event). Fixed after construction.
        description: Trimmed, non-empty task text
        done: Completion flag; only ever goes from False to True
        date: Calendar date for deadlines and events, None for todos
    """

    kind: TaskKind
    description: str
    done: bool = False
    date: Optional[dt.date] = None

    def __post_init__(self):
        """Validate the variant shape."""
        if not isinstance(self.kind, TaskKind):
            self.__dict__["kind"] = TaskKind(self.kind)

        self.description = self.description.strip()
        if not self.description:
            raise ValueError("Task description cannot be blank")

        if self.kind.is_dated and self.date is None:
            raise ValueError(f"{self.kind.name.lower()} task requires a date")
        if not self.kind.is_dated and self.date is not None:
            raise ValueError("todo task cannot carry a date")

    def __setattr__(self, name, value):
        if name == "kind" and "kind" in self.__dict__:
            raise AttributeError("Task kind cannot be changed")
        if name == "done" and self.__dict__.get("done") and not value:
            raise AttributeError("A completed task cannot be reopened")
        super().__setattr__(name, value)

    @classmethod
    def todo(cls, description: str) -> "Task":
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, by: dt.date) -> "Task":
        return cls(TaskKind.DEADLINE, description, date=by)

    @classmethod
    def event(cls, description: str, at: dt.date) -> "Task":
        return cls(TaskKind.EVENT, description, date=at)

    @property
    def done_mark(self) -> str:
        return "X" if self.done else " "

    def mark_complete(self) -> None:
        """Mark the task as done. Calling it again has no effect."""
        self.done = True

    def __str__(self) -> str:
        """Render the one-line human form, e.g. ``[D][X] report (by: 2024 May 01)``."""
        text = f"[{self.kind.value}][{self.done_mark}] {self.description}"
        if self.kind.is_dated:
            text += f" ({self.kind.date_prefix}: {format_date(self.date)})"
        return text

    def to_save_string(self) -> str:
        """Render the pipe-delimited save form, e.g. ``D | 1 | report | 2024 May 01``."""
        fields = [self.kind.value, "1" if self.done else "0", self.description]
        if self.kind.is_dated:
            fields.append(format_date(self.date))
        return SAVE_SEPARATOR.join(fields)

    @classmethod
    def from_save_string(cls, line: str) -> "Task":
        """Rebuild a task from its save form.

        Args:
            line: One line produced by :meth:`to_save_string`

        Returns:
            The equivalent Task

        Raises:
            ValueError: If the line is not a valid save form
        """
        parts = line.rstrip("\n").split(SAVE_SEPARATOR, 2)
        if len(parts) != 3:
            raise ValueError(f"Malformed task line: {line!r}")

        tag, flag, rest = parts
        kind = TaskKind(tag)
        if flag not in ("0", "1"):
            raise ValueError(f"Invalid done flag {flag!r} in line: {line!r}")

        when = None
        description = rest
        if kind.is_dated:
            # Descriptions may contain the separator; the date is always last
            description, sep, date_text = rest.rpartition(SAVE_SEPARATOR)
            if not sep:
                raise ValueError(f"Missing date in line: {line!r}")
            when = parse_display_date(date_text)

        return cls(kind, description, done=flag == "1", date=when)
