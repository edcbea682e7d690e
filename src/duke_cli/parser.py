"""Command parser for Duke CLI.

Turns one line of user input into a Command, or raises a DukeError naming
what was wrong with it.

Descriptions and dates are cut out of the line at fixed offsets: the keyword
must be followed by exactly one space, and the date must follow ``/by `` or
``/at ``. Extra whitespace around these delimiters is not normalized.
"""

import logging
import re
from datetime import date

from .commands import (
    AddCommand,
    Command,
    DeleteCommand,
    DoneCommand,
    FindCommand,
    ListCommand,
)
from .errors import DukeError, ErrorKind
from .task import Task
from .task_list import TaskList

logger = logging.getLogger(__name__)

TODO_OFFSET = 5
DEADLINE_OFFSET = 9
EVENT_OFFSET = 6
FIND_OFFSET = 5
# "/" plus the three characters of "by " or "at "
DATE_OFFSET = 4

EXIT_KEYWORD = "bye"
INDEX_RE = re.compile(r"^[+-]?[0-9]+$")
ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def is_exit_command(line: str) -> bool:
    """Return True if the line asks to leave the shell (``bye``, any case)."""
    return line.strip().lower() == EXIT_KEYWORD


def parse_date(date_str: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` date.

    Raises:
        DukeError: DATE_INVALID if the string is not a calendar date
    """
    date_str = date_str.strip()
    if not ISO_DATE_RE.match(date_str):
        raise DukeError(ErrorKind.DATE_INVALID)
    try:
        return date.fromisoformat(date_str)
    except ValueError:
        raise DukeError(ErrorKind.DATE_INVALID) from None


class Parser:
    """Stateless line parser.

    The only outside information it needs is the current size and capacity
    of the task list, used to reject bad indices and full-list adds before
    a command is built.
    """

    def parse(self, line: str, tasks: TaskList) -> Command:
        """Parse one input line.

        Args:
            line: Raw user input, without the trailing newline
            tasks: Task list the command will run against

        Returns:
            The command described by the line

        Raises:
            DukeError: If the line is not a valid command
        """
        line = line.rstrip("\r\n")

        if line.strip() == "list":
            return ListCommand()
        if line.startswith("done "):
            return DoneCommand(self._parse_index(line, tasks))
        if line.startswith("delete "):
            return DeleteCommand(self._parse_index(line, tasks))
        if line.startswith("find "):
            return FindCommand(line[FIND_OFFSET:].strip())

        return AddCommand(self._parse_task(line, tasks))

    def _parse_index(self, line: str, tasks: TaskList) -> int:
        words = line.split(" ")
        token = words[1] if len(words) > 1 else ""
        if not INDEX_RE.match(token):
            raise DukeError(ErrorKind.INDEX_INVALID)

        index = int(token) - 1
        if not 0 <= index < tasks.total():
            logger.debug("Rejected index %s for %s tasks", index + 1, tasks.total())
            raise DukeError(ErrorKind.INDEX_OOB)
        return index

    def _parse_task(self, line: str, tasks: TaskList) -> Task:
        if tasks.is_full():
            raise DukeError(ErrorKind.TASK_ARRAY_FULL)

        if line.startswith("todo "):
            description = line[TODO_OFFSET:]
            if not description.strip():
                raise DukeError(ErrorKind.TODO_BLANK_DESC)
            return Task.todo(description)

        if line.startswith("deadline "):
            description, when = self._split_dated(
                line,
                DEADLINE_OFFSET,
                no_slash=ErrorKind.DEADLINE_NO_SLASH,
                blank_date=ErrorKind.DEADLINE_BLANK_DATE,
                blank_desc=ErrorKind.DEADLINE_BLANK_DESC,
            )
            return Task.deadline(description, when)

        if line.startswith("event "):
            description, when = self._split_dated(
                line,
                EVENT_OFFSET,
                no_slash=ErrorKind.EVENT_NO_SLASH,
                blank_date=ErrorKind.EVENT_BLANK_DATE,
                blank_desc=ErrorKind.EVENT_BLANK_DESC,
            )
            return Task.event(description, when)

        raise DukeError(ErrorKind.COMMAND_INVALID)

    def _split_dated(self, line: str, offset: int, *, no_slash: ErrorKind,
                     blank_date: ErrorKind, blank_desc: ErrorKind):
        """Cut the description and date out of a deadline/event line.

        Checks run in a fixed order: missing slash, blank date, blank
        description, then an unparseable date.
        """
        slash = line.find("/")
        if slash < 0:
            raise DukeError(no_slash)

        date_str = line[slash + DATE_OFFSET:]
        if not date_str.strip():
            raise DukeError(blank_date)

        if offset >= slash - 1:
            raise DukeError(blank_desc)
        description = line[offset:slash - 1]
        if not description.strip():
            raise DukeError(blank_desc)

        return description, parse_date(date_str)


_default_parser = Parser()


def parse_command(line: str, tasks: TaskList) -> Command:
    """Parse a line with the default parser."""
    return _default_parser.parse(line, tasks)

