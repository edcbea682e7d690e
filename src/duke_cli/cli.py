"""Command-line interface for Duke CLI."""

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

import click

from . import __version__
from .config import ConfigModel, get_config, load_config
from .errors import DukeError, StorageError
from .parser import Parser, is_exit_command
from .storage import Storage
from .task_list import TaskList
from .ui import UI, get_console

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr so they never mix with task output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


class Shell:
    """Read-eval-print loop over a stream of input lines.

    Every line is parsed and executed to completion before the next one is
    read. Each command's output is framed by divider lines.
    """

    def __init__(self, tasks: TaskList, ui: UI, storage: Optional[Storage] = None,
                 parser: Optional[Parser] = None):
        self.tasks = tasks
        self.ui = ui
        self.storage = storage
        self.parser = parser or Parser()

    def handle_line(self, line: str) -> None:
        """Parse and run one command, reporting errors instead of raising them."""
        self.ui.show_divider()
        try:
            command = self.parser.parse(line, self.tasks)
            command.execute(self.tasks, self.ui)
        except DukeError as e:
            logger.debug("Rejected %r: %s", line, e.kind.name)
            self.ui.show_error(str(e))
        else:
            if command.mutates:
                self._save()
        self.ui.show_divider()

    def _save(self) -> None:
        if self.storage is None:
            return
        try:
            self.storage.save(self.tasks)
        except StorageError as e:
            logger.error("%s", e)
            self.ui.show_error(str(e))

    def run(self, lines: Iterable[str]) -> int:
        """Run until ``bye`` or end of input.

        Returns:
            Exit code: 0 on a clean exit, 1 if reading input failed
        """
        self.ui.show_greeting()
        exit_code = 0
        try:
            for raw in lines:
                line = raw.rstrip("\r\n")
                if is_exit_command(line):
                    break
                self.handle_line(line)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read input: %s", e)
            self.ui.show_error(f"Failed to read input: {e}")
            exit_code = 1
        self.ui.show_farewell()
        return exit_code


def build_shell(config: ConfigModel, ui: UI, data_file: Optional[str] = None,
                persist: bool = True) -> Shell:
    """Create a shell with its task list loaded according to the config."""
    storage = None
    if persist and config.persist:
        storage = Storage(data_file) if data_file else Storage.from_config(config)
        tasks = storage.load(config.max_tasks)
    else:
        tasks = TaskList(capacity=config.max_tasks)
    return Shell(tasks, ui, storage=storage)


@click.command()
@click.option("--config", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--data-file", type=click.Path(dir_okay=False), help="Task file to load and save")
@click.option("--no-persist", is_flag=True, help="Keep tasks in memory only")
@click.option("--input", "input_file", type=click.File("r", encoding="utf-8"), default="-",
              help="Read commands from a file instead of stdin")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(__version__, prog_name="duke")
def main(config, data_file, no_persist, input_file, verbose):
    """Duke - an interactive task tracker.

    Commands: list, todo, deadline, event, done, delete, find, bye.
    """
    setup_logging(verbose)

    try:
        cfg = load_config(Path(config)) if config else get_config()
    except (OSError, ValueError) as e:
        get_console().print(f"[red]Configuration error: {e}[/red]")
        sys.exit(1)

    ui = UI(get_console(no_color=cfg.no_color), divider_width=cfg.divider_width)

    try:
        shell = build_shell(cfg, ui, data_file=data_file, persist=not no_persist)
    except OSError as e:
        logger.error("Failed to load tasks: %s", e)
        ui.show_error(f"Failed to load tasks: {e}")
        sys.exit(1)

    # click closes the input file when the command context exits
    sys.exit(shell.run(input_file))


if __name__ == "__main__":
    main()
