"""End-to-end tests for the interactive shell."""

import pytest
from click.testing import CliRunner

from duke_cli.cli import Shell, main
from duke_cli.storage import Storage
from duke_cli.task_list import TaskList
from duke_cli.ui import FAREWELL

DIVIDER = "_" * 40


class TestShell:
    """Test the read-eval-print loop directly."""

    @pytest.fixture
    def shell(self, tasks, ui):
        return Shell(tasks, ui)

    def test_greeting_and_farewell(self, shell, output):
        assert shell.run([]) == 0

        lines = output()
        assert lines[0] == DIVIDER
        assert lines[1] == "Greetings, human! I'm Duke."
        assert lines[-2] == FAREWELL
        assert lines[-1] == DIVIDER

    def test_command_output_is_framed_by_dividers(self, shell, output):
        shell.handle_line("todo read book")

        assert output() == [
            DIVIDER,
            "Gotcha. I've added this task:",
            "[T][ ] read book",
            "You have a total of 1 tasks now.",
            DIVIDER,
        ]

    def test_error_is_reported_and_loop_continues(self, shell, tasks, output):
        assert shell.run(["done abc\n", "todo read book\n", "bye\n"]) == 0

        assert "Index is not a valid number." in output()
        assert tasks.total() == 1

    def test_bye_stops_reading(self, shell, tasks):
        shell.run(["todo a\n", "BYE\n", "todo b\n"])
        assert tasks.total() == 1

    def test_read_failure_is_fatal(self, shell, output):
        def broken_input():
            yield "todo a\n"
            raise OSError("stream closed")

        assert shell.run(broken_input()) == 1
        assert FAREWELL in output()

    def test_undecodable_input_is_fatal(self, shell, tasks, output):
        def bad_bytes():
            yield "todo a\n"
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

        assert shell.run(bad_bytes()) == 1
        assert tasks.total() == 1
        assert output()[-2] == FAREWELL

    def test_saves_after_mutating_commands(self, tmp_path, ui):
        storage = Storage(tmp_path / "tasks.txt")
        shell = Shell(TaskList(), ui, storage=storage)

        shell.run(["todo read book\n", "done 1\n", "list\n"])

        assert storage.path.read_text(encoding="utf-8") == "T | 1 | read book\n"

    def test_failed_command_does_not_save(self, tmp_path, ui):
        storage = Storage(tmp_path / "tasks.txt")
        shell = Shell(TaskList(), ui, storage=storage)

        shell.run(["todo \n", "list\n"])

        assert not storage.path.exists()


class TestMain:
    """Test the click entry point."""

    @pytest.fixture
    def invoke(self, tmp_path):
        runner = CliRunner()
        config_path = tmp_path / "config.yaml"
        data_path = tmp_path / "tasks.txt"

        def run(lines, *extra):
            args = ["--config", str(config_path), "--data-file", str(data_path), *extra]
            return runner.invoke(main, args, input="".join(line + "\n" for line in lines))

        run.data_path = data_path
        return run

    def test_scenario_todo_and_list(self, invoke):
        result = invoke(["todo read book", "list", "bye"])

        assert result.exit_code == 0
        assert "[T][ ] read book" in result.output
        assert "1. [T][ ] read book" in result.output
        assert invoke.data_path.read_text(encoding="utf-8") == "T | 0 | read book\n"

    def test_scenario_deadline_done(self, invoke):
        result = invoke(["deadline submit report /by 2024-05-01", "done 1", "list"])

        assert result.exit_code == 0
        assert "Task submit report marked as complete." in result.output
        assert "1. [D][X] submit report (by: 2024 May 01)" in result.output

    def test_scenario_event_delete(self, invoke):
        result = invoke([
            "event conference /at 2024-12-31",
            "event party /at 2025-01-01",
            "delete 1",
            "list",
        ])

        assert result.exit_code == 0
        assert "Removed task: [E][ ] conference (at: 2024 Dec 31)" in result.output
        assert "1. [E][ ] party (at: 2025 Jan 01)" in result.output
        assert "2. " not in result.output.split("Removed task")[1]

    def test_scenario_invalid_index(self, invoke):
        result = invoke(["done abc"])

        assert result.exit_code == 0
        assert "Index is not a valid number." in result.output
        assert not invoke.data_path.exists()

    def test_scenario_invalid_date(self, invoke):
        result = invoke(["deadline thing /by notadate"])

        assert result.exit_code == 0
        assert "Date could not be parsed." in result.output

    def test_scenario_full_list(self, invoke):
        result = invoke(["todo x"] * 101)

        assert result.exit_code == 0
        assert "You have a total of 100 tasks now." in result.output
        assert result.output.count("Task list is full.") == 1
        assert len(invoke.data_path.read_text(encoding="utf-8").splitlines()) == 100

    def test_tasks_persist_between_runs(self, invoke):
        invoke(["todo read book", "bye"])

        result = invoke(["list", "bye"])

        assert "1. [T][ ] read book" in result.output

    def test_no_persist(self, invoke):
        result = invoke(["todo read book", "bye"], "--no-persist")

        assert result.exit_code == 0
        assert not invoke.data_path.exists()

    def test_undecodable_input_file(self, invoke, tmp_path):
        commands = tmp_path / "commands.txt"
        commands.write_bytes(b"todo a\n\xff\xfe\nlist\n")

        result = invoke([], "--input", str(commands))

        assert result.exit_code == 1
        assert "Failed to read input" in result.output
        assert FAREWELL in result.output

    def test_undecodable_task_file_line_skipped(self, invoke):
        invoke.data_path.write_bytes(b"T | 0 | ok\nT | 0 | \xff\xfe\n")

        result = invoke(["list", "bye"])

        assert result.exit_code == 0
        assert "1. [T][ ] ok" in result.output
        assert "2. " not in result.output

    def test_input_file(self, invoke, tmp_path):
        commands = tmp_path / "commands.txt"
        commands.write_text("todo from file\nlist\n", encoding="utf-8")

        result = invoke([], "--input", str(commands))

        assert "1. [T][ ] from file" in result.output

    def test_config_controls_capacity(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            f"data_dir: {tmp_path}\nmax_tasks: 1\ndivider_width: 10\n",
            encoding="utf-8",
        )

        result = CliRunner().invoke(
            main, ["--config", str(config_path)], input="todo a\ntodo b\nbye\n"
        )

        assert "Task list is full." in result.output
        assert "_" * 10 + "\n" in result.output
        assert (tmp_path / "tasks.txt").read_text(encoding="utf-8") == "T | 0 | a\n"

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "duke" in result.output
