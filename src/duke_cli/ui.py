"""Console output for Duke CLI."""

from typing import Optional

from rich.console import Console
from rich.theme import Theme

DIVIDER_CHAR = "_"
DEFAULT_DIVIDER_WIDTH = 40

GREETING = ("Greetings, human! I'm Duke.", "What can I do for you?")
FAREWELL = "Closing Duke. Have a nice day!"

DUKE_THEME = Theme({
    "divider": "dim",
    "message": "default",
    "error": "red bold",
    "banner": "cyan bold",
})


def get_console(no_color: bool = False) -> Console:
    """Get a console instance with the Duke theme applied."""
    return Console(theme=DUKE_THEME, no_color=no_color, highlight=False, emoji=False)


class UI:
    """Everything the shell and the commands print goes through here.

    Task text is printed with markup disabled so that descriptions such as
    ``[bold]`` and the ``[T][ ]`` prefix are shown literally.
    """

    def __init__(self, console: Optional[Console] = None,
                 divider_width: int = DEFAULT_DIVIDER_WIDTH):
        self.console = console or get_console()
        self.console.push_theme(DUKE_THEME)
        self.divider = DIVIDER_CHAR * divider_width

    def _print(self, text: str, style: str = "message") -> None:
        self.console.print(text, style=style, markup=False, highlight=False,
                           emoji=False, soft_wrap=True)

    def show_divider(self) -> None:
        self._print(self.divider, style="divider")

    def show(self, *lines: str) -> None:
        for line in lines:
            self._print(line)

    def show_error(self, message: str) -> None:
        self._print(message, style="error")

    def show_greeting(self) -> None:
        self.show_divider()
        for line in GREETING:
            self._print(line, style="banner")
        self.show_divider()

    def show_farewell(self) -> None:
        self.show_divider()
        self._print(FAREWELL, style="banner")
        self.show_divider()
