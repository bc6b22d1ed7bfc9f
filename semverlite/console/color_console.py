from rich.console import Console
from rich.text import Text

from semverlite.console.scheme import HEADER, INFO, ColorScheme


class ColorConsole:
    """Writes coloured, aligned lines to a terminal.

    Each call takes the name of a colour pair from the console's
    :class:`ColorScheme`; unknown names use the INFO colours.

    Examples:

        .. code-block:: python

            from semverlite.console import ColorConsole, HEADER, PASS

            cc = ColorConsole()
            cc.banner("my-service", "1.0.1")
            cc.indent_line(1, "all checks passed", PASS)
    """

    INDENT_WIDTH = 4

    def __init__(self, console: Console = None, scheme: ColorScheme = None):
        self.console = console if console is not None else Console(highlight=False)
        self.scheme = scheme if scheme is not None else ColorScheme.default()

    @property
    def width(self) -> int:
        return self.console.width

    def display(self, msg: str, colors: str = INFO, terminate_line: bool = True):
        self.console.print(
            Text(msg, style=self.scheme.style(colors)),
            end="\n" if terminate_line else "",
            soft_wrap=True,
        )

    def write(self, msg: str, colors: str = INFO):
        self.display(msg, colors, terminate_line=False)

    def write_line(self, msg: str, colors: str = INFO):
        self.display(msg, colors, terminate_line=True)

    def indent(self, indents: int, msg: str, colors: str = INFO):
        self.write(" " * (indents * self.INDENT_WIDTH) + msg, colors)

    def indent_line(self, indents: int, msg: str, colors: str = INFO):
        self.write_line(" " * (indents * self.INDENT_WIDTH) + msg, colors)

    def right_justify_and_fill(self, msg: str, colors: str = INFO):
        self.write_line(msg.rjust(self.width), colors)

    def left_justify_and_fill(self, msg: str, colors: str = INFO):
        self.write_line(msg.ljust(self.width), colors)

    def center(self, msg: str, colors: str = INFO):
        self.write_line(msg.center(self.width), colors)

    def stripe(self, char: str = "=", colors: str = INFO):
        self.write_line((char or "=") * self.width, colors)

    def banner(self, title: str, version: str, colors: str = HEADER):
        """Striped header block with the title and version centered."""
        self.stripe(colors=colors)
        self.center(title, colors)
        self.center(f"Version {version}", colors)
        self.stripe(colors=colors)
