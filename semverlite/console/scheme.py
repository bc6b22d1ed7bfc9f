from typing import Dict, Tuple

INFO = "Info"
HEADER = "Header"
PASS = "Pass Test"
FAIL = "Fail Test"
ERROR = "Error"

ColorPair = Tuple[str, str]  # (background, foreground)


class ColorScheme:
    """Named background/foreground colour pairs for :class:`ColorConsole`.

    Colours are any colour name or hex value that rich understands. Looking up
    an unregistered name falls back to the INFO pair.
    """

    def __init__(self, named: Dict[str, ColorPair] = None):
        self._named = {}
        for name, (background, foreground) in (named or {}).items():
            self.register(name, background, foreground)
        if INFO not in self._named:
            self.register(INFO, "default", "default")

    @classmethod
    def default(cls):
        return cls({
            INFO: ("black", "white"),
            HEADER: ("dark_blue", "yellow"),
            PASS: ("black", "green"),
            FAIL: ("black", "red"),
            ERROR: ("dark_red", "white"),
        })

    def register(self, name: str, background: str, foreground: str) -> None:
        """Adds the named pair, replacing any existing pair with that name."""
        self._named[name] = (background, foreground)

    def colors(self, name: str) -> ColorPair:
        return self._named.get(name, self._named[INFO])

    def style(self, name: str) -> str:
        background, foreground = self.colors(name)
        return f"{foreground} on {background}"

    def __contains__(self, name):
        return name in self._named

    def __iter__(self):
        return iter(self._named)
