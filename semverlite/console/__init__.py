from semverlite.console.scheme import ColorScheme, INFO, HEADER, PASS, FAIL, ERROR
from semverlite.console.color_console import ColorConsole

__all__ = ["ColorScheme", "ColorConsole", "INFO", "HEADER", "PASS", "FAIL", "ERROR"]
