from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from semverlite.config import Settings
from semverlite.console import ColorConsole, ERROR, FAIL, INFO, PASS
from semverlite.core import ParseError, Part, RangeResult, Version, compare, in_range, increment
from semverlite.logging import configure_logging
from semverlite.version import __version__

app = typer.Typer(help="Parse, compare, bump and range-check major.minor.patch versions.")

_EXIT_CODES = {
    RangeResult.IN_RANGE: 0,
    RangeResult.OUT_OF_RANGE: 1,
    RangeResult.UNKNOWN: 2,
}

_COLORS = {
    RangeResult.IN_RANGE: PASS,
    RangeResult.OUT_OF_RANGE: FAIL,
    RangeResult.UNKNOWN: INFO,
}


def _console(ctx: typer.Context) -> ColorConsole:
    return ctx.obj


def _parse_or_exit(cc: ColorConsole, text: str) -> Version:
    try:
        return Version.parse(text)
    except ParseError as e:
        cc.write_line(str(e), ERROR)
        raise typer.Exit(1)


@app.callback()
def main(ctx: typer.Context):
    try:
        settings = Settings()
    except ValidationError as e:
        Console(stderr=True, highlight=False).print(
            f"Invalid settings: {e}", style="red", markup=False, soft_wrap=True
        )
        raise typer.Exit(1)
    configure_logging(settings.log_level)
    ctx.obj = ColorConsole(
        Console(
            width=settings.console_width,
            no_color=settings.no_color,
            highlight=False,
        )
    )


@app.command()
def parse(ctx: typer.Context, text: str = typer.Argument(..., help="Version string, e.g. 1.2.3")):
    """Print the canonical form and scalar value of a version."""
    cc = _console(ctx)
    version = _parse_or_exit(cc, text)
    cc.write_line(f"{version} {version.value}")


@app.command()
def bump(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Version to increment"),
    part: str = typer.Argument(..., help="major, minor or patch"),
    comment: Optional[str] = typer.Option(None, help="Description of the change"),
):
    """Print the version that follows TEXT when PART changes."""
    cc = _console(ctx)
    version = _parse_or_exit(cc, text)
    try:
        which = Part.from_name(part)
    except ValueError as e:
        cc.write_line(str(e), ERROR)
        raise typer.Exit(1)
    cc.write_line(str(increment(version, which, comment)))


@app.command("in-range")
def in_range_command(
    ctx: typer.Context,
    text: str = typer.Argument(..., help="Version to test"),
    lower: Optional[str] = typer.Option(None, help="Inclusive lower bound"),
    upper: Optional[str] = typer.Option(None, help="Inclusive upper bound"),
):
    """Print true, false or unknown; the exit code is 0, 1 or 2 respectively."""
    cc = _console(ctx)
    version = _parse_or_exit(cc, text)
    result = in_range(version, lower, upper)
    cc.write_line(result.value, _COLORS[result])
    raise typer.Exit(_EXIT_CODES[result])


@app.command("compare")
def compare_command(
    ctx: typer.Context,
    a: str = typer.Argument(...),
    b: str = typer.Argument(...),
):
    """Print <, = or > for A relative to B."""
    cc = _console(ctx)
    order = compare(_parse_or_exit(cc, a), _parse_or_exit(cc, b))
    cc.write_line({-1: "<", 0: "=", 1: ">"}[order])


@app.command()
def banner(ctx: typer.Context, title: str = typer.Option("semverlite", help="Banner title")):
    """Print a header banner with this package's version."""
    _console(ctx).banner(title, __version__)

