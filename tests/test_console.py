import io

import pytest
from rich.console import Console

from semverlite.console import ColorConsole, ColorScheme, ERROR, FAIL, HEADER, INFO, PASS


@pytest.fixture
def cc():
    console = Console(file=io.StringIO(), width=20, color_system=None, highlight=False)
    return ColorConsole(console)


def output(cc):
    return cc.console.file.getvalue()


def test_default_scheme_names():
    scheme = ColorScheme.default()
    assert list(scheme) == [INFO, HEADER, PASS, FAIL, ERROR]
    assert scheme.colors(HEADER) == ("dark_blue", "yellow")
    assert scheme.style(FAIL) == "red on black"


def test_unknown_name_falls_back_to_info():
    scheme = ColorScheme.default()
    assert scheme.colors("Warning") == scheme.colors(INFO)


def test_register_replaces_existing_pair():
    scheme = ColorScheme.default()
    scheme.register(PASS, "black", "bright_green")
    scheme.register("Warning", "black", "yellow")
    assert scheme.colors(PASS) == ("black", "bright_green")
    assert "Warning" in scheme


def test_schemes_are_independent():
    first, second = ColorScheme.default(), ColorScheme.default()
    first.register(INFO, "white", "black")
    assert second.colors(INFO) == ("black", "white")


def test_empty_scheme_still_has_info():
    assert ColorScheme().colors("anything") == ("default", "default")


def test_write_and_write_line(cc):
    cc.write("1.0.1")
    cc.write(" ")
    cc.write_line("released", PASS)
    assert output(cc) == "1.0.1 released\n"


def test_indent(cc):
    cc.indent_line(2, "nested")
    cc.indent(1, "x")
    assert output(cc) == "        nested\n    x"


def test_alignment(cc):
    cc.center("abcd")
    cc.left_justify_and_fill("ab")
    cc.right_justify_and_fill("ab")
    assert output(cc).splitlines() == [
        "        abcd        ",
        "ab                  ",
        "                  ab",
    ]


def test_stripe(cc):
    cc.stripe()
    cc.stripe("-", HEADER)
    assert output(cc).splitlines() == ["=" * 20, "-" * 20]


def test_banner(cc):
    cc.banner("demo", "1.0.1")
    lines = output(cc).splitlines()
    assert lines[0] == lines[3] == "=" * 20
    assert lines[1].strip() == "demo"
    assert lines[2].strip() == "Version 1.0.1"
    assert all(len(line) == 20 for line in lines)


def test_colors_are_rendered():
    console = Console(file=io.StringIO(), width=20, color_system="standard", force_terminal=True, no_color=False)
    ColorConsole(console).write_line("failed", FAIL)
    rendered = console.file.getvalue()
    assert "failed" in rendered
    assert "\x1b[" in rendered
