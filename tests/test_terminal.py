import io

import pytest

from askflow.color import Color
from askflow.terminal import Key, Terminal


def make_terminal(text=""):
    out = io.StringIO()
    return Terminal(io.StringIO(text), out), out


@pytest.mark.parametrize(
    "text, expected",
    [
        ("\033[A", Key.UP),
        ("\033[B", Key.DOWN),
        ("\n", Key.ENTER),
        ("x", Key.UNKNOWN),
        ("\033[C", Key.UNKNOWN),
        ("\033OA", Key.UNKNOWN),
        ("\033", Key.UNKNOWN),
    ],
)
def test_read_key(text, expected):
    terminal, _ = make_terminal(text)
    assert terminal.read_key() is expected


def test_read_key_sequence_consumes_escape_codes():
    terminal, _ = make_terminal("\033[B\033[A\n")
    keys = [terminal.read_key() for _ in range(3)]
    assert keys == [Key.DOWN, Key.UP, Key.ENTER]


def test_read_key_at_end_of_input_raises():
    terminal, _ = make_terminal("")
    with pytest.raises(EOFError, match="Failed to read input."):
        terminal.read_key()


def test_read_line_strips_newline():
    terminal, _ = make_terminal("first\nsecond\n")
    assert terminal.read_line() == "first"
    assert terminal.read_line() == "second"


def test_read_line_without_trailing_newline():
    terminal, _ = make_terminal("last")
    assert terminal.read_line() == "last"


def test_read_line_empty_line_is_empty_string():
    terminal, _ = make_terminal("\n")
    assert terminal.read_line() == ""


def test_read_line_at_end_of_input_raises():
    terminal, _ = make_terminal("")
    with pytest.raises(EOFError, match="Failed to read input."):
        terminal.read_line()


def test_print_label_format():
    terminal, out = make_terminal()
    terminal.print_label("Name")
    assert out.getvalue() == f"{Color.GREEN.value}? {Color.B_WHITE.value}Name? {Color.RESET.value}"


def test_clear_lines_repeats_sequence():
    terminal, out = make_terminal()
    terminal.clear_lines(2)
    assert out.getvalue() == "\33[2K\r\033[1A" * 2


def test_clear_lines_zero_writes_nothing():
    terminal, out = make_terminal()
    terminal.clear_lines(0)
    assert out.getvalue() == ""


def test_write_passes_text_through():
    terminal, out = make_terminal()
    terminal.write("abc")
    terminal.write("def")
    assert out.getvalue() == "abcdef"