from datetime import datetime

from ircline.constants import WRAP_INDENT
from ircline.formatting import MessageFormatter, render_chat_line, sanitize, wrap


def fixed_formatter() -> MessageFormatter:
    return MessageFormatter(clock=lambda: datetime(2024, 1, 2, 9, 5))


def test_sanitize_replaces_delete_and_control_characters():
    assert sanitize("a\x7fb") == "a?b"
    assert sanitize("\x1b[31mred") == "?[31mred"
    assert sanitize("one\ntwo") == "one?two"


def test_sanitize_keeps_tab_and_non_ascii():
    assert sanitize("a\tb") == "a\tb"
    assert sanitize("héllo wörld") == "héllo wörld"


def test_format_sanitizes_before_timestamping():
    assert fixed_formatter().format("a\x7fb") == "09:05 a?b"


def test_format_wraps_long_line_once_with_indent():
    raw = "word " * 15
    formatted = fixed_formatter().format(raw)

    lines = formatted.split("\n")
    assert len(lines) == 2
    assert lines[1].startswith(" " * WRAP_INDENT)
    assert not lines[1].startswith(" " * (WRAP_INDENT + 1))
    assert formatted.split() == ["09:05"] + ["word"] * 15


def test_short_line_is_not_wrapped():
    assert fixed_formatter().format("hello there") == "09:05 hello there"


def test_overlong_word_gets_its_own_line():
    long_word = "x" * 100
    assert wrap(f"short {long_word} tail", 72) == (
        f"short\n{' ' * WRAP_INDENT}{long_word}\n{' ' * WRAP_INDENT}tail"
    )


def test_wrap_counts_indent_on_continuation_lines():
    text = " ".join(["abcdefghi"] * 12)
    lines = wrap(text, 40).split("\n")
    assert all(len(line) < 40 for line in lines)
    assert " ".join(text.split()) == " ".join(" ".join(lines).split())


def test_render_chat_line_message_and_action():
    assert render_chat_line("bob", "#go", "hi there") == "#go <bob> hi there"
    assert render_chat_line("bob", "#go", "waves", action=True) == "#go [bob waves]"
