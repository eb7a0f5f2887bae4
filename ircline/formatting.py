from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

from ircline.constants import TIMESTAMP_FORMAT, WRAP_COLUMN, WRAP_INDENT


def sanitize(text: str) -> str:
    """Replace DEL and control characters other than tab with ``?``."""
    return "".join(
        "?" if ch == "\x7f" or (ch < " " and ch != "\t") else ch for ch in text
    )


def wrap(text: str, column: int = WRAP_COLUMN, indent: int = WRAP_INDENT) -> str:
    """Greedy word wrap; words longer than ``column`` are never split."""
    lines: list[list[str]] = [[]]
    line_len = 0
    for word in text.split():
        line_len += len(word) + 1
        if line_len < column or not lines[-1]:
            lines[-1].append(word)
            continue
        line_len = len(word) + indent
        lines.append([word])
    padding = "\n" + " " * indent
    return padding.join(" ".join(words) for words in lines)


class MessageFormatter:
    def __init__(
        self,
        column: int = WRAP_COLUMN,
        indent: int = WRAP_INDENT,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.column = column
        self.indent = indent
        self.clock = clock

    def timestamp(self) -> str:
        return self.clock().strftime(TIMESTAMP_FORMAT)

    def format(self, raw_text: str) -> str:
        stamped = f"{self.timestamp()} {sanitize(raw_text)}"
        return wrap(stamped, self.column, self.indent)


def render_chat_line(nick: str, target: str, text: str, action: bool = False) -> str:
    if action:
        return f"{target} [{nick} {text}]"
    return f"{target} <{nick}> {text}"
