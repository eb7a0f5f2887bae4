from __future__ import annotations

from enum import Enum
from typing import TextIO

from ircline.formatting import MessageFormatter, render_chat_line


class OutputMode(str, Enum):
    STDIO = "stdio"
    LINE_EDITOR = "line_editor"


class OutputSink:
    """Every user-visible line goes through here, never straight to stdout."""

    def __init__(
        self,
        writer: TextIO,
        mode: OutputMode = OutputMode.STDIO,
        formatter: MessageFormatter | None = None,
    ):
        self.writer = writer
        self.mode = mode
        self.formatter = formatter or MessageFormatter()

    def write(self, text: str) -> None:
        self.writer.write(f"{text}\n")
        self.writer.flush()

    def message(self, raw_text: str) -> None:
        self.write(self.formatter.format(raw_text))

    info = message
    warn = message
    error = message

    def show_message(
        self, nick: str, target: str, text: str, action: bool = False
    ) -> None:
        self.message(render_chat_line(nick, target, text, action))
