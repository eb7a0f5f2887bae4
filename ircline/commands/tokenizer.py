"""Split a command line into fields, keeping where each field starts."""

from __future__ import annotations

import re
from dataclasses import dataclass

_FIELD_RE = re.compile(r"\S+")


@dataclass(frozen=True)
class CommandLine:
    text: str
    fields: tuple[str, ...]
    starts: tuple[int, ...]

    @property
    def name(self) -> str:
        return self.fields[0] if self.fields else ""

    def __len__(self) -> int:
        return len(self.fields)

    def field(self, index: int, default: str = "") -> str:
        if index < len(self.fields):
            return self.fields[index]
        return default

    def rest(self, index: int) -> str:
        """Original text from the start of field ``index`` to the end of line."""
        if index >= len(self.starts):
            return ""
        return self.text[self.starts[index] :]


def tokenize(line: str) -> CommandLine:
    text = line.rstrip("\r\n")
    matches = list(_FIELD_RE.finditer(text))
    return CommandLine(
        text=text,
        fields=tuple(match.group() for match in matches),
        starts=tuple(match.start() for match in matches),
    )
