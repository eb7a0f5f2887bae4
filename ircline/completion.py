from __future__ import annotations

from collections.abc import Mapping

from ircline.commands.registry import CommandRegistry
from ircline.constants import CHANNEL_PREFIX, COMMAND_PREFIX, NICK_ADDRESS_SUFFIX
from ircline.models import ParamKind
from ircline.state import CompletionState


def match_directory(
    prefix: str, directory: Mapping[str, str], word_offset: int, suffix: str = ""
) -> list[str]:
    """Case-insensitive prefix match over the directory's display values."""
    needle = prefix.lower()
    return [
        value[word_offset:] + suffix
        for value in sorted(directory.values(), key=str.lower)
        if value.lower().startswith(needle)
    ]


class LineCompleter:
    def __init__(self, registry: CommandRegistry):
        self.registry = registry

    def complete(
        self, line: str, cursor_offset: int, state: CompletionState
    ) -> list[str]:
        """Candidates are the text that belongs after the cursor."""
        space = line.find(" ")
        if space == -1:
            if line.startswith(COMMAND_PREFIX):
                return self._complete_command(line, cursor_offset, state)
            return match_directory(
                line, state.nicks, cursor_offset, NICK_ADDRESS_SUFFIX
            )
        return self._complete_argument(line, space, cursor_offset, state)

    def _complete_command(
        self, line: str, cursor_offset: int, state: CompletionState
    ) -> list[str]:
        matches = self.registry.prefix_matches(line)
        if len(matches) == 1:
            state.last_matched_command_index = matches[0][0]
        else:
            state.reset_command()
        return [command.name[cursor_offset:] + " " for _, command in matches]

    def _complete_argument(
        self, line: str, space: int, cursor_offset: int, state: CompletionState
    ) -> list[str]:
        argument = line[space + 1 :]
        word_offset = cursor_offset - (space + 1)
        if word_offset < 0:
            return []

        kind = self.registry[state.last_matched_command_index].first_param_kind
        if kind is ParamKind.NICK_OR_CHANNEL:
            if argument.startswith(CHANNEL_PREFIX):
                return match_directory(argument, state.channels, word_offset)
            return match_directory(argument, state.nicks, word_offset)
        if kind is ParamKind.NICK:
            return match_directory(argument, state.nicks, word_offset)
        if kind is ParamKind.CHANNEL:
            return match_directory(argument, state.channels, word_offset)
        return []
