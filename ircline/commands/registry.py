from __future__ import annotations

from collections.abc import Iterator, Sequence

from ircline.constants import SENTINEL_COMMAND_INDEX
from ircline.models import (
    CommandDescriptor,
    CommandKind,
    HelpEntry,
    ParamKind,
    ParamSlot,
)

_SERVER_SLOTS = (
    ParamSlot(name="Server", kind=ParamKind.TEXT),
    ParamSlot(name="Nick", kind=ParamKind.TEXT),
)
_CHANNEL_SLOT = ParamSlot(name="Channel", kind=ParamKind.CHANNEL)
_TARGET_SLOT = ParamSlot(name="Target", kind=ParamKind.NICK_OR_CHANNEL)

# Index 0 must stay the "no command" sentinel.
COMMANDS: tuple[CommandDescriptor, ...] = (
    CommandDescriptor(name="", kind=CommandKind.NONE, help="No command given."),
    CommandDescriptor(name="/away", kind=CommandKind.AWAY, help="Toggle presence."),
    CommandDescriptor(name="/help", kind=CommandKind.HELP, help="Give this help"),
    CommandDescriptor(
        name="/tlsconnect",
        kind=CommandKind.TLSCONNECT,
        parameters=_SERVER_SLOTS,
        help="Connect to IRC server using TLS.",
    ),
    CommandDescriptor(
        name="/connect",
        kind=CommandKind.CONNECT,
        parameters=_SERVER_SLOTS,
        help="Connect to IRC server.",
    ),
    CommandDescriptor(name="/quit", kind=CommandKind.QUIT, help="Quit the IRC client."),
    CommandDescriptor(
        name="/query",
        kind=CommandKind.QUERY,
        parameters=(_TARGET_SLOT,),
        help="Start talking to a nick or channel.",
    ),
    CommandDescriptor(
        name="/x",
        kind=CommandKind.QUERY,
        parameters=(_TARGET_SLOT,),
        help="Shorthand for /query.",
    ),
    CommandDescriptor(
        name="/join",
        kind=CommandKind.JOIN,
        parameters=(_CHANNEL_SLOT,),
        help="Join a channel.",
    ),
    CommandDescriptor(
        name="/part",
        kind=CommandKind.PART,
        parameters=(_CHANNEL_SLOT,),
        help="Leave a channel.",
    ),
    CommandDescriptor(
        name="/whois",
        kind=CommandKind.WHOIS,
        parameters=(ParamSlot(name="Nick", kind=ParamKind.NICK),),
        help="Show information about someone.",
    ),
    CommandDescriptor(
        name="/me",
        kind=CommandKind.ME,
        parameters=(ParamSlot(name="Action", kind=ParamKind.TEXT),),
        help="Show a string describing you doing something.",
    ),
    CommandDescriptor(
        name="/msg",
        kind=CommandKind.MSG,
        parameters=(_TARGET_SLOT, ParamSlot(name="Text", kind=ParamKind.TEXT)),
        help="Send a message to a specific target.",
    ),
    CommandDescriptor(
        name="/nick",
        kind=CommandKind.NICK,
        parameters=(ParamSlot(name="Nick", kind=ParamKind.TEXT),),
        help="Change your nickname.",
    ),
    CommandDescriptor(
        name="/names", kind=CommandKind.NAMES, help="List members on current channel."
    ),
    CommandDescriptor(
        name="/status",
        kind=CommandKind.STATUS,
        help="Toggle status join, quit messages.",
    ),
)


class CommandRegistry:
    def __init__(self, commands: Sequence[CommandDescriptor] = COMMANDS):
        if not commands or not commands[SENTINEL_COMMAND_INDEX].is_sentinel:
            raise ValueError("Command table must start with the sentinel entry.")
        self._commands = tuple(commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[CommandDescriptor]:
        return iter(self._commands)

    def __getitem__(self, index: int) -> CommandDescriptor:
        return self._commands[index]

    @property
    def sentinel(self) -> CommandDescriptor:
        return self._commands[SENTINEL_COMMAND_INDEX]

    def lookup(self, name: str) -> CommandDescriptor | None:
        """Exact, case-sensitive lookup used by dispatch."""
        for command in self._commands:
            if command.name == name:
                return command
        return None

    def prefix_matches(self, prefix: str) -> list[tuple[int, CommandDescriptor]]:
        """Entries whose name starts with ``prefix``, ignoring case, in table order."""
        needle = prefix.lower()
        return [
            (index, command)
            for index, command in enumerate(self._commands)
            if command.name.lower().startswith(needle)
        ]

    def describe_all(self) -> list[HelpEntry]:
        return [
            HelpEntry(
                name=command.name,
                placeholders=[slot.placeholder for slot in command.parameters],
                help=command.help,
            )
            for command in self._commands
        ]
