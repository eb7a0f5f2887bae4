from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ircline.constants import SENTINEL_COMMAND_INDEX

if TYPE_CHECKING:
    from ircline.backends.base import IrcConnection


@dataclass
class CompletionState:
    """Carried between completer calls for one interactive session.

    ``last_matched_command_index`` is written by command-name completion and
    read by argument completion on a later keystroke. The directories map a
    canonical key to the string shown to the user and are owned by the
    presence handlers and the dispatcher; the completer only reads them.
    """

    last_matched_command_index: int = SENTINEL_COMMAND_INDEX
    channels: dict[str, str] = field(default_factory=dict)
    nicks: dict[str, str] = field(default_factory=dict)

    def reset_command(self) -> None:
        self.last_matched_command_index = SENTINEL_COMMAND_INDEX

    def add_channel(self, channel: str) -> None:
        self.channels[channel] = channel

    def remove_channel(self, channel: str) -> None:
        self.channels.pop(channel, None)

    def add_nick(self, nick: str) -> None:
        self.nicks[nick] = nick

    def remove_nick(self, nick: str) -> None:
        self.nicks.pop(nick, None)


@dataclass
class SessionState:
    current_target: str = ""
    quit_requested: bool = False
    status_events_visible: bool = True
    away: bool = False
    connection: IrcConnection | None = None
    completion: CompletionState = field(default_factory=CompletionState)

    @property
    def connected(self) -> bool:
        return self.connection is not None

    def request_quit(self) -> None:
        self.quit_requested = True

    def toggle_status_events(self) -> bool:
        self.status_events_visible = not self.status_events_visible
        return self.status_events_visible
