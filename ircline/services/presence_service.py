from __future__ import annotations

import logging

from ircline.output import OutputSink
from ircline.state import SessionState

logger = logging.getLogger(__name__)

NICK_MODE_PREFIXES = "~&@%+"


class PresenceService:
    """Entry points for the messaging backend to report what it sees.

    These keep the completer's nick directory current and render incoming
    traffic. Join, part, quit and nick notices are only shown while status
    events are visible.
    """

    def __init__(self, session: SessionState, sink: OutputSink):
        self.session = session
        self.sink = sink

    @property
    def nicks(self) -> dict[str, str]:
        return self.session.completion.nicks

    def status(self, text: str) -> None:
        if self.session.status_events_visible:
            self.sink.info(text)

    def on_message(
        self, nick: str, target: str, text: str, action: bool = False
    ) -> None:
        self.session.completion.add_nick(nick)
        self.sink.show_message(nick, target, text, action)

    def on_join(self, nick: str, channel: str) -> None:
        self.session.completion.add_nick(nick)
        self.status(f"{nick} has joined {channel}")

    def on_part(self, nick: str, channel: str, reason: str = "") -> None:
        suffix = f" ({reason})" if reason else ""
        self.status(f"{nick} has left {channel}{suffix}")

    def on_quit(self, nick: str, reason: str = "") -> None:
        self.session.completion.remove_nick(nick)
        suffix = f" ({reason})" if reason else ""
        self.status(f"{nick} has quit{suffix}")

    def on_nick(self, old_nick: str, new_nick: str) -> None:
        self.session.completion.remove_nick(old_nick)
        self.session.completion.add_nick(new_nick)
        if self.session.current_target == old_nick:
            self.session.current_target = new_nick
        self.status(f"{old_nick} is now known as {new_nick}")

    def on_names(self, channel: str, names: list[str]) -> None:
        members = [name.lstrip(NICK_MODE_PREFIXES) for name in names]
        members = [nick for nick in members if nick]
        for nick in members:
            self.session.completion.add_nick(nick)
        logger.debug("Names on %s: %d member(s)", channel, len(members))
        self.sink.info(f"Names on {channel}: {' '.join(members)}")
