from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class LoopbackConnection:
    """Stand-in backend that records operations instead of talking to a server."""

    def __init__(
        self, *, server: str, nick: str, password: str | None = None, tls: bool = False
    ):
        self.server = server
        self.password = password
        self.tls = tls
        self.closed = False
        self.sent: list[tuple[str, tuple[Any, ...]]] = []
        self._nick = nick
        logger.debug("Loopback connection to %s as %s (tls=%s)", server, nick, tls)

    @property
    def own_nick(self) -> str:
        return self._nick

    def _record(self, operation: str, *args: Any) -> None:
        logger.debug("loopback %s %r", operation, args)
        self.sent.append((operation, args))

    def set_away(self, text: str) -> None:
        self._record("away", text)

    def clear_away(self) -> None:
        self._record("back")

    def join(self, channel: str) -> None:
        self._record("join", channel)

    def part(self, channel: str) -> None:
        self._record("part", channel)

    def action(self, target: str, text: str) -> None:
        self._record("action", target, text)

    def privmsg(self, target: str, text: str) -> None:
        self._record("privmsg", target, text)

    def set_nick(self, nick: str) -> None:
        self._record("nick", nick)
        self._nick = nick

    def raw(self, line: str) -> None:
        self._record("raw", line)

    def whois(self, nick: str) -> None:
        self._record("whois", nick)

    def quit(self, message: str | None = None) -> None:
        self._record("quit", message)
        self.closed = True
