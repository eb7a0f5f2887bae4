from typing import Protocol


class IrcConnection(Protocol):
    @property
    def own_nick(self) -> str:
        pass

    def set_away(self, text: str) -> None:
        pass

    def clear_away(self) -> None:
        pass

    def join(self, channel: str) -> None:
        pass

    def part(self, channel: str) -> None:
        pass

    def action(self, target: str, text: str) -> None:
        pass

    def privmsg(self, target: str, text: str) -> None:
        pass

    def set_nick(self, nick: str) -> None:
        pass

    def raw(self, line: str) -> None:
        pass

    def whois(self, nick: str) -> None:
        pass

    def quit(self, message: str | None = None) -> None:
        pass


class Connector(Protocol):
    def __call__(
        self, *, server: str, nick: str, password: str | None, tls: bool
    ) -> IrcConnection:
        pass
