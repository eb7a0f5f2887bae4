from __future__ import annotations

import logging
from collections.abc import Callable

from ircline.backends.base import Connector, IrcConnection
from ircline.commands.registry import CommandRegistry
from ircline.commands.tokenizer import CommandLine, tokenize
from ircline.errors import NoConnectionError
from ircline.models import AppConfig, CommandKind
from ircline.output import OutputSink
from ircline.state import SessionState

logger = logging.getLogger(__name__)


class CommandDispatcher:
    def __init__(
        self,
        registry: CommandRegistry,
        session: SessionState,
        sink: OutputSink,
        config: AppConfig,
        connector: Connector,
    ):
        self.registry = registry
        self.session = session
        self.sink = sink
        self.config = config
        self.connector = connector
        self._handlers: dict[CommandKind, Callable[[CommandLine], None]] = {
            CommandKind.AWAY: self.command_away,
            CommandKind.HELP: self.command_help,
            CommandKind.TLSCONNECT: self.command_tlsconnect,
            CommandKind.CONNECT: self.command_connect,
            CommandKind.QUIT: self.command_quit,
            CommandKind.QUERY: self.command_query,
            CommandKind.JOIN: self.command_join,
            CommandKind.PART: self.command_part,
            CommandKind.WHOIS: self.command_whois,
            CommandKind.ME: self.command_me,
            CommandKind.MSG: self.command_msg,
            CommandKind.NICK: self.command_nick,
            CommandKind.NAMES: self.command_names,
            CommandKind.STATUS: self.command_status,
        }

    def dispatch(self, line: str) -> None:
        if self.session.quit_requested:
            logger.debug("Quit already requested; ignoring %r", line)
            return
        command = tokenize(line)
        if not command.fields:
            return

        if self.config.is_blocked(command.name):
            logger.info("Blocked command %s", command.name)
            self.sink.info("Command blocked by configuration.")
            return

        descriptor = self.registry.lookup(command.name)
        if descriptor is None or descriptor.is_sentinel:
            self.sink.warn(f"Unknown command: {command.name}")
            return

        logger.debug("Dispatching %s with %d field(s)", command.name, len(command))
        try:
            self._handlers[descriptor.kind](command)
        except NoConnectionError as exc:
            self.sink.error(str(exc))
        except OSError as exc:
            logger.warning("Command %s failed: %s", command.name, exc)
            self.sink.error(f"Command failed: {exc}")

    def send_text(self, text: str) -> None:
        """Send a freeform line to the current target."""
        target = self.session.current_target
        if not target:
            self.sink.warn("No target. Use /query or /join first.")
            return
        try:
            connection = self.require_connection()
            connection.privmsg(target, text)
        except NoConnectionError as exc:
            self.sink.error(str(exc))
            return
        except OSError as exc:
            logger.warning("Sending to %s failed: %s", target, exc)
            self.sink.error(f"Command failed: {exc}")
            return
        self.sink.show_message(connection.own_nick, target, text)

    def require_connection(self) -> IrcConnection:
        if self.session.connection is None:
            raise NoConnectionError()
        return self.session.connection

    def command_away(self, command: CommandLine) -> None:
        connection = self.require_connection()
        if len(command) >= 2:
            connection.set_away(command.rest(1))
            self.session.away = True
            self.sink.info("You are now marked as away.")
        else:
            connection.clear_away()
            self.session.away = False
            self.sink.info("You are no longer marked as away.")

    def command_help(self, _command: CommandLine) -> None:
        for entry in self.registry.describe_all():
            if not entry.name:
                continue
            self.sink.message(entry.render())

    def command_tlsconnect(self, command: CommandLine) -> None:
        self._connect(command, tls=True)

    def command_connect(self, command: CommandLine) -> None:
        self._connect(command, tls=False)

    def _connect(self, command: CommandLine, tls: bool) -> None:
        if len(command) < 3:
            self.sink.warn(f"Use {command.name} server:port nick [server-pass]")
            return
        if self.session.connected:
            self.sink.warn("Already connected to a server.")
            return
        server, nick = command.fields[1], command.fields[2]
        password = command.field(3) or None
        self.session.connection = self.connector(
            server=server, nick=nick, password=password, tls=tls
        )
        self.sink.info(f"Connecting to {server} as {nick}.")

    def command_quit(self, command: CommandLine) -> None:
        self.sink.info("Quitting.")
        connection = self.session.connection
        if connection is not None:
            connection.quit(command.rest(1) or None)
            self.session.connection = None
        self.session.request_quit()

    def command_query(self, command: CommandLine) -> None:
        self.require_connection()
        if len(command) != 2:
            self.sink.warn("Use /query <nick/channel>")
            return
        self.session.current_target = command.fields[1]

    def command_join(self, command: CommandLine) -> None:
        connection = self.require_connection()
        if len(command) != 2:
            self.sink.warn("Use /join #channel")
            return
        channel = command.fields[1]
        connection.join(channel)
        self.session.current_target = channel
        self.session.completion.add_channel(channel)

    def command_part(self, command: CommandLine) -> None:
        connection = self.require_connection()
        if len(command) != 2:
            self.sink.warn("Use /part #channel")
            return
        channel = command.fields[1]
        connection.part(channel)
        self.session.current_target = ""
        self.session.completion.remove_channel(channel)

    def command_whois(self, command: CommandLine) -> None:
        connection = self.require_connection()
        if len(command) != 2:
            self.sink.warn("Use /whois <nick>")
            return
        connection.whois(command.fields[1])

    def command_me(self, command: CommandLine) -> None:
        connection = self.require_connection()
        if len(command) < 2:
            self.sink.warn("Use /me action text")
            return
        target = self.session.current_target
        if not target:
            self.sink.warn("No target. Use /query or /join first.")
            return
        text = command.rest(1)
        connection.action(target, text)
        self.sink.show_message(connection.own_nick, target, text, action=True)

    def command_msg(self, command: CommandLine) -> None:
        connection = self.require_connection()
        if len(command) < 3:
            self.sink.warn("Use /msg target message text")
            return
        target, text = command.fields[1], command.rest(2)
        connection.privmsg(target, text)
        self.sink.show_message(connection.own_nick, target, text)

    def command_nick(self, command: CommandLine) -> None:
        connection = self.require_connection()
        if len(command) != 2:
            self.sink.warn("Use /nick newnick")
            return
        connection.set_nick(command.fields[1])

    def command_names(self, _command: CommandLine) -> None:
        connection = self.require_connection()
        connection.raw(f"NAMES {self.session.current_target}".rstrip())

    def command_status(self, _command: CommandLine) -> None:
        if self.session.toggle_status_events():
            self.sink.message("Showing quits, joins, et cetera.")
        else:
            self.sink.message("Not showing quits, joins, et cetera.")
