import argparse
import logging
import sys
from typing import Any, TextIO

from prompt_toolkit.patch_stdout import patch_stdout
from prompt_toolkit.shortcuts import PromptSession

from ircline.backends import Connector, LoopbackConnection
from ircline.constants import COMMAND_PREFIX, CONFIG_FILE
from ircline.container import IrclineContainer
from ircline.dispatcher import CommandDispatcher
from ircline.errors import InputSourceError
from ircline.output import OutputMode, OutputSink
from ircline.services import PresenceService
from ircline.state import SessionState
from ircline.ui import IrcCompleter, build_prompt

logger = logging.getLogger(__name__)


class ChatApp:
    def __init__(
        self,
        subprocess: bool = False,
        config_path: str = CONFIG_FILE,
        connector: Connector | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ):
        self.subprocess = subprocess
        self.config_path = config_path
        self.connector = connector or LoopbackConnection
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.container: IrclineContainer | None = None
        self.prompt_session: Any = None
        self.sink: OutputSink | None = None
        self.session: SessionState | None = None
        self.dispatcher: CommandDispatcher | None = None
        # Backends report incoming traffic and presence changes here.
        self.presence: PresenceService | None = None

    def init_ui(self) -> None:
        if self.subprocess:
            # Running under another process: plain line reads from stdin.
            writer, mode = self.stdout, OutputMode.STDIO
        else:
            # Inside patch_stdout, so writes are redrawn above the prompt.
            writer, mode = sys.stdout, OutputMode.LINE_EDITOR

        self.container = IrclineContainer(
            writer=writer,
            output_mode=mode,
            connector=self.connector,
            config_path=self.config_path,
        )
        self.sink = self.container.sink()
        self.session = self.container.session()
        self.dispatcher = self.container.dispatcher()
        self.presence = self.container.presence_service()

        if not self.subprocess:
            completer = IrcCompleter(
                self.container.line_completer(), self.session.completion
            )
            self.prompt_session = PromptSession(
                completer=completer, complete_while_typing=False
            )

    def read_line(self) -> str | None:
        """Next input line, or None when the line editor asks us to stop."""
        if self.subprocess:
            try:
                line = self.stdin.readline()
            except (OSError, ValueError) as exc:
                raise InputSourceError("Couldn't get input.") from exc
            if line == "":
                raise InputSourceError("Couldn't get input.")
            return line

        try:
            return self.prompt_session.prompt(
                build_prompt(self.session.current_target)
            )
        except (EOFError, KeyboardInterrupt):
            return None

    def handle_line(self, line: str) -> None:
        text = line.rstrip("\r\n")
        if not text.strip():
            return
        if text.startswith(COMMAND_PREFIX):
            self.dispatcher.dispatch(text)
        else:
            self.dispatcher.send_text(text)

    def loop(self) -> None:
        while not self.session.quit_requested:
            line = self.read_line()
            if line is None:
                break
            self.handle_line(line)

    def run(self) -> None:
        if self.subprocess:
            self.init_ui()
            self.loop()
            return
        with patch_stdout(raw=True):
            self.init_ui()
            self.loop()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ircline", description="Line-oriented IRC client."
    )
    parser.add_argument(
        "--subprocess",
        action="store_true",
        help="Read commands from stdin without the line editor.",
    )
    parser.add_argument(
        "--config", default=CONFIG_FILE, help="Path to the JSON config."
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )
    app = ChatApp(subprocess=args.subprocess, config_path=args.config)
    try:
        app.run()
    except InputSourceError as exc:
        logger.critical("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
