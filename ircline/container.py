from __future__ import annotations

from dependency_injector import containers, providers  # type: ignore[import-not-found]

from ircline.backends.loopback import LoopbackConnection
from ircline.commands.registry import CommandRegistry
from ircline.completion import LineCompleter
from ircline.constants import CONFIG_FILE
from ircline.dispatcher import CommandDispatcher
from ircline.formatting import MessageFormatter
from ircline.output import OutputMode, OutputSink
from ircline.repositories import ConfigRepository
from ircline.services import PresenceService
from ircline.state import SessionState


class IrclineContainer(containers.DeclarativeContainer):
    writer = providers.Dependency()
    output_mode = providers.Object(OutputMode.STDIO)
    connector = providers.Dependency(default=LoopbackConnection)
    config_path = providers.Object(CONFIG_FILE)

    formatter = providers.Singleton(MessageFormatter)
    sink = providers.Singleton(
        OutputSink, writer=writer, mode=output_mode, formatter=formatter
    )

    config_repository = providers.Singleton(ConfigRepository, path=config_path)
    app_config = providers.Singleton(
        lambda repository: repository.load_config(), config_repository
    )

    registry = providers.Singleton(CommandRegistry)
    session = providers.Singleton(
        SessionState, status_events_visible=app_config.provided.status_events
    )
    line_completer = providers.Singleton(LineCompleter, registry=registry)

    dispatcher = providers.Singleton(
        CommandDispatcher,
        registry=registry,
        session=session,
        sink=sink,
        config=app_config,
        connector=connector,
    )
    presence_service = providers.Singleton(PresenceService, session=session, sink=sink)
